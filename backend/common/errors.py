"""
Application error model.

AppError marks an expected, client-recoverable failure. It carries the message
shown to the client, the HTTP status code, and a longer message for the logs.
Anything that is not an AppError is treated as an unexpected fault.
"""

from typing import Any, Dict


class AppError(Exception):
    """
    Recoverable application error.

    Attributes:
        public_message (str): Short message returned in the response body.
        status_code (int): HTTP status code for the response.
        log_message (str): Operator-facing message written to the logs.
    """

    def __init__(self, public_message: str, status_code: int, log_message: str):
        super().__init__(log_message)
        self.public_message = public_message
        self.status_code = status_code
        self.log_message = log_message

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AppError):
            return NotImplemented
        return (
            self.public_message == other.public_message
            and self.status_code == other.status_code
            and self.log_message == other.log_message
        )

    def __hash__(self) -> int:
        return hash((self.public_message, self.status_code, self.log_message))

    def __repr__(self) -> str:
        return (
            f"AppError({self.public_message!r}, {self.status_code!r}, "
            f"{self.log_message!r})"
        )

    def to_dict(self) -> Dict[str, Any]:
        """Public response body for this error."""
        return {"error": self.public_message}
