"""
Handler results.

Controllers never write HTTP responses. They return either a Success with the
status code and JSON body to send, or a Failure holding the error to hand to
the central responder (see backend.gateway.responses).
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Union


@dataclass(frozen=True)
class Success:
    status_code: int
    body: Dict[str, Any] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    # AppError for expected failures, the original exception otherwise.
    error: BaseException

    @property
    def ok(self) -> bool:
        return False


Result = Union[Success, Failure]
