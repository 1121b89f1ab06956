"""
User types for the authentication service.

Request bodies are parsed into the credential structs at the HTTP boundary.
Parsing is lenient: a missing body or a non-string field becomes an empty
string, and the handlers reject it downstream.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional


def _text(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    return value if isinstance(value, str) else ""


def _as_mapping(data: Optional[Any]) -> Mapping[str, Any]:
    return data if isinstance(data, Mapping) else {}


def normalize_email(email: str) -> str:
    return (email or "").strip().lower()


@dataclass(frozen=True)
class UserCredentials:
    email: str
    password: str

    @classmethod
    def from_json(cls, data: Optional[Any]) -> "UserCredentials":
        body = _as_mapping(data)
        return cls(
            email=normalize_email(_text(body, "email")),
            password=_text(body, "password"),
        )


@dataclass(frozen=True)
class UserRegisterCredentials:
    name: str
    email: str
    password: str

    @classmethod
    def from_json(cls, data: Optional[Any]) -> "UserRegisterCredentials":
        body = _as_mapping(data)
        return cls(
            name=_text(body, "name").strip(),
            email=normalize_email(_text(body, "email")),
            password=_text(body, "password"),
        )


@dataclass(frozen=True)
class User:
    """A row of the users table."""

    id: int
    name: str
    email: str
    password_hash: str

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "User":
        return cls(
            id=row["id"],
            name=row["name"],
            email=row["email"],
            password_hash=row["password_hash"],
        )
