"""
User persistence helpers.

Every accessor takes the storage handle explicitly. Registration documents are
checked against the user schema before they reach the database; the table's
UNIQUE constraint on email does the rest.
"""

import re
from typing import Optional

from backend.auth_service.models import User, UserRegisterCredentials
from backend.database.db_connection import Database

PASSWORD_MIN_LENGTH = 8
EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class UserValidationError(ValueError):
    """Raised when a registration document does not satisfy the user schema."""


def validate_new_user(credentials: UserRegisterCredentials) -> None:
    """
    Check a registration document against the user schema.

    Raises:
        UserValidationError: On the first field that fails.
    """
    if not credentials.name:
        raise UserValidationError("name is required")
    if not EMAIL_PATTERN.match(credentials.email):
        raise UserValidationError("email is not valid")
    if len(credentials.password) < PASSWORD_MIN_LENGTH:
        raise UserValidationError(
            f"password must be at least {PASSWORD_MIN_LENGTH} characters"
        )


def find_user_by_email(database: Database, email: str) -> Optional[User]:
    sql = "SELECT id, name, email, password_hash FROM users WHERE email = %s;"

    with database.connection() as conn:
        with conn.cursor() as cur:
            cur.execute(sql, (email,))
            row = cur.fetchone()

    return User.from_row(row) if row else None


def create_user(
    database: Database,
    credentials: UserRegisterCredentials,
    password_hash: str,
) -> User:
    """
    Insert a new user, storing the hash in place of the plaintext password.

    Args:
        database (Database): Storage handle.
        credentials (UserRegisterCredentials): The registration document.
        password_hash (str): Hash of credentials.password.

    Returns:
        User: The stored row, with its generated id.

    Raises:
        UserValidationError: If the document fails the user schema.
        psycopg2.errors.UniqueViolation: If the email is already registered.
        psycopg2.Error: On any other storage failure.
    """
    validate_new_user(credentials)

    sql = """
        INSERT INTO users (name, email, password_hash)
        VALUES (%s, %s, %s)
        RETURNING id, name, email, password_hash;
    """

    with database.connection() as conn:
        with conn.cursor() as cur:
            cur.execute(sql, (credentials.name, credentials.email, password_hash))
            row = cur.fetchone()

    if row is None:
        raise RuntimeError("Failed to create user.")
    return User.from_row(row)
