"""
Credential helpers.
Provides password hashing, password verification, and token creation.
"""

from datetime import datetime, timedelta, timezone
from typing import Union

import jwt
from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError

JWT_ALGORITHM = "HS256"

# Fixed work factor so every stored hash costs the same to check.
PASSWORD_TIME_COST = 3
PASSWORD_MEMORY_COST = 65536  # KiB
PASSWORD_PARALLELISM = 4

ph = PasswordHasher(
    time_cost=PASSWORD_TIME_COST,
    memory_cost=PASSWORD_MEMORY_COST,
    parallelism=PASSWORD_PARALLELISM,
)


# --- PASSWORDS ---
def hash_password(plain_password: str) -> str:
    """
    Hash a plaintext password with Argon2.

    Args:
        plain_password (str): The password as typed by the user.

    Returns:
        str: Encoded Argon2 hash, salt and parameters included.

    Raises:
        argon2.exceptions.HashingError: If the primitive fails.
    """
    return ph.hash(plain_password)


def verify_password(plain_password: str, password_hash: str) -> bool:
    """
    Check a plaintext password against a stored hash.

    A mismatch, or a stored value that is not an Argon2 hash, returns False.

    Args:
        plain_password (str): The password to check.
        password_hash (str): The hash read from the users table.

    Returns:
        bool: True if the password matches.
    """
    if not plain_password or not password_hash:
        return False
    try:
        return ph.verify(password_hash, plain_password)
    except (VerificationError, InvalidHashError):
        return False


# --- TOKENS ---
def create_token(
    user_id: Union[int, str],
    secret: str,
    expiration_minutes: int = 1440,
) -> str:
    """
    Generates a new JWT for a given user.

    Args:
        user_id (int | str): The unique ID of the user.
        secret (str): Signing key.
        expiration_minutes (int): Lifetime of the token.

    Returns:
        str: Encoded JWT string.
    """
    now = datetime.now(timezone.utc)

    payload = {
        "sub": str(user_id),
        "iat": now,
        "exp": now + timedelta(minutes=expiration_minutes),
    }

    return jwt.encode(payload, secret, algorithm=JWT_ALGORITHM)
