"""
User handlers: registration and login.

Each handler returns a Result and leaves response formatting to the gateway.
"""

import logging

from backend.auth_service import repository
from backend.auth_service.models import UserCredentials, UserRegisterCredentials
from backend.auth_service.utils import create_token, hash_password, verify_password
from backend.common.errors import AppError
from backend.common.results import Failure, Result, Success
from backend.database.db_connection import Database

USER_CREATED_MESSAGE = "The user has been created"


def user_not_created_error() -> AppError:
    return AppError(
        "The user couldn't be created.",
        409,
        "There was a problem creating the user.",
    )


def wrong_credentials_error() -> AppError:
    # Same error for unknown email and bad password.
    return AppError("Wrong credentials", 401, "Wrong credentials")


# --- REGISTER ---
def register_user(database: Database, credentials: UserRegisterCredentials) -> Result:
    """
    Hash the password and store a new user.

    Any rejection from the creation call is reported as the same 409 error,
    whatever the cause (duplicate email, schema violation, storage fault).

    Returns:
        Success(201) with the confirmation message, or a Failure.
    """
    try:
        password_hash = hash_password(credentials.password)
    except Exception as error:
        return Failure(error)

    try:
        user = repository.create_user(database, credentials, password_hash)
    except Exception as error:
        logging.warning(f"[Users] Registration rejected: {type(error).__name__}")
        return Failure(user_not_created_error())

    logging.info(f"[Users] Created user id={user.id}")
    return Success(201, {"message": USER_CREATED_MESSAGE})


# --- LOGIN ---
def login_user(
    database: Database,
    credentials: UserCredentials,
    *,
    jwt_secret: str,
    token_expiration_minutes: int = 1440,
) -> Result:
    """
    Authenticate a user and issue a token.

    Storage faults during the lookup are forwarded as-is, not wrapped.

    Returns:
        Success(200) with {"token": ...}, or a Failure.
    """
    try:
        user = repository.find_user_by_email(database, credentials.email)
    except Exception as error:
        return Failure(error)

    if user is None:
        return Failure(wrong_credentials_error())

    if not verify_password(credentials.password, user.password_hash):
        return Failure(wrong_credentials_error())

    token = create_token(user.id, jwt_secret, token_expiration_minutes)
    return Success(200, {"token": token})
