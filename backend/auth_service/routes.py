"""
User account routes.

Provides routes for:
- User registration
- User login

Handlers live in `auth_service.controllers`; this module only parses the
request and hands the result to the gateway responder.
"""

import logging
from typing import Tuple

from flask import Blueprint, Response, current_app, request

from backend.auth_service import controllers
from backend.auth_service.models import UserCredentials, UserRegisterCredentials
from backend.gateway.responses import get_database, respond

users_bp = Blueprint("users", __name__)


# --- REQUEST LOGGING ---
@users_bp.before_request
def before_request() -> None:
    logging.info(f"[Users] Incoming {request.method} {request.path}")


@users_bp.after_request
def after_request(response: Response) -> Response:
    logging.info(f"[Users] Response {response.status}")
    return response


# --- REGISTER ---
@users_bp.route("/register", methods=["POST"])
def register() -> Tuple[Response, int]:
    """
    Register a new user.

    Expects a JSON body with:
    - name (str)
    - email (str): Unique email address.
    - password (str): Minimum 8 characters.

    Returns:
        201: {"message": "The user has been created"}
        409: The user could not be created, for any reason.
    """
    credentials = UserRegisterCredentials.from_json(request.get_json(silent=True))
    return respond(controllers.register_user(get_database(), credentials))


# --- LOGIN ---
@users_bp.route("/login", methods=["POST"])
def login() -> Tuple[Response, int]:
    """
    Authenticate a user and return a JWT.

    Expects a JSON body with:
    - email (str)
    - password (str)

    Returns:
        200: {"token": "<jwt>"}
        401: Wrong credentials (unknown email or wrong password).
        500: Database error.
    """
    credentials = UserCredentials.from_json(request.get_json(silent=True))
    result = controllers.login_user(
        get_database(),
        credentials,
        jwt_secret=current_app.config["JWT_SECRET"],
        token_expiration_minutes=current_app.config["TOKEN_EXPIRATION_MINUTES"],
    )
    return respond(result)
