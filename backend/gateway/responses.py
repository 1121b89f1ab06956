"""
Central responder.

The one place where handler results and escaped exceptions become HTTP
responses:

- Success              -> its body and status code
- Failure(AppError)    -> {"error": public_message} with the error's status
- anything else        -> 500 {"error": "Something went wrong"}
"""

import logging
from typing import Tuple

from flask import Flask, Response, current_app, jsonify
from werkzeug.exceptions import HTTPException, NotFound

from backend.common.errors import AppError
from backend.common.results import Failure, Result, Success
from backend.database.db_connection import Database

GENERAL_ERROR_MESSAGE = "Something went wrong"
NOT_FOUND_MESSAGE = "Endpoint not found"


def get_database() -> Database:
    """Storage handle attached to the running app by create_app()."""
    return current_app.extensions["database"]


def error_response(error: BaseException) -> Tuple[Response, int]:
    """
    Translate any error into a JSON response.

    Args:
        error (BaseException): An AppError or an unexpected fault.

    Returns:
        tuple: (JSON response, status code)
    """
    if isinstance(error, AppError):
        logging.error(f"[Error] {error.status_code} {error.log_message}")
        return jsonify(error.to_dict()), error.status_code

    logging.error(
        f"[Error] Unexpected {type(error).__name__}: {error}",
        exc_info=(type(error), error, error.__traceback__),
    )
    return jsonify({"error": GENERAL_ERROR_MESSAGE}), 500


def respond(result: Result) -> Tuple[Response, int]:
    if isinstance(result, Success):
        return jsonify(result.body), result.status_code
    if isinstance(result, Failure):
        return error_response(result.error)
    raise TypeError(f"Handlers must return Success or Failure, got {type(result).__name__}")


# --- FLASK ERROR HANDLERS ---
def _handle_not_found(_: NotFound) -> Tuple[Response, int]:
    return jsonify({"error": NOT_FOUND_MESSAGE}), 404


def _handle_http_exception(error: HTTPException) -> Tuple[Response, int]:
    return jsonify({"error": error.description}), error.code or 500


def register_error_handlers(app: Flask) -> None:
    """
    Route exceptions that escape a view through the same responder.

    HTTP errors raised by Flask itself (unknown path, wrong method) keep their
    status code.
    """
    app.register_error_handler(NotFound, _handle_not_found)
    app.register_error_handler(HTTPException, _handle_http_exception)
    app.register_error_handler(Exception, error_response)
