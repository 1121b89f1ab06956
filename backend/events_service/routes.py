"""
Events service routes: list bike events.
"""

import logging
from typing import Tuple

from flask import Blueprint, Response, request

from backend.events_service import controllers
from backend.gateway.responses import get_database, respond

events_bp = Blueprint("events", __name__)


# --- REQUEST LOGGING ---
@events_bp.before_request
def before_request() -> None:
    logging.info(f"[Events] Incoming {request.method} {request.path}")


@events_bp.after_request
def after_request(response: Response) -> Response:
    logging.info(f"[Events] Response {response.status}")
    return response


@events_bp.route("/", methods=["GET"], strict_slashes=False)
def list_events() -> Tuple[Response, int]:
    """
    Return all bike events.

    Returns:
        200: {"events": [Event, ...]}
        400: The events could not be retrieved.
    """
    return respond(controllers.get_events(get_database()))
