"""
Event handlers.
"""

import logging

from backend.common.errors import AppError
from backend.common.results import Failure, Result, Success
from backend.database.db_connection import Database
from backend.events_service import repository


def events_not_retrieved_error() -> AppError:
    return AppError("Bad request", 400, "Couldn't retrieve bike events")


def get_events(database: Database) -> Result:
    """
    Fetch all bike events.

    The request carries no parameters. A repository that raises, or returns
    something other than a list, yields a 400 and no partial results.

    Returns:
        Success(200) with {"events": [...]}, or a Failure.
    """
    try:
        events = repository.find_all_events(database)
    except Exception as error:
        logging.warning(f"[Events] Query failed: {error!r}")
        return Failure(events_not_retrieved_error())

    if not isinstance(events, list):
        return Failure(events_not_retrieved_error())

    return Success(200, {"events": [event.to_dict() for event in events]})
