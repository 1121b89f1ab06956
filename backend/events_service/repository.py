"""
Event persistence helpers. Events are read-only for this service.
"""

from typing import List

from backend.database.db_connection import Database
from backend.events_service.models import Event


def find_all_events(database: Database) -> List[Event]:
    """
    Return every event in insertion order.

    Raises:
        psycopg2.Error: On any storage failure.
        ValueError: If a stored row has an unknown event type.
    """
    sql = """
        SELECT name, date, description, distance, image, type
        FROM events
        ORDER BY id ASC;
    """

    with database.connection() as conn:
        with conn.cursor() as cur:
            cur.execute(sql)
            rows = cur.fetchall()

    return [Event.from_row(row) for row in rows]
