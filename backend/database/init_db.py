"""
Create the tables the API reads and writes.

Run once against a fresh database:

    python -m backend.database.init_db

Existing tables are left untouched.
"""

import logging
import sys

from backend.common.config import Settings
from backend.database.db_connection import Database

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS users (
    id            SERIAL PRIMARY KEY,
    name          TEXT NOT NULL,
    email         TEXT NOT NULL UNIQUE,
    password_hash TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS events (
    id          SERIAL PRIMARY KEY,
    name        TEXT NOT NULL,
    date        TEXT NOT NULL,
    description TEXT NOT NULL DEFAULT '',
    distance    DOUBLE PRECISION NOT NULL,
    image       TEXT NOT NULL DEFAULT '',
    type        TEXT NOT NULL CHECK (type IN ('Gravel', 'Road'))
);
"""


def init_db(database: Database) -> None:
    """
    Apply SCHEMA_SQL inside a single transaction.

    Args:
        database (Database): An open storage handle.
    """
    with database.connection() as conn:
        with conn.cursor() as cur:
            cur.execute(SCHEMA_SQL)
    logging.info("[Database] Schema is up to date")


def main() -> int:
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(asctime)s - %(message)s")

    settings = Settings.from_env()
    database = Database(settings.database_url, min_connections=1, max_connections=1)
    database.open()
    try:
        init_db(database)
    finally:
        database.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
