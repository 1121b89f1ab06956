"""
PostgreSQL storage handle.

The application factory opens one Database at startup and closes it at
shutdown. Repository accessors receive it explicitly and borrow a connection
per statement:

    with database.connection() as conn:
        with conn.cursor() as cur:
            cur.execute(...)
"""

import logging
import threading
from contextlib import contextmanager
from typing import Iterator, Optional

import psycopg2
from psycopg2.extensions import connection as Connection
from psycopg2.extras import DictCursor
from psycopg2.pool import ThreadedConnectionPool


class Database:
    """
    Thread-safe pool of psycopg2 connections with dictionary-based row access.

    Args:
        dsn (str): PostgreSQL connection URL.
        min_connections (int): Connections kept open by the pool.
        max_connections (int): Upper bound on concurrent connections.
    """

    def __init__(self, dsn: str, min_connections: int = 1, max_connections: int = 5):
        self.dsn = dsn
        self.min_connections = min_connections
        self.max_connections = max_connections
        self._pool: Optional[ThreadedConnectionPool] = None
        # getconn() raises instead of waiting when the pool is exhausted.
        self._slots = threading.BoundedSemaphore(max_connections)

    @property
    def is_open(self) -> bool:
        return self._pool is not None

    def open(self) -> None:
        """
        Create the connection pool. Calling it twice is a no-op.

        Raises:
            psycopg2.Error: If the initial connections cannot be made.
        """
        if self._pool is not None:
            return
        self._pool = ThreadedConnectionPool(
            self.min_connections,
            self.max_connections,
            self.dsn,
            cursor_factory=DictCursor,
        )
        logging.info(
            f"[Database] Pool opened ({self.min_connections}-{self.max_connections} connections)"
        )

    def close(self) -> None:
        if self._pool is None:
            return
        self._pool.closeall()
        self._pool = None
        logging.info("[Database] Pool closed")

    @contextmanager
    def connection(self) -> Iterator[Connection]:
        """
        Borrow a pooled connection, waiting for a free one when all are in use.

        Commits when the block exits normally, rolls back and re-raises the
        original error when it does not. The connection always goes back to
        the pool; a closed one is discarded instead of reused.

        Raises:
            RuntimeError: If the pool has not been opened.
        """
        if self._pool is None:
            raise RuntimeError("Database is not open. Call open() on startup.")

        pool = self._pool
        self._slots.acquire()
        try:
            conn = pool.getconn()
        except BaseException:
            self._slots.release()
            raise

        try:
            yield conn
            conn.commit()
        except Exception:
            try:
                conn.rollback()
            except psycopg2.Error as rollback_error:
                logging.warning(f"[Database] Rollback failed: {rollback_error!r}")
            raise
        finally:
            pool.putconn(conn, close=bool(conn.closed))
            self._slots.release()
