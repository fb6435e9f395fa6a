"""DuckDB connection management."""

import threading
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

import duckdb
from loguru import logger

from rudder.errors import StoreError
from rudder.models import ALL_DDL


def init_tables(conn: duckdb.DuckDBPyConnection) -> None:
    """Initialize all tables from DDL statements (idempotent - uses IF NOT EXISTS)."""
    for ddl in ALL_DDL:
        conn.execute(ddl)
    logger.debug("DB tables initialized")


class StoreHandle:
    """Single DuckDB connection guarded by one lock.

    Every statement against the store goes through :meth:`session`, so at most
    one store operation runs at a time for all threads sharing the handle.
    """

    def __init__(self, path: str | Path):
        self.path = str(path)
        self._lock = threading.Lock()
        self._conn: duckdb.DuckDBPyConnection | None = None
        try:
            if self.path != ":memory:":
                Path(self.path).parent.mkdir(parents=True, exist_ok=True)
            self._conn = duckdb.connect(self.path)
            init_tables(self._conn)
        except (OSError, duckdb.Error) as e:
            if self._conn is not None:
                self._conn.close()
                self._conn = None
            raise StoreError(f"Failed to open schema store {self.path}: {e}", path=self.path) from e
        logger.debug("DB connected: {}", self.path)

    @contextmanager
    def session(self) -> Iterator[duckdb.DuckDBPyConnection]:
        """Hold the store lock for the duration of the block."""
        with self._lock:
            if self._conn is None:
                raise duckdb.ConnectionException(f"Store {self.path} is closed")
            yield self._conn

    def close(self) -> None:
        """Close the connection."""
        with self._lock:
            if self._conn is not None:
                self._conn.close()
                self._conn = None
                logger.debug("DB connection closed")

    def __enter__(self) -> "StoreHandle":
        return self

    def __exit__(self, *_) -> None:
        self.close()
