"""Base repository class."""

from typing import Any

from loguru import logger

from rudder.repositories.db import StoreHandle


class BaseRepository:
    """Base repository over a shared store handle."""

    def __init__(self, db: StoreHandle):
        self._db = db
        logger.debug("{} initialized", self.__class__.__name__)

    def execute(self, query: str, params: list | None = None) -> Any:
        """Execute SQL statement and return the affected row count."""
        with self._db.session() as conn:
            cursor = conn.execute(query, params) if params else conn.execute(query)
            row = cursor.fetchone() if cursor.description else None
        return row[0] if row else 0

    def fetchall(self, query: str, params: list | None = None) -> list:
        """Execute and fetch all rows."""
        with self._db.session() as conn:
            return (conn.execute(query, params) if params else conn.execute(query)).fetchall()

    def fetchone(self, query: str, params: list | None = None) -> Any:
        """Execute and fetch one row."""
        with self._db.session() as conn:
            return (conn.execute(query, params) if params else conn.execute(query)).fetchone()
