"""Schema cache repository - persisted chart schemas."""

import json
from datetime import UTC, datetime
from typing import Any

import duckdb
from loguru import logger

from rudder.errors import StoreError
from rudder.models import CachedSchemaEntry
from rudder.repositories.base import BaseRepository

_COLUMNS = "chart_name, chart_version, repo_name, namespace, schema_content, created_at"


def _utcnow() -> datetime:
    return datetime.now(UTC).replace(tzinfo=None)


class SchemaCacheRepository(BaseRepository):
    """Repository for cached chart schemas keyed by (chart, version, repo)."""

    def put(self, entry: CachedSchemaEntry) -> None:
        """Insert or replace the schema stored for the entry's key."""
        if not isinstance(entry.schema_content, dict):
            raise StoreError(
                f"Schema must be a JSON object, got {type(entry.schema_content).__name__}",
                chart=entry.chart_name,
                version=entry.chart_version,
                repo=entry.repo_name,
            )
        try:
            document = json.dumps(entry.schema_content)
        except (TypeError, ValueError) as e:
            raise StoreError(
                f"Failed to serialize schema: {e}",
                chart=entry.chart_name,
                version=entry.chart_version,
                repo=entry.repo_name,
            ) from e

        entry.created_at = _utcnow()
        try:
            self.execute(
                f"""
                INSERT OR REPLACE INTO chart_schemas ({_COLUMNS})
                VALUES (?, ?, ?, ?, ?, ?)
                """,
                [
                    entry.chart_name,
                    entry.chart_version,
                    entry.repo_name,
                    entry.namespace,
                    document,
                    entry.created_at,
                ],
            )
        except duckdb.Error as e:
            raise StoreError(
                f"Failed to store schema: {e}",
                chart=entry.chart_name,
                version=entry.chart_version,
                repo=entry.repo_name,
            ) from e
        logger.debug("Schema cached: {}/{} from {}", entry.chart_name, entry.chart_version, entry.repo_name)

    def get(self, chart_name: str, chart_version: str, repo_name: str) -> CachedSchemaEntry | None:
        """Load a cached schema, or None when the key is absent."""
        try:
            row = self.fetchone(
                f"""
                SELECT {_COLUMNS} FROM chart_schemas
                WHERE chart_name = ? AND chart_version = ? AND repo_name = ?
                """,
                [chart_name, chart_version, repo_name],
            )
        except duckdb.Error as e:
            raise StoreError(
                f"Failed to query schema: {e}", chart=chart_name, version=chart_version, repo=repo_name
            ) from e

        if row is None:
            return None
        logger.debug("Cache hit: {}/{} from {}", chart_name, chart_version, repo_name)
        return self._to_entry(row)

    def list_all(self) -> list[CachedSchemaEntry]:
        """All cached schemas, most recently written first."""
        try:
            rows = self.fetchall(f"SELECT {_COLUMNS} FROM chart_schemas ORDER BY created_at DESC")
        except duckdb.Error as e:
            raise StoreError(f"Failed to list schemas: {e}") from e
        return [self._to_entry(r) for r in rows]

    def delete_one(self, chart_name: str, chart_version: str, repo_name: str) -> bool:
        """Delete one cached schema. Returns whether a row was removed."""
        try:
            deleted = self.execute(
                "DELETE FROM chart_schemas WHERE chart_name = ? AND chart_version = ? AND repo_name = ?",
                [chart_name, chart_version, repo_name],
            )
        except duckdb.Error as e:
            raise StoreError(
                f"Failed to delete schema: {e}", chart=chart_name, version=chart_version, repo=repo_name
            ) from e
        if deleted:
            logger.info("Cache entry removed for {}/{} from {}", chart_name, chart_version, repo_name)
        return deleted > 0

    def clear_all(self) -> int:
        """Delete every cached schema and return how many were removed."""
        try:
            deleted = self.execute("DELETE FROM chart_schemas")
        except duckdb.Error as e:
            raise StoreError(f"Failed to clear schemas: {e}") from e
        logger.info("Cleared {} schema cache entries", deleted)
        return deleted

    @staticmethod
    def _to_entry(row: tuple[Any, ...]) -> CachedSchemaEntry:
        chart_name, chart_version, repo_name, namespace, document, created_at = row
        try:
            schema = json.loads(document)
        except json.JSONDecodeError as e:
            raise StoreError(
                f"Corrupt cached schema: {e}", chart=chart_name, version=chart_version, repo=repo_name
            ) from e
        if not isinstance(schema, dict):
            raise StoreError(
                "Corrupt cached schema: not a JSON object", chart=chart_name, version=chart_version, repo=repo_name
            )

        return CachedSchemaEntry(
            chart_name=chart_name,
            chart_version=chart_version,
            repo_name=repo_name,
            schema_content=schema,
            namespace=namespace,
            created_at=created_at,
        )
