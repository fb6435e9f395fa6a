"""Schema cache API response schemas."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel


class CachedSchemaItem(BaseModel):
    """Cached schema for one chart version."""

    chart_name: str
    chart_version: str
    repo_name: str
    namespace: str | None = None
    schema_content: dict[str, Any]
    created_at: datetime | None = None


class CachedSchemasResponse(BaseModel):
    """Cached schemas, most recent first."""

    items: list[CachedSchemaItem]
    total: int


class CacheClearedResponse(BaseModel):
    """Result of clearing the whole cache."""

    removed: int
    message: str


class CacheEntryDeletedResponse(BaseModel):
    """Result of deleting one cache entry."""

    chart_name: str
    chart_version: str
    repo_name: str
    removed: bool
    message: str
