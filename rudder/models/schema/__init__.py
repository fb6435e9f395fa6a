"""Schema domain models - cache table and entities."""

from rudder.models.schema.cache import SCHEMA_CACHE_DDL
from rudder.models.schema.entities import CachedSchemaEntry, empty_schema, is_empty_schema

__all__ = [
    "SCHEMA_CACHE_DDL",
    "CachedSchemaEntry",
    "empty_schema",
    "is_empty_schema",
]
