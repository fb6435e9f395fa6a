"""Models package - DDL and entities."""

from rudder.models.common import BaseEntity
from rudder.models.schema import (
    SCHEMA_CACHE_DDL,
    CachedSchemaEntry,
    empty_schema,
    is_empty_schema,
)

ALL_DDL = [
    SCHEMA_CACHE_DDL,
]

__all__ = [
    # Common
    "BaseEntity",
    # Schema
    "SCHEMA_CACHE_DDL",
    "CachedSchemaEntry",
    "empty_schema",
    "is_empty_schema",
    # All DDL
    "ALL_DDL",
]
