"""Repositories package - data access layer for the schema cache."""

from rudder.repositories.base import BaseRepository
from rudder.repositories.db import StoreHandle, init_tables
from rudder.repositories.schema_cache import SchemaCacheRepository

__all__ = [
    # DB
    "StoreHandle",
    "init_tables",
    # Base
    "BaseRepository",
    # Schema
    "SchemaCacheRepository",
]
