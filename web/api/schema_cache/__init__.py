"""Schema cache API."""

from web.api.schema_cache.views import (
    clear_schema_cache,
    delete_schema_cache_entry,
    list_cached_schemas,
    resolve_schema,
)

__all__ = [
    "resolve_schema",
    "list_cached_schemas",
    "clear_schema_cache",
    "delete_schema_cache_entry",
]
