"""Schema cache API views - thin layer over services."""

from rudder.container import container
from web.api.errors import validate_chart_key

from .schemas import (
    CacheClearedResponse,
    CachedSchemaItem,
    CachedSchemasResponse,
    CacheEntryDeletedResponse,
)


async def resolve_schema(
    chart_name: str,
    chart_version: str,
    repo_name: str,
    namespace: str | None = None,
    release_name: str | None = None,
) -> str:
    """Get the schema for a chart version as JSON text."""
    validate_chart_key(chart_name, chart_version, repo_name)
    return await container.schema_resolver.resolve_json(
        chart_name, chart_version, repo_name, namespace=namespace, release=release_name
    )


def list_cached_schemas() -> CachedSchemasResponse:
    """Get all cached schemas."""
    entries = container.schema_cache.list_all()
    items = [CachedSchemaItem(**e.to_dict()) for e in entries]
    return CachedSchemasResponse(items=items, total=len(items))


def clear_schema_cache() -> CacheClearedResponse:
    """Remove every cached schema."""
    removed = container.schema_cache.clear_all()
    return CacheClearedResponse(removed=removed, message=f"Cleared {removed} schema cache entries")


def delete_schema_cache_entry(chart_name: str, chart_version: str, repo_name: str) -> CacheEntryDeletedResponse:
    """Remove one cached schema."""
    validate_chart_key(chart_name, chart_version, repo_name)
    removed = container.schema_cache.delete_one(chart_name, chart_version, repo_name)
    return CacheEntryDeletedResponse(
        chart_name=chart_name,
        chart_version=chart_version,
        repo_name=repo_name,
        removed=removed,
        message=f"Cache entry removed for {chart_name}/{chart_version} from {repo_name}",
    )
