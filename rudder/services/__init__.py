"""Services package - service class exports."""

from rudder.services.schema import (
    ChartFetcher,
    SchemaResolver,
    SourceDiscovery,
    SourceSearcher,
    ValuesSchemaSynthesizer,
)

__all__ = [
    "ChartFetcher",
    "SchemaResolver",
    "SourceDiscovery",
    "SourceSearcher",
    "ValuesSchemaSynthesizer",
]
