"""Schema resolution services."""

from rudder.services.schema.discovery import SourceDiscovery
from rudder.services.schema.fetcher import ChartFetcher, read_schema_file
from rudder.services.schema.resolver import SchemaResolver
from rudder.services.schema.searcher import SourceSearcher
from rudder.services.schema.synthesizer import ValuesSchemaSynthesizer, infer_properties, infer_schema

__all__ = [
    "SourceDiscovery",
    "ChartFetcher",
    "SourceSearcher",
    "ValuesSchemaSynthesizer",
    "SchemaResolver",
    "read_schema_file",
    "infer_schema",
    "infer_properties",
]
