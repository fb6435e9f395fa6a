"""Schema domain entities."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from rudder.models.common import BaseEntity


def empty_schema() -> dict[str, Any]:
    """Canonical "no schema available" document."""
    return {"properties": {}, "type": "object"}


def is_empty_schema(schema: dict[str, Any]) -> bool:
    """True when a schema document declares no properties.

    Documents without a ``properties`` key are judged on their own keys.
    """
    if "properties" in schema:
        properties = schema["properties"]
        return not (isinstance(properties, dict) and properties)
    return not schema


@dataclass
class CachedSchemaEntry(BaseEntity):
    """Cached schema for one chart version from one repository."""

    chart_name: str
    chart_version: str
    repo_name: str
    schema_content: dict[str, Any] = field(default_factory=empty_schema)
    namespace: str | None = None
    created_at: datetime | None = None

    @property
    def key(self) -> tuple[str, str, str]:
        return self.chart_name, self.chart_version, self.repo_name
