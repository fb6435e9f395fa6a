"""Schema synthesis from the live values of a deployed release."""

from typing import Any

from loguru import logger

from helm_client import HelmCommandError, ReleaseClient
from rudder.errors import SynthesisError


def infer_schema(value: Any) -> dict[str, Any]:
    """Property schema for one value, recursing into arrays and objects.

    Null maps to a string property with a null default.
    """
    if isinstance(value, bool):
        return {"type": "boolean", "default": value}
    if isinstance(value, int):
        return {"type": "integer", "default": value}
    if isinstance(value, float):
        return {"type": "number", "default": value}
    if isinstance(value, str):
        return {"type": "string", "default": value}
    if isinstance(value, list):
        items = infer_schema(value[0]) if value else {"type": "string"}
        return {"type": "array", "items": items, "default": value}
    if isinstance(value, dict):
        return {"type": "object", "properties": infer_properties(value), "default": value}
    return {"type": "string", "default": None}


def infer_properties(values: Any) -> dict[str, Any]:
    """Properties map for an object; anything else has no properties."""
    if not isinstance(values, dict):
        return {}
    return {key: infer_schema(val) for key, val in values.items()}


class ValuesSchemaSynthesizer:
    """Derives a schema from `helm get values` of a running release."""

    def __init__(self, client: ReleaseClient):
        self._client = client

    async def synthesize(self, release: str, namespace: str) -> dict[str, Any]:
        try:
            values = await self._client.get_values(release, namespace)
        except HelmCommandError as e:
            raise SynthesisError(f"Failed to get helm values: {e.message}", release=release, namespace=namespace) from e
        except ValueError as e:
            raise SynthesisError(f"Failed to parse helm values: {e}", release=release, namespace=namespace) from e

        properties = infer_properties(values)
        logger.info("Generated schema from helm values for {}/{} ({} properties)", namespace, release, len(properties))
        return {"type": "object", "properties": properties}
