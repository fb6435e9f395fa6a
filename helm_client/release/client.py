"""Release client - deployed release values."""

import json
from typing import Any

from helm_client.base import BaseClient


class ReleaseClient(BaseClient):
    """Client for Helm release subcommands."""

    async def get_values(self, release: str, namespace: str) -> Any:
        """helm get values - user-supplied values of a deployed release."""
        result = await self._run("get", "values", release, "-n", namespace, "-o", "json")
        return json.loads(result.stdout)
