"""Repository discovery - which chart repositories Helm knows about."""

from loguru import logger
from pydantic import ValidationError

from helm_client import HelmCommandError, RepoClient


class SourceDiscovery:
    """Lists configured repositories and checks for a requested one."""

    def __init__(self, client: RepoClient):
        self._client = client

    async def discover(self, requested: str) -> tuple[list[str], bool]:
        """Return (all repository names, whether `requested` is among them).

        Failures degrade to ``([], False)``: the result only narrows the
        search, it never gates resolution.
        """
        try:
            repos = await self._client.repo_list()
        except HelmCommandError as e:
            logger.warning("helm repo list failed: {}", e.message)
            return [], False
        except ValidationError as e:
            logger.warning("Unreadable helm repo list output: {}", e)
            return [], False

        names = [r.name for r in repos]
        exists = requested in names
        logger.debug("Repositories: {} (requested {} present={})", names, requested, exists)
        return names, exists
