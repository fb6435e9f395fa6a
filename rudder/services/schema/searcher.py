"""Repository search - locate a chart version and fetch its schema."""

from collections.abc import Sequence
from typing import Any

from loguru import logger
from pydantic import ValidationError

from helm_client import HelmCommandError, RepoClient
from rudder.errors import FetchError, NetworkError, NotFoundError, SchemaError
from rudder.services.schema.fetcher import ChartFetcher


class SourceSearcher:
    """Searches repositories in order until one yields a schema."""

    def __init__(self, client: RepoClient, fetcher: ChartFetcher):
        self._client = client
        self._fetcher = fetcher

    async def search_source(self, repo: str, chart: str, version: str) -> dict[str, Any]:
        """Confirm repo/chart@version exists, then fetch its schema."""
        context = {"chart": chart, "version": version, "repo": repo}
        try:
            hits = await self._client.search(repo, chart, version)
        except HelmCommandError as e:
            if e.network:
                raise NetworkError(f"Failed to search {repo}/{chart}: {e.message}", **context) from e
            raise NotFoundError(
                f"Chart {repo}/{chart} version {version} not found in repository: {e.message}", **context
            ) from e
        except ValidationError as e:
            raise FetchError(f"Unreadable helm search output for {repo}/{chart}: {e}", **context) from e

        if not any(hit.name == f"{repo}/{chart}" for hit in hits):
            raise NotFoundError(f"Chart {repo}/{chart} version {version} not found in repository", **context)

        return await self._fetcher.fetch(repo, chart, version)

    async def search_all(self, repos: Sequence[str], chart: str, version: str) -> dict[str, Any]:
        """Try each repository in order.

        The first success wins. A network failure stops the loop and is raised
        as-is; other failures move on to the next repository. When every
        repository fails the last failure is raised (an empty message when
        `repos` is empty).
        """
        last_error: SchemaError = NotFoundError("", chart=chart, version=version)

        for repo in repos:
            try:
                return await self.search_source(repo, chart, version)
            except NetworkError as e:
                logger.warning("Network failure while searching {}: {}", repo, e.message)
                raise
            except SchemaError as e:
                logger.debug("{} {} not available from {}: {}", chart, version, repo, e.message)
                last_error = e

        raise last_error
