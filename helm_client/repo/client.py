"""Repository client - configured repos, chart search and pull."""

from pathlib import Path

from pydantic import TypeAdapter

from helm_client.base import BaseClient
from helm_client.repo.schemas import ChartVersionSchema, RepoSchema

_repos = TypeAdapter(list[RepoSchema])
_chart_versions = TypeAdapter(list[ChartVersionSchema])


class RepoClient(BaseClient):
    """Client for Helm repository subcommands."""

    async def repo_list(self) -> list[RepoSchema]:
        """helm repo list - configured repositories, in Helm's order."""
        result = await self._run("repo", "list", "-o", "json")
        return _repos.validate_json(result.stdout or "[]")

    async def search(self, repo: str, chart: str, version: str) -> list[ChartVersionSchema]:
        """helm search repo - versions of repo/chart matching the constraint."""
        result = await self._run("search", "repo", f"{repo}/{chart}", "--version", version, "-o", "json")
        return _chart_versions.validate_json(result.stdout or "[]")

    async def pull(self, repo: str, chart: str, version: str, destination: Path) -> Path:
        """helm pull --untar - unpack the chart archive under destination."""
        await self._run(
            "pull",
            f"{repo}/{chart}",
            "--version",
            version,
            "--untar",
            "--destination",
            str(destination),
        )
        return destination / chart
