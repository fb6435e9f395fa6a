"""Shared fixtures: temporary schema store and scripted Helm clients."""

import json
from pathlib import Path
from typing import Any

import pytest

from helm_client import HelmCommandError
from helm_client.repo import ChartVersionSchema, RepoSchema
from rudder.repositories import SchemaCacheRepository, StoreHandle
from rudder.services.schema import (
    ChartFetcher,
    SchemaResolver,
    SourceDiscovery,
    SourceSearcher,
    ValuesSchemaSynthesizer,
)

NGINX_SCHEMA = {
    "type": "object",
    "properties": {"replicaCount": {"type": "integer", "default": 1}},
}


def helm_error(message: str, network: bool | None = None) -> HelmCommandError:
    return HelmCommandError(("helm",), message, returncode=1, stderr=message, network=network)


class FakeRepoClient:
    """Scripted stand-in for RepoClient.

    repos:    repo names, or an exception raised by repo_list
    searches: repo -> chart names returned by search, or an exception
    pulls:    repo -> schema file text or bytes (None for no file), or an exception
    """

    def __init__(
        self,
        repos: list[str] | Exception | None = None,
        searches: dict[str, Any] | None = None,
        pulls: dict[str, Any] | None = None,
    ):
        self.repos = repos if repos is not None else []
        self.searches = searches or {}
        self.pulls = pulls or {}
        self.calls: list[tuple] = []
        self.destinations: list[Path] = []

    async def repo_list(self) -> list[RepoSchema]:
        self.calls.append(("repo_list",))
        if isinstance(self.repos, Exception):
            raise self.repos
        return [RepoSchema(name=name, url=f"https://charts.example.com/{name}") for name in self.repos]

    async def search(self, repo: str, chart: str, version: str) -> list[ChartVersionSchema]:
        self.calls.append(("search", repo, chart, version))
        outcome = self.searches.get(repo, [])
        if isinstance(outcome, Exception):
            raise outcome
        return [ChartVersionSchema(name=name, version=version) for name in outcome]

    async def pull(self, repo: str, chart: str, version: str, destination: Path) -> Path:
        self.calls.append(("pull", repo, chart, version))
        self.destinations.append(destination)
        outcome = self.pulls.get(repo)
        if isinstance(outcome, Exception):
            raise outcome
        chart_dir = destination / chart
        chart_dir.mkdir(parents=True)
        if isinstance(outcome, bytes):
            (chart_dir / "values.schema.json").write_bytes(outcome)
        elif outcome is not None:
            (chart_dir / "values.schema.json").write_text(outcome)
        return chart_dir

    def called(self, name: str) -> list[tuple]:
        return [c for c in self.calls if c[0] == name]


class FakeReleaseClient:
    """Scripted stand-in for ReleaseClient."""

    def __init__(self, values: Any = None):
        self.values = values
        self.calls: list[tuple[str, str]] = []

    async def get_values(self, release: str, namespace: str) -> Any:
        self.calls.append((release, namespace))
        if isinstance(self.values, Exception):
            raise self.values
        return self.values


def build_resolver(
    cache: SchemaCacheRepository, repo_client: FakeRepoClient, release_client: FakeReleaseClient
) -> SchemaResolver:
    return SchemaResolver(
        cache_repo=cache,
        discovery=SourceDiscovery(repo_client),
        searcher=SourceSearcher(repo_client, ChartFetcher(repo_client)),
        synthesizer=ValuesSchemaSynthesizer(release_client),
    )


@pytest.fixture
def store(tmp_path):
    handle = StoreHandle(tmp_path / "cache" / "rudder.duckdb")
    try:
        yield handle
    finally:
        handle.close()


@pytest.fixture
def cache(store):
    return SchemaCacheRepository(store)


@pytest.fixture
def nginx_schema_text():
    return json.dumps(NGINX_SCHEMA)
