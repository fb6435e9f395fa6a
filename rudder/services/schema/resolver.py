"""Schema resolver - cache first, then repositories, then live values."""

import json
from typing import Any

from loguru import logger

from rudder.errors import NetworkError, SchemaError, SynthesisError
from rudder.models import CachedSchemaEntry, empty_schema, is_empty_schema
from rudder.repositories import SchemaCacheRepository
from rudder.services.schema.discovery import SourceDiscovery
from rudder.services.schema.searcher import SourceSearcher
from rudder.services.schema.synthesizer import ValuesSchemaSynthesizer
from settings import NO_REPOS_SOURCE


class SchemaResolver:
    """Resolves chart schemas and owns every schema cache write.

    Resolution order:
    1. cached schema, unless it is empty (empty ones are always regenerated)
    2. the requested repository if Helm knows it, otherwise every repository
    3. the live values of ``release`` in ``namespace``, when both are given
    4. the empty schema

    Whatever is resolved after a cache miss is persisted, the empty schema
    included. Only store failures and network failures reach the caller.
    """

    def __init__(
        self,
        cache_repo: SchemaCacheRepository,
        discovery: SourceDiscovery,
        searcher: SourceSearcher,
        synthesizer: ValuesSchemaSynthesizer,
    ):
        self._cache = cache_repo
        self._discovery = discovery
        self._searcher = searcher
        self._synthesizer = synthesizer
        logger.debug("SchemaResolver initialized")

    async def resolve(
        self,
        chart: str,
        version: str,
        repo: str,
        namespace: str | None = None,
        release: str | None = None,
    ) -> dict[str, Any]:
        """Schema document for chart@version from repo."""
        cached = self._cache.get(chart, version, repo)
        if cached is None:
            logger.info("No cached schema found for {} {}, fetching", chart, version)
        elif is_empty_schema(cached.schema_content):
            logger.info("Cached schema for {} {} is empty, regenerating", chart, version)
        else:
            logger.info("Found cached schema for {} {}", chart, version)
            return cached.schema_content

        available, repo_exists = await self._discovery.discover(repo)
        candidates = [repo] if repo_exists else available

        if not candidates:
            logger.warning("No Helm repositories available for {} {}", chart, version)
            return self._store(chart, version, NO_REPOS_SOURCE, namespace, empty_schema())

        try:
            schema = await self._searcher.search_all(candidates, chart, version)
        except NetworkError:
            raise
        except SchemaError as e:
            logger.info("{} {} not resolved from {}: {}", chart, version, candidates, e.message or "no repositories")
        else:
            source = repo if len(candidates) == 1 else candidates[0]
            return self._store(chart, version, source, namespace, schema)

        if release and namespace:
            logger.info("Attempting to generate schema from current values for {}/{}", namespace, release)
            try:
                schema = await self._synthesizer.synthesize(release, namespace)
            except SynthesisError as e:
                logger.warning("Failed to generate schema from values for {}/{}: {}", namespace, release, e.message)
            else:
                return self._store(chart, version, repo, namespace, schema)

        return self._store(chart, version, repo, namespace, empty_schema())

    async def resolve_json(
        self,
        chart: str,
        version: str,
        repo: str,
        namespace: str | None = None,
        release: str | None = None,
    ) -> str:
        """Same as :meth:`resolve`, serialized to JSON text."""
        return json.dumps(await self.resolve(chart, version, repo, namespace, release))

    def _store(
        self, chart: str, version: str, repo: str, namespace: str | None, schema: dict[str, Any]
    ) -> dict[str, Any]:
        self._cache.put(
            CachedSchemaEntry(
                chart_name=chart,
                chart_version=version,
                repo_name=repo,
                schema_content=schema,
                namespace=namespace,
            )
        )
        return schema
