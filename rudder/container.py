"""Dependency Injection container - initialized at app startup."""

from helm_client import ReleaseClient, RepoClient, set_helm_config
from rudder.repositories import SchemaCacheRepository, StoreHandle
from rudder.services.schema import (
    ChartFetcher,
    SchemaResolver,
    SourceDiscovery,
    SourceSearcher,
    ValuesSchemaSynthesizer,
)
from settings import DB_PATH, HELM_BIN, HELM_TIMEOUT


class Container:
    """Application DI container - holds all singleton instances."""

    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def init(self, db_path: str = DB_PATH) -> None:
        """Initialize all dependencies. Call once at app startup."""
        if self._initialized:
            return

        set_helm_config(HELM_BIN, HELM_TIMEOUT)

        # Store (single handle, one lock)
        self._store = StoreHandle(db_path)
        self.schema_cache = SchemaCacheRepository(self._store)

        # Helm clients
        repo_client = RepoClient()
        release_client = ReleaseClient()

        # Services (with injected collaborators)
        self.schema_resolver = SchemaResolver(
            cache_repo=self.schema_cache,
            discovery=SourceDiscovery(repo_client),
            searcher=SourceSearcher(repo_client, ChartFetcher(repo_client)),
            synthesizer=ValuesSchemaSynthesizer(release_client),
        )

        self._initialized = True

    def close(self) -> None:
        """Release the store handle."""
        if not self._initialized:
            return
        self._store.close()
        self._initialized = False


# Global container instance
container = Container()
