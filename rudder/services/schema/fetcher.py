"""Chart fetcher - pull a chart archive and read its declared schema."""

import json
import shutil
import tempfile
from pathlib import Path
from typing import Any

from loguru import logger

from helm_client import HelmCommandError, RepoClient
from rudder.errors import FetchError, NetworkError
from rudder.models import empty_schema
from settings import SCHEMA_FILE_NAME, TEMP_CHART_PREFIX


def read_schema_file(path: Path) -> dict[str, Any]:
    """Parse a values schema file, falling back to the empty schema.

    A chart without a usable schema file is a normal outcome, not an error.
    """
    try:
        content = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.info("No {} in chart, using empty schema", path.name)
        return empty_schema()
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Unreadable {}: {}", path, e)
        return empty_schema()

    try:
        schema = json.loads(content)
    except json.JSONDecodeError as e:
        logger.warning("Invalid JSON in {}: {}", path, e)
        return empty_schema()

    if not isinstance(schema, dict):
        logger.warning("{} is not a JSON object, using empty schema", path)
        return empty_schema()
    return schema


class ChartFetcher:
    """Pulls charts into a throwaway directory and extracts the schema."""

    def __init__(self, client: RepoClient, schema_file: str = SCHEMA_FILE_NAME):
        self._client = client
        self._schema_file = schema_file

    async def fetch(self, repo: str, chart: str, version: str) -> dict[str, Any]:
        """Pull repo/chart@version and return its schema document."""
        try:
            workdir = Path(tempfile.mkdtemp(prefix=TEMP_CHART_PREFIX))
        except OSError as e:
            raise FetchError(f"Failed to create chart work directory: {e}", chart=chart, version=version, repo=repo) from e

        try:
            try:
                chart_dir = await self._client.pull(repo, chart, version, workdir)
            except HelmCommandError as e:
                error_cls = NetworkError if e.network else FetchError
                raise error_cls(
                    f"Failed to pull chart {repo}/{chart} version {version}: {e.message}",
                    chart=chart,
                    version=version,
                    repo=repo,
                ) from e

            schema = read_schema_file(chart_dir / self._schema_file)
            logger.info("Pulled {}/{} {} ({} properties)", repo, chart, version, len(schema.get("properties") or {}))
            return schema
        finally:
            shutil.rmtree(workdir, ignore_errors=True)
