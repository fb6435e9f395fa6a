"""Application settings."""

import os
from pathlib import Path

# Storage
DATA_DIR = Path(os.getenv("RUDDER_DATA_DIR", Path.home() / ".local" / "share" / "rudder"))
DB_PATH = os.getenv("RUDDER_DB_PATH", str(DATA_DIR / "rudder.duckdb"))

# Logging
LOG_DIR = Path(os.getenv("RUDDER_LOG_DIR", DATA_DIR / "logs"))
LOG_LEVEL = os.getenv("RUDDER_LOG_LEVEL", "INFO").upper()

# Helm
HELM_BIN = os.getenv("RUDDER_HELM_BIN", "helm")
HELM_TIMEOUT = float(os.getenv("RUDDER_HELM_TIMEOUT", "0")) or None

# Schema resolution
SCHEMA_FILE_NAME = "values.schema.json"
NO_REPOS_SOURCE = "no-repos-available"
TEMP_CHART_PREFIX = "rudder-chart-"
