"""Helm CLI client package."""

from helm_client.base import (
    BaseClient,
    CommandResult,
    HelmCommandError,
    is_network_failure,
    set_helm_config,
)
from helm_client.release import ReleaseClient
from helm_client.repo import RepoClient

__all__ = [
    # Base
    "BaseClient",
    "CommandResult",
    "HelmCommandError",
    "is_network_failure",
    "set_helm_config",
    # Clients
    "RepoClient",
    "ReleaseClient",
]
