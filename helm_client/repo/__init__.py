"""Helm repository client."""

from helm_client.repo.client import RepoClient
from helm_client.repo.schemas import ChartVersionSchema, RepoSchema

__all__ = [
    "RepoClient",
    "RepoSchema",
    "ChartVersionSchema",
]
