"""Helm release client."""

from helm_client.release.client import ReleaseClient

__all__ = [
    "ReleaseClient",
]
