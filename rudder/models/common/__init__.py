"""Common models - base classes."""

from rudder.models.common.base import BaseEntity

__all__ = [
    "BaseEntity",
]
