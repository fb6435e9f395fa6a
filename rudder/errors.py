"""Schema resolution errors."""

from enum import StrEnum
from typing import Any


class ErrorKind(StrEnum):
    """Closed set of failure kinds raised by the schema pipeline."""

    STORE = "store"
    NOT_FOUND = "not_found"
    NETWORK = "network"
    FETCH = "fetch"
    SYNTHESIS = "synthesis"


class SchemaError(Exception):
    """Base error with a kind and structured context."""

    kind: ErrorKind

    def __init__(self, message: str = "", **context: Any):
        self.message = message
        self.context = {k: v for k, v in context.items() if v is not None}
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(kind={self.kind.value!r}, message={self.message!r}, context={self.context!r})"


class StoreError(SchemaError):
    """Schema cache could not be read or written."""

    kind = ErrorKind.STORE


class NotFoundError(SchemaError):
    """Chart version is not available in a repository."""

    kind = ErrorKind.NOT_FOUND


class NetworkError(SchemaError):
    """Helm could not reach a repository."""

    kind = ErrorKind.NETWORK


class FetchError(SchemaError):
    """Chart archive could not be pulled, or Helm output was unusable."""

    kind = ErrorKind.FETCH


class SynthesisError(SchemaError):
    """Live release values could not be read or parsed."""

    kind = ErrorKind.SYNTHESIS
