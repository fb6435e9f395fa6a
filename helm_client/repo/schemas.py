"""Helm repository output schemas."""

from pydantic import BaseModel


class RepoSchema(BaseModel):
    """Configured chart repository (`helm repo list -o json`)."""

    name: str
    url: str = ""


class ChartVersionSchema(BaseModel):
    """Search hit (`helm search repo -o json`)."""

    name: str
    version: str = ""
    app_version: str = ""
    description: str = ""
