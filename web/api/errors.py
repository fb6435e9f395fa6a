"""API errors and validation helpers."""


class ValidationError(Exception):
    """Validation error."""

    def __init__(self, message: str = "Validation error"):
        self.message = message
        super().__init__(self.message)


def validate_chart_key(chart_name: str, chart_version: str, repo_name: str) -> None:
    """Validate that every part of a schema cache key is present."""
    for field, value in (("chart_name", chart_name), ("chart_version", chart_version), ("repo_name", repo_name)):
        if not value or not value.strip():
            raise ValidationError(f"Invalid {field}: must not be empty")
