"""API views over the schema services."""
