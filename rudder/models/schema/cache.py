"""Chart schema cache table."""

SCHEMA_CACHE_DDL = """
CREATE TABLE IF NOT EXISTS chart_schemas (
    chart_name VARCHAR NOT NULL,
    chart_version VARCHAR NOT NULL,
    repo_name VARCHAR NOT NULL,
    namespace VARCHAR,
    schema_content VARCHAR NOT NULL,
    created_at TIMESTAMP NOT NULL,
    PRIMARY KEY (chart_name, chart_version, repo_name)
)
"""
