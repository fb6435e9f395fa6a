#!/usr/bin/env python3
"""
Resolve chart schemas and manage the schema cache.

Usage:
    python manage_schemas.py list                                  # Show cached schemas
    python manage_schemas.py clear                                 # Remove all cached schemas
    python manage_schemas.py delete CHART VERSION REPO             # Remove one cached schema
    python manage_schemas.py resolve CHART VERSION REPO            # Resolve (and cache) a schema
    python manage_schemas.py resolve CHART VERSION REPO --namespace NS --release NAME
"""

import asyncio
import sys
from pathlib import Path

# Add project to path
sys.path.insert(0, str(Path(__file__).parent))

from rudder.container import container
from rudder.errors import SchemaError
from settings.logging import setup_logging
from web.api.errors import ValidationError
from web.api.schema_cache import (
    clear_schema_cache,
    delete_schema_cache_entry,
    list_cached_schemas,
    resolve_schema,
)

logger = setup_logging(to_file=True)


def _option(args: list[str], name: str) -> str | None:
    """Pop `--name value` from args."""
    if name not in args:
        return None
    i = args.index(name)
    if i + 1 >= len(args):
        print(__doc__)
        sys.exit(1)
    value = args[i + 1]
    del args[i : i + 2]
    return value


def show_cache() -> None:
    """Print cached schemas, most recent first."""
    response = list_cached_schemas()
    if not response.items:
        print("\nSchema cache is empty.\n")
        return

    print("\n" + "=" * 60)
    print(f"CACHED SCHEMAS ({response.total})")
    print("=" * 60)
    for item in response.items:
        properties = item.schema_content.get("properties") or {}
        namespace = f" [{item.namespace}]" if item.namespace else ""
        print(f"  {item.chart_name} {item.chart_version} from {item.repo_name}{namespace}")
        print(f"    {len(properties)} properties, cached {item.created_at:%Y-%m-%d %H:%M:%S}")
    print("=" * 60 + "\n")


def main():
    args = sys.argv[1:]
    if not args:
        print(__doc__)
        sys.exit(1)

    command, args = args[0], args[1:]
    namespace = _option(args, "--namespace")
    release = _option(args, "--release")

    try:
        container.init()
        if command == "list":
            show_cache()
        elif command == "clear":
            print(clear_schema_cache().message)
        elif command == "delete" and len(args) == 3:
            print(delete_schema_cache_entry(*args).message)
        elif command == "resolve" and len(args) == 3:
            print(asyncio.run(resolve_schema(*args, namespace=namespace, release_name=release)))
        else:
            print(__doc__)
            sys.exit(1)
    except ValidationError as e:
        logger.error(e.message)
        sys.exit(2)
    except SchemaError as e:
        logger.error("{} failed ({}): {}", command, e.kind.value, e.message)
        sys.exit(1)
    finally:
        container.close()


if __name__ == "__main__":
    main()
