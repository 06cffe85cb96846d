#!/usr/bin/env python
"""Seed favorite sources from a JSONL file.

Each line holds one object with ``newsApiKey`` and ``sourceId`` (snake_case keys
are accepted too).  Records go through :class:`FavoriteSourceCommandService`, so
duplicates and blank values are skipped exactly as the API would reject them.

Usage:
    python -m catchup.scripts.seed_favorite_sources ./data/fixtures/favorite_sources.jsonl
    python -m catchup.scripts.seed_favorite_sources favorites.jsonl --limit 50 --dry-run
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from collections.abc import Iterator
from pathlib import Path

from pydantic import ValidationError

from catchup.db.connection import get_async_session_context
from catchup.db.repositories import FavoriteSourceRepository
from catchup.schemas.favorite_sources import CreateFavoriteSourceResource
from catchup.services.favorite_sources import (
    FavoriteSourceCommandService,
    create_command_from_resource,
)


def get_database_type() -> str:
    """Expose the database type helper for unit tests."""

    from catchup.db.connection import get_database_type as _connection_get_database_type

    return _connection_get_database_type()


def iter_resources(
    path: Path, limit: int | None = None
) -> Iterator[tuple[int, CreateFavoriteSourceResource | None, str | None]]:
    """Yield ``(line_number, resource, error)`` for each non-blank line in ``path``."""

    yielded = 0
    with path.open(encoding="utf-8") as handle:
        for line_num, raw_line in enumerate(handle, 1):
            if limit is not None and yielded >= limit:
                return
            line = raw_line.strip()
            if not line:
                continue
            yielded += 1
            try:
                payload = json.loads(line)
                yield line_num, CreateFavoriteSourceResource.model_validate(payload), None
            except json.JSONDecodeError as exc:
                yield line_num, None, f"Invalid JSON: {exc}"
            except ValidationError as exc:
                yield line_num, None, f"Invalid record: {exc.error_count()} error(s)"


async def seed_favorite_sources(
    path: Path, *, limit: int | None = None, dry_run: bool = False
) -> tuple[int, int]:
    """Load favorite sources from ``path``. Returns ``(loaded, skipped)``."""

    loaded_count = 0
    skipped_count = 0

    async with get_async_session_context() as session:
        service = FavoriteSourceCommandService(FavoriteSourceRepository(session))

        for line_num, resource, error in iter_resources(path, limit=limit):
            if resource is None:
                print(f"❌ Line {line_num}: {error}", file=sys.stderr)
                skipped_count += 1
                continue

            if dry_run:
                loaded_count += 1
                continue

            created = await service.handle(create_command_from_resource(resource))
            if created is None:
                print(
                    f"⚠️  Line {line_num}: {resource.source_id!r} rejected (blank or duplicate)",
                    file=sys.stderr,
                )
                skipped_count += 1
                continue

            loaded_count += 1
            if loaded_count % 100 == 0:
                print(f"💾 Saved {loaded_count} favorite sources...")

        if not dry_run and session.in_transaction():
            await session.commit()

    return loaded_count, skipped_count


async def main() -> int:
    """CLI entry point."""
    from catchup.db.connection import get_engine
    from catchup.main import bootstrap_sqlite_schema, validate_environment

    validate_environment()

    parser = argparse.ArgumentParser(description="Seed favorite sources from a JSONL file")
    parser.add_argument(
        "jsonl_path",
        nargs="?",
        type=Path,
        default=Path("./data/fixtures/favorite_sources.jsonl"),
        help="Path to JSONL file (default: ./data/fixtures/favorite_sources.jsonl)",
    )
    parser.add_argument("--limit", type=int, help="Maximum number of records to load")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Validate data without inserting into database",
    )
    args = parser.parse_args()

    db_type = get_database_type()
    print(f"🗄️  Database type detected: {db_type.upper()}")
    print(f"📂 Seed source: {args.jsonl_path}")
    if args.limit:
        print(f"🔢 Limit: {args.limit} records")
    if args.dry_run:
        print("🔍 Dry run mode (no changes will be made)")
    print()

    if not args.jsonl_path.exists():
        print(f"❌ File not found: {args.jsonl_path}", file=sys.stderr)
        return 1

    if db_type == "sqlite" and not args.dry_run:
        await bootstrap_sqlite_schema(get_engine())
    elif db_type == "postgresql":
        print("🧭 Reminder: run Alembic migrations (`alembic upgrade head`) before seeding.")

    loaded, skipped = await seed_favorite_sources(
        args.jsonl_path, limit=args.limit, dry_run=args.dry_run
    )

    print()
    print("=" * 50)
    if args.dry_run:
        print(f"✓ Validated {loaded} favorite sources")
    else:
        print(f"✅ Loaded {loaded} favorite sources")
    if skipped > 0:
        print(f"⚠️  Skipped {skipped} records")
    print("=" * 50)

    return 0 if skipped == 0 else 1


def run() -> None:
    """Console script wrapper around :func:`main`."""
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    run()
