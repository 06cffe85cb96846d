"""Startup warmup routines that open the first database connection early.

Running a ping and a representative repository query before the first request
moves connection establishment and mapper configuration out of the request path.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine

from catchup.db.connection import begin_engine_transaction

logger = logging.getLogger(__name__)

# News API key that is never issued by the provider; used only to prime queries.
_WARMUP_NEWS_API_KEY = "__warmup__"


async def warmup_database(
    resolve_engine: Callable[[], AsyncEngine] | None = None,
) -> None:
    """Warm up the connection pool by executing a ``SELECT 1`` ping."""
    try:
        if resolve_engine is None:
            from catchup.db.connection import get_engine as resolve_engine

        start = time.time()
        engine = resolve_engine()

        async with begin_engine_transaction(engine) as conn:
            await conn.execute(text("SELECT 1"))

        elapsed = (time.time() - start) * 1000
        logger.info(f"✓ Database connection warmed up ({elapsed:.0f}ms)")
    except Exception as e:
        logger.warning(f"Database warmup failed: {e}")


async def warmup_repository_queries() -> None:
    """Prime the favorite source repository's ORM loaders with one listing query."""
    from catchup.db.connection import get_db
    from catchup.db.repositories import FavoriteSourceRepository

    try:
        start = time.time()

        async for session in get_db():
            repo = FavoriteSourceRepository(session)
            if await repo.tables_ready():
                await repo.find_by_news_api_key(_WARMUP_NEWS_API_KEY)
            else:
                logger.warning("Repository warmup skipped: favorite_sources table missing")
            break  # Only need one iteration

        elapsed = (time.time() - start) * 1000
        logger.info("✓ Repository warmup executed (%.0fms)", elapsed)
    except Exception as e:
        logger.warning(f"Repository warmup failed: {e}")


async def warmup_all(
    resolve_engine: Callable[[], AsyncEngine] | None = None,
) -> None:
    """Warm up the database connection and repository queries in sequence."""
    logger.info("=" * 60)
    logger.info("Warming up backend connections...")
    logger.info("=" * 60)

    start = time.time()

    await warmup_database(resolve_engine=resolve_engine)
    await warmup_repository_queries()

    total_elapsed = (time.time() - start) * 1000
    logger.info("=" * 60)
    logger.info(f"✓ Backend warmup complete ({total_elapsed:.0f}ms)")
    logger.info("=" * 60)
