"""Query performance monitoring for the CatchUp News API.

Slow statements are logged with their duration so missing indexes on the
favorite source lookups show up in the application log.
"""

import logging
import time
from typing import Any

from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlalchemy.pool import Pool

logger = logging.getLogger(__name__)

_MAX_LOGGED_STATEMENT = 500


def _truncate_statement(statement: str) -> str:
    if len(statement) <= _MAX_LOGGED_STATEMENT:
        return statement
    return statement[:_MAX_LOGGED_STATEMENT] + "..."


def setup_query_monitoring(
    engine: Engine,
    slow_query_threshold: float = 0.1,
    log_pool_stats: bool = True,
) -> None:
    """Set up database query performance monitoring.

    Args:
        engine: Async SQLAlchemy engine to monitor (listeners attach to ``sync_engine``)
        slow_query_threshold: Log queries slower than this many seconds (default: 0.1s)
        log_pool_stats: Whether to log connection pool checkouts (default: True)
    """
    if not hasattr(engine, "sync_engine"):
        logger.warning("Engine does not have sync_engine attribute, skipping query monitoring")
        return

    @event.listens_for(engine.sync_engine, "before_cursor_execute")
    def receive_before_cursor_execute(
        conn: Any,
        cursor: Any,
        statement: str,
        parameters: Any,
        context: Any,
        executemany: bool,
    ) -> None:
        """Record query start time."""
        conn.info.setdefault("query_start_time", []).append(time.time())

    @event.listens_for(engine.sync_engine, "after_cursor_execute")
    def receive_after_cursor_execute(
        conn: Any,
        cursor: Any,
        statement: str,
        parameters: Any,
        context: Any,
        executemany: bool,
    ) -> None:
        """Log slow queries after execution."""
        total = time.time() - conn.info["query_start_time"].pop()

        if total > slow_query_threshold:
            logger.warning(
                f"Slow query detected ({total:.3f}s): {_truncate_statement(statement)}",
                extra={
                    "duration_seconds": total,
                    "query": statement,
                    "threshold_seconds": slow_query_threshold,
                },
            )

    if log_pool_stats:

        @event.listens_for(Pool, "checkout")
        def receive_checkout(
            dbapi_conn: Any,
            connection_record: Any,
            connection_proxy: Any,
        ) -> None:
            """Log connection pool checkout."""
            logger.debug("Connection checked out from pool %s", connection_proxy._pool.status())

    logger.info(
        f"Query performance monitoring enabled "
        f"(slow query threshold: {slow_query_threshold}s, "
        f"pool stats logging: {log_pool_stats})"
    )
