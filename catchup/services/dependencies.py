"""FastAPI dependency wiring for the favorite sources services.

Keeping the factories here leaves the service modules free of web-layer
concerns; tests replace them through ``app.dependency_overrides``.
"""

from __future__ import annotations

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from catchup.db.connection import get_db
from catchup.db.repositories import FavoriteSourceRepository
from catchup.services.favorite_sources import (
    FavoriteSourceCommandService,
    FavoriteSourceQueryService,
)


def get_favorite_source_repository(
    session: AsyncSession = Depends(get_db),
) -> FavoriteSourceRepository:
    return FavoriteSourceRepository(session)


def get_favorite_source_command_service(
    repository: FavoriteSourceRepository = Depends(get_favorite_source_repository),
) -> FavoriteSourceCommandService:
    """Provide a :class:`FavoriteSourceCommandService` bound to the request session."""

    return FavoriteSourceCommandService(repository)


def get_favorite_source_query_service(
    repository: FavoriteSourceRepository = Depends(get_favorite_source_repository),
) -> FavoriteSourceQueryService:
    """Provide a :class:`FavoriteSourceQueryService` bound to the request session."""

    return FavoriteSourceQueryService(repository)


__all__ = [
    "get_favorite_source_command_service",
    "get_favorite_source_query_service",
    "get_favorite_source_repository",
]
