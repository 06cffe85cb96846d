"""Write-side workflow for favorite sources."""

from __future__ import annotations

import logging

from sqlalchemy.exc import IntegrityError

from catchup.db.models import FavoriteSource
from catchup.services.favorite_sources.commands import CreateFavoriteSourceCommand
from catchup.services.favorite_sources.interfaces import FavoriteSourceRepositoryProtocol

logger = logging.getLogger(__name__)


class FavoriteSourceCommandService:
    """Validates and persists :class:`CreateFavoriteSourceCommand` requests.

    Rejected commands (blank fields, a duplicate key/source pair, or a unique
    constraint violation raised by a concurrent insert) produce ``None`` so the
    API layer can answer with ``400 Bad Request``.
    """

    def __init__(self, repository: FavoriteSourceRepositoryProtocol) -> None:
        self._repository = repository

    async def handle(self, command: CreateFavoriteSourceCommand) -> FavoriteSource | None:
        if not await self._repository.tables_ready():
            raise RuntimeError(
                "favorite_sources table is missing; run database migrations to enable favorites."
            )

        if command.is_blank():
            logger.warning("Rejected favorite source with blank news API key or source ID")
            return None

        if await self._repository.exists_by_news_api_key_and_source_id(
            command.news_api_key, command.source_id
        ):
            logger.warning(
                "Favorite source %s already exists for the given news API key",
                command.source_id,
            )
            return None

        favorite_source = FavoriteSource(
            news_api_key=command.news_api_key,
            source_id=command.source_id,
        )
        try:
            await self._repository.add(favorite_source)
            # Commit before returning so the id resolves on any connection.
            await self._repository.commit()
        except IntegrityError as exc:
            await self._repository.rollback()
            logger.warning(
                "Favorite source %s could not be saved: %s", command.source_id, exc.orig
            )
            return None

        logger.info("Created favorite source %s (id=%s)", command.source_id, favorite_source.id)
        return favorite_source
