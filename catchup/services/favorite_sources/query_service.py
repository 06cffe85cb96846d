"""Read-side lookups for favorite sources."""

from __future__ import annotations

from collections.abc import Sequence

from catchup.db.models import FavoriteSource
from catchup.services.favorite_sources.interfaces import FavoriteSourceRepositoryProtocol
from catchup.services.favorite_sources.queries import (
    GetAllFavoriteSourcesByNewsApiKeyQuery,
    GetFavoriteSourceByIdQuery,
    GetFavoriteSourceByNewsApiKeyAndSourceIdQuery,
)


class FavoriteSourceQueryService:
    """Answers favorite source queries; a missing table reads as "no rows"."""

    def __init__(self, repository: FavoriteSourceRepositoryProtocol) -> None:
        self._repository = repository

    async def handle_get_by_id(
        self, query: GetFavoriteSourceByIdQuery
    ) -> FavoriteSource | None:
        if not await self._repository.tables_ready():
            return None
        return await self._repository.find_by_id(query.favorite_source_id)

    async def handle_get_all_by_news_api_key(
        self, query: GetAllFavoriteSourcesByNewsApiKeyQuery
    ) -> Sequence[FavoriteSource]:
        if not await self._repository.tables_ready():
            return []
        return await self._repository.find_by_news_api_key(query.news_api_key)

    async def handle_get_by_news_api_key_and_source_id(
        self, query: GetFavoriteSourceByNewsApiKeyAndSourceIdQuery
    ) -> FavoriteSource | None:
        if not await self._repository.tables_ready():
            return None
        return await self._repository.find_by_news_api_key_and_source_id(
            query.news_api_key, query.source_id
        )
