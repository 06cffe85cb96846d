"""Structural interfaces for the favorite sources collaborators.

The API router only depends on the two service protocols, and the services only
depend on :class:`FavoriteSourceRepositoryProtocol`, so tests can swap in
in-memory doubles without touching a database.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from catchup.db.models import FavoriteSource
from catchup.services.favorite_sources.commands import CreateFavoriteSourceCommand
from catchup.services.favorite_sources.queries import (
    GetAllFavoriteSourcesByNewsApiKeyQuery,
    GetFavoriteSourceByIdQuery,
    GetFavoriteSourceByNewsApiKeyAndSourceIdQuery,
)


@runtime_checkable
class FavoriteSourceRepositoryProtocol(Protocol):
    async def tables_ready(self) -> bool:
        """Return ``True`` once the backing storage is available."""

    async def find_by_id(self, favorite_source_id: int) -> FavoriteSource | None:
        """Return the favorite source with the given identity."""

    async def find_by_news_api_key(self, news_api_key: str) -> Sequence[FavoriteSource]:
        """Return all favorite sources owned by ``news_api_key`` ordered by id."""

    async def find_by_news_api_key_and_source_id(
        self, news_api_key: str, source_id: str
    ) -> FavoriteSource | None:
        """Return the favorite source for the key/source pair."""

    async def exists_by_news_api_key_and_source_id(
        self, news_api_key: str, source_id: str
    ) -> bool:
        """Return ``True`` when the key/source pair is already stored."""

    async def add(self, favorite_source: FavoriteSource) -> FavoriteSource:
        """Persist ``favorite_source`` and populate its identity."""

    async def commit(self) -> None:
        """Make staged writes durable and visible to other sessions."""

    async def rollback(self) -> None:
        """Discard pending changes after a failed write."""


@runtime_checkable
class FavoriteSourceCommandServiceProtocol(Protocol):
    async def handle(self, command: CreateFavoriteSourceCommand) -> FavoriteSource | None:
        """Create a favorite source, returning ``None`` when the command is rejected."""


@runtime_checkable
class FavoriteSourceQueryServiceProtocol(Protocol):
    async def handle_get_by_id(
        self, query: GetFavoriteSourceByIdQuery
    ) -> FavoriteSource | None:
        """Look up a single favorite source by identity."""

    async def handle_get_all_by_news_api_key(
        self, query: GetAllFavoriteSourcesByNewsApiKeyQuery
    ) -> Sequence[FavoriteSource]:
        """List every favorite source owned by a News API key."""

    async def handle_get_by_news_api_key_and_source_id(
        self, query: GetFavoriteSourceByNewsApiKeyAndSourceIdQuery
    ) -> FavoriteSource | None:
        """Look up the favorite source for a key/source pair."""
