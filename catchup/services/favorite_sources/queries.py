"""Read-side requests understood by :class:`FavoriteSourceQueryService`."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GetFavoriteSourceByIdQuery:
    favorite_source_id: int


@dataclass(frozen=True)
class GetAllFavoriteSourcesByNewsApiKeyQuery:
    news_api_key: str


@dataclass(frozen=True)
class GetFavoriteSourceByNewsApiKeyAndSourceIdQuery:
    news_api_key: str
    source_id: str
