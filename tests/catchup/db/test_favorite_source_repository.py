"""Repository tests executed against an in-memory SQLite database."""

from __future__ import annotations

import pytest
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

import catchup.db.repositories.favorite_source_repository as repository_module
from catchup.db.models import FavoriteSource
from catchup.db.repositories import FavoriteSourceRepository


async def _seed(repository: FavoriteSourceRepository, *pairs: tuple[str, str]) -> None:
    for news_api_key, source_id in pairs:
        await repository.add(FavoriteSource(news_api_key=news_api_key, source_id=source_id))


@pytest.mark.asyncio
async def test_add_assigns_identity(session: AsyncSession) -> None:
    repository = FavoriteSourceRepository(session)

    created = await repository.add(FavoriteSource(news_api_key="abc123", source_id="bbc-news"))

    assert created.id == 1
    assert created.created_at is not None
    assert await repository.find_by_id(1) is created


@pytest.mark.asyncio
async def test_find_by_news_api_key_orders_by_id(session: AsyncSession) -> None:
    repository = FavoriteSourceRepository(session)
    await _seed(
        repository,
        ("abc123", "the-verge"),
        ("other", "cnn"),
        ("abc123", "bbc-news"),
    )

    rows = await repository.find_by_news_api_key("abc123")

    assert [(row.id, row.source_id) for row in rows] == [(1, "the-verge"), (3, "bbc-news")]
    assert await repository.find_by_news_api_key("missing") == []


@pytest.mark.asyncio
async def test_find_and_exists_by_pair(session: AsyncSession) -> None:
    repository = FavoriteSourceRepository(session)
    await _seed(repository, ("abc123", "bbc-news"), ("other", "cnn"))

    found = await repository.find_by_news_api_key_and_source_id("abc123", "bbc-news")

    assert found is not None and found.id == 1
    assert await repository.find_by_news_api_key_and_source_id("abc123", "cnn") is None
    assert await repository.exists_by_news_api_key_and_source_id("other", "cnn") is True
    assert await repository.exists_by_news_api_key_and_source_id("abc123", "cnn") is False


@pytest.mark.asyncio
async def test_unique_constraint_rejects_duplicate_pair(session: AsyncSession) -> None:
    repository = FavoriteSourceRepository(session)
    await _seed(repository, ("abc123", "bbc-news"))

    with pytest.raises(IntegrityError):
        await repository.add(FavoriteSource(news_api_key="abc123", source_id="bbc-news"))

    await repository.rollback()


@pytest.mark.asyncio
async def test_tables_ready_caches_success(session: AsyncSession) -> None:
    repository = FavoriteSourceRepository(session)

    assert await repository.tables_ready() is True
    assert repository_module._FAVORITE_SOURCES_TABLE_READY_CACHE is True


@pytest.mark.asyncio
async def test_tables_ready_false_without_schema(empty_session: AsyncSession) -> None:
    repository = FavoriteSourceRepository(empty_session)

    assert await repository.tables_ready() is False
    assert repository_module._FAVORITE_SOURCES_TABLE_READY_CACHE is None
