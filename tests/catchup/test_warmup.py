"""Tests for the startup warmup routines."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from unittest.mock import AsyncMock, MagicMock

import pytest

from catchup import warmup


class _DummyTransaction:
    """Async context manager yielding a mock connection."""

    def __init__(self, connection: AsyncMock) -> None:
        self._connection = connection

    async def __aenter__(self) -> AsyncMock:
        return self._connection

    async def __aexit__(self, exc_type, exc, tb) -> bool:
        return False


@pytest.mark.asyncio
async def test_warmup_database_executes_ping(monkeypatch: pytest.MonkeyPatch) -> None:
    connection = AsyncMock()
    engine = MagicMock()

    def _fake_begin(resolved_engine):
        assert resolved_engine is engine
        return _DummyTransaction(connection)

    monkeypatch.setattr(warmup, "begin_engine_transaction", _fake_begin)

    await warmup.warmup_database(resolve_engine=lambda: engine)

    connection.execute.assert_awaited_once()
    statement = connection.execute.await_args.args[0]
    assert str(statement) == "SELECT 1"


@pytest.mark.asyncio
async def test_warmup_database_logs_failures(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    def _broken_engine():
        raise RuntimeError("database offline")

    with caplog.at_level(logging.WARNING, logger="catchup.warmup"):
        await warmup.warmup_database(resolve_engine=_broken_engine)

    assert "Database warmup failed: database offline" in caplog.text


def _patch_get_db(monkeypatch: pytest.MonkeyPatch, session: object) -> None:
    async def _fake_get_db():
        yield session

    monkeypatch.setattr("catchup.db.connection.get_db", _fake_get_db)


@pytest.mark.asyncio
async def test_warmup_repository_queries_primes_listing(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    session = object()
    repository = MagicMock()
    repository.tables_ready = AsyncMock(return_value=True)
    repository.find_by_news_api_key = AsyncMock(return_value=[])
    repository_cls = MagicMock(return_value=repository)

    _patch_get_db(monkeypatch, session)
    monkeypatch.setattr("catchup.db.repositories.FavoriteSourceRepository", repository_cls)

    await warmup.warmup_repository_queries()

    repository_cls.assert_called_once_with(session)
    repository.find_by_news_api_key.assert_awaited_once_with("__warmup__")


@pytest.mark.asyncio
async def test_warmup_repository_queries_skips_missing_table(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    repository = MagicMock()
    repository.tables_ready = AsyncMock(return_value=False)
    repository.find_by_news_api_key = AsyncMock()

    _patch_get_db(monkeypatch, object())
    monkeypatch.setattr(
        "catchup.db.repositories.FavoriteSourceRepository", MagicMock(return_value=repository)
    )

    with caplog.at_level(logging.WARNING, logger="catchup.warmup"):
        await warmup.warmup_repository_queries()

    repository.find_by_news_api_key.assert_not_awaited()
    assert "favorite_sources table missing" in caplog.text


@pytest.mark.asyncio
async def test_warmup_all_runs_both_steps(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[str] = []

    async def _database(resolve_engine=None):
        calls.append("database")

    async def _repository():
        calls.append("repository")

    monkeypatch.setattr(warmup, "warmup_database", _database)
    monkeypatch.setattr(warmup, "warmup_repository_queries", _repository)

    await warmup.warmup_all()

    assert calls == ["database", "repository"]


@pytest.mark.asyncio
async def test_begin_engine_transaction_accepts_coroutine_begin() -> None:
    """The helper tolerates mocks whose ``begin()`` returns a coroutine."""

    from catchup.db.connection import begin_engine_transaction

    connection = AsyncMock()

    @asynccontextmanager
    async def _context():
        yield connection

    async def _begin():
        return _context()

    engine = MagicMock()
    engine.begin = _begin

    async with begin_engine_transaction(engine) as conn:
        assert conn is connection
