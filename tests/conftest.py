"""Shared fixtures: in-memory SQLite sessions and an HTTP client bound to the app."""

from __future__ import annotations

from collections.abc import AsyncIterator, Iterator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

import catchup.db.repositories.favorite_source_repository as repository_module
from catchup.db.connection import get_db
from catchup.db.models import Base
from catchup.main import app


@pytest_asyncio.fixture
async def session() -> AsyncIterator[AsyncSession]:
    """Provide an in-memory SQLite session with freshly created tables."""
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", future=True)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    session_factory = async_sessionmaker(engine, expire_on_commit=False)
    async with session_factory() as db_session:
        yield db_session
        if db_session.in_transaction():
            await db_session.rollback()
    await engine.dispose()


@pytest_asyncio.fixture
async def empty_session() -> AsyncIterator[AsyncSession]:
    """Provide an in-memory SQLite session without any tables."""
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", future=True)
    session_factory = async_sessionmaker(engine, expire_on_commit=False)
    async with session_factory() as db_session:
        yield db_session
    await engine.dispose()


@pytest.fixture(autouse=True)
def reset_tables_ready_cache() -> Iterator[None]:
    """Ensure the process-wide table readiness cache starts fresh for each test."""

    previous_cache = repository_module._FAVORITE_SOURCES_TABLE_READY_CACHE
    repository_module._FAVORITE_SOURCES_TABLE_READY_CACHE = None
    yield
    repository_module._FAVORITE_SOURCES_TABLE_READY_CACHE = previous_cache


@pytest_asyncio.fixture
async def api_client(session: AsyncSession) -> AsyncIterator[AsyncClient]:
    """Create an ``AsyncClient`` whose requests share the in-memory test session."""

    async def _override_get_db() -> AsyncIterator[AsyncSession]:
        yield session
        await session.flush()

    app.dependency_overrides.clear()
    app.dependency_overrides[get_db] = _override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client

    app.dependency_overrides.clear()
