"""Database-oriented helpers for favorite sources."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import exists, inspect, select
from sqlalchemy.ext.asyncio import AsyncSession

from catchup.db.models import FavoriteSource

_FAVORITE_SOURCES_TABLE_READY_CACHE: bool | None = None


class FavoriteSourceRepository:
    """Encapsulates SQLAlchemy operations required by the favorite sources domain."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session
        self._tables_ready: bool | None = None

    @property
    def session(self) -> AsyncSession:
        return self._session

    async def tables_ready(self) -> bool:
        """Check if the ``favorite_sources`` table exists, caching successes in-process."""

        global _FAVORITE_SOURCES_TABLE_READY_CACHE

        if _FAVORITE_SOURCES_TABLE_READY_CACHE is True:
            self._tables_ready = True
            return True

        if self._tables_ready is True:
            return True

        def _check_tables(sync_session) -> bool:
            engine = sync_session.get_bind()
            if engine is None:
                return False

            inspector = inspect(engine)
            return FavoriteSource.__tablename__ in set(inspector.get_table_names())

        tables_ready = await self._session.run_sync(_check_tables)

        if tables_ready:
            self._tables_ready = True
            _FAVORITE_SOURCES_TABLE_READY_CACHE = True
        else:
            self._tables_ready = False

        return tables_ready

    async def find_by_id(self, favorite_source_id: int) -> FavoriteSource | None:
        """Return the favorite source with the given identity, if any."""

        return await self._session.get(FavoriteSource, favorite_source_id)

    async def find_by_news_api_key(self, news_api_key: str) -> Sequence[FavoriteSource]:
        """Return every favorite source registered for ``news_api_key`` ordered by id."""

        query = (
            select(FavoriteSource)
            .where(FavoriteSource.news_api_key == news_api_key)
            .order_by(FavoriteSource.id)
        )
        result = await self._session.execute(query)
        return result.scalars().all()

    async def find_by_news_api_key_and_source_id(
        self, news_api_key: str, source_id: str
    ) -> FavoriteSource | None:
        query = select(FavoriteSource).where(
            FavoriteSource.news_api_key == news_api_key,
            FavoriteSource.source_id == source_id,
        )
        result = await self._session.execute(query)
        return result.scalars().one_or_none()

    async def exists_by_news_api_key_and_source_id(
        self, news_api_key: str, source_id: str
    ) -> bool:
        query = select(
            exists().where(
                FavoriteSource.news_api_key == news_api_key,
                FavoriteSource.source_id == source_id,
            )
        )
        result = await self._session.execute(query)
        return bool(result.scalar())

    async def add(self, favorite_source: FavoriteSource) -> FavoriteSource:
        """Stage ``favorite_source`` and flush so the database assigns its id."""

        self._session.add(favorite_source)
        await self._session.flush()
        return favorite_source

    async def commit(self) -> None:
        await self._session.commit()

    async def rollback(self) -> None:
        await self._session.rollback()
