"""SQLAlchemy ORM models for the news bounded context.

A favorite source links a client's News API key to a source identifier assigned
by the upstream news provider.  The pair is unique so each client can mark a
given publication as a favorite at most once.
"""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import DateTime, Integer, String, UniqueConstraint
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    pass


def utcnow():
    """Return current UTC datetime."""
    return datetime.now(timezone.utc)


class FavoriteSource(Base):
    """A news source marked as preferred by the owner of a News API key."""

    __tablename__ = "favorite_sources"
    __table_args__ = (
        UniqueConstraint(
            "news_api_key",
            "source_id",
            name="uq_favorite_sources_news_api_key_source_id",
        ),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    news_api_key: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        index=True,
        doc=(
            "Opaque key issued by the news provider.  It doubles as the owner"
            " identifier, so listing queries filter on it."
        ),
    )
    source_id: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        doc="Provider-assigned source identifier such as ``bbc-news``.",
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )

    def __repr__(self) -> str:
        return (
            f"FavoriteSource(id={self.id!r}, news_api_key={self.news_api_key!r},"
            f" source_id={self.source_id!r})"
        )


__all__ = ["Base", "FavoriteSource", "utcnow"]
