"""Repository package for the database access layer."""

from catchup.db.repositories.favorite_source_repository import FavoriteSourceRepository

__all__ = ["FavoriteSourceRepository"]
