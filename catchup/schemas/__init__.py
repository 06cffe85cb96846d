"""Pydantic schemas for API requests and responses."""

from catchup.schemas.favorite_sources import (  # noqa: F401
    CreateFavoriteSourceResource,
    FavoriteSourceResource,
)
