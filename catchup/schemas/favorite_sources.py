"""Pydantic schemas that power the favorite sources API surface.

JSON payloads use camelCase field names (``newsApiKey``, ``sourceId``) so the
resources match what the news front-end already sends; snake_case names are
accepted on input as well.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class CreateFavoriteSourceResource(_CamelModel):
    """Payload for marking a news source as a favorite."""

    news_api_key: str = Field(
        ...,
        max_length=255,
        description="The news API key generated by the news provider.",
    )
    source_id: str = Field(
        ...,
        max_length=255,
        description="The news provider source ID, e.g. ``bbc-news``.",
    )


class FavoriteSourceResource(_CamelModel):
    """Read model exposed in API responses."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        json_schema_extra={
            "example": {"id": 1, "newsApiKey": "abc123", "sourceId": "bbc-news"}
        },
    )

    id: int = Field(..., description="The favorite source ID generated by this API.")
    news_api_key: str = Field(..., description="The news API key generated by the news provider.")
    source_id: str = Field(..., description="The news provider source ID.")


__all__ = ["CreateFavoriteSourceResource", "FavoriteSourceResource"]
