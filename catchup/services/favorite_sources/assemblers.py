"""Stateless conversions between API resources, commands and ORM entities."""

from __future__ import annotations

from collections.abc import Iterable

from catchup.db.models import FavoriteSource
from catchup.schemas.favorite_sources import (
    CreateFavoriteSourceResource,
    FavoriteSourceResource,
)
from catchup.services.favorite_sources.commands import CreateFavoriteSourceCommand


def create_command_from_resource(
    resource: CreateFavoriteSourceResource,
) -> CreateFavoriteSourceCommand:
    return CreateFavoriteSourceCommand(
        news_api_key=resource.news_api_key,
        source_id=resource.source_id,
    )


def resource_from_entity(entity: FavoriteSource) -> FavoriteSourceResource:
    return FavoriteSourceResource(
        id=entity.id,
        news_api_key=entity.news_api_key,
        source_id=entity.source_id,
    )


def resources_from_entities(entities: Iterable[FavoriteSource]) -> list[FavoriteSourceResource]:
    return [resource_from_entity(entity) for entity in entities]


__all__ = [
    "create_command_from_resource",
    "resource_from_entity",
    "resources_from_entities",
]
