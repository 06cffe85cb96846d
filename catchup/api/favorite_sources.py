"""FastAPI router exposing the favorite sources resource."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response, status

from catchup.schemas.favorite_sources import (
    CreateFavoriteSourceResource,
    FavoriteSourceResource,
)
from catchup.services.dependencies import (
    get_favorite_source_command_service,
    get_favorite_source_query_service,
)
from catchup.services.favorite_sources import (
    FavoriteSourceCommandServiceProtocol,
    FavoriteSourceQueryServiceProtocol,
    GetAllFavoriteSourcesByNewsApiKeyQuery,
    GetFavoriteSourceByIdQuery,
    GetFavoriteSourceByNewsApiKeyAndSourceIdQuery,
    create_command_from_resource,
    resource_from_entity,
    resources_from_entities,
)

logger = logging.getLogger(__name__)

router = APIRouter()

_NOT_FOUND_DETAIL = "Favorite source not found"


@router.get(
    "/{favorite_source_id}",
    response_model=FavoriteSourceResource,
    summary="Get Favorite Source by ID",
    description="Get a Favorite Source Resource by given ID",
    operation_id="GetFavoriteSourceById",
    responses={
        status.HTTP_200_OK: {"description": "The Favorite Source Resource was found"},
        status.HTTP_404_NOT_FOUND: {"description": "The Favorite Source Resource was not found"},
    },
)
async def get_favorite_source_by_id(
    favorite_source_id: int,
    query_service: FavoriteSourceQueryServiceProtocol = Depends(
        get_favorite_source_query_service
    ),
) -> FavoriteSourceResource:
    """Return the favorite source with the identifier assigned by this API."""

    entity = await query_service.handle_get_by_id(
        GetFavoriteSourceByIdQuery(favorite_source_id=favorite_source_id)
    )
    if entity is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=_NOT_FOUND_DETAIL)
    return resource_from_entity(entity)


@router.post(
    "",
    response_model=FavoriteSourceResource,
    status_code=status.HTTP_201_CREATED,
    summary="Create Favorite Source",
    description="Create a Favorite Source with the given news API key and source ID",
    operation_id="CreateFavoriteSource",
    responses={
        status.HTTP_201_CREATED: {"description": "The Favorite Source was created"},
        status.HTTP_400_BAD_REQUEST: {"description": "The Favorite Source was not created"},
    },
)
async def create_favorite_source(
    resource: CreateFavoriteSourceResource,
    request: Request,
    response: Response,
    command_service: FavoriteSourceCommandServiceProtocol = Depends(
        get_favorite_source_command_service
    ),
) -> FavoriteSourceResource | Response:
    """Persist a favorite source and point ``Location`` at its detail URL."""

    entity = await command_service.handle(create_command_from_resource(resource))
    if entity is None:
        logger.info("Favorite source %r was not created", resource.source_id)
        return Response(status_code=status.HTTP_400_BAD_REQUEST)

    response.headers["Location"] = str(
        request.url_for("get_favorite_source_by_id", favorite_source_id=entity.id)
    )
    return resource_from_entity(entity)


async def _get_all_favorite_sources_by_news_api_key(
    query_service: FavoriteSourceQueryServiceProtocol, news_api_key: str
) -> list[FavoriteSourceResource]:
    entities = await query_service.handle_get_all_by_news_api_key(
        GetAllFavoriteSourcesByNewsApiKeyQuery(news_api_key=news_api_key)
    )
    return resources_from_entities(entities)


async def _get_favorite_source_by_news_api_key_and_source_id(
    query_service: FavoriteSourceQueryServiceProtocol,
    news_api_key: str,
    source_id: str,
) -> FavoriteSourceResource:
    entity = await query_service.handle_get_by_news_api_key_and_source_id(
        GetFavoriteSourceByNewsApiKeyAndSourceIdQuery(
            news_api_key=news_api_key, source_id=source_id
        )
    )
    if entity is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=_NOT_FOUND_DETAIL)
    return resource_from_entity(entity)


@router.get(
    "",
    response_model=FavoriteSourceResource | list[FavoriteSourceResource],
    summary="Get Favorite Source(s) according to the query parameters",
    description=(
        "Returns the favorite source matching both the news API key and the source ID"
        " when ``sourceId`` is supplied, otherwise every favorite source registered"
        " for the news API key."
    ),
    operation_id="GetFavoriteSourceFromQuery",
    responses={
        status.HTTP_200_OK: {"description": "The Favorite Source(s) were found"},
        status.HTTP_404_NOT_FOUND: {
            "description": "No favorite source matches the news API key and source ID"
        },
    },
)
async def get_favorite_source_from_query(
    news_api_key: str = Query(
        ...,
        alias="newsApiKey",
        description="The news API key generated by the news service provider",
    ),
    source_id: str | None = Query(
        None,
        alias="sourceId",
        description="The source ID from the news service provider",
    ),
    query_service: FavoriteSourceQueryServiceProtocol = Depends(
        get_favorite_source_query_service
    ),
) -> FavoriteSourceResource | list[FavoriteSourceResource]:
    """Dispatch on ``sourceId``: empty lists by key, non-empty looks up one source."""

    if not source_id:
        return await _get_all_favorite_sources_by_news_api_key(query_service, news_api_key)
    return await _get_favorite_source_by_news_api_key_and_source_id(
        query_service, news_api_key, source_id
    )
