"""Favorite sources domain components split by responsibility.

Commands and queries are plain immutable request objects.  The command service
owns the write path (validation, duplicate detection, persistence), the query
service owns lookups, and the assemblers convert between ORM entities and API
resources.
"""

from .assemblers import (
    create_command_from_resource,
    resource_from_entity,
    resources_from_entities,
)
from .command_service import FavoriteSourceCommandService
from .commands import CreateFavoriteSourceCommand
from .interfaces import (
    FavoriteSourceCommandServiceProtocol,
    FavoriteSourceQueryServiceProtocol,
    FavoriteSourceRepositoryProtocol,
)
from .queries import (
    GetAllFavoriteSourcesByNewsApiKeyQuery,
    GetFavoriteSourceByIdQuery,
    GetFavoriteSourceByNewsApiKeyAndSourceIdQuery,
)
from .query_service import FavoriteSourceQueryService

__all__ = [
    "CreateFavoriteSourceCommand",
    "FavoriteSourceCommandService",
    "FavoriteSourceCommandServiceProtocol",
    "FavoriteSourceQueryService",
    "FavoriteSourceQueryServiceProtocol",
    "FavoriteSourceRepositoryProtocol",
    "GetAllFavoriteSourcesByNewsApiKeyQuery",
    "GetFavoriteSourceByIdQuery",
    "GetFavoriteSourceByNewsApiKeyAndSourceIdQuery",
    "create_command_from_resource",
    "resource_from_entity",
    "resources_from_entities",
]
