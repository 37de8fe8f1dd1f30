"""Command and query handlers for users."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..cqrs.handler import CommandHandler, QueryHandler
from ..cqrs.response import CommandResponse, QueryResponse
from ..domain.user import User
from ..pagination import Page
from ..primitives.exceptions import EntityNotFoundError
from ..primitives.id_generator import UUID4Generator
from .dto import UserDto

if TYPE_CHECKING:
    from ..primitives.id_generator import IIDGenerator
    from .dto import CreateUserCommand
    from .queries import GetUserQuery, SearchUsersQuery
    from .repositories import IUserRepository
    from .search import UserSearchService

logger = logging.getLogger(__name__)


class CreateUserHandler(CommandHandler[UserDto]):
    """Store a new, enabled user under a freshly generated id."""

    def __init__(
        self,
        repository: IUserRepository,
        id_generator: IIDGenerator | None = None,
    ) -> None:
        self._repository = repository
        self._id_generator = id_generator or UUID4Generator()

    async def handle(  # type: ignore[override]
        self, command: CreateUserCommand
    ) -> CommandResponse[UserDto]:
        user = User(
            id_generator=self._id_generator,
            name=command.name,
            email=command.email,
            birthdate=command.birthdate,
            gender=command.gender,
            type=command.type,
        )
        logger.info("Creating user %s", user.id)
        try:
            await self._repository.add(user)
        except Exception:
            logger.exception("Failed to create user %s", user.id)
            raise
        return CommandResponse(
            result=UserDto.from_entity(user),
            correlation_id=command.correlation_id,
            causation_id=command.command_id,
        )


class GetUserHandler(QueryHandler[UserDto]):
    """Fetch one user by id. Disabled users are reported as not found."""

    def __init__(self, repository: IUserRepository) -> None:
        self._repository = repository

    async def handle(  # type: ignore[override]
        self, query: GetUserQuery
    ) -> QueryResponse[UserDto]:
        logger.debug("Fetching user %s", query.user_id)
        user = await self._repository.get(query.user_id)
        if user is None or not user.enabled:
            logger.info("User %s not found", query.user_id)
            raise EntityNotFoundError("User", query.user_id)
        return QueryResponse(
            result=UserDto.from_entity(user),
            correlation_id=query.correlation_id,
            causation_id=query.query_id,
        )


class SearchUsersHandler(QueryHandler[Page[UserDto]]):
    def __init__(self, service: UserSearchService) -> None:
        self._service = service

    async def handle(  # type: ignore[override]
        self, query: SearchUsersQuery
    ) -> QueryResponse[Page[UserDto]]:
        logger.info("Handling SearchUsersQuery %s", query.query_id)
        try:
            page = await self._service.search(query.criteria, query.page_request)
        except Exception:
            logger.exception("Search %s failed", query.query_id)
            raise
        return QueryResponse(
            result=page,
            correlation_id=query.correlation_id,
            causation_id=query.query_id,
        )
