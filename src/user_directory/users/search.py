"""The user search entry point."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..config import SearchSettings
from ..executor import PagedQueryExecutor
from ..pagination import PageRequest
from ..primitives.clock import SystemClock
from .dto import UserDto
from .specifications import build_search_specification

if TYPE_CHECKING:
    from ..domain.user import User
    from ..pagination import Page
    from ..primitives.clock import IClock
    from .criteria import SearchUsersCriteria
    from .repositories import IUserRepository

logger = logging.getLogger("user_directory.search")


class UserSearchService:
    """
    Compose criteria into a specification, run it paged, project to DTOs.

    Searches only ever see enabled users; no criterion can lift that.

    Page sizes above ``settings.max_page_size`` raise
    :class:`InvalidPageRequestError`, whatever bound the request carries.
    """

    def __init__(
        self,
        repository: IUserRepository,
        clock: IClock | None = None,
        settings: SearchSettings | None = None,
    ) -> None:
        self._clock = clock or SystemClock()
        self._settings = settings or SearchSettings()
        self._executor: PagedQueryExecutor[User, UserDto] = PagedQueryExecutor(
            repository, UserDto.from_entity
        )

    @property
    def settings(self) -> SearchSettings:
        return self._settings

    async def search(
        self,
        criteria: SearchUsersCriteria,
        page_request: PageRequest | None = None,
    ) -> Page[UserDto]:
        if page_request is None:
            page_request = PageRequest.of(settings=self._settings)
        else:
            # Re-check against this service's bound, not the request's own.
            page_request = PageRequest.of(
                page_request.page, page_request.size, settings=self._settings
            )
        specification = build_search_specification(criteria, self._clock)
        logger.debug("Searching users with %r", criteria)
        return await self._executor.execute(specification, page_request)
