"""Read-side messages."""

from __future__ import annotations

from uuid import UUID

from ..cqrs.query import Query
from ..pagination import Page, PageRequest
from .criteria import SearchUsersCriteria
from .dto import UserDto


class GetUserQuery(Query[UserDto]):
    user_id: UUID


class SearchUsersQuery(Query[Page[UserDto]]):
    criteria: SearchUsersCriteria = SearchUsersCriteria()
    page_request: PageRequest | None = None
