"""Users: criteria, predicates, search service and handlers."""

from __future__ import annotations

from .criteria import SearchUsersCriteria
from .dto import CreateUserCommand, UserDto
from .handlers import CreateUserHandler, GetUserHandler, SearchUsersHandler
from .queries import GetUserQuery, SearchUsersQuery
from .repositories import (
    InMemoryUserRepository,
    IUserRepository,
    SQLAlchemyUserRepository,
)
from .search import UserSearchService
from .specifications import (
    build_search_specification,
    gender_equals,
    is_enabled,
    name_like,
    older_than,
    type_in,
)
from .validation import validate_create_user

__all__ = [
    "CreateUserCommand",
    "CreateUserHandler",
    "GetUserHandler",
    "GetUserQuery",
    "InMemoryUserRepository",
    "IUserRepository",
    "SQLAlchemyUserRepository",
    "SearchUsersCriteria",
    "SearchUsersHandler",
    "SearchUsersQuery",
    "UserDto",
    "UserSearchService",
    "build_search_specification",
    "gender_equals",
    "is_enabled",
    "name_like",
    "older_than",
    "type_in",
    "validate_create_user",
]
