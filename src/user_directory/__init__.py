"""
user-directory: a user store with composable, specification-based search.

Search entry point::

    service = UserSearchService(repository, clock=SystemClock())
    page = await service.search(
        SearchUsersCriteria(name="J", older_than=34),
        PageRequest(page=0, size=20),
    )
"""

from __future__ import annotations

from .config import SearchSettings
from .pagination import Page, PageRequest, PageRequestParser
from .primitives.clock import FixedClock, SystemClock
from .users import SearchUsersCriteria, UserDto, UserSearchService

__version__ = "0.1.0"

__all__ = [
    "FixedClock",
    "Page",
    "PageRequest",
    "PageRequestParser",
    "SearchSettings",
    "SearchUsersCriteria",
    "SystemClock",
    "UserDto",
    "UserSearchService",
    "__version__",
]
