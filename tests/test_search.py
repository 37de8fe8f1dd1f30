"""End-to-end search scenarios over both backing stores."""

from __future__ import annotations

import logging

import pytest

from conftest import ENABLED_IDS, JAMES, JANE, JOHN, MICHAEL
from user_directory.config import SearchSettings
from user_directory.domain.user import Gender, UserType
from user_directory.pagination import PageRequest
from user_directory.primitives.exceptions import InvalidPageRequestError
from user_directory.users import (
    SearchUsersCriteria,
    UserDto,
    UserSearchService,
    build_search_specification,
)


@pytest.fixture
def service(user_repo, clock) -> UserSearchService:
    return UserSearchService(user_repo, clock=clock)


@pytest.mark.parametrize(
    ("criteria", "expected"),
    [
        (SearchUsersCriteria(), 6),
        (SearchUsersCriteria(name="J"), 3),
        (SearchUsersCriteria(name="J", gender=Gender.MALE), 2),
        (
            SearchUsersCriteria(
                name="J", gender=Gender.MALE, types=frozenset({UserType.T1})
            ),
            2,
        ),
        (
            SearchUsersCriteria(
                name="J",
                gender=Gender.MALE,
                types=frozenset({UserType.T1}),
                older_than=34,
            ),
            1,
        ),
    ],
)
async def test_narrowing_criteria(service, criteria, expected) -> None:
    page = await service.search(criteria, PageRequest())
    assert page.total_count == expected
    assert len(page.results) == expected


async def test_all_filters_find_john(service) -> None:
    criteria = SearchUsersCriteria(
        name="J", gender=Gender.MALE, types=frozenset({UserType.T1}), older_than=34
    )
    page = await service.search(criteria)
    assert [dto.id for dto in page.results] == [JOHN]
    assert isinstance(page.results[0], UserDto)
    assert page.results[0].name == "John Doe"


async def test_default_page_holds_all_matches(service) -> None:
    page = await service.search(SearchUsersCriteria(name="J"))
    assert page.page_size == 100
    assert page.page_number == 0
    assert [dto.id for dto in page.results] == sorted([JOHN, JANE, JAMES])


async def test_size_one_pages_through_in_id_order(service) -> None:
    criteria = SearchUsersCriteria()
    first = await service.search(criteria, PageRequest(page=0, size=1))
    second = await service.search(criteria, PageRequest(page=1, size=1))
    assert [dto.id for dto in first.results] == [JOHN]
    assert [dto.id for dto in second.results] == [MICHAEL]
    assert first.total_count == second.total_count == 6
    assert first.total_pages == 6


async def test_every_page_together_covers_all_matches(service) -> None:
    seen = []
    request = PageRequest(page=0, size=4)
    while True:
        page = await service.search(SearchUsersCriteria(), request)
        if page.is_empty:
            break
        seen.extend(dto.id for dto in page.results)
        request = request.next()
    assert seen == ENABLED_IDS


async def test_page_beyond_last_is_empty_with_filtered_total(service) -> None:
    page = await service.search(SearchUsersCriteria(name="J"), PageRequest(5, 2))
    assert page.results == ()
    assert page.total_count == 3


async def test_disabled_users_are_never_returned(service) -> None:
    # Mary Johnson, Alice Green and friends are disabled.
    for criteria in (
        SearchUsersCriteria(name="ohn"),
        SearchUsersCriteria(name="li"),
        SearchUsersCriteria(gender=Gender.FEMALE),
        SearchUsersCriteria(types=frozenset({UserType.T2, UserType.T3})),
    ):
        page = await service.search(criteria)
        assert set(dto.id for dto in page.results) <= set(ENABLED_IDS)


async def test_empty_type_set_is_no_constraint(service) -> None:
    empty = await service.search(SearchUsersCriteria(types=frozenset()))
    absent = await service.search(SearchUsersCriteria())
    assert empty == absent


async def test_older_than_fifty_matches_nobody(service) -> None:
    page = await service.search(SearchUsersCriteria(older_than=50))
    assert page.total_count == 0


async def test_older_than_beyond_calendar_is_an_empty_page(service) -> None:
    page = await service.search(SearchUsersCriteria(older_than=2100), PageRequest())
    assert page.total_count == 0
    assert page.results == ()


async def test_results_exclude_visibility_flag(service) -> None:
    page = await service.search(SearchUsersCriteria(name="Jane"))
    assert "enabled" not in page.results[0].model_dump()
    assert page.to_dict()["results"][0]["birthdate"] == "1998-09-30"


async def test_search_defaults_come_from_settings(user_repo, clock) -> None:
    settings = SearchSettings(default_page_size=2, max_page_size=10)
    service = UserSearchService(user_repo, clock=clock, settings=settings)
    page = await service.search(SearchUsersCriteria())
    assert page.page_size == 2
    assert len(page.results) == 2
    assert page.total_count == 6


async def test_search_enforces_service_max_page_size(user_repo, clock) -> None:
    settings = SearchSettings(default_page_size=2, max_page_size=3)
    service = UserSearchService(user_repo, clock=clock, settings=settings)
    with pytest.raises(InvalidPageRequestError) as exc_info:
        await service.search(SearchUsersCriteria(), PageRequest(size=500))
    assert "size" in exc_info.value.errors

    page = await service.search(SearchUsersCriteria(), PageRequest(page=1, size=3))
    assert (page.page_size, page.page_number) == (3, 1)
    assert len(page.results) == 3


async def test_search_logs_outcome(service, caplog) -> None:
    with caplog.at_level(logging.DEBUG, logger="user_directory.search"):
        await service.search(SearchUsersCriteria(name="J"))
    messages = [r.getMessage() for r in caplog.records]
    assert any("'attr': 'name'" in m for m in messages)
    assert any("Search returned 3 of 3" in m for m in messages)


def test_specification_is_visibility_only_without_criteria(clock) -> None:
    spec = build_search_specification(SearchUsersCriteria(), clock)
    assert spec.to_dict() == {"op": "=", "attr": "enabled", "val": True}
