from __future__ import annotations

import pytest
from pydantic import ValidationError as PydanticValidationError

from user_directory.config import SearchSettings
from user_directory.pagination import Page, PageRequest, PageRequestParser
from user_directory.primitives.exceptions import (
    InvalidPageRequestError,
    ValidationError,
)


# -- PageRequest -------------------------------------------------------------


def test_defaults() -> None:
    request = PageRequest()
    assert (request.page, request.size) == (0, 100)
    assert (request.offset, request.limit) == (0, 100)


def test_offset_and_next() -> None:
    request = PageRequest(page=2, size=10)
    assert request.offset == 20
    assert request.next() == PageRequest(page=3, size=10)


@pytest.mark.parametrize(
    ("page", "size", "field"),
    [(-1, 10, "page"), (0, 0, "size"), (0, -5, "size"), (0, 1001, "size")],
)
def test_invalid_requests_are_rejected(page, size, field) -> None:
    with pytest.raises(InvalidPageRequestError) as exc_info:
        PageRequest(page=page, size=size)
    assert field in exc_info.value.errors
    assert isinstance(exc_info.value, ValidationError)


def test_of_uses_settings() -> None:
    settings = SearchSettings(default_page_size=5, max_page_size=20)
    assert PageRequest.of(settings=settings).size == 5
    with pytest.raises(InvalidPageRequestError):
        PageRequest.of(0, 21, settings=settings)


# -- Page ----------------------------------------------------------------------


def test_page_fields_and_totals() -> None:
    page = Page.of(["a", "b"], PageRequest(page=1, size=2), total_count=5)
    assert page.results == ("a", "b")
    assert page.page_size == 2
    assert page.page_number == 1
    assert page.total_count == 5
    assert page.total_pages == 3
    assert not page.is_empty


def test_page_map_keeps_envelope() -> None:
    page = Page.of([1, 2], PageRequest(size=2), total_count=9).map(str)
    assert page.results == ("1", "2")
    assert (page.page_size, page.page_number, page.total_count) == (2, 0, 9)


def test_page_to_dict_key_order() -> None:
    data = Page.of([], PageRequest(page=4, size=3), total_count=2).to_dict()
    assert list(data) == ["results", "page_size", "page_number", "total_count"]
    assert data["results"] == []


# -- PageRequestParser -----------------------------------------------------------


def test_parser_defaults_when_absent() -> None:
    assert PageRequestParser().parse({}) == PageRequest(page=0, size=100)


def test_parser_reads_strings() -> None:
    assert PageRequestParser().parse({"page": "3", "size": "25"}) == PageRequest(3, 25)


def test_parser_clamps_and_falls_back() -> None:
    parser = PageRequestParser(SearchSettings(default_page_size=10, max_page_size=50))
    assert parser.parse({"page": "-4", "size": "500"}) == PageRequest(0, 50, 50)
    assert parser.parse({"page": "x", "size": "0"}) == PageRequest(0, 1, 50)
    assert parser.parse({"size": "abc"}).size == 10


# -- SearchSettings ------------------------------------------------------------


def test_settings_reject_default_above_max() -> None:
    with pytest.raises(PydanticValidationError):
        SearchSettings(default_page_size=200, max_page_size=100)


def test_settings_are_frozen() -> None:
    settings = SearchSettings()
    with pytest.raises(PydanticValidationError):
        settings.max_page_size = 5  # type: ignore[misc]
