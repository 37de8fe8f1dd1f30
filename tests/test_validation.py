from __future__ import annotations

from datetime import date

import pytest

from user_directory.domain.user import Gender, UserType
from user_directory.primitives.exceptions import ValidationError
from user_directory.users import SearchUsersCriteria, validate_create_user


@pytest.fixture
def payload() -> dict[str, object]:
    return {
        "name": "Nina Patel",
        "email": "nina.patel@example.com",
        "birthdate": "1990-06-01",
        "gender": "FEMALE",
        "type": "T2",
    }


def test_valid_payload_builds_command(payload) -> None:
    command = validate_create_user(payload)
    assert command.birthdate == date(1990, 6, 1)
    assert command.gender is Gender.FEMALE
    assert command.type is UserType.T2


@pytest.mark.parametrize(
    ("field", "message"),
    [
        ("name", "Name is mandatory"),
        ("email", "Email is mandatory"),
        ("birthdate", "Birthdate is mandatory"),
        ("gender", "Gender is mandatory"),
        ("type", "Type is mandatory"),
    ],
)
def test_missing_field_is_reported(payload, field, message) -> None:
    del payload[field]
    with pytest.raises(ValidationError) as exc_info:
        validate_create_user(payload)
    assert exc_info.value.errors == {field: [message]}


def test_null_counts_as_missing(payload) -> None:
    payload["name"] = None
    with pytest.raises(ValidationError) as exc_info:
        validate_create_user(payload)
    assert exc_info.value.messages == ["Name is mandatory"]


def test_invalid_email(payload) -> None:
    payload["email"] = "not-an-email"
    with pytest.raises(ValidationError) as exc_info:
        validate_create_user(payload)
    assert exc_info.value.errors == {"email": ["Invalid email format"]}


def test_errors_are_collected_across_fields(payload) -> None:
    del payload["name"]
    payload["email"] = "nope"
    payload["gender"] = "OTHER"
    with pytest.raises(ValidationError) as exc_info:
        validate_create_user(payload)
    errors = exc_info.value.errors
    assert errors["name"] == ["Name is mandatory"]
    assert errors["email"] == ["Invalid email format"]
    assert "gender" in errors


def test_unknown_keys_are_ignored(payload) -> None:
    payload["enabled"] = False
    command = validate_create_user(payload)
    assert not hasattr(command, "enabled")


# -- SearchUsersCriteria.from_params --------------------------------------------


def test_criteria_from_empty_params_is_all_absent() -> None:
    criteria = SearchUsersCriteria.from_params({})
    assert criteria == SearchUsersCriteria()
    assert criteria.name is None
    assert criteria.types is None


def test_criteria_from_params_parses_values() -> None:
    criteria = SearchUsersCriteria.from_params(
        {"name": "J", "older_than": "34", "types": "T1,T3", "gender": "MALE"}
    )
    assert criteria.name == "J"
    assert criteria.older_than == 34
    assert criteria.types == frozenset({UserType.T1, UserType.T3})
    assert criteria.gender is Gender.MALE


def test_criteria_accepts_repeated_types() -> None:
    criteria = SearchUsersCriteria.from_params({"types": ["T2", "T2"]})
    assert criteria.types == frozenset({UserType.T2})


def test_criteria_keeps_empty_name() -> None:
    assert SearchUsersCriteria.from_params({"name": ""}).name == ""


def test_criteria_rejects_malformed_values() -> None:
    with pytest.raises(ValidationError) as exc_info:
        SearchUsersCriteria.from_params({"older_than": "old", "gender": "X"})
    assert set(exc_info.value.errors) == {"older_than", "gender"}


def test_criteria_is_immutable_value() -> None:
    a = SearchUsersCriteria(name="J", types=frozenset({UserType.T1}))
    b = SearchUsersCriteria(name="J", types=frozenset({UserType.T1}))
    assert a == b
    assert hash(a) == hash(b)
    with pytest.raises(Exception, match="frozen"):
        a.name = "K"  # type: ignore[misc]
