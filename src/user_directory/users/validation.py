"""
Validation of raw create-user payloads.

Presence is checked first, one ``"<Field> is mandatory"`` message per
missing field. Whatever is present is then validated by the
``CreateUserCommand`` model itself and its errors are folded into the same
``{field: [messages]}`` map.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from ..primitives.exceptions import ValidationError
from .dto import CreateUserCommand

_MANDATORY = {
    "name": "Name is mandatory",
    "email": "Email is mandatory",
    "birthdate": "Birthdate is mandatory",
    "gender": "Gender is mandatory",
    "type": "Type is mandatory",
}


def validate_create_user(data: Mapping[str, Any]) -> CreateUserCommand:
    """
    Turn a raw payload into a ``CreateUserCommand``.

    Raises:
        ValidationError: with every problem found, keyed by field.
    """
    errors: dict[str, list[str]] = {}
    for field, message in _MANDATORY.items():
        if data.get(field) is None:
            errors.setdefault(field, []).append(message)

    present = {k: v for k, v in data.items() if k in _MANDATORY and v is not None}
    try:
        command = CreateUserCommand.model_validate(present)
    except PydanticValidationError as exc:
        for error in exc.errors():
            loc = str(error.get("loc", ("__root__",))[0])
            if error.get("type") == "missing":
                continue
            errors.setdefault(loc, []).append(_message(error))
    else:
        if not errors:
            return command

    raise ValidationError(errors)


def _message(error: Any) -> str:
    if error.get("type") == "value_error":
        return str(error["ctx"]["error"])
    return str(error.get("msg", "invalid value"))
