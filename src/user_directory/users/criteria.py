"""The search criteria bundle."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from ..domain.user import Gender, UserType
from ..primitives.exceptions import ValidationError


class SearchUsersCriteria(BaseModel):
    """
    Optional search criteria. ``None`` means "not given" for every field.

    Attributes:
        name: Substring the user's name must contain.
        older_than: Minimum age in whole years (strictly older).
        types: Accepted user types; empty is the same as ``None``.
        gender: Exact gender.
    """

    model_config = ConfigDict(frozen=True)

    name: str | None = None
    older_than: int | None = Field(default=None, ge=0)
    types: frozenset[UserType] | None = None
    gender: Gender | None = None

    @field_validator("types", mode="before")
    @classmethod
    def _split_types(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [part.strip() for part in value.split(",") if part.strip()]
        return value

    @classmethod
    def from_params(cls, params: Mapping[str, Any]) -> SearchUsersCriteria:
        """
        Bind raw query parameters.

        ``types`` may be repeated (a list) or comma-separated. Keys that are
        missing stay ``None``; an empty string for ``name`` is kept as a
        real (match-everything) needle.

        Raises:
            ValidationError: with one entry per malformed field.
        """
        data = {
            key: params[key]
            for key in ("name", "older_than", "types", "gender")
            if key in params and params[key] is not None
        }
        try:
            return cls.model_validate(data)
        except PydanticValidationError as exc:
            errors: dict[str, list[str]] = {}
            for error in exc.errors():
                loc = str(error.get("loc", ("__root__",))[0])
                errors.setdefault(loc, []).append(error.get("msg", "invalid value"))
            raise ValidationError(errors) from exc
