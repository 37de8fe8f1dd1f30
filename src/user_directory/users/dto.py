"""Public projections and write payloads for users."""

from __future__ import annotations

import re
from datetime import date
from uuid import UUID

from pydantic import BaseModel, ConfigDict, field_validator

from ..cqrs.command import Command
from ..domain.user import Gender, User, UserType

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+$")


class UserDto(BaseModel):
    """What callers see of a user. The visibility flag is not exposed."""

    model_config = ConfigDict(frozen=True)

    id: UUID
    name: str
    email: str
    birthdate: date
    gender: Gender
    type: UserType

    @classmethod
    def from_entity(cls, user: User) -> UserDto:
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            birthdate=user.birthdate,
            gender=user.gender,
            type=user.type,
        )


class CreateUserCommand(Command[UserDto]):
    name: str
    email: str
    birthdate: date
    gender: Gender
    type: UserType

    @field_validator("email")
    @classmethod
    def _email_format(cls, value: str) -> str:
        # Empty is left to the mandatory check upstream.
        if value and not _EMAIL_RE.match(value):
            raise ValueError("Invalid email format")
        return value
