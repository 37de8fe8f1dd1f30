"""User aggregate and its categorical attributes."""

from __future__ import annotations

from datetime import date
from enum import Enum
from uuid import UUID

from .aggregate import AggregateRoot


class Gender(str, Enum):
    MALE = "MALE"
    FEMALE = "FEMALE"


class UserType(str, Enum):
    T1 = "T1"
    T2 = "T2"
    T3 = "T3"


class User(AggregateRoot[UUID]):
    """A directory entry.

    ``enabled`` is the soft-delete marker. It is not a search criterion:
    searches always restrict to enabled users, and the only way to hide a
    user is :meth:`disable`.
    """

    name: str
    email: str
    birthdate: date
    gender: Gender
    type: UserType
    enabled: bool = True

    def disable(self) -> None:
        """Soft-delete the user."""
        self.enabled = False
