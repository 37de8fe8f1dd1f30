"""Relational schema for the user directory."""

from __future__ import annotations

from datetime import date
from uuid import UUID

from sqlalchemy import Boolean, Date, Enum, String, Uuid
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from ..domain.user import Gender, UserType


class Base(DeclarativeBase):
    pass


class UserModel(Base):
    __tablename__ = "users"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    name: Mapped[str] = mapped_column(String(255))
    email: Mapped[str] = mapped_column(String(255))
    birthdate: Mapped[date] = mapped_column(Date)
    gender: Mapped[Gender] = mapped_column(
        Enum(Gender, native_enum=False, length=16)
    )
    type: Mapped[UserType] = mapped_column(
        Enum(UserType, native_enum=False, length=16)
    )
    enabled: Mapped[bool] = mapped_column(Boolean, default=True, index=True)
