"""Shared fixtures: a fixed clock, ten seeded users, memory and SQLite stores."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING
from uuid import UUID

import pytest
from sqlalchemy.ext.asyncio import async_sessionmaker
from sqlalchemy.pool import StaticPool

from user_directory.domain.user import Gender, User, UserType
from user_directory.persistence import (
    SQLAlchemyUnitOfWork,
    create_engine,
    create_schema,
)
from user_directory.primitives.clock import FixedClock
from user_directory.specifications import build_default_registry
from user_directory.users import InMemoryUserRepository, SQLAlchemyUserRepository

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

JOHN = UUID("0f5df27d-a862-4fce-b791-c0b92cfd2e28")
MICHAEL = UUID("56a8d4b1-86a4-4dbf-9c29-12ed6d5010d3")
OLIVER = UUID("83d03f79-d5e2-4990-9fbc-c3cd5c6c0172")
JANE = UUID("9c5fbd1e-b6a7-4c3f-b5b3-24c3a9f1c982")
ROBERT = UUID("a4e80f0e-6bfa-4e8f-9e42-48e37837c54f")
JAMES = UUID("cf458c3f-3eac-4f8e-abc6-75215eb8f774")
MARY = UUID("1c1e3abc-14f2-4d6b-9b78-1b86d9fbb2a7")
EMMA = UUID("743c9fdd-1e9c-40c7-87b6-3f21f6fae9ab")
SOPHIA = UUID("ba125b3b-b2ab-4f9b-99f1-93ceee52f781")
ALICE = UUID("d9a63c7f-6a5f-4db7-9b7e-284e9348b5c9")

ENABLED_IDS = sorted([JOHN, MICHAEL, OLIVER, JANE, ROBERT, JAMES])


def _user(
    user_id: UUID,
    name: str,
    birthdate: date,
    gender: Gender,
    user_type: UserType,
    *,
    enabled: bool = True,
) -> User:
    email = name.lower().replace(" ", ".") + "@example.com"
    return User(
        id=user_id,
        name=name,
        email=email,
        birthdate=birthdate,
        gender=gender,
        type=user_type,
        enabled=enabled,
    )


def seed_users() -> list[User]:
    return [
        _user(JOHN, "John Doe", date(1985, 3, 12), Gender.MALE, UserType.T1),
        _user(MICHAEL, "Michael Brown", date(1980, 7, 4), Gender.MALE, UserType.T1),
        _user(OLIVER, "Oliver Smith", date(1995, 5, 5), Gender.MALE, UserType.T3),
        _user(JANE, "Jane Roberts", date(1998, 9, 30), Gender.FEMALE, UserType.T2),
        _user(ROBERT, "Robert Taylor", date(1975, 1, 20), Gender.MALE, UserType.T1),
        _user(JAMES, "James Wilson", date(2000, 2, 14), Gender.MALE, UserType.T1),
        _user(
            MARY, "Mary Johnson", date(1996, 4, 18), Gender.FEMALE, UserType.T2,
            enabled=False,
        ),
        _user(
            EMMA, "Emma White", date(1999, 11, 2), Gender.FEMALE, UserType.T3,
            enabled=False,
        ),
        _user(
            SOPHIA, "Sophia Martin", date(2001, 6, 25), Gender.FEMALE, UserType.T2,
            enabled=False,
        ),
        _user(
            ALICE, "Alice Green", date(1993, 12, 1), Gender.FEMALE, UserType.T3,
            enabled=False,
        ),
    ]


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock.parse("2024-11-23T10:15:30Z")


@pytest.fixture
def registry():
    """Default in-memory operator registry for building specs."""
    return build_default_registry()


@pytest.fixture
def users() -> list[User]:
    return seed_users()


@pytest.fixture
async def memory_repo(users: list[User]) -> InMemoryUserRepository:
    repo = InMemoryUserRepository()
    for user in users:
        await repo.add(user)
    return repo


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    engine = create_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await create_schema(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, expire_on_commit=False)


@pytest.fixture
async def sql_repo(
    session_factory: async_sessionmaker[AsyncSession], users: list[User]
) -> SQLAlchemyUserRepository:
    repo = SQLAlchemyUserRepository(
        lambda: SQLAlchemyUnitOfWork(session_factory=session_factory)
    )
    for user in users:
        await repo.add(user)
    return repo


@pytest.fixture(params=["memory", "sqlalchemy"])
def user_repo(
    request: pytest.FixtureRequest,
    memory_repo: InMemoryUserRepository,
    sql_repo: SQLAlchemyUserRepository,
) -> InMemoryUserRepository | SQLAlchemyUserRepository:
    """Both backing stores, seeded identically."""
    return memory_repo if request.param == "memory" else sql_repo
