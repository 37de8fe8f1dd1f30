"""Primitives: exceptions, ID generation, clocks."""

from __future__ import annotations

from .clock import FixedClock, IClock, SystemClock
from .exceptions import (
    DomainError,
    EntityNotFoundError,
    InfrastructureError,
    InvalidPageRequestError,
    NotFoundError,
    PersistenceError,
    QueryExecutionError,
    StoreUnavailableError,
    UserDirectoryError,
    ValidationError,
)
from .id_generator import IIDGenerator, UUID4Generator

__all__ = [
    "DomainError",
    "EntityNotFoundError",
    "FixedClock",
    "IClock",
    "IIDGenerator",
    "InfrastructureError",
    "InvalidPageRequestError",
    "NotFoundError",
    "PersistenceError",
    "QueryExecutionError",
    "StoreUnavailableError",
    "SystemClock",
    "UUID4Generator",
    "UserDirectoryError",
    "ValidationError",
]
