"""Ports: repository and unit-of-work contracts."""

from __future__ import annotations

from .repository import IRepository
from .unit_of_work import UnitOfWork

__all__ = [
    "IRepository",
    "UnitOfWork",
]
