"""In-memory adapters."""

from __future__ import annotations

from .repository import InMemoryRepository

__all__ = ["InMemoryRepository"]
