"""Engine construction helpers."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from .models import Base

logger = logging.getLogger(__name__)


def create_engine(url: str, **kwargs: Any) -> AsyncEngine:
    """
    Create an ``AsyncEngine`` for *url*.

    SQLite's ``LIKE`` ignores ASCII case unless told otherwise; every new
    SQLite connection is switched to case-sensitive ``LIKE`` so substring
    search behaves the same as the in-memory evaluator. Other backends keep
    the semantics of their column collation.
    """
    engine = create_async_engine(url, **kwargs)
    if engine.dialect.name == "sqlite":
        event.listen(engine.sync_engine, "connect", _sqlite_case_sensitive_like)
    return engine


def _sqlite_case_sensitive_like(dbapi_connection: Any, _record: Any) -> None:
    cursor = dbapi_connection.cursor()
    try:
        cursor.execute("PRAGMA case_sensitive_like = ON")
    finally:
        cursor.close()


async def create_schema(engine: AsyncEngine) -> None:
    """Create all tables (idempotent)."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Schema ready on %s", engine.url.render_as_string(hide_password=True))
