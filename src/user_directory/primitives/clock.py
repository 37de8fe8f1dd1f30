"""Injectable time sources.

Relative-date criteria (e.g. "older than N years") read the current date
through an ``IClock`` so that they stay deterministic under test.
"""

from __future__ import annotations

from datetime import date, datetime, timezone, tzinfo
from typing import Protocol


class IClock(Protocol):
    """Protocol for time sources."""

    def now(self) -> datetime:
        """Return the current instant as a timezone-aware datetime."""
        ...

    def today(self) -> date:
        """Return the current calendar date in the clock's zone."""
        ...


class SystemClock(IClock):
    """Wall clock, UTC by default."""

    def __init__(self, zone: tzinfo = timezone.utc) -> None:
        self._zone = zone

    def now(self) -> datetime:
        return datetime.now(self._zone)

    def today(self) -> date:
        return self.now().date()


class FixedClock(IClock):
    """Clock frozen at a single instant.

    Naive instants are interpreted as UTC.
    """

    def __init__(self, instant: datetime, zone: tzinfo = timezone.utc) -> None:
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=timezone.utc)
        self._instant = instant.astimezone(zone)

    @classmethod
    def parse(cls, text: str, zone: tzinfo = timezone.utc) -> FixedClock:
        """Build a clock from an ISO-8601 instant (``Z`` suffix accepted)."""
        return cls(datetime.fromisoformat(text.replace("Z", "+00:00")), zone)

    def now(self) -> datetime:
        return self._instant

    def today(self) -> date:
        return self._instant.date()
