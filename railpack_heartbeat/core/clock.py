"""Clock abstraction for injectable time source."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Protocol


def to_iso(dt: datetime) -> str:
    """Render *dt* as UTC ISO-8601 with millisecond precision, e.g. ``2024-01-01T00:00:00.000Z``."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class Clock(Protocol):
    def now(self) -> datetime: ...
    def now_iso(self) -> str: ...


class SystemClock:
    """Default implementation: system UTC clock."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)

    def now_iso(self) -> str:
        return to_iso(self.now())


class ManualClock:
    """Clock that only moves when told to. Used with ManualScheduler."""

    def __init__(self, start: datetime | None = None) -> None:
        self._now = start or datetime(2024, 1, 1, tzinfo=timezone.utc)

    def now(self) -> datetime:
        return self._now

    def now_iso(self) -> str:
        return to_iso(self._now)

    def advance(self, ms: int) -> None:
        if ms < 0:
            raise ValueError("clock cannot move backwards")
        self._now += timedelta(milliseconds=ms)

    def set(self, when: datetime) -> None:
        if when < self._now:
            raise ValueError("clock cannot move backwards")
        self._now = when
