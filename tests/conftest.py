"""Shared test fixtures."""

from __future__ import annotations

import re
from datetime import datetime, timezone

import pytest

from railpack_heartbeat.core.clock import ManualClock
from railpack_heartbeat.core.scheduler import ManualScheduler
from railpack_heartbeat.output import MemorySink

ISO_RE = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z$")

START = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


def parse_iso(ts: str) -> datetime:
    assert ISO_RE.match(ts), ts
    return datetime.fromisoformat(ts.replace("Z", "+00:00"))


class FixedClock:
    """Clock that returns a fixed timestamp."""

    def __init__(self, when: datetime = START):
        self._when = when

    def now(self) -> datetime:
        return self._when

    def now_iso(self) -> str:
        return "2024-01-01T12:00:00.000Z"


@pytest.fixture
def manual_clock():
    return ManualClock(START)


@pytest.fixture
def manual_scheduler(manual_clock):
    return ManualScheduler(manual_clock)


@pytest.fixture
def memory_sink():
    return MemorySink()


@pytest.fixture
def fixed_clock():
    return FixedClock()
