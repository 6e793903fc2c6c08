"""Tests for the emission event bus."""

from __future__ import annotations

import pytest

from railpack_heartbeat.emitter import HeartbeatEmitter
from railpack_heartbeat.observability.event_bus import Event, InMemoryEventBus
from railpack_heartbeat.output import MemorySink


@pytest.mark.asyncio
async def test_subscribers_called_in_order_sync_and_async():
    bus = InMemoryEventBus()
    calls = []

    async def second(event: Event):
        calls.append(("async", event.seq))

    bus.subscribe(lambda e: calls.append(("sync", e.seq)))
    bus.subscribe(second)
    await bus.emit(Event(event_type="heartbeat", seq=7))

    assert calls == [("sync", 7), ("async", 7)]


@pytest.mark.asyncio
async def test_history_without_subscribers():
    bus = InMemoryEventBus()
    await bus.emit(Event(event_type="greeting", seq=0))
    await bus.emit(Event(event_type="ready", seq=1))

    assert [e.event_type for e in bus.history] == ["greeting", "ready"]


@pytest.mark.asyncio
async def test_history_keeps_most_recent():
    bus = InMemoryEventBus(max_history=2)
    for i in range(5):
        await bus.emit(Event(event_type="heartbeat", seq=i))

    assert [e.seq for e in bus.history] == [3, 4]


@pytest.mark.asyncio
async def test_failing_subscriber_stops_emitter_start(manual_scheduler):
    bus = InMemoryEventBus()

    def broken(event: Event):
        raise RuntimeError("subscriber failed")

    bus.subscribe(broken)
    sink = MemorySink()
    emitter = HeartbeatEmitter(sink, manual_scheduler, event_bus=bus)

    with pytest.raises(RuntimeError, match="subscriber failed"):
        await emitter.start()
    # the line is written before the event is published
    assert sink.lines == ["Hello World from RailPack!"]
    assert emitter.timer is None
