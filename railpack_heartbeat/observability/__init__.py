"""Observability module: emission events."""

from railpack_heartbeat.observability.event_bus import Event, EventBus, InMemoryEventBus, Subscriber

__all__ = ["Event", "EventBus", "InMemoryEventBus", "Subscriber"]
