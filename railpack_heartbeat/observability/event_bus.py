"""Emission events: every line the emitter writes is also published here."""

from __future__ import annotations

import inspect
from collections import deque
from dataclasses import dataclass, field
from typing import Any, Callable, Protocol


@dataclass
class Event:
    event_type: str
    seq: int
    ts: str = ""
    payload: dict[str, Any] = field(default_factory=dict)


Subscriber = Callable[[Event], Any]


class EventBus(Protocol):
    async def emit(self, event: Event) -> None: ...
    def subscribe(self, subscriber: Subscriber) -> None: ...


class InMemoryEventBus:
    """Fans each event out to every subscriber, sync or async, in subscription order.

    The most recent ``max_history`` events are retained; ``None`` keeps all.
    A failing subscriber propagates to the emitter.
    """

    def __init__(self, max_history: int | None = None) -> None:
        self._subscribers: list[Subscriber] = []
        self._history: deque[Event] = deque(maxlen=max_history)

    def subscribe(self, subscriber: Subscriber) -> None:
        self._subscribers.append(subscriber)

    async def emit(self, event: Event) -> None:
        self._history.append(event)
        for subscriber in self._subscribers:
            result = subscriber(event)
            if inspect.isawaitable(result):
                await result

    @property
    def history(self) -> list[Event]:
        return list(self._history)
