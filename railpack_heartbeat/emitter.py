"""HeartbeatEmitter: startup lines followed by a periodic heartbeat."""

from __future__ import annotations

import logging

from railpack_heartbeat.config import EmitterConfig
from railpack_heartbeat.core.clock import Clock, SystemClock
from railpack_heartbeat.core.errors import EmitterStateError
from railpack_heartbeat.core.scheduler import AsyncioScheduler, Scheduler, TimerHandle
from railpack_heartbeat.core.types import Emission, EmitterState, LineKind
from railpack_heartbeat.observability.event_bus import Event, EventBus, InMemoryEventBus
from railpack_heartbeat.output import LineSink, StdoutSink

logger = logging.getLogger(__name__)


class HeartbeatEmitter:
    """Two-state emitter.

    ``STARTING``: ``start()`` writes the greeting, the current date and the
    ready message, registers the repeating timer and moves to ``RUNNING``.

    ``RUNNING``: every timer firing calls ``beat()``, which writes one
    heartbeat line. The emitter never cancels its own timer.
    """

    def __init__(
        self,
        sink: LineSink,
        scheduler: Scheduler,
        *,
        clock: Clock | None = None,
        event_bus: EventBus | None = None,
        config: EmitterConfig | None = None,
    ) -> None:
        self._sink = sink
        self._scheduler = scheduler
        self._config = config or EmitterConfig()
        self._clock = clock or SystemClock()
        self._event_bus = event_bus or InMemoryEventBus(
            max_history=self._config.event_history
        )

        self._state = EmitterState.STARTING
        self._timer: TimerHandle | None = None
        self._seq = 0

    @property
    def state(self) -> EmitterState:
        return self._state

    @property
    def timer(self) -> TimerHandle | None:
        return self._timer

    @property
    def event_bus(self) -> EventBus:
        return self._event_bus

    async def start(self) -> TimerHandle:
        if self._state is not EmitterState.STARTING or self._timer is not None:
            raise EmitterStateError(f"start() called in state {self._state.value!r}")
        cfg = self._config

        await self._emit(LineKind.GREETING, cfg.greeting)
        ts = self._clock.now_iso()
        await self._emit(LineKind.CURRENT_DATE, f"{cfg.date_label} {ts}", ts)
        await self._emit(LineKind.READY, cfg.ready_message)

        self._timer = self._scheduler.every(cfg.interval_ms, self.beat)
        self._state = EmitterState.RUNNING
        logger.debug("Emitter running, heartbeat every %d ms", cfg.interval_ms)
        return self._timer

    async def beat(self) -> Emission:
        if self._state is not EmitterState.RUNNING:
            raise EmitterStateError(f"beat() called in state {self._state.value!r}")
        ts = self._clock.now_iso()
        return await self._emit(
            LineKind.HEARTBEAT, f"{self._config.heartbeat_label} {ts}", ts
        )

    async def _emit(self, kind: LineKind, text: str, ts: str | None = None) -> Emission:
        emission = Emission(kind=kind, text=text, seq=self._seq, ts=ts)
        self._seq += 1
        self._sink.write_line(text)
        await self._event_bus.emit(
            Event(
                event_type=kind.value,
                seq=emission.seq,
                ts=ts or self._clock.now_iso(),
                payload={"text": text},
            )
        )
        return emission


def create_emitter(
    sink: LineSink | None = None,
    scheduler: Scheduler | None = None,
    config: EmitterConfig | None = None,
    event_bus: EventBus | None = None,
) -> HeartbeatEmitter:
    """One-line factory: stdout sink, asyncio timer, system clock."""
    return HeartbeatEmitter(
        sink=sink or StdoutSink(),
        scheduler=scheduler or AsyncioScheduler(),
        event_bus=event_bus,
        config=config,
    )
