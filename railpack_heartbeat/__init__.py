"""RailPack heartbeat: a container liveness demo process."""

from railpack_heartbeat.config import EmitterConfig, LoggingConfig, RuntimeConfig
from railpack_heartbeat.core.clock import Clock, ManualClock, SystemClock, to_iso
from railpack_heartbeat.core.errors import (
    EmitterStateError,
    HeartbeatError,
    SchedulerError,
)
from railpack_heartbeat.core.scheduler import AsyncioScheduler, ManualScheduler, Scheduler
from railpack_heartbeat.core.types import Emission, EmitterState, LineKind
from railpack_heartbeat.emitter import HeartbeatEmitter, create_emitter
from railpack_heartbeat.output import LineSink, MemorySink, StdoutSink

__all__ = [
    "AsyncioScheduler",
    "Clock",
    "Emission",
    "EmitterConfig",
    "EmitterState",
    "EmitterStateError",
    "HeartbeatEmitter",
    "HeartbeatError",
    "LineKind",
    "LineSink",
    "LoggingConfig",
    "ManualClock",
    "ManualScheduler",
    "MemorySink",
    "RuntimeConfig",
    "Scheduler",
    "SchedulerError",
    "StdoutSink",
    "SystemClock",
    "create_emitter",
    "to_iso",
]
