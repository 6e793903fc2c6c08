"""Runtime configuration models.

Defaults only: nothing here is read from the environment or the command line.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class EmitterConfig:
    interval_ms: int = 60_000
    greeting: str = "Hello World from RailPack!"
    date_label: str = "Current date:"
    ready_message: str = "Container running successfully!"
    heartbeat_label: str = "Heartbeat:"
    event_history: int | None = 100


@dataclass
class LoggingConfig:
    level: str = "INFO"
    format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass
class RuntimeConfig:
    emitter: EmitterConfig = field(default_factory=EmitterConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
