"""Core value types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class EmitterState(str, Enum):
    STARTING = "starting"
    RUNNING = "running"


class LineKind(str, Enum):
    GREETING = "greeting"
    CURRENT_DATE = "current_date"
    READY = "ready"
    HEARTBEAT = "heartbeat"


@dataclass(frozen=True)
class Emission:
    kind: LineKind
    text: str
    seq: int
    ts: str | None = None  # None for the fixed literal lines
