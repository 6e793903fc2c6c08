"""Line sinks: where emitted lines go."""

from __future__ import annotations

import sys
from typing import Protocol, TextIO


class LineSink(Protocol):
    def write_line(self, text: str) -> None: ...


class StdoutSink:
    """Writes each line to standard output and flushes immediately."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def write_line(self, text: str) -> None:
        # sys.stdout is looked up per call so redirection is honoured
        print(text, file=self._stream or sys.stdout, flush=True)


class MemorySink:
    """Collects lines in memory."""

    def __init__(self) -> None:
        self.lines: list[str] = []

    def write_line(self, text: str) -> None:
        self.lines.append(text)
