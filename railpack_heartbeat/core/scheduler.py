"""Repeating-timer primitive: real asyncio timers and virtual time for tests."""

from __future__ import annotations

import asyncio
import inspect
import logging
from dataclasses import dataclass
from typing import Any, Callable, Protocol

from railpack_heartbeat.core.clock import ManualClock
from railpack_heartbeat.core.errors import SchedulerError

logger = logging.getLogger(__name__)

TimerCallback = Callable[[], Any]


def _check_period(period_ms: int) -> None:
    if isinstance(period_ms, bool) or not isinstance(period_ms, int) or period_ms <= 0:
        raise SchedulerError(f"period_ms must be a positive integer, got {period_ms!r}")


async def _invoke(callback: TimerCallback) -> None:
    result = callback()
    if inspect.isawaitable(result):
        await result


class TimerHandle(Protocol):
    @property
    def cancelled(self) -> bool: ...
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    def every(self, period_ms: int, callback: TimerCallback) -> TimerHandle: ...


# ---------------------------------------------------------------------------
# asyncio
# ---------------------------------------------------------------------------

class AsyncioTimer:
    def __init__(self, task: asyncio.Task) -> None:
        self._task = task
        self._cancelled = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        self._cancelled = True
        self._task.cancel()


class AsyncioScheduler:
    """Runs each timer as one task on the running event loop.

    Firing ``n`` is due at ``registration + n * period``, so slow callbacks
    do not make the schedule drift. A timer's callbacks never overlap.
    """

    def __init__(self) -> None:
        self._tasks: list[asyncio.Task] = []

    def every(self, period_ms: int, callback: TimerCallback) -> AsyncioTimer:
        _check_period(period_ms)
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError as e:
            raise SchedulerError("AsyncioScheduler.every() needs a running event loop") from e
        task = loop.create_task(self._run(loop, period_ms / 1000, callback))
        self._tasks.append(task)
        logger.debug("Registered %d ms timer", period_ms)
        return AsyncioTimer(task)

    @staticmethod
    async def _run(
        loop: asyncio.AbstractEventLoop, period: float, callback: TimerCallback
    ) -> None:
        due = loop.time()
        while True:
            due += period
            await asyncio.sleep(max(0.0, due - loop.time()))
            await _invoke(callback)

    def cancel_all(self) -> None:
        for task in self._tasks:
            task.cancel()

    async def wait(self) -> None:
        """Block until every timer has ended; re-raise the first callback failure."""
        pending = set(self._tasks)
        while pending:
            done, pending = await asyncio.wait(
                pending, return_when=asyncio.FIRST_EXCEPTION
            )
            for task in done:
                if not task.cancelled() and task.exception() is not None:
                    raise task.exception()


# ---------------------------------------------------------------------------
# Virtual time
# ---------------------------------------------------------------------------

@dataclass
class ManualTimer:
    period_ms: int
    callback: TimerCallback
    next_due_ms: int
    fired: int = 0
    _cancelled: bool = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        self._cancelled = True


class ManualScheduler:
    """Scheduler driven by ``advance()`` instead of a real clock.

    When a ManualClock is attached it is moved to each firing's due time
    before the callback runs.
    """

    def __init__(self, clock: ManualClock | None = None) -> None:
        self._clock = clock
        self._now_ms = 0
        self._timers: list[ManualTimer] = []

    @property
    def now_ms(self) -> int:
        return self._now_ms

    @property
    def timers(self) -> list[ManualTimer]:
        return list(self._timers)

    def every(self, period_ms: int, callback: TimerCallback) -> ManualTimer:
        _check_period(period_ms)
        timer = ManualTimer(
            period_ms=period_ms,
            callback=callback,
            next_due_ms=self._now_ms + period_ms,
        )
        self._timers.append(timer)
        return timer

    async def advance(self, ms: int) -> int:
        """Move virtual time forward by *ms*, firing due callbacks in order.

        Returns the number of callbacks fired.
        """
        if ms < 0:
            raise ValueError("virtual time cannot move backwards")
        target = self._now_ms + ms
        fired = 0
        while True:
            due = [
                t for t in self._timers
                if not t.cancelled and t.next_due_ms <= target
            ]
            if not due:
                break
            # min() keeps registration order for equal due times
            timer = min(due, key=lambda t: t.next_due_ms)
            self._move_to(timer.next_due_ms)
            timer.next_due_ms += timer.period_ms
            timer.fired += 1
            fired += 1
            await _invoke(timer.callback)
        self._move_to(target)
        return fired

    def _move_to(self, ms: int) -> None:
        if self._clock is not None:
            self._clock.advance(ms - self._now_ms)
        self._now_ms = ms
