# core/scheduler.py

"""
Deferred-execution facilities used to simulate grading latency.

A `Scheduler` is anything exposing `call_later(delay, callback)` and returning a handle with `cancel()`.
The asyncio event loop already satisfies this contract, so `LoopScheduler` is a thin adapter over the
running loop, while `ManualScheduler` provides a deterministic virtual clock for tests and instant demos.
"""

from __future__ import annotations

import asyncio
import heapq
import itertools
import logging
from dataclasses import dataclass, field
from typing import Callable, Protocol

logger = logging.getLogger(__name__)


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle: ...


class LoopScheduler:
    """
    Schedules callbacks on an asyncio event loop.

    If no loop is given, the loop running at call time is used, so `call_later()` must be invoked from
    inside a coroutine or callback executing on that loop.

    Raises:
        RuntimeError: From `call_later()` when no loop was given and none is running.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None):
        self._loop = loop

    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        loop = self._loop or asyncio.get_running_loop()
        logger.debug("scheduling %r in %.3fs on %r", callback, delay, loop)
        return loop.call_later(delay, callback)


@dataclass(order=True)
class ManualTimer:
    when: float
    seq: int
    callback: Callable[[], None] = field(compare=False)
    cancelled: bool = field(default=False, compare=False)

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler:
    """
    A virtual clock that only moves when told to.

    Timers fire in deadline order (ties broken by scheduling order) during `advance()` or
    `run_until_idle()`. Callbacks may schedule further timers; those fire in the same pass if their
    deadline falls inside the advanced window.
    """

    def __init__(self):
        self._now: float = 0.0
        self._queue: list[ManualTimer] = []
        self._counter = itertools.count()

    # === properties ===

    @property
    def now(self) -> float:
        return self._now

    @property
    def pending(self) -> int:
        return sum(1 for timer in self._queue if not timer.cancelled)

    # === scheduling ===

    def call_later(self, delay: float, callback: Callable[[], None]) -> ManualTimer:
        timer = ManualTimer(self._now + delay, next(self._counter), callback)
        heapq.heappush(self._queue, timer)
        return timer

    def advance(self, seconds: float) -> None:
        target = self._now + seconds

        while self._queue and self._queue[0].when <= target:
            timer = heapq.heappop(self._queue)
            if timer.cancelled:
                continue
            self._now = timer.when
            timer.callback()

        self._now = target

    def run_until_idle(self, max_steps: int = 10_000) -> None:
        """
        Fires timers until none remain.

        Raises:
            RuntimeError: If more than `max_steps` timers fire, which indicates a self-rescheduling loop.
        """
        for _ in range(max_steps):
            while self._queue and self._queue[0].cancelled:
                heapq.heappop(self._queue)

            if not self._queue:
                return

            self.advance(self._queue[0].when - self._now)

        raise RuntimeError(f"Scheduler still busy after {max_steps} steps.")
