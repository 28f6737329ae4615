"""TimerScheduler - cancellable one-shot timers driven by an external clock."""
from __future__ import annotations

import heapq
from typing import Callable


class TimerHandle:
    """Handle for one scheduled callback. ``cancel()`` is idempotent."""

    __slots__ = ("due", "callback", "_cancelled")

    def __init__(self, due: float, callback: Callable[[], None]) -> None:
        self.due = due
        self.callback = callback
        self._cancelled = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        self._cancelled = True


class TimerScheduler:
    """Fires callbacks once their due time has passed.

    Nothing runs on its own: the owner calls ``advance(now)`` once per frame
    and due callbacks fire inline, earliest first, ties in scheduling order.
    Callbacks may schedule further timers; one that is already due fires in
    the same ``advance`` call.
    """

    def __init__(self, now: float = 0.0) -> None:
        self._now = now
        self._heap: list[tuple[float, int, TimerHandle]] = []
        self._counter = 0

    @property
    def now(self) -> float:
        return self._now

    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        if delay < 0:
            raise ValueError(f"delay must be non-negative, got {delay}")
        handle = TimerHandle(self._now + delay, callback)
        heapq.heappush(self._heap, (handle.due, self._counter, handle))
        self._counter += 1
        return handle

    def advance(self, now: float) -> int:
        """Move the clock to ``now`` and fire everything due. Returns the fire count.

        While a callback runs, ``self.now`` reads as that timer's due time, so
        a loop that reschedules itself keeps its cadence across a long frame.
        """
        target = max(self._now, now)
        fired = 0
        while self._heap and self._heap[0][0] <= target:
            due, _, handle = heapq.heappop(self._heap)
            if handle.cancelled:
                continue
            self._now = max(self._now, due)
            handle.cancel()
            handle.callback()
            fired += 1
        self._now = target
        return fired

    def pending(self) -> int:
        return sum(1 for _, _, h in self._heap if not h.cancelled)

    def cancel_all(self) -> None:
        for _, _, handle in self._heap:
            handle.cancel()
        self._heap.clear()
