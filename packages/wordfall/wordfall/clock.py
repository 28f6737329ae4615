"""FrameClock - derives TICK deltas from monotonic frame timestamps."""
from __future__ import annotations


class FrameClock:
    def __init__(self, max_delta: float = 0.25) -> None:
        if max_delta <= 0:
            raise ValueError("max_delta must be positive")
        self._max_delta = max_delta
        self._last: float | None = None
        self._frame_number = 0

    @property
    def max_delta(self) -> float:
        return self._max_delta

    @property
    def frame_number(self) -> int:
        return self._frame_number

    @property
    def last(self) -> float | None:
        return self._last

    def advance(self, now: float) -> float:
        """Record a frame at ``now`` and return seconds since the previous one.

        The first frame yields 0. Backwards timestamps yield 0 and gaps longer
        than ``max_delta`` (a stalled or hidden window) are clamped.
        """
        self._frame_number += 1
        last, self._last = self._last, now
        if last is None:
            return 0.0
        return min(self._max_delta, max(0.0, now - last))

    def reset(self) -> None:
        self._last = None
        self._frame_number = 0
