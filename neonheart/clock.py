"""Animation time: an accumulator advanced once per displayed frame."""

import time as _time
from typing import Callable


class FrameClock:
    """Sums wall-clock deltas between ticks into a single animation time.

    No fixed timestep and no frame-rate normalisation: animation speed is real
    time. The first tick only records the wall clock, so time starts at 0.0.
    """

    def __init__(self, now: Callable[[], float] = _time.monotonic):
        self._now = now
        self._last: float | None = None
        self._time = 0.0

    @property
    def time(self) -> float:
        return self._time

    def tick(self) -> float:
        """Advance by the wall-clock time since the previous tick."""
        now = self._now()
        if self._last is not None:
            self._time += max(0.0, now - self._last)
        self._last = now
        return self._time

    def advance(self, delta: float) -> float:
        """Advance by a known delta (headless rendering)."""
        if delta < 0:
            raise ValueError(f"delta must be non-negative, got {delta}")
        self._time += delta
        return self._time
