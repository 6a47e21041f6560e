"""Frame-rate and frame-time statistics."""

from __future__ import annotations

import math
import time
from collections import deque
from collections.abc import Callable, Iterable

BACKLOG = 100
HEIGHT = 100.0
AVG = 25


def _average(values: Iterable[float], n: int) -> float:
    taken = 0.0
    for count, value in enumerate(values):
        if count >= n:
            break
        taken += value
    if n == 0:
        return math.nan
    return taken / n


class Stats:
    """The last BACKLOG frame rates and frame times, most recent first."""

    def __init__(self, clock: Callable[[], float] = time.perf_counter) -> None:
        self._clock = clock
        self._fps: deque[float] = deque(maxlen=BACKLOG)
        self._timings: deque[float] = deque(maxlen=BACKLOG)
        self._last = clock()

    @property
    def fps(self) -> tuple[float, ...]:
        return tuple(self._fps)

    @property
    def timings(self) -> tuple[float, ...]:
        """Frame times in milliseconds."""
        return tuple(self._timings)

    def push(self, fps: float, timing: float) -> None:
        """Add a sample, dropping the oldest once the backlog is full."""
        self._fps.appendleft(fps)
        self._timings.appendleft(timing)

    def record(self) -> None:
        """Record the time since the previous call as one frame."""
        now = self._clock()
        delta = now - self._last
        fps = 1.0 / delta if delta else math.inf
        self.push(fps, delta * 1000.0)
        self._last = now

    def avg_fps(self, n: int) -> float:
        """Sum of the n most recent frame rates divided by n."""
        return _average(self._fps, n)

    def avg_timing(self, n: int) -> float:
        """Sum of the n most recent frame times divided by n."""
        return _average(self._timings, n)

    def summary(self) -> str:
        """The one-line readout over the last AVG frames."""
        return f"FPS {self.avg_fps(AVG):.3f} / {self.avg_timing(AVG):.3f}ms"