"""Time sources used to measure how long a round took."""
from __future__ import annotations

import time
from abc import ABC, abstractmethod

from unscramble.config import PLACEHOLDER_TIME_TAKEN


class TimeSource(ABC):
    """Abstract clock for round timing."""

    @abstractmethod
    def now(self) -> float:
        """Current time in seconds."""

    def elapsed(self, started_at: float) -> float:
        """Seconds since `started_at`."""
        return max(0.0, self.now() - started_at)


class PlaceholderTimeSource(TimeSource):
    """
    Reports the same time taken for every round.

    Rounds are not timed by default; achievements see a fixed
    `PLACEHOLDER_TIME_TAKEN` seconds, which is how the game has always behaved.
    """

    def __init__(self, seconds: float = PLACEHOLDER_TIME_TAKEN):
        self.seconds = seconds

    def now(self) -> float:
        return 0.0

    def elapsed(self, started_at: float) -> float:
        return self.seconds


class MonotonicTimeSource(TimeSource):
    """Wall-clock round timing."""

    def now(self) -> float:
        return time.monotonic()


class MockTimeSource(TimeSource):
    """Test clock with controllable time."""

    def __init__(self, initial: float = 0.0):
        self._current = initial

    def now(self) -> float:
        return self._current

    def advance(self, seconds: float) -> None:
        self._current += seconds


def make_time_source(mode: str) -> TimeSource:
    """Build the clock for a `Settings.timer` value."""
    if mode == "wallclock":
        return MonotonicTimeSource()
    if mode == "placeholder":
        return PlaceholderTimeSource()
    raise ValueError(f"Unknown timer mode: {mode!r}. Use placeholder|wallclock.")
