"""Clock abstraction for debounce timing.

Debounce decisions compare timestamps; injecting the clock keeps them
deterministic under test.
"""

import time
from typing import Protocol


class Clock(Protocol):
    def now(self) -> float:
        """Current time in seconds."""
        ...


class MonotonicClock:
    """Production clock backed by ``time.monotonic``."""

    def now(self) -> float:
        return time.monotonic()
