"""Clock abstraction.

Timestamps are integer nanoseconds since the Unix epoch.
"""

import time
from typing import Protocol


class Clock(Protocol):
    def now(self) -> int:
        """Return the current time in nanoseconds."""
        ...


class SystemClock:
    def now(self) -> int:
        return time.time_ns()


class FixedClock:
    """Clock that only moves when told to."""

    def __init__(self, start: int = 0):
        self.current = start

    def now(self) -> int:
        return self.current

    def advance(self, delta: int = 1) -> int:
        self.current += delta
        return self.current
