"""Clock implementations."""

import time
from dataclasses import dataclass


class SystemClock:
    """Wall clock backed by time.time()."""

    def now(self) -> float:
        return time.time()


@dataclass(frozen=True)
class FixedClock:
    """Clock pinned to a single instant."""
    timestamp: float

    def now(self) -> float:
        return self.timestamp

    def shifted(self, seconds: float) -> "FixedClock":
        """Return a new clock moved by `seconds` (negative moves back)."""
        return FixedClock(self.timestamp + seconds)
