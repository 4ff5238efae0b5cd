from __future__ import annotations

from typing import Protocol
import time


class ClockPort(Protocol):
    def monotonic(self) -> float:
        """Return a monotonic timestamp in seconds."""
        ...


class SystemClock:
    def monotonic(self) -> float:
        return time.monotonic()
