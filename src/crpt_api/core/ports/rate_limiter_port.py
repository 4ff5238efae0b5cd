from __future__ import annotations

from threading import Event
from typing import Protocol


class RateLimiterPort(Protocol):
    def acquire(self, timeout: float | None = None, cancel: Event | None = None) -> None:
        """Block until a permit is available according to the configured rate."""
