from __future__ import annotations

import logging
import math
from datetime import timedelta
from threading import Condition, Event, Lock

from ..core.errors import AcquireCancelled, AcquireTimeout, InvalidConfiguration
from ..core.ports.clock_port import ClockPort, SystemClock
from ..core.ports.rate_limiter_port import RateLimiterPort

logger = logging.getLogger(__name__)

# Upper bound on a single wait when a cancel event is supplied; Event.set() does
# not notify the condition, so waiters poll it.
_CANCEL_POLL_SECONDS = 0.05

# Longest single sleep; Condition.wait overflows on very large timeouts, so long
# windows are waited out in slices.
_MAX_WAIT_SECONDS = 3600.0


class Throttle(RateLimiterPort):
    """Fixed-window rate limiter: at most ``limit`` admissions per ``window``.

    Permits are reclaimed by time only. A caller never hands its permit back;
    the whole budget is topped up to ``limit`` once the current window has
    elapsed. This bounds operations per time unit, not operations in flight.

    The refill is lazy: it happens inside whichever call next looks at the
    state. Blocked callers wait on a condition bounded by the time left in the
    current window, so they wake up at the boundary and run the refill check
    themselves even if no new caller ever arrives.

    Example:
        # 10 document registrations per second, shared by all worker threads
        throttle = Throttle(window=1.0, limit=10)

        def worker(doc):
            throttle.acquire()
            adapter.create_document(doc, signature)

        # Minute-based budget with a bounded wait
        throttle = Throttle(window=timedelta(minutes=1), limit=100)
        throttle.acquire(timeout=5.0)  # raises AcquireTimeout if not admitted
    """

    def __init__(self, window: float | timedelta, limit: int, *, clock: ClockPort | None = None) -> None:
        """Initialize the throttle with a full budget.

        Args:
            window: Length of one accounting window, in seconds or as a timedelta.
            limit: Maximum number of admissions per window.
            clock: Optional monotonic clock. Blocking waits use real time, so a
                   substitute clock must advance in real time for acquire() to
                   make progress; try_acquire() works with any clock.

        Raises:
            InvalidConfiguration: If limit is not a positive integer or window is not positive and finite.
        """
        if isinstance(window, timedelta):
            window = window.total_seconds()
        if isinstance(limit, bool) or not isinstance(limit, int) or limit <= 0:
            raise InvalidConfiguration(f"limit must be a positive integer, got {limit!r}")
        if isinstance(window, bool) or not isinstance(window, (int, float)) or not 0 < window < math.inf:
            raise InvalidConfiguration(f"window must be a positive finite number of seconds, got {window!r}")

        self._limit = limit
        self._window = float(window)
        self._clock = clock or SystemClock()
        self._lock = Lock()
        self._permits_available = Condition(self._lock)
        self._available = limit
        self._window_start = self._clock.monotonic()

    @property
    def limit(self) -> int:
        return self._limit

    @property
    def window(self) -> float:
        return self._window

    @property
    def available_permits(self) -> int:
        """Number of callers that could be admitted right now without blocking."""
        with self._lock:
            self._refill_if_elapsed(self._clock.monotonic())
            return self._available

    def _refill_if_elapsed(self, now: float) -> None:
        # Must be called with self._lock held.
        elapsed = now - self._window_start
        if elapsed <= 0 or elapsed < self._window:
            return
        added = self._limit - self._available
        self._available = self._limit
        self._window_start = now
        if added > 0:
            logger.debug(f"Window elapsed after {elapsed:.3f}s; restored {added} permit(s)")
            self._permits_available.notify(added)

    def _try_consume(self) -> bool:
        if self._available > 0:
            self._available -= 1
            return True
        return False

    def try_acquire(self) -> bool:
        """Consume a permit if one is available now. Never blocks."""
        with self._lock:
            self._refill_if_elapsed(self._clock.monotonic())
            return self._try_consume()

    def acquire(self, timeout: float | None = None, cancel: Event | None = None) -> None:
        """Block until admitted, then consume exactly one permit.

        Args:
            timeout: Optional maximum number of seconds to wait.
            cancel: Optional event; setting it makes a waiting caller give up.

        Raises:
            AcquireTimeout: If timeout expired before a permit became available.
            AcquireCancelled: If cancel was set before a permit became available.
            ValueError: If timeout is NaN.
        """
        if timeout is not None and math.isnan(timeout):
            raise ValueError("timeout must be a number of seconds or None, got nan")
        with self._lock:
            now = self._clock.monotonic()
            deadline = now + max(timeout, 0.0) if timeout is not None else None
            blocked = False
            while True:
                self._refill_if_elapsed(now)
                if self._try_consume():
                    if blocked:
                        logger.debug("Permit acquired after waiting")
                    return

                if cancel is not None and cancel.is_set():
                    raise AcquireCancelled("acquire() cancelled before a permit became available")

                wait = self._window_start + self._window - now
                if deadline is not None:
                    remaining = deadline - now
                    if remaining <= 0:
                        raise AcquireTimeout(f"no permit available within {timeout}s")
                    wait = min(wait, remaining)
                if cancel is not None:
                    wait = min(wait, _CANCEL_POLL_SECONDS)

                if not blocked:
                    logger.debug(f"Budget of {self._limit} exhausted; waiting up to {wait:.3f}s")
                    blocked = True
                # Condition.wait releases the lock while sleeping.
                self._permits_available.wait(min(wait, _MAX_WAIT_SECONDS))
                now = self._clock.monotonic()

    def __repr__(self) -> str:
        return f"Throttle(window={self._window!r}, limit={self._limit!r})"
