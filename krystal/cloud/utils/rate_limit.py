"""Sliding window rate limiter.

Keeps the timestamps of recent requests and admits a new one while fewer
than ``max_requests`` fall inside the trailing window. The synchronous
methods are advisory; ``acquire()`` suspends until a slot is free and
records it. Instances are not safe for unsynchronized concurrent use.
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections import deque
from collections.abc import Awaitable, Callable

logger = logging.getLogger(__name__)


class RateLimiter:
    """Sliding window admission check."""

    def __init__(
        self,
        max_requests: int,
        window: float,
        *,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        """Initialize the limiter.

        Args:
            max_requests: Requests allowed inside one window
            window: Window length in seconds
            clock: Monotonic time source, injectable for tests
            sleep: Suspension function used by ``acquire``
        """
        if max_requests <= 0 or window <= 0:
            raise ValueError("Max requests and window must be positive.")
        self.max_requests = max_requests
        self.window = window
        self._clock = clock
        self._sleep = sleep
        self._timestamps: deque[float] = deque()

    def __len__(self) -> int:
        return len(self._timestamps)

    def _prune(self, now: float) -> None:
        """Drop timestamps that have left the window."""
        cutoff = now - self.window
        while self._timestamps and self._timestamps[0] <= cutoff:
            self._timestamps.popleft()

    def can_request(self) -> bool:
        self._prune(self._clock())
        return len(self._timestamps) < self.max_requests

    def record_request(self) -> None:
        """Record a request made now."""
        now = self._clock()
        self._prune(now)
        self._timestamps.append(now)

    def time_until_next_request(self) -> float:
        """Seconds until a request would be admitted (0.0 if one is admitted now)."""
        now = self._clock()
        self._prune(now)
        if len(self._timestamps) < self.max_requests:
            return 0.0
        return max(0.0, self._timestamps[0] + self.window - now)

    async def acquire(self) -> None:
        """Wait until a request is admitted, then record it."""
        while True:
            wait = self.time_until_next_request()
            if wait <= 0:
                self.record_request()
                return
            logger.debug("Rate limit reached. Waiting %.3f seconds.", wait)
            await self._sleep(wait)
