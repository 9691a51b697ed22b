"""Retry executor with bounded exponential backoff.

The executor re-invokes a zero-argument coroutine factory until it succeeds,
the error is not retryable, or ``max_attempts`` invocations have been made.
An error is retryable when it carries ``retryable=True``: transport failures
and 5xx API errors. Everything else propagates on first occurrence.
"""

from __future__ import annotations

import asyncio
import logging
import random
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import TypeVar

from ..core.exceptions import KrystalError

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class RetryPolicy:
    """Backoff parameters for one retry loop.

    Attributes:
        max_attempts: Total invocations allowed, including the first (>= 1)
        base_delay: Delay in seconds before the second attempt
        backoff_multiplier: Factor applied to the delay after each failure
        max_delay: Ceiling in seconds for any single delay
        jitter: Extra random wait as a fraction of the delay (0.0 = deterministic)
    """

    max_attempts: int = 3
    base_delay: float = 0.5
    backoff_multiplier: float = 2.0
    max_delay: float = 30.0
    jitter: float = 0.0

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise ValueError("RetryPolicy max_attempts must be at least 1")
        if self.base_delay < 0 or self.max_delay < 0:
            raise ValueError("RetryPolicy delays cannot be negative")
        if self.backoff_multiplier < 1:
            raise ValueError("RetryPolicy backoff_multiplier must be >= 1")
        if self.jitter < 0:
            raise ValueError("RetryPolicy jitter cannot be negative")

    def next_delay(self, delay: float) -> float:
        """Grow ``delay`` by the multiplier, capped at ``max_delay``."""
        return min(delay * self.backoff_multiplier, self.max_delay)

    def sleep_for(self, delay: float) -> float:
        """Actual wait for ``delay`` once jitter is applied; never above ``max_delay``."""
        if self.jitter:
            delay += random.uniform(0.0, delay * self.jitter)
        return min(delay, self.max_delay)


def is_retryable(error: BaseException) -> bool:
    return isinstance(error, KrystalError) and error.retryable


async def retry_async(
    operation: Callable[[], Awaitable[T]],
    policy: RetryPolicy | None = None,
    *,
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
) -> T:
    """Run ``operation`` under ``policy``.

    Args:
        operation: Zero-argument callable returning a fresh awaitable per attempt
        policy: Backoff policy (defaults to ``RetryPolicy()``)
        sleep: Suspension function, injectable for tests

    Returns:
        The first successful result

    Raises:
        KrystalError: The last error once attempts are exhausted, or the first
            non-retryable error
    """
    policy = policy or RetryPolicy()
    delay = min(policy.base_delay, policy.max_delay)
    attempt = 1

    while True:
        try:
            return await operation()
        except Exception as e:
            if not is_retryable(e):
                raise
            if attempt >= policy.max_attempts:
                logger.error(
                    "retry_exhausted",
                    extra={
                        "attempts": attempt,
                        "error_type": type(e).__name__,
                        "error_message": str(e),
                    },
                )
                raise

            wait = policy.sleep_for(delay)
            logger.warning(
                "retry_scheduled",
                extra={
                    "attempt": attempt,
                    "max_attempts": policy.max_attempts,
                    "delay": wait,
                    "error_type": type(e).__name__,
                },
            )
            await sleep(wait)
            delay = policy.next_delay(delay)
            attempt += 1


async def retry_simple(max_attempts: int, operation: Callable[[], Awaitable[T]]) -> T:
    """Retry with a fixed 100ms delay and no backoff."""
    policy = RetryPolicy(
        max_attempts=max_attempts,
        base_delay=0.1,
        backoff_multiplier=1.0,
        max_delay=0.1,
    )
    return await retry_async(operation, policy)
