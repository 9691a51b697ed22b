"""Unit tests for the retry executor."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from krystal.cloud.core import (
    ApiError,
    AuthError,
    InvalidParamsError,
    TransportError,
    TransportErrorKind,
)
from krystal.cloud.utils import RetryPolicy, is_retryable, retry_async, retry_simple


def _timeout() -> TransportError:
    return TransportError("HTTP request failed: timed out", kind=TransportErrorKind.TIMEOUT)


class FlakyOperation:
    """Fails with ``error_factory()`` a fixed number of times, then returns ``result``."""

    def __init__(self, failures: int, error_factory=_timeout, result="ok") -> None:
        self.failures = failures
        self.error_factory = error_factory
        self.result = result
        self.calls = 0

    async def __call__(self):
        self.calls += 1
        if self.calls <= self.failures:
            raise self.error_factory()
        return self.result


class TestRetryAsync:
    @pytest.mark.asyncio
    async def test_succeeds_after_transient_failures(self):
        """N-1 retryable failures then success takes exactly N calls."""
        op = FlakyOperation(failures=2)
        sleep = AsyncMock()
        result = await retry_async(op, RetryPolicy(max_attempts=3), sleep=sleep)
        assert result == "ok"
        assert op.calls == 3
        assert sleep.await_count == 2

    @pytest.mark.asyncio
    async def test_exhaustion_makes_exactly_max_attempts_calls(self):
        op = FlakyOperation(failures=100)
        with pytest.raises(TransportError):
            await retry_async(op, RetryPolicy(max_attempts=4), sleep=AsyncMock())
        assert op.calls == 4

    @pytest.mark.asyncio
    async def test_single_attempt_policy_never_sleeps(self):
        op = FlakyOperation(failures=1)
        sleep = AsyncMock()
        with pytest.raises(TransportError):
            await retry_async(op, RetryPolicy(max_attempts=1), sleep=sleep)
        assert op.calls == 1
        sleep.assert_not_awaited()

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "error_factory",
        [
            AuthError,
            lambda: InvalidParamsError("bad"),
            lambda: ApiError("Not Found", status_code=404),
            lambda: ValueError("bug"),
        ],
    )
    async def test_non_retryable_errors_propagate_immediately(self, error_factory):
        op = FlakyOperation(failures=1, error_factory=error_factory)
        sleep = AsyncMock()
        with pytest.raises(Exception):
            await retry_async(op, RetryPolicy(max_attempts=5), sleep=sleep)
        assert op.calls == 1
        sleep.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_5xx_is_retried(self):
        op = FlakyOperation(
            failures=1,
            error_factory=lambda: ApiError("down", status_code=503, retryable=True),
        )
        assert await retry_async(op, RetryPolicy(max_attempts=2), sleep=AsyncMock()) == "ok"
        assert op.calls == 2

    @pytest.mark.asyncio
    async def test_delays_grow_and_are_capped(self):
        op = FlakyOperation(failures=5)
        sleep = AsyncMock()
        policy = RetryPolicy(max_attempts=6, base_delay=1.0, backoff_multiplier=3.0, max_delay=5.0)
        await retry_async(op, policy, sleep=sleep)
        delays = [call.args[0] for call in sleep.await_args_list]
        assert delays == [1.0, 3.0, 5.0, 5.0, 5.0]

    @pytest.mark.asyncio
    async def test_jitter_stays_within_cap(self):
        op = FlakyOperation(failures=3)
        sleep = AsyncMock()
        policy = RetryPolicy(max_attempts=4, base_delay=1.0, max_delay=2.0, jitter=0.5)
        await retry_async(op, policy, sleep=sleep)
        delays = [call.args[0] for call in sleep.await_args_list]
        assert 1.0 <= delays[0] <= 1.5
        assert all(d <= 2.0 for d in delays)

    @pytest.mark.asyncio
    async def test_retry_simple(self):
        op = FlakyOperation(failures=1)
        assert await retry_simple(3, op) == "ok"
        assert op.calls == 2


class TestRetryPolicy:
    def test_defaults(self):
        policy = RetryPolicy()
        assert policy.max_attempts == 3
        assert policy.max_delay == 30.0

    @pytest.mark.parametrize(
        "kwargs",
        [{"max_attempts": 0}, {"base_delay": -1}, {"backoff_multiplier": 0.5}, {"jitter": -0.1}],
    )
    def test_invalid_policy(self, kwargs):
        with pytest.raises(ValueError):
            RetryPolicy(**kwargs)


def test_is_retryable():
    assert is_retryable(_timeout())
    assert not is_retryable(AuthError())
    assert not is_retryable(RuntimeError("boom"))
