"""Authenticated REST transport.

Wraps ``HTTPClient`` with the API key and content-type headers, an optional
sliding window rate gate and an optional concurrency cap, and turns
classified outcomes into payloads or typed errors.
"""

from __future__ import annotations

import asyncio
import contextlib
from collections.abc import AsyncIterator
from typing import Any

from ...core.config import API_KEY_HEADER, CONTENT_TYPE, DEFAULT_USER_AGENT
from ...core.outcome import unwrap
from ...utils.rate_limit import RateLimiter
from .http_client import HTTPClient, QueryParams


class RESTTransport:
    """Thin authenticated transport shared by all endpoint calls of one client."""

    def __init__(
        self,
        base_url: str,
        api_key: str,
        *,
        timeout: float = 30.0,
        user_agent: str = DEFAULT_USER_AGENT,
        rate_limiter: RateLimiter | None = None,
        max_concurrency: int | None = None,
    ) -> None:
        self._http = HTTPClient(
            base_url=base_url, timeout=timeout, headers={"User-Agent": user_agent}
        )
        self._api_key = api_key
        self._rate_limiter = rate_limiter
        self._rate_lock = asyncio.Lock()
        self._semaphore = asyncio.Semaphore(max_concurrency) if max_concurrency else None

    @property
    def base_url(self) -> str | None:
        return self._http.base_url

    @property
    def rate_limiter(self) -> RateLimiter | None:
        return self._rate_limiter

    def _auth_headers(self) -> dict[str, str]:
        return {API_KEY_HEADER: self._api_key, "Content-Type": CONTENT_TYPE}

    @contextlib.asynccontextmanager
    async def _gate(self) -> AsyncIterator[None]:
        if self._rate_limiter is not None:
            # The limiter is not safe for concurrent mutation
            async with self._rate_lock:
                await self._rate_limiter.acquire()
        if self._semaphore is None:
            yield
            return
        async with self._semaphore:
            yield

    async def get(self, path: str, params: QueryParams | None = None) -> Any:
        """GET ``path`` and return the decoded success payload.

        Raises:
            KrystalError: The typed error for any non-success outcome
        """
        async with self._gate():
            outcome = await self._http.get(path, params=params, headers=self._auth_headers())
        return unwrap(outcome)

    async def close(self) -> None:
        await self._http.close()
