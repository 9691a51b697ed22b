"""Krystal Cloud API client.

Architecture:
    The client owns one ``RESTTransport`` (aiohttp session, credential,
    optional rate gate and concurrency cap) and one ``RestRunner``. Each
    public method picks an endpoint spec and adapter from the registry,
    packs its arguments into a params dict and lets the runner validate,
    dispatch and parse.

    Every method is a single awaitable with one network round trip. Errors
    surface as ``KrystalError`` subclasses; raw aiohttp exceptions never
    escape. Retrying is opt-in: wrap a call with ``retry_async`` or use
    ``client.with_retry``.
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Awaitable, Callable, Mapping
from typing import Any, TypeVar

from .core.config import ClientConfig, load_api_key
from .core.enums import PoolSortBy, PositionStatus
from .core.exceptions import ConfigurationError
from .endpoints import get_endpoint_adapter, get_endpoint_spec
from .endpoints import pool_transactions as pool_transactions_endpoint
from .endpoints import pools as pools_endpoint
from .models import ChainInfo, PaginatedResponse, Pool, Position, Transaction
from .query import PoolsQuery, PositionsQuery, TransactionQuery
from .runtime.rest import ResponseAdapter, RestRunner, RESTTransport
from .utils.pagination import PaginationTracker
from .utils.rate_limit import RateLimiter
from .utils.retry import RetryPolicy, retry_async

T = TypeVar("T")


class KrystalClient:
    """Async client for pool, position and transaction queries.

    Example:
        >>> async with KrystalClient.from_env() as client:
        ...     pools = await client.get_top_pools_by_tvl(1, 10)
    """

    def __init__(
        self,
        api_key: str,
        config: ClientConfig | None = None,
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            api_key: API key sent with every request; never logged
            config: Connection settings (defaults to ``ClientConfig()``)
            retry_policy: Policy used by ``with_retry`` (defaults to ``RetryPolicy()``)
        """
        if not api_key or not api_key.strip():
            raise ConfigurationError("API key must not be empty")
        self.config = config or ClientConfig()
        self.retry_policy = retry_policy or RetryPolicy()
        rate_limiter = (
            RateLimiter(self.config.max_requests, self.config.rate_window)
            if self.config.max_requests is not None
            else None
        )
        self._transport = RESTTransport(
            self.config.base_url,
            api_key,
            timeout=self.config.timeout,
            user_agent=self.config.user_agent,
            rate_limiter=rate_limiter,
            max_concurrency=self.config.max_concurrency,
        )
        self._runner = RestRunner(self._transport)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> KrystalClient:
        """Create a client from ``KRYSTAL_API_KEY`` and the other ``KRYSTAL_*`` variables."""
        return cls(load_api_key(environ), ClientConfig.from_env(environ))

    def __repr__(self) -> str:
        return f"KrystalClient(base_url={self.config.base_url!r})"

    async def _fetch(
        self,
        endpoint_id: str,
        params: dict[str, Any],
        adapter: ResponseAdapter | None = None,
    ) -> Any:
        spec = get_endpoint_spec(endpoint_id)
        if spec is None:
            raise ValueError(f"Unknown REST endpoint: {endpoint_id}")
        if adapter is None:
            adapter_cls = get_endpoint_adapter(endpoint_id)
            if adapter_cls is None:
                raise ValueError(f"No adapter found for endpoint: {endpoint_id}")
            adapter = adapter_cls()
        return await self._runner.run(spec=spec, adapter=adapter, params=params)

    async def with_retry(
        self, operation: Callable[[], Awaitable[T]], policy: RetryPolicy | None = None
    ) -> T:
        """Run ``operation`` (e.g. ``lambda: client.get_chains()``) under the retry policy."""
        return await retry_async(operation, policy or self.retry_policy)

    # --- Networks -------------------------------------------------------

    async def get_chains(self) -> list[ChainInfo]:
        """List all supported blockchain networks."""
        return await self._fetch("chains", {})

    async def get_chain_stats(self, chain_id: int) -> Any:
        """Stats for one network, as decoded JSON."""
        return await self._fetch("chain_stats", {"chain_id": chain_id})

    # --- Pools ----------------------------------------------------------

    async def get_pools(self, query: PoolsQuery) -> list[Pool]:
        """List pools matching ``query``.

        Raises:
            InvalidParamsError: If the query fails validation (nothing is sent)
        """
        return await self._fetch("pools", {"query": query})

    async def get_pools_page(self, query: PoolsQuery) -> PaginatedResponse[Pool]:
        """Like ``get_pools`` but keeps the response's pagination metadata."""
        return await self._fetch("pools", {"query": query}, pools_endpoint.PageAdapter())

    async def get_pool_detail(
        self,
        chain_id: int,
        pool_address: str,
        factory_address: str | None = None,
        with_incentives: bool | None = None,
    ) -> Pool:
        return await self._fetch(
            "pool_detail",
            {
                "chain_id": chain_id,
                "pool_address": pool_address,
                "factory_address": factory_address,
                "with_incentives": with_incentives,
            },
        )

    async def get_pool_historical(
        self,
        chain_id: int,
        pool_address: str,
        factory_address: str | None = None,
        query: TransactionQuery | None = None,
    ) -> Any:
        """Historical pool data, as decoded JSON. Only the query's time range is sent."""
        return await self._fetch(
            "pool_historical",
            {
                "chain_id": chain_id,
                "pool_address": pool_address,
                "factory_address": factory_address,
                "query": query,
            },
        )

    async def get_pool_transactions(
        self,
        chain_id: int,
        pool_address: str,
        factory_address: str | None = None,
        query: TransactionQuery | None = None,
    ) -> list[Transaction]:
        return await self._fetch(
            "pool_transactions",
            self._pool_tx_params(chain_id, pool_address, factory_address, query),
        )

    async def get_pool_transactions_page(
        self,
        chain_id: int,
        pool_address: str,
        factory_address: str | None = None,
        query: TransactionQuery | None = None,
    ) -> PaginatedResponse[Transaction]:
        return await self._fetch(
            "pool_transactions",
            self._pool_tx_params(chain_id, pool_address, factory_address, query),
            pool_transactions_endpoint.PageAdapter(),
        )

    @staticmethod
    def _pool_tx_params(
        chain_id: int,
        pool_address: str,
        factory_address: str | None,
        query: TransactionQuery | None,
    ) -> dict[str, Any]:
        return {
            "chain_id": chain_id,
            "pool_address": pool_address,
            "factory_address": factory_address,
            "query": query,
        }

    # --- Positions ------------------------------------------------------

    async def get_positions(self, query: PositionsQuery) -> list[Position]:
        """List a wallet's positions.

        Raises:
            InvalidParamsError: If the wallet is not a valid address (nothing is sent)
        """
        return await self._fetch("positions", {"query": query})

    async def get_position_detail(self, chain_id: int, position_id: str) -> Position:
        return await self._fetch(
            "position_detail", {"chain_id": chain_id, "position_id": position_id}
        )

    async def get_position_transactions(
        self,
        chain_id: int,
        token_address: str,
        *,
        wallet: str | None = None,
        token_id: str | None = None,
        query: TransactionQuery | None = None,
    ) -> list[Transaction]:
        return await self._fetch(
            "position_transactions",
            {
                "chain_id": chain_id,
                "token_address": token_address,
                "wallet": wallet,
                "token_id": token_id,
                "query": query,
            },
        )

    # --- Protocols ------------------------------------------------------

    async def get_protocols(self) -> Any:
        """List supported protocols, as decoded JSON."""
        return await self._fetch("protocols", {})

    # --- Pagination -----------------------------------------------------

    async def iter_pools(self, query: PoolsQuery, page_size: int = 100) -> AsyncIterator[list[Pool]]:
        """Yield pages of pools until the API reports no more.

        Each page is requested with a fresh copy of ``query``.
        """
        tracker = PaginationTracker(page_size)
        while True:
            page_query = query.copy().limit(page_size).offset(tracker.next_offset)
            page = await self.get_pools_page(page_query)
            tracker.update_from_response(page)
            if page.data:
                yield page.data
            if not page.data or not tracker.has_next_page():
                return

    async def iter_pool_transactions(
        self,
        chain_id: int,
        pool_address: str,
        query: TransactionQuery | None = None,
        page_size: int = 100,
        factory_address: str | None = None,
    ) -> AsyncIterator[list[Transaction]]:
        """Yield pages of a pool's transactions until the API reports no more."""
        base = query or TransactionQuery()
        tracker = PaginationTracker(page_size)
        while True:
            page_query = base.copy().limit(page_size).offset(tracker.next_offset)
            page = await self.get_pool_transactions_page(
                chain_id, pool_address, factory_address, page_query
            )
            tracker.update_from_response(page)
            if page.data:
                yield page.data
            if not page.data or not tracker.has_next_page():
                return

    # --- Convenience ----------------------------------------------------

    async def get_top_pools_by_tvl(self, chain_id: int, limit: int) -> list[Pool]:
        query = PoolsQuery().chain_id(chain_id).sort_by(PoolSortBy.TVL).limit(limit)
        return await self.get_pools(query)

    async def get_top_pools_by_volume(self, chain_id: int, limit: int) -> list[Pool]:
        query = PoolsQuery().chain_id(chain_id).sort_by(PoolSortBy.VOLUME_24H).limit(limit)
        return await self.get_pools(query)

    async def get_pools_for_token(self, token: str, chain_id: int | None = None) -> list[Pool]:
        query = PoolsQuery().token(token)
        if chain_id is not None:
            query.chain_id(chain_id)
        return await self.get_pools(query)

    async def get_pools_for_protocol(
        self, protocol: str, chain_id: int | None = None, limit: int | None = None
    ) -> list[Pool]:
        query = PoolsQuery().protocol(protocol)
        if chain_id is not None:
            query.chain_id(chain_id)
        if limit is not None:
            query.limit(limit)
        return await self.get_pools(query)

    async def _positions_with_status(
        self, wallet: str, status: PositionStatus, chain_id: int | None
    ) -> list[Position]:
        query = PositionsQuery(wallet).status(status)
        if chain_id is not None:
            query.chain_id(chain_id)
        return await self.get_positions(query)

    async def get_open_positions(self, wallet: str, chain_id: int | None = None) -> list[Position]:
        return await self._positions_with_status(wallet, PositionStatus.OPEN, chain_id)

    async def get_closed_positions(self, wallet: str, chain_id: int | None = None) -> list[Position]:
        return await self._positions_with_status(wallet, PositionStatus.CLOSED, chain_id)

    async def get_all_positions(self, wallet: str, chain_id: int | None = None) -> list[Position]:
        return await self._positions_with_status(wallet, PositionStatus.ALL, chain_id)

    async def get_recent_pool_transactions(
        self, chain_id: int, pool_address: str, limit: int
    ) -> list[Transaction]:
        return await self.get_pool_transactions(
            chain_id, pool_address, query=TransactionQuery().limit(limit)
        )

    # --- Lifecycle ------------------------------------------------------

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self._transport.close()

    async def __aenter__(self) -> KrystalClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
