"""Pool list query builder."""

from __future__ import annotations

from ..core.enums import PoolSortBy
from .base import Params, QueryBuilder, render_value

MAX_POOL_LIMIT = 1000
MAX_MIN_TVL = 1_000_000_000


class PoolsQuery(QueryBuilder):
    """Filters for the pool list endpoint.

    Example:
        >>> query = PoolsQuery().chain_id(1).protocol("uniswapv3").limit(10)
        >>> query.to_params()
        [('chainId', '1'), ('protocol', 'uniswapv3'), ('limit', '10')]
    """

    def __init__(self) -> None:
        self._chain_id: int | None = None
        self._factory_address: str | None = None
        self._protocol: str | None = None
        self._token: str | None = None
        self._sort_by: PoolSortBy | None = None
        self._min_tvl: float | None = None
        self._min_volume_24h: float | None = None
        self._limit: int | None = None
        self._offset: int | None = None
        self._with_incentives: bool | None = None

    def chain_id(self, chain_id: int) -> PoolsQuery:
        self._chain_id = chain_id
        return self

    def factory_address(self, address: str) -> PoolsQuery:
        self._factory_address = address
        return self

    def protocol(self, protocol: str) -> PoolsQuery:
        self._protocol = protocol
        return self

    def token(self, token: str) -> PoolsQuery:
        """Match pools containing this token as either side of the pair."""
        self._token = token
        return self

    def sort_by(self, sort: PoolSortBy) -> PoolsQuery:
        self._sort_by = sort
        return self

    def min_tvl(self, tvl: float) -> PoolsQuery:
        self._min_tvl = tvl
        return self

    def min_volume_24h(self, volume: float) -> PoolsQuery:
        self._min_volume_24h = volume
        return self

    def limit(self, limit: int) -> PoolsQuery:
        self._limit = limit
        return self

    def offset(self, offset: int) -> PoolsQuery:
        self._offset = offset
        return self

    def with_incentives(self, enabled: bool = True) -> PoolsQuery:
        self._with_incentives = enabled
        return self

    @property
    def current_limit(self) -> int | None:
        return self._limit

    def rejection_reason(self) -> str | None:
        if self._limit is not None and not 1 <= self._limit <= MAX_POOL_LIMIT:
            return f"Limit must be between 1 and {MAX_POOL_LIMIT}"
        if self._min_tvl is not None and self._min_tvl > MAX_MIN_TVL:
            return "Minimum TVL threshold too high"
        return None

    def to_params(self) -> Params:
        """Render one query parameter per filter that is set."""
        pairs = [
            ("chainId", self._chain_id),
            ("factoryAddress", self._factory_address),
            ("protocol", self._protocol),
            ("token", self._token),
            ("sortBy", int(self._sort_by) if self._sort_by is not None else None),
            ("tvlFrom", self._min_tvl),
            ("volume24hFrom", self._min_volume_24h),
            ("limit", self._limit),
            ("offset", self._offset),
            ("withIncentives", self._with_incentives),
        ]
        return [(name, render_value(value)) for name, value in pairs if value is not None]
