"""Transaction history query builder."""

from __future__ import annotations

from .base import Params, QueryBuilder, render_value

MAX_TRANSACTION_LIMIT = 10_000

# Pool endpoints and position endpoints name the time bounds differently
POOL_TIME_KEYS = ("startTime", "endTime")
POSITION_TIME_KEYS = ("startTimestamp", "endTimestamp")


class TransactionQuery(QueryBuilder):
    """Time range and paging filters for transaction and history endpoints.

    Times are Unix timestamps in seconds.
    """

    def __init__(self) -> None:
        self._start_time: int | None = None
        self._end_time: int | None = None
        self._limit: int | None = None
        self._offset: int | None = None

    def start_time(self, timestamp: int) -> TransactionQuery:
        self._start_time = timestamp
        return self

    def end_time(self, timestamp: int) -> TransactionQuery:
        self._end_time = timestamp
        return self

    def time_range(self, start: int, end: int) -> TransactionQuery:
        self._start_time = start
        self._end_time = end
        return self

    def limit(self, limit: int) -> TransactionQuery:
        self._limit = limit
        return self

    def offset(self, offset: int) -> TransactionQuery:
        self._offset = offset
        return self

    @property
    def current_limit(self) -> int | None:
        return self._limit

    def rejection_reason(self) -> str | None:
        if (
            self._start_time is not None
            and self._end_time is not None
            and self._start_time >= self._end_time
        ):
            return "Start time must be before end time"
        if self._limit is not None and not 1 <= self._limit <= MAX_TRANSACTION_LIMIT:
            return f"Limit must be between 1 and {MAX_TRANSACTION_LIMIT}"
        return None

    def to_params(
        self,
        time_keys: tuple[str, str] = POOL_TIME_KEYS,
        *,
        paging: bool = True,
    ) -> Params:
        """Render the set filters.

        Args:
            time_keys: Parameter names for the start and end bounds
            paging: Whether ``limit``/``offset`` are rendered
        """
        start_key, end_key = time_keys
        pairs = [(start_key, self._start_time), (end_key, self._end_time)]
        if paging:
            pairs += [("limit", self._limit), ("offset", self._offset)]
        return [(name, render_value(value)) for name, value in pairs if value is not None]
