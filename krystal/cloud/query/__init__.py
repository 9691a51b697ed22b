"""Fluent query builders for filtered list requests."""

from .base import Params, QueryBuilder
from .pools import MAX_MIN_TVL, MAX_POOL_LIMIT, PoolsQuery
from .positions import PositionsQuery
from .transactions import (
    MAX_TRANSACTION_LIMIT,
    POOL_TIME_KEYS,
    POSITION_TIME_KEYS,
    TransactionQuery,
)

__all__ = [
    "QueryBuilder",
    "Params",
    "PoolsQuery",
    "PositionsQuery",
    "TransactionQuery",
    "MAX_POOL_LIMIT",
    "MAX_MIN_TVL",
    "MAX_TRANSACTION_LIMIT",
    "POOL_TIME_KEYS",
    "POSITION_TIME_KEYS",
]
