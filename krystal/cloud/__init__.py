"""Krystal Cloud - Async client for DeFi liquidity pool and position data."""

from .client import KrystalClient
from .core import (
    ApiError,
    AuthError,
    ClientConfig,
    ConfigurationError,
    InvalidParamsError,
    KrystalError,
    ParseError,
    PaymentRequiredError,
    PoolSortBy,
    PositionStatus,
    TransportError,
    TransportErrorKind,
    load_api_key,
)
from .models import (
    AprBreakdown,
    ChainInfo,
    FeeInfo,
    IncentiveInfo,
    PaginatedResponse,
    Pool,
    PoolInfo,
    PoolStats,
    Position,
    PositionPerformance,
    ProtocolInfo,
    TokenInfo,
    TokenWithValue,
    Transaction,
)
from .query import PoolsQuery, PositionsQuery, TransactionQuery
from .utils import PaginationTracker, RateLimiter, RetryPolicy, retry_async, retry_simple

__version__ = "0.1.0"

__all__ = [
    # Client
    "KrystalClient",
    "ClientConfig",
    "load_api_key",
    # Queries
    "PoolsQuery",
    "PositionsQuery",
    "TransactionQuery",
    # Enums
    "PoolSortBy",
    "PositionStatus",
    "TransportErrorKind",
    # Models
    "AprBreakdown",
    "ChainInfo",
    "FeeInfo",
    "IncentiveInfo",
    "PaginatedResponse",
    "Pool",
    "PoolInfo",
    "PoolStats",
    "Position",
    "PositionPerformance",
    "ProtocolInfo",
    "TokenInfo",
    "TokenWithValue",
    "Transaction",
    # Exceptions
    "KrystalError",
    "ConfigurationError",
    "TransportError",
    "ApiError",
    "AuthError",
    "PaymentRequiredError",
    "InvalidParamsError",
    "ParseError",
    # Utilities
    "PaginationTracker",
    "RateLimiter",
    "RetryPolicy",
    "retry_async",
    "retry_simple",
]
