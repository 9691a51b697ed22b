"""Data models for API entities.

Architecture:
    This module exports the Pydantic v2 models the client parses response
    bodies into. All models are immutable (frozen=True) and keep unknown
    fields (extra="allow") so new API attributes are not lost.

Design Decisions:
    - Field aliases: Python names map onto the API's camelCase keys
    - populate_by_name: Models can also be built with Python field names
    - Required fields: A body missing them fails parsing instead of
      producing a half-empty entity

Model Categories:
    - Networks: ChainInfo
    - Pools: Pool, TokenInfo, ProtocolInfo, PoolStats, IncentiveInfo
    - Positions: Position, PoolInfo, TokenWithValue, FeeInfo,
      PositionPerformance, AprBreakdown
    - Activity: Transaction
    - Paging: PaginatedResponse
"""

from .chain import ChainInfo
from .pagination import PaginatedResponse
from .pool import IncentiveInfo, Pool, PoolStats, ProtocolInfo, TokenInfo
from .position import (
    AprBreakdown,
    FeeInfo,
    PoolInfo,
    Position,
    PositionPerformance,
    TokenWithValue,
)
from .transaction import Transaction

__all__ = [
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
]
