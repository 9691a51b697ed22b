"""Core enumerations shared by query builders and endpoints.

Architecture:
    These enums give the wire-level codes used by the API a stable Python
    name. Query builders store enum members; endpoint modules render them
    into query parameters.

Key Types:
    - PoolSortBy: Pool list ordering, rendered as a small integer code
    - PositionStatus: Position lifecycle filter, rendered as a string or omitted
    - TransportErrorKind: Classification of failures that never reached a status code
"""

from __future__ import annotations

from enum import Enum, IntEnum


class PoolSortBy(IntEnum):
    """Sort order for pool listings.

    The integer value is the code sent as the ``sortBy`` query parameter.
    """

    APR = 0
    TVL = 1
    VOLUME_24H = 2
    FEE = 3

    @classmethod
    def from_str(cls, value: str) -> PoolSortBy:
        """Parse a user-facing name such as ``"tvl"`` or ``"volume_24h"``."""
        key = value.strip().upper().replace("-", "_")
        aliases = {"VOLUME": "VOLUME_24H", "VOLUME24H": "VOLUME_24H", "FEES": "FEE"}
        key = aliases.get(key, key)
        try:
            return cls[key]
        except KeyError:
            raise ValueError(f"Unknown pool sort option: {value}") from None


class PositionStatus(str, Enum):
    """Position status filter."""

    OPEN = "OPEN"
    CLOSED = "CLOSED"
    ALL = "ALL"

    @property
    def api_value(self) -> str | None:
        """Value for the ``positionStatus`` parameter; ``None`` means omit it."""
        if self is PositionStatus.ALL:
            return None
        return self.value


class TransportErrorKind(str, Enum):
    """Why a request failed before a response status was received."""

    TIMEOUT = "timeout"
    CONNECT = "connect"
    DNS = "dns"
    OTHER = "other"
