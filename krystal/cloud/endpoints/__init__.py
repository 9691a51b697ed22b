"""Endpoint registry.

This module collects every endpoint specification and its default adapter
so callers can look them up by identifier.
"""

from __future__ import annotations

from ..runtime.rest import ResponseAdapter, RestEndpointSpec
from .chain_stats import SPEC as ChainStatsSpec  # noqa: N811
from .chain_stats import Adapter as ChainStatsAdapter
from .chains import SPEC as ChainsSpec  # noqa: N811
from .chains import Adapter as ChainsAdapter
from .pool_detail import SPEC as PoolDetailSpec  # noqa: N811
from .pool_detail import Adapter as PoolDetailAdapter
from .pool_historical import SPEC as PoolHistoricalSpec  # noqa: N811
from .pool_historical import Adapter as PoolHistoricalAdapter
from .pool_transactions import SPEC as PoolTransactionsSpec  # noqa: N811
from .pool_transactions import Adapter as PoolTransactionsAdapter
from .pools import SPEC as PoolsSpec  # noqa: N811
from .pools import Adapter as PoolsAdapter
from .position_detail import SPEC as PositionDetailSpec  # noqa: N811
from .position_detail import Adapter as PositionDetailAdapter
from .position_transactions import SPEC as PositionTransactionsSpec  # noqa: N811
from .position_transactions import Adapter as PositionTransactionsAdapter
from .positions import SPEC as PositionsSpec  # noqa: N811
from .positions import Adapter as PositionsAdapter
from .protocols import SPEC as ProtocolsSpec  # noqa: N811
from .protocols import Adapter as ProtocolsAdapter

# Registry mapping endpoint IDs to specs and adapters
_ENDPOINT_REGISTRY: dict[str, tuple[RestEndpointSpec, type[ResponseAdapter]]] = {
    "chains": (ChainsSpec, ChainsAdapter),
    "chain_stats": (ChainStatsSpec, ChainStatsAdapter),
    "pools": (PoolsSpec, PoolsAdapter),
    "pool_detail": (PoolDetailSpec, PoolDetailAdapter),
    "pool_historical": (PoolHistoricalSpec, PoolHistoricalAdapter),
    "pool_transactions": (PoolTransactionsSpec, PoolTransactionsAdapter),
    "positions": (PositionsSpec, PositionsAdapter),
    "position_detail": (PositionDetailSpec, PositionDetailAdapter),
    "position_transactions": (PositionTransactionsSpec, PositionTransactionsAdapter),
    "protocols": (ProtocolsSpec, ProtocolsAdapter),
}


def get_endpoint_spec(endpoint_id: str) -> RestEndpointSpec | None:
    """Get endpoint specification by ID.

    Args:
        endpoint_id: Endpoint identifier (e.g., "pools", "position_detail")

    Returns:
        RestEndpointSpec if found, None otherwise
    """
    entry = _ENDPOINT_REGISTRY.get(endpoint_id)
    return entry[0] if entry else None


def get_endpoint_adapter(endpoint_id: str) -> type[ResponseAdapter] | None:
    """Get endpoint adapter class by ID.

    Args:
        endpoint_id: Endpoint identifier (e.g., "pools", "position_detail")

    Returns:
        Adapter class if found, None otherwise
    """
    entry = _ENDPOINT_REGISTRY.get(endpoint_id)
    return entry[1] if entry else None


def list_endpoints() -> list[str]:
    return list(_ENDPOINT_REGISTRY)
