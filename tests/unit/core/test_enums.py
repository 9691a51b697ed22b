"""Unit tests for core enums."""

import pytest

from krystal.cloud.core import PoolSortBy, PositionStatus


def test_pool_sort_codes():
    assert [int(s) for s in PoolSortBy] == [0, 1, 2, 3]
    assert PoolSortBy.TVL == 1


@pytest.mark.parametrize(
    "text,expected",
    [
        ("tvl", PoolSortBy.TVL),
        ("APR", PoolSortBy.APR),
        ("volume", PoolSortBy.VOLUME_24H),
        ("volume-24h", PoolSortBy.VOLUME_24H),
        ("fees", PoolSortBy.FEE),
    ],
)
def test_pool_sort_from_str(text, expected):
    assert PoolSortBy.from_str(text) is expected


def test_pool_sort_from_str_unknown():
    with pytest.raises(ValueError, match="Unknown pool sort option"):
        PoolSortBy.from_str("liquidity")


def test_position_status_api_value():
    assert PositionStatus.OPEN.api_value == "OPEN"
    assert PositionStatus.CLOSED.api_value == "CLOSED"
    assert PositionStatus.ALL.api_value is None
