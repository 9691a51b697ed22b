"""Unit tests for TransactionQuery."""

import pytest

from krystal.cloud.core import InvalidParamsError
from krystal.cloud.query import POSITION_TIME_KEYS, TransactionQuery


def test_pool_time_keys_by_default():
    query = TransactionQuery().time_range(1_700_000_000, 1_700_086_400).limit(25).offset(50)
    assert query.to_params() == [
        ("startTime", "1700000000"),
        ("endTime", "1700086400"),
        ("limit", "25"),
        ("offset", "50"),
    ]


def test_position_time_keys():
    query = TransactionQuery().start_time(100).end_time(200)
    assert query.to_params(POSITION_TIME_KEYS) == [
        ("startTimestamp", "100"),
        ("endTimestamp", "200"),
    ]


def test_paging_can_be_left_out():
    query = TransactionQuery().start_time(100).limit(10)
    assert query.to_params(paging=False) == [("startTime", "100")]


def test_open_ended_range_is_valid():
    TransactionQuery().start_time(100).validate()
    TransactionQuery().end_time(100).validate()


@pytest.mark.parametrize("start,end", [(200, 100), (100, 100)])
def test_start_must_precede_end(start, end):
    with pytest.raises(InvalidParamsError) as exc_info:
        TransactionQuery().time_range(start, end).validate()
    assert exc_info.value.detail == "Start time must be before end time"


@pytest.mark.parametrize("limit,valid", [(1, True), (10_000, True), (0, False), (10_001, False)])
def test_limit_bounds(limit, valid):
    assert TransactionQuery().limit(limit).is_valid() is valid
