"""Unit tests for endpoint paths, query strings and validation."""

from __future__ import annotations

import pytest

from krystal.cloud.core import InvalidParamsError, ParseError, PoolSortBy, PositionStatus
from krystal.cloud.endpoints import get_endpoint_adapter, get_endpoint_spec, list_endpoints
from krystal.cloud.endpoints import pool_transactions as pool_transactions_endpoint
from krystal.cloud.endpoints import pools as pools_endpoint
from krystal.cloud.query import PoolsQuery, PositionsQuery, TransactionQuery

WALLET = "0x742d35Cc6634C0532925a3b844Bc9e7595f0bEb8"
POOL = "0x88e6a0c2ddd26feeb64f039a2c41296fcb3f5640"


def test_registry_lists_every_endpoint():
    assert set(list_endpoints()) == {
        "chains",
        "chain_stats",
        "pools",
        "pool_detail",
        "pool_historical",
        "pool_transactions",
        "positions",
        "position_detail",
        "position_transactions",
        "protocols",
    }
    assert get_endpoint_spec("unknown") is None
    assert get_endpoint_adapter("unknown") is None


@pytest.mark.parametrize(
    "endpoint_id,params,path",
    [
        ("chains", {}, "/v1/chains"),
        ("chain_stats", {"chain_id": 56}, "/v1/chains/56"),
        ("pools", {"query": PoolsQuery()}, "/v1/pools"),
        ("pool_detail", {"chain_id": 1, "pool_address": POOL}, f"/v1/pools/1/{POOL}"),
        (
            "pool_historical",
            {"chain_id": 1, "pool_address": POOL},
            f"/v1/pools/1/{POOL}/historical",
        ),
        (
            "pool_transactions",
            {"chain_id": 1, "pool_address": POOL},
            f"/v1/pools/1/{POOL}/transactions",
        ),
        ("positions", {"query": PositionsQuery(WALLET)}, "/v1/positions"),
        ("position_detail", {"chain_id": 1, "position_id": "abc"}, "/v1/positions/1/abc"),
        (
            "position_transactions",
            {"chain_id": 10, "token_address": POOL},
            "/v1/positions/10/transactions",
        ),
        ("protocols", {}, "/v1/protocols"),
    ],
)
def test_paths(endpoint_id, params, path):
    assert get_endpoint_spec(endpoint_id).build_path(params) == path


def test_pools_query_string():
    spec = get_endpoint_spec("pools")
    query = PoolsQuery().chain_id(1).sort_by(PoolSortBy.TVL).limit(5)
    assert spec.build_query({"query": query}) == [
        ("chainId", "1"),
        ("sortBy", "1"),
        ("limit", "5"),
    ]


def test_pools_validation_rejects_bad_limit():
    spec = get_endpoint_spec("pools")
    with pytest.raises(InvalidParamsError):
        spec.validate({"query": PoolsQuery().limit(0)})


def test_positions_query_string_and_validation():
    spec = get_endpoint_spec("positions")
    query = PositionsQuery(WALLET).status(PositionStatus.OPEN)
    assert spec.build_query({"query": query}) == [
        ("wallet", WALLET),
        ("positionStatus", "OPEN"),
    ]
    with pytest.raises(InvalidParamsError):
        spec.validate({"query": PositionsQuery("not-a-wallet")})


def test_pool_detail_query_omits_unset_incentives():
    spec = get_endpoint_spec("pool_detail")
    assert spec.build_query({"chain_id": 1, "pool_address": POOL}) == []
    assert spec.build_query(
        {"chain_id": 1, "pool_address": POOL, "factory_address": "0xf", "with_incentives": True}
    ) == [("factoryAddress", "0xf"), ("withIncentives", "true")]


def test_pool_historical_sends_time_range_only():
    spec = get_endpoint_spec("pool_historical")
    query = TransactionQuery().time_range(100, 200).limit(10)
    assert spec.build_query({"query": query}) == [("startTime", "100"), ("endTime", "200")]


def test_pool_transactions_query_string():
    spec = get_endpoint_spec("pool_transactions")
    query = TransactionQuery().start_time(100).limit(10).offset(20)
    assert spec.build_query({"factory_address": "0xf", "query": query}) == [
        ("factoryAddress", "0xf"),
        ("startTime", "100"),
        ("limit", "10"),
        ("offset", "20"),
    ]


def test_pool_transactions_validation():
    spec = get_endpoint_spec("pool_transactions")
    spec.validate({"query": None})
    with pytest.raises(InvalidParamsError):
        spec.validate({"query": TransactionQuery().time_range(200, 100)})


def test_position_transactions_query_string():
    spec = get_endpoint_spec("position_transactions")
    query = TransactionQuery().time_range(100, 200).limit(5).offset(10)
    assert spec.build_query(
        {"token_address": POOL, "wallet": WALLET, "token_id": "42", "query": query}
    ) == [
        ("tokenAddress", POOL),
        ("wallet", WALLET),
        ("tokenId", "42"),
        ("startTimestamp", "100"),
        ("endTimestamp", "200"),
        ("limit", "5"),
        ("offset", "10"),
    ]


def test_position_transactions_requires_token_address():
    spec = get_endpoint_spec("position_transactions")
    with pytest.raises(InvalidParamsError, match="Token address cannot be empty"):
        spec.validate({"token_address": ""})


def test_pools_adapter_parses_named_collection(pool_payload):
    pools = get_endpoint_adapter("pools")().parse({"pools": [pool_payload]}, {})
    assert len(pools) == 1
    assert pools[0].address == POOL


def test_pools_page_adapter_keeps_metadata(pool_payload):
    page = pools_endpoint.PageAdapter().parse(
        {"pools": [pool_payload], "total": 30, "offset": 0, "limit": 1, "hasMore": True}, {}
    )
    assert page.total == 30
    assert page.has_more is True
    assert page.data[0].fee_tier == 500


def test_chains_adapter_accepts_bare_list():
    chains = get_endpoint_adapter("chains")().parse([{"id": 1, "name": "Ethereum"}], {})
    assert chains[0].name == "Ethereum"


def test_detail_adapters(position_payload, pool_payload):
    position = get_endpoint_adapter("position_detail")().parse(position_payload, {})
    assert position.token_id == "12345"
    pool = get_endpoint_adapter("pool_detail")().parse(pool_payload, {})
    assert pool.pool_price == 3150.25


def test_raw_adapters_pass_json_through():
    payload = {"tvl": 1, "anything": [1, 2]}
    for endpoint_id in ("chain_stats", "protocols", "pool_historical"):
        assert get_endpoint_adapter(endpoint_id)().parse(payload, {}) is payload


@pytest.mark.parametrize(
    "metadata",
    [{"total": "n/a"}, {"offset": [1]}, {"limit": "ten"}, {"hasMore": "maybe"}],
)
def test_page_adapters_reject_malformed_metadata(metadata):
    with pytest.raises(ParseError, match="invalid pagination metadata"):
        pools_endpoint.PageAdapter().parse({"pools": [], **metadata}, {})
    with pytest.raises(ParseError, match="invalid pagination metadata"):
        pool_transactions_endpoint.PageAdapter().parse({"transactions": [], **metadata}, {})


@pytest.mark.parametrize(
    "endpoint_id,params,path",
    [
        ("pool_detail", {"chain_id": 1, "pool_address": "0xabc/../x"}, "/v1/pools/1/0xabc%2F..%2Fx"),
        (
            "pool_transactions",
            {"chain_id": 1, "pool_address": "0xabc?limit=1"},
            "/v1/pools/1/0xabc%3Flimit%3D1/transactions",
        ),
        (
            "pool_historical",
            {"chain_id": 1, "pool_address": "a b"},
            "/v1/pools/1/a%20b/historical",
        ),
        ("position_detail", {"chain_id": 1, "position_id": "1-0xc3/42"}, "/v1/positions/1/1-0xc3%2F42"),
    ],
)
def test_path_segments_are_escaped(endpoint_id, params, path):
    assert get_endpoint_spec(endpoint_id).build_path(params) == path
