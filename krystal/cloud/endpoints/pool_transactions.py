"""Pool transactions endpoint definition and adapters.

Params:
    chain_id: int
    pool_address: str
    factory_address: str | None
    query: TransactionQuery | None
"""

from __future__ import annotations

from typing import Any

from ..models import PaginatedResponse, Transaction
from ..query import POOL_TIME_KEYS, TransactionQuery
from ..runtime.rest import ResponseAdapter, RestEndpointSpec
from .paths import segment
from .shapes import extract_collection, parse_items, parse_page


def build_path(params: dict[str, Any]) -> str:
    chain, pool = segment(params["chain_id"]), segment(params["pool_address"])
    return f"/v1/pools/{chain}/{pool}/transactions"


def build_query(params: dict[str, Any]) -> list[tuple[str, str]]:
    q: list[tuple[str, str]] = []
    if params.get("factory_address"):
        q.append(("factoryAddress", params["factory_address"]))
    query: TransactionQuery | None = params.get("query")
    if query is not None:
        q.extend(query.to_params(POOL_TIME_KEYS))
    return q


def validate(params: dict[str, Any]) -> None:
    if params.get("query") is not None:
        params["query"].validate()


SPEC = RestEndpointSpec(
    id="pool_transactions",
    build_path=build_path,
    build_query=build_query,
    validate=validate,
)


class Adapter(ResponseAdapter):
    def parse(self, response: Any, params: dict[str, Any]) -> list[Transaction]:
        items = extract_collection(response, "transactions", endpoint_id=SPEC.id)
        return parse_items(Transaction, items)


class PageAdapter(ResponseAdapter):
    def parse(self, response: Any, params: dict[str, Any]) -> PaginatedResponse[Transaction]:
        items = extract_collection(response, "transactions", endpoint_id=SPEC.id)
        return parse_page(Transaction, items, response)
