"""Position transactions endpoint definition and adapter.

Params:
    chain_id: int
    token_address: str (required)
    wallet: str | None
    token_id: str | None
    query: TransactionQuery | None (time bounds sent as start/endTimestamp)
"""

from __future__ import annotations

from typing import Any

from ..core.exceptions import InvalidParamsError
from ..models import Transaction
from ..query import POSITION_TIME_KEYS, TransactionQuery
from ..runtime.rest import ResponseAdapter, RestEndpointSpec
from .paths import segment
from .shapes import extract_collection, parse_items


def build_path(params: dict[str, Any]) -> str:
    return f"/v1/positions/{segment(params['chain_id'])}/transactions"


def build_query(params: dict[str, Any]) -> list[tuple[str, str]]:
    q: list[tuple[str, str]] = [("tokenAddress", params["token_address"])]
    if params.get("wallet"):
        q.append(("wallet", params["wallet"]))
    if params.get("token_id"):
        q.append(("tokenId", params["token_id"]))
    query: TransactionQuery | None = params.get("query")
    if query is not None:
        q.extend(query.to_params(POSITION_TIME_KEYS))
    return q


def validate(params: dict[str, Any]) -> None:
    if not params.get("token_address"):
        raise InvalidParamsError("Token address cannot be empty", status_code=None)
    if params.get("query") is not None:
        params["query"].validate()


SPEC = RestEndpointSpec(
    id="position_transactions",
    build_path=build_path,
    build_query=build_query,
    validate=validate,
)


class Adapter(ResponseAdapter):
    def parse(self, response: Any, params: dict[str, Any]) -> list[Transaction]:
        items = extract_collection(response, "transactions", endpoint_id=SPEC.id)
        return parse_items(Transaction, items)
