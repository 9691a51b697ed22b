"""Pool list endpoint definition and adapters.

Params:
    query: PoolsQuery
"""

from __future__ import annotations

from typing import Any

from ..models import PaginatedResponse, Pool
from ..query import PoolsQuery
from ..runtime.rest import ResponseAdapter, RestEndpointSpec
from .shapes import extract_collection, parse_items, parse_page


def build_path(_params: dict[str, Any]) -> str:
    return "/v1/pools"


def build_query(params: dict[str, Any]) -> list[tuple[str, str]]:
    query: PoolsQuery = params["query"]
    return query.to_params()


def validate(params: dict[str, Any]) -> None:
    params["query"].validate()


SPEC = RestEndpointSpec(
    id="pools",
    build_path=build_path,
    build_query=build_query,
    validate=validate,
)


class Adapter(ResponseAdapter):
    def parse(self, response: Any, params: dict[str, Any]) -> list[Pool]:
        return parse_items(Pool, extract_collection(response, "pools", endpoint_id=SPEC.id))


class PageAdapter(ResponseAdapter):
    """Keeps total/hasMore metadata alongside the pools."""

    def parse(self, response: Any, params: dict[str, Any]) -> PaginatedResponse[Pool]:
        items = extract_collection(response, "pools", endpoint_id=SPEC.id)
        return parse_page(Pool, items, response)
