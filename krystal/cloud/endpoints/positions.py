"""Position list endpoint definition and adapter.

Params:
    query: PositionsQuery
"""

from __future__ import annotations

from typing import Any

from ..models import Position
from ..query import PositionsQuery
from ..runtime.rest import ResponseAdapter, RestEndpointSpec
from .shapes import extract_collection, parse_items


def build_path(_params: dict[str, Any]) -> str:
    return "/v1/positions"


def build_query(params: dict[str, Any]) -> list[tuple[str, str]]:
    query: PositionsQuery = params["query"]
    return query.to_params()


def validate(params: dict[str, Any]) -> None:
    params["query"].validate()


SPEC = RestEndpointSpec(
    id="positions",
    build_path=build_path,
    build_query=build_query,
    validate=validate,
)


class Adapter(ResponseAdapter):
    def parse(self, response: Any, params: dict[str, Any]) -> list[Position]:
        items = extract_collection(response, "positions", endpoint_id=SPEC.id)
        return parse_items(Position, items)
