"""Pool detail endpoint definition and adapter.

Params:
    chain_id: int
    pool_address: str
    factory_address: str | None
    with_incentives: bool | None
"""

from __future__ import annotations

from typing import Any

from ..models import Pool
from ..query.base import render_value
from ..runtime.rest import ResponseAdapter, RestEndpointSpec
from .paths import segment
from .shapes import parse_entity


def build_path(params: dict[str, Any]) -> str:
    return f"/v1/pools/{segment(params['chain_id'])}/{segment(params['pool_address'])}"


def build_query(params: dict[str, Any]) -> list[tuple[str, str]]:
    q: list[tuple[str, str]] = []
    if params.get("factory_address"):
        q.append(("factoryAddress", params["factory_address"]))
    if params.get("with_incentives") is not None:
        q.append(("withIncentives", render_value(params["with_incentives"])))
    return q


SPEC = RestEndpointSpec(id="pool_detail", build_path=build_path, build_query=build_query)


class Adapter(ResponseAdapter):
    def parse(self, response: Any, params: dict[str, Any]) -> Pool:
        return parse_entity(Pool, response)
