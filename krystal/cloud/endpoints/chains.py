"""Networks list endpoint definition and adapter."""

from __future__ import annotations

from typing import Any

from ..models import ChainInfo
from ..runtime.rest import ResponseAdapter, RestEndpointSpec
from .shapes import extract_collection, parse_items


def build_path(_params: dict[str, Any]) -> str:
    return "/v1/chains"


SPEC = RestEndpointSpec(id="chains", build_path=build_path)


class Adapter(ResponseAdapter):
    def parse(self, response: Any, params: dict[str, Any]) -> list[ChainInfo]:
        items = extract_collection(response, "chains", endpoint_id=SPEC.id)
        return parse_items(ChainInfo, items)
