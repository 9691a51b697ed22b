"""Position detail endpoint definition and adapter."""

from __future__ import annotations

from typing import Any

from ..models import Position
from ..runtime.rest import ResponseAdapter, RestEndpointSpec
from .paths import segment
from .shapes import parse_entity


def build_path(params: dict[str, Any]) -> str:
    return f"/v1/positions/{segment(params['chain_id'])}/{segment(params['position_id'])}"


SPEC = RestEndpointSpec(id="position_detail", build_path=build_path)


class Adapter(ResponseAdapter):
    def parse(self, response: Any, params: dict[str, Any]) -> Position:
        return parse_entity(Position, response)
