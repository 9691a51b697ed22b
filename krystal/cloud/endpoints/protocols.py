"""Protocol list endpoint definition."""

from __future__ import annotations

from typing import Any

from ..runtime.rest import ResponseAdapter, RestEndpointSpec


def build_path(_params: dict[str, Any]) -> str:
    return "/v1/protocols"


SPEC = RestEndpointSpec(id="protocols", build_path=build_path)


class Adapter(ResponseAdapter):
    pass
