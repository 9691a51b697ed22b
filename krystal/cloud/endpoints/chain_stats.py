"""Network detail endpoint definition.

The stats body has no fixed schema, so it is returned as decoded JSON.
"""

from __future__ import annotations

from typing import Any

from ..runtime.rest import ResponseAdapter, RestEndpointSpec
from .paths import segment


def build_path(params: dict[str, Any]) -> str:
    return f"/v1/chains/{segment(params['chain_id'])}"


SPEC = RestEndpointSpec(id="chain_stats", build_path=build_path)


class Adapter(ResponseAdapter):
    pass
