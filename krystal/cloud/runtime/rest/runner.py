"""REST request runner using endpoint specs and response adapters."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from time import perf_counter
from typing import Any

from ...core.exceptions import InvalidParamsError, KrystalError
from .telemetry import log_request_completed, log_request_failed, log_request_rejected
from .transport import RESTTransport


@dataclass(frozen=True)
class RestEndpointSpec:
    id: str
    build_path: Callable[[dict[str, Any]], str]
    build_query: Callable[[dict[str, Any]], list[tuple[str, str]]] | None = None
    # Raises InvalidParamsError; runs before any network I/O
    validate: Callable[[dict[str, Any]], None] | None = None


class ResponseAdapter:
    def parse(self, response: Any, params: dict[str, Any]) -> Any:
        return response


class RestRunner:
    def __init__(self, transport: RESTTransport) -> None:
        self._t = transport

    async def run(
        self, *, spec: RestEndpointSpec, adapter: ResponseAdapter, params: dict[str, Any]
    ) -> Any:
        if spec.validate:
            try:
                spec.validate(params)
            except InvalidParamsError as e:
                log_request_rejected(endpoint_id=spec.id, reason=e.detail)
                raise

        path = spec.build_path(params)
        query = spec.build_query(params) if spec.build_query else None

        start = perf_counter()
        try:
            data = await self._t.get(path, params=query)
        except KrystalError as e:
            log_request_failed(
                endpoint_id=spec.id, error_type=type(e).__name__, error_message=str(e)
            )
            raise
        log_request_completed(
            endpoint_id=spec.id, path=path, latency_ms=(perf_counter() - start) * 1000.0
        )

        return adapter.parse(data, params)
