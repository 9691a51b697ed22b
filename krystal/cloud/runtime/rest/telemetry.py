"""Structured logging for REST requests.

Event names are stable strings; details travel in ``extra`` so log
formatters can emit them as fields. The API key is never passed here.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def log_request_completed(*, endpoint_id: str, path: str, latency_ms: float) -> None:
    """Log a request that produced a success payload."""
    logger.debug(
        "request_completed",
        extra={"endpoint_id": endpoint_id, "path": path, "latency_ms": latency_ms},
    )


def log_request_failed(*, endpoint_id: str, error_type: str, error_message: str) -> None:
    """Log a request that ended in a classified error.

    Args:
        endpoint_id: Endpoint identifier
        error_type: Exception class name (e.g. "AuthError", "TransportError")
        error_message: Technical detail
    """
    logger.warning(
        "request_failed",
        extra={
            "endpoint_id": endpoint_id,
            "error_type": error_type,
            "error_message": error_message,
        },
    )


def log_request_rejected(*, endpoint_id: str, reason: str) -> None:
    """Log a request blocked by local validation before dispatch."""
    logger.info("request_rejected", extra={"endpoint_id": endpoint_id, "reason": reason})


def log_collection_fallback(*, endpoint_id: str, field: str, reason: str) -> None:
    """Log a list response that carried no collection and was read as empty."""
    logger.warning(
        "collection_shape_fallback",
        extra={"endpoint_id": endpoint_id, "field": field, "reason": reason},
    )
