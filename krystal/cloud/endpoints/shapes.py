"""Response shape handling shared by endpoint adapters.

List endpoints answer either ``{"<field>": [...], ...}`` or a bare
``[...]``. An object with no collection and nothing else but pagination
metadata is read as an empty page and logged; any other shape is a
``ParseError`` so upstream errors are not mistaken for empty results.
"""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from ..core.exceptions import ParseError
from ..models import PaginatedResponse
from ..runtime.rest.telemetry import log_collection_fallback

M = TypeVar("M", bound=BaseModel)

# Keys that may accompany an empty page without making the shape suspicious
PAGINATION_KEYS = frozenset({"total", "offset", "limit", "hasMore", "has_more"})


def extract_collection(payload: Any, field: str, *, endpoint_id: str) -> list[Any]:
    """Locate the item list of a list response.

    Args:
        payload: Decoded success body
        field: Named field expected to hold the list (e.g. "pools")
        endpoint_id: Endpoint identifier, for logging

    Returns:
        The raw item list (possibly empty)

    Raises:
        ParseError: If the body has an unexpected shape
    """
    if isinstance(payload, list):
        return payload

    if not isinstance(payload, dict):
        raise ParseError(
            f"Invalid {field} response format: expected object or array, got {type(payload).__name__}"
        )

    value = payload.get(field)
    if isinstance(value, list):
        return value
    if value is not None:
        raise ParseError(
            f"Invalid {field} response format: '{field}' is {type(value).__name__}, expected array"
        )

    unexpected = set(payload) - PAGINATION_KEYS - {field}
    if unexpected:
        raise ParseError(
            f"Invalid {field} response format: no '{field}' array, found keys {sorted(unexpected)}"
        )

    log_collection_fallback(
        endpoint_id=endpoint_id,
        field=field,
        reason="missing" if field not in payload else "null",
    )
    return []


def parse_items(model: type[M], items: list[Any]) -> list[M]:
    """Validate each raw item into ``model``."""
    try:
        return [model.model_validate(item) for item in items]
    except ValidationError as e:
        raise ParseError(f"JSON error: invalid {model.__name__}: {e}") from e


def parse_entity(model: type[M], payload: Any) -> M:
    """Validate a whole detail body into ``model``."""
    try:
        return model.model_validate(payload)
    except ValidationError as e:
        raise ParseError(f"JSON error: invalid {model.__name__}: {e}") from e


def parse_page(model: type[M], items: list[Any], payload: Any) -> PaginatedResponse[M]:
    """Validate items into ``model`` and attach the payload's pagination metadata."""
    data = parse_items(model, items)
    try:
        return PaginatedResponse[model].from_payload(data, payload)
    except ValidationError as e:
        raise ParseError(f"JSON error: invalid pagination metadata: {e}") from e
