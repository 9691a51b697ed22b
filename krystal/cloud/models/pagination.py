"""Paginated response container."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class PaginatedResponse(BaseModel, Generic[T]):
    """One page of results plus whatever pagination metadata the API sent."""

    data: list[T]
    total: int | None = None
    offset: int | None = None
    limit: int | None = None
    has_more: bool | None = Field(None, alias="hasMore")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @classmethod
    def from_payload(cls, data: list[Any], payload: Any) -> PaginatedResponse[Any]:
        """Attach the metadata found in a raw response body to parsed items.

        Accepts both ``hasMore`` and ``has_more``; a bare list payload carries
        no metadata.
        """
        meta: dict[str, Any] = {}
        if isinstance(payload, dict):
            for key in ("total", "offset", "limit"):
                if payload.get(key) is not None:
                    meta[key] = payload[key]
            has_more = payload.get("hasMore", payload.get("has_more"))
            if has_more is not None:
                meta["has_more"] = has_more
        return cls(data=data, **meta)
