"""Offset pagination bookkeeping."""

from __future__ import annotations

from typing import Any

from ..models.pagination import PaginatedResponse


class PaginationTracker:
    """Tracks the offset cursor across repeated requests for one filter.

    The offset only ever grows, by the number of items each page carried.
    ``has_more`` and ``total`` are copied from the latest page's metadata.
    """

    def __init__(self, page_size: int, offset: int = 0) -> None:
        if page_size < 1:
            raise ValueError("page_size must be at least 1")
        if offset < 0:
            raise ValueError("offset cannot be negative")
        self._page_size = page_size
        self._offset = offset
        self._total: int | None = None
        self._has_more = True

    @property
    def page_size(self) -> int:
        return self._page_size

    @property
    def next_offset(self) -> int:
        return self._offset

    @property
    def total_items(self) -> int | None:
        return self._total

    def has_next_page(self) -> bool:
        return self._has_more

    def advance(self, item_count: int, *, total: int | None = None, has_more: bool | None = None) -> None:
        """Consume a page of ``item_count`` items and its metadata."""
        if item_count < 0:
            raise ValueError("item_count cannot be negative")
        self._offset += item_count
        self._total = total
        self._has_more = bool(has_more)

    def update_from_response(self, response: PaginatedResponse[Any]) -> None:
        self.advance(len(response.data), total=response.total, has_more=response.has_more)

    @property
    def progress_percentage(self) -> float | None:
        """Consumed share of ``total`` in percent; 100.0 when total is zero, None when unknown."""
        if self._total is None:
            return None
        if self._total == 0:
            return 100.0
        return self._offset / self._total * 100.0
