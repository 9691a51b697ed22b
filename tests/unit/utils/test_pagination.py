"""Unit tests for PaginationTracker."""

import pytest

from krystal.cloud.models import PaginatedResponse
from krystal.cloud.utils import PaginationTracker


def test_initial_state():
    tracker = PaginationTracker(10)
    assert tracker.next_offset == 0
    assert tracker.has_next_page()
    assert tracker.total_items is None
    assert tracker.progress_percentage is None


def test_advance_accumulates_offset():
    tracker = PaginationTracker(10)
    tracker.advance(10, total=25, has_more=True)
    assert tracker.next_offset == 10
    assert tracker.total_items == 25
    assert tracker.progress_percentage == pytest.approx(40.0)
    assert tracker.has_next_page()

    tracker.advance(10, total=25, has_more=True)
    tracker.advance(5, total=25, has_more=False)
    assert tracker.next_offset == 25
    assert tracker.progress_percentage == pytest.approx(100.0)
    assert not tracker.has_next_page()


def test_missing_has_more_ends_pagination():
    tracker = PaginationTracker(10)
    tracker.advance(10)
    assert not tracker.has_next_page()


def test_zero_total_is_complete():
    tracker = PaginationTracker(10)
    tracker.advance(0, total=0, has_more=False)
    assert tracker.progress_percentage == 100.0


def test_update_from_response():
    tracker = PaginationTracker(2, offset=4)
    tracker.update_from_response(PaginatedResponse[int](data=[1, 2], total=10, hasMore=True))
    assert tracker.next_offset == 6
    assert tracker.total_items == 10
    assert tracker.has_next_page()


@pytest.mark.parametrize("args", [(0,), (10, -1)])
def test_invalid_construction(args):
    with pytest.raises(ValueError):
        PaginationTracker(*args)
