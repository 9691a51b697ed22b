"""Utility functions."""

from .address import format_address, is_valid_ethereum_address, normalize_address
from .pagination import PaginationTracker
from .rate_limit import RateLimiter
from .retry import RetryPolicy, is_retryable, retry_async, retry_simple
from .timestamps import current_timestamp, days_ago, hours_ago, minutes_ago, start_of_day_ago

__all__ = [
    "PaginationTracker",
    "RateLimiter",
    "RetryPolicy",
    "is_retryable",
    "retry_async",
    "retry_simple",
    "is_valid_ethereum_address",
    "normalize_address",
    "format_address",
    "current_timestamp",
    "days_ago",
    "hours_ago",
    "minutes_ago",
    "start_of_day_ago",
]
