"""Unix timestamp helpers for building transaction time ranges."""

from __future__ import annotations

import time

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 3600
SECONDS_PER_DAY = 86400


def current_timestamp() -> int:
    return int(time.time())


def days_ago(days: int) -> int:
    return max(0, current_timestamp() - days * SECONDS_PER_DAY)


def hours_ago(hours: int) -> int:
    return max(0, current_timestamp() - hours * SECONDS_PER_HOUR)


def minutes_ago(minutes: int) -> int:
    return max(0, current_timestamp() - minutes * SECONDS_PER_MINUTE)


def start_of_day_ago(days: int) -> int:
    """Midnight UTC of the day ``days`` days ago."""
    timestamp = days_ago(days)
    return timestamp - (timestamp % SECONDS_PER_DAY)
