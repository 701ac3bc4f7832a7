"""Utility helpers."""

from .time import (
    at_time_of_day,
    ensure_aware,
    floor_day,
    local_date,
    same_calendar_day,
    time_of_day,
    to_instant,
    utc_now,
    with_hour,
    with_minute,
)

__all__ = [
    "at_time_of_day",
    "ensure_aware",
    "floor_day",
    "local_date",
    "same_calendar_day",
    "time_of_day",
    "to_instant",
    "utc_now",
    "with_hour",
    "with_minute",
]
