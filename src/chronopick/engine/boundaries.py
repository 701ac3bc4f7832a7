"""Hour/minute bounds and validity checks for a picker day."""

from __future__ import annotations

from datetime import datetime

from chronopick.domain import Bounds, PickerDay, Selection, Zone
from chronopick.utils import same_calendar_day, time_of_day


def hour_bounds_for_selected_minute(zone: Zone, day: PickerDay, instant: datetime) -> Bounds:
    """Return the first and last hour that can be combined with the selected minute.

    With a 09:30-17:30 window a selected minute of 15 cannot be paired with
    hour 9, and a selected minute of 45 cannot be paired with hour 17.
    """

    start_hour, start_minute = time_of_day(zone, day.start)
    end_hour, end_minute = time_of_day(zone, day.end)
    _, selected_minute = time_of_day(zone, instant)

    earliest = start_hour + 1 if selected_minute < start_minute else start_hour
    latest = end_hour - 1 if selected_minute > end_minute else end_hour
    return earliest, latest


def minute_bounds_for_selected_hour(zone: Zone, day: PickerDay, instant: datetime) -> Bounds:
    """Return the first and last minute that can be combined with the selected hour."""

    start_hour, start_minute = time_of_day(zone, day.start)
    end_hour, end_minute = time_of_day(zone, day.end)
    selected_hour, _ = time_of_day(zone, instant)

    earliest = start_minute if selected_hour == start_hour else 0
    latest = end_minute if selected_hour == end_hour else 59
    return earliest, latest


def is_within_day_boundaries(zone: Zone, day: PickerDay, instant: datetime) -> bool:
    """Check the time of day of ``instant`` against the day's window.

    Only hour and minute are compared, so ``instant`` may lie on any
    calendar day.
    """

    return time_of_day(zone, day.start) <= time_of_day(zone, instant) <= time_of_day(zone, day.end)


def valid_selection_or_default(
    zone: Zone,
    default: Selection | None,
    day: PickerDay,
    instant: datetime,
) -> Selection | None:
    """Pair ``instant`` with ``day`` if that is a legal selection, else return ``default``."""

    if day.disabled:
        return default
    if not same_calendar_day(zone, instant, day.start):
        return default
    if not is_within_day_boundaries(zone, day, instant):
        return default
    return Selection(day=day, instant=instant)


__all__ = [
    "hour_bounds_for_selected_minute",
    "is_within_day_boundaries",
    "minute_bounds_for_selected_hour",
    "valid_selection_or_default",
]
