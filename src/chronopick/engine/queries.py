"""Read-only questions the calendar view asks about a selection."""

from __future__ import annotations

from datetime import datetime

from chronopick.domain import (
    DayState,
    DurationSelectableTimes,
    DurationSelection,
    PickerDay,
    SelectableTimes,
    Selection,
    Zone,
)
from chronopick.utils import time_of_day, with_hour

from .boundaries import hour_bounds_for_selected_minute, minute_bounds_for_selected_hour


def _span(bounds: tuple[int, int]) -> tuple[int, ...]:
    earliest, latest = bounds
    return tuple(range(earliest, latest + 1))


def day_picked_or_between(
    day: PickerDay,
    hovered: PickerDay | None,
    selection: DurationSelection,
) -> DayState:
    """Tell whether ``day`` is an endpoint of the range or strictly inside it.

    A missing half is stood in for by the hovered day so the view can preview
    the range before it is committed.
    """

    endpoints = [half.day for half in (selection.start, selection.end) if half is not None]
    is_picked = day in endpoints

    if len(endpoints) == 1 and hovered is not None:
        endpoints.append(hovered)
    if len(endpoints) < 2:
        return DayState(is_picked=is_picked, is_between=False)

    lower, upper = sorted(endpoints, key=lambda endpoint: endpoint.start)
    is_between = lower.end < day.start and day.end < upper.start
    return DayState(is_picked=is_picked, is_between=is_between)


def is_day_picked(day: PickerDay, hovered: PickerDay | None, selection: DurationSelection) -> bool:
    return day_picked_or_between(day, hovered, selection).is_picked


def is_day_between(day: PickerDay, hovered: PickerDay | None, selection: DurationSelection) -> bool:
    return day_picked_or_between(day, hovered, selection).is_between


def is_single_day_picked(day: PickerDay, selection: Selection | None) -> bool:
    return selection is not None and selection.day == day


def _times_for(zone: Zone, day: PickerDay, instant: datetime) -> tuple[tuple[int, ...], tuple[int, ...]]:
    hours = _span(hour_bounds_for_selected_minute(zone, day, instant))
    minutes = _span(minute_bounds_for_selected_hour(zone, day, instant))
    return hours, minutes


def _minute_after_hour_change(zone: Zone, half: Selection, hour: int) -> int:
    """Minute ``half`` ends up with once moved to ``hour``, raised to the earliest legal one."""

    _, minute = time_of_day(zone, half.instant)
    earliest, _ = minute_bounds_for_selected_hour(zone, half.day, with_hour(zone, half.instant, hour))
    return max(minute, earliest)


def filter_selectable_times(
    zone: Zone,
    base_day: PickerDay,
    selection: Selection | None,
) -> SelectableTimes:
    """Hours and minutes a single picker should offer for its current state."""

    if selection is None:
        hours, minutes = _times_for(zone, base_day, base_day.start)
    else:
        hours, minutes = _times_for(zone, selection.day, selection.instant)
    return SelectableTimes(hours=hours, minutes=minutes)


def filter_duration_selectable_times(
    zone: Zone,
    base_day: PickerDay,
    selection: DurationSelection,
) -> DurationSelectableTimes:
    """Hours and minutes a range picker should offer for each half.

    A missing half is derived from the day of the present one (or from
    ``base_day``). When both halves share a day the start options are capped
    by the end and the end options floored by the start, counting the minute
    each half keeps (or is raised to) after moving to an offered hour.
    """

    start, end = selection.start, selection.end

    if start is not None:
        start_day, start_instant = start.day, start.instant
    elif end is not None:
        start_day, start_instant = end.day, end.day.start
    else:
        start_day, start_instant = base_day, base_day.start

    if end is not None:
        end_day, end_instant = end.day, end.instant
    elif start is not None:
        end_day, end_instant = start.day, start.day.end
    else:
        end_day, end_instant = base_day, base_day.end

    start_hours, start_minutes = _times_for(zone, start_day, start_instant)
    end_hours, end_minutes = _times_for(zone, end_day, end_instant)

    if start is not None and end is not None and start.day == end.day:
        start_hour, start_minute = time_of_day(zone, start.instant)
        end_hour, end_minute = time_of_day(zone, end.instant)
        start_hours = tuple(
            hour
            for hour in start_hours
            if (hour, _minute_after_hour_change(zone, start, hour)) < (end_hour, end_minute)
        )
        end_hours = tuple(
            hour
            for hour in end_hours
            if (start_hour, start_minute) < (hour, _minute_after_hour_change(zone, end, hour))
        )
        if start_hour == end_hour:
            start_minutes = tuple(minute for minute in start_minutes if minute < end_minute)
            end_minutes = tuple(minute for minute in end_minutes if minute > start_minute)

    return DurationSelectableTimes(
        start_hours=start_hours,
        start_minutes=start_minutes,
        end_hours=end_hours,
        end_minutes=end_minutes,
    )


__all__ = [
    "day_picked_or_between",
    "filter_duration_selectable_times",
    "filter_selectable_times",
    "is_day_between",
    "is_day_picked",
    "is_single_day_picked",
]
