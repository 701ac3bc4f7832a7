"""Conversion of raw instants into bounded picker days."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime

from chronopick.domain import AllowedTimes, DateLike, PickerDay, Zone
from chronopick.scheduling import AllowedTimesProvider, DayDisabledPredicate, never_disabled
from chronopick.utils import at_time_of_day, floor_day, to_instant


def build_picker_day(
    zone: Zone,
    is_disabled: DayDisabledPredicate,
    allowed_times: AllowedTimesProvider | None,
    instant: datetime,
) -> PickerDay:
    """Build the picker day containing ``instant`` as seen in ``zone``.

    The rules are evaluated against midnight of that day. Without an
    ``allowed_times`` provider the whole day (00:00 to 23:59) is selectable.
    A picker day does not track later rule changes; rebuild it instead.
    """

    floored = floor_day(zone, instant)
    window = allowed_times(zone, floored) if allowed_times is not None else AllowedTimes.whole_day()
    return PickerDay(
        start=at_time_of_day(zone, floored, window.start_hour, window.start_minute),
        end=at_time_of_day(zone, floored, window.end_hour, window.end_minute),
        disabled=is_disabled(zone, floored),
    )


@dataclass(frozen=True, slots=True)
class PickerSettings:
    """Zone and day rules shared by every picker day of one widget."""

    zone: Zone = UTC
    is_day_disabled: DayDisabledPredicate = field(default=never_disabled)
    allowed_times_of_day: AllowedTimesProvider | None = None

    def picker_day(self, value: DateLike) -> PickerDay:
        return build_picker_day(
            self.zone,
            self.is_day_disabled,
            self.allowed_times_of_day,
            to_instant(self.zone, value),
        )


__all__ = ["PickerSettings", "build_picker_day"]
