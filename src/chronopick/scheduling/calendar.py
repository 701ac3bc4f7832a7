"""Holiday-aware day disablement."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date, datetime, timedelta

from chronopick.domain import Zone
from chronopick.utils import local_date

ALL_WEEKDAYS = frozenset(range(7))


class HolidayCalendar:
    """Disables holidays, closed weekdays and days outside an optional date range.

    Instances are callable and satisfy ``DayDisabledPredicate``.
    """

    def __init__(
        self,
        *,
        holidays: Iterable[date] | None = None,
        open_weekdays: Iterable[int] | None = None,
        earliest: date | None = None,
        latest: date | None = None,
    ) -> None:
        self._holidays = {holiday for holiday in (holidays or [])}
        self._open_weekdays = frozenset(open_weekdays) if open_weekdays is not None else ALL_WEEKDAYS
        self._earliest = earliest
        self._latest = latest

    def add_holiday(self, holiday: date) -> None:
        self._holidays.add(holiday)

    def is_holiday(self, target: date) -> bool:
        return target in self._holidays

    @property
    def holidays(self) -> tuple[date, ...]:
        return tuple(sorted(self._holidays))

    @property
    def open_weekdays(self) -> frozenset[int]:
        return self._open_weekdays

    def is_open_day(self, target: date) -> bool:
        if self._earliest is not None and target < self._earliest:
            return False
        if self._latest is not None and target > self._latest:
            return False
        return target.weekday() in self._open_weekdays and target not in self._holidays

    def next_open_day(self, after: date) -> date | None:
        """Return the first open day on or after ``after``, if any within a year."""

        search_date = after
        for _ in range(366):
            if self.is_open_day(search_date):
                return search_date
            search_date += timedelta(days=1)
        return None

    def is_day_disabled(self, zone: Zone, instant: datetime) -> bool:
        return not self.is_open_day(local_date(zone, instant))

    __call__ = is_day_disabled


__all__ = ["ALL_WEEKDAYS", "HolidayCalendar"]
