"""Per-weekday opening hours."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime

from chronopick.domain import AllowedTimes, Zone
from chronopick.utils import local_date


class OpeningHours:
    """Allowed time-of-day windows keyed by weekday (Monday is 0).

    Weekdays without an explicit entry use ``default``. Instances are callable
    and satisfy ``AllowedTimesProvider``.
    """

    def __init__(
        self,
        default: AllowedTimes | None = None,
        *,
        per_weekday: Mapping[int, AllowedTimes] | None = None,
    ) -> None:
        self._default = default or AllowedTimes.whole_day()
        self._per_weekday = dict(per_weekday or {})
        for weekday in self._per_weekday:
            if not 0 <= weekday <= 6:
                msg = f"Weekday must be between 0 and 6, got {weekday}"
                raise ValueError(msg)

    @property
    def default(self) -> AllowedTimes:
        return self._default

    def window_for(self, weekday: int) -> AllowedTimes:
        return self._per_weekday.get(weekday, self._default)

    def allowed_times(self, zone: Zone, instant: datetime) -> AllowedTimes:
        return self.window_for(local_date(zone, instant).weekday())

    __call__ = allowed_times


__all__ = ["OpeningHours"]
