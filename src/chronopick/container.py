"""Service container wiring settings into picker components."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from chronopick.config import AppSettings
from chronopick.engine import PickerSettings
from chronopick.pickers import DurationPicker, SinglePicker
from chronopick.scheduling import HolidayCalendar, OpeningHours

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ServiceContainer:
    """Aggregates the day rules and picker settings built from configuration."""

    settings: AppSettings
    holiday_calendar: HolidayCalendar
    opening_hours: OpeningHours
    picker_settings: PickerSettings

    def single_picker(self) -> SinglePicker:
        return SinglePicker(self.picker_settings)

    def duration_picker(self) -> DurationPicker:
        return DurationPicker(self.picker_settings)


def build_container(settings: AppSettings | None = None) -> ServiceContainer:
    """Construct the primary service container."""

    resolved_settings = settings or AppSettings.from_env()
    zone = resolved_settings.zone()
    holiday_calendar = HolidayCalendar(
        holidays=resolved_settings.holidays,
        open_weekdays=resolved_settings.open_weekdays,
    )
    opening_hours = OpeningHours(resolved_settings.allowed_times())
    picker_settings = PickerSettings(
        zone=zone,
        is_day_disabled=holiday_calendar,
        allowed_times_of_day=opening_hours,
    )
    logger.debug(
        "Built picker settings for zone %s with window %s",
        resolved_settings.timezone,
        opening_hours.default,
    )

    return ServiceContainer(
        settings=resolved_settings,
        holiday_calendar=holiday_calendar,
        opening_hours=opening_hours,
        picker_settings=picker_settings,
    )


__all__ = ["ServiceContainer", "build_container"]
