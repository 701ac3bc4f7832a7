"""Day rules consulted when building picker days."""

from .calendar import ALL_WEEKDAYS, HolidayCalendar
from .hours import OpeningHours
from .interfaces import AllowedTimesProvider, DayDisabledPredicate, never_disabled

__all__ = [
    "ALL_WEEKDAYS",
    "AllowedTimesProvider",
    "DayDisabledPredicate",
    "HolidayCalendar",
    "OpeningHours",
    "never_disabled",
]
