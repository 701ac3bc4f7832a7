"""Calendar day and time-of-day selection engine."""

from .domain import (
    AllowedTimes,
    DayState,
    DurationKind,
    DurationSelectableTimes,
    DurationSelection,
    PickerDay,
    SelectableTimes,
    Selection,
)
from .engine import PickerSettings, build_picker_day
from .exceptions import ChronopickError, ConfigurationError, EventParseError
from .pickers import DurationPicker, SinglePicker

__all__ = [
    "AllowedTimes",
    "ChronopickError",
    "ConfigurationError",
    "DayState",
    "DurationKind",
    "DurationPicker",
    "DurationSelectableTimes",
    "DurationSelection",
    "EventParseError",
    "PickerDay",
    "PickerSettings",
    "SelectableTimes",
    "Selection",
    "SinglePicker",
    "build_picker_day",
]
