"""Domain values for the picker engine."""

from .base import DomainModel
from .enums import DurationKind, EventKind, PickerStatus
from .picker_day import AllowedTimes, PickerDay
from .selection import (
    DayState,
    DurationSelectableTimes,
    DurationSelection,
    SelectableTimes,
    Selection,
)
from .types import Bounds, DateLike, Zone

__all__ = [
    "AllowedTimes",
    "Bounds",
    "DateLike",
    "DayState",
    "DomainModel",
    "DurationKind",
    "DurationSelectableTimes",
    "DurationSelection",
    "EventKind",
    "PickerDay",
    "PickerStatus",
    "SelectableTimes",
    "Selection",
    "Zone",
]
