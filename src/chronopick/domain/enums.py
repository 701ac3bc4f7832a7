"""Enumerations used across the picker domain."""

from __future__ import annotations

from enum import StrEnum


class DurationKind(StrEnum):
    """Which halves of a duration selection are present."""

    EMPTY = "empty"
    START_ONLY = "start_only"
    END_ONLY = "end_only"
    BOTH = "both"


class PickerStatus(StrEnum):
    """Visibility state of a picker session."""

    CLOSED = "closed"
    OPEN = "open"


class EventKind(StrEnum):
    """User interactions a picker session can replay."""

    DAY = "day"
    HOVER = "hover"
    HOUR = "hour"
    MINUTE = "minute"
    START_HOUR = "start-hour"
    END_HOUR = "end-hour"
    START_MINUTE = "start-minute"
    END_MINUTE = "end-minute"
    CLEAR = "clear"
