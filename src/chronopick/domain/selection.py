"""Selection state models shared by the single and duration pickers."""

from __future__ import annotations

from datetime import datetime

from pydantic import model_validator

from .base import DomainModel
from .enums import DurationKind
from .picker_day import PickerDay


class Selection(DomainModel):
    """A picked instant together with the day that bounds it."""

    day: PickerDay
    instant: datetime


class DurationSelection(DomainModel):
    """Start/end pair of a range picker.

    Either half may be missing. When both are present the start must be
    strictly earlier than the end; constructing an inverted pair fails
    validation, so the engine checks ordering before building one.
    """

    start: Selection | None = None
    end: Selection | None = None

    @model_validator(mode="after")
    def ensure_ordered(self) -> DurationSelection:
        if self.start is not None and self.end is not None:
            if self.start.instant >= self.end.instant:
                msg = "Duration start must be earlier than its end"
                raise ValueError(msg)
        return self

    @classmethod
    def empty(cls) -> DurationSelection:
        return cls()

    @property
    def kind(self) -> DurationKind:
        if self.start is not None and self.end is not None:
            return DurationKind.BOTH
        if self.start is not None:
            return DurationKind.START_ONLY
        if self.end is not None:
            return DurationKind.END_ONLY
        return DurationKind.EMPTY

    @property
    def is_complete(self) -> bool:
        return self.kind is DurationKind.BOTH


class SelectableTimes(DomainModel):
    """Hour and minute options offered by a single picker."""

    hours: tuple[int, ...] = ()
    minutes: tuple[int, ...] = ()


class DurationSelectableTimes(DomainModel):
    """Hour and minute options offered for each half of a range picker."""

    start_hours: tuple[int, ...] = ()
    start_minutes: tuple[int, ...] = ()
    end_hours: tuple[int, ...] = ()
    end_minutes: tuple[int, ...] = ()


class DayState(DomainModel):
    """Rendering flags for one calendar cell."""

    is_picked: bool = False
    is_between: bool = False


__all__ = [
    "DayState",
    "DurationSelectableTimes",
    "DurationSelection",
    "SelectableTimes",
    "Selection",
]
