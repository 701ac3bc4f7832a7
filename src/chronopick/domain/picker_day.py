"""Picker day domain models."""

from __future__ import annotations

import re
from datetime import datetime
from typing import Annotated

from pydantic import Field, model_validator

from .base import DomainModel

_WINDOW_PATTERN = re.compile(r"^\s*(\d{1,2}):(\d{2})\s*-\s*(\d{1,2}):(\d{2})\s*$")


class AllowedTimes(DomainModel):
    """Selectable time-of-day window for a single calendar day."""

    start_hour: Annotated[int, Field(ge=0, le=23)] = 0
    start_minute: Annotated[int, Field(ge=0, le=59)] = 0
    end_hour: Annotated[int, Field(ge=0, le=23)] = 23
    end_minute: Annotated[int, Field(ge=0, le=59)] = 59

    @model_validator(mode="after")
    def ensure_ordered(self) -> AllowedTimes:
        if (self.start_hour, self.start_minute) > (self.end_hour, self.end_minute):
            msg = "Allowed window must not start after it ends"
            raise ValueError(msg)
        return self

    @classmethod
    def whole_day(cls) -> AllowedTimes:
        return cls()

    @classmethod
    def parse(cls, text: str) -> AllowedTimes:
        """Parse the ``HH:MM-HH:MM`` form, e.g. ``09:30-17:30``."""

        match = _WINDOW_PATTERN.match(text)
        if match is None:
            msg = f"Allowed window must look like HH:MM-HH:MM, got {text!r}"
            raise ValueError(msg)
        start_hour, start_minute, end_hour, end_minute = (int(part) for part in match.groups())
        return cls(
            start_hour=start_hour,
            start_minute=start_minute,
            end_hour=end_hour,
            end_minute=end_minute,
        )

    def __str__(self) -> str:
        return (
            f"{self.start_hour:02d}:{self.start_minute:02d}-"
            f"{self.end_hour:02d}:{self.end_minute:02d}"
        )


class PickerDay(DomainModel):
    """First and last selectable instants of one calendar day.

    Both bounds are expressed in the zone the day was built for, so the
    calendar day can be read back from ``start``.
    """

    start: datetime
    end: datetime
    disabled: bool = False

    @model_validator(mode="after")
    def ensure_bounded(self) -> PickerDay:
        if self.start.tzinfo is None or self.end.tzinfo is None:
            msg = "PickerDay bounds must be timezone-aware"
            raise ValueError(msg)
        if self.start > self.end:
            msg = "PickerDay start must not be after its end"
            raise ValueError(msg)
        if self.end.astimezone(self.start.tzinfo).date() != self.start.date():
            msg = "PickerDay bounds must fall on the same calendar day"
            raise ValueError(msg)
        return self


__all__ = ["AllowedTimes", "PickerDay"]
