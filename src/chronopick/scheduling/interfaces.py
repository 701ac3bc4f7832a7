"""Protocols for the per-day rules a picker consults."""

from __future__ import annotations

from datetime import datetime
from typing import Protocol

from chronopick.domain import AllowedTimes, Zone


class DayDisabledPredicate(Protocol):
    """Decides whether the day starting at ``instant`` can be picked."""

    def __call__(self, zone: Zone, instant: datetime) -> bool:
        """Return ``True`` when the day must not be selectable."""


class AllowedTimesProvider(Protocol):
    """Supplies the selectable time-of-day window of the day at ``instant``."""

    def __call__(self, zone: Zone, instant: datetime) -> AllowedTimes:
        """Return the window for the day that starts at ``instant``."""


def never_disabled(zone: Zone, instant: datetime) -> bool:
    return False


__all__ = ["AllowedTimesProvider", "DayDisabledPredicate", "never_disabled"]
