"""Selection rules for the single point-in-time picker."""

from __future__ import annotations

import logging

from chronopick.domain import PickerDay, Selection, Zone
from chronopick.utils import at_time_of_day, time_of_day, with_hour, with_minute

from .boundaries import (
    is_within_day_boundaries,
    minute_bounds_for_selected_hour,
    valid_selection_or_default,
)

logger = logging.getLogger(__name__)


def select_day(zone: Zone, prior: Selection | None, picked: PickerDay) -> Selection | None:
    """Move the selection onto ``picked``, keeping the prior time of day when legal."""

    if picked.disabled:
        logger.debug("Ignoring pick of disabled day %s", picked.start.date())
        return prior

    instant = picked.start
    if prior is not None and is_within_day_boundaries(zone, picked, prior.instant):
        hour, minute = time_of_day(zone, prior.instant)
        instant = at_time_of_day(zone, picked.start, hour, minute)
    return valid_selection_or_default(zone, prior, picked, instant)


def select_hour(
    zone: Zone,
    base_day: PickerDay,
    prior: Selection | None,
    hour: int,
) -> Selection | None:
    """Set the hour of the selection, or of ``base_day``'s opening instant when empty.

    The minute is raised to the earliest legal minute of the new hour when
    there was no prior selection or when the kept minute became illegal.
    """

    if not 0 <= hour <= 23:
        logger.debug("Rejecting out-of-range hour %s", hour)
        return prior

    day, instant = (prior.day, prior.instant) if prior is not None else (base_day, base_day.start)
    _, minute = time_of_day(zone, instant)
    moved = with_hour(zone, instant, hour)
    earliest_minute, _ = minute_bounds_for_selected_hour(zone, day, moved)
    if prior is None or minute < earliest_minute:
        moved = with_minute(zone, moved, earliest_minute)

    selection = valid_selection_or_default(zone, prior, day, moved)
    if selection is prior:
        logger.debug("Hour %s is outside the window of %s", hour, day.start.date())
    return selection


def select_minute(
    zone: Zone,
    base_day: PickerDay,
    prior: Selection | None,
    minute: int,
) -> Selection | None:
    if not 0 <= minute <= 59:
        logger.debug("Rejecting out-of-range minute %s", minute)
        return prior

    day, instant = (prior.day, prior.instant) if prior is not None else (base_day, base_day.start)
    selection = valid_selection_or_default(zone, prior, day, with_minute(zone, instant, minute))
    if selection is prior:
        logger.debug("Minute %s is outside the window of %s", minute, day.start.date())
    return selection


__all__ = ["select_day", "select_hour", "select_minute"]
