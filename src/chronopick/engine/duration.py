"""Selection rules for the start/end range picker.

Every operation takes the current ``DurationSelection`` and returns the next
one. An edit that would leave the start at or after the end is discarded and
the prior pair is returned unchanged. Days are only ever compared by their
instants, never by calendar adjacency.
"""

from __future__ import annotations

import logging

from chronopick.domain import DurationKind, DurationSelection, PickerDay, Selection, Zone
from chronopick.utils import at_time_of_day, time_of_day

from . import single
from .boundaries import is_within_day_boundaries, valid_selection_or_default

logger = logging.getLogger(__name__)


def valid_duration_selection_or_default(
    default: DurationSelection,
    start: Selection | None,
    end: Selection | None,
) -> DurationSelection:
    """Build the pair ``(start, end)`` unless it is inverted, else return ``default``.

    Pairs with a missing half are never subject to the ordering check.
    """

    if start is not None and end is not None and start.instant >= end.instant:
        logger.debug(
            "Discarding inverted duration %s -> %s",
            start.instant.isoformat(),
            end.instant.isoformat(),
        )
        return default
    return DurationSelection(start=start, end=end)


def _carry_time_of_day(
    zone: Zone,
    source: Selection,
    target: PickerDay,
    fallback: Selection,
) -> Selection:
    """Move ``source``'s time of day onto ``target`` if the target window allows it."""

    if not is_within_day_boundaries(zone, target, source.instant):
        return fallback
    hour, minute = time_of_day(zone, source.instant)
    carried = valid_selection_or_default(
        zone, fallback, target, at_time_of_day(zone, target.start, hour, minute)
    )
    return carried if carried is not None else fallback


def select_day(zone: Zone, prior: DurationSelection, picked: PickerDay) -> DurationSelection:
    """Apply a day pick to the range.

    * Both halves set: picking the start day clears the start, picking the end
      day clears the end (the end wins when both sit on the picked day), any
      other day starts a new range.
    * Only a start: an earlier day becomes the start and the old start day
      becomes the end at its closing instant; the same or a later day becomes
      the end at its closing instant.
    * Only an end: a later day becomes the end and the old end day becomes the
      start at its opening instant; the same or an earlier day becomes the
      start. Both carry the old end time of day when the new day allows it,
      falling back to the closing or opening instant.
    * Nothing set: the picked day becomes the start at its opening instant.
    """

    if picked.disabled:
        logger.debug("Ignoring pick of disabled day %s", picked.start.date())
        return prior

    start, end = prior.start, prior.end
    opening = Selection(day=picked, instant=picked.start)
    closing = Selection(day=picked, instant=picked.end)

    if start is not None and end is not None:
        if start.day == picked and end.day == picked:
            return valid_duration_selection_or_default(prior, start, None)
        if start.day == picked:
            return valid_duration_selection_or_default(prior, None, end)
        if end.day == picked:
            return valid_duration_selection_or_default(prior, start, None)
        return valid_duration_selection_or_default(prior, opening, None)

    if start is not None:
        if picked.start < start.day.start:
            new_start = _carry_time_of_day(zone, start, picked, opening)
            new_end = Selection(day=start.day, instant=start.day.end)
            return valid_duration_selection_or_default(prior, new_start, new_end)
        return valid_duration_selection_or_default(prior, start, closing)

    if end is not None:
        if picked.start > end.day.start:
            new_start = Selection(day=end.day, instant=end.day.start)
            new_end = _carry_time_of_day(zone, end, picked, closing)
            return valid_duration_selection_or_default(prior, new_start, new_end)
        new_start = _carry_time_of_day(zone, end, picked, opening)
        return valid_duration_selection_or_default(prior, new_start, end)

    return valid_duration_selection_or_default(prior, opening, None)


def _start_base_day(prior: DurationSelection, base_day: PickerDay) -> PickerDay:
    if prior.start is not None:
        return prior.start.day
    if prior.end is not None:
        return prior.end.day
    return base_day


def _end_base_day(prior: DurationSelection, base_day: PickerDay) -> PickerDay:
    if prior.end is not None:
        return prior.end.day
    if prior.start is not None:
        return prior.start.day
    return base_day


def select_start_hour(
    zone: Zone,
    base_day: PickerDay,
    prior: DurationSelection,
    hour: int,
) -> DurationSelection:
    new_start = single.select_hour(zone, _start_base_day(prior, base_day), prior.start, hour)
    return valid_duration_selection_or_default(prior, new_start, prior.end)


def select_end_hour(
    zone: Zone,
    base_day: PickerDay,
    prior: DurationSelection,
    hour: int,
) -> DurationSelection:
    new_end = single.select_hour(zone, _end_base_day(prior, base_day), prior.end, hour)
    return valid_duration_selection_or_default(prior, prior.start, new_end)


def select_start_minute(
    zone: Zone,
    base_day: PickerDay,
    prior: DurationSelection,
    minute: int,
) -> DurationSelection:
    new_start = single.select_minute(zone, _start_base_day(prior, base_day), prior.start, minute)
    return valid_duration_selection_or_default(prior, new_start, prior.end)


def select_end_minute(
    zone: Zone,
    base_day: PickerDay,
    prior: DurationSelection,
    minute: int,
) -> DurationSelection:
    new_end = single.select_minute(zone, _end_base_day(prior, base_day), prior.end, minute)
    return valid_duration_selection_or_default(prior, prior.start, new_end)


def preview_selection(
    zone: Zone,
    selection: DurationSelection,
    hovered: PickerDay | None,
) -> DurationSelection:
    """Return the range a click on ``hovered`` would produce, for rendering only.

    A complete range is never previewed over.
    """

    if hovered is None or selection.kind is DurationKind.BOTH:
        return selection
    return select_day(zone, selection, hovered)


__all__ = [
    "preview_selection",
    "select_day",
    "select_end_hour",
    "select_end_minute",
    "select_start_hour",
    "select_start_minute",
    "valid_duration_selection_or_default",
]
