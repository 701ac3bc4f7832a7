"""Stateful picker sessions wrapping the pure selection engine.

Hosts that prefer to own the selection themselves can call ``chronopick.engine``
directly; a session only adds the open/closed status, the base day the time
controls fall back to, and the hovered day.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from chronopick.domain import (
    DateLike,
    DayState,
    DurationSelectableTimes,
    DurationSelection,
    EventKind,
    PickerDay,
    PickerStatus,
    SelectableTimes,
    Selection,
)
from chronopick.engine import PickerSettings, duration, single
from chronopick.engine.queries import (
    day_picked_or_between,
    filter_duration_selectable_times,
    filter_selectable_times,
    is_single_day_picked,
)
from chronopick.events import PickerEvent
from chronopick.utils import utc_now

logger = logging.getLogger(__name__)


class _PickerSession:
    def __init__(self, settings: PickerSettings) -> None:
        self._settings = settings
        self._status = PickerStatus.CLOSED
        self._base_day: PickerDay | None = None
        self._hovered: PickerDay | None = None

    @property
    def settings(self) -> PickerSettings:
        return self._settings

    @property
    def status(self) -> PickerStatus:
        return self._status

    @property
    def is_open(self) -> bool:
        return self._status is PickerStatus.OPEN

    @property
    def base_day(self) -> PickerDay:
        """Day the time controls use while nothing is selected."""

        if self._base_day is None:
            self._base_day = self._settings.picker_day(utc_now())
        return self._base_day

    @property
    def hovered(self) -> PickerDay | None:
        return self._hovered

    def _open(self, base_time: DateLike) -> None:
        self._base_day = self._settings.picker_day(base_time)
        self._hovered = None
        self._status = PickerStatus.OPEN

    def close(self) -> None:
        self._status = PickerStatus.CLOSED
        self._hovered = None

    def hover(self, value: DateLike | None) -> None:
        if not self.is_open:
            return
        self._hovered = self._settings.picker_day(value) if value is not None else None

    def _ignored(self, action: str) -> bool:
        if self.is_open:
            return False
        logger.debug("Ignoring %s on a closed picker", action)
        return True

    def _dispatch(self, event: PickerEvent, handlers: dict[EventKind, Callable[[], object]]) -> None:
        handler = handlers.get(event.kind)
        if handler is None:
            logger.debug("Event %s does not apply to %s", event, type(self).__name__)
            return
        handler()


class SinglePicker(_PickerSession):
    """Picker for one point in time."""

    def __init__(self, settings: PickerSettings, selection: Selection | None = None) -> None:
        super().__init__(settings)
        self.selection = selection

    def open(self, base_time: DateLike, selection: Selection | None = None) -> None:
        self._open(base_time)
        if selection is not None:
            self.selection = selection

    def clear(self) -> None:
        self.selection = None

    def pick_day(self, value: DateLike) -> Selection | None:
        if self._ignored("day pick"):
            return self.selection
        picked = self._settings.picker_day(value)
        self.selection = single.select_day(self._settings.zone, self.selection, picked)
        return self.selection

    def pick_hour(self, hour: int) -> Selection | None:
        if self._ignored("hour pick"):
            return self.selection
        self.selection = single.select_hour(self._settings.zone, self.base_day, self.selection, hour)
        return self.selection

    def pick_minute(self, minute: int) -> Selection | None:
        if self._ignored("minute pick"):
            return self.selection
        self.selection = single.select_minute(
            self._settings.zone, self.base_day, self.selection, minute
        )
        return self.selection

    def selectable_times(self) -> SelectableTimes:
        return filter_selectable_times(self._settings.zone, self.base_day, self.selection)

    def day_state(self, value: DateLike) -> DayState:
        day = self._settings.picker_day(value)
        return DayState(is_picked=is_single_day_picked(day, self.selection))

    def apply(self, event: PickerEvent) -> Selection | None:
        """Replay ``event`` against this session and return the selection."""

        self._dispatch(
            event,
            {
                EventKind.DAY: lambda: self.pick_day(event.day),
                EventKind.HOVER: lambda: self.hover(event.day),
                EventKind.HOUR: lambda: self.pick_hour(event.value),
                EventKind.MINUTE: lambda: self.pick_minute(event.value),
                EventKind.CLEAR: self.clear,
            },
        )
        return self.selection


class DurationPicker(_PickerSession):
    """Picker for a start/end range."""

    def __init__(
        self,
        settings: PickerSettings,
        selection: DurationSelection | None = None,
    ) -> None:
        super().__init__(settings)
        self.selection = selection if selection is not None else DurationSelection.empty()

    def open(self, base_time: DateLike, selection: DurationSelection | None = None) -> None:
        self._open(base_time)
        if selection is not None:
            self.selection = selection

    def clear(self) -> None:
        self.selection = DurationSelection.empty()

    def _edit(
        self,
        action: str,
        operation: Callable[[], DurationSelection],
    ) -> DurationSelection:
        if self._ignored(action):
            return self.selection
        updated = operation()
        if updated == self.selection:
            logger.debug("%s left the range unchanged", action)
        self.selection = updated
        return self.selection

    def pick_day(self, value: DateLike) -> DurationSelection:
        zone = self._settings.zone
        return self._edit(
            "day pick",
            lambda: duration.select_day(zone, self.selection, self._settings.picker_day(value)),
        )

    def pick_start_hour(self, hour: int) -> DurationSelection:
        zone = self._settings.zone
        return self._edit(
            "start hour pick",
            lambda: duration.select_start_hour(zone, self.base_day, self.selection, hour),
        )

    def pick_end_hour(self, hour: int) -> DurationSelection:
        zone = self._settings.zone
        return self._edit(
            "end hour pick",
            lambda: duration.select_end_hour(zone, self.base_day, self.selection, hour),
        )

    def pick_start_minute(self, minute: int) -> DurationSelection:
        zone = self._settings.zone
        return self._edit(
            "start minute pick",
            lambda: duration.select_start_minute(zone, self.base_day, self.selection, minute),
        )

    def pick_end_minute(self, minute: int) -> DurationSelection:
        zone = self._settings.zone
        return self._edit(
            "end minute pick",
            lambda: duration.select_end_minute(zone, self.base_day, self.selection, minute),
        )

    def preview(self) -> DurationSelection:
        """Range a click on the hovered day would produce; never committed."""

        return duration.preview_selection(self._settings.zone, self.selection, self._hovered)

    def selectable_times(self) -> DurationSelectableTimes:
        return filter_duration_selectable_times(self._settings.zone, self.base_day, self.selection)

    def day_state(self, value: DateLike) -> DayState:
        day = self._settings.picker_day(value)
        return day_picked_or_between(day, self._hovered, self.selection)

    def apply(self, event: PickerEvent) -> DurationSelection:
        """Replay ``event`` against this session and return the range."""

        self._dispatch(
            event,
            {
                EventKind.DAY: lambda: self.pick_day(event.day),
                EventKind.HOVER: lambda: self.hover(event.day),
                EventKind.START_HOUR: lambda: self.pick_start_hour(event.value),
                EventKind.END_HOUR: lambda: self.pick_end_hour(event.value),
                EventKind.START_MINUTE: lambda: self.pick_start_minute(event.value),
                EventKind.END_MINUTE: lambda: self.pick_end_minute(event.value),
                EventKind.CLEAR: self.clear,
            },
        )
        return self.selection


__all__ = ["DurationPicker", "SinglePicker"]
