"""Pure selection engine for single and range pickers."""

from . import duration, single
from .boundaries import (
    hour_bounds_for_selected_minute,
    is_within_day_boundaries,
    minute_bounds_for_selected_hour,
    valid_selection_or_default,
)
from .builder import PickerSettings, build_picker_day
from .duration import preview_selection, valid_duration_selection_or_default
from .queries import (
    day_picked_or_between,
    filter_duration_selectable_times,
    filter_selectable_times,
    is_day_between,
    is_day_picked,
    is_single_day_picked,
)

__all__ = [
    "PickerSettings",
    "build_picker_day",
    "day_picked_or_between",
    "duration",
    "filter_duration_selectable_times",
    "filter_selectable_times",
    "hour_bounds_for_selected_minute",
    "is_day_between",
    "is_day_picked",
    "is_single_day_picked",
    "is_within_day_boundaries",
    "minute_bounds_for_selected_hour",
    "preview_selection",
    "single",
    "valid_duration_selection_or_default",
    "valid_selection_or_default",
]
