from __future__ import annotations

from datetime import UTC, date, datetime

from chronopick import DurationPicker, SinglePicker
from chronopick.domain import DayState, DurationKind, PickerStatus
from chronopick.engine import PickerSettings
from chronopick.events import parse_event


def _at(day: int, hour: int, minute: int) -> datetime:
    return datetime(2021, 1, day, hour, minute, tzinfo=UTC)


def test_closed_picker_ignores_picks(settings: PickerSettings) -> None:
    picker = SinglePicker(settings)

    assert picker.status is PickerStatus.CLOSED
    assert picker.pick_day(date(2021, 1, 1)) is None
    assert picker.pick_hour(10) is None


def test_single_picker_flow(settings: PickerSettings) -> None:
    picker = SinglePicker(settings)
    picker.open(date(2021, 1, 4))

    assert picker.is_open
    assert picker.base_day == settings.picker_day(date(2021, 1, 4))
    assert picker.pick_hour(11).instant == _at(4, 11, 0)

    picker.pick_day(date(2021, 1, 1))
    picker.pick_minute(45)
    assert picker.selection.instant == _at(1, 11, 45)
    assert picker.day_state(date(2021, 1, 1)) == DayState(is_picked=True)
    assert picker.day_state(date(2021, 1, 2)) == DayState()

    picker.close()
    picker.pick_minute(0)
    assert picker.selection.instant == _at(1, 11, 45)


def test_single_picker_selectable_times(settings: PickerSettings) -> None:
    picker = SinglePicker(settings)
    picker.open(date(2021, 1, 4))

    assert picker.selectable_times().hours == tuple(range(9, 18))
    picker.pick_hour(17)
    assert picker.selectable_times().minutes == tuple(range(0, 31))


def test_single_picker_replays_events(settings: PickerSettings) -> None:
    picker = SinglePicker(settings)
    picker.open(date(2021, 1, 4))

    for text in ("day=2021-01-01", "hour=9", "minute=50", "start-hour=12"):
        picker.apply(parse_event(text))

    assert picker.selection.instant == _at(1, 9, 50)
    assert picker.apply(parse_event("clear")) is None


def test_duration_picker_builds_range(settings: PickerSettings) -> None:
    picker = DurationPicker(settings)
    picker.open(date(2021, 1, 1))

    picker.pick_day(date(2021, 1, 2))
    picker.hover(date(2021, 1, 5))
    preview = picker.preview()
    assert preview.kind is DurationKind.BOTH
    assert preview.end.instant == _at(5, 17, 30)
    assert picker.selection.kind is DurationKind.START_ONLY
    assert picker.day_state(date(2021, 1, 3)) == DayState(is_between=True)

    picker.pick_day(date(2021, 1, 5))
    picker.pick_end_hour(12)
    picker.pick_start_minute(45)

    assert picker.selection.start.instant == _at(2, 9, 45)
    assert picker.selection.end.instant == _at(5, 12, 30)
    assert picker.day_state(date(2021, 1, 2)) == DayState(is_picked=True)


def test_duration_picker_ignores_disabled_day(settings: PickerSettings) -> None:
    picker = DurationPicker(settings)
    picker.open(date(2021, 1, 1))
    picker.pick_day(date(2021, 1, 4))
    before = picker.selection

    assert picker.pick_day(date(2021, 1, 6)) == before


def test_duration_picker_rejects_inverting_edit(settings: PickerSettings) -> None:
    picker = DurationPicker(settings)
    picker.open(date(2021, 1, 1))
    picker.pick_day(date(2021, 1, 1))
    picker.pick_day(date(2021, 1, 1))
    before = picker.selection

    assert before.kind is DurationKind.BOTH
    assert picker.pick_end_hour(9) == before
    assert picker.pick_start_hour(17) == before


def test_duration_picker_replays_events(settings: PickerSettings) -> None:
    picker = DurationPicker(settings)
    picker.open(date(2021, 1, 1))

    for text in ("hover=2021-01-04", "day=2021-01-04", "day=2021-01-02", "end-minute=0", "hour=3"):
        picker.apply(parse_event(text))

    assert picker.selection.start.instant == _at(2, 9, 30)
    assert picker.selection.end.instant == _at(4, 17, 0)
    assert picker.hovered == settings.picker_day(date(2021, 1, 4))

    picker.apply(parse_event("clear"))
    assert picker.selection.kind is DurationKind.EMPTY


def test_duration_picker_selectable_times(settings: PickerSettings) -> None:
    picker = DurationPicker(settings)
    picker.open(date(2021, 1, 4))

    times = picker.selectable_times()

    assert times.start_minutes == tuple(range(30, 60))
    assert times.end_minutes == tuple(range(0, 31))
