from __future__ import annotations

from datetime import UTC, date, datetime

import pytest

from chronopick.domain import AllowedTimes, Selection
from chronopick.engine import PickerSettings, is_within_day_boundaries, single
from chronopick.scheduling import OpeningHours


def _at(day: int, hour: int, minute: int) -> datetime:
    return datetime(2021, 1, day, hour, minute, tzinfo=UTC)


def test_select_day_without_prior_uses_opening_instant(make_day) -> None:
    day = make_day(date(2021, 1, 1))

    assert single.select_day(UTC, None, day) == Selection(day=day, instant=_at(1, 9, 30))


def test_select_day_carries_time_of_day(make_day) -> None:
    prior = Selection(day=make_day(date(2021, 1, 1)), instant=_at(1, 14, 45))
    target = make_day(date(2021, 1, 4))

    assert single.select_day(UTC, prior, target) == Selection(day=target, instant=_at(4, 14, 45))


def test_select_day_drops_illegal_time_of_day() -> None:
    settings = PickerSettings(
        allowed_times_of_day=OpeningHours(
            AllowedTimes.parse("09:30-17:30"),
            per_weekday={5: AllowedTimes.parse("10:00-12:00")},
        )
    )
    friday = settings.picker_day(date(2021, 1, 1))
    saturday = settings.picker_day(date(2021, 1, 2))
    prior = Selection(day=friday, instant=_at(1, 15, 0))

    result = single.select_day(UTC, prior, saturday)

    assert result == Selection(day=saturday, instant=_at(2, 10, 0))


def test_select_disabled_day_is_noop(make_day) -> None:
    prior = Selection(day=make_day(date(2021, 1, 1)), instant=_at(1, 12, 0))
    disabled = make_day(date(2021, 1, 6))

    assert single.select_day(UTC, prior, disabled) is prior
    assert single.select_day(UTC, None, disabled) is None


def test_select_hour_snaps_minute_to_window_start(make_day) -> None:
    day = make_day(date(2021, 1, 1))
    prior = Selection(day=day, instant=_at(1, 10, 15))

    assert single.select_hour(UTC, day, prior, 9) == Selection(day=day, instant=_at(1, 9, 30))
    assert single.select_hour(UTC, day, prior, 11) == Selection(day=day, instant=_at(1, 11, 15))


def test_select_hour_without_prior_starts_from_base_day(make_day) -> None:
    day = make_day(date(2021, 1, 1))

    assert single.select_hour(UTC, day, None, 9) == Selection(day=day, instant=_at(1, 9, 30))
    assert single.select_hour(UTC, day, None, 11) == Selection(day=day, instant=_at(1, 11, 0))


def test_select_hour_keeps_prior_when_minute_exceeds_closing(make_day) -> None:
    day = make_day(date(2021, 1, 1))
    prior = Selection(day=day, instant=_at(1, 10, 45))

    assert single.select_hour(UTC, day, prior, 17) is prior


@pytest.mark.parametrize("hour", [-1, 8, 18, 24])
def test_select_hour_rejects_hours_outside_window(make_day, hour: int) -> None:
    day = make_day(date(2021, 1, 1))
    prior = Selection(day=day, instant=_at(1, 12, 0))

    assert single.select_hour(UTC, day, prior, hour) is prior
    if hour in (-1, 24):
        assert single.select_hour(UTC, day, None, hour) is None


def test_select_hour_on_disabled_base_day_selects_nothing(make_day) -> None:
    disabled = make_day(date(2021, 1, 6))
    assert single.select_hour(UTC, disabled, None, 12) is None


def test_select_minute_sets_literal_minute(make_day) -> None:
    day = make_day(date(2021, 1, 1))
    prior = Selection(day=day, instant=_at(1, 12, 0))

    assert single.select_minute(UTC, day, prior, 7) == Selection(day=day, instant=_at(1, 12, 7))
    assert single.select_minute(UTC, day, None, 45) == Selection(day=day, instant=_at(1, 9, 45))


@pytest.mark.parametrize("minute", [-5, 15, 60])
def test_select_minute_rejects_illegal_minutes(make_day, minute: int) -> None:
    day = make_day(date(2021, 1, 1))
    prior = Selection(day=day, instant=_at(1, 9, 45))

    assert single.select_minute(UTC, day, prior, minute) is prior


def test_select_hour_is_idempotent(make_day) -> None:
    day = make_day(date(2021, 1, 1))
    priors = [None] + [
        Selection(day=day, instant=_at(1, hour, minute))
        for hour in range(9, 18)
        for minute in range(0, 60, 5)
        if is_within_day_boundaries(UTC, day, _at(1, hour, minute))
    ]
    for prior in priors:
        for hour in range(24):
            once = single.select_hour(UTC, day, prior, hour)
            twice = single.select_hour(UTC, day, once, hour)
            assert twice == once


def test_every_returned_selection_is_valid(make_day) -> None:
    days = [make_day(date(2021, 1, number)) for number in range(1, 8)]
    selection: Selection | None = None
    for day in days:
        for hour in range(24):
            for minute in (0, 15, 30, 45, 59):
                selection = single.select_day(UTC, selection, day)
                selection = single.select_hour(UTC, day, selection, hour)
                selection = single.select_minute(UTC, day, selection, minute)
                if selection is None:
                    continue
                assert not selection.day.disabled
                assert is_within_day_boundaries(UTC, selection.day, selection.instant)
                assert selection.instant.date() == selection.day.start.date()
