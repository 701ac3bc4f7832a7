from __future__ import annotations

from datetime import UTC, date, datetime
from zoneinfo import ZoneInfo

import pytest

from chronopick.config import AppSettings
from chronopick.container import build_container
from chronopick.exceptions import ConfigurationError


def test_settings_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CHRONOPICK_ENV", "test")
    monkeypatch.setenv("CHRONOPICK_TIMEZONE", "Europe/Berlin")
    monkeypatch.setenv("CHRONOPICK_DAY_WINDOW", "08:15-18:00")
    monkeypatch.setenv("CHRONOPICK_OPEN_WEEKDAYS", "0, 1,2,3,4")
    monkeypatch.setenv("CHRONOPICK_HOLIDAYS", "2021-12-25,2021-01-01")
    monkeypatch.setenv("CHRONOPICK_LOG_LEVEL", "debug")

    settings = AppSettings.from_env()

    assert settings.environment == "test"
    assert settings.zone() == ZoneInfo("Europe/Berlin")
    assert str(settings.allowed_times()) == "08:15-18:00"
    assert settings.open_weekdays == frozenset({0, 1, 2, 3, 4})
    assert settings.holidays == (date(2021, 1, 1), date(2021, 12, 25))
    assert settings.log_level == "DEBUG"


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("CHRONOPICK_TIMEZONE", "CHRONOPICK_OPEN_WEEKDAYS", "CHRONOPICK_HOLIDAYS"):
        monkeypatch.delenv(name, raising=False)

    settings = AppSettings.from_env()

    assert settings.zone() is UTC
    assert settings.open_weekdays == frozenset(range(7))
    assert settings.holidays == ()


@pytest.mark.parametrize(
    ("name", "value"),
    [
        ("CHRONOPICK_OPEN_WEEKDAYS", "mon,tue"),
        ("CHRONOPICK_OPEN_WEEKDAYS", "1,9"),
        ("CHRONOPICK_HOLIDAYS", "christmas"),
        ("CHRONOPICK_LOG_LEVEL", "loud"),
    ],
)
def test_settings_reject_malformed_env(monkeypatch: pytest.MonkeyPatch, name: str, value: str) -> None:
    monkeypatch.setenv(name, value)
    with pytest.raises(ConfigurationError):
        AppSettings.from_env()


def test_settings_reject_unknown_zone_and_window() -> None:
    with pytest.raises(ConfigurationError):
        AppSettings(timezone="Mars/Olympus_Mons").zone()
    with pytest.raises(ConfigurationError):
        AppSettings(day_window="late").allowed_times()


def test_build_container_wires_day_rules() -> None:
    settings = AppSettings(
        environment="test",
        day_window="09:30-17:30",
        open_weekdays=frozenset({0, 1, 2, 3, 4}),
        holidays=(date(2021, 1, 1),),
    )

    container = build_container(settings)
    picker_settings = container.picker_settings

    new_year = picker_settings.picker_day(date(2021, 1, 1))
    monday = picker_settings.picker_day(date(2021, 1, 4))
    assert new_year.disabled
    assert picker_settings.picker_day(date(2021, 1, 2)).disabled
    assert not monday.disabled
    assert monday.start == datetime(2021, 1, 4, 9, 30, tzinfo=UTC)
    assert container.holiday_calendar.is_holiday(date(2021, 1, 1))

    picker = container.duration_picker()
    picker.open(date(2021, 1, 4))
    assert picker.pick_day(date(2021, 1, 4)).start.instant == monday.start
