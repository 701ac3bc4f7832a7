from __future__ import annotations

import sys
from collections.abc import Callable
from datetime import UTC, date
from pathlib import Path

import pytest

# Ensure the src/ directory is importable when tests run without an install.
sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))

from chronopick.domain import AllowedTimes, PickerDay  # noqa: E402
from chronopick.engine import PickerSettings  # noqa: E402
from chronopick.scheduling import HolidayCalendar, OpeningHours  # noqa: E402

DayFactory = Callable[[date], PickerDay]


@pytest.fixture
def window() -> AllowedTimes:
    return AllowedTimes.parse("09:30-17:30")


@pytest.fixture
def settings(window: AllowedTimes) -> PickerSettings:
    """UTC settings with a 09:30-17:30 window and 2021-01-06 disabled."""

    return PickerSettings(
        zone=UTC,
        is_day_disabled=HolidayCalendar(holidays=[date(2021, 1, 6)]),
        allowed_times_of_day=OpeningHours(window),
    )


@pytest.fixture
def make_day(settings: PickerSettings) -> DayFactory:
    return settings.picker_day
