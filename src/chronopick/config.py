"""Lightweight application configuration loader."""

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import UTC, date, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from chronopick.domain import AllowedTimes

from .exceptions import ConfigurationError

_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


def _env_tuple(name: str) -> tuple[str, ...]:
    raw = os.getenv(name)
    if raw is None:
        return ()
    return tuple(part.strip() for part in raw.split(",") if part.strip())


def _parse_weekdays(values: tuple[str, ...]) -> frozenset[int]:
    try:
        weekdays = frozenset(int(value) for value in values)
    except ValueError as exc:
        msg = f"Open weekdays must be integers 0-6, got {values}"
        raise ConfigurationError(msg) from exc
    if any(not 0 <= weekday <= 6 for weekday in weekdays):
        msg = f"Open weekdays must be integers 0-6, got {sorted(weekdays)}"
        raise ConfigurationError(msg)
    return weekdays


def _parse_holidays(values: tuple[str, ...]) -> tuple[date, ...]:
    try:
        return tuple(sorted(date.fromisoformat(value) for value in values))
    except ValueError as exc:
        msg = f"Holidays must be ISO dates, got {values}"
        raise ConfigurationError(msg) from exc


@dataclass(frozen=True)
class AppSettings:
    """Immutable configuration sourced from environment variables."""

    environment: str = "development"
    timezone: str = "UTC"
    day_window: str = "00:00-23:59"
    open_weekdays: frozenset[int] = frozenset(range(7))
    holidays: tuple[date, ...] = ()
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> AppSettings:
        weekdays = _env_tuple("CHRONOPICK_OPEN_WEEKDAYS")
        log_level = os.getenv("CHRONOPICK_LOG_LEVEL", cls.log_level).strip().upper()
        if log_level not in _LOG_LEVELS:
            msg = f"Unknown log level {log_level!r}"
            raise ConfigurationError(msg)
        return cls(
            environment=os.getenv("CHRONOPICK_ENV", cls.environment),
            timezone=os.getenv("CHRONOPICK_TIMEZONE", cls.timezone),
            day_window=os.getenv("CHRONOPICK_DAY_WINDOW", cls.day_window),
            open_weekdays=_parse_weekdays(weekdays) if weekdays else cls.open_weekdays,
            holidays=_parse_holidays(_env_tuple("CHRONOPICK_HOLIDAYS")),
            log_level=log_level,
        )

    def zone(self) -> tzinfo:
        if self.timezone.upper() == "UTC":
            return UTC
        try:
            return ZoneInfo(self.timezone)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            msg = f"Unknown time zone {self.timezone!r}"
            raise ConfigurationError(msg) from exc

    def allowed_times(self) -> AllowedTimes:
        try:
            return AllowedTimes.parse(self.day_window)
        except ValueError as exc:
            msg = f"Invalid day window {self.day_window!r}: {exc}"
            raise ConfigurationError(msg) from exc


__all__ = ["AppSettings"]
