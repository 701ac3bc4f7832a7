"""Zone-relative calendar arithmetic used by the picker engine."""

from __future__ import annotations

from datetime import UTC, date, datetime, time, tzinfo

HourMinute = tuple[int, int]


def utc_now() -> datetime:
    """Return a timezone-aware UTC timestamp."""

    return datetime.now(UTC)


def ensure_aware(value: datetime) -> datetime:
    """Treat naive datetimes as UTC; leave aware ones untouched."""

    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


def to_instant(zone: tzinfo, value: date | datetime) -> datetime:
    """Coerce a date or datetime into an aware instant.

    Plain dates map to midnight of that day in ``zone``.
    """

    if isinstance(value, datetime):
        return ensure_aware(value)
    return datetime.combine(value, time(), tzinfo=zone)


def local_date(zone: tzinfo, instant: datetime) -> date:
    return ensure_aware(instant).astimezone(zone).date()


def floor_day(zone: tzinfo, instant: datetime) -> datetime:
    """Return midnight of the calendar day ``instant`` falls on in ``zone``."""

    return datetime.combine(local_date(zone, instant), time(), tzinfo=zone)


def at_time_of_day(zone: tzinfo, instant: datetime, hour: int, minute: int) -> datetime:
    """Move ``instant`` to ``hour:minute`` on the same calendar day in ``zone``."""

    return datetime.combine(local_date(zone, instant), time(hour, minute), tzinfo=zone)


def time_of_day(zone: tzinfo, instant: datetime) -> HourMinute:
    local = ensure_aware(instant).astimezone(zone)
    return local.hour, local.minute


def with_hour(zone: tzinfo, instant: datetime, hour: int) -> datetime:
    """Replace the hour of ``instant`` as seen in ``zone``, keeping the day."""

    return ensure_aware(instant).astimezone(zone).replace(hour=hour)


def with_minute(zone: tzinfo, instant: datetime, minute: int) -> datetime:
    return ensure_aware(instant).astimezone(zone).replace(minute=minute)


def same_calendar_day(zone: tzinfo, first: datetime, second: datetime) -> bool:
    return local_date(zone, first) == local_date(zone, second)


__all__ = [
    "at_time_of_day",
    "ensure_aware",
    "floor_day",
    "local_date",
    "same_calendar_day",
    "time_of_day",
    "to_instant",
    "utc_now",
    "with_hour",
    "with_minute",
]
