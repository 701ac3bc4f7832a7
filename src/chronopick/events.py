"""Textual user events replayed through picker sessions."""

from __future__ import annotations

from datetime import date

from pydantic import ValidationError, model_validator

from chronopick.domain import DomainModel, EventKind

from .exceptions import EventParseError

DAY_KINDS = frozenset({EventKind.DAY, EventKind.HOVER})
TIME_KINDS = frozenset(
    {
        EventKind.HOUR,
        EventKind.MINUTE,
        EventKind.START_HOUR,
        EventKind.END_HOUR,
        EventKind.START_MINUTE,
        EventKind.END_MINUTE,
    }
)


class PickerEvent(DomainModel):
    """One interaction: a day click or hover, an hour/minute change, or a clear."""

    kind: EventKind
    day: date | None = None
    value: int | None = None

    @model_validator(mode="after")
    def ensure_payload(self) -> PickerEvent:
        if self.kind is EventKind.DAY and self.day is None:
            msg = "Day events require a date"
            raise ValueError(msg)
        if self.kind in TIME_KINDS and self.value is None:
            msg = f"{self.kind} events require an integer value"
            raise ValueError(msg)
        if self.kind not in DAY_KINDS and self.day is not None:
            msg = f"{self.kind} events do not take a date"
            raise ValueError(msg)
        if self.kind not in TIME_KINDS and self.value is not None:
            msg = f"{self.kind} events do not take a value"
            raise ValueError(msg)
        return self

    def __str__(self) -> str:
        if self.day is not None:
            return f"{self.kind}={self.day.isoformat()}"
        if self.value is not None:
            return f"{self.kind}={self.value}"
        return str(self.kind)


def parse_event(text: str) -> PickerEvent:
    """Parse ``kind[=payload]``, e.g. ``day=2021-01-01``, ``start-hour=9``, ``clear``.

    A bare ``hover`` clears the hovered day.
    """

    raw_kind, _, payload = text.strip().partition("=")
    try:
        kind = EventKind(raw_kind.strip().lower())
    except ValueError as exc:
        msg = f"Unknown event kind {raw_kind!r}"
        raise EventParseError(msg) from exc

    payload = payload.strip()
    try:
        if kind in DAY_KINDS:
            return PickerEvent(kind=kind, day=date.fromisoformat(payload) if payload else None)
        if kind in TIME_KINDS:
            return PickerEvent(kind=kind, value=int(payload))
        if payload:
            msg = f"{kind} events do not take a payload"
            raise EventParseError(msg)
        return PickerEvent(kind=kind)
    except (ValueError, ValidationError) as exc:
        msg = f"Malformed event {text!r}: {exc}"
        raise EventParseError(msg) from exc


__all__ = ["PickerEvent", "parse_event"]
