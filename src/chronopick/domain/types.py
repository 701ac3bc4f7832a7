"""Shared type aliases for the domain layer."""

from __future__ import annotations

from datetime import date, datetime, tzinfo

Zone = tzinfo
DateLike = date | datetime
Bounds = tuple[int, int]

__all__ = ["Bounds", "DateLike", "Zone"]
