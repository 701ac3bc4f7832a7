"""Errors raised at the edges of the picker library.

The selection engine itself never raises; rejected edits return the prior
state instead.
"""

from __future__ import annotations


class ChronopickError(RuntimeError):
    """Base class for library errors."""


class ConfigurationError(ChronopickError):
    """Raised when settings cannot be resolved."""


class EventParseError(ChronopickError):
    """Raised when a replay event cannot be parsed."""


__all__ = ["ChronopickError", "ConfigurationError", "EventParseError"]
