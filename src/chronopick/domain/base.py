"""Core base class for picker domain values."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Immutable value object compared by its field values."""

    model_config = ConfigDict(frozen=True, extra="forbid")
