"""
Timespan component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.core.ports.time import DateLike

from ._impl import TimeSpanParts


@dataclass(frozen=True)
class TimeSpanValidationError:
    """Time span validation error."""

    code: str
    message: str
    field: str | None = None


@dataclass(frozen=True)
class TimeSpanInput:
    """Input for formatting the time between two values."""

    start: DateLike
    end: DateLike


@dataclass(frozen=True)
class TimeSpanOutput:
    """Output from the formatter."""

    text: str | None
    duration_ms: int | None
    parts: TimeSpanParts | None
    errors: tuple[TimeSpanValidationError, ...]
    success: bool
