"""
Calendar component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.core.ports.time import DateLike


@dataclass(frozen=True)
class CalendarValidationError:
    """Calendar validation error."""

    code: str
    message: str
    field: str | None = None


@dataclass(frozen=True)
class LeapYearInput:
    """Input for the leap-year check."""

    value: DateLike


@dataclass(frozen=True)
class LeapYearOutput:
    """Output from the leap-year check."""

    year: int | None
    is_leap: bool | None
    errors: tuple[CalendarValidationError, ...]
    success: bool
