"""
Clock component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.core.ports.time import DateLike


@dataclass(frozen=True)
class ClockValidationError:
    """Clock validation error."""

    code: str
    message: str
    field: str | None = None


@dataclass(frozen=True)
class ClockAngleInput:
    """Input for the clock-hand angle."""

    value: DateLike


@dataclass(frozen=True)
class ClockAngleOutput:
    """Output from the clock-hand angle."""

    radians: float | None
    degrees: float | None
    errors: tuple[ClockValidationError, ...]
    success: bool
