"""
Dateparse component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

# --- Validation Error ---


@dataclass(frozen=True)
class DateParseValidationError:
    """Date parse validation error."""

    code: str
    message: str
    field: str | None = None


# --- Input Models ---


@dataclass(frozen=True)
class ParseDateInput:
    """Input for parsing a date string."""

    value: str


# --- Output Models ---


@dataclass(frozen=True)
class ParseDateOutput:
    """Output from a parse operation."""

    value: datetime | None
    epoch_ms: int | None
    errors: tuple[DateParseValidationError, ...]
    success: bool
