"""
Calendar component - Leap-year check.

Shell Layer - resolves the local timezone and converts errors.
"""

from __future__ import annotations

import logging

from src.adapters.time_zone import create_time_adapter
from src.core.ports.time import DateRangeError

from ._impl import leap_year_of
from .models import CalendarValidationError, LeapYearInput, LeapYearOutput
from .ports import RulesPort, TimePort

logger = logging.getLogger(__name__)


def _failure(code: str, message: str) -> LeapYearOutput:
    return LeapYearOutput(
        year=None,
        is_leap=None,
        errors=(CalendarValidationError(code=code, message=message, field="value"),),
        success=False,
    )


def run_is_leap_year(
    inp: LeapYearInput,
    *,
    rules: RulesPort | None = None,
    time: TimePort | None = None,
) -> LeapYearOutput:
    """
    Check whether the value falls in a leap year.

    Args:
        inp: Input containing the date value.
        rules: Optional rules port for the local timezone.
        time: Optional time port; overrides rules.

    Returns:
        LeapYearOutput with the local year and the result.
    """
    if time is None:
        time = create_time_adapter(rules.get_local_timezone() if rules else "UTC")

    try:
        year, is_leap = leap_year_of(inp.value, time)
    except DateRangeError as e:
        logger.debug("Date value out of range %r: %s", inp.value, e)
        return _failure(DateRangeError.code, str(e))
    except TypeError as e:
        logger.debug("Rejected date value %r: %s", inp.value, e)
        return _failure("invalid_type", str(e))

    return LeapYearOutput(
        year=year,
        is_leap=is_leap,
        errors=(),
        success=True,
    )
