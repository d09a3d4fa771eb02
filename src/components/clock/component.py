"""
Clock component - Angle between analog clock hands.

Shell Layer - resolves the time port and converts errors.
"""

from __future__ import annotations

import logging

from src.adapters.time_zone import create_time_adapter
from src.core.ports.time import DateRangeError

from ._impl import clock_hand_angles
from .models import ClockAngleInput, ClockAngleOutput, ClockValidationError
from .ports import RulesPort, TimePort

logger = logging.getLogger(__name__)


def _failure(code: str, message: str) -> ClockAngleOutput:
    return ClockAngleOutput(
        radians=None,
        degrees=None,
        errors=(ClockValidationError(code=code, message=message, field="value"),),
        success=False,
    )


def run_clock_angle(
    inp: ClockAngleInput,
    *,
    rules: RulesPort | None = None,
    time: TimePort | None = None,
) -> ClockAngleOutput:
    """
    Compute the angle between the clock hands at inp.value (UTC).

    Args:
        inp: Input containing the date value.
        rules: Optional rules port; naive values are read in its local timezone.
        time: Optional time port; overrides rules.

    Returns:
        ClockAngleOutput with degrees and radians or errors.
    """
    if time is None:
        time = create_time_adapter(rules.get_local_timezone() if rules else "UTC")

    try:
        degrees, radians = clock_hand_angles(inp.value, time)
    except DateRangeError as e:
        logger.debug("Date value out of range %r: %s", inp.value, e)
        return _failure(DateRangeError.code, str(e))
    except TypeError as e:
        logger.debug("Rejected date value %r: %s", inp.value, e)
        return _failure("invalid_type", str(e))

    return ClockAngleOutput(
        radians=radians,
        degrees=degrees,
        errors=(),
        success=True,
    )
