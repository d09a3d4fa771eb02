"""
Timespan component - Elapsed-time formatting.

Shell Layer - builds config from rules and converts errors.

Invariants:
- I1: Output fields are derived from total milliseconds only
- I2: Hours are not wrapped at 24
- I3: Reversed inputs follow the configured negative policy
"""

from __future__ import annotations

import logging

from src.adapters.time_zone import create_time_adapter
from src.core.ports.time import DateRangeError

from ._impl import (
    TimeSpanConfig,
    TimeSpanError,
    elapsed_ms,
    format_time_span,
    split_duration_ms,
)
from .models import TimeSpanInput, TimeSpanOutput, TimeSpanValidationError
from .ports import RulesPort, TimePort

logger = logging.getLogger(__name__)


def _build_config(rules: RulesPort | None) -> TimeSpanConfig:
    """Build formatter config from rules port."""
    if rules is None:
        return TimeSpanConfig()

    policy = rules.get_negative_policy()
    if policy not in ("error", "clamp"):
        raise ValueError(f"Unknown negative policy: {policy}")

    return TimeSpanConfig(
        negative_policy=policy,
        min_hour_digits=rules.get_min_hour_digits(),
    )


def _failure(code: str, message: str, field: str | None = None) -> TimeSpanOutput:
    return TimeSpanOutput(
        text=None,
        duration_ms=None,
        parts=None,
        errors=(TimeSpanValidationError(code=code, message=message, field=field),),
        success=False,
    )


def run_time_span(
    inp: TimeSpanInput,
    *,
    rules: RulesPort | None = None,
    time: TimePort | None = None,
) -> TimeSpanOutput:
    """
    Format the time between inp.start and inp.end.

    Args:
        inp: Input containing start and end values.
        rules: Optional rules port for configuration.
        time: Optional time port; overrides the rules' local timezone.

    Returns:
        TimeSpanOutput with the HH:mm:ss.sss text or errors.
    """
    config = _build_config(rules)
    if time is None:
        time = create_time_adapter(rules.get_local_timezone() if rules else "UTC")

    try:
        total = elapsed_ms(inp.start, inp.end, config, time)
    except TimeSpanError as e:
        logger.debug("Rejected time span %r -> %r: %s", inp.start, inp.end, e)
        return _failure(e.code, str(e), "end")
    except DateRangeError as e:
        logger.debug("Time span value out of range %r -> %r: %s", inp.start, inp.end, e)
        return _failure(DateRangeError.code, str(e))
    except TypeError as e:
        logger.debug("Rejected time span values %r -> %r: %s", inp.start, inp.end, e)
        return _failure("invalid_type", str(e))

    parts = split_duration_ms(total)
    return TimeSpanOutput(
        text=format_time_span(parts, config.min_hour_digits),
        duration_ms=total,
        parts=parts,
        errors=(),
        success=True,
    )
