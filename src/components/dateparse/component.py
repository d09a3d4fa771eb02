"""
Dateparse component - RFC 2822 and ISO 8601 date string parsing.

Shell Layer - builds config from rules and converts errors.

Invariants:
- I1: A failed parse never yields a datetime
- I2: Successful results are aware and normalized to UTC
- I3: Values without a zone are read in the local timezone
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime
from typing import TypeVar

from src.adapters.time_zone import create_time_adapter

from ._impl import (
    DateParseError,
    Iso8601Config,
    Rfc2822Config,
    parse_iso8601,
    parse_rfc2822,
)
from .models import DateParseValidationError, ParseDateInput, ParseDateOutput
from .ports import RulesPort, TimePort

logger = logging.getLogger(__name__)

ConfigT = TypeVar("ConfigT", Rfc2822Config, Iso8601Config)


def _build_rfc2822_config(rules: RulesPort | None) -> Rfc2822Config:
    """Build RFC 2822 config from rules port."""
    if rules is None:
        return Rfc2822Config()
    return Rfc2822Config(accept_legacy_forms=rules.accept_legacy_rfc2822_forms())


def _build_iso8601_config(rules: RulesPort | None) -> Iso8601Config:
    """Build ISO 8601 config from rules port."""
    if rules is None:
        return Iso8601Config()
    return Iso8601Config(date_only_as_utc=rules.iso8601_date_only_as_utc())


def _resolve_time(rules: RulesPort | None, time: TimePort | None) -> TimePort:
    if time is not None:
        return time
    return create_time_adapter(rules.get_local_timezone() if rules else "UTC")


def _run(
    inp: ParseDateInput,
    parse: Callable[[str, ConfigT, TimePort], datetime],
    config: ConfigT,
    time: TimePort,
) -> ParseDateOutput:
    try:
        parsed = parse(inp.value, config, time)
    except DateParseError as e:
        logger.debug("Rejected date string %r: %s", inp.value, e)
        return ParseDateOutput(
            value=None,
            epoch_ms=None,
            errors=(DateParseValidationError(code=e.code, message=str(e), field="value"),),
            success=False,
        )
    except TypeError as e:
        logger.debug("Rejected non-string date value %r: %s", inp.value, e)
        return ParseDateOutput(
            value=None,
            epoch_ms=None,
            errors=(DateParseValidationError(code="invalid_type", message=str(e), field="value"),),
            success=False,
        )

    return ParseDateOutput(
        value=parsed,
        epoch_ms=time.to_epoch_ms(parsed),
        errors=(),
        success=True,
    )


# --- Component Entry Points ---


def run_parse_rfc2822(
    inp: ParseDateInput,
    *,
    rules: RulesPort | None = None,
    time: TimePort | None = None,
) -> ParseDateOutput:
    """
    Parse an RFC 2822 date string.

    Args:
        inp: Input containing the date string.
        rules: Optional rules port for configuration.
        time: Optional time port; defaults to the rules' local timezone.

    Returns:
        ParseDateOutput with the UTC datetime or errors.
    """
    return _run(inp, parse_rfc2822, _build_rfc2822_config(rules), _resolve_time(rules, time))


def run_parse_iso8601(
    inp: ParseDateInput,
    *,
    rules: RulesPort | None = None,
    time: TimePort | None = None,
) -> ParseDateOutput:
    """
    Parse an ISO 8601 date string.

    Args:
        inp: Input containing the date string.
        rules: Optional rules port for configuration.
        time: Optional time port; defaults to the rules' local timezone.

    Returns:
        ParseDateOutput with the UTC datetime or errors.
    """
    return _run(inp, parse_iso8601, _build_iso8601_config(rules), _resolve_time(rules, time))
