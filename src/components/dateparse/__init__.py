"""
Dateparse component - RFC 2822 and ISO 8601 date string parsing.
"""

from ._impl import (
    DateParseError,
    Iso8601Config,
    Rfc2822Config,
    parse_iso8601,
    parse_rfc2822,
)
from .component import run_parse_iso8601, run_parse_rfc2822
from .models import DateParseValidationError, ParseDateInput, ParseDateOutput
from .ports import RulesPort, TimePort

__all__ = [
    # Entry points
    "run_parse_rfc2822",
    "run_parse_iso8601",
    # Input models
    "ParseDateInput",
    # Output models
    "ParseDateOutput",
    "DateParseValidationError",
    # Ports
    "RulesPort",
    "TimePort",
    # _impl re-exports
    "DateParseError",
    "Iso8601Config",
    "Rfc2822Config",
    "parse_iso8601",
    "parse_rfc2822",
]
