"""
Timespan component - Elapsed-time formatting as HH:mm:ss.sss.
"""

from ._impl import (
    TimeSpanConfig,
    TimeSpanError,
    TimeSpanParts,
    elapsed_ms,
    format_time_span,
    parse_time_span,
    split_duration_ms,
    time_span_to_string,
)
from .component import run_time_span
from .models import TimeSpanInput, TimeSpanOutput, TimeSpanValidationError
from .ports import RulesPort, TimePort

__all__ = [
    # Entry points
    "run_time_span",
    # Input models
    "TimeSpanInput",
    # Output models
    "TimeSpanOutput",
    "TimeSpanValidationError",
    # Ports
    "RulesPort",
    "TimePort",
    # _impl re-exports
    "TimeSpanConfig",
    "TimeSpanError",
    "TimeSpanParts",
    "elapsed_ms",
    "format_time_span",
    "parse_time_span",
    "split_duration_ms",
    "time_span_to_string",
]
