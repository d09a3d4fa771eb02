"""
Calendar component - Gregorian leap-year check.
"""

from ._impl import is_leap_year, is_leap_year_number, leap_year_of, local_year
from .component import run_is_leap_year
from .models import CalendarValidationError, LeapYearInput, LeapYearOutput
from .ports import RulesPort, TimePort

__all__ = [
    # Entry points
    "run_is_leap_year",
    # Input models
    "LeapYearInput",
    # Output models
    "LeapYearOutput",
    "CalendarValidationError",
    # Ports
    "RulesPort",
    "TimePort",
    # _impl re-exports
    "is_leap_year",
    "is_leap_year_number",
    "leap_year_of",
    "local_year",
]
