"""
Leap-year predicate over the Gregorian calendar.

Only the calendar year of the value is consulted, read in the local
timezone of the TimePort.
"""

from __future__ import annotations

from src.adapters.time_zone import LocalTimeAdapter
from src.core.ports.time import DateLike, TimePort

DEFAULT_TIME = LocalTimeAdapter()


def is_leap_year_number(year: int) -> bool:
    """
    Gregorian rule: every 4th year, except centuries not divisible by 400.

    | year % 4 | year % 100 | year % 400 | result |
    | != 0     |            |            | False  |
    | 0        | != 0       |            | True   |
    | 0        | 0          | != 0       | False  |
    | 0        | 0          | 0          | True   |
    """
    if year % 4 != 0:
        return False
    if year % 100 != 0:
        return True
    return year % 400 == 0


def local_year(value: DateLike, time_port: TimePort = DEFAULT_TIME) -> int:
    """Calendar year of value in the local timezone."""
    return time_port.to_local(value).year


def leap_year_of(value: DateLike, time_port: TimePort = DEFAULT_TIME) -> tuple[int, bool]:
    """Local calendar year of value and whether it is a leap year."""
    year = local_year(value, time_port)
    return year, is_leap_year_number(year)


def is_leap_year(value: DateLike, time_port: TimePort = DEFAULT_TIME) -> bool:
    """
    Return True if the year of value is a leap year.

    Examples:
        date(1900, 1, 1) -> False
        date(2000, 1, 1) -> True
        date(2012, 1, 1) -> True
    """
    return leap_year_of(value, time_port)[1]
