"""
Time/Timezone adapter interface.

Protocol-based interface for turning date values into instants and
calendar fields.

Key requirements:
- Instants are timezone-aware datetimes
- Naive datetimes and dates are wall-clock values in the local timezone
- Integers are epoch milliseconds
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Protocol, Union

# Anything the date helpers accept as a date/time value
DateLike = Union[datetime, date, int]


class DateRangeError(ValueError):
    """Date value whose instant falls outside the supported datetime range."""

    code = "out_of_range"


class TimePort(Protocol):
    """
    Time/Timezone adapter interface.

    Local timezone is configurable (default: UTC).
    """

    @property
    def timezone_name(self) -> str:
        """Get the local timezone name (e.g., 'Europe/London')."""
        ...

    def to_instant(self, value: DateLike) -> datetime:
        """
        Coerce a date value to an aware UTC datetime.

        Raises:
            TypeError: If value is not a date value
            DateRangeError: If the instant is outside the datetime range
        """
        ...

    def to_utc(self, value: DateLike) -> datetime:
        """Same instant with UTC calendar fields."""
        ...

    def to_local(self, value: DateLike) -> datetime:
        """Same instant with local calendar fields."""
        ...

    def from_epoch_ms(self, epoch_ms: int) -> datetime:
        """Build an aware UTC datetime from epoch milliseconds."""
        ...

    def to_epoch_ms(self, value: DateLike) -> int:
        """Milliseconds since 1970-01-01T00:00:00 UTC."""
        ...

    def duration_ms(self, start: DateLike, end: DateLike) -> int:
        """Signed milliseconds from start to end."""
        ...
