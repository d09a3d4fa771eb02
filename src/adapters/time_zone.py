"""
Local Time Adapter (TimePort implementation).

Implements the TimePort interface for a configurable IANA timezone.

Key behaviors:
- to_instant: Naive datetimes and dates are read in the local zone
- to_local / to_utc: Expose local or UTC calendar fields
- Epoch milliseconds are converted with integer arithmetic only
- Instants outside the datetime range raise DateRangeError
"""

from __future__ import annotations

from datetime import UTC, date, datetime, time, timedelta, tzinfo
from zoneinfo import ZoneInfo

from src.core.ports.time import DateLike, DateRangeError

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
ONE_MS = timedelta(milliseconds=1)


class LocalTimeAdapter:
    """
    Time adapter for a single local timezone.

    Handles DST transitions through zoneinfo.
    """

    def __init__(self, tz_name: str = "UTC") -> None:
        """
        Initialize with specified timezone.

        Args:
            tz_name: IANA timezone name (default: UTC)
        """
        self._tz_name = tz_name
        self._tz = ZoneInfo(tz_name)
        self._utc = UTC

    @property
    def timezone_name(self) -> str:
        """Get the local timezone name."""
        return self._tz_name

    def to_instant(self, value: DateLike) -> datetime:
        """
        Coerce a date value to an aware UTC datetime.

        - aware datetime: converted to UTC
        - naive datetime: assumed local
        - date: local midnight
        - int: epoch milliseconds

        Raises:
            TypeError: If value is not a date value
            DateRangeError: If the UTC instant does not fit in a datetime
        """
        # bool is an int subclass but never a timestamp
        if isinstance(value, bool):
            raise TypeError("bool is not a date value")

        if isinstance(value, int):
            return self.from_epoch_ms(value)

        if isinstance(value, datetime):
            if value.tzinfo is None:
                value = value.replace(tzinfo=self._tz)
        elif isinstance(value, date):
            value = datetime.combine(value, time.min, tzinfo=self._tz)
        else:
            raise TypeError(f"Unsupported date value type: {type(value).__name__}")

        return self._convert(value, self._utc)

    def to_utc(self, value: DateLike) -> datetime:
        """Same instant with UTC calendar fields."""
        return self.to_instant(value)

    def to_local(self, value: DateLike) -> datetime:
        """Same instant with local calendar fields."""
        return self._convert(self.to_instant(value), self._tz)

    def from_epoch_ms(self, epoch_ms: int) -> datetime:
        """Build an aware UTC datetime from epoch milliseconds."""
        try:
            return EPOCH + timedelta(milliseconds=epoch_ms)
        except OverflowError as e:
            raise DateRangeError(f"Epoch ms out of range: {epoch_ms}") from e

    def to_epoch_ms(self, value: DateLike) -> int:
        """Milliseconds since the epoch, sub-millisecond part floored."""
        return (self.to_instant(value) - EPOCH) // ONE_MS

    def duration_ms(self, start: DateLike, end: DateLike) -> int:
        """Signed milliseconds from start to end."""
        return (self.to_instant(end) - self.to_instant(start)) // ONE_MS

    @staticmethod
    def _convert(value: datetime, tz: tzinfo) -> datetime:
        try:
            return value.astimezone(tz)
        except OverflowError as e:
            raise DateRangeError(f"Date out of range in {tz}: {value.isoformat()}") from e


def create_time_adapter(tz_name: str = "UTC") -> LocalTimeAdapter:
    """Factory function to create a time adapter."""
    return LocalTimeAdapter(tz_name)
