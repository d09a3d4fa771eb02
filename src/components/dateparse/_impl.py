"""
Date string parsing - RFC 2822 and ISO 8601.

Functional core: pure parsing over regular expressions, no I/O.
ISO 8601 strings are checked by a strict pattern, then built by
datetime.fromisoformat.

Key behaviors:
- RFC 2822 section 3.3 date-time, including obsolete years and zone names
- Optional legacy forms ("GMT+01" suffix, "December 17, 1995 03:24:00")
- ISO 8601 extended format with Z or numeric offset
- Results are aware datetimes normalized to UTC
- Values without a zone are read in the local timezone of the TimePort
- Any grammar or field violation raises DateParseError
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta, timezone

from src.adapters.time_zone import LocalTimeAdapter
from src.core.ports.time import DateRangeError, TimePort

# --- Configuration ---


@dataclass(frozen=True)
class Rfc2822Config:
    """RFC 2822 parser configuration from rules."""

    accept_legacy_forms: bool = True


@dataclass(frozen=True)
class Iso8601Config:
    """ISO 8601 parser configuration from rules."""

    date_only_as_utc: bool = True


DEFAULT_RFC2822_CONFIG = Rfc2822Config()
DEFAULT_ISO8601_CONFIG = Iso8601Config()
DEFAULT_TIME = LocalTimeAdapter()


# --- Errors ---


class DateParseError(ValueError):
    """Raised when a string is not a date in the expected format."""

    def __init__(
        self,
        message: str,
        *,
        code: str = "invalid_format",
        value: str | None = None,
    ) -> None:
        self.code = code
        self.value = value
        super().__init__(message)


# --- Grammar ---

_MONTH_NAMES = (
    "january",
    "february",
    "march",
    "april",
    "may",
    "june",
    "july",
    "august",
    "september",
    "october",
    "november",
    "december",
)
_MONTHS = {name[:3]: index for index, name in enumerate(_MONTH_NAMES, start=1)}

# Obsolete zone names (RFC 2822 section 4.3), hours east of UTC
_NAMED_ZONES = {
    "UT": 0,
    "UTC": 0,
    "GMT": 0,
    "Z": 0,
    "EST": -5,
    "EDT": -4,
    "CST": -6,
    "CDT": -5,
    "MST": -7,
    "MDT": -6,
    "PST": -8,
    "PDT": -7,
}

# ASCII digits only
_RFC2822_RE = re.compile(
    r"""
    (?:(?P<dow>mon|tue|wed|thu|fri|sat|sun)[ \t]*,[ \t]*)?
    (?P<day>\d{1,2})[ \t]+
    (?P<month>[a-z]{3})[ \t]+
    (?P<year>\d{2,4})[ \t]+
    (?P<hour>\d{2}):(?P<minute>\d{2})(?::(?P<second>\d{2}))?
    (?:[ \t]+(?:
        (?P<offset>[+-]\d{4})
        |(?P<legacy>(?:gmt|utc|ut)(?P<lsign>[+-])(?P<lhour>\d{1,2})(?::?(?P<lminute>\d{2}))?)
        |(?P<zone>[a-z]{1,5})
    ))?
    """,
    re.VERBOSE | re.IGNORECASE | re.ASCII,
)

_LONG_FORM_RE = re.compile(
    r"""
    (?P<month>[a-z]+)[ \t]+
    (?P<day>\d{1,2}),?[ \t]+
    (?P<year>\d{4})
    (?:[ \t]+(?P<hour>\d{1,2}):(?P<minute>\d{2})(?::(?P<second>\d{2}))?)?
    """,
    re.VERBOSE | re.IGNORECASE | re.ASCII,
)

# Extended format only; datetime.fromisoformat builds the value
_ISO8601_RE = re.compile(
    r"""
    (?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})
    (?:T(?P<hour>\d{2}):(?P<minute>\d{2})
        (?::(?P<second>\d{2})(?:[.,](?P<fraction>\d+))?)?
        (?P<zone>Z|(?P<sign>[+-])(?P<zhour>[01]\d|2[0-3])(?::?(?P<zminute>[0-5]\d))?)?
    )?
    """,
    re.VERBOSE | re.ASCII,
)


# --- Helpers ---


def _require_text(value: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"Expected str, got {type(value).__name__}")
    text = value.strip()
    if not text:
        raise DateParseError("Date string is empty", code="empty_value", value=value)
    return text


def _offset(sign: str, hours: int, minutes: int, value: str) -> timezone:
    if hours > 23 or minutes > 59:
        raise DateParseError(
            f"Zone offset out of range: {value!r}", code="invalid_field", value=value
        )
    delta = timedelta(hours=hours, minutes=minutes)
    return timezone(-delta if sign == "-" else delta)


def _expand_year(digits: str) -> int:
    """Obsolete years: 00-49 -> 20xx, 50-99 -> 19xx, three digits + 1900."""
    year = int(digits)
    if len(digits) == 2:
        return year + (2000 if year < 50 else 1900)
    if len(digits) == 3:
        return year + 1900
    return year


def _month_number(name: str, value: str, *, allow_full: bool = False) -> int:
    key = name.lower()
    if allow_full and key in _MONTH_NAMES:
        return _MONTH_NAMES.index(key) + 1
    if key in _MONTHS:
        return _MONTHS[key]
    raise DateParseError(f"Unknown month {name!r}", code="invalid_format", value=value)


def _build(
    value: str,
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
) -> datetime:
    try:
        return datetime(year, month, day, hour, minute, second)
    except ValueError as e:
        raise DateParseError(
            f"Date field out of range in {value!r}: {e}", code="invalid_field", value=value
        ) from e


def _to_instant(moment: datetime, time_port: TimePort, value: str) -> datetime:
    """Normalize to UTC; naive values are local. Overflow is a field error."""
    try:
        return time_port.to_instant(moment)
    except (OverflowError, DateRangeError) as e:
        raise DateParseError(
            f"Date out of range in {value!r}", code="invalid_field", value=value
        ) from e


# --- RFC 2822 ---


def _rfc2822_zone(match: re.Match[str], value: str, config: Rfc2822Config) -> timezone | None:
    if match["offset"]:
        raw = match["offset"]
        return _offset(raw[0], int(raw[1:3]), int(raw[3:5]), value)

    if match["legacy"]:
        if not config.accept_legacy_forms:
            raise DateParseError(
                f"Legacy zone {match['legacy']!r} not accepted", code="invalid_format", value=value
            )
        return _offset(match["lsign"], int(match["lhour"]), int(match["lminute"] or 0), value)

    if match["zone"]:
        name = match["zone"].upper()
        if name not in _NAMED_ZONES:
            raise DateParseError(f"Unknown zone {name!r}", code="unknown_zone", value=value)
        return timezone(timedelta(hours=_NAMED_ZONES[name]))

    return None


def _parse_long_form(text: str, value: str, time_port: TimePort) -> datetime:
    match = _LONG_FORM_RE.fullmatch(text)
    if match is None:
        raise DateParseError(f"Not an RFC 2822 date: {value!r}", value=value)

    naive = _build(
        value,
        int(match["year"]),
        _month_number(match["month"], value, allow_full=True),
        int(match["day"]),
        int(match["hour"] or 0),
        int(match["minute"] or 0),
        int(match["second"] or 0),
    )
    return _to_instant(naive, time_port, value)


def parse_rfc2822(
    value: str,
    config: Rfc2822Config = DEFAULT_RFC2822_CONFIG,
    time_port: TimePort = DEFAULT_TIME,
) -> datetime:
    """
    Parse an RFC 2822 date-time string.

    Examples:
        "Tue, 26 Jan 2016 13:48:02 GMT"
        "26 Jan 2016 13:48 +0100"
        "Sun, 17 May 1998 03:00:00 GMT+01"  (legacy)
        "December 17, 1995 03:24:00"        (legacy, local time)

    Returns:
        Aware datetime in UTC.

    Raises:
        DateParseError: If value does not match the grammar.
        TypeError: If value is not a string.
    """
    text = _require_text(value)

    match = _RFC2822_RE.fullmatch(text)
    if match is None:
        if config.accept_legacy_forms:
            return _parse_long_form(text, value, time_port)
        raise DateParseError(f"Not an RFC 2822 date: {value!r}", value=value)

    tz = _rfc2822_zone(match, value, config)
    moment = _build(
        value,
        _expand_year(match["year"]),
        _month_number(match["month"], value),
        int(match["day"]),
        int(match["hour"]),
        int(match["minute"]),
        int(match["second"] or 0),
    )
    if tz is not None:
        moment = moment.replace(tzinfo=tz)
    return _to_instant(moment, time_port, value)


# --- ISO 8601 ---


def _iso_canonical(match: re.Match[str]) -> str:
    """Rewrite a matched string in the form datetime.fromisoformat reads.

    24:00 becomes 00:00 of the same day, the fraction is cut to
    microseconds, and the zone becomes a +HH:MM offset.
    """
    text = f"{match['year']}-{match['month']}-{match['day']}"
    if match["hour"] is None:
        return text

    hour = "00" if match["hour"] == "24" else match["hour"]
    text += f"T{hour}:{match['minute']}:{match['second'] or '00'}"
    if match["fraction"]:
        text += "." + match["fraction"][:6].ljust(6, "0")

    if match["zone"] == "Z":
        text += "+00:00"
    elif match["zone"]:
        text += f"{match['sign']}{match['zhour']}:{match['zminute'] or '00'}"
    return text


def parse_iso8601(
    value: str,
    config: Iso8601Config = DEFAULT_ISO8601_CONFIG,
    time_port: TimePort = DEFAULT_TIME,
) -> datetime:
    """
    Parse an ISO 8601 extended format string.

    Examples:
        "2016-01-19T16:07:37+00:00"
        "2016-01-19T08:07:37Z"
        "2016-01-19"                  (UTC midnight)
        "2016-01-19T24:00:00Z"        (end of day)

    Returns:
        Aware datetime in UTC.

    Raises:
        DateParseError: If value is malformed.
        TypeError: If value is not a string.
    """
    text = _require_text(value)

    match = _ISO8601_RE.fullmatch(text)
    if match is None:
        raise DateParseError(f"Not an ISO 8601 date: {value!r}", value=value)

    end_of_day = match["hour"] == "24"
    if end_of_day and (
        match["minute"] != "00"
        or (match["second"] or "00") != "00"
        or (match["fraction"] or "").strip("0")
    ):
        raise DateParseError(
            f"24:00 must not carry minutes or seconds: {value!r}",
            code="invalid_field",
            value=value,
        )

    try:
        moment = datetime.fromisoformat(_iso_canonical(match))
        if end_of_day:
            moment += timedelta(days=1)
    except ValueError as e:
        raise DateParseError(
            f"Date field out of range in {value!r}: {e}", code="invalid_field", value=value
        ) from e
    except OverflowError as e:
        raise DateParseError(
            f"Date out of range in {value!r}", code="invalid_field", value=value
        ) from e

    if match["hour"] is None and config.date_only_as_utc:
        return moment.replace(tzinfo=UTC)
    return _to_instant(moment, time_port, value)
