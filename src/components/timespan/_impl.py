"""
Elapsed-time formatting as HH:mm:ss.sss.

The duration is split with integer division and modulo on the total
milliseconds only; no calendar fields are involved, so hours keep counting
past 24.

Negative durations follow TimeSpanConfig.negative_policy:
- "error": raise TimeSpanError
- "clamp": format as zero
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Literal

from src.adapters.time_zone import LocalTimeAdapter
from src.core.ports.time import DateLike, TimePort

MS_PER_SECOND = 1_000
MS_PER_MINUTE = 60 * MS_PER_SECOND
MS_PER_HOUR = 60 * MS_PER_MINUTE

NegativePolicy = Literal["error", "clamp"]

# --- Configuration ---


def _check_hour_digits(min_hour_digits: int) -> None:
    if min_hour_digits < 2:
        raise ValueError(f"min_hour_digits must be at least 2, got {min_hour_digits}")


@dataclass(frozen=True)
class TimeSpanConfig:
    """Formatter configuration from rules."""

    negative_policy: NegativePolicy = "error"
    min_hour_digits: int = 2

    def __post_init__(self) -> None:
        _check_hour_digits(self.min_hour_digits)


DEFAULT_CONFIG = TimeSpanConfig()
DEFAULT_TIME = LocalTimeAdapter()


# --- Errors ---


class TimeSpanError(ValueError):
    """Raised for durations or strings the formatter cannot represent."""

    def __init__(self, message: str, *, code: str) -> None:
        self.code = code
        super().__init__(message)


# --- Model ---


@dataclass(frozen=True)
class TimeSpanParts:
    """A non-negative duration split into clock fields."""

    hours: int
    minutes: int
    seconds: int
    milliseconds: int

    @property
    def total_ms(self) -> int:
        return (
            self.hours * MS_PER_HOUR
            + self.minutes * MS_PER_MINUTE
            + self.seconds * MS_PER_SECOND
            + self.milliseconds
        )


_TIME_SPAN_RE = re.compile(r"(\d{2,}):([0-5]\d):([0-5]\d)\.(\d{3})", re.ASCII)


def split_duration_ms(total_ms: int) -> TimeSpanParts:
    """Split non-negative milliseconds into hours, minutes, seconds, ms."""
    if total_ms < 0:
        raise TimeSpanError(f"Negative duration: {total_ms} ms", code="negative_duration")

    return TimeSpanParts(
        hours=total_ms // MS_PER_HOUR,
        minutes=total_ms // MS_PER_MINUTE % 60,
        seconds=total_ms // MS_PER_SECOND % 60,
        milliseconds=total_ms % MS_PER_SECOND,
    )


def format_time_span(parts: TimeSpanParts, min_hour_digits: int = 2) -> str:
    """Render parts as HH:mm:ss.sss (hours padded, never truncated)."""
    _check_hour_digits(min_hour_digits)
    return (
        f"{parts.hours:0{min_hour_digits}d}:{parts.minutes:02d}:"
        f"{parts.seconds:02d}.{parts.milliseconds:03d}"
    )


def parse_time_span(text: str) -> int:
    """
    Inverse of format_time_span: "05:20:10.453" -> 19210453.

    Raises:
        TimeSpanError: If text is not HH:mm:ss.sss.
    """
    match = _TIME_SPAN_RE.fullmatch(text.strip())
    if match is None:
        raise TimeSpanError(f"Not a time span: {text!r}", code="invalid_format")

    try:
        hours, minutes, seconds, milliseconds = (int(g) for g in match.groups())
    except ValueError as e:
        raise TimeSpanError(f"Time span too long: {text!r}", code="invalid_format") from e
    return TimeSpanParts(hours, minutes, seconds, milliseconds).total_ms


def elapsed_ms(
    start: DateLike,
    end: DateLike,
    config: TimeSpanConfig = DEFAULT_CONFIG,
    time_port: TimePort = DEFAULT_TIME,
) -> int:
    """Milliseconds from start to end after applying the negative policy."""
    total = time_port.duration_ms(start, end)
    if total < 0:
        if config.negative_policy == "clamp":
            return 0
        raise TimeSpanError(
            f"End is {-total} ms before start", code="negative_duration"
        )
    return total


def time_span_to_string(
    start: DateLike,
    end: DateLike,
    config: TimeSpanConfig = DEFAULT_CONFIG,
    time_port: TimePort = DEFAULT_TIME,
) -> str:
    """
    Format the time between start and end as HH:mm:ss.sss.

    Examples:
        10:00:00 -> 11:00:00          "01:00:00.000"
        10:00:00 -> 10:00:00.250      "00:00:00.250"
        10:00:00 -> 15:20:10.453      "05:20:10.453"
        2000-01-01 -> 2000-01-02 01:00 "25:00:00.000"
    """
    parts = split_duration_ms(elapsed_ms(start, end, config, time_port))
    return format_time_span(parts, config.min_hour_digits)
