"""
Angle between the hands of an analog clock.

Uses the UTC hour and minute of the value; seconds are ignored.
Degrees are converted to radians once, at the end.
"""

from __future__ import annotations

import math

from src.adapters.time_zone import LocalTimeAdapter
from src.core.ports.time import DateLike, TimePort

HOUR_HAND_STEP_DEGREES = 360 / 12
MINUTE_HAND_STEP_DEGREES = 360 / 60

DEFAULT_TIME = LocalTimeAdapter()


def hand_angle_degrees(hour: int, minute: int) -> float:
    """
    Non-reflex angle between the hands in degrees, in [0, 180].

    Raises:
        ValueError: If hour is not 0-23 or minute is not 0-59.
    """
    if not 0 <= hour <= 23:
        raise ValueError(f"hour must be in 0..23, got {hour}")
    if not 0 <= minute <= 59:
        raise ValueError(f"minute must be in 0..59, got {minute}")

    hour_degrees = (hour % 12 + minute / 60) * HOUR_HAND_STEP_DEGREES
    minute_degrees = minute * MINUTE_HAND_STEP_DEGREES

    degrees = abs(hour_degrees - minute_degrees)
    if degrees > 180:
        degrees = 360 - degrees
    return degrees


def clock_hand_angles(value: DateLike, time_port: TimePort = DEFAULT_TIME) -> tuple[float, float]:
    """Angle between the hands at the UTC time of value, as (degrees, radians)."""
    utc = time_port.to_utc(value)
    degrees = hand_angle_degrees(utc.hour, utc.minute)
    return degrees, degrees * (math.pi / 180)


def angle_between_clock_hands(value: DateLike, time_port: TimePort = DEFAULT_TIME) -> float:
    """
    Angle in radians, in [0, pi], between the hour and minute hands.

    Examples:
        00:00 UTC -> 0
        03:00 UTC -> pi / 2
        18:00 UTC -> pi
        21:00 UTC -> pi / 2
    """
    return clock_hand_angles(value, time_port)[1]
