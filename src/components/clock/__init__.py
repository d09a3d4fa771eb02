"""
Clock component - Angle between the hands of an analog clock.
"""

from ._impl import (
    HOUR_HAND_STEP_DEGREES,
    MINUTE_HAND_STEP_DEGREES,
    angle_between_clock_hands,
    clock_hand_angles,
    hand_angle_degrees,
)
from .component import run_clock_angle
from .models import ClockAngleInput, ClockAngleOutput, ClockValidationError
from .ports import RulesPort, TimePort

__all__ = [
    # Entry points
    "run_clock_angle",
    # Input models
    "ClockAngleInput",
    # Output models
    "ClockAngleOutput",
    "ClockValidationError",
    # Ports
    "RulesPort",
    "TimePort",
    # _impl re-exports
    "HOUR_HAND_STEP_DEGREES",
    "MINUTE_HAND_STEP_DEGREES",
    "angle_between_clock_hands",
    "clock_hand_angles",
    "hand_angle_degrees",
]
