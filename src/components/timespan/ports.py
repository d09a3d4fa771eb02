"""
Timespan component port definitions.
"""

from __future__ import annotations

from typing import Protocol

from src.core.ports.time import TimePort

__all__ = ["RulesPort", "TimePort"]


class RulesPort(Protocol):
    """Port for time span rules configuration."""

    def get_local_timezone(self) -> str:
        """Get the IANA name of the local timezone."""
        ...

    def get_negative_policy(self) -> str:
        """Get the policy for end before start ("error" or "clamp")."""
        ...

    def get_min_hour_digits(self) -> int:
        """Get the minimum width of the hours field."""
        ...
