"""
Clock component port definitions.
"""

from __future__ import annotations

from typing import Protocol

from src.core.ports.time import TimePort

__all__ = ["RulesPort", "TimePort"]


class RulesPort(Protocol):
    """Port for clock rules configuration."""

    def get_local_timezone(self) -> str:
        """Get the IANA name of the local timezone (used for naive values)."""
        ...
