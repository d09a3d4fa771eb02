"""
Dateparse component port definitions.
"""

from __future__ import annotations

from typing import Protocol

from src.core.ports.time import TimePort

__all__ = ["RulesPort", "TimePort"]


class RulesPort(Protocol):
    """Port for parsing rules configuration."""

    def get_local_timezone(self) -> str:
        """Get the IANA name of the local timezone."""
        ...

    def accept_legacy_rfc2822_forms(self) -> bool:
        """Check if legacy RFC 2822 forms are accepted."""
        ...

    def iso8601_date_only_as_utc(self) -> bool:
        """Check if date-only ISO 8601 values are UTC midnight."""
        ...
