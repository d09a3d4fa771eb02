"""
Rules adapter.

Maps the validated Rules model onto the RulesPort of each component
(dateparse, calendar, timespan, clock).
"""

from __future__ import annotations

from src.rules.models import Rules


class RulesAdapter:
    """Adapter to map generic Rules to component RulesPorts."""

    def __init__(self, rules: Rules) -> None:
        self._rules = rules

    def get_local_timezone(self) -> str:
        return self._rules.timezone.local

    def accept_legacy_rfc2822_forms(self) -> bool:
        return self._rules.parsing.rfc2822.accept_legacy_forms

    def iso8601_date_only_as_utc(self) -> bool:
        return self._rules.parsing.iso8601.date_only_as_utc

    def get_negative_policy(self) -> str:
        return self._rules.timespan.negative_policy

    def get_min_hour_digits(self) -> int:
        return self._rules.timespan.min_hour_digits
