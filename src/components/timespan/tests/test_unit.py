"""
Timespan component unit tests.

Tests for HH:mm:ss.sss formatting of elapsed time.
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from src.adapters.time_zone import LocalTimeAdapter
from src.components.timespan import (
    TimeSpanConfig,
    TimeSpanError,
    TimeSpanInput,
    TimeSpanParts,
    format_time_span,
    parse_time_span,
    run_time_span,
    split_duration_ms,
    time_span_to_string,
)

START = datetime(2000, 1, 1, 10, 0, 0)


class MockRules:
    """Rules port with overridable values."""

    def __init__(
        self,
        tz_name: str = "UTC",
        negative_policy: str = "error",
        min_hour_digits: int = 2,
    ) -> None:
        self._tz_name = tz_name
        self._negative_policy = negative_policy
        self._min_hour_digits = min_hour_digits

    def get_local_timezone(self) -> str:
        return self._tz_name

    def get_negative_policy(self) -> str:
        return self._negative_policy

    def get_min_hour_digits(self) -> int:
        return self._min_hour_digits


class TestTimeSpanToString:
    """Test formatting between two values."""

    @pytest.mark.parametrize(
        ("end", "expected"),
        [
            (datetime(2000, 1, 1, 11, 0, 0), "01:00:00.000"),
            (datetime(2000, 1, 1, 10, 30, 0), "00:30:00.000"),
            (datetime(2000, 1, 1, 10, 0, 20), "00:00:20.000"),
            (datetime(2000, 1, 1, 10, 0, 0, 250000), "00:00:00.250"),
            (datetime(2000, 1, 1, 15, 20, 10, 453000), "05:20:10.453"),
        ],
    )
    def test_examples(self, end: datetime, expected: str) -> None:
        """Known spans."""
        assert time_span_to_string(START, end) == expected

    def test_zero(self) -> None:
        """Equal values give zero."""
        assert time_span_to_string(START, START) == "00:00:00.000"

    def test_hours_not_wrapped(self) -> None:
        """Spans over a day keep counting hours."""
        end = START + timedelta(days=1, hours=1, milliseconds=7)
        assert time_span_to_string(START, end) == "25:00:00.007"

    def test_three_digit_hours(self) -> None:
        """Hours grow past two digits."""
        end = START + timedelta(hours=123, minutes=4, seconds=5)
        assert time_span_to_string(START, end) == "123:04:05.000"

    def test_across_dst(self) -> None:
        """Elapsed time is real time, not wall-clock difference."""
        london = LocalTimeAdapter("Europe/London")
        # Clocks go forward at 01:00 on 2016-03-27
        start = datetime(2016, 3, 27, 0, 30)
        end = datetime(2016, 3, 27, 2, 30)
        assert time_span_to_string(start, end, time_port=london) == "01:00:00.000"

    def test_mixed_inputs(self) -> None:
        """Aware datetimes and epoch milliseconds mix."""
        start = datetime(1970, 1, 1, tzinfo=UTC)
        assert time_span_to_string(start, 61_001) == "00:01:01.001"

    def test_negative_raises(self) -> None:
        """End before start raises by default."""
        with pytest.raises(TimeSpanError) as exc_info:
            time_span_to_string(datetime(2000, 1, 1, 11), START)
        assert exc_info.value.code == "negative_duration"

    def test_negative_clamped(self) -> None:
        """Clamp policy formats reversed spans as zero."""
        config = TimeSpanConfig(negative_policy="clamp")
        assert time_span_to_string(datetime(2000, 1, 1, 11), START, config) == "00:00:00.000"

    def test_min_hour_digits(self) -> None:
        """Hour width is configurable."""
        config = TimeSpanConfig(min_hour_digits=3)
        assert time_span_to_string(START, datetime(2000, 1, 1, 11), config) == "001:00:00.000"

    @pytest.mark.parametrize("digits", [1, 0, -3])
    def test_min_hour_digits_at_least_two(self, digits: int) -> None:
        """Hours are never padded to fewer than two digits."""
        with pytest.raises(ValueError):
            TimeSpanConfig(min_hour_digits=digits)

    def test_format_rejects_single_hour_digit(self) -> None:
        """format_time_span enforces the same minimum."""
        with pytest.raises(ValueError):
            format_time_span(split_duration_ms(3_600_000), min_hour_digits=1)


class TestSplitDuration:
    """Test integer splitting of milliseconds."""

    def test_split(self) -> None:
        """Fields come from division and modulo."""
        parts = split_duration_ms(19_210_453)
        assert parts == TimeSpanParts(hours=5, minutes=20, seconds=10, milliseconds=453)

    def test_rollover_boundary(self) -> None:
        """One millisecond short of an hour."""
        parts = split_duration_ms(3_599_999)
        assert format_time_span(parts) == "00:59:59.999"

    def test_negative(self) -> None:
        """Negative totals are rejected."""
        with pytest.raises(TimeSpanError):
            split_duration_ms(-1)

    def test_round_trip_under_a_day(self) -> None:
        """Parsing the text reproduces the duration."""
        for total in (0, 1, 999, 1_000, 59_999, 60_000, 3_599_999, 3_600_000, 86_399_999):
            text = format_time_span(split_duration_ms(total))
            assert parse_time_span(text) == total

    def test_parse_rejects_garbage(self) -> None:
        """Only HH:mm:ss.sss parses."""
        for text in (
            "",
            "1:2:3",
            "1:00:00.000",
            "00:60:00.000",
            "00:00:00.00",
            "aa:bb:cc.ddd",
            "０1:00:00.000",
            "01:００:00.000",
        ):
            with pytest.raises(TimeSpanError):
                parse_time_span(text)


class TestRunTimeSpan:
    """Test the shell layer."""

    def test_success(self) -> None:
        """Output carries text, duration and parts."""
        result = run_time_span(
            TimeSpanInput(start=START, end=datetime(2000, 1, 1, 15, 20, 10, 453000))
        )

        assert result.success is True
        assert result.text == "05:20:10.453"
        assert result.duration_ms == 19_210_453
        assert result.parts is not None
        assert result.parts.hours == 5

    def test_negative_is_error(self) -> None:
        """Reversed spans are reported."""
        result = run_time_span(TimeSpanInput(start=datetime(2000, 1, 1, 11), end=START))

        assert result.success is False
        assert result.text is None
        assert result.errors[0].code == "negative_duration"
        assert result.errors[0].field == "end"

    def test_rules_clamp(self) -> None:
        """Rules switch to clamping."""
        result = run_time_span(
            TimeSpanInput(start=datetime(2000, 1, 1, 11), end=START),
            rules=MockRules(negative_policy="clamp"),
        )
        assert result.success is True
        assert result.text == "00:00:00.000"
        assert result.duration_ms == 0

    def test_rules_unknown_policy(self) -> None:
        """Unknown policies are a configuration error."""
        with pytest.raises(ValueError):
            run_time_span(TimeSpanInput(start=START, end=START), rules=MockRules(negative_policy="wrap"))

    def test_invalid_type(self) -> None:
        """Bad values are reported as errors."""
        result = run_time_span(TimeSpanInput(start="10:00", end=START))  # type: ignore[arg-type]
        assert result.success is False
        assert result.errors[0].code == "invalid_type"

    def test_epoch_ms_out_of_range(self) -> None:
        """Epoch milliseconds past datetime's range are reported."""
        result = run_time_span(TimeSpanInput(start=0, end=10**20))
        assert result.success is False
        assert result.text is None
        assert result.errors[0].code == "out_of_range"

    def test_naive_value_out_of_range(self) -> None:
        """Local values that cannot be moved to UTC are reported."""
        result = run_time_span(
            TimeSpanInput(start=datetime(1, 1, 1), end=START),
            rules=MockRules(tz_name="Asia/Tokyo"),
        )
        assert result.success is False
        assert result.errors[0].code == "out_of_range"

    def test_epoch_ms_span(self) -> None:
        """Epoch milliseconds inside the range are measured directly."""
        result = run_time_span(TimeSpanInput(start=0, end=90_061_001))
        assert result.text == "25:01:01.001"
