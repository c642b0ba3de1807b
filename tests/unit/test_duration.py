"""
Tests for time-of-day arithmetic: durations, gaps, progress and countdown.
"""

from datetime import datetime, time

import pytest

from shoreplan.calculators.duration import (
    ELAPSED,
    BoardingCountdown,
    CountdownState,
    countdown,
    duration,
    gap,
    is_within,
    parse_hhmm,
    progress,
    to_minutes_of_day,
)
from shoreplan.validation.exceptions import AmbiguousDurationError, ValidationError


class TestParseHHMM:
    """Test HH:MM parsing."""

    @pytest.mark.parametrize(
        "text,expected",
        [("00:00", 0), ("08:30", 510), ("8:05", 485), ("23:59", 1439)],
    )
    def test_valid(self, text, expected):
        assert parse_hhmm(text) == expected

    @pytest.mark.parametrize("text", ["24:00", "12:60", "abc", "", "12", "12:5"])
    def test_malformed(self, text):
        with pytest.raises(ValidationError):
            parse_hhmm(text)

    def test_non_string(self):
        with pytest.raises(ValidationError):
            parse_hhmm(830)


class TestToMinutesOfDay:
    """Test conversion of clock readings."""

    def test_seconds_become_fraction(self):
        assert to_minutes_of_day("18:30:01") == pytest.approx(1110 + 1 / 60)

    def test_time_and_datetime(self):
        assert to_minutes_of_day(time(10, 15)) == 615
        assert to_minutes_of_day(datetime(2026, 4, 13, 10, 15, 30)) == pytest.approx(
            615.5
        )

    def test_number_passthrough(self):
        assert to_minutes_of_day(615) == 615.0

    @pytest.mark.parametrize("value", [1440, -1, True, None, "25:00"])
    def test_invalid(self, value):
        with pytest.raises(ValidationError):
            to_minutes_of_day(value)


class TestDuration:
    """Test activity lengths with midnight wrap."""

    def test_simple(self):
        assert duration("08:00", "09:00") == 60

    def test_crosses_midnight(self):
        assert duration("22:30", "01:00") == 150

    def test_equal_times_are_ambiguous(self):
        with pytest.raises(AmbiguousDurationError):
            duration("09:00", "09:00")

    def test_ambiguous_is_a_validation_error(self):
        with pytest.raises(ValidationError):
            duration("00:00", "00:00")

    def test_always_within_one_day(self):
        samples = [f"{m // 60:02d}:{m % 60:02d}" for m in range(0, 1440, 97)]
        for start in samples:
            for end in samples:
                if start == end:
                    continue
                assert 0 < duration(start, end) < 1440


class TestGap:
    """Test waiting time between adjacent activities."""

    def test_simple(self):
        assert gap("09:00", "09:30") == 30

    def test_back_to_back(self):
        assert gap("09:00", "09:00") == 0

    def test_crosses_midnight(self):
        assert gap("23:50", "00:10") == 20


class TestProgress:
    """Test clamped progress through a window."""

    @pytest.mark.parametrize(
        "now,expected",
        [
            ("07:00", 0.0),
            ("08:00", 0.0),
            ("08:30", 0.5),
            ("09:00", 1.0),
            ("12:00", 1.0),
        ],
    )
    def test_clamped(self, now, expected):
        assert progress(now, "08:00", "09:00") == pytest.approx(expected)

    def test_seconds_resolution(self):
        assert progress("08:30:30", "08:00", "09:00") == pytest.approx(30.5 / 60)

    def test_monotonic_over_the_day(self):
        values = [progress(minute, "08:00", "09:00") for minute in range(1440)]
        assert all(b >= a for a, b in zip(values, values[1:]))
        assert all(0.0 <= v <= 1.0 for v in values)

    def test_window_across_midnight(self):
        assert progress("00:00", "23:00", "01:00") == pytest.approx(0.5)
        assert progress("18:00", "23:00", "01:00") == 0.0

    @pytest.mark.parametrize("now", ["01:00", "01:01", "02:00", "06:00"])
    def test_after_window_across_midnight(self, now):
        assert progress(now, "22:00", "01:00") == 1.0

    def test_window_ending_at_midnight(self):
        assert progress("00:00", "23:00", "00:00") == 1.0
        assert progress("22:59", "23:00", "00:00") == 0.0

    def test_monotonic_across_midnight(self):
        """Walk a full day starting halfway through the idle stretch."""
        anchor = 60 + (1440 - 180) // 2
        minutes = [(anchor + i) % 1440 for i in range(1440)]
        values = [progress(minute, "22:00", "01:00") for minute in minutes]
        assert all(b >= a for a, b in zip(values, values[1:]))
        assert values[0] == 0.0
        assert values[-1] == 1.0

    def test_accepts_datetime(self):
        now = datetime(2026, 4, 13, 8, 15)
        assert progress(now, "08:00", "09:00") == pytest.approx(0.25)


class TestIsWithin:
    """Test half-open window membership."""

    def test_start_inclusive_end_exclusive(self):
        assert is_within("08:00", "08:00", "09:00")
        assert is_within("08:59:59", "08:00", "09:00")
        assert not is_within("09:00", "08:00", "09:00")

    def test_across_midnight(self):
        assert is_within("00:30", "23:00", "01:00")
        assert not is_within("22:59", "23:00", "01:00")


class TestCountdown:
    """Test time remaining until the boarding deadline."""

    def test_thirty_minutes_left(self):
        assert countdown("18:00:00", "18:30") == CountdownState(0, 30, 0)

    def test_hours_minutes_seconds(self):
        assert countdown("10:15:30", "18:30") == CountdownState(8, 14, 30)

    def test_exactly_at_deadline_is_elapsed(self):
        assert countdown("18:30:00", "18:30") is ELAPSED

    def test_after_deadline(self):
        state = countdown("18:30:01", "18:30")
        assert state.elapsed
        assert state.total_seconds == 0

    def test_subsecond_reading_truncates(self):
        now = time(17, 59, 59, 500000)
        assert countdown(now, "18:30") == CountdownState(0, 30, 1)

    def test_idempotent(self):
        assert countdown("12:00", "18:30") == countdown("12:00", "18:30")

    def test_non_increasing_as_time_passes(self):
        readings = [f"18:{m:02d}:{s:02d}" for m in range(25, 32) for s in (0, 30)]
        totals = [countdown(now, "18:30").total_seconds for now in readings]
        assert all(b <= a for a, b in zip(totals, totals[1:]))


class TestBoardingCountdown:
    """Test the latched countdown."""

    def test_counts_down_then_latches(self):
        boarding = BoardingCountdown("18:30")
        assert boarding.tick("18:00") == CountdownState(0, 30, 0)
        assert not boarding.elapsed

        assert boarding.tick("18:31").elapsed
        assert boarding.elapsed

        # Past midnight the raw countdown would restart; the latch holds
        assert boarding.tick("00:05") is ELAPSED

    def test_reports_deadline_once(self, caplog):
        boarding = BoardingCountdown("18:30")
        with caplog.at_level("INFO", logger="shoreplan.calculators.duration"):
            boarding.tick("18:30")
            boarding.tick("18:45")
        reached = [r for r in caplog.records if "reached" in r.getMessage()]
        assert len(reached) == 1

    def test_invalid_deadline(self):
        with pytest.raises(ValidationError):
            BoardingCountdown("25:00")
