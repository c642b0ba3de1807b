"""
Tests for display formatting helpers.
"""

import pytest

from shoreplan.calculators.duration import ELAPSED, CountdownState
from shoreplan.utils.output_formatting import (
    _format_activity_duration,
    _format_countdown,
    _format_gap,
    _format_progress_bar,
)


class TestFormatActivityDuration:
    """Test activity length text."""

    @pytest.mark.parametrize(
        "minutes,expected",
        [(90, "1h 30m"), (120, "2h"), (45, "45 min"), (150, "2h 30m"), (1, "1 min")],
    )
    def test_format(self, minutes, expected):
        assert _format_activity_duration(minutes) == expected


class TestFormatGap:
    """Test waiting gap text."""

    @pytest.mark.parametrize(
        "minutes,expected", [(90, "1h 30min"), (60, "1h"), (30, "30min"), (300, "5h")]
    )
    def test_format(self, minutes, expected):
        assert _format_gap(minutes) == expected


class TestFormatCountdown:
    """Test countdown text."""

    def test_padded(self):
        assert _format_countdown(CountdownState(0, 30, 0)) == "00h 30m 00s"
        assert _format_countdown(CountdownState(8, 5, 9)) == "08h 05m 09s"

    def test_elapsed(self):
        assert _format_countdown(ELAPSED) == "ON BOARD!"


class TestFormatProgressBar:
    """Test the text progress bar."""

    def test_half(self):
        assert _format_progress_bar(0.5, width=10) == "[#####-----]"

    def test_clamped(self):
        assert _format_progress_bar(-1, width=4) == "[----]"
        assert _format_progress_bar(2, width=4) == "[####]"
