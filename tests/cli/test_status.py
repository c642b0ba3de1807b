"""
Test suite for the shoreplan status command.
"""

import argparse
import logging
from pathlib import Path
from unittest.mock import patch

import pytest

import shoreplan
from shoreplan.cli.status import _render_status, main


def _args(config_file, **overrides):
    values = {
        "config_file": Path(config_file),
        "at": None,
        "position": None,
        "storage_dir": None,
        "verbose": False,
        "quiet": False,
    }
    values.update(overrides)
    return argparse.Namespace(**values)


class TestRenderStatus:
    """Test the status report lines."""

    def test_morning_with_position(self, itinerary_file):
        excursion = shoreplan.load(itinerary_file, at="10:15", position="43.2951, 5.3744")
        lines = _render_status(excursion)

        assert lines[0] == "Marseille port call (2026-04-13)"
        assert lines[2] == "All aboard 18:30: 08h 15m 00s"
        assert lines[3] == "Position: 43.2951°N, 5.3744°E"
        assert "    30min transfer / wait [##########]" in lines
        assert any(
            line.startswith("[ ] 10:00-11:30 Notre-Dame de la Garde (1h 30m)")
            and " km @ " in line
            for line in lines
        )
        assert lines[-1].startswith("[ ] 18:00-18:30 Back on board (30 min)")
        assert "CRITICAL" in lines[-1]

    def test_unknown_position(self, itinerary_file):
        excursion = shoreplan.load(itinerary_file, at="19:00")
        lines = _render_status(excursion)

        assert lines[2] == "All aboard 18:30: ON BOARD!"
        assert lines[3] == "Position: unknown"
        assert not any(" @ " in line for line in lines)


class TestStatusCommand:
    """Test the command entry point."""

    def test_main_logs_report(self, itinerary_file, caplog):
        caplog.set_level(logging.INFO, logger="shoreplan")
        with patch("shoreplan.cli.status._setup_cli_logging"):
            main(_args(itinerary_file, at="18:00"))

        assert "All aboard 18:30: 00h 30m 00s" in caplog.text

    def test_main_passes_options_to_api(self, itinerary_file, tmp_path):
        args = _args(
            itinerary_file,
            at="10:15",
            position="43.2951, 5.3744",
            storage_dir=tmp_path / "store",
        )
        with (
            patch("shoreplan.load") as mock_load,
            patch("shoreplan.cli.status._setup_cli_logging"),
            patch("shoreplan.cli.status._render_status", return_value=[]),
        ):
            main(args)

        mock_load.assert_called_once()
        kwargs = mock_load.call_args.kwargs
        assert kwargs["at"] == "10:15"
        assert kwargs["position"] == "43.2951, 5.3744"
        assert kwargs["storage_dir"] == tmp_path / "store"

    def test_missing_file_exits(self, tmp_path):
        with patch("shoreplan.cli.status._setup_cli_logging"):
            with pytest.raises(SystemExit) as exc_info:
                main(_args(tmp_path / "missing.yaml"))
        assert exc_info.value.code == 1

    def test_invalid_position_exits(self, itinerary_file):
        with patch("shoreplan.cli.status._setup_cli_logging"):
            with pytest.raises(SystemExit) as exc_info:
                main(_args(itinerary_file, position="north of here"))
        assert exc_info.value.code == 1
