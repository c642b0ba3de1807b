"""
Live excursion status command.

This module implements the 'shoreplan status' command: boarding countdown,
the itinerary with waiting gaps and progress, and distance and bearing to
each activity when a position is given.
"""

import argparse
import logging
import sys
from typing import List

import shoreplan
from shoreplan.cli.cli_utils import (
    CLIError,
    _format_error_message,
    _setup_cli_logging,
    _validate_config_file,
)
from shoreplan.core.excursion import ShoreExcursion
from shoreplan.utils.coordinates import format_position_string
from shoreplan.utils.output_formatting import (
    _format_activity_duration,
    _format_countdown,
    _format_gap,
    _format_progress_bar,
)
from shoreplan.validation.exceptions import ShorePlanError

logger = logging.getLogger(__name__)


def _render_status(excursion: ShoreExcursion) -> List[str]:
    """Build the status report lines for an excursion."""
    config = excursion.config
    position = excursion.location.current

    title = config.excursion_name
    if config.date:
        title = f"{title} ({config.date})"
    countdown = _format_countdown(excursion.countdown())
    lines = [
        title,
        "=" * len(title),
        f"All aboard {config.boarding_time}: {countdown}",
    ]
    if position is None:
        lines.append("Position: unknown")
    else:
        lines.append(f"Position: {format_position_string(position.lat, position.lng)}")
    lines.append("")

    for facts in excursion.timeline():
        entry = facts.entry
        activity = entry.activity
        if entry.show_gap:
            lines.append(
                f"    {_format_gap(entry.gap_before_minutes)} transfer / wait "
                f"{_format_progress_bar(entry.gap_progress, width=10)}"
            )

        marker = "x" if activity.completed else " "
        line = (
            f"[{marker}] {activity.start_time}-{activity.end_time} "
            f"{activity.title or activity.id} "
            f"({_format_activity_duration(entry.duration_minutes)}) "
            f"{_format_progress_bar(entry.progress, width=10)}"
        )
        if activity.critical:
            line += " CRITICAL"
        if facts.distance_text is not None:
            line += f" | {facts.distance_text} @ {facts.bearing_degrees:.0f}°"
        lines.append(line)

    return lines


def main(args: argparse.Namespace) -> None:
    """
    Main entry point for the status command.

    Parameters
    ----------
    args : argparse.Namespace
        Parsed command line arguments containing config_file, at, position
        and storage_dir.
    """
    try:
        _setup_cli_logging(
            verbose=getattr(args, "verbose", False), quiet=getattr(args, "quiet", False)
        )
        config_file = _validate_config_file(args.config_file)

        excursion = shoreplan.load(
            config_file,
            at=getattr(args, "at", None),
            position=getattr(args, "position", None),
            storage_dir=getattr(args, "storage_dir", None),
        )
        for line in _render_status(excursion):
            logger.info(line)

    except (CLIError, ShorePlanError) as e:
        _format_error_message(
            "status",
            e,
            ["Check the itinerary file with: shoreplan validate -c <file>"],
        )
        sys.exit(1)

    except KeyboardInterrupt:
        logger.info("\n\n⚠️ Operation cancelled by user.")
        sys.exit(1)

    except Exception as e:
        _format_error_message("status", e)
        sys.exit(1)
