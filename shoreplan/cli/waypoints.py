"""
Custom waypoint management command.

Implements 'shoreplan waypoints list|add|delete' on the persisted waypoint
store of an itinerary.
"""

import argparse
import logging
import sys

import shoreplan
from shoreplan.cli.cli_utils import (
    CLIError,
    _format_error_message,
    _setup_cli_logging,
    _validate_config_file,
)
from shoreplan.utils.coordinates import format_position_string
from shoreplan.validation.exceptions import ShorePlanError

logger = logging.getLogger(__name__)


def _list(config_file, storage_dir) -> None:
    waypoints = shoreplan.list_waypoints(config_file, storage_dir=storage_dir)
    if not waypoints:
        logger.info("No saved waypoints")
        return

    for waypoint in waypoints:
        position = format_position_string(waypoint.coords.lat, waypoint.coords.lng)
        line = f"{waypoint.id}  {waypoint.name}  {position}"
        if waypoint.description:
            line += f"  - {waypoint.description}"
        logger.info(line)


def main(args: argparse.Namespace) -> None:
    """
    Main entry point for the waypoints command.

    Parameters
    ----------
    args : argparse.Namespace
        Parsed arguments with config_file, storage_dir and the chosen action.
    """
    try:
        _setup_cli_logging(
            verbose=getattr(args, "verbose", False), quiet=getattr(args, "quiet", False)
        )
        config_file = _validate_config_file(args.config_file)
        storage_dir = getattr(args, "storage_dir", None)
        action = getattr(args, "action", None) or "list"

        if action == "list":
            _list(config_file, storage_dir)
        elif action == "add":
            waypoint = shoreplan.add_waypoint(
                config_file,
                args.name,
                args.position,
                description=getattr(args, "description", None),
                storage_dir=storage_dir,
            )
            logger.info(waypoint.id)
        elif action == "delete":
            if shoreplan.delete_waypoint(
                config_file, args.waypoint_id, storage_dir=storage_dir
            ):
                logger.info(f"✅ Deleted waypoint {args.waypoint_id}")
            else:
                logger.warning(f"⚠️ No waypoint with id {args.waypoint_id}")
        else:
            raise CLIError(f"Unknown waypoint action: {action}")

    except (CLIError, ShorePlanError) as e:
        _format_error_message("waypoints", e)
        sys.exit(1)

    except KeyboardInterrupt:
        logger.info("\n\n⚠️ Operation cancelled by user.")
        sys.exit(1)
