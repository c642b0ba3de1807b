"""
shoreplan CLI - git-style subcommands for a day ashore.

This module provides the main command-line interface: a live status view of
the itinerary, custom waypoint management, itinerary validation and export
feeds for document collaborators.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from shoreplan._version import __version__


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-c",
        "--config-file",
        required=True,
        type=Path,
        help="YAML itinerary configuration file",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose logging"
    )
    parser.add_argument(
        "--quiet", "-q", action="store_true", help="Only show warnings and errors"
    )


def _add_storage_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--storage-dir",
        type=Path,
        help="Directory for saved waypoints (default: storage_dir from config)",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shoreplan",
        description="Single-day Shore Excursion Companion",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  shoreplan status -c marseille.yaml
  shoreplan status -c marseille.yaml --at 10:15 --position "43.2951, 5.3744"
  shoreplan waypoints -c marseille.yaml add --name "Café" --position "43.296, 5.370"
  shoreplan waypoints -c marseille.yaml list
  shoreplan validate -c marseille.yaml
  shoreplan export -c marseille.yaml

For detailed help on a subcommand:
  shoreplan <subcommand> --help
        """,
    )

    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )

    subparsers = parser.add_subparsers(
        dest="subcommand",
        title="Available commands",
        description="Choose a subcommand to run",
        help="Available subcommands",
    )

    # --- 1. Status Subcommand ---
    status_parser = subparsers.add_parser(
        "status", help="Show boarding countdown and live itinerary"
    )
    _add_common_arguments(status_parser)
    _add_storage_argument(status_parser)
    status_parser.add_argument(
        "--at",
        help="Evaluate at this local time (HH:MM or HH:MM:SS) instead of now",
    )
    status_parser.add_argument(
        "--position",
        help='Current position as "lat, lng" (default: unknown)',
    )

    # --- 2. Waypoints Subcommand ---
    waypoints_parser = subparsers.add_parser(
        "waypoints", help="List, add or delete custom waypoints"
    )
    _add_common_arguments(waypoints_parser)
    _add_storage_argument(waypoints_parser)
    waypoint_actions = waypoints_parser.add_subparsers(
        dest="action", title="Waypoint actions"
    )
    waypoint_actions.add_parser("list", help="List saved waypoints")

    add_parser = waypoint_actions.add_parser("add", help="Save a new waypoint")
    add_parser.add_argument("--name", required=True, help="Waypoint name")
    add_parser.add_argument(
        "--position", required=True, help='Waypoint position as "lat, lng"'
    )
    add_parser.add_argument("--description", help="Optional description")

    delete_parser = waypoint_actions.add_parser("delete", help="Delete a waypoint")
    delete_parser.add_argument("waypoint_id", help="Id of the waypoint to delete")

    # --- 3. Validate Subcommand ---
    validate_parser = subparsers.add_parser(
        "validate", help="Validate an itinerary configuration file"
    )
    _add_common_arguments(validate_parser)

    # --- 4. Export Subcommand ---
    export_parser = subparsers.add_parser(
        "export", help="Print itinerary rows and budget for document export"
    )
    _add_common_arguments(export_parser)

    return parser


def main(argv: Optional[List[str]] = None):
    """Main CLI entry point following git-style subcommand pattern."""
    parser = build_parser()
    args = parser.parse_args(argv)

    # Handle case where no subcommand is given
    if not args.subcommand:
        parser.print_help()
        sys.exit(1)

    try:
        # Import only the module of the command being run
        if args.subcommand == "status":
            from shoreplan.cli.status import main as status_main

            status_main(args)
        elif args.subcommand == "waypoints":
            from shoreplan.cli.waypoints import main as waypoints_main

            waypoints_main(args)
        elif args.subcommand == "validate":
            from shoreplan.cli.validate import main as validate_main

            validate_main(args)
        elif args.subcommand == "export":
            from shoreplan.cli.export import main as export_main

            export_main(args)
        else:
            print(f"Subcommand '{args.subcommand}' not yet implemented.")
            sys.exit(1)

    except KeyboardInterrupt:
        print("\n\n⚠️ Operation cancelled by user.")
        sys.exit(1)


if __name__ == "__main__":
    main()
