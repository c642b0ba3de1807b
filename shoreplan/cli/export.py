"""
Itinerary export command.

Implements 'shoreplan export': prints the itinerary table as tab-separated
rows followed by the planned budget, for document collaborators to lay out.
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
from shoreplan.validation.exceptions import ShorePlanError

logger = logging.getLogger(__name__)


def main(args: argparse.Namespace) -> None:
    """Main entry point for the export command."""
    try:
        _setup_cli_logging(
            verbose=getattr(args, "verbose", False), quiet=getattr(args, "quiet", False)
        )
        config_file = _validate_config_file(args.config_file)

        rows, budget = shoreplan.export(config_file)
        for row in rows:
            # Keep one line per row; multi-line details are joined
            logger.info("\t".join(cell.replace("\n", " / ") for cell in row))

        logger.info("")
        for title, price in budget.items:
            logger.info(f"{title}\t{price:g}€")
        logger.info(f"Total\t{budget.total_eur:g}€")

    except (CLIError, ShorePlanError) as e:
        _format_error_message("export", e)
        sys.exit(1)

    except KeyboardInterrupt:
        logger.info("\n\n⚠️ Operation cancelled by user.")
        sys.exit(1)
