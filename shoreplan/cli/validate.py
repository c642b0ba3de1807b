"""
Itinerary validation command.

Implements 'shoreplan validate': load the itinerary YAML, validate it
against the schema and report the outcome.
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

logger = logging.getLogger(__name__)


def main(args: argparse.Namespace) -> None:
    """
    Main entry point for the validate command.

    Exits with status 1 when the itinerary is invalid.
    """
    try:
        _setup_cli_logging(
            verbose=getattr(args, "verbose", False), quiet=getattr(args, "quiet", False)
        )
        config_file = _validate_config_file(args.config_file)

        if not shoreplan.validate(config_file):
            logger.error("❌ Validation failed")
            sys.exit(1)

    except CLIError as e:
        _format_error_message("validate", e)
        sys.exit(1)

    except KeyboardInterrupt:
        logger.info("\n\n⚠️ Operation cancelled by user.")
        sys.exit(1)
