"""
Common utilities for CLI commands.

This module provides shared functionality across CLI modules including
logging setup, config file validation and error message formatting.
"""

import logging
import sys
from pathlib import Path
from typing import List, Optional

logger = logging.getLogger(__name__)


class CLIError(Exception):
    """Custom exception for CLI-related errors."""

    pass


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """
    Setup logging configuration for CLI commands.

    Parameters
    ----------
    verbose : bool, optional
        Enable verbose output. Default is False.
    quiet : bool, optional
        Suppress non-essential output. Default is False.
    """
    if quiet:
        level = logging.WARNING
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO

    logging.basicConfig(level=level, format="%(message)s", stream=sys.stdout)


def _setup_cli_logging(verbose: bool = False, quiet: bool = False) -> None:
    """
    Logging setup used by every subcommand.

    Parameters
    ----------
    verbose : bool
        Enable verbose output
    quiet : bool
        Suppress non-essential output
    """
    setup_logging(verbose, quiet)

    if verbose:
        logging.getLogger("shoreplan").setLevel(logging.DEBUG)


def _validate_config_file(file_path: Path) -> Path:
    """
    Validate that the itinerary file exists and is not empty.

    Raises
    ------
    CLIError
        If the file is missing, not a file or empty.
    """
    resolved_path = Path(file_path).resolve()

    if not resolved_path.exists():
        raise CLIError(f"Itinerary file not found: {resolved_path}")

    if not resolved_path.is_file():
        raise CLIError(f"Path is not a file: {resolved_path}")

    if not resolved_path.stat().st_size:
        raise CLIError(f"Itinerary file is empty: {resolved_path}")

    return resolved_path


def _format_error_message(
    operation: str, error: Exception, suggestions: Optional[List[str]] = None
) -> None:
    """
    Consistent error reporting with actionable suggestions.

    Parameters
    ----------
    operation : str
        Name of the operation that failed
    error : Exception
        The exception that occurred
    suggestions : List[str], optional
        List of suggested actions for the user
    """
    logger.error("")
    logger.error("=" * 60)
    logger.error(f"{operation} failed")
    logger.error("=" * 60)
    logger.error(f"❌ Error: {error}")

    if suggestions:
        logger.error("")
        logger.error("💡 Suggestions:")
        for suggestion in suggestions:
            logger.error(f"  • {suggestion}")

    logger.error("")

