"""
Output formatting utilities.

This module provides internal utility functions for turning computed
minutes and countdown states into the short strings shown by the display,
export and CLI layers.
"""

import logging

from shoreplan.calculators.duration import CountdownState
from shoreplan.utils.defaults import BOARDING_ELAPSED_TEXT

logger = logging.getLogger(__name__)


def _format_activity_duration(minutes: int) -> str:
    """
    Convert an activity length to human-readable text.

    Examples
    --------
    >>> _format_activity_duration(90)
    '1h 30m'
    >>> _format_activity_duration(120)
    '2h'
    >>> _format_activity_duration(45)
    '45 min'
    """
    hours, remaining = divmod(int(minutes), 60)
    if hours > 0 and remaining > 0:
        return f"{hours}h {remaining}m"
    if hours > 0:
        return f"{hours}h"
    return f"{remaining} min"


def _format_gap(minutes: int) -> str:
    """
    Convert a waiting gap to human-readable text.

    Examples
    --------
    >>> _format_gap(90)
    '1h 30min'
    >>> _format_gap(30)
    '30min'
    """
    hours, remaining = divmod(int(minutes), 60)
    if hours > 0 and remaining > 0:
        return f"{hours}h {remaining}min"
    if hours > 0:
        return f"{hours}h"
    return f"{remaining}min"


def _format_countdown(state: CountdownState) -> str:
    """
    Render a countdown as ``HHh MMm SSs``, or the on-board text once elapsed.

    Examples
    --------
    >>> _format_countdown(CountdownState(0, 30, 0))
    '00h 30m 00s'
    """
    if state.elapsed:
        return BOARDING_ELAPSED_TEXT
    return f"{state.hours:02d}h {state.minutes:02d}m {state.seconds:02d}s"


def _format_progress_bar(fraction: float, width: int = 20) -> str:
    """
    Text progress bar for a fraction in [0, 1].

    Examples
    --------
    >>> _format_progress_bar(0.5, width=10)
    '[#####-----]'
    """
    fraction = min(1.0, max(0.0, fraction))
    filled = int(round(fraction * width))
    return "[" + "#" * filled + "-" * (width - filled) + "]"
