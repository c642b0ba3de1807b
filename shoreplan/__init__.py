"""
ShorePlan: Single-day Shore Excursion Companion

This package tracks a day ashore: a fixed sequence of scheduled activities
against the clock and the user's live position, plus a persisted set of
personal waypoints.

Notebook-Friendly API
=====================

For interactive use in Jupyter notebooks, use these simplified functions
that mirror the CLI commands:

    import shoreplan

    # Countdown, timeline and distances (mirrors: shoreplan status)
    report = shoreplan.status("marseille.yaml", at="10:15", position="43.2951, 5.3744")

    # Validate an itinerary (mirrors: shoreplan validate)
    is_valid = shoreplan.validate("marseille.yaml")

    # Manage custom waypoints (mirrors: shoreplan waypoints ...)
    wpt = shoreplan.add_waypoint("marseille.yaml", "Café", "43.2960, 5.3700")
    shoreplan.delete_waypoint("marseille.yaml", wpt.id)

    # Itinerary rows and budget for exporters (mirrors: shoreplan export)
    rows, budget = shoreplan.export("marseille.yaml")

For more advanced usage, import the underlying classes directly:

    from shoreplan.core.excursion import ShoreExcursion
    from shoreplan.calculators.distance import distance_and_bearing
    from shoreplan.data.waypoints import WaypointStore
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Optional, Union

from shoreplan._version import __version__
from shoreplan.calculators.duration import to_minutes_of_day
from shoreplan.core.excursion import ShoreExcursion
from shoreplan.core.ports import Clock, FixedClock, LocationFeed, SystemClock
from shoreplan.output.export import BudgetSummary, budget_summary, itinerary_rows
from shoreplan.schema.models import Waypoint
from shoreplan.utils.config import load_excursion_config
from shoreplan.validation.exceptions import ShorePlanError

logger = logging.getLogger(__name__)


def _clock_at(at: Optional[str]) -> Clock:
    """
    Internal helper returning a clock frozen at ``at`` on today's date, or
    the system clock when no time is given.
    """
    if at is None:
        return SystemClock()
    minutes = to_minutes_of_day(at)
    total_seconds = int(round(minutes * 60))
    today = datetime.now().replace(hour=0, minute=0, second=0, microsecond=0)
    return FixedClock(
        today.replace(
            hour=total_seconds // 3600,
            minute=(total_seconds % 3600) // 60,
            second=total_seconds % 60,
        )
    )


def load(
    config_file: Union[str, Path],
    at: Optional[str] = None,
    position: Optional[Any] = None,
    storage_dir: Optional[Union[str, Path]] = None,
) -> ShoreExcursion:
    """
    Build a ShoreExcursion from an itinerary file.

    Parameters
    ----------
    config_file : str or Path
        Itinerary YAML file.
    at : str, optional
        Evaluate at this ``HH:MM[:SS]`` time instead of the wall clock.
    position : Any, optional
        Current position, e.g. ``"43.29, 5.37"`` or ``(43.29, 5.37)``.
    storage_dir : str or Path, optional
        Override the configured waypoint storage directory.

    Returns
    -------
    ShoreExcursion
        Engine instance ready for queries.
    """
    config = load_excursion_config(config_file)
    if storage_dir is not None:
        config.storage_dir = str(Path(storage_dir).resolve())
    return ShoreExcursion(
        config, clock=_clock_at(at), location=LocationFeed(position)
    )


def status(
    config_file: Union[str, Path],
    at: Optional[str] = None,
    position: Optional[Any] = None,
    storage_dir: Optional[Union[str, Path]] = None,
) -> dict[str, Any]:
    """
    Current excursion status (mirrors: shoreplan status).

    Returns
    -------
    dict
        Countdown, current activity and per-activity facts, see
        ``ShoreExcursion.status``.

    Examples
    --------
    >>> import shoreplan
    >>> report = shoreplan.status("marseille.yaml", at="18:00")
    >>> report["countdown"]
    '00h 30m 00s'
    """
    return load(config_file, at=at, position=position, storage_dir=storage_dir).status()


def validate(config_file: Union[str, Path]) -> bool:
    """
    Validate an itinerary file (mirrors: shoreplan validate).

    Returns
    -------
    bool
        True if the file loads and validates, False otherwise. Errors are
        logged.
    """
    try:
        config = load_excursion_config(config_file)
    except ShorePlanError as e:
        logger.error(f"❌ {e}")
        return False

    logger.info(
        f"✅ {config.excursion_name}: {len(config.activities)} activities, "
        f"{len(config.static_waypoints)} reference waypoints, "
        f"{len(config.track)} track points"
    )
    return True


def list_waypoints(
    config_file: Union[str, Path], storage_dir: Optional[Union[str, Path]] = None
) -> list[Waypoint]:
    """Custom waypoints in insertion order (mirrors: shoreplan waypoints list)."""
    return load(config_file, storage_dir=storage_dir).waypoints.list()


def add_waypoint(
    config_file: Union[str, Path],
    name: str,
    position: Any,
    description: Optional[str] = None,
    storage_dir: Optional[Union[str, Path]] = None,
) -> Waypoint:
    """Create and persist a custom waypoint (mirrors: shoreplan waypoints add)."""
    excursion = load(config_file, storage_dir=storage_dir)
    return excursion.waypoints.create(name, position, description)


def delete_waypoint(
    config_file: Union[str, Path],
    waypoint_id: str,
    storage_dir: Optional[Union[str, Path]] = None,
) -> bool:
    """
    Delete a custom waypoint (mirrors: shoreplan waypoints delete).

    Returns
    -------
    bool
        True if a waypoint was removed, False if the id was unknown.
    """
    store = load(config_file, storage_dir=storage_dir).waypoints
    existed = waypoint_id in store
    store.delete(waypoint_id)
    return existed


def export(config_file: Union[str, Path]) -> tuple[list[list[str]], BudgetSummary]:
    """
    Itinerary table rows and budget for exporters (mirrors: shoreplan export).
    """
    config = load_excursion_config(config_file)
    return itinerary_rows(config.activities), budget_summary(config.activities)


__all__ = [
    "__version__",
    "add_waypoint",
    "delete_waypoint",
    "export",
    "list_waypoints",
    "load",
    "status",
    "validate",
]
