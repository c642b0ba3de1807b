"""
Feeds for document, audio and chat-share collaborators.

The engine does not know about PDF, speech or messaging formats. It hands
these collaborators plain rows and strings built from the activity list and
the computed durations and gaps.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional

from shoreplan.calculators.scheduler import ScheduleEntry
from shoreplan.schema.models import Activity, Coordinates
from shoreplan.utils.defaults import MAPS_DIRECTIONS_URL, MAPS_QUERY_URL
from shoreplan.utils.output_formatting import _format_activity_duration, _format_gap

logger = logging.getLogger(__name__)

ITINERARY_HEADER = ["Time", "Activity", "Location", "Details", "Cost"]


@dataclass(frozen=True)
class BudgetSummary:
    """Total planned spend and the paid activities behind it."""

    total_eur: float
    items: list[tuple[str, float]] = field(default_factory=list)


def _format_price(price_eur: float) -> str:
    if price_eur <= 0:
        return "-"
    if float(price_eur).is_integer():
        return f"{int(price_eur)}€"
    return f"{price_eur:.2f}€"


def itinerary_rows(activities: Iterable[Activity]) -> list[list[str]]:
    """
    Table rows for a printable itinerary, header first.

    Each row holds the time window, title, location, description (plus a
    "Note:" line for key details) and the price or "-".
    """
    rows = [list(ITINERARY_HEADER)]
    for activity in activities:
        details = activity.description
        if activity.key_details:
            details = f"{details}\nNote: {activity.key_details}"
        rows.append(
            [
                f"{activity.start_time} - {activity.end_time}",
                activity.title,
                activity.location_name,
                details,
                _format_price(activity.price_eur),
            ]
        )
    return rows


def budget_summary(activities: Iterable[Activity]) -> BudgetSummary:
    """Sum of activity prices with the paid items in declared order."""
    items = [
        (activity.title or activity.id, activity.price_eur)
        for activity in activities
        if activity.price_eur > 0
    ]
    return BudgetSummary(total_eur=sum(price for _, price in items), items=items)


def directions_url(coords: Coordinates) -> str:
    """Walking directions link for an external maps app."""
    return MAPS_DIRECTIONS_URL.format(lat=coords.lat, lng=coords.lng)


def share_location_message(
    position: Optional[Coordinates], place: str = "the port of call"
) -> str:
    """
    Help message with a maps link to the current position.

    Falls back to a "GPS unavailable" note when no fix is known.
    """
    if position is None:
        location = "GPS unavailable"
    else:
        location = MAPS_QUERY_URL.format(lat=position.lat, lng=position.lng)
    return f"SOS! I need help in {place}. Location: {location}"


def timeline_text(entries: Iterable[ScheduleEntry]) -> list[str]:
    """
    Plain-text itinerary lines with durations and waiting gaps, for audio
    and chat collaborators.
    """
    lines = []
    for entry in entries:
        activity = entry.activity
        if entry.show_gap:
            wait = _format_gap(entry.gap_before_minutes)
            lines.append(f"  ... {wait} transfer / wait")
        marker = "x" if activity.completed else " "
        critical = " !" if activity.critical else ""
        lines.append(
            f"[{marker}] {activity.start_time}-{activity.end_time} "
            f"{activity.title or activity.id} "
            f"({_format_activity_duration(entry.duration_minutes)}){critical}"
        )
    return lines
