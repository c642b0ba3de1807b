"""
Schema module for shoreplan.

Provides the Pydantic models describing excursion configuration files and
the values exchanged between the engine and its collaborators.
"""

from .enums import ActivityTypeEnum
from .excursion import ExcursionConfig
from .models import (
    Activity,
    ActivityMarker,
    Coordinates,
    MapPointSet,
    StaticWaypoint,
    Waypoint,
)

__all__ = [
    "Activity",
    "ActivityMarker",
    "ActivityTypeEnum",
    "Coordinates",
    "ExcursionConfig",
    "MapPointSet",
    "StaticWaypoint",
    "Waypoint",
]
