"""
Enumeration types for excursion configuration models.
"""

from enum import Enum


class ActivityTypeEnum(str, Enum):
    """
    Enumeration of itinerary activity kinds.

    Only this fixed set of kinds exists; display collaborators map each to
    an icon or colour.
    """

    ARRIVAL = "arrival"
    TRANSPORT = "transport"
    VISIT = "visit"
    WALKING = "walking"
    SHOPPING = "shopping"
    LIMIT = "limit"  # Hard time limit, e.g. all-aboard
    DEPARTURE = "departure"
