"""
Main excursion configuration model.

Defines the root ExcursionConfig class that represents the complete
itinerary configuration file: excursion metadata, the ordered activity
list and the static reference data shown on the map.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from shoreplan.schema.models import Activity, Coordinates, StaticWaypoint
from shoreplan.utils.defaults import DEFAULT_BOARDING_TIME, DEFAULT_STORAGE_DIR
from shoreplan.validation.validators import validate_time_string, validate_unique_ids


class ExcursionConfig(BaseModel):
    """
    Root configuration model for a shore excursion.

    Attributes
    ----------
    excursion_name : str
        Name of the excursion, e.g. the port of call.
    date : Optional[str]
        Operating date, display only.
    port : Optional[str]
        Port of call name.
    boarding_time : str
        All-aboard deadline as ``HH:MM``.
    activities : list[Activity]
        Itinerary in visitation order. Never re-sorted.
    static_waypoints : list[StaticWaypoint]
        Reference points of interest.
    track : list[Coordinates]
        Suggested walking route polyline.
    storage_dir : str
        Directory for durable user data.
    """

    excursion_name: str
    date: Optional[str] = None
    port: Optional[str] = None
    boarding_time: str = DEFAULT_BOARDING_TIME

    activities: list[Activity] = Field(
        default_factory=list, description="Itinerary in visitation order"
    )
    static_waypoints: list[StaticWaypoint] = Field(
        default_factory=list, description="Reference points of interest"
    )
    track: list[Coordinates] = Field(
        default_factory=list, description="Walking route polyline"
    )

    storage_dir: str = DEFAULT_STORAGE_DIR

    model_config = ConfigDict(extra="allow")

    @field_validator("boarding_time", mode="before")
    @classmethod
    def validate_boarding_time(cls, v):
        return validate_time_string(v, "boarding_time")

    @field_validator("activities")
    @classmethod
    def validate_activity_ids(cls, v):
        validate_unique_ids(v, "activity")
        return v
