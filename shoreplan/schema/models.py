"""
Data models for the shore excursion engine.

Provides the geographic value type, scheduled activities, user waypoints
and the static reference data supplied by configuration.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from shoreplan.schema.enums import ActivityTypeEnum
from shoreplan.utils.defaults import CRITICAL_NOTE_MARKER
from shoreplan.validation.validators import (
    validate_latitude,
    validate_longitude,
    validate_non_empty_text,
    validate_non_negative_number,
    validate_time_string,
)


class Coordinates(BaseModel):
    """
    Immutable latitude/longitude pair.

    Besides explicit ``lat``/``lng`` fields, accepts ``latitude``/``longitude``
    keys, a ``"lat, lng"`` string or a ``(lat, lng)`` pair on input.

    Attributes
    ----------
    lat : float
        Latitude in decimal degrees (-90 to 90).
    lng : float
        Longitude in decimal degrees (-180 to 180).
    """

    model_config = ConfigDict(frozen=True)

    lat: float
    lng: float

    @model_validator(mode="before")
    @classmethod
    def unify_coordinates(cls, data: Any) -> Any:
        """
        Unify different coordinate input formats.

        Parameters
        ----------
        data : Any
            Raw input: mapping, "lat, lng" string or 2-sequence.

        Returns
        -------
        Any
            Mapping with ``lat`` and ``lng`` keys.

        Raises
        ------
        ValueError
            If the input cannot be interpreted as a coordinate pair.
        """
        if isinstance(data, str):
            try:
                lat, lng = map(float, data.split(","))
            except ValueError as exc:
                msg = f"Invalid position string: '{data}'. Expected 'lat, lng'"
                raise ValueError(msg) from exc
            return {"lat": lat, "lng": lng}

        if isinstance(data, (tuple, list)):
            if len(data) != 2:
                msg = f"Expected a (lat, lng) pair, got {len(data)} values"
                raise ValueError(msg)
            return {"lat": data[0], "lng": data[1]}

        if isinstance(data, dict):
            data = dict(data)
            if "latitude" in data and "lat" not in data:
                data["lat"] = data.pop("latitude")
            if "longitude" in data and "lng" not in data:
                data["lng"] = data.pop("longitude")

            has_lat = "lat" in data
            has_lng = "lng" in data
            if has_lat != has_lng:
                msg = "Both latitude and longitude must be provided together"
                raise ValueError(msg)
        return data

    @field_validator("lat")
    @classmethod
    def validate_lat(cls, v):
        return validate_latitude(v)

    @field_validator("lng")
    @classmethod
    def validate_lng(cls, v):
        return validate_longitude(v)

    def as_tuple(self) -> tuple[float, float]:
        return (self.lat, self.lng)


class Activity(BaseModel):
    """
    One scheduled event of the day's itinerary.

    The declared order of activities is the schedule order. ``completed`` is
    the only field the engine mutates, through the schedule's toggle.

    Attributes
    ----------
    id : str
        Unique, stable identifier.
    title : str
        Display title.
    type : ActivityTypeEnum
        Kind of activity.
    start_time, end_time : str
        Local ``HH:MM`` times. ``end_time`` before ``start_time`` means the
        activity crosses midnight.
    location_name : str
        Free-text place name.
    coords : Optional[Coordinates]
        Location, absent for non-geolocatable blocks such as free time.
    price_eur : float
        Non-negative cost in euros.
    completed : bool
        Whether the user has ticked the activity off.
    critical : bool
        Hard deadline marker, carried through unchanged.
    """

    id: str
    title: str = ""
    type: ActivityTypeEnum = ActivityTypeEnum.VISIT
    start_time: str
    end_time: str
    location_name: str = ""
    coords: Optional[Coordinates] = None
    description: str = ""
    key_details: Optional[str] = None
    price_eur: float = 0.0
    completed: bool = False
    critical: bool = False
    audio_guide_text: Optional[str] = None
    image: Optional[str] = None
    notes: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def flag_critical_notes(cls, data: Any) -> Any:
        """Treat ``notes: CRITICAL`` as the critical flag."""
        if isinstance(data, dict) and data.get("notes") == CRITICAL_NOTE_MARKER:
            data = {**data, "critical": True}
        return data

    @field_validator("id")
    @classmethod
    def validate_id(cls, v):
        return validate_non_empty_text(v, "Activity id")

    @field_validator("start_time", "end_time", mode="before")
    @classmethod
    def validate_times(cls, v, info):
        return validate_time_string(v, info.field_name)

    @field_validator("price_eur")
    @classmethod
    def validate_price(cls, v):
        return validate_non_negative_number(v, "price_eur")

    @model_validator(mode="after")
    def validate_window(self):
        """Reject windows that start and end on the same minute."""
        if self.start_time == self.end_time:
            msg = (
                f"Activity '{self.id}' starts and ends at {self.start_time}: "
                "ambiguous between zero length and a full day"
            )
            raise ValueError(msg)
        return self


class Waypoint(BaseModel):
    """
    User-created point of interest.

    Attributes
    ----------
    id : str
        Unique identifier generated at creation.
    name : str
        Non-empty display name (stored trimmed).
    description : Optional[str]
        Optional free text.
    coords : Coordinates
        Location captured at creation.
    created_at : datetime
        Creation timestamp, for ordering and debugging only.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: Optional[str] = None
    coords: Coordinates
    created_at: datetime

    @field_validator("id")
    @classmethod
    def validate_id(cls, v):
        return validate_non_empty_text(v, "Waypoint id")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        return validate_non_empty_text(v, "Waypoint name")

    def to_record(self) -> dict[str, Any]:
        """Flatten into the persisted record layout."""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "lat": self.coords.lat,
            "lng": self.coords.lng,
            "created_at": self.created_at.isoformat(),
        }

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> "Waypoint":
        """Rebuild a waypoint from its persisted record."""
        return cls(
            id=record["id"],
            name=record["name"],
            description=record.get("description"),
            coords=Coordinates(lat=record["lat"], lng=record["lng"]),
            created_at=record["created_at"],
        )


class StaticWaypoint(BaseModel):
    """Read-only reference point supplied by configuration."""

    model_config = ConfigDict(frozen=True)

    name: str
    coords: Coordinates

    @model_validator(mode="before")
    @classmethod
    def nest_coordinates(cls, data: Any) -> Any:
        """Accept the flat ``{name, lat, lng}`` layout used in YAML."""
        if isinstance(data, dict) and "coords" not in data:
            data = dict(data)
            coords = {
                key: data.pop(key)
                for key in ("lat", "lng", "latitude", "longitude", "position")
                if key in data
            }
            if "position" in coords:
                coords = coords["position"]
            data["coords"] = coords
        return data


class ActivityMarker(BaseModel):
    """Geolocated activity as handed to the map collaborator."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    location_name: str
    coords: Coordinates
    completed: bool = False
    critical: bool = False


class MapPointSet(BaseModel):
    """
    Merged point set consumed by the map collaborator.

    Custom and static waypoints stay in separate lists; the store itself
    never knows about the static set.
    """

    static_waypoints: list[StaticWaypoint] = Field(default_factory=list)
    custom_waypoints: list[Waypoint] = Field(default_factory=list)
    current_position: Optional[Coordinates] = None
    activities: list[ActivityMarker] = Field(default_factory=list)
    track: list[Coordinates] = Field(default_factory=list)
