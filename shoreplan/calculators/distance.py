import math
from typing import List, NamedTuple, Tuple, Union

from shoreplan.schema.models import Coordinates
from shoreplan.utils.defaults import DISTANCE_KM_THRESHOLD_M, EARTH_RADIUS_M
from shoreplan.validation.exceptions import ValidationError

PointLike = Union[Coordinates, Tuple[float, float], dict]


class DistanceBearing(NamedTuple):
    distance_meters: float
    bearing_degrees: float


def to_coords(point: PointLike) -> Tuple[float, float]:
    """Helper to extract (lat, lng) from various input types."""
    if isinstance(point, Coordinates):
        return (point.lat, point.lng)
    if isinstance(point, dict):
        if "lat" in point and "lng" in point:
            return (point["lat"], point["lng"])
        if "latitude" in point and "longitude" in point:
            return (point["latitude"], point["longitude"])
    return point


def haversine_distance(start: PointLike, end: PointLike) -> float:
    """Calculate Great Circle distance in meters between two points."""
    lat1, lng1 = to_coords(start)
    lat2, lng2 = to_coords(end)

    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    dphi = math.radians(lat2 - lat1)
    dlambda = math.radians(lng2 - lng1)

    a = (
        math.sin(dphi / 2) ** 2
        + math.cos(phi1) * math.cos(phi2) * math.sin(dlambda / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_M * c


def initial_bearing(start: PointLike, end: PointLike) -> float:
    """
    Forward azimuth from start to end in degrees, normalized to [0, 360).

    Identical points give 0.0, the value of atan2(0, 0).
    """
    lat1, lng1 = to_coords(start)
    lat2, lng2 = to_coords(end)

    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    dlambda = math.radians(lng2 - lng1)

    y = math.sin(dlambda) * math.cos(phi2)
    x = math.cos(phi1) * math.sin(phi2) - math.sin(phi1) * math.cos(
        phi2
    ) * math.cos(dlambda)
    theta = math.atan2(y, x)

    bearing = math.degrees(theta) % 360.0
    # -0.0 and values that round up to 360.0 both collapse to 0.0
    if bearing >= 360.0 or bearing == 0.0:
        return 0.0
    return bearing


def distance_and_bearing(start: PointLike, end: PointLike) -> DistanceBearing:
    """Distance in meters and initial bearing in degrees from start to end."""
    if to_coords(start) == to_coords(end):
        return DistanceBearing(0.0, 0.0)
    return DistanceBearing(haversine_distance(start, end), initial_bearing(start, end))


def route_distance(points: List[PointLike]) -> float:
    """Calculate total distance of a path in meters."""
    if not points or len(points) < 2:
        return 0.0

    total = 0.0
    for i in range(len(points) - 1):
        total += haversine_distance(points[i], points[i + 1])
    return total


def format_distance(distance_meters: float) -> str:
    """
    Render a distance for display.

    Below 1000 m the value is shown in whole meters, from 1000 m on in
    kilometers with one decimal.

    Examples
    --------
    >>> format_distance(650.4)
    '650 m'
    >>> format_distance(1234.0)
    '1.2 km'
    """
    if distance_meters < 0:
        raise ValidationError(f"Distance must be non-negative, got {distance_meters}")

    if distance_meters < DISTANCE_KM_THRESHOLD_M:
        return f"{round(distance_meters)} m"
    return f"{distance_meters / 1000:.1f} km"
