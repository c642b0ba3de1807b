"""
Coordinate parsing and formatting utilities.

This module converts loosely-typed position input (tuples, mappings,
"lat, lng" strings) into validated Coordinates and formats positions for
display in decimal degrees or degrees and decimal minutes (DMM).

Notes
-----
All coordinate functions expect input in decimal degrees and handle both
northern/eastern (positive) and southern/western (negative) coordinates.
"""

from typing import Any, Tuple

from shoreplan.schema.models import Coordinates
from shoreplan.validation.exceptions import ValidationError


class UnitConverter:
    """
    Utility class for coordinate unit conversions.
    """

    @staticmethod
    def decimal_degrees_to_dmm(decimal_degrees: float) -> Tuple[float, float]:
        """
        Convert decimal degrees to degrees and decimal minutes.

        Parameters
        ----------
        decimal_degrees : float
            Coordinate in decimal degrees format.

        Returns
        -------
        tuple of float
            Tuple of (degrees, decimal_minutes).

        Examples
        --------
        >>> degrees, minutes = UnitConverter.decimal_degrees_to_dmm(43.2965)
        >>> degrees, round(minutes, 2)
        (43.0, 17.79)
        """
        degrees = int(abs(decimal_degrees))
        minutes = (abs(decimal_degrees) - degrees) * 60
        return float(degrees), minutes


def parse_coordinates(value: Any) -> Coordinates:
    """
    Build validated Coordinates from any supported input form.

    Parameters
    ----------
    value : Any
        Coordinates, ``(lat, lng)`` pair, mapping with ``lat``/``lng`` or
        ``latitude``/``longitude`` keys, or a ``"lat, lng"`` string.

    Returns
    -------
    Coordinates
        Validated coordinate value.

    Raises
    ------
    ValidationError
        If the value cannot be parsed or lies out of range.
    """
    if isinstance(value, Coordinates):
        return value
    try:
        return Coordinates.model_validate(value)
    except ValueError as e:
        raise ValidationError(f"Invalid coordinates {value!r}: {e}") from e


def format_dmm(lat: float, lng: float) -> str:
    """
    Format coordinates as degrees and decimal minutes.

    Examples
    --------
    >>> format_dmm(43.2965, 5.3698)
    "43 17.79'N, 005 22.19'E"
    """
    lat_deg, lat_min = UnitConverter.decimal_degrees_to_dmm(lat)
    lng_deg, lng_min = UnitConverter.decimal_degrees_to_dmm(lng)

    lat_dir = "N" if lat >= 0 else "S"
    lng_dir = "E" if lng >= 0 else "W"

    lat_str = f"{abs(int(lat_deg)):02d} {lat_min:05.2f}'{lat_dir}"
    lng_str = f"{abs(int(lng_deg)):03d} {lng_min:05.2f}'{lng_dir}"

    return f"{lat_str}, {lng_str}"


def format_position_string(lat: float, lng: float, format_type: str = "decimal") -> str:
    """
    Format coordinate pair as a position string.

    Parameters
    ----------
    lat : float
        Latitude in decimal degrees.
    lng : float
        Longitude in decimal degrees.
    format_type : str, optional
        'decimal' for decimal degrees (default), 'dmm' for degrees and
        decimal minutes.

    Returns
    -------
    str
        Formatted position string.

    Examples
    --------
    >>> format_position_string(43.2965, 5.3698)
    '43.2965°N, 5.3698°E'
    """
    if format_type == "dmm":
        return format_dmm(lat, lng)
    elif format_type == "decimal":
        lat_dir = "N" if lat >= 0 else "S"
        lng_dir = "E" if lng >= 0 else "W"
        return f"{abs(lat):.4f}°{lat_dir}, {abs(lng):.4f}°{lng_dir}"
    else:
        raise ValueError(f"Unsupported format_type: {format_type}")
