"""
Custom validation functions for excursion data.

Provides standalone validation functions that can be used across
different model classes to ensure consistent validation logic.
"""

import logging
from typing import Any, Iterable

from shoreplan.utils.defaults import HHMM_PATTERN

logger = logging.getLogger(__name__)


def validate_latitude(value: float) -> float:
    """
    Validate that a latitude lies within [-90, 90].

    Parameters
    ----------
    value : float
        Latitude in decimal degrees.

    Returns
    -------
    float
        Validated latitude.

    Raises
    ------
    ValueError
        If latitude is outside the valid range or not finite.
    """
    value = float(value)
    if not -90.0 <= value <= 90.0:
        msg = f"Latitude must be between -90 and 90, got {value}"
        raise ValueError(msg)
    return value


def validate_longitude(value: float) -> float:
    """
    Validate that a longitude lies within [-180, 180].

    Parameters
    ----------
    value : float
        Longitude in decimal degrees.

    Returns
    -------
    float
        Validated longitude.

    Raises
    ------
    ValueError
        If longitude is outside the valid range or not finite.
    """
    value = float(value)
    if not -180.0 <= value <= 180.0:
        msg = f"Longitude must be between -180 and 180, got {value}"
        raise ValueError(msg)
    return value


def validate_non_negative_number(value: float, field_name: str) -> float:
    """
    Validate that a number is non-negative.

    Parameters
    ----------
    value : float
        Value to validate.
    field_name : str
        Name of the field for error messages.

    Returns
    -------
    float
        Validated non-negative number.

    Raises
    ------
    ValueError
        If value is negative.
    """
    if value < 0:
        msg = f"{field_name} must be non-negative, got {value}"
        raise ValueError(msg)
    return value


def validate_non_empty_text(value: Any, field_name: str) -> str:
    """
    Validate that a text value is non-empty after trimming.

    Returns the trimmed text.
    """
    if not isinstance(value, str) or not value.strip():
        msg = f"{field_name} must not be empty"
        raise ValueError(msg)
    return value.strip()


def validate_time_string(value: Any, field_name: str = "time") -> str:
    """
    Validate a 24h ``HH:MM`` time string and normalize it to two-digit hours.

    Parameters
    ----------
    value : Any
        Candidate time string, e.g. "8:05" or "18:30".
    field_name : str, optional
        Name of the field for error messages.

    Returns
    -------
    str
        Normalized ``HH:MM`` string.

    Raises
    ------
    ValueError
        If the value is not a valid time of day.

    Examples
    --------
    >>> validate_time_string("8:05")
    '08:05'
    """
    if not isinstance(value, str):
        msg = f"{field_name} must be an 'HH:MM' string, got {value!r}"
        raise ValueError(msg)

    match = HHMM_PATTERN.match(value.strip())
    if not match:
        msg = f"{field_name} must be a 24h 'HH:MM' time, got '{value}'"
        raise ValueError(msg)

    hours, minutes = int(match.group(1)), int(match.group(2))
    return f"{hours:02d}:{minutes:02d}"


def validate_unique_ids(items: Iterable[Any], item_type: str) -> None:
    """
    Validate that all items in a sequence have unique ids.

    Parameters
    ----------
    items : Iterable[Any]
        Items exposing an ``id`` attribute or key.
    item_type : str
        Type of items for error messages.

    Raises
    ------
    ValueError
        If duplicate ids are found.
    """
    duplicates = []
    seen = set()
    for item in items:
        item_id = item["id"] if isinstance(item, dict) else getattr(item, "id", None)
        if item_id in seen and item_id not in duplicates:
            duplicates.append(item_id)
        seen.add(item_id)

    if duplicates:
        msg = f"Duplicate {item_type} ids found: {duplicates}"
        raise ValueError(msg)
