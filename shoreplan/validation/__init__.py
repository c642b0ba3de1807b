"""
Validation helpers and error types for shoreplan.

Re-exports the exception hierarchy and the standalone field validators used
by the schema models.
"""

from .exceptions import (
    ActivityNotFoundError,
    AmbiguousDurationError,
    ConfigurationError,
    NotFoundError,
    PersistenceCorrupt,
    ShorePlanError,
    ValidationError,
)
from .validators import (
    validate_latitude,
    validate_longitude,
    validate_non_empty_text,
    validate_non_negative_number,
    validate_time_string,
    validate_unique_ids,
)

__all__ = [
    "ActivityNotFoundError",
    "AmbiguousDurationError",
    "ConfigurationError",
    "NotFoundError",
    "PersistenceCorrupt",
    "ShorePlanError",
    "ValidationError",
    "validate_latitude",
    "validate_longitude",
    "validate_non_empty_text",
    "validate_non_negative_number",
    "validate_time_string",
    "validate_unique_ids",
]
