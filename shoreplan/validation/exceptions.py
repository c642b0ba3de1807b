"""
Custom exceptions for the shore excursion engine.

Every error raised by shoreplan derives from ShorePlanError so that callers
(CLI, notebook API, display collaborators) can catch the whole family at once.
"""


class ShorePlanError(Exception):
    """Base class for all shoreplan errors."""

    ...


class ValidationError(ShorePlanError, ValueError):
    """
    Exception raised when user or configuration input is invalid.

    Covers empty waypoint names, malformed ``HH:MM`` strings and
    out-of-range coordinates. Nothing is stored when this is raised.
    """

    ...


class AmbiguousDurationError(ValidationError):
    """
    Raised when a time window starts and ends at the same minute.

    Such a window could mean zero length or a full day, so it is rejected
    instead of being resolved either way.
    """

    ...


class NotFoundError(ShorePlanError, LookupError):
    """Raised when an operation references an id that does not exist."""

    ...


class ActivityNotFoundError(NotFoundError):
    """Raised when an activity id is not part of the schedule."""

    def __init__(self, activity_id: str):
        self.activity_id = activity_id
        super().__init__(f"Activity '{activity_id}' not found in schedule")


class PersistenceCorrupt(ShorePlanError):
    """
    Raised when persisted data cannot be decoded.

    Always recovered locally by the waypoint store (reset to an empty store),
    never propagated to callers.
    """

    ...


class ConfigurationError(ShorePlanError):
    """
    Exception raised when an itinerary configuration is invalid or unreadable.

    Wraps YAML syntax errors and schema validation failures raised while
    loading the excursion configuration file.
    """

    ...
