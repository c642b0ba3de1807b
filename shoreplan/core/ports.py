"""
Injected collaborators for the excursion engine.

The engine never reads the wall clock or device sensors directly. A Clock
supplies the current time and a LocationFeed holds the last position pushed
by the device location service, so tests can substitute fixed values.
"""

import logging
from datetime import datetime, timedelta
from typing import Any, Callable, Optional

from shoreplan.schema.models import Coordinates
from shoreplan.utils.coordinates import parse_coordinates

logger = logging.getLogger(__name__)

PositionListener = Callable[[Optional[Coordinates]], None]


class Clock:
    """Source of the current local time."""

    def now(self) -> datetime:
        raise NotImplementedError


class SystemClock(Clock):
    """Local wall-clock time of the host."""

    def now(self) -> datetime:
        return datetime.now()


class FixedClock(Clock):
    """
    Clock that only moves when told to.

    Parameters
    ----------
    current : datetime
        Initial reading.
    """

    def __init__(self, current: datetime):
        self.current = current

    def now(self) -> datetime:
        return self.current

    def set(self, current: datetime) -> None:
        self.current = current

    def advance(self, **kwargs) -> datetime:
        """Move forward by a ``timedelta(**kwargs)`` and return the new time."""
        self.current = self.current + timedelta(**kwargs)
        return self.current


class LocationFeed:
    """
    Last known device position, pushed by the location service.

    Unknown (``None``) until the first fix arrives. Unknown is a normal
    state, not an error.
    """

    def __init__(self, initial: Any = None):
        self._current: Optional[Coordinates] = None
        self._listeners: list[PositionListener] = []
        if initial is not None:
            self.update(initial)

    @property
    def current(self) -> Optional[Coordinates]:
        return self._current

    @property
    def has_fix(self) -> bool:
        return self._current is not None

    def subscribe(self, listener: PositionListener) -> None:
        """Register a callback invoked with every position update."""
        self._listeners.append(listener)

    def update(self, position: Any) -> Optional[Coordinates]:
        """
        Accept a new reading.

        Parameters
        ----------
        position : Any
            Coordinates, ``(lat, lng)``, mapping or ``"lat, lng"`` string.
            ``None`` marks the position as unavailable.

        Returns
        -------
        Optional[Coordinates]
            The stored position.

        Raises
        ------
        ValidationError
            If the reading is not a valid coordinate. The last known
            position is kept.
        """
        if position is None:
            self.mark_unavailable()
            return None

        self._current = parse_coordinates(position)
        logger.debug(f"Position update: {self._current.lat}, {self._current.lng}")
        self._notify()
        return self._current

    def mark_unavailable(self) -> None:
        if self._current is not None:
            logger.info("Location unavailable")
        self._current = None
        self._notify()

    def _notify(self) -> None:
        for listener in self._listeners:
            listener(self._current)
