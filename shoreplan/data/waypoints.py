"""
Durable store for user-created waypoints.

Every mutation is serialized in full to the key-value storage before the
call returns. Corrupt persisted data is recovered by starting from an empty
store with a single warning; it is never fatal.
"""

import logging
import uuid
from typing import Any, Callable, Iterator, Optional

import yaml

from shoreplan.core.ports import Clock, SystemClock
from shoreplan.data.storage import KeyValueStorage
from shoreplan.schema.models import Waypoint
from shoreplan.utils.coordinates import parse_coordinates
from shoreplan.utils.defaults import WAYPOINTS_STORAGE_KEY
from shoreplan.validation.exceptions import PersistenceCorrupt, ValidationError
from shoreplan.validation.validators import validate_non_empty_text, validate_unique_ids

logger = logging.getLogger(__name__)

# Attempts at drawing an unused id before giving up
_MAX_ID_ATTEMPTS = 5


def _uuid_id() -> str:
    return uuid.uuid4().hex


def encode_waypoints(waypoints: list[Waypoint]) -> str:
    """Serialize waypoints to a YAML list of flat records."""
    return yaml.safe_dump(
        [waypoint.to_record() for waypoint in waypoints],
        sort_keys=False,
        default_flow_style=False,
        allow_unicode=True,
    )


def decode_waypoints(text: Optional[str]) -> list[Waypoint]:
    """
    Parse the persisted YAML document back into waypoints.

    Raises
    ------
    PersistenceCorrupt
        If the document is not a list of valid, uniquely identified records.
    """
    if text is None or not text.strip():
        return []

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise PersistenceCorrupt(f"Unparseable waypoint data: {e}") from e

    if data is None:
        return []
    if not isinstance(data, list):
        raise PersistenceCorrupt(
            f"Expected a list of waypoint records, got {type(data).__name__}"
        )

    waypoints = []
    for index, record in enumerate(data):
        if not isinstance(record, dict):
            raise PersistenceCorrupt(f"Waypoint record {index} is not a mapping")
        try:
            waypoints.append(Waypoint.from_record(record))
        except (KeyError, TypeError, ValueError) as e:
            raise PersistenceCorrupt(f"Invalid waypoint record {index}: {e}") from e

    try:
        validate_unique_ids(waypoints, "waypoint")
    except ValueError as e:
        raise PersistenceCorrupt(str(e)) from e
    return waypoints


class WaypointStore:
    """
    Insertion-ordered, persisted collection of custom waypoints.

    The store knows nothing about static reference waypoints; merging the two
    is left to the map collaborator.

    Parameters
    ----------
    storage : KeyValueStorage
        Durable storage backend.
    key : str, optional
        Fixed key the waypoint list is stored under.
    clock : Clock, optional
        Source of ``created_at`` timestamps. Defaults to the system clock.
    id_factory : Callable[[], str], optional
        Generator of new waypoint ids. Defaults to random UUIDs.
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        key: str = WAYPOINTS_STORAGE_KEY,
        clock: Optional[Clock] = None,
        id_factory: Optional[Callable[[], str]] = None,
    ):
        self.storage = storage
        self.key = key
        self.clock = clock or SystemClock()
        self._new_id = id_factory or _uuid_id
        self._waypoints: list[Waypoint] = []
        self._corruption_reported = False
        self.recovered_from_corruption = False
        self.reload()

    def reload(self) -> None:
        """Rebuild the in-memory list from storage."""
        try:
            self._waypoints = decode_waypoints(self.storage.read(self.key))
        except (PersistenceCorrupt, OSError) as e:
            self._waypoints = []
            self.recovered_from_corruption = True
            if not self._corruption_reported:
                logger.warning(
                    f"⚠️ Stored waypoints under '{self.key}' are unreadable, "
                    f"starting with an empty list: {e}"
                )
                self._corruption_reported = True

    def _persist(self) -> None:
        self.storage.write(self.key, encode_waypoints(self._waypoints))

    def _generate_id(self) -> str:
        taken = {waypoint.id for waypoint in self._waypoints}
        for _ in range(_MAX_ID_ATTEMPTS):
            candidate = self._new_id()
            if candidate not in taken:
                return candidate
        raise ValidationError("Could not generate a unique waypoint id")

    def create(
        self, name: str, coords: Any, description: Optional[str] = None
    ) -> Waypoint:
        """
        Add a new waypoint and persist the store.

        Parameters
        ----------
        name : str
            Display name, must be non-empty after trimming.
        coords : Any
            Location, in any form accepted by ``parse_coordinates``.
        description : Optional[str]
            Optional free text. Blank text is stored as None.

        Returns
        -------
        Waypoint
            The stored waypoint.

        Raises
        ------
        ValidationError
            If the name is empty or the coordinates are invalid. Nothing is
            stored in that case.
        """
        try:
            name = validate_non_empty_text(name, "Waypoint name")
        except ValueError as e:
            raise ValidationError(str(e)) from e

        location = parse_coordinates(coords)
        if description is not None:
            description = description.strip() or None

        waypoint = Waypoint(
            id=self._generate_id(),
            name=name,
            description=description,
            coords=location,
            created_at=self.clock.now(),
        )

        self._waypoints.append(waypoint)
        try:
            self._persist()
        except Exception:
            self._waypoints.pop()
            raise

        logger.info(f"✅ Waypoint '{waypoint.name}' saved ({waypoint.id})")
        return waypoint

    def delete(self, waypoint_id: str) -> None:
        """
        Remove the waypoint with this id and persist the store.

        Unknown ids are ignored.
        """
        remaining = [w for w in self._waypoints if w.id != waypoint_id]
        if len(remaining) == len(self._waypoints):
            logger.debug(f"Delete ignored: waypoint '{waypoint_id}' not found")
            return

        previous = self._waypoints
        self._waypoints = remaining
        try:
            self._persist()
        except Exception:
            self._waypoints = previous
            raise
        logger.info(f"Waypoint {waypoint_id} deleted")

    def list(self) -> list[Waypoint]:
        """Waypoints in insertion order (a copy)."""
        return list(self._waypoints)

    def get(self, waypoint_id: str) -> Optional[Waypoint]:
        for waypoint in self._waypoints:
            if waypoint.id == waypoint_id:
                return waypoint
        return None

    def __len__(self) -> int:
        return len(self._waypoints)

    def __iter__(self) -> Iterator[Waypoint]:
        return iter(list(self._waypoints))

    def __contains__(self, waypoint_id: object) -> bool:
        return any(waypoint.id == waypoint_id for waypoint in self._waypoints)
