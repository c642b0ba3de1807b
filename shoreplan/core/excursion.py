"""
Shore excursion engine facade.

ShoreExcursion wires the schedule model, the waypoint store and the
injected clock and location ports together, and produces the derived facts
the display collaborators consume: countdown, per-activity timeline facts
and the merged map point set.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any, Optional, Union

from shoreplan.calculators.distance import (
    DistanceBearing,
    distance_and_bearing,
    format_distance,
    route_distance,
)
from shoreplan.calculators.duration import BoardingCountdown, CountdownState
from shoreplan.calculators.scheduler import ScheduleEntry, ScheduleModel
from shoreplan.core.ports import Clock, LocationFeed, SystemClock
from shoreplan.data.storage import FileStorage
from shoreplan.data.waypoints import WaypointStore
from shoreplan.schema.excursion import ExcursionConfig
from shoreplan.schema.models import (
    Activity,
    ActivityMarker,
    Coordinates,
    MapPointSet,
)
from shoreplan.utils.config import load_excursion_config
from shoreplan.utils.output_formatting import _format_countdown

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ActivityFacts:
    """
    Display facts for one activity: schedule entry plus, when both the
    position and the activity location are known, distance and bearing.
    """

    entry: ScheduleEntry
    distance_meters: Optional[float] = None
    bearing_degrees: Optional[float] = None

    @property
    def activity(self) -> Activity:
        return self.entry.activity

    @property
    def distance_text(self) -> Optional[str]:
        if self.distance_meters is None:
            return None
        return format_distance(self.distance_meters)


class ShoreExcursion:
    """
    The main engine object for one day ashore.

    Parameters
    ----------
    config : ExcursionConfig
        Validated itinerary configuration.
    clock : Clock, optional
        Time source. Defaults to the system clock.
    location : LocationFeed, optional
        Position feed. Defaults to an empty feed (position unknown).
    waypoints : WaypointStore, optional
        Custom waypoint store. Defaults to file storage under
        ``config.storage_dir``.
    """

    def __init__(
        self,
        config: ExcursionConfig,
        clock: Optional[Clock] = None,
        location: Optional[LocationFeed] = None,
        waypoints: Optional[WaypointStore] = None,
    ):
        self.config = config
        self.clock = clock if clock is not None else SystemClock()
        self.location = location if location is not None else LocationFeed()
        if waypoints is None:
            waypoints = WaypointStore(FileStorage(config.storage_dir), clock=self.clock)
        self.waypoints = waypoints
        self.schedule = ScheduleModel(config.activities)
        self._countdown = BoardingCountdown(config.boarding_time)

    @classmethod
    def from_yaml(
        cls, config_file: Union[str, Path], **kwargs: Any
    ) -> "ShoreExcursion":
        """Load an itinerary YAML file and build the engine around it."""
        return cls(load_excursion_config(config_file), **kwargs)

    # --- Mutations ---

    def toggle_completion(self, activity_id: str) -> tuple[Activity, ...]:
        return self.schedule.toggle_completion(activity_id)

    # --- Derived facts ---

    def countdown(self, now: Optional[datetime] = None) -> CountdownState:
        """Time left until boarding at ``now``, by default the clock's reading."""
        return self._countdown.tick(self.clock.now() if now is None else now)

    def distance_to(self, target: Coordinates) -> Optional[DistanceBearing]:
        """Distance and bearing from the current position, None if unknown."""
        position = self.location.current
        if position is None:
            return None
        return distance_and_bearing(position, target)

    def timeline(self, now: Optional[datetime] = None) -> list[ActivityFacts]:
        """Per-activity facts at ``now``, by default the clock's reading."""
        if now is None:
            now = self.clock.now()
        facts = []
        for entry in self.schedule.gaps_and_progress(now):
            target = entry.activity.coords
            measured = self.distance_to(target) if target is not None else None
            if measured is None:
                facts.append(ActivityFacts(entry))
            else:
                facts.append(
                    ActivityFacts(
                        entry,
                        distance_meters=measured.distance_meters,
                        bearing_degrees=measured.bearing_degrees,
                    )
                )
        return facts

    def map_points(self) -> MapPointSet:
        """Everything the map collaborator draws, as a snapshot."""
        markers = [
            ActivityMarker(
                id=activity.id,
                title=activity.title,
                location_name=activity.location_name,
                coords=activity.coords,
                completed=activity.completed,
                critical=activity.critical,
            )
            for activity in self.schedule.activities
            if activity.coords is not None
        ]
        return MapPointSet(
            static_waypoints=list(self.config.static_waypoints),
            custom_waypoints=self.waypoints.list(),
            current_position=self.location.current,
            activities=markers,
            track=list(self.config.track),
        )

    def track_length(self) -> float:
        """Length of the configured walking track in meters."""
        return route_distance(self.config.track)

    def status(self) -> dict[str, Any]:
        """
        Snapshot of the whole engine state as plain data.

        Returns
        -------
        dict
            Countdown, position, current activity and per-activity facts.
        """
        now = self.clock.now()
        state = self.countdown(now)
        position = self.location.current
        current = self.schedule.current_activity(now)

        activities = []
        for facts in self.timeline(now):
            entry = facts.entry
            activity = entry.activity
            activities.append(
                {
                    "id": activity.id,
                    "title": activity.title,
                    "type": activity.type.value,
                    "start_time": activity.start_time,
                    "end_time": activity.end_time,
                    "duration_minutes": entry.duration_minutes,
                    "gap_before_minutes": entry.gap_before_minutes,
                    "show_gap": entry.show_gap,
                    "gap_progress": entry.gap_progress,
                    "progress": entry.progress,
                    "completed": activity.completed,
                    "critical": activity.critical,
                    "distance_meters": facts.distance_meters,
                    "bearing_degrees": facts.bearing_degrees,
                    "distance_text": facts.distance_text,
                }
            )

        return {
            "excursion": self.config.excursion_name,
            "date": self.config.date,
            "now": now.isoformat(timespec="seconds"),
            "boarding_time": self.config.boarding_time,
            "countdown": _format_countdown(state),
            "boarding_elapsed": state.elapsed,
            "position": None if position is None else position.model_dump(),
            "current_activity": None if current is None else current.id,
            "completion": self.schedule.completion_ratio(),
            "activities": activities,
            "custom_waypoints": len(self.waypoints),
        }
