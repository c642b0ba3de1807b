"""
Schedule model for the day's itinerary.

Owns the ordered activity sequence and derives per-entry display facts
(duration, waiting gap before the entry, live progress) without ever
reordering it. Gaps are computed strictly between adjacent declared
entries.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from shoreplan.calculators.duration import (
    TimeLike,
    duration,
    gap,
    is_within,
    progress,
)
from shoreplan.schema.models import Activity
from shoreplan.validation.exceptions import ActivityNotFoundError, ValidationError
from shoreplan.validation.validators import validate_unique_ids

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScheduleEntry:
    """
    Derived, read-only view of one activity at a given instant.

    Attributes
    ----------
    index : int
        Position in the declared order.
    activity : Activity
        The underlying activity snapshot.
    duration_minutes : int
        Length of the activity window.
    gap_before_minutes : Optional[int]
        Waiting time since the previous entry ended, None for the first entry.
    gap_progress : Optional[float]
        Progress through that waiting interval, None for the first entry.
    progress : float
        Progress through the activity window in [0, 1].
    """

    index: int
    activity: Activity
    duration_minutes: int
    gap_before_minutes: Optional[int]
    gap_progress: Optional[float]
    progress: float

    @property
    def show_gap(self) -> bool:
        """Zero gaps are not rendered as a waiting interval."""
        return bool(self.gap_before_minutes)


class ScheduleModel:
    """
    Ordered activity list with completion toggling and derived views.

    Parameters
    ----------
    activities : Iterable[Activity]
        Activities in visitation order. The order is kept as given.

    Raises
    ------
    ValidationError
        If two activities share an id.
    """

    def __init__(self, activities: Iterable[Activity]):
        activities = tuple(activities)
        try:
            validate_unique_ids(activities, "activity")
        except ValueError as e:
            raise ValidationError(str(e)) from e
        self._activities = activities

    def __len__(self) -> int:
        return len(self._activities)

    def __iter__(self):
        return iter(self._activities)

    @property
    def activities(self) -> tuple[Activity, ...]:
        """Snapshot of the current sequence."""
        return self._activities

    def get(self, activity_id: str) -> Activity:
        for activity in self._activities:
            if activity.id == activity_id:
                return activity
        raise ActivityNotFoundError(activity_id)

    def toggle_completion(self, activity_id: str) -> tuple[Activity, ...]:
        """
        Flip ``completed`` on the activity with the given id.

        Only the matching entry changes; order and every other field are
        left untouched.

        Returns
        -------
        tuple[Activity, ...]
            The updated sequence.

        Raises
        ------
        ActivityNotFoundError
            If no activity has this id. The sequence is left unchanged.
        """
        updated = []
        found = False
        for activity in self._activities:
            if activity.id == activity_id:
                activity = activity.model_copy(
                    update={"completed": not activity.completed}
                )
                found = True
            updated.append(activity)

        if not found:
            logger.warning(f"Toggle ignored: activity '{activity_id}' not in schedule")
            raise ActivityNotFoundError(activity_id)

        self._activities = tuple(updated)
        logger.debug(f"Toggled completion of activity '{activity_id}'")
        return self._activities

    def gaps_and_progress(self, now: TimeLike) -> list[ScheduleEntry]:
        """
        Per-entry derived view at ``now``.

        Recomputed on every call from the underlying list; nothing is cached.
        """
        entries = []
        previous: Optional[Activity] = None
        for index, activity in enumerate(self._activities):
            gap_before = None
            gap_progress = None
            if previous is not None:
                gap_before = gap(previous.end_time, activity.start_time)
                gap_progress = progress(now, previous.end_time, activity.start_time)

            entries.append(
                ScheduleEntry(
                    index=index,
                    activity=activity,
                    duration_minutes=duration(activity.start_time, activity.end_time),
                    gap_before_minutes=gap_before,
                    gap_progress=gap_progress,
                    progress=progress(now, activity.start_time, activity.end_time),
                )
            )
            previous = activity
        return entries

    def current_activity(self, now: TimeLike) -> Optional[Activity]:
        """First activity whose window contains ``now``, if any."""
        for activity in self._activities:
            if is_within(now, activity.start_time, activity.end_time):
                return activity
        return None

    def completion_ratio(self) -> float:
        """Share of activities ticked off, 0.0 for an empty schedule."""
        if not self._activities:
            return 0.0
        done = sum(1 for activity in self._activities if activity.completed)
        return done / len(self._activities)
