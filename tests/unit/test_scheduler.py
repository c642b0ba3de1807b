"""
Tests for the schedule model: ordering, toggling and derived entries.
"""

import pytest

from shoreplan.calculators.scheduler import ScheduleEntry, ScheduleModel
from shoreplan.schema.models import Activity
from shoreplan.validation.exceptions import (
    ActivityNotFoundError,
    NotFoundError,
    ValidationError,
)


class TestScheduleModelConstruction:
    """Test ordering and id uniqueness."""

    def test_keeps_declared_order(self):
        late = Activity(id="late", start_time="10:00", end_time="11:00")
        early = Activity(id="early", start_time="08:00", end_time="09:00")
        schedule = ScheduleModel([late, early])
        assert [a.id for a in schedule] == ["late", "early"]

    def test_duplicate_ids_rejected(self):
        a = Activity(id="x", start_time="08:00", end_time="09:00")
        b = Activity(id="x", start_time="10:00", end_time="11:00")
        with pytest.raises(ValidationError, match="Duplicate activity ids"):
            ScheduleModel([a, b])

    def test_len_and_get(self, two_activities):
        schedule = ScheduleModel(two_activities)
        assert len(schedule) == 2
        assert schedule.get("b").title == "Second"

    def test_get_missing(self, two_activities):
        with pytest.raises(ActivityNotFoundError):
            ScheduleModel(two_activities).get("nope")

    def test_zero_length_activity_rejected(self):
        with pytest.raises(ValueError):
            Activity(id="x", start_time="09:00", end_time="09:00")


class TestToggleCompletion:
    """Test completion toggling."""

    def test_flips_only_target(self, two_activities):
        schedule = ScheduleModel(two_activities)
        updated = schedule.toggle_completion("a")

        assert updated[0].completed is True
        assert updated[1].completed is False
        assert [a.id for a in updated] == ["a", "b"]

    def test_other_fields_untouched(self, two_activities):
        schedule = ScheduleModel(two_activities)
        before = two_activities[0].model_dump(exclude={"completed"})
        schedule.toggle_completion("a")
        assert schedule.get("a").model_dump(exclude={"completed"}) == before

    def test_toggle_twice_restores(self, two_activities):
        schedule = ScheduleModel(two_activities)
        schedule.toggle_completion("b")
        schedule.toggle_completion("b")
        assert schedule.activities == tuple(two_activities)

    def test_original_activity_not_mutated(self, two_activities):
        ScheduleModel(two_activities).toggle_completion("a")
        assert two_activities[0].completed is False

    def test_missing_id_raises_and_keeps_sequence(self, two_activities, caplog):
        schedule = ScheduleModel(two_activities)
        before = schedule.activities

        with pytest.raises(ActivityNotFoundError) as exc_info:
            schedule.toggle_completion("ghost")

        assert exc_info.value.activity_id == "ghost"
        assert isinstance(exc_info.value, NotFoundError)
        assert schedule.activities == before
        assert "ghost" in caplog.text

    def test_completion_ratio(self, two_activities):
        schedule = ScheduleModel(two_activities)
        assert schedule.completion_ratio() == 0.0
        schedule.toggle_completion("a")
        assert schedule.completion_ratio() == 0.5
        assert ScheduleModel([]).completion_ratio() == 0.0


class TestGapsAndProgress:
    """Test derived per-entry facts."""

    def test_gap_between_adjacent_entries(self, two_activities):
        entries = ScheduleModel(two_activities).gaps_and_progress("08:30")

        assert all(isinstance(e, ScheduleEntry) for e in entries)
        assert entries[0].gap_before_minutes is None
        assert entries[0].gap_progress is None
        assert not entries[0].show_gap
        assert entries[1].gap_before_minutes == 30
        assert entries[1].show_gap

    def test_durations_and_progress(self, two_activities):
        entries = ScheduleModel(two_activities).gaps_and_progress("08:30")
        assert [e.duration_minutes for e in entries] == [60, 30]
        assert entries[0].progress == pytest.approx(0.5)
        assert entries[1].progress == 0.0

    def test_gap_progress(self, two_activities):
        entries = ScheduleModel(two_activities).gaps_and_progress("09:15")
        assert entries[1].gap_progress == pytest.approx(0.5)
        assert entries[0].progress == 1.0

    def test_gap_progress_across_midnight(self):
        schedule = ScheduleModel(
            [
                Activity(id="late", start_time="22:00", end_time="23:50"),
                Activity(id="night", start_time="00:10", end_time="01:00"),
            ]
        )
        midway = schedule.gaps_and_progress("00:00")[1]
        assert midway.gap_progress == pytest.approx(0.5)
        entries = schedule.gaps_and_progress("00:10")
        assert entries[1].gap_before_minutes == 20
        assert entries[1].gap_progress == 1.0

    def test_zero_gap_not_shown(self):
        schedule = ScheduleModel(
            [
                Activity(id="a", start_time="08:00", end_time="09:00"),
                Activity(id="b", start_time="09:00", end_time="10:00"),
            ]
        )
        entries = schedule.gaps_and_progress("08:00")
        assert entries[1].gap_before_minutes == 0
        assert not entries[1].show_gap

    def test_gap_follows_declared_order(self):
        """Out-of-order activities are not sorted; the gap wraps instead."""
        schedule = ScheduleModel(
            [
                Activity(id="late", start_time="10:00", end_time="11:00"),
                Activity(id="early", start_time="08:00", end_time="09:00"),
            ]
        )
        entries = schedule.gaps_and_progress("07:00")
        assert entries[1].gap_before_minutes == 1260

    def test_recomputed_each_call(self, two_activities):
        schedule = ScheduleModel(two_activities)
        assert schedule.gaps_and_progress("08:00")[0].progress == 0.0
        assert schedule.gaps_and_progress("08:45")[0].progress == pytest.approx(0.75)


class TestCurrentActivity:
    """Test lookup of the running activity."""

    def test_inside_window(self, two_activities):
        assert ScheduleModel(two_activities).current_activity("08:30").id == "a"

    def test_in_gap(self, two_activities):
        assert ScheduleModel(two_activities).current_activity("09:15") is None
