"""
Integration test walking through a full day ashore in Marseille.

Drives the engine the way a display layer would: the clock ticks forward,
position fixes arrive and go away, activities are ticked off and waypoints
are saved, and the derived facts are checked at each step.
"""

from datetime import datetime

import pytest

from shoreplan.core.excursion import ShoreExcursion
from shoreplan.core.ports import FixedClock, LocationFeed


@pytest.fixture
def day(itinerary_file):
    clock = FixedClock(datetime(2026, 4, 13, 7, 45))
    location = LocationFeed()
    excursion = ShoreExcursion.from_yaml(itinerary_file, clock=clock, location=location)
    return excursion, clock, location


def test_full_day(day, itinerary_file):
    excursion, clock, location = day

    # Before disembarking: nothing running, no fix yet
    report = excursion.status()
    assert report["current_activity"] is None
    assert report["countdown"] == "10h 45m 00s"
    assert all(a["distance_meters"] is None for a in report["activities"])

    # At the terminal with a GPS fix
    clock.set(datetime(2026, 4, 13, 8, 30))
    location.update((43.3320, 5.3460))
    report = excursion.status()
    assert report["current_activity"] == "arrival"
    arrival = report["activities"][0]
    assert arrival["progress"] == pytest.approx(0.5)
    assert arrival["distance_text"] == "0 m"
    excursion.toggle_completion("arrival")

    # Waiting for the shuttle
    clock.set(datetime(2026, 4, 13, 9, 15))
    shuttle = excursion.status()["activities"][1]
    assert shuttle["gap_before_minutes"] == 30
    assert shuttle["gap_progress"] == pytest.approx(0.5)

    # Save a café found on the way, then lose the fix in a tunnel
    clock.set(datetime(2026, 4, 13, 12, 10))
    location.update("43.2990, 5.3690")
    cafe = excursion.waypoints.create("Café du Panier", location.current, "Terrace")
    location.update(None)
    points = excursion.map_points()
    assert points.current_position is None
    assert points.custom_waypoints == [cafe]

    # Last call: thirty minutes to all aboard
    clock.set(datetime(2026, 4, 13, 18, 0))
    report = excursion.status()
    assert report["countdown"] == "00h 30m 00s"
    assert report["current_activity"] == "return"

    # On board; the countdown stays finished even after midnight
    clock.set(datetime(2026, 4, 13, 18, 30, 1))
    assert excursion.status()["countdown"] == "ON BOARD!"
    clock.set(datetime(2026, 4, 14, 0, 5))
    assert excursion.countdown().elapsed
    assert excursion.status()["completion"] == pytest.approx(0.2)

    # The waypoint survives a restart
    restarted = ShoreExcursion.from_yaml(itinerary_file, clock=clock)
    assert restarted.waypoints.list() == [cafe]
