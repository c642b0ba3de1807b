"""
Global test configuration and fixtures.

This file contains pytest fixtures shared by the unit, CLI and API test
suites: a fixed clock, in-memory storage and a copy of the Marseille
itinerary fixture in a temporary directory.
"""

import shutil
from datetime import datetime
from pathlib import Path

import pytest

from shoreplan.core.ports import FixedClock
from shoreplan.data.storage import MemoryStorage
from shoreplan.schema.models import Activity

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixed_clock():
    """Clock frozen at 10:15 on the day of the port call."""
    return FixedClock(datetime(2026, 4, 13, 10, 15, 0))


@pytest.fixture
def memory_storage():
    return MemoryStorage()


@pytest.fixture
def itinerary_file(tmp_path):
    """
    Copy the Marseille itinerary into a temporary directory.

    Its relative ``storage_dir`` therefore also resolves inside tmp_path, so
    tests never write next to the real fixtures.
    """
    target = tmp_path / "marseille.yaml"
    shutil.copy(FIXTURES_DIR / "marseille.yaml", target)
    return target


@pytest.fixture
def two_activities():
    """Two activities separated by a 30 minute gap."""
    return [
        Activity(id="a", title="First", start_time="08:00", end_time="09:00"),
        Activity(id="b", title="Second", start_time="09:30", end_time="10:00"),
    ]
