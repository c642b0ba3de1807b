"""
Constants and default values for shore excursion planning.

This module defines default parameters, physical constants and storage keys
used throughout the shoreplan system.

Notes
-----
All constants are defined at the module level for easy importing and use.
"""

import re

# --- Geodesy ---

# Mean Earth radius in meters used by the haversine formula. Accurate to the
# tens of meters needed for pedestrian wayfinding, not survey grade.
EARTH_RADIUS_M = 6371000.0

# Distances below this threshold are shown in whole meters, above it in km
DISTANCE_KM_THRESHOLD_M = 1000.0

# --- Time of day ---

MINUTES_PER_HOUR = 60
MINUTES_PER_DAY = 24 * MINUTES_PER_HOUR
SECONDS_PER_MINUTE = 60

# Accepts "8:05" and "08:05", hours 0-23 and minutes 0-59
HHMM_PATTERN = re.compile(r"^([01]?\d|2[0-3]):([0-5]\d)$")

# Optional seconds component, used for clock readings ("18:30:01")
HHMMSS_PATTERN = re.compile(r"^([01]?\d|2[0-3]):([0-5]\d)(?::([0-5]\d))?$")

# --- Excursion defaults ---

# All-aboard time if the configuration does not provide one
DEFAULT_BOARDING_TIME = "18:30"

# Text shown once the boarding countdown has run out
BOARDING_ELAPSED_TEXT = "ON BOARD!"

# Notes value that marks an activity as a hard deadline
CRITICAL_NOTE_MARKER = "CRITICAL"

# --- Durable storage ---

# Directory holding persisted user data when none is configured
DEFAULT_STORAGE_DIR = ".shoreplan"

# Fixed key under which custom waypoints are persisted
WAYPOINTS_STORAGE_KEY = "custom_waypoints"

# Storage keys double as file names, so keep them to a safe character set
STORAGE_KEY_PATTERN = re.compile(r"^[A-Za-z0-9_.-]+$")

STORAGE_FILE_SUFFIX = ".yaml"

# --- Collaborator links ---

MAPS_QUERY_URL = "https://maps.google.com/?q={lat},{lng}"
MAPS_DIRECTIONS_URL = (
    "https://www.google.com/maps/dir/?api=1&destination={lat},{lng}"
)
