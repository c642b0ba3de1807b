"""
CLI modules for shoreplan.

- main.py: Primary CLI interface
- status.py: Countdown and live timeline
- waypoints.py: Custom waypoint management
- validate.py: Itinerary validation
- export.py: Itinerary rows and budget for exporters
"""
