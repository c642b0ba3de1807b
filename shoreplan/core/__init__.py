"""
Core engine objects for shoreplan.

- ports.py: injected clock and location feed
- excursion.py: ShoreExcursion facade wiring schedule, store and ports
"""
