"""
Pure calculators for the excursion engine.

- distance.py: great-circle distance, bearing and distance text
- duration.py: minutes-of-day arithmetic, progress and countdown
- scheduler.py: ordered schedule model with gaps and progress
"""
