"""
Output feeds for shoreplan collaborators.

- export.py: itinerary rows, budget summary, share and directions links
"""
