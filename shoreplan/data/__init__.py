"""
Durable data for shoreplan.

- storage.py: key-value storage backends (file, memory)
- waypoints.py: persisted store of user waypoints
"""
