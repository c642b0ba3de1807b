"""
Utility modules for shoreplan.

- config.py: YAML loading and saving of excursion configurations
- coordinates.py: coordinate parsing and formatting
- defaults.py: constants and default values
- output_formatting.py: text formatting for durations, gaps and countdowns
"""
