"""
Custom option feature module.

Custom options are reusable attribute definitions (e.g. "Speed") that objects
carry values for.
"""
