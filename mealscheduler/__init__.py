"""
mealscheduler - congregation meal scheduling helpers and web harness.
"""

__version__ = "0.1.0"
