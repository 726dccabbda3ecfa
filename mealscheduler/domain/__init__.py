"""
Domain layer - scheduling logic on pendulum dates, no I/O.
"""

from .exceptions import BuildDirectoryNotFound, InvalidTimeFormat, SchedulerError
from .models import Congregation, DateRange, SelectOption, TimeSlotOption
from .month_navigator import MonthNavigator

__all__ = [
    "BuildDirectoryNotFound",
    "Congregation",
    "DateRange",
    "InvalidTimeFormat",
    "MonthNavigator",
    "SchedulerError",
    "SelectOption",
    "TimeSlotOption",
]
