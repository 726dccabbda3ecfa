"""
Domain-specific exception hierarchy for the meal scheduler application.
"""


class SchedulerError(Exception):
    """Base class for all application-level errors."""


class InvalidTimeFormat(SchedulerError, ValueError):
    """Raised when a time-of-day string is not a valid ``HH:MM`` value."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Invalid time format: '{value}'. Expected HH:MM (24-hour).")


class BuildDirectoryNotFound(SchedulerError):
    """Raised when the compiled client bundle cannot be found."""

    def __init__(self, path):
        self.path = path
        super().__init__(
            f"Could not find the build directory: {path}, "
            f"make sure to build the client first"
        )
