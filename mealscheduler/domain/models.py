"""
Domain models for date ranges, selectable options and congregations.
"""

from dataclasses import dataclass
from typing import Optional

from pendulum import DateTime


@dataclass(frozen=True)
class DateRange:
    """
    Represents an immutable calendar range with start and end datetime.

    Invariant: start must not be after end.
    """
    start: DateTime
    end: DateTime

    def __post_init__(self):
        if self.start > self.end:
            raise ValueError(f"Start {self.start} must not be after end {self.end}")

    def contains(self, dt: DateTime) -> bool:
        """Check if a datetime lies in the range, inclusive on both ends."""
        return self.start <= dt <= self.end

    def __str__(self) -> str:
        return f"{self.start.format('YYYY-MM-DD HH:mm')} - {self.end.format('YYYY-MM-DD HH:mm')}"


@dataclass(frozen=True)
class SelectOption:
    """
    A (value, label) pair offered to a picker.

    Time slots use ``"HH:mm"`` / ``"h:mm A"``, months ``"YYYY-MM"`` / ``"MMMM YYYY"``.
    """
    value: str
    label: str


TimeSlotOption = SelectOption


@dataclass(frozen=True)
class Congregation:
    """A congregation a user may schedule meals for."""
    id: int
    name: str
    access_code: str = ""
    description: Optional[str] = None
    active: bool = True

    def key(self) -> str:
        """Identifier in the string form used by pickers."""
        return str(self.id)
