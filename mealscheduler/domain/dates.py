"""
Date and time helpers for the meal booking calendar.

Pure functions without shared state. Every predicate compares against
"now", which callers may pin through the ``now`` keyword argument.
"""

import re
from typing import List, Optional

import pendulum
from pendulum import DateTime

from .exceptions import InvalidTimeFormat
from .models import DateRange, TimeSlotOption

# Meals can be booked up to this many months ahead
BOOKING_WINDOW_MONTHS = 3

# Number of months shown by the multi-month calendar picker
CALENDAR_VIEW_MONTHS = 6

# Bookable dinner times
FIRST_SLOT = "16:30"
LAST_SLOT = "18:30"
SLOT_STEP_MINUTES = 30

TIME_PATTERN = re.compile(r"(\d{1,2}):(\d{2})")
PHONE_PATTERN = re.compile(r"(\d{3})(\d{3})(\d{4})")

# Any date without a DST transition; time labels must not depend on today
REFERENCE_DATE = pendulum.datetime(2000, 1, 1)


def _now(now: Optional[DateTime]) -> DateTime:
    return now if now is not None else pendulum.now()


def format_date(date: DateTime, pattern: str = "MMMM Do, YYYY") -> str:
    """Format a date with a pendulum token pattern."""
    return date.format(pattern)


def is_future_date(date: DateTime, *, now: Optional[DateTime] = None) -> bool:
    """Return True if the date is strictly after now."""
    return date > _now(now)


def is_past_date(date: DateTime, *, now: Optional[DateTime] = None) -> bool:
    """Return True if the date is strictly before now."""
    return date < _now(now)


def is_within_booking_range(date: DateTime, *, now: Optional[DateTime] = None) -> bool:
    """
    Check if a date is inside the booking window.

    The window is the closed interval [now, now + 3 months].
    """
    start = _now(now)
    window = DateRange(start=start, end=start.add(months=BOOKING_WINDOW_MONTHS))
    return window.contains(date)


def _split_time(time: str) -> tuple[int, int]:
    match = TIME_PATTERN.fullmatch(time.strip()) if isinstance(time, str) else None
    if not match:
        raise InvalidTimeFormat(time)

    hours, minutes = int(match.group(1)), int(match.group(2))
    if hours > 23 or minutes > 59:
        raise InvalidTimeFormat(time)

    return hours, minutes


def parse_time_string(time: str, *, now: Optional[DateTime] = None) -> DateTime:
    """
    Parse an ``HH:MM`` string into today's date at that time.

    Args:
        time: 24-hour time of day, e.g. ``"17:30"``
        now: Reference instant supplying the date

    Returns:
        DateTime on the reference date with seconds zeroed

    Raises:
        InvalidTimeFormat: If the string is not a valid time of day
    """
    hours, minutes = _split_time(time)
    return _now(now).set(hour=hours, minute=minutes, second=0, microsecond=0)


def format_time_from_24_to_12(time: str) -> str:
    """Convert ``"HH:MM"`` to a 12-hour ``"h:mm A"`` label."""
    return parse_time_string(time, now=REFERENCE_DATE).format("h:mm A")


def get_calendar_view_dates(anchor: Optional[DateTime] = None) -> DateRange:
    """
    Get the range covered by the 6-month calendar view.

    Starts at the first instant of the anchor's month and ends on the last
    day before the month six months later, at 23:59:59.999.
    """
    start = _now(anchor).start_of("month")
    end = (
        start.add(months=CALENDAR_VIEW_MONTHS)
        .subtract(days=1)
        .set(hour=23, minute=59, second=59, microsecond=999000)
    )
    return DateRange(start=start, end=end)


def get_time_options() -> List[TimeSlotOption]:
    """Enumerate the bookable meal times from 4:30 PM to 6:30 PM."""
    current = parse_time_string(FIRST_SLOT, now=REFERENCE_DATE)
    end = parse_time_string(LAST_SLOT, now=REFERENCE_DATE)

    options: List[TimeSlotOption] = []
    while current <= end:
        options.append(
            TimeSlotOption(value=current.format("HH:mm"), label=current.format("h:mm A"))
        )
        current = current.add(minutes=SLOT_STEP_MINUTES)

    return options


def format_phone_number(phone_number: str) -> str:
    """
    Format a phone number as ``(XXX) XXX-XXXX``.

    Anything that does not clean down to exactly ten digits is returned
    unchanged.
    """
    match = PHONE_PATTERN.fullmatch(parse_phone_number(phone_number))
    if match:
        return f"({match.group(1)}) {match.group(2)}-{match.group(3)}"
    return phone_number


def parse_phone_number(formatted_number: str) -> str:
    """Strip everything but digits."""
    return re.sub(r"\D", "", formatted_number)


def missionary_type_color(missionary_type: str) -> str:
    """Badge color for a missionary companionship type."""
    return "primary" if missionary_type == "elders" else "amber-500"
