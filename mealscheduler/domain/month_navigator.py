"""
Month cursor used by the booking calendar.
"""

from typing import List, Optional

import pendulum
from pendulum import DateTime

from .dates import is_future_date, is_past_date
from .models import SelectOption

MONTH_LABEL_FORMAT = "MMMM YYYY"
MONTH_VALUE_FORMAT = "YYYY-MM"


class MonthNavigator:
    """
    Tracks the month currently shown by the calendar.

    The cursor always sits on the first instant of a month; start and end
    dates are derived from it on every access.
    """

    def __init__(self, initial: Optional[DateTime] = None):
        self._current_month = (initial or pendulum.now()).start_of("month")

    @property
    def current_month(self) -> DateTime:
        return self._current_month

    @property
    def start_date(self) -> DateTime:
        return self._current_month.start_of("month")

    @property
    def end_date(self) -> DateTime:
        return self._current_month.end_of("month")

    def next_month(self) -> None:
        self._current_month = self._current_month.add(months=1).start_of("month")

    def prev_month(self) -> None:
        self._current_month = self._current_month.subtract(months=1).start_of("month")

    def is_in_future(self, date: DateTime, *, now: Optional[DateTime] = None) -> bool:
        """Strictly after the start of today."""
        today = (now or pendulum.now()).start_of("day")
        return is_future_date(date, now=today)

    def is_in_past(self, date: DateTime, *, now: Optional[DateTime] = None) -> bool:
        """Strictly before the start of today."""
        today = (now or pendulum.now()).start_of("day")
        return is_past_date(date, now=today)

    def is_today(self, date: DateTime, *, now: Optional[DateTime] = None) -> bool:
        return date.is_same_day(now or pendulum.now())

    @staticmethod
    def is_in_range(date: DateTime, start: DateTime, end: DateTime) -> bool:
        """Inclusive on both ends."""
        return not date < start and not date > end

    def get_month_display(self) -> str:
        return self._current_month.format(MONTH_LABEL_FORMAT)

    def get_next_months(self, count: int, *, now: Optional[DateTime] = None) -> List[SelectOption]:
        """
        List ``count`` consecutive months starting from the current date.

        The list is anchored at the real current date, not at the navigable
        cursor.
        """
        current_date = now or pendulum.now()
        months: List[SelectOption] = []

        for offset in range(count):
            month_date = current_date.add(months=offset)
            months.append(
                SelectOption(
                    value=month_date.format(MONTH_VALUE_FORMAT),
                    label=month_date.format(MONTH_LABEL_FORMAT),
                )
            )

        return months
