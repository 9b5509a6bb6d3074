"""Date utility functions for harvestsheet."""
from datetime import date, timedelta
from typing import List, NamedTuple, Optional, Tuple
import calendar


class Period(NamedTuple):
    """An inclusive range of calendar days."""
    start: date
    end: date

    @property
    def label(self) -> str:
        """Get the display label, e.g. "March 16 to 31".

        Returns:
            Label using the month name of the start date
        """
        return f"{calendar.month_name[self.start.month]} {self.start.day} to {self.end.day}"


def to_date_string(dt: date) -> str:
    """Format a date as YYYY-MM-DD.

    Args:
        dt: Date to format

    Returns:
        Zero-padded date string
    """
    return f"{dt.year:04}-{dt.month:02}-{dt.day:02}"


def shift_month(year: int, month: int, offset: int) -> Tuple[int, int]:
    """Move a (year, month) pair by a number of months.

    Args:
        year: Year
        month: Month (1-12)
        offset: Number of months to move, may be negative

    Returns:
        Tuple of (year, month)
    """
    index = year * 12 + (month - 1) + offset
    return index // 12, index % 12 + 1


def last_day_of_month(year: int, month: int) -> date:
    """Get the last day of a month.

    This is the day before the first of the following month, so it rolls
    over years and works for every month length.

    Args:
        year: Year
        month: Month (1-12)

    Returns:
        Date of the last day of the month
    """
    next_year, next_month = shift_month(year, month, 1)
    return date(next_year, next_month, 1) - timedelta(days=1)


def first_half(year: int, month: int) -> Period:
    """Get the 1st to 15th of a month."""
    return Period(date(year, month, 1), date(year, month, 15))


def second_half(year: int, month: int) -> Period:
    """Get the 16th to the last day of a month."""
    return Period(date(year, month, 16), last_day_of_month(year, month))


def get_timesheet_periods(today: Optional[date] = None) -> List[Period]:
    """Get the billing periods a timesheet can be fetched for.

    In the second half of a month the two halves of the current month are
    offered. Until the 15th the second half of the previous month is offered
    as well, in front of the current month's halves.

    Args:
        today: Reference date (defaults to the current date)

    Returns:
        List of 2 or 3 contiguous periods in chronological order
    """
    today = today or date.today()
    year, month = today.year, today.month

    if today.day > 15:
        return [first_half(year, month), second_half(year, month)]

    prev_year, prev_month = shift_month(year, month, -1)
    return [
        second_half(prev_year, prev_month),
        first_half(year, month),
        second_half(year, month),
    ]


def timesheet_period_choices(today: Optional[date] = None) -> List[Tuple[str, Period]]:
    """Get the billing periods as labeled choices for a prompt.

    Args:
        today: Reference date (defaults to the current date)

    Returns:
        List of (label, period) tuples
    """
    return [(period.label, period) for period in get_timesheet_periods(today)]
