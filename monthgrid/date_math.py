"""
MonthGrid - Date Math Module.

Pure date helpers for building a month grid: date construction with
day rollover, Sunday-first week tiling, week chaining, month lengths
and time-of-day normalisation.

A week is represented only by its seven day-of-month numbers. Weeks
spanning a month boundary fall out of the rollover in make_date, so no
month-aware bookkeeping is needed here.
"""

import calendar
from datetime import datetime, timedelta
from typing import List

from monthgrid.schema import WeekRow


def days_in_month(year: int, month: int) -> int:
    """
    Returns the total number of days in the specified month.

    Args:
        year: Four-digit year.
        month: Month number (1-12).

    Returns:
        Number of days in the specified month.

    Raises:
        ValueError: If month is not in range 1-12.
    """
    if not 1 <= month <= 12:
        raise ValueError(f"Month must be between 1 and 12, got {month}")
    return calendar.monthrange(year, month)[1]


def make_date(day: int, month: int, year: int) -> datetime:
    """
    Builds a midnight datetime from day, month and year numbers.

    The day is not validated against the month length: day 0 is the
    last day of the previous month and day 32 of January is February 1.
    Grid rows rely on this to reach spill-over days.

    Args:
        day: Day number, any integer.
        month: Month number (1-12).
        year: Four-digit year.

    Returns:
        Naive datetime at 00:00:00.

    Raises:
        ValueError: If month is not in range 1-12.
    """
    if not 1 <= month <= 12:
        raise ValueError(f"Month must be between 1 and 12, got {month}")
    return datetime(year, month, 1) + timedelta(days=day - 1)


def week_dates(day: int, month: int, year: int) -> List[datetime]:
    """
    Returns the Sunday..Saturday dates of the week containing a date.

    Args:
        day: Reference day number (rolls over like make_date).
        month: Reference month number (1-12).
        year: Reference year.

    Returns:
        Seven midnight datetimes, Sunday first.
    """
    reference = make_date(day, month, year)
    # weekday() is 0 for Monday, 6 for Sunday
    sunday = reference - timedelta(days=(reference.weekday() + 1) % 7)
    return [sunday + timedelta(days=offset) for offset in range(7)]


def week_from(day: int, month: int, year: int) -> WeekRow:
    """
    Returns the day-of-month numbers of the Sunday-first week of a date.

    Example:
        >>> week_from(1, 3, 2024)
        [25, 26, 27, 28, 29, 1, 2]
    """
    return [d.day for d in week_dates(day, month, year)]


def next_week(previous_row: WeekRow, month: int, year: int) -> WeekRow:
    """
    Returns the week following a row, anchored on its last day plus one.

    The anchor is read in the given month, so chaining only stays exact
    while previous_row ends inside that month.
    """
    return week_from(previous_row[-1] + 1, month, year)


def title_case(text: str) -> str:
    """Upper-cases the first character only; the rest is left as-is."""
    if not text:
        return text
    return text[0].upper() + text[1:]


def at_midnight(value: datetime) -> datetime:
    """Zeroes hours, minutes, seconds and microseconds."""
    return value.replace(hour=0, minute=0, second=0, microsecond=0)
