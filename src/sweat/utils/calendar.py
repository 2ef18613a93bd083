# src/sweat/utils/calendar.py
"""Day-of-year and minute-of-year arithmetic."""

from __future__ import annotations

from typing import Final

from sweat.errors import InvalidDate

MINUTES_PER_DAY: Final = 1440

# Days elapsed before the first of each month
CUMULATIVE_DAYS: Final = (0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)
CUMULATIVE_DAYS_LEAP: Final = (0, 31, 60, 91, 121, 152, 182, 213, 244, 274, 305, 335)


def is_leap_year(year: int) -> bool:
    """Gregorian leap-year rule."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_year(leap_year: bool) -> int:
    return 366 if leap_year else 365


def days_in_month(month: int, leap_year: bool) -> int:
    """Length of ``month`` (1-12), derived from the cumulative table.

    Raises:
        InvalidDate: If month is outside 1-12
    """
    if not 1 <= month <= 12:
        raise InvalidDate(month, 0, field="month")
    table = CUMULATIVE_DAYS_LEAP if leap_year else CUMULATIVE_DAYS
    end = table[month] if month < 12 else days_in_year(leap_year)
    return end - table[month - 1]


def day_of_year(month: int, day: int, leap_year: bool) -> int:
    """Convert a month/day pair to a 1-based day-of-year.

    Args:
        month: Month, 1-12
        day: Day of month, 1-based
        leap_year: Whether the year has a February 29th

    Returns:
        Day-of-year in [1, 366]

    Raises:
        InvalidDate: If the month or the day of month does not exist
    """
    if not 1 <= month <= 12:
        raise InvalidDate(month, day, field="month")
    if not 1 <= day <= days_in_month(month, leap_year):
        raise InvalidDate(month, day, field="day")
    table = CUMULATIVE_DAYS_LEAP if leap_year else CUMULATIVE_DAYS
    return day + table[month - 1]


def minute_of_year(day_of_year: int, hour: int, minute: int) -> int:
    """Absolute minute offset from January 1st, 00:00."""
    return (day_of_year - 1) * MINUTES_PER_DAY + hour * 60 + minute
