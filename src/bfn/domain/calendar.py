"""Calendar helpers — inclusive date ranges and month boundaries."""

from __future__ import annotations

from datetime import date, timedelta


def all_dates_from(start: date, end: date) -> list[date]:
    """Every date from *start* to *end*, both inclusive.

    Returns an empty list when *start* is after *end*.

    Examples:
        >>> len(all_dates_from(date(2023, 12, 12), date(2023, 12, 15)))
        4
    """
    if start > end:
        return []
    return [start + timedelta(days=offset) for offset in range((end - start).days + 1)]


date_range = all_dates_from


def first_day_of_month(day: date) -> date:
    return day.replace(day=1)


def last_day_of_month_ym(year: int, month: int) -> int:
    """Number of the last day in *month* of *year* (Gregorian leap rule).

    Any month number other than 2, 4, 6, 9 and 11 is treated as a 31-day
    month.
    """
    if month in (4, 6, 9, 11):
        return 30
    if month == 2:
        leap = (year % 4 == 0 and year % 100 != 0) or year % 400 == 0
        return 29 if leap else 28
    return 31


def last_day_of_month(day: date) -> date:
    return day.replace(day=last_day_of_month_ym(day.year, day.month))
