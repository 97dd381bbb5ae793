"""Calendar lookups used by the formatters.

Small pure tables and arithmetic: day of week for a (year, month, day),
month and weekday names, and English ordinals. None of these touch the
``datetime`` module, so out-of-range input degrades to a blank name or
a meaningless weekday instead of raising.
"""

from __future__ import annotations

from typing import Optional

__all__ = [
    "MONTH_NAMES",
    "DAY_NAMES",
    "day_of_week",
    "day_of_week_to_text",
    "month_to_text",
    "ordinal_suffix",
    "english_ordinal",
]

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

# Monday first, matching datetime.date.weekday().
DAY_NAMES = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)

# Sakamoto's month offsets, indexed by month - 1.
_MONTH_OFFSETS = (0, 3, 2, 5, 0, 3, 5, 1, 4, 6, 2, 4)


def day_of_week(year: int, month: int, day: int) -> Optional[int]:
    """Return the weekday index (Monday == 0) for a Gregorian date.

    Only the month is bounds-checked, because it indexes a table; an
    impossible day such as February 31 still produces an index.
    ``None`` is returned for a month outside 1..12.
    """

    if not 1 <= month <= 12:
        return None
    if month < 3:
        year -= 1
    sunday_based = (
        year + year // 4 - year // 100 + year // 400 + _MONTH_OFFSETS[month - 1] + day
    ) % 7
    return (sunday_based - 1) % 7


def day_of_week_to_text(index: Optional[int]) -> str:
    """Full English weekday name for ``index``, or ``""`` when unknown."""
    if index is None or not 0 <= index < len(DAY_NAMES):
        return ""
    return DAY_NAMES[index]


def month_to_text(month: int) -> str:
    """Full English month name for ``month`` (1-12), or ``""`` when out of range."""
    if not 1 <= month <= 12:
        return ""
    return MONTH_NAMES[month - 1]


def ordinal_suffix(day: int) -> str:
    """English ordinal suffix for a day number.

    Example:
        >>> [ordinal_suffix(n) for n in (1, 2, 3, 4, 11, 12, 13, 21, 22, 23)]
        ['st', 'nd', 'rd', 'th', 'th', 'th', 'th', 'st', 'nd', 'rd']
    """

    if 11 <= abs(day) % 100 <= 13:
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(abs(day) % 10, "th")


def english_ordinal(day: int) -> str:
    """Day number followed by its suffix, e.g. ``22`` -> ``'22nd'``."""
    return f"{day}{ordinal_suffix(day)}"
