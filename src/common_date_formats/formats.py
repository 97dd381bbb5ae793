"""Common date formats made simple.

Each function takes a date or datetime in the MySQL layout
(``2011-01-02`` or ``2011-01-02 01:02:03``) and returns a string.
Empty input and the zero dates ``0000-00-00`` / ``0000-00-00 00:00:00``
return ``""``. Other input is not validated unless ``strict`` is set
(argument or ``DATEFMT_STRICT``).

Nothing is imported by default; pick functions by name or take them
all at once:

    from common_date_formats.formats import *

    format_date_w3c("2011-01-02 03:04:05", tz="America/Los_Angeles")
    format_date_rss("2003-06-03 09:39:21", tz="UTC")
    format_date_usenglish_long_ampm("1956-12-22 21:23:00")
"""

from __future__ import annotations

from typing import Callable, Dict, Optional

from .config import get_config
from .errors import UnknownFormatError
from .input_guard import DateTimeFields, split_datetime
from .utils import (
    day_of_week,
    day_of_week_to_text,
    english_ordinal,
    month_to_text,
    zone_stamp,
)
from .utils.timezone import TimezoneLike

__all__ = [
    "format_date_integer",
    "format_date_rss",
    "format_date_usenglish",
    "format_date_usenglish_long_ampm",
    "format_date_cms_publishdate",
    "format_date_w3c",
]


def _fields(value: Optional[str], strict: Optional[bool]) -> Optional[DateTimeFields]:
    if strict is None:
        strict = get_config().strict
    return split_datetime(value, strict=strict)


def _hour12(hour: int) -> tuple[int, str]:
    ampm = "AM"
    if hour >= 12:
        hour -= 12
        ampm = "PM"
    return hour or 12, ampm


def format_date_integer(value: Optional[str], *, strict: Optional[bool] = None) -> str:
    """Reduce a datetime to a digit string useful in comparisons.

        if int(format_date_integer(a)) > int(format_date_integer(b)):
            ...

    Pass full datetimes: a date-only value gives an 8-digit key that
    does not compare correctly against 14-digit ones.
    Every ``-`` and ``:`` separated token is joined, including any beyond
    the usual three.
    """

    fields = _fields(value, strict)
    if fields is None:
        return ""
    return "".join(fields.date_tokens()) + "".join(fields.time_tokens())


def format_date_rss(
    value: Optional[str], *, tz: TimezoneLike = None, strict: Optional[bool] = None
) -> str:
    """Format a date for an RSS feed, e.g. ``Tue, 03 June 2003 09:39:21 GMT``."""

    fields = _fields(value, strict)
    if fields is None:
        return ""
    weekday = day_of_week_to_text(
        day_of_week(fields.year_int, fields.month_int, fields.day_int)
    )
    stamp = zone_stamp(fields, tz)
    return (
        f"{weekday[:3]}, {fields.day_int:02d} {month_to_text(fields.month_int)} "
        f"{fields.year_int} {fields.hour_int:02d}:{fields.minute_int:02d}:"
        f"{fields.second_int:02d} {stamp.abbreviation}"
    )


def format_date_usenglish(value: Optional[str], *, strict: Optional[bool] = None) -> str:
    """US newspaper style date, e.g. ``Dec 22nd, 1956``. Any time part is ignored."""

    fields = _fields(value, strict)
    if fields is None:
        return ""
    return (
        f"{month_to_text(fields.month_int)[:3]} "
        f"{english_ordinal(fields.day_int)}, {fields.year_int}"
    )


def format_date_usenglish_long_ampm(
    value: Optional[str], *, strict: Optional[bool] = None
) -> str:
    """Same as `format_date_usenglish` plus a 12-hour time.

    Example:
        >>> format_date_usenglish_long_ampm("1956-12-22 21:23:00")
        'Dec 22nd, 1956 09:23 PM'
    """

    fields = _fields(value, strict)
    if fields is None:
        return ""
    hour, ampm = _hour12(fields.hour_int)
    return (
        f"{month_to_text(fields.month_int)[:3]} "
        f"{english_ordinal(fields.day_int)}, {fields.year_int} "
        f"{hour:02d}:{fields.minute_int:02d} {ampm}"
    )


def format_date_cms_publishdate(
    value: Optional[str], *, strict: Optional[bool] = None
) -> str:
    """Narrow ``MM-DD-YYYY HH:MM AM`` form for CRUD list screens."""

    fields = _fields(value, strict)
    if fields is None:
        return ""
    hour, ampm = _hour12(fields.hour_int)
    return (
        f"{fields.month_int:02d}-{fields.day_int:02d}-{fields.year_int} "
        f"{hour:02d}:{fields.minute_int:02d} {ampm}"
    )


def format_date_w3c(
    value: Optional[str], *, tz: TimezoneLike = None, strict: Optional[bool] = None
) -> str:
    """W3C / ISO 8601 datetime with a colon in the UTC offset.

    Example:
        >>> format_date_w3c("2011-01-02 03:04:05", tz="America/Los_Angeles")
        '2011-01-02T03:04:05-08:00'
    """

    fields = _fields(value, strict)
    if fields is None:
        return ""
    stamp = zone_stamp(fields, tz)
    return (
        f"{fields.year_int}-{fields.month_int:02d}-{fields.day_int:02d}"
        f"T{fields.hour_int:02d}:{fields.minute_int:02d}:{fields.second_int:02d}"
        f"{stamp.w3c_offset}"
    )


FORMATTERS: Dict[str, Callable[..., str]] = {
    "integer": format_date_integer,
    "rss": format_date_rss,
    "usenglish": format_date_usenglish,
    "usenglish_long_ampm": format_date_usenglish_long_ampm,
    "cms_publishdate": format_date_cms_publishdate,
    "w3c": format_date_w3c,
}

# Styles whose output depends on the active timezone.
ZONED_STYLES = frozenset({"rss", "w3c"})


def format_date(
    value: Optional[str],
    style: str,
    *,
    tz: TimezoneLike = None,
    strict: Optional[bool] = None,
) -> str:
    """Format ``value`` with the formatter registered under ``style``.

    Raises:
        UnknownFormatError: If ``style`` is not a key of `FORMATTERS`.
    """

    try:
        formatter = FORMATTERS[style]
    except KeyError:
        raise UnknownFormatError(
            f"Unknown format style: {style}", {"available": sorted(FORMATTERS)}
        ) from None
    if style in ZONED_STYLES:
        return formatter(value, tz=tz, strict=strict)
    return formatter(value, strict=strict)
