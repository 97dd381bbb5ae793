"""Calendar and timezone helpers used by the formatters."""

from .calendar_facts import (
    day_of_week,
    day_of_week_to_text,
    english_ordinal,
    month_to_text,
    ordinal_suffix,
)
from .timezone import ZoneStamp, resolve_timezone, zone_stamp

__all__ = [
    "day_of_week",
    "day_of_week_to_text",
    "english_ordinal",
    "month_to_text",
    "ordinal_suffix",
    "ZoneStamp",
    "resolve_timezone",
    "zone_stamp",
]
