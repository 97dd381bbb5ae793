"""Timezone lookups for the RSS and W3C formatters.

A value such as ``2011-01-02 03:04:05`` is read as wall-clock time in
the active zone, which is resolved in this order:

1. the ``tz`` argument (IANA name or ``tzinfo``),
2. ``DATEFMT_TIMEZONE`` from the configuration,
3. the process local time (honours ``TZ``).

The result is a `ZoneStamp` carrying the short abbreviation and the
signed ``±HHMM`` offset in effect at that instant.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Optional, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ..config import get_config
from ..errors import UnknownTimezoneError
from ..input_guard import DateTimeFields

logger = logging.getLogger(__name__)

TimezoneLike = Union[str, tzinfo, None]

# Spellings of zero offset that RSS readers expect as "GMT".
_GMT_ALIASES = frozenset({"GMT", "UTC", "UT", "Z"})


@dataclass(frozen=True)
class ZoneStamp:
    """Abbreviation and numeric offset of a zone at one instant."""

    abbreviation: str
    offset: str  # ±HHMM

    @property
    def w3c_offset(self) -> str:
        """Offset with a colon between hours and minutes, e.g. ``-08:00``."""
        return f"{self.offset[:3]}:{self.offset[3:5]}"


def resolve_timezone(tz: TimezoneLike = None) -> Optional[tzinfo]:
    """Return the zone to use, or ``None`` for the process local time.

    Raises:
        UnknownTimezoneError: If a zone name is not in the zone database.
    """

    if isinstance(tz, tzinfo):
        return tz
    name = tz if tz is not None else get_config().timezone
    if name is None:
        return None
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise UnknownTimezoneError(
            f"Unknown timezone: {name}", {"timezone": name}
        ) from exc


def format_offset(delta: Optional[timedelta]) -> str:
    """Render a UTC offset as ``±HHMM``; sub-minute remainders are dropped."""
    if delta is None:
        return "+0000"
    total = int(delta.total_seconds())
    sign = "-" if total < 0 else "+"
    total = abs(total)
    return f"{sign}{total // 3600:02d}{total % 3600 // 60:02d}"


def _normalize_abbreviation(name: Optional[str], offset: str) -> str:
    if not name:
        return offset
    if name.upper() in _GMT_ALIASES:
        return "GMT"
    # zoneinfo uses "+04"-style names where no letters exist; fixed
    # offsets from datetime.timezone are named "UTC-08:00".
    if name[0] in "+-" or name.upper().startswith("UTC"):
        return offset
    return name


def _localize(wall: datetime, zone: Optional[tzinfo]) -> datetime:
    if zone is None:
        return wall.astimezone()
    return wall.replace(tzinfo=zone)


def zone_stamp(fields: DateTimeFields, tz: TimezoneLike = None) -> ZoneStamp:
    """Abbreviation and offset for the instant described by ``fields``.

    Fields that do not make a real datetime (or that the platform cannot
    localize) fall back to the zone's values at the Unix epoch.
    """

    zone = resolve_timezone(tz)
    try:
        wall = datetime(
            fields.year_int,
            fields.month_int,
            fields.day_int,
            fields.hour_int,
            fields.minute_int,
            fields.second_int,
        )
        aware = _localize(wall, zone)
    except (ValueError, OverflowError, OSError) as exc:
        logger.debug("Cannot localize %r (%s); using epoch zone values", fields, exc)
        epoch = datetime.fromtimestamp(0, tz=timezone.utc)
        aware = epoch.astimezone(zone) if zone is not None else epoch.astimezone()

    offset = format_offset(aware.utcoffset())
    return ZoneStamp(
        abbreviation=_normalize_abbreviation(aware.tzname(), offset),
        offset=offset,
    )
