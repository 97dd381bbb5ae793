"""Input guard shared by every formatter.

Values arrive in the MySQL layout, ``YYYY-MM-DD`` or
``YYYY-MM-DD HH:MM:SS``. Empty input and the zero-date sentinels mean
"no date" and short-circuit to an empty result. Everything else is
split into raw string tokens without validation unless strict mode is
requested.

Usage example:
    fields = split_datetime("2011-01-02 03:04:05")
    fields.year_int, fields.hour_int  # (2011, 3)
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Tuple

from .errors import InvalidDateError

ZERO_DATE = "0000-00-00"
ZERO_DATETIME = "0000-00-00 00:00:00"

_LEADING_INT_RE = re.compile(r"\s*([+-]?\d+)")
_STRICT_RE = re.compile(r"\d{4}-\d{2}-\d{2}( \d{2}:\d{2}:\d{2})?")


def _leading_int(token: Optional[str]) -> int:
    """Numeric value of a token's leading digits; 0 when there are none."""
    if not token:
        return 0
    m = _LEADING_INT_RE.match(token)
    return int(m.group(1)) if m else 0


@dataclass(frozen=True)
class DateTimeFields:
    """Raw tokens of a date/datetime value.

    Every ``-`` and ``:`` separated token is kept, even beyond the usual
    three. ``time_parts`` is ``None`` when the value carried only a date.
    """

    date_parts: Tuple[str, ...]
    time_parts: Optional[Tuple[str, ...]] = None

    @property
    def has_time(self) -> bool:
        return self.time_parts is not None

    def _date(self, index: int) -> str:
        return self.date_parts[index] if index < len(self.date_parts) else ""

    def _time(self, index: int) -> Optional[str]:
        if not self.has_time:
            return None
        return self.time_parts[index] if index < len(self.time_parts) else ""

    @property
    def year(self) -> str:
        return self._date(0)

    @property
    def month(self) -> str:
        return self._date(1)

    @property
    def day(self) -> str:
        return self._date(2)

    @property
    def hour(self) -> Optional[str]:
        return self._time(0)

    @property
    def minute(self) -> Optional[str]:
        return self._time(1)

    @property
    def second(self) -> Optional[str]:
        return self._time(2)

    @property
    def year_int(self) -> int:
        return _leading_int(self.year)

    @property
    def month_int(self) -> int:
        return _leading_int(self.month)

    @property
    def day_int(self) -> int:
        return _leading_int(self.day)

    @property
    def hour_int(self) -> int:
        return _leading_int(self.hour)

    @property
    def minute_int(self) -> int:
        return _leading_int(self.minute)

    @property
    def second_int(self) -> int:
        return _leading_int(self.second)

    def date_tokens(self) -> list[str]:
        return list(self.date_parts)

    def time_tokens(self) -> list[str]:
        return list(self.time_parts) if self.has_time else []


def is_empty_date(value: Optional[str]) -> bool:
    """True for absent input and the zero-date sentinels."""
    return not value or value in (ZERO_DATETIME, ZERO_DATE)


def validate_datetime(value: str) -> None:
    """Reject anything that is not a real ``YYYY-MM-DD[ HH:MM:SS]`` value.

    Raises:
        InvalidDateError: If the layout or the calendar/clock values are wrong.
    """

    if not _STRICT_RE.fullmatch(value):
        raise InvalidDateError(
            "Expected YYYY-MM-DD or YYYY-MM-DD HH:MM:SS", {"value": value}
        )
    layout = "%Y-%m-%d %H:%M:%S" if " " in value else "%Y-%m-%d"
    try:
        datetime.strptime(value, layout)
    except ValueError as exc:
        raise InvalidDateError(str(exc), {"value": value}) from exc


def split_datetime(value: Optional[str], *, strict: bool = False) -> Optional[DateTimeFields]:
    """Split a date/datetime string into its tokens.

    Args:
        value: The input value; may be empty or ``None``.
        strict: Validate the value before splitting.

    Returns:
        ``None`` for "no date" input, otherwise the raw tokens.

    Raises:
        InvalidDateError: In strict mode, for malformed values.
    """

    if is_empty_date(value):
        return None
    if strict:
        validate_datetime(value)

    parts = value.split()
    date_part = parts[0] if parts else ""
    time_part = parts[1] if len(parts) > 1 else None

    return DateTimeFields(
        date_parts=tuple(date_part.split("-")),
        time_parts=tuple(time_part.split(":")) if time_part is not None else None,
    )
