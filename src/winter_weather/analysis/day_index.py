"""Winter day index: a shared x-axis for seasons with different calendar dates.

Offset 0 is December 1 of a winter's start year, 30 is December 31,
31 is January 1 of the following year and 61 is January 31. Every winter
maps onto the same 62 offsets, so values for the same day of the season
line up across years.
"""

from __future__ import annotations

import math
from datetime import date, datetime, timedelta

from winter_weather.schemas import MonthFilter

DECEMBER_DAYS = 31
WINDOW_DAYS = 62

_SECONDS_PER_DAY = 86400

_RANGES: dict[MonthFilter, range] = {
    MonthFilter.DEC: range(0, DECEMBER_DAYS),
    MonthFilter.JAN: range(DECEMBER_DAYS, WINDOW_DAYS),
    MonthFilter.BOTH: range(0, WINDOW_DAYS),
}

_TICKS: dict[MonthFilter, tuple[int, ...]] = {
    MonthFilter.DEC: (0, 5, 10, 15, 20, 25, 30),
    MonthFilter.JAN: (31, 36, 41, 46, 51, 56, 61),
    MonthFilter.BOTH: (0, 10, 20, 30, 31, 41, 51, 61),
}


def _as_datetime(value: date | datetime | str) -> datetime:
    if isinstance(value, str):
        return datetime.fromisoformat(value)
    if isinstance(value, datetime):
        return value
    return datetime(value.year, value.month, value.day)


def day_offset(value: date | datetime | str, start_year: int) -> int:
    """
    Whole days from December 1 of ``start_year`` to ``value``.

    Dates count from midnight. A value with a time of day is rounded to the
    nearest whole day (half rounds up), so a timestamp a few hours off
    midnight still lands on its own day. Timezone-aware values are compared
    against midnight in their own timezone.

    Offsets outside [0, 61] are returned unchanged; callers decide what to do
    with them.

    Args:
        value: A date, datetime, or ISO-8601 string (``"2024-12-01"``).
        start_year: Calendar year of the winter's December.
    """
    moment = _as_datetime(value)
    dec1 = datetime(start_year, 12, 1, tzinfo=moment.tzinfo)
    days = (moment - dec1).total_seconds() / _SECONDS_PER_DAY
    return math.floor(days + 0.5)


def offset_to_date(offset: int, start_year: int) -> date:
    """Calendar date for an offset within a winter (inverse of ``day_offset``)."""
    return date(start_year, 12, 1) + timedelta(days=offset)


def is_december(offset: int) -> bool:
    """Whether an offset falls in the December half of the window."""
    return offset < DECEMBER_DAYS


def day_range(month_filter: MonthFilter) -> range:
    """Offsets shown under a month filter: Dec [0, 31), Jan [31, 62), both [0, 62)."""
    return _RANGES[MonthFilter(month_filter)]


def tick_offsets(month_filter: MonthFilter) -> tuple[int, ...]:
    """X-axis tick positions for a month filter."""
    return _TICKS[MonthFilter(month_filter)]
