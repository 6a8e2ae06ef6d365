"""Time window filtering for visits."""

from __future__ import annotations

import calendar
import datetime as dt
from typing import Iterable

from footprints.models.visit import Visit
from footprints.schemas.time_range import TimeRange

WINDOW_DAYS = {
    TimeRange.LAST_30_DAYS: 30,
    TimeRange.LAST_90_DAYS: 90,
}
WINDOW_MONTHS = {
    TimeRange.LAST_12_MONTHS: 12,
}

# date.min / date.max 의 월 인덱스 (year * 12 + month - 1)
_MIN_MONTH_INDEX = dt.date.min.year * 12
_MAX_MONTH_INDEX = dt.date.max.year * 12 + 11


def add_days(day: dt.date, days: int) -> dt.date:
    """Shift by days, clamping to the supported date range."""
    try:
        return day + dt.timedelta(days=days)
    except OverflowError:
        return dt.date.min if days < 0 else dt.date.max


def add_months(day: dt.date, months: int) -> dt.date:
    """Shift by calendar months, clamping to the last day of the target month."""
    index = day.year * 12 + (day.month - 1) + months
    if index < _MIN_MONTH_INDEX:
        return dt.date.min
    if index > _MAX_MONTH_INDEX:
        return dt.date.max
    year, month = divmod(index, 12)
    month += 1
    last_day = calendar.monthrange(year, month)[1]
    return dt.date(year, month, min(day.day, last_day))


def window_cutoff(time_range: TimeRange, today: dt.date) -> dt.date | None:
    """Return the earliest date inside the window, or None for all time."""
    if time_range in WINDOW_DAYS:
        return add_days(today, -WINDOW_DAYS[time_range])
    if time_range in WINDOW_MONTHS:
        return add_months(today, -WINDOW_MONTHS[time_range])
    return None


def filter_visits(visits: Iterable[Visit], time_range: TimeRange, today: dt.date) -> list[Visit]:
    """Keep visits dated on or after the window cutoff, preserving order."""
    cutoff = window_cutoff(time_range, today)
    if cutoff is None:
        return list(visits)
    return [visit for visit in visits if visit.date >= cutoff]
