"""Gap-free visit counts per period, for the visits-over-time chart."""

from __future__ import annotations

import datetime as dt
from bisect import bisect_left, bisect_right
from typing import Iterable

from footprints.models.visit import Visit
from footprints.schemas.statistics import SeriesPoint
from footprints.schemas.time_range import Interval, TimeRange
from footprints.services.time_window import add_days, add_months, window_cutoff

INTERVALS = {
    TimeRange.LAST_30_DAYS: Interval.DAY,
    TimeRange.LAST_90_DAYS: Interval.WEEK,
    TimeRange.LAST_12_MONTHS: Interval.MONTH,
    TimeRange.ALL_TIME: Interval.MONTH,
}


def interval_for(time_range: TimeRange) -> Interval:
    return INTERVALS[time_range]


def period_start(start: dt.date, interval: Interval, step: int) -> dt.date:
    """Start of the ``step``-th period counted from ``start``.

    Months are always added to ``start`` itself so a series that begins on the
    31st keeps landing on month ends instead of drifting to the 28th.
    """
    if interval is Interval.DAY:
        return add_days(start, step)
    if interval is Interval.WEEK:
        return add_days(start, 7 * step)
    return add_months(start, step)


def series_start(dates: list[dt.date], time_range: TimeRange, today: dt.date) -> dt.date:
    """First period start for a range.

    Windowed ranges start at their cutoff. All time starts on the first day of
    the month holding the earliest visit, or of the current month if there are
    no visits at all or every visit lies after today.
    """
    cutoff = window_cutoff(time_range, today)
    if cutoff is not None:
        return cutoff
    earliest = min(min(dates), today) if dates else today
    return earliest.replace(day=1)


def bucket_visits(visits: Iterable[Visit], time_range: TimeRange, today: dt.date) -> list[SeriesPoint]:
    """Count visits per period from the range start up to the period holding ``today``.

    Periods are half-open, [start, next_start), so a visit on a boundary lands
    in the later period. Every period is emitted, including empty ones.
    """
    dates = sorted(visit.date for visit in visits)
    interval = interval_for(time_range)
    start = series_start(dates, time_range, today)

    points: list[SeriesPoint] = []
    step = 0
    current = start
    while current <= today:
        following = period_start(start, interval, step + 1)
        if following <= current:
            # date.max 에 막혀 더 진행할 수 없는 마지막 구간
            count = bisect_right(dates, today) - bisect_left(dates, current)
            points.append(SeriesPoint(period_start=current, count=count))
            break
        count = bisect_left(dates, following) - bisect_left(dates, current)
        points.append(SeriesPoint(period_start=current, count=count))
        step += 1
        current = following
    return points
