"""Time window selectors."""

from enum import Enum


class TimeRange(str, Enum):
    LAST_30_DAYS = "last_30_days"
    LAST_90_DAYS = "last_90_days"
    LAST_12_MONTHS = "last_12_months"
    ALL_TIME = "all_time"

    @property
    def label(self) -> str:
        return _LABELS[self]


class Interval(str, Enum):
    """Width of one visit-series period."""

    DAY = "day"
    WEEK = "week"
    MONTH = "month"


_LABELS = {
    TimeRange.LAST_30_DAYS: "Last 30 Days",
    TimeRange.LAST_90_DAYS: "Last 90 Days",
    TimeRange.LAST_12_MONTHS: "Last 12 Months",
    TimeRange.ALL_TIME: "All Time",
}
