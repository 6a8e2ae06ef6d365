"""Expose schemas for easier import."""

from footprints.schemas.snapshot import SnapshotLoadSummary  # noqa: F401
from footprints.schemas.statistics import (  # noqa: F401
    CityStat,
    HistogramBin,
    Overview,
    RankingEntry,
    SeriesPoint,
    StatisticsReport,
    TimeRangeOut,
)
from footprints.schemas.time_range import Interval, TimeRange  # noqa: F401
