"""Statistics aggregation over a restaurant snapshot."""

from __future__ import annotations

import datetime as dt
import logging
from collections import Counter

from footprints.core.config import settings
from footprints.models.restaurant import Restaurant
from footprints.models.snapshot import Snapshot
from footprints.models.visit import Visit
from footprints.schemas.statistics import (
    CityStat,
    HistogramBin,
    Overview,
    RankingEntry,
    SeriesPoint,
    StatisticsReport,
)
from footprints.schemas.time_range import TimeRange
from footprints.services.address import extract_city
from footprints.services.histogram import build_rating_histogram
from footprints.services.time_series import bucket_visits, interval_for
from footprints.services.time_window import filter_visits

logger = logging.getLogger(__name__)


def ranking_key(entry: RankingEntry) -> tuple:
    """Highest metric first, then name, then id so equal metrics have a fixed order."""
    return (-entry.metric, entry.restaurant_name, entry.restaurant_id)


def city_key(stat: CityStat) -> tuple:
    """Most visits first, then city name."""
    return (-stat.count, stat.city)


def _limit(items: list, n: int | None) -> list:
    if n is None:
        return items
    return items[: max(n, 0)]


class AggregationEngine:
    """Derived statistics for one snapshot, time range and day.

    The in-window visit set is computed once in the constructor; every public
    method is a read-only view over it and never raises. "No data" comes back
    as ``None`` or an empty list.

    Usage:
        engine = AggregationEngine(snapshot, TimeRange.LAST_90_DAYS, today=dt.date.today())
        engine.overview()
        engine.top_visited(5)
    """

    def __init__(self, snapshot: Snapshot, time_range: TimeRange, today: dt.date) -> None:
        self.snapshot = snapshot
        self.time_range = time_range
        self.today = today

        # 식당별 기간 내 방문 (방문 0건인 식당 포함), 집계용 전체 목록은 스냅샷 평탄화 후 필터
        self._windowed: list[tuple[Restaurant, list[Visit]]] = [
            (restaurant, filter_visits(restaurant.visits, time_range, today))
            for restaurant in snapshot.restaurants
        ]
        self._visits: list[Visit] = filter_visits(snapshot.all_visits(), time_range, today)

    def _visited(self) -> list[tuple[Restaurant, list[Visit]]]:
        return [(restaurant, visits) for restaurant, visits in self._windowed if visits]

    def _ranking(self, metrics: list[tuple[Restaurant, int | float]]) -> list[RankingEntry]:
        entries = [
            RankingEntry(
                restaurant_id=restaurant.id,
                restaurant_name=restaurant.name,
                restaurant_address=restaurant.formatted_address,
                metric=metric,
            )
            for restaurant, metric in metrics
        ]
        return sorted(entries, key=ranking_key)

    def overview(self) -> Overview:
        # 평균 평점은 기간 필터와 무관하게 전체 방문 기준
        rated = [restaurant.average_rating for restaurant in self.snapshot.restaurants if restaurant.visits]
        average = sum(rated) / len(rated) if rated else None

        leaders = self.top_visited(1)
        return Overview(
            total_restaurants=len(self.snapshot.restaurants),
            total_visits=len(self._visits),
            average_rating=average,
            most_visited=leaders[0] if leaders else None,
        )

    def top_visited(self, n: int | None = None) -> list[RankingEntry]:
        """Restaurants by number of in-window visits."""
        ranking = self._ranking([(restaurant, len(visits)) for restaurant, visits in self._visited()])
        return _limit(ranking, n)

    def top_rated(self, n: int | None = None) -> list[RankingEntry]:
        """Restaurants by mean rating of their in-window visits only."""
        ranking = self._ranking(
            [
                (restaurant, sum(visit.rating for visit in visits) / len(visits))
                for restaurant, visits in self._visited()
            ]
        )
        return _limit(ranking, n)

    def most_photographed(self) -> RankingEntry | None:
        ranking = self._ranking(
            [
                (restaurant, sum(visit.photo_count for visit in visits))
                for restaurant, visits in self._visited()
            ]
        )
        if not ranking or ranking[0].metric == 0:
            return None
        return ranking[0]

    def total_photos(self) -> int:
        return sum(visit.photo_count for visit in self._visits)

    def city_rollup(self, n: int | None = None) -> list[CityStat]:
        counts: Counter[str] = Counter()
        for restaurant, visits in self._visited():
            counts[extract_city(restaurant.address)] += len(visits)
        stats = sorted((CityStat(city=city, count=count) for city, count in counts.items()), key=city_key)
        return _limit(stats, n)

    def rating_distribution(self) -> list[HistogramBin]:
        return build_rating_histogram(visit.rating for visit in self._visits)

    def visit_series(self) -> list[SeriesPoint]:
        return bucket_visits(self._visits, self.time_range, self.today)

    def report(self, limit: int | None = None) -> StatisticsReport:
        """Bundle every view; leaderboards and cities are cut to ``limit``."""
        limit = settings.leaderboard_size if limit is None else limit
        report = StatisticsReport(
            time_range=self.time_range,
            today=self.today,
            interval=interval_for(self.time_range),
            overview=self.overview(),
            top_visited=self.top_visited(limit),
            top_rated=self.top_rated(limit),
            most_photographed=self.most_photographed(),
            total_photos=self.total_photos(),
            top_cities=self.city_rollup(limit),
            rating_distribution=self.rating_distribution(),
            visit_series=self.visit_series(),
        )
        logger.debug(
            "statistics range=%s today=%s restaurants=%d in_window_visits=%d",
            self.time_range.value,
            self.today.isoformat(),
            len(self.snapshot.restaurants),
            len(self._visits),
        )
        return report


def compute_statistics(
    snapshot: Snapshot,
    time_range: TimeRange,
    today: dt.date,
    limit: int | None = None,
) -> StatisticsReport:
    """Return the full report for one snapshot."""
    return AggregationEngine(snapshot, time_range, today).report(limit)
