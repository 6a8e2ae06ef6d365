"""Rating histogram."""

from __future__ import annotations

import math
from collections import Counter
from typing import Iterable

from footprints.schemas.statistics import HistogramBin

RATING_BINS = range(1, 6)


def build_rating_histogram(ratings: Iterable[float]) -> list[HistogramBin]:
    """Count ratings per star, truncating (4.7 -> 4). Out-of-range ratings are dropped."""
    counts: Counter[int] = Counter()
    for rating in ratings:
        if not math.isfinite(rating):
            continue
        star = int(rating)
        if star in RATING_BINS:
            counts[star] += 1
    return [HistogramBin(rating=star, count=counts[star]) for star in RATING_BINS]
