"""Schemas for statistics results."""

import datetime as dt
from typing import Optional

from pydantic import BaseModel, Field

from footprints.schemas.time_range import Interval, TimeRange


class RankingEntry(BaseModel):
    model_config = {"frozen": True}

    restaurant_id: str
    restaurant_name: str
    restaurant_address: str = Field("", description="거리, 우편번호+도시, 국가 줄만 남긴 주소")
    metric: int | float = Field(..., description="방문 수, 평균 평점 또는 사진 수")


class Overview(BaseModel):
    model_config = {"frozen": True}

    total_restaurants: int = 0
    total_visits: int = Field(0, description="기간 내 방문 수")
    average_rating: Optional[float] = Field(None, description="전체 기간 기준 식당별 평균의 평균")
    most_visited: Optional[RankingEntry] = None


class CityStat(BaseModel):
    model_config = {"frozen": True}

    city: str
    count: int


class HistogramBin(BaseModel):
    model_config = {"frozen": True}

    rating: int = Field(..., ge=1, le=5)
    count: int = 0


class SeriesPoint(BaseModel):
    model_config = {"frozen": True}

    period_start: dt.date
    count: int = 0


class StatisticsReport(BaseModel):
    """Everything the statistics screen shows for one time range."""

    model_config = {"frozen": True}

    time_range: TimeRange
    today: dt.date
    interval: Interval
    overview: Overview
    top_visited: list[RankingEntry] = Field(default_factory=list)
    top_rated: list[RankingEntry] = Field(default_factory=list)
    most_photographed: Optional[RankingEntry] = None
    total_photos: int = 0
    top_cities: list[CityStat] = Field(default_factory=list)
    rating_distribution: list[HistogramBin] = Field(default_factory=list)
    visit_series: list[SeriesPoint] = Field(default_factory=list)


class TimeRangeOut(BaseModel):
    value: TimeRange
    label: str
    interval: Interval
