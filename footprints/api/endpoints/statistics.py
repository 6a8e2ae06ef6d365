"""Statistics endpoints."""

import datetime as dt
from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from footprints.core.config import settings
from footprints.models.snapshot import Snapshot
from footprints.schemas.statistics import StatisticsReport, TimeRangeOut
from footprints.schemas.time_range import TimeRange
from footprints.services.snapshot_store import load_snapshot
from footprints.services.statistics import compute_statistics
from footprints.services.time_series import interval_for

router = APIRouter(prefix="/statistics", tags=["statistics"])


@router.get("/ranges", response_model=list[TimeRangeOut])
def list_time_ranges() -> list[TimeRangeOut]:
    """Available time ranges with display labels."""
    return [
        TimeRangeOut(value=time_range, label=time_range.label, interval=interval_for(time_range))
        for time_range in TimeRange
    ]


@router.post("", response_model=StatisticsReport)
def statistics_for_snapshot(
    payload: Snapshot,
    time_range: TimeRange = TimeRange.ALL_TIME,
    today: Optional[dt.date] = Query(None, description="기준일 (기본: 서버의 오늘)"),
    limit: Optional[int] = Query(None, ge=1, le=50, description="순위/도시 목록 개수"),
) -> StatisticsReport:
    """Compute statistics for a snapshot sent in the request body."""
    return compute_statistics(payload, time_range, today or dt.date.today(), limit)


@router.get("", response_model=StatisticsReport)
def statistics_for_export(
    time_range: TimeRange = TimeRange.ALL_TIME,
    today: Optional[dt.date] = Query(None, description="기준일 (기본: 서버의 오늘)"),
    limit: Optional[int] = Query(None, ge=1, le=50, description="순위/도시 목록 개수"),
) -> StatisticsReport:
    """Compute statistics for the configured snapshot export."""
    try:
        snapshot, _summary = load_snapshot(settings.snapshot_path)
    except FileNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return compute_statistics(snapshot, time_range, today or dt.date.today(), limit)
