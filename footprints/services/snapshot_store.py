"""Read-only JSONL snapshot export (one restaurant per line)."""

from __future__ import annotations

import datetime as dt
import json
import logging
from pathlib import Path
from typing import Iterator, Optional

from pydantic import ValidationError

from footprints.models.restaurant import Restaurant
from footprints.models.snapshot import Snapshot
from footprints.schemas.snapshot import SnapshotLoadSummary

logger = logging.getLogger(__name__)


def iter_jsonl(path: Path) -> Iterator[tuple[int, Optional[dict]]]:
    """JSONL 파일을 한 줄씩 읽어 (줄 번호, dict)로 yield. 깨진 줄은 dict 대신 None."""
    with path.open("rb") as fp:
        for line_no, raw_line in enumerate(fp, start=1):
            raw_line = raw_line.strip()
            if not raw_line:
                continue
            try:
                # UnicodeDecodeError와 JSONDecodeError 모두 ValueError
                record = json.loads(raw_line.decode("utf-8"))
            except ValueError:
                logger.warning("%s:%d is not valid UTF-8 JSON, skipping", path, line_no)
                yield line_no, None
                continue
            if not isinstance(record, dict):
                logger.warning("%s:%d is not a JSON object, skipping", path, line_no)
                yield line_no, None
                continue
            yield line_no, record


def load_snapshot(path: str | Path) -> tuple[Snapshot, SnapshotLoadSummary]:
    """Build a snapshot from a JSONL export.

    Raises FileNotFoundError when the export does not exist. Unreadable lines,
    records that fail validation, and records whose visit ids repeat an
    earlier restaurant's are skipped and counted.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"snapshot export not found: {path}")

    restaurants: list[Restaurant] = []
    seen_visit_ids: set[str] = set()
    skipped = 0

    for line_no, record in iter_jsonl(path):
        if record is None:
            skipped += 1
            continue
        try:
            restaurant = Restaurant.model_validate(record)
        except ValidationError as exc:
            skipped += 1
            logger.warning("%s:%d skipped restaurant %r: %s", path, line_no, record.get("id"), exc.errors()[0]["msg"])
            continue

        visit_ids = [visit.id for visit in restaurant.visits]
        if len(set(visit_ids)) != len(visit_ids) or seen_visit_ids.intersection(visit_ids):
            skipped += 1
            logger.warning("%s:%d skipped restaurant %r: duplicate visit id", path, line_no, restaurant.id)
            continue

        seen_visit_ids.update(visit_ids)
        restaurants.append(restaurant)

    snapshot = Snapshot(restaurants=tuple(restaurants), taken_at=dt.datetime.now())
    summary = SnapshotLoadSummary(loaded=len(restaurants), skipped=skipped)
    logger.info("loaded %d restaurants from %s (%d skipped)", summary.loaded, path, summary.skipped)
    return snapshot, summary
