import datetime as dt
import json

import pytest

from footprints.schemas.snapshot import SnapshotLoadSummary
from footprints.services.snapshot_store import load_snapshot


def restaurant_record(restaurant_id, visit_ids, **overrides):
    record = {
        "id": restaurant_id,
        "name": restaurant_id.title(),
        "address": "1 Main St\n10115 Berlin\nGermany",
        "latitude": 52.5,
        "longitude": 13.4,
        "visits": [{"id": visit_id, "date": "2024-01-05", "rating": 4} for visit_id in visit_ids],
    }
    record.update(overrides)
    return record


def test_load_snapshot_skips_bad_lines(tmp_path):
    path = tmp_path / "restaurants.jsonl"
    lines = [
        json.dumps(restaurant_record("alpha", ["v1", "v2"])),
        "",
        "{not json",
        json.dumps(["not", "an", "object"]),
        json.dumps(restaurant_record("broken", ["v3"], latitude="north")),
        json.dumps(restaurant_record("dupe", ["v1"])),
        json.dumps(restaurant_record("beta", ["v4"])),
    ]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")

    snapshot, summary = load_snapshot(path)

    assert [restaurant.id for restaurant in snapshot.restaurants] == ["alpha", "beta"]
    assert snapshot.restaurants[0].visits[0].date == dt.date(2024, 1, 5)
    assert summary == SnapshotLoadSummary(loaded=2, skipped=4)


def test_load_snapshot_skips_undecodable_line(tmp_path):
    path = tmp_path / "restaurants.jsonl"
    path.write_bytes(
        json.dumps(restaurant_record("alpha", ["v1"])).encode("utf-8") + b"\n" + b"\xff\xfe{}\n"
    )

    snapshot, summary = load_snapshot(path)

    assert [restaurant.id for restaurant in snapshot.restaurants] == ["alpha"]
    assert (summary.loaded, summary.skipped) == (1, 1)


def test_load_snapshot_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_snapshot(tmp_path / "missing.jsonl")
