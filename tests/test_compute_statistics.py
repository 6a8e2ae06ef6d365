import importlib.util
import json
import sys
from pathlib import Path

import pytest

SCRIPT = Path(__file__).resolve().parent.parent / "scripts" / "compute_statistics.py"


@pytest.fixture(scope="module")
def cli():
    spec = importlib.util.spec_from_file_location("compute_statistics", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def export(tmp_path):
    path = tmp_path / "restaurants.jsonl"
    records = [
        {
            "id": "a",
            "name": "A",
            "address": "12 Oak St\n10115 Berlin\nGermany",
            "latitude": 52.5,
            "longitude": 13.4,
            "visits": [
                {"id": "v1", "date": "2024-01-05", "rating": 5},
                {"id": "v2", "date": "2024-02-10", "rating": 3},
            ],
        },
        {
            "id": "b",
            "name": "B",
            "address": "Hauptstr. 5\n80331 Munich",
            "latitude": 48.1,
            "longitude": 11.6,
            "visits": [{"id": "v3", "date": "2024-01-20", "rating": 4}],
        },
    ]
    path.write_text("\n".join(json.dumps(record) for record in records), encoding="utf-8")
    return path


def test_json_output(cli, export, monkeypatch, capsys):
    monkeypatch.setattr(
        sys, "argv", ["compute_statistics.py", "--file", str(export), "--range", "all_time", "--today", "2024-02-20", "--json"]
    )
    cli.main()

    body = json.loads(capsys.readouterr().out)
    assert body["time_range"] == "all_time"
    assert body["overview"]["total_visits"] == 3
    assert body["visit_series"] == [
        {"period_start": "2024-01-01", "count": 2},
        {"period_start": "2024-02-01", "count": 1},
    ]


def test_text_output(cli, export, monkeypatch, capsys):
    monkeypatch.setattr(
        sys, "argv", ["compute_statistics.py", "--file", str(export), "--range", "last_30_days", "--today", "2024-02-20"]
    )
    cli.main()

    out = capsys.readouterr().out
    assert "Last 30 Days (as of 2024-02-20)" in out
    assert "Most visited: A (1 visits)" in out
    assert "12 Oak St, 10115 Berlin, Germany" in out


def test_missing_file_exits(cli, tmp_path, monkeypatch):
    monkeypatch.setattr(sys, "argv", ["compute_statistics.py", "--file", str(tmp_path / "missing.jsonl")])
    with pytest.raises(SystemExit):
        cli.main()
