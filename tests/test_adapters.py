import json
from datetime import datetime, timezone

import pytest

from balance_engine.adapters.csv_adapter import parse as parse_csv
from balance_engine.adapters.json_adapter import parse as parse_json


def test_csv_parse_success(tmp_path):
    path = tmp_path / "events.csv"
    path.write_text(
        "id,title,start,end,description,location,attendees,is_self_created\n"
        "a,Gym,2025-01-01T18:00:00,2025-01-01T19:00:00,,Downtown,0,true\n"
        "b,,2025-01-02T09:00:00,2025-01-02T10:00:00,Sync,,3,false\n",
        encoding="utf-8",
    )
    events = parse_csv(str(path))
    assert len(events) == 2
    assert events[0].location == "Downtown"
    assert events[0].is_self_created is True
    assert events[1].title == "Untitled"
    assert events[1].attendee_count == 3


def test_csv_parse_invalid_row(tmp_path):
    path = tmp_path / "events.csv"
    path.write_text("title,start,end\nGym,bad,2025-01-01T10:00:00\n", encoding="utf-8")
    with pytest.raises(ValueError):
        parse_csv(str(path))


def test_csv_parse_missing_end(tmp_path):
    path = tmp_path / "events.csv"
    path.write_text("title,start\nGym,2025-01-01T10:00:00\n", encoding="utf-8")
    with pytest.raises(ValueError, match="Row 2"):
        parse_csv(str(path))


def test_json_parse_fetch_payload(tmp_path):
    path = tmp_path / "events.json"
    payload = {
        "events": [
            {
                "id": "x",
                "summary": "Standup",
                "start": "2025-01-01T09:00:00Z",
                "end": "2025-01-01T09:15:00Z",
                "attendees": 5,
                "creator": True,
            },
            {"title": "Holiday", "start": "2025-01-03", "end": "2025-01-04", "attendees": ["a@x.com"]},
        ]
    }
    path.write_text(json.dumps(payload), encoding="utf-8")
    events = parse_json(str(path))
    assert len(events) == 2
    assert events[0].title == "Standup"
    assert events[0].start == datetime(2025, 1, 1, 9, tzinfo=timezone.utc)
    assert events[0].is_self_created is True
    assert events[1].start == datetime(2025, 1, 3)
    assert events[1].attendee_count == 1


def test_json_parse_malformed(tmp_path):
    path = tmp_path / "events.json"
    path.write_text(json.dumps([{"title": "a", "start": "bad", "end": "2025-01-01"}]), encoding="utf-8")
    with pytest.raises(ValueError):
        parse_json(str(path))


def test_json_parse_rejects_non_list(tmp_path):
    path = tmp_path / "events.json"
    path.write_text(json.dumps({"items": []}), encoding="utf-8")
    with pytest.raises(ValueError):
        parse_json(str(path))
