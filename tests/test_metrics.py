from datetime import datetime

from balance_engine.metrics import compute_metrics
from balance_engine.schema import CATEGORIES, NormalizedEvent


def test_compute_metrics_empty():
    metrics = compute_metrics([])
    assert metrics["total_events"] == 0
    assert metrics["total_hours"] == 0.0
    assert set(metrics["hours_by_category"]) == set(CATEGORIES)


def test_compute_metrics_by_category():
    start = datetime(2025, 1, 1, 9)
    events = [
        NormalizedEvent("Meeting", start, start, 1.5, "work", True, True),
        NormalizedEvent("Call", start, start, 0.5, "work", True, False),
        NormalizedEvent("Sleep", start, start, 8.0, "sleep", False, False),
        NormalizedEvent("Oops", start, start, -1.0, "other", False, False),
    ]
    metrics = compute_metrics(events)
    assert metrics["total_events"] == 4
    assert metrics["total_hours"] == 9.0
    assert metrics["hours_by_category"]["work"] == 2.0
    assert metrics["hours_by_category"]["sleep"] == 8.0
    assert metrics["hours_by_category"]["other"] == -1.0
    assert metrics["hours_by_category"]["meal"] == 0.0
    assert metrics["working_hours_share"] == 0.5
    assert metrics["with_attendees_share"] == 0.25
