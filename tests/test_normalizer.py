from datetime import datetime, timedelta, timezone

import pytest

from balance_engine.adapters.csv_adapter import parse as parse_csv
from balance_engine.normalizer import calculate_duration, categorize_event, is_working_hours, normalize, normalize_all
from balance_engine.schema import CATEGORIES, RawEvent


def make_event(title="Event", start="2025-01-01T10:00:00", end="2025-01-01T11:00:00", **kwargs):
    return RawEvent(
        id=kwargs.pop("id", "e1"),
        title=title,
        start=datetime.fromisoformat(start),
        end=datetime.fromisoformat(end),
        **kwargs,
    )


@pytest.mark.parametrize("title", ["gym", "GYM session", "Morning Gym", "gYm"])
def test_gym_is_fitness_regardless_of_case(title):
    assert categorize_event(title) == "fitness"


@pytest.mark.parametrize(
    "title, expected",
    [
        ("Sleep", "sleep"),
        ("Bedtime routine", "sleep"),
        ("Workout", "fitness"),
        ("Team meeting", "work"),
        ("Client call", "work"),
        ("Breakfast", "meal"),
        ("Study group", "education"),
        ("Family visit", "personal"),
        ("Dentist", "other"),
        ("", "other"),
    ],
)
def test_categorize_keywords(title, expected):
    assert categorize_event(title) == expected


def test_categorize_priority_order():
    assert categorize_event("work lunch") == "work"
    assert categorize_event("Gym then dinner") == "fitness"
    # "workout" contains "work" but fitness is tested first
    assert categorize_event("Workout meeting") == "fitness"
    assert categorize_event("Sleep study") == "sleep"


def test_description_does_not_change_category():
    assert categorize_event("Dentist", "checkup before the gym") == "other"
    assert categorize_event("Gym", None) == "fitness"


def test_working_hours_weekday_bounds_inclusive():
    wednesday = datetime(2025, 1, 1)
    assert wednesday.weekday() == 2
    assert is_working_hours(wednesday.replace(hour=9))
    assert is_working_hours(wednesday.replace(hour=18, minute=59))
    assert not is_working_hours(wednesday.replace(hour=8, minute=59))
    assert not is_working_hours(wednesday.replace(hour=19))


@pytest.mark.parametrize("day", [datetime(2025, 1, 4), datetime(2025, 1, 5)])
def test_weekend_is_never_working_hours(day):
    for hour in range(24):
        assert not is_working_hours(day + timedelta(hours=hour))


def test_duration_in_hours():
    start = datetime(2025, 1, 1, 9, 0)
    assert calculate_duration(start, start + timedelta(minutes=90)) == 1.5


def test_normalize_keeps_negative_duration():
    event = make_event(title="Backwards", start="2025-01-01T12:00:00", end="2025-01-01T10:30:00")
    normalized = normalize(event)
    assert normalized.duration_hours == -1.5


def test_normalize_record():
    event = make_event(title="Gym", start="2025-01-01T18:00:00", end="2025-01-01T19:00:00", attendee_count=2)
    normalized = normalize(event)
    assert normalized.title == "Gym"
    assert normalized.category == "fitness"
    assert normalized.duration_hours == 1.0
    assert normalized.is_working_hours is True
    assert normalized.has_attendees is True
    assert normalized.start == event.start and normalized.end == event.end


def test_normalize_all_one_to_one_in_order():
    events = [make_event(title=t, id=str(i)) for i, t in enumerate(["Sleep", "Nap", "Lunch", ""])]
    normalized = normalize_all(events)
    assert [n.title for n in normalized] == ["Sleep", "Nap", "Lunch", ""]
    assert all(n.category in CATEGORIES for n in normalized)
    assert all(n.has_attendees is False for n in normalized)


def test_mixed_offset_and_naive_timestamps_do_not_raise(tmp_path):
    path = tmp_path / "events.csv"
    path.write_text(
        "id,title,start,end\n"
        "e1,Gym,2025-01-01T09:00:00Z,2025-01-01T10:00:00\n"
        "e2,Call,2025-01-01T09:00:00,2025-01-01T08:30:00+00:00\n",
        encoding="utf-8",
    )
    first, second = normalize_all(parse_csv(str(path)))
    assert first.duration_hours == 1.0
    assert first.category == "fitness"
    assert second.duration_hours == -0.5


def test_duration_uses_aware_side_timezone():
    aware_start = datetime(2025, 1, 1, 9, tzinfo=timezone(timedelta(hours=-5)))
    assert calculate_duration(aware_start, datetime(2025, 1, 1, 11)) == 2.0
