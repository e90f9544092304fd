"""Raw calendar event normalization."""

from __future__ import annotations

from datetime import datetime

from balance_engine.schema import NormalizedEvent, RawEvent

# Tested in order, first match wins. Sets overlap ("work lunch"), so order matters.
_CATEGORY_KEYWORDS = (
    ("sleep", ("sleep", "bed")),
    ("fitness", ("gym", "workout", "fitness")),
    ("work", ("work", "meeting", "call")),
    ("meal", ("lunch", "dinner", "breakfast", "meal")),
    ("education", ("class", "study", "school")),
    ("personal", ("personal", "family", "friend")),
)

_WORKDAYS = range(0, 5)
_WORK_START_HOUR = 9
_WORK_END_HOUR = 18


def calculate_duration(start: datetime, end: datetime) -> float:
    """Return event length in hours; end before start gives a negative value.

    A naive side is read in the other side's timezone.
    """

    if start.tzinfo is None and end.tzinfo is not None:
        start = start.replace(tzinfo=end.tzinfo)
    elif end.tzinfo is None and start.tzinfo is not None:
        end = end.replace(tzinfo=start.tzinfo)
    return (end - start).total_seconds() / 3600.0


def categorize_event(title: str, description: str | None = "") -> str:
    """Assign a category from title keywords, falling back to ``other``.

    ``description`` is accepted for callers holding the full event but does
    not affect the outcome; only the title is matched.
    """

    lower_title = (title or "").lower()
    for category, keywords in _CATEGORY_KEYWORDS:
        if any(keyword in lower_title for keyword in keywords):
            return category
    return "other"


def is_working_hours(start: datetime) -> bool:
    """Monday to Friday, 9:00 through the 18:00 hour inclusive."""

    return start.weekday() in _WORKDAYS and _WORK_START_HOUR <= start.hour <= _WORK_END_HOUR


def normalize(event: RawEvent) -> NormalizedEvent:
    """Derive duration, category and time-of-day flags for one raw event."""

    return NormalizedEvent(
        title=event.title,
        start=event.start,
        end=event.end,
        duration_hours=calculate_duration(event.start, event.end),
        category=categorize_event(event.title, event.description),
        is_working_hours=is_working_hours(event.start),
        has_attendees=event.attendee_count > 0,
    )


def normalize_all(events: list[RawEvent]) -> list[NormalizedEvent]:
    return [normalize(event) for event in events]
