"""Local time-allocation summary of normalized events."""

from __future__ import annotations

import numpy as np

from balance_engine.schema import CATEGORIES, NormalizedEvent


def compute_metrics(events: list[NormalizedEvent]) -> dict:
    """Compute total hours, per-category hours and working-hours/attendee shares."""

    if not events:
        return {
            "total_events": 0,
            "total_hours": 0.0,
            "hours_by_category": {category: 0.0 for category in CATEGORIES},
            "working_hours_share": 0.0,
            "with_attendees_share": 0.0,
        }

    durations = np.asarray([event.duration_hours for event in events], dtype=float)
    categories = np.asarray([event.category for event in events])
    working = np.asarray([event.is_working_hours for event in events], dtype=bool)
    attended = np.asarray([event.has_attendees for event in events], dtype=bool)

    hours_by_category = {category: float(durations[categories == category].sum()) for category in CATEGORIES}

    return {
        "total_events": len(events),
        "total_hours": float(durations.sum()),
        "hours_by_category": hours_by_category,
        "working_hours_share": float(working.mean()),
        "with_attendees_share": float(attended.mean()),
    }
