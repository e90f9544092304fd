"""CSV adapter for raw calendar events."""

from __future__ import annotations

import csv

from balance_engine.schema import RawEvent, parse_timestamp

_REQUIRED_FIELDS = ("start", "end")
_TRUE_VALUES = {"1", "true", "yes"}


def _parse_row(row: dict, row_number: int) -> RawEvent:
    missing = [field for field in _REQUIRED_FIELDS if not row.get(field)]
    if missing:
        raise ValueError(f"Row {row_number}: missing required fields {missing}")

    try:
        start = parse_timestamp(row["start"])
        end = parse_timestamp(row["end"])
    except Exception as exc:  # noqa: BLE001
        raise ValueError(f"Row {row_number}: malformed timestamp") from exc

    attendees_raw = row.get("attendees")
    attendee_count = 0
    if attendees_raw not in (None, ""):
        try:
            attendee_count = int(attendees_raw)
        except Exception as exc:  # noqa: BLE001
            raise ValueError(f"Row {row_number}: invalid attendees") from exc
        if attendee_count < 0:
            raise ValueError(f"Row {row_number}: invalid attendees")

    title = (row.get("title") or row.get("summary") or "").strip() or "Untitled"
    self_created = row.get("is_self_created") or row.get("creator") or ""

    return RawEvent(
        id=(row.get("id") or "").strip() or str(row_number),
        title=title,
        start=start,
        end=end,
        description=(row.get("description") or "").strip(),
        location=(row.get("location") or "").strip(),
        attendee_count=attendee_count,
        is_self_created=self_created.strip().lower() in _TRUE_VALUES,
    )


def parse(file_path: str) -> list[RawEvent]:
    """Parse CSV file into a list of raw events."""

    with open(file_path, newline="", encoding="utf-8") as handle:
        reader = csv.DictReader(handle)
        if not reader.fieldnames:
            return []

        events: list[RawEvent] = []
        for row_number, row in enumerate(reader, start=2):
            events.append(_parse_row(row, row_number))
        return events
