"""JSON adapter for raw calendar events."""

from __future__ import annotations

import json

from balance_engine.schema import RawEvent, parse_timestamp

_REQUIRED_FIELDS = ("start", "end")


def _parse_bool(value) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes"}
    return bool(value)


def _parse_item(item: dict, index: int) -> RawEvent:
    if not isinstance(item, dict):
        raise ValueError(f"Item {index}: expected an object")

    missing = [field for field in _REQUIRED_FIELDS if not item.get(field)]
    if missing:
        raise ValueError(f"Item {index}: missing required fields {missing}")

    try:
        start = parse_timestamp(item["start"])
        end = parse_timestamp(item["end"])
    except Exception as exc:  # noqa: BLE001
        raise ValueError(f"Item {index}: malformed timestamp") from exc

    attendees = item.get("attendees", 0)
    if isinstance(attendees, list):
        attendee_count = len(attendees)
    else:
        try:
            attendee_count = int(attendees or 0)
        except Exception as exc:  # noqa: BLE001
            raise ValueError(f"Item {index}: invalid attendees") from exc
    if attendee_count < 0:
        raise ValueError(f"Item {index}: invalid attendees")

    title = item.get("title") or item.get("summary") or "Untitled"

    return RawEvent(
        id=str(item.get("id") or index),
        title=str(title),
        start=start,
        end=end,
        description=str(item.get("description") or ""),
        location=str(item.get("location") or ""),
        attendee_count=attendee_count,
        is_self_created=_parse_bool(item.get("is_self_created", item.get("creator", False))),
    )


def parse(file_path: str) -> list[RawEvent]:
    """Parse JSON file into raw events.

    Accepts a list of event objects or the ``{"events": [...]}`` payload
    shape produced by a calendar fetch.
    """

    with open(file_path, encoding="utf-8") as handle:
        payload = json.load(handle)

    if isinstance(payload, dict) and "events" in payload:
        payload = payload["events"]

    if not isinstance(payload, list):
        raise ValueError("JSON payload must be a list of objects")

    return [_parse_item(item, i) for i, item in enumerate(payload, start=1)]
