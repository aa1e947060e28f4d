"""JSON adapter for calendar events."""

from __future__ import annotations

import json
from datetime import datetime

from weekgrid_engine.schema import Event

_REQUIRED_FIELDS = ("id", "start", "end")


def _parse_item(item: dict, index: int) -> Event:
    if not isinstance(item, dict):
        raise ValueError(f"Item {index}: expected an object")

    missing = [field for field in _REQUIRED_FIELDS if item.get(field) in (None, "")]
    if missing:
        raise ValueError(f"Item {index}: missing required fields {missing}")

    try:
        start = datetime.fromisoformat(str(item["start"]))
        end = datetime.fromisoformat(str(item["end"]))
    except ValueError as exc:
        raise ValueError(f"Item {index}: malformed timestamp") from exc

    payload = {key: value for key, value in item.items() if key not in _REQUIRED_FIELDS}

    return Event(
        event_id=str(item["id"]).strip(),
        start=start,
        end=end,
        payload=payload or None,
    )


def parse(file_path: str) -> list[Event]:
    """Parse JSON file into events."""

    with open(file_path, encoding="utf-8") as handle:
        payload = json.load(handle)

    if not isinstance(payload, list):
        raise ValueError("JSON payload must be a list of objects")

    return [_parse_item(item, i) for i, item in enumerate(payload, start=1)]
