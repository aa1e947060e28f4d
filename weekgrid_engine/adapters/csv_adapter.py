"""CSV adapter for calendar events."""

from __future__ import annotations

import csv
from datetime import datetime

from weekgrid_engine.schema import Event

_REQUIRED_FIELDS = ("id", "start", "end")


def _parse_instant(value: str, field_name: str, row_number: int) -> datetime:
    try:
        return datetime.fromisoformat(value.strip())
    except ValueError as exc:
        raise ValueError(f"Row {row_number}: malformed {field_name} timestamp") from exc


def _parse_row(row: dict, row_number: int) -> Event:
    missing = [field for field in _REQUIRED_FIELDS if not (row.get(field) or "").strip()]
    if missing:
        raise ValueError(f"Row {row_number}: missing required fields {missing}")

    payload = {
        key: value.strip()
        for key, value in row.items()
        if key not in _REQUIRED_FIELDS and key is not None and value not in (None, "")
    }

    return Event(
        event_id=row["id"].strip(),
        start=_parse_instant(row["start"], "start", row_number),
        end=_parse_instant(row["end"], "end", row_number),
        payload=payload or None,
    )


def parse(file_path: str) -> list[Event]:
    """Parse CSV file into a list of events."""

    with open(file_path, newline="", encoding="utf-8") as handle:
        reader = csv.DictReader(handle)
        if not reader.fieldnames:
            return []

        events: list[Event] = []
        for row_number, row in enumerate(reader, start=2):
            events.append(_parse_row(row, row_number))
        return events
