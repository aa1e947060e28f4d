"""Wall-clock to grid-row mapping."""

from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from weekgrid_engine.schema import Event


def intervals_per_hour(interval_minutes: int) -> int:
    return 60 // interval_minutes


def row_index(
    instant: datetime,
    start_hour: int,
    interval_minutes: int = 5,
    anchor: Optional[date] = None,
) -> int:
    """Return the 1-based grid row of an instant.

    Instants outside the visible band are not clamped. With an ``anchor``
    date, every whole day after it adds 24 hours, so midnight of the next
    day lands below the last row instead of wrapping to the top.
    """

    hour = instant.hour
    if anchor is not None:
        hour += (instant.date() - anchor).days * 24
    return (hour - start_hour) * intervals_per_hour(interval_minutes) + instant.minute // interval_minutes + 1


def row_span(event: Event, start_hour: int, interval_minutes: int = 5) -> tuple[int, int]:
    """Return ``(row_start, row_end)`` for an event, at least one row tall."""

    anchor = event.start.date()
    row_start = row_index(event.start, start_hour, interval_minutes, anchor)
    row_end = row_index(event.end, start_hour, interval_minutes, anchor)
    return row_start, max(row_end, row_start + 1)


def row_count(start_hour: int, end_hour: int, interval_minutes: int = 5) -> int:
    """Number of grid rows in the visible band."""

    return (end_hour - start_hour) * intervals_per_hour(interval_minutes)
