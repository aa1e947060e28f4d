"""Rightward span extension for packed events."""

from __future__ import annotations

from weekgrid_engine.errors import LayoutInvariantError
from weekgrid_engine.overlap import overlaps
from weekgrid_engine.packing import ColumnMap
from weekgrid_engine.schema import Event


def extent(event: Event, column_map: ColumnMap, column_index: int) -> int:
    """Return the exclusive, 0-based column where the event's box must stop.

    Scans the columns right of ``column_index`` and stops at the first one
    holding an overlapping event; otherwise the box reaches the day's edge.
    """

    if not 0 <= column_index < len(column_map):
        raise LayoutInvariantError(f"Column {column_index} does not exist ({len(column_map)} columns)")

    end_index = len(column_map)
    for index in range(column_index + 1, len(column_map)):
        if any(overlaps(other, event) for other in column_map[index]):
            end_index = index
            break

    if end_index <= column_index:
        raise LayoutInvariantError(f"Event {event.event_id!r} has an empty column span")
    return end_index
