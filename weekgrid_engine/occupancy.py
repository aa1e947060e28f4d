"""Grid occupancy helpers for checking and previewing a day layout."""

from __future__ import annotations

from itertools import combinations
from string import ascii_uppercase
from typing import Iterable, Optional

import numpy as np

from weekgrid_engine.overlap import overlaps
from weekgrid_engine.schema import DayLayout, Event, Geometry


def _clipped_rows(geometry: Geometry, rows: int) -> tuple[int, int]:
    return max(geometry.row_start - 1, 0), min(geometry.row_end - 1, rows)


def occupancy_matrix(day: DayLayout) -> np.ndarray:
    """Count the boxes covering each visible cell of a day's grid."""

    matrix = np.zeros((day.row_count, day.column_count), dtype=int)
    for geometry in day.geometries:
        top, bottom = _clipped_rows(geometry, day.row_count)
        if top < bottom:
            matrix[top:bottom, geometry.column_start - 1 : geometry.column_end - 1] += 1
    return matrix


def _boxes_intersect(a: Geometry, b: Geometry) -> bool:
    rows = a.row_start < b.row_end and b.row_start < a.row_end
    cols = a.column_start < b.column_end and b.column_start < a.column_end
    return rows and cols


def box_collisions(day: DayLayout, events: Iterable[Event]) -> list[tuple[str, str]]:
    """Return id pairs of time-overlapping events whose boxes intersect."""

    by_id = {event.event_id: event for event in events}
    collisions = []
    for a, b in combinations(day.geometries, 2):
        if overlaps(by_id[a.event_id], by_id[b.event_id]) and _boxes_intersect(a, b):
            collisions.append((a.event_id, b.event_id))
    return collisions


def text_preview(day: DayLayout, labels: Optional[dict[str, str]] = None) -> str:
    """Render a day as text, one line per row and one character per column.

    Empty cells are ``.``; cells covered by more than one box are ``#``.
    Events missing from ``labels`` are drawn as ``?``.
    """

    if day.is_empty:
        return ""

    if labels is None:
        labels = {
            geometry.event_id: ascii_uppercase[index % len(ascii_uppercase)]
            for index, geometry in enumerate(day.geometries)
        }

    grid = np.full((day.row_count, day.column_count), ".", dtype="<U1")
    for geometry in day.geometries:
        top, bottom = _clipped_rows(geometry, day.row_count)
        grid[top:bottom, geometry.column_start - 1 : geometry.column_end - 1] = labels.get(geometry.event_id, "?")[:1]
    grid[occupancy_matrix(day) > 1] = "#"
    return "\n".join("".join(row) for row in grid)
