"""First-fit column packing of one day's events."""

from __future__ import annotations

from itertools import combinations
from typing import Iterable

from weekgrid_engine.errors import LayoutInvariantError
from weekgrid_engine.overlap import overlaps
from weekgrid_engine.schema import Event

ColumnMap = list[list[Event]]


def sort_for_packing(events: Iterable[Event]) -> list[Event]:
    """Longest events first; equal durations keep their input order."""

    return sorted(events, key=lambda event: event.duration, reverse=True)


def pack(events: Iterable[Event]) -> ColumnMap:
    """Place each event in the first column where it overlaps nothing.

    The result depends on the input order, which should come from
    :func:`sort_for_packing`. Column count is not guaranteed minimal.
    """

    columns: ColumnMap = []
    for event in events:
        for column in columns:
            if not any(overlaps(event, placed) for placed in column):
                column.append(event)
                break
        else:
            columns.append([event])
    return columns


def check_column_map(column_map: ColumnMap) -> None:
    """Raise if two events sharing a column overlap."""

    for index, column in enumerate(column_map):
        for a, b in combinations(column, 2):
            if overlaps(a, b):
                raise LayoutInvariantError(f"Column {index}: {a.event_id!r} overlaps {b.event_id!r}")
