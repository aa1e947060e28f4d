"""Interval overlap predicate."""

from __future__ import annotations

from weekgrid_engine.schema import Event


def overlaps(a: Event, b: Event) -> bool:
    """Half-open intersection test; back-to-back events do not overlap."""

    return a.start < b.end and b.start < a.end
