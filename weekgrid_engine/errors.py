"""Layout failures."""

from __future__ import annotations


class LayoutError(ValueError):
    """Base class for rejected layout input."""


class InvalidInterval(LayoutError):
    def __init__(self, event_id: str):
        super().__init__(f"Event {event_id!r}: end must be after start")
        self.event_id = event_id


class DuplicateEventId(LayoutError):
    def __init__(self, event_id: str):
        super().__init__(f"Event id {event_id!r} appears more than once")
        self.event_id = event_id


class TooManyEvents(LayoutError):
    def __init__(self, day_index: int, count: int, limit: int):
        super().__init__(f"Day {day_index}: {count} events exceeds limit of {limit}")
        self.day_index = day_index
        self.count = count
        self.limit = limit


class LayoutInvariantError(RuntimeError):
    """Packer or span extender produced an impossible result."""
