"""Core data schema for week-grid layout."""

from dataclasses import asdict, dataclass, field
from datetime import datetime, timedelta
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from weekgrid_engine.config import LayoutConfig


@dataclass(frozen=True)
class Event:
    """Time-bound event handed to the layout engine."""

    event_id: str
    start: datetime
    end: datetime
    payload: Optional[dict] = field(default=None, compare=False)

    @property
    def duration(self) -> timedelta:
        return self.end - self.start


@dataclass(frozen=True)
class Geometry:
    """1-based grid-line coordinates of one event box."""

    event_id: str
    row_start: int
    row_end: int
    column_start: int
    column_end: int


@dataclass
class DayLayout:
    """Packed geometry for one visible day."""

    day_index: int
    column_count: int
    row_count: int
    geometries: list[Geometry] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return self.column_count == 0


@dataclass
class WeekLayout:
    """Per-day layouts for one visible window."""

    config: "LayoutConfig"
    days: list[DayLayout]

    def geometry_for(self, event_id: str) -> Optional[Geometry]:
        for day in self.days:
            for geometry in day.geometries:
                if geometry.event_id == event_id:
                    return geometry
        return None

    def to_dict(self) -> dict:
        return {
            "num_days": len(self.days),
            "start_hour": self.config.start_hour,
            "end_hour": self.config.end_hour,
            "interval_minutes": self.config.interval_minutes,
            "days": [asdict(day) for day in self.days],
        }
