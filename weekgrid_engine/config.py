"""Layout configuration and visible-band helpers."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable, Optional

from weekgrid_engine.schema import Event

DEFAULT_START_HOUR = 8
DEFAULT_END_HOUR = 20
DAYS_IN_WEEK = 7
DAYS_IN_WORK_WEEK = 5


def num_days_for(work_week: bool) -> int:
    """Return the number of visible days for a work week or a full week."""

    return DAYS_IN_WORK_WEEK if work_week else DAYS_IN_WEEK


def _end_hour(event: Event) -> int:
    if event.end.date() > event.start.date():
        return 24
    return event.end.hour


def visible_hours(
    events: Iterable[Event],
    default: tuple[int, int] = (DEFAULT_START_HOUR, DEFAULT_END_HOUR),
) -> tuple[int, int]:
    """Derive the visible hour band with one hour of padding on either side."""

    events = list(events)
    if not events:
        return default

    start_hour = max(0, min(event.start.hour for event in events) - 1)
    end_hour = min(max(_end_hour(event) for event in events) + 1, 24)
    return start_hour, max(end_hour, start_hour + 1)


@dataclass(frozen=True)
class LayoutConfig:
    """Per-call layout settings."""

    num_days: int = DAYS_IN_WORK_WEEK
    start_hour: int = DEFAULT_START_HOUR
    end_hour: int = DEFAULT_END_HOUR
    interval_minutes: int = 5
    first_weekday: int = 0
    week_start_date: Optional[date] = None
    max_events_per_day: Optional[int] = None
    max_workers: int = 1

    def __post_init__(self) -> None:
        if not 1 <= self.num_days <= DAYS_IN_WEEK:
            raise ValueError(f"num_days must be between 1 and {DAYS_IN_WEEK}, got {self.num_days}")
        if not 0 <= self.start_hour < self.end_hour <= 24:
            raise ValueError(f"invalid hour band [{self.start_hour}, {self.end_hour})")
        if self.interval_minutes <= 0 or 60 % self.interval_minutes:
            raise ValueError(f"interval_minutes must divide 60, got {self.interval_minutes}")
        if not 0 <= self.first_weekday < DAYS_IN_WEEK:
            raise ValueError(f"first_weekday must be between 0 and 6, got {self.first_weekday}")
        if self.max_events_per_day is not None and self.max_events_per_day <= 0:
            raise ValueError("max_events_per_day must be positive")
        if self.max_workers < 1:
            raise ValueError("max_workers must be at least 1")

    @classmethod
    def for_events(cls, events: Iterable[Event], work_week: bool = True, **overrides) -> "LayoutConfig":
        """Build a config whose hour band fits the given events."""

        start_hour, end_hour = visible_hours(events)
        options = {"num_days": num_days_for(work_week), "start_hour": start_hour, "end_hour": end_hour}
        options.update(overrides)
        return cls(**options)
