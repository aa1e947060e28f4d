"""Per-day event bucketing."""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Iterable, Optional

from weekgrid_engine.schema import Event

logger = logging.getLogger(__name__)


def day_index(instant: datetime, first_weekday: int = 0, week_start_date: Optional[date] = None) -> int:
    """Map an instant onto a visible-day index (first visible day is 0)."""

    if week_start_date is not None:
        return (instant.date() - week_start_date).days
    return (instant.weekday() - first_weekday) % 7


def bucketize(
    events: Iterable[Event],
    num_days: int,
    first_weekday: int = 0,
    week_start_date: Optional[date] = None,
) -> list[list[Event]]:
    """Group events by the day they start on.

    Always returns ``num_days`` buckets, empty ones included. Events whose
    day falls outside the window are left out.
    """

    buckets: list[list[Event]] = [[] for _ in range(num_days)]
    for event in events:
        index = day_index(event.start, first_weekday, week_start_date)
        if not 0 <= index < num_days:
            logger.debug("Event %r on day %d is outside the %d-day window", event.event_id, index, num_days)
            continue
        buckets[index].append(event)
    return buckets
