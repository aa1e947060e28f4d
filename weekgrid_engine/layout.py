"""Week layout orchestration."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from itertools import chain
from typing import Iterable, Mapping, Optional

from weekgrid_engine.bucketing import bucketize
from weekgrid_engine.config import LayoutConfig
from weekgrid_engine.errors import DuplicateEventId, InvalidInterval, TooManyEvents
from weekgrid_engine.grid import row_count, row_span
from weekgrid_engine.packing import check_column_map, pack, sort_for_packing
from weekgrid_engine.schema import DayLayout, Event, Geometry, WeekLayout
from weekgrid_engine.span import extent

logger = logging.getLogger(__name__)


def _validate_day(events: list[Event], config: LayoutConfig, day_index: int) -> None:
    for event in events:
        if event.end <= event.start:
            raise InvalidInterval(event.event_id)
    limit = config.max_events_per_day
    if limit is not None and len(events) > limit:
        raise TooManyEvents(day_index, len(events), limit)


def _check_unique_ids(events: list[Event]) -> None:
    seen = set()
    for event in events:
        if event.event_id in seen:
            raise DuplicateEventId(event.event_id)
        seen.add(event.event_id)


def layout_day(events: Iterable[Event], config: LayoutConfig, day_index: int = 0) -> DayLayout:
    """Pack one day's events into columns and compute each event's box."""

    events = list(events)
    rows = row_count(config.start_hour, config.end_hour, config.interval_minutes)
    if not events:
        return DayLayout(day_index=day_index, column_count=0, row_count=rows)

    _validate_day(events, config, day_index)

    column_map = pack(sort_for_packing(events))
    check_column_map(column_map)

    geometries: list[Geometry] = []
    for column_index, column in enumerate(column_map):
        for event in column:
            row_start, row_end = row_span(event, config.start_hour, config.interval_minutes)
            geometries.append(
                Geometry(
                    event_id=event.event_id,
                    row_start=row_start,
                    row_end=row_end,
                    column_start=column_index + 1,
                    column_end=extent(event, column_map, column_index) + 1,
                )
            )

    logger.debug("Day %d: %d events in %d columns", day_index, len(events), len(column_map))
    return DayLayout(day_index=day_index, column_count=len(column_map), row_count=rows, geometries=geometries)


def layout_week(events: Iterable[Event], config: Optional[LayoutConfig] = None) -> WeekLayout:
    """Lay out every visible day of the window.

    Days are independent; with ``config.max_workers > 1`` they run on a
    thread pool. Output is ordered by day index either way.
    """

    events = list(events)
    config = config or LayoutConfig()
    _check_unique_ids(events)

    buckets = bucketize(events, config.num_days, config.first_weekday, config.week_start_date)
    indices = range(config.num_days)

    if config.max_workers > 1:
        with ThreadPoolExecutor(max_workers=min(config.max_workers, config.num_days)) as pool:
            days = list(pool.map(lambda index: layout_day(buckets[index], config, index), indices))
    else:
        days = [layout_day(buckets[index], config, index) for index in indices]

    return WeekLayout(config=config, days=days)


def layout_layers(
    layers: Mapping[str, Iterable[Event]],
    config: Optional[LayoutConfig] = None,
) -> dict[str, WeekLayout]:
    """Lay out several event layers over one shared grid.

    Each layer is packed on its own. Without an explicit config, the hour
    band is derived from the events of all layers together.
    """

    materialized = {name: list(events) for name, events in layers.items()}
    if config is None:
        config = LayoutConfig.for_events(chain.from_iterable(materialized.values()))
    return {name: layout_week(events, config) for name, events in materialized.items()}
