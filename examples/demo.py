"""Demo script for weekgrid-engine."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from weekgrid_engine.adapters.csv_adapter import parse
from weekgrid_engine.config import LayoutConfig
from weekgrid_engine.layout import layout_week
from weekgrid_engine.occupancy import text_preview

DAY_NAMES = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]


def main() -> None:
    events = parse("examples/sample_events.csv")
    config = LayoutConfig.for_events(events, interval_minutes=30)
    week = layout_week(events, config)
    print(f"Visible band: {config.start_hour:02d}:00-{config.end_hour:02d}:00")
    for day in week.days:
        print(f"\n{DAY_NAMES[(day.day_index + config.first_weekday) % 7]} ({day.column_count} columns)")
        for geometry in day.geometries:
            print(f"  {geometry}")
        if not day.is_empty:
            print(text_preview(day))


if __name__ == "__main__":
    main()
