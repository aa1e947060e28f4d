"""Streamlit demo UI for weekgrid-engine."""

from __future__ import annotations

import html
import tempfile
from pathlib import Path
from typing import Any

from weekgrid_engine.adapters import csv_adapter, json_adapter
from weekgrid_engine.config import LayoutConfig, num_days_for, visible_hours
from weekgrid_engine.errors import LayoutError
from weekgrid_engine.layout import layout_week
from weekgrid_engine.occupancy import box_collisions
from weekgrid_engine.schema import DayLayout, Event, WeekLayout


DAY_NAMES = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]


def _parse_events_from_path(file_path: str) -> list[Event]:
    suffix = Path(file_path).suffix.lower()
    if suffix == ".csv":
        return csv_adapter.parse(file_path)
    if suffix == ".json":
        return json_adapter.parse(file_path)
    raise ValueError("Unsupported file type. Please use .csv or .json")


def _parse_uploaded(uploaded_file) -> list[Event]:
    suffix = Path(uploaded_file.name).suffix.lower()
    with tempfile.NamedTemporaryFile(delete=False, suffix=suffix) as handle:
        handle.write(uploaded_file.getbuffer())
        temp_path = handle.name
    try:
        return _parse_events_from_path(temp_path)
    finally:
        Path(temp_path).unlink()


def _event_label(event: Event) -> str:
    title = (event.payload or {}).get("title") or event.event_id
    return f"{event.start:%H:%M}-{event.end:%H:%M} {title}"


def _day_html(day: DayLayout, events_by_id: dict[str, Event]) -> str:
    columns = max(day.column_count, 1)
    boxes = []
    for geometry in day.geometries:
        style = (
            f"grid-row:{geometry.row_start}/{geometry.row_end};"
            f"grid-column:{geometry.column_start}/{geometry.column_end};"
            "background:#4c78a8;color:white;font-size:11px;border:1px solid white;overflow:hidden;"
        )
        label = html.escape(_event_label(events_by_id[geometry.event_id]))
        boxes.append(f'<div style="{style}">{label}</div>')
    return (
        f'<div style="display:grid;grid-template-columns:repeat({columns},{100 / columns}%);'
        f'grid-template-rows:repeat({day.row_count},4px);border-left:1px solid #ddd;">'
        + "".join(boxes)
        + "</div>"
    )


def week_html(week: WeekLayout, events: list[Event]) -> str:
    """Render a week layout as an HTML grid, one track per visible day."""

    events_by_id = {event.event_id: event for event in events}
    first = week.config.first_weekday
    headers = "".join(
        f'<div style="text-align:center;font-weight:bold">{DAY_NAMES[(day.day_index + first) % 7]}</div>'
        for day in week.days
    )
    cells = "".join(_day_html(day, events_by_id) for day in week.days)
    return (
        f'<div style="display:grid;grid-template-columns:repeat({len(week.days)},1fr);">'
        f"{headers}{cells}</div>"
    )


def run_engine(events: list[Event], options: dict) -> dict[str, Any]:
    """Run the layout and return a UI-friendly result payload."""

    start_hour, end_hour = visible_hours(events)
    config = LayoutConfig(
        num_days=num_days_for(options["work_week"]),
        start_hour=start_hour,
        end_hour=end_hour,
        interval_minutes=options["interval_minutes"],
    )
    week = layout_week(events, config)
    collisions = [pair for day in week.days for pair in box_collisions(day, events)]
    placed = sum(len(day.geometries) for day in week.days)

    return {
        "config": config,
        "week": week,
        "summary": {
            "total_events": len(events),
            "placed_events": placed,
            "hidden_events": len(events) - placed,
            "max_columns": max((day.column_count for day in week.days), default=0),
        },
        "collisions": collisions,
        "html": week_html(week, events),
    }


def main() -> None:
    import streamlit as st

    st.set_page_config(page_title="Week Grid Demo", layout="wide")
    st.title("Week Grid Engine: Streamlit Demo")

    with st.sidebar:
        st.header("Controls")
        uploaded = st.file_uploader("Upload events", type=["csv", "json"])
        use_demo = st.checkbox("Load demo events", value=True)
        work_week = st.checkbox("Work week (Mon-Fri)", value=True)
        interval_minutes = st.selectbox("Grid interval (minutes)", options=[5, 10, 15, 30, 60], index=0)
        run = st.button("Lay out week", type="primary")

    if not run:
        st.info("Configure inputs in the sidebar and click **Lay out week**.")
        return

    try:
        if use_demo:
            events = csv_adapter.parse("examples/sample_events.csv")
            data_source = "demo events (examples/sample_events.csv)"
        elif uploaded is not None:
            events = _parse_uploaded(uploaded)
            data_source = f"uploaded file ({uploaded.name})"
        else:
            st.error("Please upload a CSV/JSON file or enable 'Load demo events'.")
            return

        result = run_engine(events, {"work_week": work_week, "interval_minutes": int(interval_minutes)})
        config = result["config"]

        st.success(f"Loaded {len(events)} events from {data_source}.")

        st.subheader("A) Summary")
        summary = result["summary"]
        c1, c2, c3, c4 = st.columns(4)
        c1.metric("Total events", summary["total_events"])
        c2.metric("Placed", summary["placed_events"])
        c3.metric("Outside window", summary["hidden_events"])
        c4.metric("Max columns", summary["max_columns"])
        st.caption(f"Visible band {config.start_hour:02d}:00-{config.end_hour:02d}:00")

        st.subheader("B) Week Grid")
        st.markdown(result["html"], unsafe_allow_html=True)

        st.subheader("C) Geometry")
        st.json(result["week"].to_dict())

        if result["collisions"]:
            st.warning(f"Overlapping boxes: {result['collisions']}")

    except LayoutError as exc:
        st.error(f"Layout error: {exc}")
    except ValueError as exc:
        st.error(f"Input error: {exc}")


if __name__ == "__main__":
    main()
