"""Time week layouts over synthetic or loaded event sets."""

from __future__ import annotations

import argparse
import json
import sys
import time
from datetime import datetime, timedelta
from pathlib import Path

import numpy as np

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from weekgrid_engine.adapters import csv_adapter, json_adapter
from weekgrid_engine.config import LayoutConfig
from weekgrid_engine.layout import layout_week
from weekgrid_engine.schema import Event


def _load_events(path: Path):
    suffix = path.suffix.lower()
    if suffix == ".csv":
        return csv_adapter.parse(str(path))
    if suffix == ".json":
        return json_adapter.parse(str(path))
    raise ValueError("Unsupported input format, expected .csv or .json")


def _synthetic_week(events_per_day: int, seed: int) -> list[Event]:
    rng = np.random.default_rng(seed)
    monday = datetime(2025, 1, 6)
    events = []
    for day in range(7):
        starts = rng.integers(8 * 12, 19 * 12, size=events_per_day)
        lengths = rng.integers(3, 36, size=events_per_day)
        for index, (start, length) in enumerate(zip(starts, lengths)):
            begin = monday + timedelta(days=day, minutes=5 * int(start))
            events.append(Event(f"d{day}-{index}", begin, begin + timedelta(minutes=5 * int(length))))
    return events


def main() -> None:
    parser = argparse.ArgumentParser(description="Run weekgrid-engine layout benchmark")
    parser.add_argument("--data", help="Path to CSV/JSON events file (synthetic week if omitted)")
    parser.add_argument("--events-per-day", type=int, default=30)
    parser.add_argument("--repeat", type=int, default=50)
    parser.add_argument("--workers", type=int, default=1)
    parser.add_argument("--seed", type=int, default=42)
    args = parser.parse_args()

    if args.data:
        events = _load_events(Path(args.data))
    else:
        events = _synthetic_week(args.events_per_day, args.seed)
    config = LayoutConfig.for_events(events, work_week=False, max_workers=args.workers)

    timings = []
    for _ in range(args.repeat):
        started = time.perf_counter()
        week = layout_week(events, config)
        timings.append((time.perf_counter() - started) * 1000.0)

    samples = np.asarray(timings)
    report = {
        "n_events": len(events),
        "repeat": args.repeat,
        "workers": args.workers,
        "column_counts": [day.column_count for day in week.days],
        "ms": {
            "mean": float(samples.mean()),
            "p50": float(np.percentile(samples, 50)),
            "p95": float(np.percentile(samples, 95)),
            "max": float(samples.max()),
        },
    }
    print(json.dumps(report, indent=2))


if __name__ == "__main__":
    main()
