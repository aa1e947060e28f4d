from itertools import combinations

import pytest

from weekgrid_engine.errors import LayoutInvariantError
from weekgrid_engine.overlap import overlaps
from weekgrid_engine.packing import check_column_map, pack, sort_for_packing
from weekgrid_engine.span import extent


def test_overlaps_half_open(make_event):
    a = make_event("a", "2025-01-06T09:00:00", "2025-01-06T10:00:00")
    b = make_event("b", "2025-01-06T09:30:00", "2025-01-06T10:30:00")
    c = make_event("c", "2025-01-06T10:00:00", "2025-01-06T11:00:00")
    assert overlaps(a, b) and overlaps(b, a)
    assert not overlaps(a, c) and not overlaps(c, a)


def test_sort_longest_first_stable(make_event):
    events = [
        make_event("short", "2025-01-06T09:00:00", "2025-01-06T09:30:00"),
        make_event("tie1", "2025-01-06T10:00:00", "2025-01-06T11:00:00"),
        make_event("long", "2025-01-06T12:00:00", "2025-01-06T15:00:00"),
        make_event("tie2", "2025-01-06T08:00:00", "2025-01-06T09:00:00"),
    ]
    assert [e.event_id for e in sort_for_packing(events)] == ["long", "tie1", "tie2", "short"]


def test_pack_first_fit(make_event):
    events = sort_for_packing(
        [
            make_event("e1", "2025-01-06T09:00:00", "2025-01-06T12:00:00"),
            make_event("e2", "2025-01-06T09:00:00", "2025-01-06T11:00:00"),
            make_event("e3", "2025-01-06T09:00:00", "2025-01-06T10:00:00"),
            make_event("e4", "2025-01-06T11:00:00", "2025-01-06T11:30:00"),
        ]
    )
    columns = pack(events)
    assert [[e.event_id for e in column] for column in columns] == [["e1"], ["e2", "e4"], ["e3"]]

    for column in columns:
        for a, b in combinations(column, 2):
            assert not overlaps(a, b)


def test_pack_is_deterministic(make_event):
    events = sort_for_packing(
        [
            make_event(f"e{i}", f"2025-01-06T{9 + i % 4:02d}:00:00", f"2025-01-06T{10 + i % 3 + i % 4:02d}:15:00")
            for i in range(8)
        ]
    )
    first = [[e.event_id for e in column] for column in pack(events)]
    second = [[e.event_id for e in column] for column in pack(list(events))]
    assert first == second


def test_check_column_map_rejects_overlap(make_event):
    a = make_event("a", "2025-01-06T09:00:00", "2025-01-06T10:00:00")
    b = make_event("b", "2025-01-06T09:30:00", "2025-01-06T10:30:00")
    with pytest.raises(LayoutInvariantError):
        check_column_map([[a, b]])


def test_extent_stops_at_first_blocking_column(make_event):
    long = make_event("long", "2025-01-06T09:00:00", "2025-01-06T12:00:00")
    mid = make_event("mid", "2025-01-06T09:00:00", "2025-01-06T10:00:00")
    late = make_event("late", "2025-01-06T11:00:00", "2025-01-06T11:30:00")
    free = make_event("free", "2025-01-06T10:00:00", "2025-01-06T10:30:00")
    column_map = [[long], [mid], [late]]
    assert extent(long, column_map, 0) == 1
    assert extent(mid, column_map, 1) == 3

    column_map = [[mid], [free], [late]]
    assert extent(mid, column_map, 0) == 3


def test_extent_rejects_missing_column(make_event):
    a = make_event("a", "2025-01-06T09:00:00", "2025-01-06T10:00:00")
    with pytest.raises(LayoutInvariantError):
        extent(a, [[a]], 1)
