import sys
import tempfile
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "ui_demo_streamlit"))

from app import _parse_uploaded, run_engine  # noqa: E402


class _Upload:
    def __init__(self, name, content):
        self.name = name
        self._content = content

    def getbuffer(self):
        return memoryview(self._content)


def test_run_engine_payload(make_event):
    events = [
        make_event("e1", "2025-01-06T09:00:00", "2025-01-06T10:00:00", title="Standup"),
        make_event("e2", "2025-01-06T09:30:00", "2025-01-06T10:30:00"),
        make_event("sat", "2025-01-11T09:30:00", "2025-01-11T10:30:00"),
    ]
    result = run_engine(events, {"work_week": True, "interval_minutes": 15})
    assert result["summary"]["placed_events"] == 2
    assert result["summary"]["hidden_events"] == 1
    assert result["summary"]["max_columns"] == 2
    assert result["collisions"] == []
    assert "grid-column:1/2" in result["html"]
    assert "Standup" in result["html"]


def test_parse_uploaded_removes_temp_file(tmp_path, monkeypatch):
    monkeypatch.setattr(tempfile, "tempdir", str(tmp_path))
    upload = _Upload("events.csv", b"id,start,end\na,2025-01-06T09:00:00,2025-01-06T10:00:00\n")
    events = _parse_uploaded(upload)
    assert [event.event_id for event in events] == ["a"]
    assert list(tmp_path.iterdir()) == []


def test_parse_uploaded_removes_temp_file_on_error(tmp_path, monkeypatch):
    monkeypatch.setattr(tempfile, "tempdir", str(tmp_path))
    upload = _Upload("events.csv", b"id,start,end\na,bad,bad\n")
    with pytest.raises(ValueError):
        _parse_uploaded(upload)
    assert list(tmp_path.iterdir()) == []
