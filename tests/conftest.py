from datetime import datetime

import pytest

from weekgrid_engine.schema import Event


@pytest.fixture
def make_event():
    def _make(event_id, start, end, **payload):
        return Event(event_id, datetime.fromisoformat(start), datetime.fromisoformat(end), payload or None)

    return _make
