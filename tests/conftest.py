import os
from datetime import datetime, timezone

# Must be set before timer_worker / server read their config
os.environ["TIMEZONE"] = "UTC"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["METRICS_PORT"] = "0"
os.environ.pop("NOTIFY_WEBHOOK_URL", None)
os.environ.pop("REQUERY_WEBHOOK_URL", None)

import pytest
import pytz

from timer_worker.timer_state import TimerState


def utc_millis(year, month, day, hour=0, minute=0, second=0):
    return int(datetime(year, month, day, hour, minute, second, tzinfo=timezone.utc).timestamp()) * 1000


@pytest.fixture
def utc():
    return pytz.utc


@pytest.fixture
def at():
    """Build epoch millis from a UTC wall-clock time."""
    return utc_millis


@pytest.fixture
def make_state():
    def _make(**overrides):
        values = {"id": 1, "name": "Meds", "enabled": True}
        values.update(overrides)
        return TimerState(**values)
    return _make
