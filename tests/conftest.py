import io
from datetime import datetime

import pytest

from timedtask import config
from timedtask import task as task_module


class FrozenClock:
    """Monotonic clock that only moves when told to."""

    def __init__(self):
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    """Point config at an empty temp location so a user's real config never leaks in."""
    monkeypatch.setenv("TIMEDTASK_CONFIG", str(tmp_path / "config.yaml"))
    monkeypatch.delenv("TIMEDTASK_STREAM", raising=False)
    config._clear_cache()
    yield tmp_path / "config.yaml"
    config._clear_cache()


@pytest.fixture(autouse=True)
def frozen_clock(monkeypatch):
    clock = FrozenClock()
    monkeypatch.setattr(task_module, "_clock", clock)
    monkeypatch.setattr(task_module, "_wall", lambda: datetime(2024, 1, 2, 3, 4, 5))
    return clock


@pytest.fixture
def out():
    return io.StringIO()
