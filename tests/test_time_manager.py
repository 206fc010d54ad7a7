import time
import pytest

from grid_pathfinder.core.time_manager import TimeManager


def test_sleep_increments_counter():
    tm = TimeManager(step_rate=50.0)
    start = time.perf_counter()
    tm.sleep_until_next_step()
    elapsed = time.perf_counter() - start

    assert tm.step_counter == 1
    # Expect roughly 20ms sleep; allow generous tolerance
    assert elapsed == pytest.approx(0.02, abs=0.01)


def test_behind_schedule_does_not_sleep(monkeypatch):
    tm = TimeManager(step_rate=10.0)
    slept: list[float] = []
    monkeypatch.setattr(time, "sleep", lambda s: slept.append(s))
    tm._last_step -= 1.0
    tm.sleep_until_next_step()
    assert slept == []
    assert tm.step_counter == 1


def test_rejects_non_positive_rate():
    with pytest.raises(ValueError):
        TimeManager(step_rate=0)


def test_step_duration_reported_to_hook(monkeypatch):
    durations: list[float] = []
    tm = TimeManager(step_rate=100.0, on_step=durations.append)
    monkeypatch.setattr(time, "sleep", lambda s: None)
    returned = tm.sleep_until_next_step()
    assert durations == [returned]
    assert returned == pytest.approx(tm.interval)


def test_late_step_restarts_schedule(monkeypatch):
    tm = TimeManager(step_rate=10.0)
    monkeypatch.setattr(time, "sleep", lambda s: None)
    tm._last_step -= 1.0
    duration = tm.sleep_until_next_step()
    assert duration >= 1.0
    assert tm._last_step == pytest.approx(time.perf_counter(), abs=0.05)


def test_reset_clears_counter():
    tm = TimeManager(step_rate=1e6)
    tm.sleep_until_next_step()
    tm.reset()
    assert tm.step_counter == 0
