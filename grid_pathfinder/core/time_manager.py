"""Step pacing helpers."""

from __future__ import annotations

import time
from typing import Callable, Optional

StepHook = Callable[[float], None]


class TimeManager:
    """Pace animated search steps at ``step_rate`` steps per second.

    Each call to :meth:`sleep_until_next_step` returns the wall time since
    the previous one and hands it to ``on_step`` when set. A step that
    finishes late does not build up a backlog: the schedule restarts from
    the current time.
    """

    def __init__(self, step_rate: float = 1000.0, on_step: Optional[StepHook] = None) -> None:
        if step_rate <= 0:
            raise ValueError("step_rate must be positive")
        self.step_rate: float = step_rate
        self.on_step: Optional[StepHook] = on_step
        self.step_counter: int = 0
        self._last_step: float = time.perf_counter()

    @property
    def interval(self) -> float:
        return 1.0 / self.step_rate

    def reset(self) -> None:
        """Restart counting for a new search."""

        self.step_counter = 0
        self._last_step = time.perf_counter()

    def sleep_until_next_step(self) -> float:
        """Block until the next step is due and return the step duration."""

        previous = self._last_step
        target = previous + self.interval
        now = time.perf_counter()
        remaining = target - now
        if remaining > 0:
            time.sleep(remaining)
            self._last_step = target
        else:
            self._last_step = now
        self.step_counter += 1

        duration = self._last_step - previous
        if self.on_step is not None:
            self.on_step(duration)
        return duration


__all__ = ["TimeManager", "StepHook"]
