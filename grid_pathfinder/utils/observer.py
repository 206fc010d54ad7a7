"""Runtime observability helpers."""

from __future__ import annotations

import logging
from collections import deque
from typing import Any, Deque, Dict, List, Optional

from ..core.events import FRONTIER_ENTERED, FRONTIER_LEFT, ON_PATH, CellEvent

logger = logging.getLogger(__name__)

# Rolling history of the last 1000 step durations in seconds
_STEP_HISTORY_LEN = 1000
_step_durations: Deque[float] = deque(maxlen=_STEP_HISTORY_LEN)

# Whether to log the step rate every step when recording durations
_live_rate: bool = False

# Visual states of a cell
OPEN = "open"
PATH = "path"
WALL = "wall"
PLAIN = "plain"
START = "start"
GOAL = "goal"


def record_step(duration: float) -> None:
    """Append a step ``duration`` in seconds to the rolling history."""

    _step_durations.append(duration)
    if _live_rate:
        print_rate()


def average_rate() -> float:
    """Return the average steps per second, ``0.0`` without history."""

    if not _step_durations:
        return 0.0
    avg = sum(_step_durations) / len(_step_durations)
    return 1.0 / avg if avg > 0 else float("inf")


def rate_text() -> str:
    if not _step_durations:
        return "steps/s: --"
    return f"{average_rate():.1f} steps/s"


def print_rate() -> None:
    """Log the average step rate based on recorded durations."""

    logger.info(rate_text())


def toggle_live_rate() -> bool:
    """Toggle live rate logging. Returns ``True`` if enabled after toggle."""

    global _live_rate
    _live_rate = not _live_rate
    return _live_rate


def install_step_observer(tm: Any) -> None:
    """Record every step duration reported by ``tm``."""

    if tm is None or tm.on_step is record_step:
        return
    tm.on_step = record_step


class CellStateTracker:
    """Listener that keeps the visual state of every touched cell.

    A cell entering the frontier becomes ``open``, leaving it clears the
    state and joining the final path makes it ``path``. Each event replaces
    the previous state of the cell.
    """

    def __init__(self) -> None:
        self.states: Dict[tuple[int, int], str] = {}

    def __call__(self, event: CellEvent) -> None:
        if event.kind == FRONTIER_ENTERED:
            self.states[event.coords] = OPEN
        elif event.kind == FRONTIER_LEFT:
            self.states.pop(event.coords, None)
        elif event.kind == ON_PATH:
            self.states[event.coords] = PATH

    def state_of(self, row: int, col: int) -> Optional[str]:
        return self.states.get((row, col))

    def clear(self) -> None:
        self.states.clear()


def cell_visual(session: Any, cell: Any) -> str:
    """Return the visual state used to draw ``cell`` of ``session``."""

    search = getattr(session, "search", None)
    if search is not None:
        if cell is search.start_cell:
            return START
        if cell is search.goal_cell:
            return GOAL
    state = session.tracker.state_of(cell.row, cell.col)
    if state is not None:
        return state
    return PLAIN if cell.passable else WALL


class EventRecorder:
    """Listener appending every event to an in-memory list."""

    def __init__(self) -> None:
        self.events: List[CellEvent] = []

    def __call__(self, event: CellEvent) -> None:
        self.events.append(event)

    def of_kind(self, kind: str) -> List[CellEvent]:
        return [e for e in self.events if e.kind == kind]

    def coords(self, kind: str) -> List[tuple[int, int]]:
        return [e.coords for e in self.events if e.kind == kind]


__all__ = [
    "record_step",
    "average_rate",
    "rate_text",
    "print_rate",
    "toggle_live_rate",
    "install_step_observer",
    "CellStateTracker",
    "EventRecorder",
    "cell_visual",
    "OPEN",
    "PATH",
    "WALL",
    "PLAIN",
    "START",
    "GOAL",
    "_step_durations",
]
