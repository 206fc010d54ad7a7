"""Cell events emitted by the search core."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

# Event kinds
FRONTIER_ENTERED = "FRONTIER_ENTERED"
FRONTIER_LEFT = "FRONTIER_LEFT"
ON_PATH = "ON_PATH"

EVENT_KINDS = (FRONTIER_ENTERED, FRONTIER_LEFT, ON_PATH)


@dataclass(slots=True, frozen=True)
class CellEvent:
    """Record that a cell changed search state during ``step``."""

    kind: str
    row: int
    col: int
    step: int

    @property
    def coords(self) -> tuple[int, int]:
        return (self.row, self.col)


Listener = Callable[[CellEvent], None]


__all__ = [
    "CellEvent",
    "Listener",
    "FRONTIER_ENTERED",
    "FRONTIER_LEFT",
    "ON_PATH",
    "EVENT_KINDS",
]
