"""Grid cell with A* bookkeeping."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(eq=False)
class Cell:
    """One grid position.

    Cells compare and hash by identity so they can be used directly as
    frontier members and dictionary keys.
    """

    row: int
    col: int
    passable: bool = True
    cost_so_far: float = math.inf
    estimated_total: float = math.inf
    predecessor: Optional["Cell"] = field(default=None, repr=False)
    neighbors: List["Cell"] = field(default_factory=list, repr=False)

    @property
    def coords(self) -> tuple[int, int]:
        return (self.row, self.col)

    def add_neighbor(self, neighbor: "Cell") -> None:
        self.neighbors.append(neighbor)

    def reset(self) -> None:
        """Forget any state left by a previous search."""

        self.cost_so_far = math.inf
        self.estimated_total = math.inf
        self.predecessor = None


__all__ = ["Cell"]
