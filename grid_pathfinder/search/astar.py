"""A* search over a :class:`Grid`, advanced one finalised cell at a time."""

from __future__ import annotations

import logging
import math
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, List, Optional, Set, Tuple

from ..core.cell import Cell
from ..core.errors import SearchBoundExceeded
from ..core.events import ON_PATH, CellEvent, Listener
from ..core.grid import Grid
from .frontier import Frontier

logger = logging.getLogger(__name__)

Coord = Tuple[int, int]


def distance(a: Cell, b: Cell) -> float:
    """Return ``sqrt(|d_row| + |d_col|)`` between two cells.

    This is not the Euclidean distance: the offsets are summed before the
    square root. A straight step costs 1 and a diagonal step ``sqrt(2)``.
    """

    return math.sqrt(abs(a.row - b.row) + abs(a.col - b.col))


def heuristic(cell: Cell, goal: Cell) -> float:
    """Estimate the remaining cost from ``cell`` to ``goal``.

    Uses :func:`distance`. Square root is subadditive, so the estimate never
    exceeds the cost of any route and stays consistent across single steps.
    """

    return distance(cell, goal)


class SearchState(Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    CANCELLED = "cancelled"

    @property
    def terminal(self) -> bool:
        return self in (SearchState.SUCCEEDED, SearchState.FAILED, SearchState.CANCELLED)


@dataclass
class SearchResult:
    """Outcome of a search.

    ``path`` runs from the goal back to the start; use :meth:`route` for the
    start-to-goal order.
    """

    state: SearchState
    path: Optional[List[Coord]]
    cost: Optional[float]
    extractions: int
    steps: int

    @property
    def found(self) -> bool:
        return self.state is SearchState.SUCCEEDED

    def route(self) -> Optional[List[Coord]]:
        if self.path is None:
            return None
        return list(reversed(self.path))


class AStarSearch:
    """Step-wise A* from ``start`` to ``goal`` on ``grid``.

    Every :meth:`step` finalises at most one cell. Listeners receive a
    :class:`CellEvent` whenever a cell enters or leaves the frontier and, on
    success, once for each cell of the final path (goal first).
    """

    def __init__(
        self,
        grid: Grid,
        start: Coord = (0, 0),
        goal: Coord | None = None,
        listeners: Iterable[Listener] = (),
    ) -> None:
        if goal is None:
            goal = (grid.rows - 1, grid.cols - 1)
        self.grid = grid
        self.start_cell: Cell = grid.cell_at(*start)
        self.goal_cell: Cell = grid.cell_at(*goal)
        self.state: SearchState = SearchState.NOT_STARTED
        self.current: Cell | None = None
        self.extractions: int = 0
        self.steps: int = 0
        self.frontier = Frontier(self._notify)
        self._listeners: List[Listener] = list(listeners)
        self._finalized: Set[Cell] = set()
        self._cancel_requested = threading.Event()

    # ------------------------------------------------------------------
    # Listeners
    # ------------------------------------------------------------------
    def subscribe(self, listener: Listener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self, kind: str, cell: Cell) -> None:
        event = CellEvent(kind, cell.row, cell.col, self.steps)
        for listener in list(self._listeners):
            listener(event)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def start(self) -> None:
        """Seed the frontier with the start cell."""

        if self.state is not SearchState.NOT_STARTED:
            return

        self.grid.reset_search_state()
        start, goal = self.start_cell, self.goal_cell
        start.passable = True
        goal.passable = True
        start.cost_so_far = 0.0
        start.estimated_total = heuristic(start, goal)

        self.state = SearchState.RUNNING
        logger.info(
            "Search started from %s to %s on %sx%s grid",
            start.coords,
            goal.coords,
            self.grid.rows,
            self.grid.cols,
        )
        self.frontier.insert(start)

    def cancel(self) -> None:
        """Ask the search to stop; honoured at the next :meth:`step`."""

        self._cancel_requested.set()

    def step(self) -> SearchState:
        """Finalise one frontier cell and relax its neighbours."""

        if self.state.terminal:
            return self.state

        # A search cancelled before its first step never seeds the frontier
        if self._cancel_requested.is_set():
            self.state = SearchState.CANCELLED
            logger.info("Search cancelled after %s extractions", self.extractions)
            return self.state

        if self.state is SearchState.NOT_STARTED:
            self.start()
        self.steps += 1

        if self.frontier.is_empty():
            self.state = SearchState.FAILED
            logger.info(
                "No path from %s to %s after %s extractions",
                self.start_cell.coords,
                self.goal_cell.coords,
                self.extractions,
            )
            return self.state

        if self.extractions >= len(self.grid):
            raise SearchBoundExceeded(
                f"search extracted {self.extractions} cells from a grid of {len(self.grid)}"
            )

        current = self.frontier.extract_min()
        self.extractions += 1
        self._finalized.add(current)
        self.current = current

        if current is self.goal_cell:
            self.state = SearchState.SUCCEEDED
            path = self._reconstruct()
            for cell in path:
                self._notify(ON_PATH, cell)
            logger.info(
                "Path found: %s cells, cost %.3f, %s extractions",
                len(path),
                current.cost_so_far,
                self.extractions,
            )
            return self.state

        goal = self.goal_cell
        for neighbor in current.neighbors:
            if not neighbor.passable or neighbor in self._finalized:
                continue
            tentative = current.cost_so_far + distance(current, neighbor)
            if tentative < neighbor.cost_so_far:
                neighbor.cost_so_far = tentative
                neighbor.predecessor = current
                neighbor.estimated_total = tentative + heuristic(neighbor, goal)
                if neighbor in self.frontier:
                    self.frontier.update(neighbor)
                else:
                    self.frontier.insert(neighbor)

        return self.state

    def iter_steps(self) -> Iterator[SearchState]:
        """Yield the state after each step until the search terminates."""

        while not self.state.terminal:
            yield self.step()

    def run(self, max_steps: int | None = None) -> SearchResult:
        """Step until a terminal state or ``max_steps`` steps."""

        for taken, _ in enumerate(self.iter_steps(), start=1):
            if max_steps is not None and taken >= max_steps:
                break
        return self.result()

    # ------------------------------------------------------------------
    # Results
    # ------------------------------------------------------------------
    def _reconstruct(self) -> List[Cell]:
        path = [self.goal_cell]
        current = self.goal_cell
        while current.predecessor is not None:
            current = current.predecessor
            path.append(current)
        return path

    @property
    def path(self) -> Optional[List[Cell]]:
        """Cells from goal to start once the search succeeded."""

        if self.state is not SearchState.SUCCEEDED:
            return None
        return self._reconstruct()

    def result(self) -> SearchResult:
        path = self.path
        return SearchResult(
            state=self.state,
            path=[cell.coords for cell in path] if path is not None else None,
            cost=self.goal_cell.cost_so_far if path is not None else None,
            extractions=self.extractions,
            steps=self.steps,
        )


def find_path(
    grid: Grid,
    start: Coord = (0, 0),
    goal: Coord | None = None,
    listeners: Iterable[Listener] = (),
) -> SearchResult:
    """Run a complete search synchronously and return its result."""

    return AStarSearch(grid, start, goal, listeners).run()


__all__ = [
    "AStarSearch",
    "SearchResult",
    "SearchState",
    "distance",
    "heuristic",
    "find_path",
]
