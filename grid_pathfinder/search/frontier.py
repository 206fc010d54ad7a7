"""Open set of discovered cells ordered by estimated total cost."""

from __future__ import annotations

import itertools
from heapq import heappop, heappush
from typing import Callable, Dict, List

from ..core.cell import Cell
from ..core.errors import EmptyFrontierError
from ..core.events import FRONTIER_ENTERED, FRONTIER_LEFT

Notify = Callable[[str, Cell], None]


class Frontier:
    """Priority queue of cells with membership, removal and decrease-key.

    Ordering is by ``estimated_total`` and then by discovery rank, i.e. the
    order in which cells first entered the frontier. A cell keeps its rank
    when its priority improves.

    Entries are ``[estimated_total, rank, push_id, cell]`` lists kept in a
    ``heapq``. Removed or re-prioritised entries are invalidated in place by
    clearing their cell slot and skipped when popped.
    """

    def __init__(self, notify: Notify | None = None) -> None:
        self._heap: List[list] = []
        self._entries: Dict[Cell, list] = {}
        self._ranks = itertools.count()
        self._pushes = itertools.count()
        self._notify = notify

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def insert(self, cell: Cell) -> None:
        """Add ``cell``; a cell already present is only re-prioritised."""

        if cell in self._entries:
            self.update(cell)
            return
        self._push(cell, next(self._ranks))
        self._emit(FRONTIER_ENTERED, cell)

    def update(self, cell: Cell) -> None:
        """Re-read the priority of ``cell`` after its cost changed."""

        entry = self._entries.get(cell)
        if entry is None:
            self.insert(cell)
            return
        if entry[0] == cell.estimated_total:
            return
        entry[-1] = None
        self._push(cell, entry[1])

    def remove(self, cell: Cell) -> None:
        """Remove ``cell`` if present."""

        entry = self._entries.pop(cell, None)
        if entry is None:
            return
        entry[-1] = None
        self._emit(FRONTIER_LEFT, cell)

    def extract_min(self) -> Cell:
        """Remove and return the cell with the lowest estimated total."""

        while self._heap:
            entry = heappop(self._heap)
            cell = entry[-1]
            if cell is None:
                continue
            del self._entries[cell]
            self._emit(FRONTIER_LEFT, cell)
            return cell
        raise EmptyFrontierError("extract_min called on an empty frontier")

    def peek(self) -> Cell:
        """Return the next cell :meth:`extract_min` would yield."""

        while self._heap and self._heap[0][-1] is None:
            heappop(self._heap)
        if not self._heap:
            raise EmptyFrontierError("peek called on an empty frontier")
        return self._heap[0][-1]

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def is_empty(self) -> bool:
        return not self._entries

    def __contains__(self, cell: object) -> bool:
        return cell in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _push(self, cell: Cell, rank: int) -> None:
        entry = [cell.estimated_total, rank, next(self._pushes), cell]
        self._entries[cell] = entry
        heappush(self._heap, entry)

    def _emit(self, kind: str, cell: Cell) -> None:
        if self._notify is not None:
            self._notify(kind, cell)


__all__ = ["Frontier"]
