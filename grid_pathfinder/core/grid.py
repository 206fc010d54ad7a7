"""Dense 8-connected grid of :class:`Cell` objects."""

from __future__ import annotations

import logging
from typing import Callable, Iterator, List, Sequence

from .cell import Cell
from .errors import GridStateError, InvalidCoordinate

logger = logging.getLogger(__name__)

PassabilityFn = Callable[[int, int], bool]

# Neighbour offsets as (d_row, d_col). The order decides which of two equally
# good frontier cells is discovered first, so it is part of the search output.
NEIGHBOR_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, 0),
    (0, -1),
    (1, 0),
    (0, 1),
    (-1, -1),
    (1, -1),
    (1, 1),
    (-1, 1),
)


class Grid:
    """Owns every cell and the adjacency between them.

    Building happens in two phases: :meth:`build` creates all cells, then
    :meth:`link_neighbors` resolves neighbour references. Links are only
    computed once.
    """

    def __init__(self, rows: int, cols: int) -> None:
        if rows <= 0 or cols <= 0:
            raise ValueError(f"grid dimensions must be positive, got {rows}x{cols}")
        self.rows: int = rows
        self.cols: int = cols
        self._cells: List[Cell] = []
        self._linked: bool = False

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    @classmethod
    def from_mask(cls, mask: Sequence[Sequence[object]]) -> "Grid":
        """Build a grid whose passability comes from ``mask``."""

        from .passability import mask_passability, mask_shape

        rows, cols = mask_shape(mask)
        return cls(rows, cols).build(mask_passability(mask))

    def build(self, passable: PassabilityFn) -> "Grid":
        """Create all cells using ``passable(row, col)`` and link them."""

        if self._cells:
            raise GridStateError("grid has already been built")

        for row in range(self.rows):
            for col in range(self.cols):
                self._cells.append(Cell(row, col, bool(passable(row, col))))

        self.link_neighbors()
        logger.debug(
            "Built %sx%s grid with %s obstacles",
            self.rows,
            self.cols,
            sum(1 for c in self._cells if not c.passable),
        )
        return self

    def link_neighbors(self) -> None:
        """Attach up to 8 neighbours to every cell."""

        if not self._cells:
            raise GridStateError("cells must exist before neighbours are linked")
        if self._linked:
            raise GridStateError("neighbours have already been linked")

        for cell in self._cells:
            for d_row, d_col in NEIGHBOR_OFFSETS:
                row, col = cell.row + d_row, cell.col + d_col
                if self.in_bounds(row, col):
                    cell.add_neighbor(self._cells[row * self.cols + col])
        self._linked = True

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------
    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def cell_at(self, row: int, col: int) -> Cell:
        """Return the cell at ``(row, col)``."""

        if not self.in_bounds(row, col) or not self._cells:
            raise InvalidCoordinate(row, col, self.rows, self.cols)
        return self._cells[row * self.cols + col]

    def neighbors_of(self, cell: Cell) -> List[Cell]:
        return list(cell.neighbors)

    def reset_search_state(self) -> None:
        """Clear costs and predecessors so another search can run."""

        for cell in self._cells:
            cell.reset()

    @property
    def shape(self) -> tuple[int, int]:
        return (self.rows, self.cols)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._cells)

    def __len__(self) -> int:
        return len(self._cells)


__all__ = ["Grid", "NEIGHBOR_OFFSETS", "PassabilityFn"]
