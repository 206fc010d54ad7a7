"""Error types raised by the grid and search core."""

from __future__ import annotations


class PathfinderError(Exception):
    """Base error for grid and search failures."""


class InvalidCoordinate(PathfinderError, IndexError):
    """Raised when a coordinate falls outside the grid."""

    def __init__(self, row: int, col: int, rows: int, cols: int) -> None:
        super().__init__(
            f"coordinate ({row}, {col}) outside grid of {rows}x{cols}"
        )
        self.row = row
        self.col = col


class EmptyFrontierError(PathfinderError, IndexError):
    """Raised when extracting from an empty frontier."""


class GridStateError(PathfinderError, RuntimeError):
    """Raised when grid build phases run out of order."""


class SearchBoundExceeded(PathfinderError, RuntimeError):
    """Raised when a search extracts more cells than the grid holds."""


__all__ = [
    "PathfinderError",
    "InvalidCoordinate",
    "EmptyFrontierError",
    "GridStateError",
    "SearchBoundExceeded",
]
