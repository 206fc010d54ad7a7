"""Passability sources used when building a :class:`Grid`."""

from __future__ import annotations

from random import Random
from typing import Sequence

from .errors import InvalidCoordinate
from .grid import PassabilityFn

OBSTACLE_GLYPH = "#"


def random_passability(
    obstacle_ratio: float = 0.4, seed: int | None = None
) -> PassabilityFn:
    """Return a predicate marking roughly ``obstacle_ratio`` cells impassable.

    Parameters
    ----------
    obstacle_ratio:
        Probability in ``[0, 1]`` that a queried cell is an obstacle.
    seed:
        Optional seed for deterministic output. The predicate draws one
        number per call, so the grid depends on the query order, which
        :meth:`Grid.build` keeps row-major.
    """

    if not 0.0 <= obstacle_ratio <= 1.0:
        raise ValueError(f"obstacle_ratio must be within [0, 1], got {obstacle_ratio}")
    rnd = Random(seed)

    def passable(row: int, col: int) -> bool:
        return not rnd.random() < obstacle_ratio

    return passable


def mask_shape(mask: Sequence[Sequence[object]]) -> tuple[int, int]:
    """Return ``(rows, cols)`` of a rectangular ``mask``."""

    if not mask or not mask[0]:
        raise ValueError("mask must have at least one row and one column")
    cols = len(mask[0])
    for row in mask:
        if len(row) != cols:
            raise ValueError("mask rows must all have the same length")
    return len(mask), cols


def mask_passability(mask: Sequence[Sequence[object]]) -> PassabilityFn:
    """Return a predicate reading passability from ``mask``.

    Rows may be strings, where ``#`` marks an obstacle, or sequences of
    booleans where ``True`` means passable.
    """

    rows, cols = mask_shape(mask)

    def passable(row: int, col: int) -> bool:
        if not (0 <= row < rows and 0 <= col < cols):
            raise InvalidCoordinate(row, col, rows, cols)
        value = mask[row][col]
        if isinstance(value, str):
            return value != OBSTACLE_GLYPH
        return bool(value)

    return passable


__all__ = ["random_passability", "mask_passability", "mask_shape", "OBSTACLE_GLYPH"]
