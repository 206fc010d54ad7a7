import pytest

from grid_pathfinder.core.grid import Grid
from grid_pathfinder.utils.observer import EventRecorder


def _open_grid(rows: int, cols: int) -> Grid:
    return Grid(rows, cols).build(lambda r, c: True)


@pytest.fixture
def open_grid():
    """Factory for grids without obstacles."""
    return _open_grid


@pytest.fixture
def recorder() -> EventRecorder:
    return EventRecorder()
