import math

import pytest

from grid_pathfinder.core.cell import Cell
from grid_pathfinder.core.errors import GridStateError, InvalidCoordinate
from grid_pathfinder.core.grid import Grid
from grid_pathfinder.core.passability import (
    mask_passability,
    mask_shape,
    random_passability,
)


def test_cell_defaults():
    c = Cell(1, 2)
    assert c.coords == (1, 2)
    assert c.cost_so_far == math.inf and c.estimated_total == math.inf
    assert c.predecessor is None and c.neighbors == []
    assert c.passable


def test_cells_compare_by_identity():
    assert Cell(0, 0) != Cell(0, 0)
    assert len({Cell(0, 0), Cell(0, 0)}) == 2


def test_build_creates_every_cell(open_grid):
    grid = open_grid(3, 4)
    assert len(grid) == 12
    assert {c.coords for c in grid} == {(r, c) for r in range(3) for c in range(4)}
    assert grid.cell_at(2, 3).coords == (2, 3)


def test_neighbor_counts(open_grid):
    grid = open_grid(4, 5)
    for cell in grid:
        on_row_edge = cell.row in (0, grid.rows - 1)
        on_col_edge = cell.col in (0, grid.cols - 1)
        if on_row_edge and on_col_edge:
            expected = 3
        elif on_row_edge or on_col_edge:
            expected = 5
        else:
            expected = 8
        assert len(cell.neighbors) == expected, cell


def test_neighbors_are_symmetric_and_adjacent(open_grid):
    grid = open_grid(5, 5)
    for cell in grid:
        for n in cell.neighbors:
            assert cell in n.neighbors
            assert max(abs(n.row - cell.row), abs(n.col - cell.col)) == 1


def test_neighbor_order(open_grid):
    grid = open_grid(3, 3)
    order = [n.coords for n in grid.cell_at(1, 1).neighbors]
    assert order == [(0, 1), (1, 0), (2, 1), (1, 2), (0, 0), (2, 0), (2, 2), (0, 2)]


def test_single_column_grid(open_grid):
    grid = open_grid(3, 1)
    assert [n.coords for n in grid.cell_at(1, 0).neighbors] == [(0, 0), (2, 0)]


def test_cell_at_out_of_range(open_grid):
    grid = open_grid(2, 2)
    for row, col in [(-1, 0), (0, -1), (2, 0), (0, 2)]:
        with pytest.raises(InvalidCoordinate):
            grid.cell_at(row, col)


def test_invalid_coordinate_is_index_error(open_grid):
    with pytest.raises(IndexError):
        open_grid(1, 1).cell_at(5, 5)


def test_non_positive_dimensions_rejected():
    with pytest.raises(ValueError):
        Grid(0, 3)
    with pytest.raises(ValueError):
        Grid(3, -1)


def test_build_phases_run_once(open_grid):
    with pytest.raises(GridStateError):
        Grid(2, 2).link_neighbors()
    grid = open_grid(2, 2)
    with pytest.raises(GridStateError):
        grid.link_neighbors()
    with pytest.raises(GridStateError):
        grid.build(lambda r, c: True)


def test_build_does_not_force_endpoints():
    grid = Grid(2, 2).build(lambda r, c: False)
    assert not any(c.passable for c in grid)


def test_from_mask_strings():
    grid = Grid.from_mask(["..#", "#.."])
    assert grid.shape == (2, 3)
    assert [c.passable for c in grid] == [True, True, False, False, True, True]


def test_from_mask_booleans():
    grid = Grid.from_mask([[True, False], [False, True]])
    assert not grid.cell_at(0, 1).passable
    assert grid.cell_at(1, 1).passable


def test_mask_shape_rejects_ragged_and_empty():
    with pytest.raises(ValueError):
        mask_shape(["..", "."])
    with pytest.raises(ValueError):
        mask_shape([])


def test_mask_passability_out_of_range():
    passable = mask_passability([".."])
    with pytest.raises(InvalidCoordinate):
        passable(1, 0)


def test_random_passability_is_seeded():
    a = Grid(10, 10).build(random_passability(0.4, seed=7))
    b = Grid(10, 10).build(random_passability(0.4, seed=7))
    assert [c.passable for c in a] == [c.passable for c in b]


def test_random_passability_ratio_bounds():
    assert all(c.passable for c in Grid(5, 5).build(random_passability(0.0, seed=1)))
    assert not any(c.passable for c in Grid(5, 5).build(random_passability(1.0, seed=1)))
    with pytest.raises(ValueError):
        random_passability(1.5)


def test_random_passability_roughly_matches_ratio():
    grid = Grid(100, 100).build(random_passability(0.4, seed=123))
    walls = sum(1 for c in grid if not c.passable)
    assert 3500 < walls < 4500


def test_reset_search_state(open_grid):
    grid = open_grid(2, 2)
    a, b = grid.cell_at(0, 0), grid.cell_at(1, 1)
    b.cost_so_far, b.estimated_total, b.predecessor = 1.0, 2.0, a
    grid.reset_search_state()
    assert b.cost_so_far == math.inf and b.estimated_total == math.inf
    assert b.predecessor is None
