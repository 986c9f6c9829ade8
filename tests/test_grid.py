import pytest

from percolation.comparison import Comparison
from percolation.grid import CellStatus, Grid


@pytest.mark.parametrize("rows, cols", [(0, 3), (3, 0), (-1, 2)])
def test_rejects_non_positive_dimensions(rows, cols):
    with pytest.raises(ValueError):
        Grid(rows, cols)


def test_new_grid_is_closed():
    grid = Grid(3, 4)
    assert grid.cell_count == 12
    assert len(grid) == 12
    assert grid.count_where(CellStatus.CLOSED, Comparison.EQUALS) == 12


def test_index_round_trip():
    grid = Grid(3, 5)
    for row in range(3):
        for col in range(5):
            assert grid.from_index(grid.to_index(row, col)) == (row, col)
    for index in range(grid.cell_count):
        assert grid.to_index(*grid.from_index(index)) == index
    assert grid.to_index(2, 1) == 11


def test_out_of_range_indices_raise():
    grid = Grid(2, 2)
    with pytest.raises(IndexError):
        grid.to_index(2, 0)
    with pytest.raises(IndexError):
        grid.to_index(0, -1)
    with pytest.raises(IndexError):
        grid.from_index(4)
    with pytest.raises(IndexError):
        grid[5, 0]


def test_clamp_constrains_to_nearest_cell():
    grid = Grid(3, 4)
    assert grid.to_index(-2, 9, clamp=True) == grid.to_index(0, 3)
    assert grid.to_index(7, -1, clamp=True) == grid.to_index(2, 0)
    assert grid.from_index(40, clamp=True) == (2, 0)


def test_contains():
    grid = Grid(2, 3)
    assert grid.contains(1, 2)
    assert not grid.contains(2, 0)
    assert not grid.contains(0, -1)


def test_2d_and_flat_access_share_cells():
    grid = Grid(2, 3)
    grid[1, 2] = CellStatus.OPENED
    assert grid[5] == CellStatus.OPENED
    grid[0] = CellStatus.OPENED_AND_FILLED
    assert grid[0, 0] == CellStatus.OPENED_AND_FILLED
    assert grid.cells.tolist() == [2, 0, 0, 0, 0, 1]


def test_count_and_indices_where():
    grid = Grid(2, 3)
    grid[1] = CellStatus.OPENED
    grid[4] = CellStatus.OPENED_AND_FILLED
    assert grid.count_where(CellStatus.CLOSED, Comparison.GREATER_THAN) == 2
    assert grid.count_where(CellStatus.OPENED, ">=") == 2
    assert grid.count_where(CellStatus.OPENED_AND_FILLED, "<") == 5
    assert grid.count_where(CellStatus.OPENED, "<=") == 5
    assert grid.indices_where(CellStatus.CLOSED) == [0, 2, 3, 5]
    assert grid.indices_where(CellStatus.CLOSED, Comparison.GREATER_THAN) == [1, 4]


def test_horizontal_slice():
    grid = Grid(3, 4)
    assert grid.horizontal_slice(1) == [4, 5, 6, 7]
