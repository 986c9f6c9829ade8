from percolation.grid import CellStatus, Grid
from percolation.render import render_grid


def test_render_grid_uses_status_glyphs():
    grid = Grid(2, 2)
    grid[0, 1] = CellStatus.OPENED
    grid[1, 0] = CellStatus.OPENED_AND_FILLED
    assert render_grid(grid) == "░░▒▒\n██░░\n"
    assert str(grid) == render_grid(grid)


def test_render_grid_repeat():
    assert render_grid(Grid(1, 2), repeat=1) == "░░\n"
