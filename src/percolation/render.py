"""Text rendering of grid cells for the console."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from .grid import Grid

# closed, opened, filled
GLYPHS = ("░", "▒", "█")


def render_grid(grid: Grid, repeat: int = 2) -> str:
    """Return one line per grid row, each cell drawn `repeat` glyphs wide."""

    cells = grid.cells.reshape(grid.rows, grid.cols)
    lines = ["".join(GLYPHS[value] * repeat for value in row) for row in cells.tolist()]
    return "\n".join(lines) + "\n"
