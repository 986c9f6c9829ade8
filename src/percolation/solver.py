"""Site percolation on a grid using dynamic connectivity."""

from __future__ import annotations

from typing import Tuple

import numpy as np

from .comparison import Comparison
from .grid import CellStatus, Grid
from .structures import DisjointSet

_NEIGHBOURS = ((-1, 0), (1, 0), (0, -1), (0, 1))


class NoClosedCellsError(LookupError):
    """Raised when a random closed cell is requested from a fully open grid."""


class PercolationSolver:
    """Open cells of a shared `Grid` and answer top-to-bottom connectivity queries.

    Two virtual elements follow the real cells in the connectivity structure:
    ``top`` is joined to every opened cell of the first row and ``bottom`` to
    every opened cell of the last row, so whole-grid percolation is a single
    ``connected(top, bottom)`` query.
    """

    def __init__(
        self,
        grid: Grid,
        debug: bool = False,
        rng: np.random.Generator | None = None,
        seed: int | None = None,
    ) -> None:
        if not isinstance(grid, Grid):
            raise TypeError(f"PercolationSolver needs a Grid, got {type(grid).__name__}")
        self.grid = grid
        self.debug = debug
        self.top = grid.cell_count
        self.bottom = grid.cell_count + 1
        self.connectivity = DisjointSet(grid.cell_count + 2)
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    def is_open_index(self, index: int) -> bool:
        return self.grid[index] > CellStatus.CLOSED

    def is_open(self, row: int, col: int) -> bool:
        return self.is_open_index(self.grid.to_index(row, col))

    def open(self, row: int, col: int) -> None:
        """Open (`row`, `col`) and join it to its opened neighbours; no-op if already open."""

        index = self.grid.to_index(row, col)
        if self.is_open_index(index):
            return

        self.grid[index] = CellStatus.OPENED

        if row == 0:
            self.connectivity.union(index, self.top)
        if row == self.grid.rows - 1:
            self.connectivity.union(index, self.bottom)

        for d_row, d_col in _NEIGHBOURS:
            n_row, n_col = row + d_row, col + d_col
            if not self.grid.contains(n_row, n_col):
                continue
            neighbour = self.grid.to_index(n_row, n_col)
            if self.is_open_index(neighbour):
                self.connectivity.union(index, neighbour)

    def open_random(self, select_from_closed: bool = True) -> Tuple[int, int]:
        """Open a randomly chosen cell and return its coordinates.

        With `select_from_closed` the choice is uniform over the closed cells,
        so every call makes progress. Otherwise any cell may be drawn and an
        already-open one is left unchanged.
        """

        if select_from_closed:
            closed = self.grid.indices_where(CellStatus.CLOSED, Comparison.EQUALS)
            if not closed:
                raise NoClosedCellsError("No closed cells left to open")
            row, col = self.grid.from_index(closed[int(self.rng.integers(len(closed)))])
        else:
            row = int(self.rng.integers(self.grid.rows))
            col = int(self.rng.integers(self.grid.cols))

        if self.debug:
            print(f"Open a cell [{row}, {col}]")

        self.open(row, col)
        return row, col

    def percolates_to_index(self, index: int) -> bool:
        if not 0 <= index < self.grid.cell_count:
            raise IndexError(f"Index {index} out of range [0, {self.grid.cell_count})")
        return self.connectivity.connected(self.top, index)

    def percolates_to(self, row: int, col: int) -> bool:
        """True when fluid entering the top row can reach (`row`, `col`)."""

        return self.percolates_to_index(self.grid.to_index(row, col))

    def percolates_totally(self) -> bool:
        return self.connectivity.connected(self.top, self.bottom)

    def refresh_filled_status(self) -> None:
        """Mark every opened cell as filled or unfilled by its connection to the top."""

        opened = self.grid.indices_where(CellStatus.CLOSED, Comparison.GREATER_THAN)
        for index in opened:
            if self.percolates_to_index(index):
                self.grid[index] = CellStatus.OPENED_AND_FILLED
            else:
                self.grid[index] = CellStatus.OPENED


__all__ = ["NoClosedCellsError", "PercolationSolver"]
