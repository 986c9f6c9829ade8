"""Flat-array model of a 2D grid of porous cells."""

from __future__ import annotations

from enum import IntEnum
from typing import List, Tuple

import numpy as np

from .comparison import Comparison


class CellStatus(IntEnum):
    """Ordinal cell state, darkest to brightest."""

    CLOSED = 0
    OPENED = 1
    OPENED_AND_FILLED = 2


def _constrain(value: int, lower: int, upper: int) -> int:
    return min(max(value, lower), upper)


class Grid:
    """A 1D array of cell statuses addressed as a ``rows x cols`` matrix.

    The solver mutates the grid in place; callers holding a reference see
    the same cells.
    """

    def __init__(self, rows: int, cols: int) -> None:
        if rows <= 0 or cols <= 0:
            raise ValueError(f"Grid resolution should be positive, got {rows}x{cols}")
        self._rows = int(rows)
        self._cols = int(cols)
        self._cells = np.full(self._rows * self._cols, CellStatus.CLOSED, dtype=np.int8)

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def cell_count(self) -> int:
        return self._rows * self._cols

    @property
    def cells(self) -> np.ndarray:
        """The live flat status array (not a copy)."""

        return self._cells

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self._rows and 0 <= col < self._cols

    def to_index(self, row: int, col: int, clamp: bool = False) -> int:
        """Return the flat index of (`row`, `col`).

        With `clamp`, out-of-range coordinates are pulled to the nearest
        border cell instead of raising `IndexError`.
        """

        if clamp:
            row = _constrain(row, 0, self._rows - 1)
            col = _constrain(col, 0, self._cols - 1)
        elif not self.contains(row, col):
            raise IndexError(f"Cell ({row}, {col}) out of range for {self._rows}x{self._cols} grid")
        return self._cols * row + col

    def from_index(self, index: int, clamp: bool = False) -> Tuple[int, int]:
        if not clamp and not 0 <= index < self.cell_count:
            raise IndexError(f"Index {index} out of range [0, {self.cell_count})")
        row, col = divmod(index, self._cols)
        if clamp:
            row = _constrain(row, 0, self._rows - 1)
            col = _constrain(col, 0, self._cols - 1)
        return row, col

    def horizontal_slice(self, row: int) -> List[int]:
        start = self.to_index(row, 0)
        return list(range(start, start + self._cols))

    def count_where(self, value: int, operation: Comparison | str = Comparison.EQUALS) -> int:
        """Count cells satisfying ``cell <operation> value``."""

        mask = Comparison.parse(operation).apply(self._cells, int(value))
        return int(np.count_nonzero(mask))

    def indices_where(self, value: int, operation: Comparison | str = Comparison.EQUALS) -> List[int]:
        """Return ascending flat indices of cells satisfying ``cell <operation> value``."""

        mask = Comparison.parse(operation).apply(self._cells, int(value))
        return np.flatnonzero(mask).tolist()

    def __getitem__(self, key) -> int:
        return int(self._cells[self._resolve(key)])

    def __setitem__(self, key, value: int) -> None:
        self._cells[self._resolve(key)] = int(value)

    def __len__(self) -> int:
        return self.cell_count

    def __str__(self) -> str:
        from .render import render_grid

        return render_grid(self)

    def __repr__(self) -> str:
        return f"Grid(rows={self._rows}, cols={self._cols})"

    def _resolve(self, key) -> int:
        if isinstance(key, tuple):
            row, col = key
            return self.to_index(row, col)
        return key
