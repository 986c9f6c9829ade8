"""Plain-text PPM (P3) export of grid cells."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

import numpy as np

MAX_COLOR_VALUE = 255


def to_greyscale(
    cells: Sequence[int] | np.ndarray,
    rows: int,
    cols: int,
    min_value: int,
    max_value: int,
    upscale: int = 1,
) -> np.ndarray:
    """Rescale `cells` linearly into ``[0, 255]`` and enlarge each cell to `upscale` pixels."""

    if max_value == min_value:
        raise ValueError("max_value must differ from min_value")
    if upscale < 1:
        raise ValueError("upscale must be at least 1")
    data = np.asarray(cells, dtype=np.int64)
    if data.size != rows * cols:
        raise ValueError(f"Expected {rows * cols} cells, got {data.size}")

    levels = MAX_COLOR_VALUE * (data.reshape(rows, cols) - min_value) // (max_value - min_value)
    levels = np.clip(levels, 0, MAX_COLOR_VALUE).astype(np.uint8)
    return np.repeat(np.repeat(levels, upscale, axis=0), upscale, axis=1)


def write_ppm(
    path: str | Path,
    cells: Sequence[int] | np.ndarray,
    rows: int,
    cols: int,
    min_value: int,
    max_value: int,
    upscale: int = 1,
) -> Path:
    """Write `cells` as a greyscale P3 image and return the written path."""

    pixels = to_greyscale(cells, rows, cols, min_value, max_value, upscale)
    height, width = pixels.shape
    path = Path(path)
    with path.open("w", encoding="ascii") as handle:
        handle.write("P3\n")
        handle.write(f"{width} {height}\n")
        handle.write(f"{MAX_COLOR_VALUE}\n")
        for pixel_row in pixels.tolist():
            handle.write(" ".join(f"{v} {v} {v}" for v in pixel_row))
            handle.write("\n")
    return path
