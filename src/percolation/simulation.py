"""Iterative random-opening percolation runs."""

from __future__ import annotations

import time
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List

import numpy as np
import pandas as pd

try:
    from tqdm import tqdm

    _TQDM_AVAILABLE = True
except ImportError:  # pragma: no cover - optional dependency
    _TQDM_AVAILABLE = False

from .comparison import Comparison
from .grid import CellStatus, Grid
from .ppm import write_ppm
from .solver import PercolationSolver

HISTORY_COLUMNS = ["iteration", "row", "col", "opened_cells", "filled_cells", "porosity", "percolates"]


@dataclass
class SimulationStats:
    """Summary metrics for a simulation run."""

    iterations: int
    opened_cells: int
    filled_cells: int
    porosity: float
    percolated: bool
    percolation_iteration: int | None
    percolation_threshold: float | None
    images_written: int
    runtime_seconds: float


@dataclass
class SimulationResult:
    """Result bundle returned by :class:PercolationSimulation."""

    grid: Grid
    history: pd.DataFrame
    stats: SimulationStats


@dataclass
class SimulationConfig:
    """Configuration parameters for :class:PercolationSimulation."""

    resolution: int = 12
    write_to_console: bool = False
    write_to_image: bool = False
    image_min_resolution: int = 300
    saves_dir: str | Path = "saves"
    parallel: bool = False  # accepted for compatibility, runs stay sequential
    select_from_closed: bool = True
    stop_when_percolates: bool = False
    seed: int | None = None
    use_tqdm: bool | None = None
    verbose: bool = True
    debug: bool = False


class PercolationSimulation:
    """Open one random cell per iteration until every cell of a square grid is open."""

    def __init__(self, config: SimulationConfig | None = None, rng: np.random.Generator | None = None) -> None:
        self.config = config or SimulationConfig()
        if self.config.resolution <= 0:
            raise ValueError(f"Grid resolution should be positive, got {self.config.resolution}")
        self.rng = rng if rng is not None else np.random.default_rng(self.config.seed)

    def run(self, history_path: str | Path | None = None) -> SimulationResult:
        """Run the simulation, optionally save the per-iteration history, and return the result."""

        config = self.config
        verbose = config.verbose
        overall_start_time = time.time()
        if verbose:
            print("--- Percolation Simulation Started ---")
            print(f"\n1. Preparing a {config.resolution}x{config.resolution} grid...")

        grid = Grid(config.resolution, config.resolution)
        solver = PercolationSolver(grid, debug=config.debug, rng=self.rng)
        saves_dir = Path(config.saves_dir)
        if config.write_to_image:
            saves_dir.mkdir(parents=True, exist_ok=True)
        upscale = self._image_upscale()

        if config.write_to_console:
            print("Initial state of the cells:")
            print(grid, end="")
            print("------------------------------------")

        if verbose:
            print("2. Opening cells...")
        t0 = time.time()
        records: List[Dict[str, object]] = []
        images_written = 0
        percolation_iteration: int | None = None

        iterator: Iterable[int] = range(grid.cell_count)
        if self._use_tqdm:
            iterator = tqdm(iterator, desc="   Opening Cells", unit="cell")

        for iteration in iterator:
            row, col = solver.open_random(config.select_from_closed)
            solver.refresh_filled_status()

            opened = grid.count_where(CellStatus.CLOSED, Comparison.GREATER_THAN)
            filled = grid.count_where(CellStatus.OPENED_AND_FILLED, Comparison.EQUALS)
            porosity = 100.0 * opened / grid.cell_count
            percolates = solver.percolates_totally()
            if percolates and percolation_iteration is None:
                percolation_iteration = iteration
            records.append(
                {
                    "iteration": iteration,
                    "row": row,
                    "col": col,
                    "opened_cells": opened,
                    "filled_cells": filled,
                    "porosity": porosity,
                    "percolates": percolates,
                }
            )

            if verbose:
                status = "Percolates!" if percolates else "Does not percolate"
                print(f"Iteration: {iteration}, Opened cells = {opened}, Porosity = {porosity:.0f}%, {status}")
            if config.write_to_console:
                print(grid, end="")
                print("------------------------------------")
            if config.write_to_image:
                write_ppm(
                    saves_dir / f"{iteration:06d}.ppm",
                    grid.cells,
                    grid.rows,
                    grid.cols,
                    CellStatus.CLOSED,
                    CellStatus.OPENED_AND_FILLED,
                    upscale,
                )
                images_written += 1

            if percolates and config.stop_when_percolates:
                break

        if verbose:
            print(f"   Done in {time.time() - t0:.2f}s")

        history = pd.DataFrame.from_records(records, columns=HISTORY_COLUMNS)
        if history_path is not None:
            self._save_dataframe(history, history_path)
            if verbose:
                print(f"\n   History saved to '{history_path}'")

        elapsed = time.time() - overall_start_time
        opened_cells = grid.count_where(CellStatus.CLOSED, Comparison.GREATER_THAN)
        threshold = None
        if percolation_iteration is not None:
            threshold = float(history.loc[percolation_iteration, "porosity"]) / 100.0
        stats = SimulationStats(
            iterations=len(history),
            opened_cells=opened_cells,
            filled_cells=grid.count_where(CellStatus.OPENED_AND_FILLED, Comparison.EQUALS),
            porosity=100.0 * opened_cells / grid.cell_count,
            percolated=solver.percolates_totally(),
            percolation_iteration=percolation_iteration,
            percolation_threshold=threshold,
            images_written=images_written,
            runtime_seconds=elapsed,
        )

        if verbose:
            print("\n--- Results Summary ---")
            print(f"   - Iterations run: {stats.iterations}")
            if threshold is None:
                print("   - The grid never percolated")
            else:
                print(f"   - First percolated at iteration {percolation_iteration} (porosity {threshold:.1%})")
            if images_written:
                print(f"   - Images written to '{saves_dir}': {images_written}")
            print(f"\n--- Percolation Simulation Finished in {elapsed:.2f} seconds ---")

        return SimulationResult(grid=grid, history=history, stats=stats)

    @property
    def _use_tqdm(self) -> bool:
        # per-iteration lines already report progress in verbose mode
        if self.config.verbose:
            return False
        if self.config.use_tqdm is not None:
            return self.config.use_tqdm and _TQDM_AVAILABLE
        return _TQDM_AVAILABLE

    def _image_upscale(self) -> int:
        resolution = self.config.resolution
        if resolution < self.config.image_min_resolution:
            return max(1, self.config.image_min_resolution // resolution)
        return 1

    @staticmethod
    def _save_dataframe(dataframe: pd.DataFrame, output_path: str | Path) -> None:
        path = Path(output_path)
        suffix = path.suffix.lower()
        if suffix == ".csv":
            dataframe.to_csv(path, index=False)
            return
        if suffix == ".xlsx":
            dataframe.to_excel(path, index=False)
            return
        raise ValueError(f"Unsupported output file format: '{suffix}'")


__all__ = [
    "PercolationSimulation",
    "SimulationConfig",
    "SimulationResult",
    "SimulationStats",
]
