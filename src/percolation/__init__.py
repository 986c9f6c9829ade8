"""Percolation library initialization."""

from .comparison import Comparison
from .grid import CellStatus, Grid
from .ppm import to_greyscale, write_ppm
from .render import render_grid
from .runner import run_simulation
from .simulation import PercolationSimulation, SimulationConfig, SimulationResult, SimulationStats
from .solver import NoClosedCellsError, PercolationSolver
from .structures import DisjointSet

__all__ = [
    "CellStatus",
    "Comparison",
    "DisjointSet",
    "Grid",
    "NoClosedCellsError",
    "PercolationSimulation",
    "PercolationSolver",
    "SimulationConfig",
    "SimulationResult",
    "SimulationStats",
    "render_grid",
    "run_simulation",
    "to_greyscale",
    "write_ppm",
]
