"""Convenience helpers for running a percolation simulation end-to-end."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from .simulation import PercolationSimulation, SimulationConfig, SimulationResult


def run_simulation(
    config: Optional[SimulationConfig] = None,
    history_path: str | Path | None = None,
) -> SimulationResult | None:
    """Run the full workflow with `config` and optionally write the history table."""

    config = config or SimulationConfig()
    if history_path is not None and Path(history_path).suffix.lower() not in {".csv", ".xlsx"}:
        print(f"ERROR: Unsupported history format for '{history_path}'. Please use a .csv or .xlsx file.")
        return None

    try:
        simulation = PercolationSimulation(config)
    except ValueError as exc:
        print(f"ERROR: {exc}")
        return None

    try:
        return simulation.run(history_path)
    except OSError as exc:
        print(f"ERROR: Could not write simulation output: {exc}")
        return None
