"""Command line entry point for the percolation simulation."""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path

from .runner import run_simulation
from .simulation import SimulationConfig

DEFAULT_RESOLUTION = 12

_DESCRIPTION = (
    "Solve the percolation problem on a 2D square grid. Fluid flows from the top side "
    "to the bottom side; the grid percolates when a continuous path of opened cells "
    "joins them. Closed cells are dark grey, opened cells light grey and cells filled "
    "with fluid white."
)


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="percolation", description=_DESCRIPTION)
    parser.add_argument(
        "--res",
        "-res",
        dest="res",
        default=str(DEFAULT_RESOLUTION),
        help=f"Grid resolution, cells in each direction (default: {DEFAULT_RESOLUTION})",
    )
    parser.add_argument("--console", "-console", action="store_true", help="Write cell data to the console")
    parser.add_argument("--image", "-image", action="store_true", help="Write cell data to PPM files")
    parser.add_argument(
        "--ll",
        "-ll",
        action="store_true",
        help="Request multi-threaded execution (not supported, runs stay sequential)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for the random cell selection")
    parser.add_argument("--saves-dir", type=Path, default=Path("saves"), help="Folder for PPM images (default: saves)")
    parser.add_argument("--history", type=Path, default=None, help="Write per-iteration history to a .csv or .xlsx file")
    parser.add_argument(
        "--stop-when-percolates",
        action="store_true",
        help="Stop opening cells as soon as the grid percolates",
    )
    parser.add_argument(
        "--random-any",
        dest="select_from_closed",
        action="store_false",
        help="Draw from all cells instead of only closed ones (draws of open cells do nothing)",
    )
    parser.add_argument(
        "--disable-tqdm",
        action="store_true",
        help="Disable progress bars even if tqdm is installed",
    )
    parser.add_argument("--quiet", action="store_true", help="Only print the final summary lines")
    parser.add_argument("--debug", action="store_true", help="Print every opened cell")
    return parser.parse_args(argv)


def parse_resolution(value: str) -> int:
    """Return `value` as a positive int, or the default resolution with a warning."""

    try:
        resolution = int(value)
    except (TypeError, ValueError):
        print(f"Invalid resolution value '{value}'. Using default {DEFAULT_RESOLUTION}!")
        return DEFAULT_RESOLUTION
    if resolution <= 0:
        print(f"Invalid resolution value '{value}'. Using default {DEFAULT_RESOLUTION}!")
        return DEFAULT_RESOLUTION
    return resolution


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    start = time.time()

    if args.ll:
        print("Parallel execution is not supported; running sequentially.")

    config = SimulationConfig(
        resolution=parse_resolution(args.res),
        write_to_console=args.console,
        write_to_image=args.image,
        saves_dir=args.saves_dir,
        parallel=args.ll,
        select_from_closed=args.select_from_closed,
        stop_when_percolates=args.stop_when_percolates,
        seed=args.seed,
        use_tqdm=not args.disable_tqdm,
        verbose=not args.quiet,
        debug=args.debug,
    )

    result = run_simulation(config, args.history)
    if result is None:
        return 1

    stats = result.stats
    print(f"Percolates: {'yes' if stats.percolated else 'no'}, Porosity = {stats.porosity:.0f}%")
    print(f"Elapsed time = {time.time() - start:.3f} [s]")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
