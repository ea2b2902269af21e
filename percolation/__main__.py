"""Run a density sweep from the command line.

    python -m percolation --rows 50 --cols 50 --trials 100 --densities 1 99 --plot
"""

import argparse
import logging
from pathlib import Path

from .monte_carlo_model import EMPTY_GRID_POLICIES, MonteCarlo, SweepParams
from .storage import save_summary, write_summary_csv

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    defaults = SweepParams()
    parser = argparse.ArgumentParser(
        prog="percolation",
        description="Monte Carlo sweep of burned forest area against tree density",
    )
    parser.add_argument("--rows", type=int, default=defaults.shape[0], help="Grid rows")
    parser.add_argument("--cols", type=int, default=defaults.shape[1], help="Grid columns")
    parser.add_argument("--trials", type=int, default=defaults.n_trials, help="Trials per density")
    parser.add_argument(
        "--densities",
        type=int,
        nargs=2,
        metavar=("START", "STOP"),
        default=(min(defaults.densities), max(defaults.densities)),
        help="Inclusive range of tree densities in percent",
    )
    parser.add_argument("--seed", type=int, default=defaults.seed, help="Random seed")
    parser.add_argument(
        "--empty-grid",
        choices=EMPTY_GRID_POLICIES,
        default=defaults.empty_grid_policy,
        help="How trials with no trees count: as 0%% burned or excluded",
    )
    parser.add_argument("--strict", action="store_true", help="Abort on the first failing trial")
    parser.add_argument("--output", type=Path, default=Path("output"), help="Output directory")
    parser.add_argument("--plot", action="store_true", help="Also save the density curve as PNG")
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = parser.parse_args(argv)

    start, stop = args.densities
    if start > stop:
        parser.error(f"--densities START ({start}) must not exceed STOP ({stop})")
    if start < 0 or stop > 100:
        parser.error("--densities must lie within 0..100")
    return args


def main(argv=None) -> int:
    args = parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    start, stop = args.densities
    params = SweepParams(
        densities=tuple(range(start, stop + 1)),
        n_trials=args.trials,
        shape=(args.rows, args.cols),
        seed=args.seed,
        empty_grid_policy=args.empty_grid,
        strict=args.strict,
    )
    model = MonteCarlo(params)

    logger.info("=" * 60)
    logger.info("FOREST FIRE PERCOLATION SWEEP")
    logger.info("=" * 60)
    logger.info(f"Grid: {args.rows}x{args.cols}")
    logger.info(f"Densities: {start}-{stop}%")
    logger.info(f"Trials per density: {args.trials}")
    logger.info(f"Seed: {args.seed}")
    logger.info(f"Output: {args.output}")

    results = []
    completed = True
    try:
        for result in model.iter_sweep():
            results.append(result)
    except KeyboardInterrupt:
        completed = False
        logger.warning(f"Interrupted: keeping {len(results)} finalized densities")

    summary = model.summary(results, completed=completed)
    failed = int(summary.n_failed.sum())
    if failed:
        logger.warning(f"{failed} trials failed across the sweep")

    args.output.mkdir(parents=True, exist_ok=True)
    save_summary(summary, args.output / "sweep.npz")
    write_summary_csv(summary, args.output / "summary.csv")

    if args.plot and summary.results:
        import matplotlib

        matplotlib.use("Agg")
        from .plotting import plot_sweep, save_figure

        ax = plot_sweep(summary)
        save_figure(ax.figure, str(args.output / "sweep.png"))
        logger.info(f"Saved plot to {args.output / 'sweep.png'}")

    return 0 if completed else 130


if __name__ == "__main__":
    raise SystemExit(main())
