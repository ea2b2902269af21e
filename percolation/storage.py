"""Persist sweep results: raw per-trial table as .npz, reduced statistics as CSV."""

from __future__ import annotations

import logging
from pathlib import Path

import numpy as np

from .monte_carlo_model import DensityResult, SweepSummary

logger = logging.getLogger(__name__)

CSV_COLUMNS = ("density", "mean", "sd", "n_values", "n_failed", "n_empty", "elapsed_s")


def save_summary(summary: SweepSummary, path: Path) -> Path:
    """Save the raw (n_trials, n_densities) table plus per-density statistics."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    np.savez(
        path,
        trials=summary.trials_matrix(),
        densities=summary.densities,
        means=summary.means,
        sds=summary.sds,
        n_failed=summary.n_failed,
        n_empty=summary.n_empty,
        elapsed=summary.elapsed,
        shape=np.asarray(summary.shape, dtype=int),
        seed=np.asarray(-1 if summary.seed is None else summary.seed, dtype=np.int64),
        completed=np.asarray(summary.completed),
    )
    # np.savez appends .npz when missing
    saved = path if path.suffix == ".npz" else path.with_name(path.name + ".npz")
    logger.info(f"Saved {len(summary.results)} density results to {saved}")
    return saved


def load_summary(path: Path) -> SweepSummary:
    """Load a summary written by save_summary."""
    with np.load(Path(path)) as data:
        trials = data["trials"]
        results = []
        for column, density in enumerate(data["densities"]):
            results.append(
                DensityResult(
                    density=float(density),
                    values=trials[:, column].copy(),
                    mean=float(data["means"][column]),
                    sd=float(data["sds"][column]),
                    n_failed=int(data["n_failed"][column]),
                    n_empty=int(data["n_empty"][column]),
                    elapsed=float(data["elapsed"][column]),
                )
            )
        seed = int(data["seed"])
        return SweepSummary(
            results=tuple(results),
            n_trials=int(trials.shape[0]),
            shape=tuple(int(v) for v in data["shape"]),
            seed=None if seed < 0 else seed,
            completed=bool(data["completed"]),
        )


def write_summary_csv(summary: SweepSummary, path: Path) -> Path:
    """Write one row per density with its reduced statistics."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    table = np.column_stack(
        (
            summary.densities,
            summary.means,
            summary.sds,
            np.array([r.n_values for r in summary.results], dtype=float),
            summary.n_failed,
            summary.n_empty,
            summary.elapsed,
        )
    )
    np.savetxt(
        path,
        table,
        delimiter=",",
        header=",".join(CSV_COLUMNS),
        comments="",
        fmt=["%g", "%.6f", "%.6f", "%d", "%d", "%d", "%.6f"],
    )
    logger.info(f"Wrote summary table to {path}")
    return path
