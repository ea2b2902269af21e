from __future__ import annotations

from typing import Any, Optional

import matplotlib.pyplot as plt
import numpy as np

from .monte_carlo_model import SweepSummary


def plot_sweep(summary: SweepSummary, ax: Optional[Any] = None, *, color: str = "tab:red") -> Any:
    """Mean burned area against density with a shaded mean +/- sd band.

    Densities without any successful trial are left as gaps.
    """
    if ax is None:
        _, ax = plt.subplots(1, 1, figsize=(7, 5))

    densities = summary.densities
    means = summary.means
    sds = summary.sds

    ax.fill_between(densities, means - sds, means + sds, color=color, alpha=0.2, linewidth=0, label="mean ± sd")
    ax.plot(densities, means, color=color, label="mean")

    ax.set_xlabel("Tree density (%)")
    ax.set_ylabel("Area burned (%)")
    if densities.size > 1:
        ax.set_xlim(float(np.nanmin(densities)), float(np.nanmax(densities)))
    ax.set_ylim(0.0, 100.0)
    rows, cols = summary.shape
    ax.set_title(f"{rows}x{cols} forest, {summary.n_trials} trials per density")
    ax.legend(loc="upper left")
    return ax


def plot_timings(summary: SweepSummary, ax: Optional[Any] = None) -> Any:
    """Seconds spent on each density."""
    if ax is None:
        _, ax = plt.subplots(1, 1, figsize=(7, 4))
    ax.plot(summary.densities, summary.elapsed, marker=".", linestyle="-")
    ax.set_xlabel("Tree density (%)")
    ax.set_ylabel("Elapsed (s)")
    return ax


def save_figure(fig: Any, path: str, *, dpi: int = 150) -> None:
    """Save a Matplotlib figure to disk."""
    fig.savefig(path, dpi=dpi, bbox_inches="tight")
