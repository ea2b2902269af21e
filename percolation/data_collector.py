from __future__ import annotations

from collections import defaultdict

import numpy as np


def summarize(values) -> tuple[float, float]:
    """Sample mean and sample standard deviation (ddof=1), ignoring NaN slots.

    A single value has sd 0.0. With no values both are NaN; callers report that density
    through its failure counts instead of dropping it.
    """
    sample_array = np.asarray(values, dtype=float)
    if sample_array.ndim != 1:
        raise ValueError("values must be a 1D array")
    sample_array = sample_array[~np.isnan(sample_array)]
    if sample_array.size == 0:
        return float("nan"), float("nan")

    sample_mean = float(sample_array.mean())
    if sample_array.size == 1:
        return sample_mean, 0.0
    return sample_mean, float(sample_array.std(ddof=1))


class DataCollector:
    """Collect per-trial burned-area percentages for one density sweep.

    Each density owns an array with one slot per trial. A trial that fails or is excluded
    leaves its slot as NaN, so slot i is always trial i and one bad trial never touches
    another trial's value.
    """

    def __init__(self, n_trials: int):
        if n_trials <= 0:
            raise ValueError("n_trials must be positive")
        self.n_trials = int(n_trials)
        self.values: dict[float, np.ndarray] = {}
        self.n_failed: dict[float, int] = defaultdict(int)
        self.n_empty: dict[float, int] = defaultdict(int)

    def _slots(self, density: float) -> np.ndarray:
        if density not in self.values:
            self.values[density] = np.full(self.n_trials, np.nan, dtype=float)
        return self.values[density]

    def add_trial(self, density: float, trial: int, burned: float) -> None:
        """Record the burned area of trial number ``trial``."""
        self._slots(density)[trial] = float(burned)

    def add_failure(self, density: float) -> None:
        self.n_failed[density] += 1

    def add_empty(self, density: float) -> None:
        """Count a trial whose grid had no trees (whatever the empty-grid policy did with it)."""
        self.n_empty[density] += 1

    def convert_to_array(self, density: float) -> np.ndarray:
        """Per-trial values for ``density``; NaN marks failed or excluded trials."""
        return self._slots(density).copy()

    def n_values(self, density: float) -> int:
        """Number of trials at ``density`` with a recorded value."""
        return int(np.count_nonzero(~np.isnan(self._slots(density))))

    def summarize(self, density: float) -> tuple[float, float]:
        """Mean and sample sd of the recorded trials at ``density``."""
        return summarize(self._slots(density))
