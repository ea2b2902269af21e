from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, Iterator, Optional, Tuple

import numpy as np

from .burn import area_burned
from .data_collector import DataCollector
from .errors import EmptyForestError
from .forest import sample_forest

logger = logging.getLogger(__name__)

Sampler = Callable[[Tuple[int, int], float, np.random.Generator], np.ndarray]

EMPTY_GRID_POLICIES = ("zero", "exclude")


@dataclass(frozen=True)
class SweepParams:
    """Parameters of a density sweep.

    Densities are percent occupied (0-100). ``empty_grid_policy`` decides what a trial whose
    grid has no trees contributes: "zero" counts it as 0% burned, "exclude" drops it.
    ``strict`` re-raises the first failing trial instead of logging and skipping it.
    """
    densities: Tuple[float, ...] = tuple(range(1, 100))
    n_trials: int = 100
    shape: Tuple[int, int] = (50, 50)
    seed: Optional[int] = 20230526
    empty_grid_policy: str = "zero"
    strict: bool = False


@dataclass(frozen=True)
class DensityResult:
    """Finalized outcome of all trials at one density."""
    density: float
    values: np.ndarray  # one slot per trial, NaN where the trial was excluded
    mean: float
    sd: float
    n_failed: int = 0
    n_empty: int = 0
    elapsed: float = 0.0

    @property
    def n_values(self) -> int:
        """Number of trials that contributed a value."""
        return int(np.count_nonzero(~np.isnan(self.values)))


@dataclass(frozen=True)
class SweepSummary:
    """Per-density results of one sweep, ordered by increasing density."""
    results: Tuple[DensityResult, ...]
    n_trials: int
    shape: Tuple[int, int]
    seed: Optional[int] = None
    completed: bool = True

    @property
    def densities(self) -> np.ndarray:
        return np.array([r.density for r in self.results], dtype=float)

    @property
    def means(self) -> np.ndarray:
        return np.array([r.mean for r in self.results], dtype=float)

    @property
    def sds(self) -> np.ndarray:
        return np.array([r.sd for r in self.results], dtype=float)

    @property
    def n_failed(self) -> np.ndarray:
        return np.array([r.n_failed for r in self.results], dtype=int)

    @property
    def n_empty(self) -> np.ndarray:
        return np.array([r.n_empty for r in self.results], dtype=int)

    @property
    def elapsed(self) -> np.ndarray:
        return np.array([r.elapsed for r in self.results], dtype=float)

    def trials_matrix(self) -> np.ndarray:
        """Raw values as an (n_trials, n_densities) table; row i is trial i, NaN if excluded."""
        table = np.full((self.n_trials, len(self.results)), np.nan, dtype=float)
        for column, result in enumerate(self.results):
            table[:, column] = result.values
        return table


class MonteCarlo:
    """Estimate the burned-area curve of a random forest as tree density varies.

    High-level flow, for each density in increasing order:
    - sample ``n_trials`` independent grids
    - compute the percentage of trees reached from the first column
    - reduce the sample to mean and standard deviation
    """

    def __init__(self, params: Optional[SweepParams] = None, sampler: Sampler = sample_forest):
        params = params or SweepParams()
        if params.n_trials <= 0:
            raise ValueError("n_trials must be positive")
        if len(params.shape) != 2 or min(params.shape) <= 0:
            raise ValueError("shape must be (rows, cols) with positive sizes")
        if not params.densities:
            raise ValueError("densities must not be empty")
        if not all(0.0 <= d <= 100.0 for d in params.densities):
            raise ValueError("densities must be percentages in [0, 100]")
        if len(set(params.densities)) != len(params.densities):
            raise ValueError("densities must not repeat")
        if params.empty_grid_policy not in EMPTY_GRID_POLICIES:
            raise ValueError(f"empty_grid_policy must be one of {EMPTY_GRID_POLICIES}")

        self.params = params
        self.sampler = sampler

    def iter_sweep(self) -> Iterator[DensityResult]:
        """Yield one finalized DensityResult per density.

        The random generator is seeded here, so every sweep with the same params and a
        deterministic sampler produces the same results. Stopping the iteration early leaves
        the results already yielded untouched.
        """
        params = self.params
        rng = np.random.default_rng(params.seed)
        shape = (int(params.shape[0]), int(params.shape[1]))
        collector = DataCollector(params.n_trials)

        for density in sorted(params.densities):
            start = time.perf_counter()
            for trial in range(params.n_trials):
                self._run_trial(collector, density, trial, shape, rng)

            mean, sd = collector.summarize(density)
            result = DensityResult(
                density=float(density),
                values=collector.convert_to_array(density),
                mean=mean,
                sd=sd,
                n_failed=collector.n_failed[density],
                n_empty=collector.n_empty[density],
                elapsed=time.perf_counter() - start,
            )
            logger.info(
                f"Density {density}%: mean={mean:.2f} sd={sd:.2f} "
                f"({result.n_values}/{params.n_trials} trials, {result.n_failed} failed)"
            )
            if result.n_values == 0:
                logger.warning(f"Density {density}%: no successful trials, statistics undefined")
            yield result

    def sweep(self) -> SweepSummary:
        """Run the full sweep and return every density's result."""
        logger.info(
            f"Starting sweep: {len(self.params.densities)} densities x {self.params.n_trials} trials "
            f"on a {self.params.shape[0]}x{self.params.shape[1]} grid"
        )
        results = tuple(self.iter_sweep())
        total_failed = sum(r.n_failed for r in results)
        if total_failed:
            logger.warning(f"Sweep finished with {total_failed} failed trials")
        else:
            logger.info("Sweep finished with no failed trials")
        return self.summary(results)

    def summary(self, results, completed: bool = True) -> SweepSummary:
        """Wrap (possibly partial) results with this sweep's settings."""
        return SweepSummary(
            results=tuple(results),
            n_trials=self.params.n_trials,
            shape=(int(self.params.shape[0]), int(self.params.shape[1])),
            seed=self.params.seed,
            completed=completed,
        )

    def _run_trial(
        self,
        collector: DataCollector,
        density: float,
        trial: int,
        shape: Tuple[int, int],
        rng: np.random.Generator,
    ) -> None:
        """Sample one grid and record its burned area; failures stay local to this trial."""
        try:
            grid = self.sampler(shape, density / 100.0, rng)
            burned = area_burned(grid)
        except EmptyForestError:
            collector.add_empty(density)
            if self.params.empty_grid_policy == "zero":
                collector.add_trial(density, trial, 0.0)
            return
        except Exception as exc:
            if self.params.strict:
                raise
            logger.warning(f"Density {density}% trial {trial} failed: {exc}")
            collector.add_failure(density)
            return
        collector.add_trial(density, trial, burned)
