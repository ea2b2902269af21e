from __future__ import annotations

from typing import Tuple

import numpy as np

from .errors import MalformedGridError


def as_occupancy_grid(cells) -> np.ndarray:
    """Coerce input to a 2D int8 array of 0/1 values, failing fast otherwise."""
    try:
        grid = np.asarray(cells)
    except ValueError as exc:
        # Ragged nested sequences
        raise MalformedGridError(f"grid has inconsistent dimensions: {exc}") from exc

    if grid.ndim != 2:
        raise MalformedGridError(f"grid must be a 2D array (rows x cols). Got shape={grid.shape}.")
    if grid.dtype == bool:
        return grid.astype(np.int8)
    if not np.issubdtype(grid.dtype, np.number):
        raise MalformedGridError(f"grid must be numeric or boolean, got dtype={grid.dtype}")
    if not np.isin(grid, (0, 1)).all():
        raise MalformedGridError("grid values must be 0 (empty) or 1 (tree)")
    return grid.astype(np.int8)


def sample_forest(shape: Tuple[int, int], density: float, rng: np.random.Generator) -> np.ndarray:
    """Draw a random forest: each cell independently holds a tree with probability ``density``."""
    n_rows, n_cols = (int(v) for v in shape)
    if n_rows <= 0 or n_cols <= 0:
        raise ValueError("shape must have positive rows and cols")
    if not 0.0 <= density <= 1.0:
        raise ValueError("density must be in [0, 1]")
    return (rng.random((n_rows, n_cols)) < float(density)).astype(np.int8)


class Forest:
    """A gridded landscape where each cell is either empty (0) or a tree (1).

    Fire enters from the first column; ``ignition_edge`` is that column's occupancy.
    """

    def __init__(self, cells):
        """Create a forest from a 2D binary grid (validated, never modified)."""
        self.cells = as_occupancy_grid(cells)
        self.cells.setflags(write=False)
        self.n_trees = int(self.cells.sum())

    @classmethod
    def random(cls, shape: Tuple[int, int], density: float, rng: np.random.Generator) -> Forest:
        """Sample a forest with independent Bernoulli(density) cells."""
        return cls(sample_forest(shape, density, rng))

    @property
    def shape(self) -> tuple[int, int]:
        """Grid shape as (n_rows, n_cols)."""
        return self.cells.shape

    @property
    def ignition_edge(self) -> np.ndarray:
        """Occupancy of the first column, where the fire line starts."""
        if self.cells.shape[1] == 0:
            return np.zeros(self.cells.shape[0], dtype=np.int8)
        return self.cells[:, 0]

    @property
    def density(self) -> float:
        """Observed fraction of occupied cells."""
        if self.cells.size == 0:
            return 0.0
        return self.n_trees / float(self.cells.size)
