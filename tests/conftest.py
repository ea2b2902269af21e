"""Test configuration and fixtures."""

import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest


@pytest.fixture
def rng():
    """Seeded generator so random grids are reproducible."""
    return np.random.default_rng(12345)


@pytest.fixture
def sample_grid_size():
    """Provide a standard grid size for tests."""
    return (10, 10)


@pytest.fixture
def comb_grid():
    """Two teeth touching the first column and one isolated block on the right."""
    return np.array(
        [
            [1, 1, 0, 0, 0],
            [0, 0, 0, 1, 1],
            [1, 1, 1, 0, 1],
            [0, 0, 0, 0, 0],
        ]
    )
