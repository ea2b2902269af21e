"""
Forest-fire percolation.

Fire lit along the first column of a random forest burns every tree connected to it
through up/down/left/right neighbours. A Monte Carlo sweep over tree density estimates the
mean and spread of the burned area.
"""

from .burn import ComponentPartition, area_burned, burned_mask, label_components
from .components import DisjointSet, connected_components
from .data_collector import DataCollector
from .errors import EmptyForestError, MalformedGridError
from .forest import Forest, sample_forest
from .monte_carlo_model import DensityResult, MonteCarlo, SweepParams, SweepSummary

__version__ = "0.1.0"

__all__ = [
    "ComponentPartition",
    "DataCollector",
    "DensityResult",
    "DisjointSet",
    "EmptyForestError",
    "Forest",
    "MalformedGridError",
    "MonteCarlo",
    "SweepParams",
    "SweepSummary",
    "area_burned",
    "burned_mask",
    "connected_components",
    "label_components",
    "sample_forest",
]
