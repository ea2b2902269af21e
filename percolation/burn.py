"""Burned area of a forest when the whole first column is set alight.

Fire spreads up/down and left/right between neighbouring trees, never diagonally. The burned
trees are therefore exactly the connected components (under 4-connectivity) that touch the
first column, and no time stepping is needed to find them.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .components import connected_components
from .errors import EmptyForestError
from .forest import Forest


@dataclass(frozen=True)
class ComponentPartition:
    """Occupied cells of a grid grouped into connected components.

    coords[i] is the (row, col) of occupied cell i (row-major order), membership[i] its
    component id and sizes[c] the number of cells in component c.
    """
    shape: tuple[int, int]
    coords: np.ndarray
    membership: np.ndarray
    sizes: np.ndarray

    @property
    def n_trees(self) -> int:
        return int(self.coords.shape[0])

    @property
    def ignition_set(self) -> np.ndarray:
        """Indices of occupied cells in the first column."""
        return np.flatnonzero(self.coords[:, 1] == 0)


def _as_forest(grid) -> Forest:
    return grid if isinstance(grid, Forest) else Forest(grid)


def occupied_edges(grid) -> tuple[np.ndarray, np.ndarray]:
    """Return (coords, edges) for the occupied cells of ``grid``.

    Each unordered pair of vertically or horizontally adjacent trees appears once in
    ``edges`` as a row (i, j) of cell indices into ``coords``.
    """
    cells = _as_forest(grid).cells.astype(bool)
    rows, cols = np.nonzero(cells)
    coords = np.column_stack((rows, cols)).astype(np.intp)

    index = np.full(cells.shape, -1, dtype=np.intp)
    index[rows, cols] = np.arange(coords.shape[0])

    # Right neighbours: (r, c) -- (r, c+1)
    horizontal = cells[:, :-1] & cells[:, 1:]
    # Down neighbours: (r, c) -- (r+1, c)
    vertical = cells[:-1, :] & cells[1:, :]

    edges = np.concatenate(
        (
            np.column_stack((index[:, :-1][horizontal], index[:, 1:][horizontal])),
            np.column_stack((index[:-1, :][vertical], index[1:, :][vertical])),
        )
    ).astype(np.intp)
    return coords, edges


def label_components(grid) -> ComponentPartition:
    """Group the trees of ``grid`` into 4-connected components."""
    forest = _as_forest(grid)
    coords, edges = occupied_edges(forest)
    membership, sizes = connected_components(edges, coords.shape[0])
    return ComponentPartition(shape=forest.shape, coords=coords, membership=membership, sizes=sizes)


def burned_components(partition: ComponentPartition) -> np.ndarray:
    """Distinct ids of the components reached by the fire line."""
    return np.unique(partition.membership[partition.ignition_set])


def area_burned(grid) -> float:
    """Percentage of trees (0-100) connected to the first column.

    Raises EmptyForestError when the grid holds no trees, since the ratio is undefined.
    """
    forest = _as_forest(grid)
    if forest.n_trees == 0:
        raise EmptyForestError(f"undefined burned-area ratio for empty grid of shape {forest.shape}")

    partition = label_components(forest)
    burned = int(partition.sizes[burned_components(partition)].sum())
    return burned / float(forest.n_trees) * 100.0


def burned_mask(grid) -> np.ndarray:
    """Boolean map of the trees that burn. An empty grid gives an all-False map."""
    forest = _as_forest(grid)
    mask = np.zeros(forest.shape, dtype=bool)
    if forest.n_trees == 0:
        return mask

    partition = label_components(forest)
    on_fire = np.isin(partition.membership, burned_components(partition))
    burning = partition.coords[on_fire]
    mask[burning[:, 0], burning[:, 1]] = True
    return mask
