"""Connected components over an explicit edge list (union-find)."""

from __future__ import annotations

from typing import Iterable, Tuple

import numpy as np


class DisjointSet:
    """Union-find with path compression and union by size."""

    def __init__(self, n: int):
        if n < 0:
            raise ValueError("n must be non-negative")
        self.parent = list(range(n))
        self.size = [1] * n

    def __len__(self) -> int:
        return len(self.parent)

    def find(self, i: int) -> int:
        """Return the root of ``i``'s set, compressing the path on the way."""
        parent = self.parent
        root = i
        while parent[root] != root:
            root = parent[root]
        while parent[i] != root:
            parent[i], i = root, parent[i]
        return root

    def union(self, i: int, j: int) -> int:
        """Merge the sets holding ``i`` and ``j``; return the surviving root."""
        root_i, root_j = self.find(i), self.find(j)
        if root_i == root_j:
            return root_i
        # Attach the smaller tree under the larger one
        if self.size[root_i] < self.size[root_j]:
            root_i, root_j = root_j, root_i
        self.parent[root_j] = root_i
        self.size[root_i] += self.size[root_j]
        return root_i


def connected_components(edges: Iterable[Tuple[int, int]], n_vertices: int) -> tuple[np.ndarray, np.ndarray]:
    """Label the connected components of an undirected graph.

    Returns (membership, sizes): ``membership[i]`` is the component id of vertex ``i`` and
    ``sizes[c]`` the number of vertices in component ``c``. Ids are numbered 0..k-1 in order
    of each component's lowest vertex. Vertices without edges form singleton components.
    """
    n_vertices = int(n_vertices)
    sets = DisjointSet(n_vertices)
    for i, j in edges:
        i, j = int(i), int(j)
        if not (0 <= i < n_vertices and 0 <= j < n_vertices):
            raise ValueError(f"edge ({i}, {j}) references a vertex outside [0, {n_vertices})")
        sets.union(i, j)

    labels: dict[int, int] = {}
    membership = np.empty(n_vertices, dtype=np.intp)
    for vertex in range(n_vertices):
        membership[vertex] = labels.setdefault(sets.find(vertex), len(labels))
    sizes = np.bincount(membership, minlength=len(labels)).astype(np.intp)
    return membership, sizes
