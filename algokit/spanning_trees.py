"""Minimum spanning trees: Prim's and Kruskal's algorithms."""

from __future__ import annotations

import math
from typing import Iterable, List, Sequence, Tuple

from algokit.shortest_paths import Edge, EdgeLike, _as_edges


class DisjointSet:
    """Union-find with path compression and union by rank."""

    def __init__(self, size: int) -> None:
        self._parent = list(range(size))
        self._rank = [0] * size

    def find(self, item: int) -> int:
        """Return the representative of the set holding ``item``."""
        root = item
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[item] != root:
            self._parent[item], item = root, self._parent[item]
        return root

    def union(self, a: int, b: int) -> bool:
        """Join the sets of ``a`` and ``b``; return False if already joined."""
        root_a, root_b = self.find(a), self.find(b)
        if root_a == root_b:
            return False
        if self._rank[root_a] < self._rank[root_b]:
            self._parent[root_a] = root_b
        elif self._rank[root_a] > self._rank[root_b]:
            self._parent[root_b] = root_a
        else:
            self._parent[root_b] = root_a
            self._rank[root_a] += 1
        return True


def prim_mst(graph: Sequence[Sequence[float]]) -> List[Edge]:
    """Return the MST edges of a connected graph given as an adjacency matrix.

    A zero entry means "no edge". Each returned edge runs from the parent
    to vertex 1, 2, ... in order. Raises ValueError if not connected.
    """
    size = len(graph)
    if any(len(row) != size for row in graph):
        raise ValueError("adjacency matrix must be square")
    if size == 0:
        return []

    key: List[float] = [math.inf] * size
    parent = [-1] * size
    in_tree = [False] * size
    key[0] = 0

    for _ in range(size - 1):
        candidates = [v for v in range(size) if not in_tree[v] and key[v] < math.inf]
        if not candidates:
            raise ValueError("graph is not connected")
        u = min(candidates, key=key.__getitem__)
        in_tree[u] = True
        for v, weight in enumerate(graph[u]):
            if weight and not in_tree[v] and weight < key[v]:
                parent[v] = u
                key[v] = weight

    if any(p == -1 for p in parent[1:]):
        raise ValueError("graph is not connected")
    return [Edge(parent[v], v, graph[parent[v]][v]) for v in range(1, size)]


def kruskal_mst(
    num_vertices: int, edges: Iterable[EdgeLike]
) -> Tuple[List[Edge], float]:
    """Return the chosen edges and total weight of a minimum spanning forest."""
    chosen: List[Edge] = []
    cost: float = 0
    sets = DisjointSet(num_vertices)
    for edge in sorted(_as_edges(edges), key=lambda e: e.weight):
        if sets.union(edge.src, edge.dest):
            chosen.append(edge)
            cost += edge.weight
    return chosen, cost