"""Single-source and all-pairs shortest path algorithms."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple, Union


@dataclass(frozen=True)
class Edge:
    """A directed weighted edge."""

    src: int
    dest: int
    weight: float


class NegativeCycleError(ValueError):
    """Raised when a negative-weight cycle is reachable from the source."""


EdgeLike = Union[Edge, Tuple[int, int, float]]


def _as_edges(edges: Iterable[EdgeLike]) -> List[Edge]:
    return [edge if isinstance(edge, Edge) else Edge(*edge) for edge in edges]


def _check_vertex(vertex: int, count: int, what: str) -> None:
    if not 0 <= vertex < count:
        raise ValueError(f"{what} {vertex} is out of range for {count} vertices")


def _check_square(graph: Sequence[Sequence[float]]) -> int:
    size = len(graph)
    if any(len(row) != size for row in graph):
        raise ValueError("adjacency matrix must be square")
    return size


def bellman_ford(
    num_vertices: int, edges: Iterable[EdgeLike], source: int
) -> List[float]:
    """Return distances from ``source``; unreachable vertices get ``math.inf``.

    Raises NegativeCycleError if a negative cycle is reachable.
    """
    edge_list = _as_edges(edges)
    _check_vertex(source, num_vertices, "source")
    for edge in edge_list:
        _check_vertex(edge.src, num_vertices, "edge source")
        _check_vertex(edge.dest, num_vertices, "edge destination")

    dist: List[float] = [math.inf] * num_vertices
    dist[source] = 0
    for _ in range(num_vertices - 1):
        for edge in edge_list:
            if dist[edge.src] != math.inf and dist[edge.src] + edge.weight < dist[edge.dest]:
                dist[edge.dest] = dist[edge.src] + edge.weight

    for edge in edge_list:
        if dist[edge.src] != math.inf and dist[edge.src] + edge.weight < dist[edge.dest]:
            raise NegativeCycleError("graph contains a negative weight cycle")
    return dist


def _closest_unvisited(dist: List[float], visited: List[bool]) -> int:
    candidates = [v for v, done in enumerate(visited) if not done]
    # Among equally close vertices the highest-numbered one wins.
    return min(reversed(candidates), key=dist.__getitem__)


def dijkstra(graph: Sequence[Sequence[float]], source: int) -> List[float]:
    """Return distances from ``source`` over an adjacency matrix.

    A zero entry means "no edge". Unreachable vertices get ``math.inf``.
    """
    size = _check_square(graph)
    _check_vertex(source, size, "source")

    dist: List[float] = [math.inf] * size
    visited = [False] * size
    dist[source] = 0

    for _ in range(size - 1):
        u = _closest_unvisited(dist, visited)
        visited[u] = True
        if dist[u] == math.inf:
            continue
        for v, weight in enumerate(graph[u]):
            if not visited[v] and weight and dist[u] + weight < dist[v]:
                dist[v] = dist[u] + weight
    return dist


def floyd_warshall(graph: Sequence[Sequence[float]]) -> List[List[float]]:
    """Return the all-pairs shortest distance matrix.

    Missing edges are given as ``math.inf``; the input is not modified.
    """
    _check_square(graph)
    dist = [list(row) for row in graph]
    for k, through in enumerate(dist):
        for row in dist:
            to_k = row[k]
            if to_k == math.inf:
                continue
            for j, onward in enumerate(through):
                if to_k + onward < row[j]:
                    row[j] = to_k + onward
    return dist