"""Backtracking searches: graph colouring, Hamiltonian cycles, N-queens, subset sums."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Sequence, Set, Tuple

Matrix = Sequence[Sequence[int]]


def _square_size(graph: Matrix) -> int:
    size = len(graph)
    if any(len(row) != size for row in graph):
        raise ValueError("adjacency matrix must be square")
    return size


def graph_colorings(graph: Matrix, num_colors: int) -> Iterator[Tuple[int, ...]]:
    """Yield every proper colouring using colours ``1..num_colors``.

    Colourings come in lexicographic order; a nonzero entry
    ``graph[u][v]`` means ``u`` and ``v`` must differ.
    """
    size = _square_size(graph)
    if num_colors < 0:
        raise ValueError("number of colours must not be negative")
    return _colorings(graph, size, num_colors)


def _colorings(graph: Matrix, size: int, num_colors: int) -> Iterator[Tuple[int, ...]]:
    colors: List[int] = []

    def safe(vertex: int, color: int) -> bool:
        if graph[vertex][vertex]:
            return False
        return not any(
            graph[vertex][other] and assigned == color
            for other, assigned in enumerate(colors)
        )

    def extend() -> Iterator[Tuple[int, ...]]:
        vertex = len(colors)
        if vertex == size:
            yield tuple(colors)
            return
        for color in range(1, num_colors + 1):
            if safe(vertex, color):
                colors.append(color)
                yield from extend()
                colors.pop()

    if size:
        yield from extend()


def hamiltonian_cycles(graph: Matrix, start: int = 0) -> Iterator[Tuple[int, ...]]:
    """Yield every Hamiltonian cycle beginning and ending at ``start``.

    Each cycle lists all vertices once and then ``start`` again; cycles
    come in lexicographic order of the vertices visited.
    """
    size = _square_size(graph)
    if not 0 <= start < size:
        raise ValueError(f"start {start} is out of range for {size} vertices")
    return _hamiltonian(graph, size, start)


def _hamiltonian(graph: Matrix, size: int, start: int) -> Iterator[Tuple[int, ...]]:
    if size < 2:
        return
    path: List[int] = [start]
    used: Set[int] = {start}

    def extend() -> Iterator[Tuple[int, ...]]:
        last = path[-1]
        for vertex in range(size):
            if vertex in used or not graph[last][vertex]:
                continue
            if len(path) + 1 == size:
                if graph[vertex][start]:
                    yield (*path, vertex, start)
            else:
                path.append(vertex)
                used.add(vertex)
                yield from extend()
                path.pop()
                used.discard(vertex)

    yield from extend()


def n_queens(n: int) -> Iterator[Tuple[int, ...]]:
    """Yield every placement of ``n`` non-attacking queens.

    A placement gives the column of the queen in each row, counting from 0.
    """
    if n < 0:
        raise ValueError("board size must not be negative")
    return _queens(n)


def _queens(n: int) -> Iterator[Tuple[int, ...]]:
    columns: List[int] = []

    def safe(column: int) -> bool:
        row = len(columns)
        return all(
            placed != column and abs(placed - column) != row - placed_row
            for placed_row, placed in enumerate(columns)
        )

    def extend() -> Iterator[Tuple[int, ...]]:
        if len(columns) == n:
            yield tuple(columns)
            return
        for column in range(n):
            if safe(column):
                columns.append(column)
                yield from extend()
                columns.pop()

    if n:
        yield from extend()


def render_board(columns: Sequence[int]) -> str:
    """Draw a placement as rows of ``Q`` and ``.`` separated by spaces."""
    size = len(columns)
    if any(not 0 <= column < size for column in columns):
        raise ValueError("queen column is outside the board")
    return "\n".join(
        " ".join("Q" if cell == column else "." for cell in range(size))
        for column in columns
    )


def subset_sums(values: Iterable[int], target: int) -> Iterator[Tuple[int, ...]]:
    """Yield subsets (in input order) whose elements add up to ``target``.

    Elements are tried included before excluded; a branch stops as soon as
    its sum reaches or exceeds ``target``.
    """
    items = list(values)
    chosen: List[int] = []

    def search(index: int, total: int) -> Iterator[Tuple[int, ...]]:
        if total == target:
            yield tuple(chosen)
            return
        if index == len(items) or total > target:
            return
        chosen.append(items[index])
        yield from search(index + 1, total + items[index])
        chosen.pop()
        yield from search(index + 1, total)

    return search(0, 0)