import itertools

import pytest

from algokit.backtracking import (
    graph_colorings,
    hamiltonian_cycles,
    n_queens,
    render_board,
    subset_sums,
)

COLOR_GRAPH = [
    [0, 1, 1, 0, 0],
    [1, 0, 1, 1, 1],
    [1, 1, 0, 1, 0],
    [0, 1, 1, 0, 1],
    [0, 1, 0, 1, 0],
]

HAM_GRAPH = [
    [0, 1, 1, 0, 0],
    [1, 0, 1, 1, 0],
    [1, 1, 0, 1, 1],
    [0, 1, 1, 0, 1],
    [0, 0, 1, 1, 0],
]


def _complete(size):
    return [[int(i != j) for j in range(size)] for i in range(size)]


def test_colorings_are_proper():
    colorings = list(graph_colorings(COLOR_GRAPH, 3))
    assert colorings
    for coloring in colorings:
        assert len(coloring) == len(COLOR_GRAPH)
        assert all(1 <= c <= 3 for c in coloring)
        for u, row in enumerate(COLOR_GRAPH):
            for v, edge in enumerate(row):
                if edge:
                    assert coloring[u] != coloring[v]


def test_colorings_are_sorted_and_distinct():
    colorings = list(graph_colorings(COLOR_GRAPH, 3))
    assert colorings == sorted(set(colorings))


def test_colorings_closed_under_color_permutation():
    colorings = set(graph_colorings(COLOR_GRAPH, 3))
    for perm in itertools.permutations((1, 2, 3)):
        mapping = dict(zip((1, 2, 3), perm))
        assert {tuple(mapping[c] for c in col) for col in colorings} == colorings


def test_complete_graph_colorings_are_permutations():
    assert list(graph_colorings(_complete(3), 3)) == list(
        itertools.permutations((1, 2, 3))
    )


def test_edgeless_graph_allows_every_assignment():
    graph = [[0] * 3 for _ in range(3)]
    assert list(graph_colorings(graph, 2)) == list(
        itertools.product((1, 2), repeat=3)
    )


def test_colorings_reject_non_square():
    with pytest.raises(ValueError):
        graph_colorings([[0, 1], [1]], 2)


def test_hamiltonian_cycles_are_valid():
    cycles = list(hamiltonian_cycles(HAM_GRAPH))
    assert cycles
    for cycle in cycles:
        assert cycle[0] == cycle[-1] == 0
        assert sorted(cycle[:-1]) == list(range(len(HAM_GRAPH)))
        for u, v in zip(cycle, cycle[1:]):
            assert HAM_GRAPH[u][v]


def test_hamiltonian_cycles_closed_under_reversal_and_sorted():
    cycles = list(hamiltonian_cycles(HAM_GRAPH))
    assert cycles == sorted(cycles)
    assert {tuple(reversed(c)) for c in cycles} == set(cycles)


def test_hamiltonian_complete_graph():
    cycles = list(hamiltonian_cycles(_complete(4)))
    assert cycles == [(0, *p, 0) for p in itertools.permutations(range(1, 4))]


def test_hamiltonian_other_start():
    cycles = list(hamiltonian_cycles(HAM_GRAPH, 2))
    assert cycles
    assert all(c[0] == c[-1] == 2 for c in cycles)
    assert len(cycles) == len(list(hamiltonian_cycles(HAM_GRAPH, 0)))


def test_hamiltonian_path_graph_has_none():
    path = [[0, 1, 0], [1, 0, 1], [0, 1, 0]]
    assert list(hamiltonian_cycles(path)) == []


def test_hamiltonian_start_out_of_range():
    with pytest.raises(ValueError):
        hamiltonian_cycles(HAM_GRAPH, 5)


def test_four_queens():
    assert list(n_queens(4)) == [(1, 3, 0, 2), (2, 0, 3, 1)]


@pytest.mark.parametrize("n", range(1, 8))
def test_queens_never_attack(n):
    solutions = list(n_queens(n))
    assert solutions == sorted(set(solutions))
    for columns in solutions:
        assert sorted(columns) == list(range(n))
        for (r1, c1), (r2, c2) in itertools.combinations(enumerate(columns), 2):
            assert abs(c1 - c2) != r2 - r1
    mirrored = {tuple(n - 1 - c for c in cols) for cols in solutions}
    assert mirrored == set(solutions)


def test_queens_negative_size():
    with pytest.raises(ValueError):
        n_queens(-1)


def test_render_board_places_one_queen_per_row():
    columns = (1, 3, 0, 2)
    lines = render_board(columns).splitlines()
    assert len(lines) == len(columns)
    for line, column in zip(lines, columns):
        cells = line.split()
        assert len(cells) == len(columns)
        assert cells.count("Q") == 1
        assert cells[column] == "Q"


def test_render_board_rejects_bad_column():
    with pytest.raises(ValueError):
        render_board((0, 2))


def test_subset_sums_source_example():
    assert list(subset_sums([2, 3, 5, 6, 1], 7)) == [(2, 5), (6, 1)]


def test_subset_sums_are_subsequences_hitting_target():
    values = [1, 2, 3, 4, 5, 6]
    subsets = list(subset_sums(values, 9))
    assert subsets
    for subset in subsets:
        assert sum(subset) == 9
        remaining = iter(values)
        assert all(x in remaining for x in subset)
    assert len(set(subsets)) == len(subsets)