"""Dynamic programming: longest common subsequence and matrix-chain order."""

from __future__ import annotations

from typing import Iterable, List, Sequence


def lcs_length(first: Sequence, second: Sequence) -> int:
    """Return the length of the longest common subsequence."""
    previous: List[int] = [0] * (len(second) + 1)
    for a in first:
        current = [0]
        for j, b in enumerate(second, 1):
            if a == b:
                current.append(previous[j - 1] + 1)
            else:
                current.append(max(previous[j], current[j - 1]))
        previous = current
    return previous[-1]


def matrix_chain_order(dimensions: Iterable[int]) -> int:
    """Return the least number of scalar multiplications for a matrix chain.

    Matrix ``i`` has shape ``dimensions[i] x dimensions[i + 1]``.
    """
    dims = list(dimensions)
    if len(dims) < 2:
        raise ValueError("at least two dimensions are needed")
    count = len(dims) - 1
    cost = [[0] * count for _ in range(count)]
    for length in range(2, count + 1):
        for i in range(count - length + 1):
            j = i + length - 1
            cost[i][j] = min(
                cost[i][k] + cost[k + 1][j] + dims[i] * dims[k + 1] * dims[j + 1]
                for k in range(i, j)
            )
    return cost[0][count - 1]