"""Divide and conquer: min/max, binary search and Strassen's 2x2 product."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence


@dataclass(frozen=True)
class MinMax:
    """The smallest and largest element of a sequence."""

    minimum: float
    maximum: float


def _span(values: Sequence, low: int, high: int) -> MinMax:
    if low == high:
        return MinMax(values[low], values[low])
    if high == low + 1:
        if values[low] < values[high]:
            return MinMax(values[low], values[high])
        return MinMax(values[high], values[low])
    mid = (low + high) // 2
    left = _span(values, low, mid)
    right = _span(values, mid + 1, high)
    return MinMax(
        left.minimum if left.minimum < right.minimum else right.minimum,
        left.maximum if left.maximum > right.maximum else right.maximum,
    )


def find_min_max(values: Sequence) -> MinMax:
    """Return the minimum and maximum by splitting the sequence in halves."""
    if not values:
        raise ValueError("cannot take min and max of an empty sequence")
    return _span(values, 0, len(values) - 1)


def binary_search(values: Sequence, target) -> int:
    """Return an index of ``target`` in sorted ``values``, or -1 if absent."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = (low + high) // 2
        if values[mid] == target:
            return mid
        if values[mid] < target:
            low = mid + 1
        else:
            high = mid - 1
    return -1


def _check_2x2(matrix: Sequence[Sequence[float]], name: str) -> None:
    if len(matrix) != 2 or any(len(row) != 2 for row in matrix):
        raise ValueError(f"{name} must be a 2x2 matrix")


def strassen_multiply(
    a: Sequence[Sequence[float]], b: Sequence[Sequence[float]]
) -> List[List[float]]:
    """Multiply two 2x2 matrices with Strassen's seven products."""
    _check_2x2(a, "a")
    _check_2x2(b, "b")
    (a11, a12), (a21, a22) = a
    (b11, b12), (b21, b22) = b

    m1 = (a11 + a22) * (b11 + b22)
    m2 = (a21 + a22) * b11
    m3 = a11 * (b12 - b22)
    m4 = a22 * (b21 - b11)
    m5 = (a11 + a12) * b22
    m6 = (a21 - a11) * (b11 + b12)
    m7 = (a12 - a22) * (b21 + b22)

    return [
        [m1 + m4 - m5 + m7, m3 + m5],
        [m2 + m4, m1 - m2 + m3 + m6],
    ]