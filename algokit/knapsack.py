"""Fractional (greedy) and 0/1 (dynamic programming) knapsack."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple, Union


@dataclass(frozen=True)
class Item:
    """An item with a weight and a value."""

    weight: float
    value: float

    @property
    def ratio(self) -> float:
        """Value per unit of weight."""
        return self.value / self.weight


@dataclass(frozen=True)
class Portion:
    """The share of one item placed in the knapsack."""

    index: int
    item: Item
    fraction: float


@dataclass(frozen=True)
class KnapsackResult:
    """Total value reached and the portions taken, in the order chosen."""

    total_value: float
    portions: Tuple[Portion, ...]


def _as_item(entry: Union[Item, Tuple[float, float]]) -> Item:
    return entry if isinstance(entry, Item) else Item(*entry)


def fractional_knapsack(
    capacity: float, items: Iterable[Union[Item, Tuple[float, float]]]
) -> KnapsackResult:
    """Greedily fill by value per weight, splitting the last item if needed."""
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    indexed = [(index, _as_item(entry)) for index, entry in enumerate(items)]
    if any(item.weight <= 0 for _, item in indexed):
        raise ValueError("item weights must be positive")

    ranked = sorted(indexed, key=lambda pair: pair[1].ratio, reverse=True)
    total: float = 0.0
    portions: List[Portion] = []
    for index, item in ranked:
        if capacity <= 0:
            break
        if item.weight <= capacity:
            total += item.value
            capacity -= item.weight
            portions.append(Portion(index, item, 1.0))
        else:
            fraction = capacity / item.weight
            total += item.value * fraction
            portions.append(Portion(index, item, fraction))
            break
    return KnapsackResult(total, tuple(portions))


def knapsack_01(
    capacity: int, weights: Sequence[int], values: Sequence[float]
) -> KnapsackResult:
    """Solve the 0/1 knapsack exactly; portions are listed from the last item back."""
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")
    if any(weight < 0 for weight in weights):
        raise ValueError("weights must not be negative")

    table: List[List[float]] = [[0] * (capacity + 1)]
    for weight, value in zip(weights, values):
        prev = table[-1]
        table.append(
            [
                0 if w == 0
                else max(value + prev[w - weight], prev[w]) if weight <= w
                else prev[w]
                for w in range(capacity + 1)
            ]
        )

    portions: List[Portion] = []
    remaining = capacity
    for i in range(len(weights), 0, -1):
        if remaining <= 0:
            break
        if table[i][remaining] != table[i - 1][remaining]:
            portions.append(Portion(i - 1, Item(weights[i - 1], values[i - 1]), 1.0))
            remaining -= weights[i - 1]
    return KnapsackResult(table[-1][capacity], tuple(portions))