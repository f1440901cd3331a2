import random

import pytest

from algokit.knapsack import Item, fractional_knapsack, knapsack_01

SAMPLE_ITEMS = [Item(10, 60), Item(20, 100), Item(30, 120)]
WEIGHTS = [10, 20, 30]
VALUES = [60, 100, 120]
CAPACITY = 50


def test_fractional_sample_value():
    result = fractional_knapsack(CAPACITY, SAMPLE_ITEMS)
    assert result.total_value == pytest.approx(240.0)


def test_fractional_sample_fills_capacity():
    result = fractional_knapsack(CAPACITY, SAMPLE_ITEMS)
    assert [p.index for p in result.portions] == [0, 1, 2]
    used = sum(p.item.weight * p.fraction for p in result.portions)
    assert used == pytest.approx(CAPACITY)
    assert all(p.fraction == 1.0 for p in result.portions[:-1])
    assert 0 < result.portions[-1].fraction < 1


def test_fractional_accepts_tuples():
    pairs = [(item.weight, item.value) for item in SAMPLE_ITEMS]
    assert fractional_knapsack(CAPACITY, pairs) == fractional_knapsack(CAPACITY, SAMPLE_ITEMS)


def test_fractional_everything_fits():
    result = fractional_knapsack(1000, SAMPLE_ITEMS)
    assert result.total_value == sum(item.value for item in SAMPLE_ITEMS)
    assert all(p.fraction == 1.0 for p in result.portions)


def test_fractional_zero_capacity():
    result = fractional_knapsack(0, SAMPLE_ITEMS)
    assert result.total_value == 0
    assert result.portions == ()


def test_fractional_rejects_zero_weight():
    with pytest.raises(ValueError):
        fractional_knapsack(10, [Item(0, 5)])


def test_fractional_rejects_negative_capacity():
    with pytest.raises(ValueError):
        fractional_knapsack(-1, SAMPLE_ITEMS)


def test_01_sample():
    result = knapsack_01(CAPACITY, WEIGHTS, VALUES)
    assert result.total_value == 220
    assert [p.index for p in result.portions] == [2, 1]


def test_01_portions_are_consistent():
    result = knapsack_01(CAPACITY, WEIGHTS, VALUES)
    assert sum(p.item.value for p in result.portions) == result.total_value
    assert sum(p.item.weight for p in result.portions) <= CAPACITY
    for p in result.portions:
        assert (p.item.weight, p.item.value) == (WEIGHTS[p.index], VALUES[p.index])


def test_01_zero_capacity():
    result = knapsack_01(0, WEIGHTS, VALUES)
    assert result.total_value == 0
    assert result.portions == ()


def test_01_mismatched_lengths():
    with pytest.raises(ValueError):
        knapsack_01(10, [1, 2], [3])


def test_01_negative_capacity():
    with pytest.raises(ValueError):
        knapsack_01(-5, WEIGHTS, VALUES)


def test_random_invariants():
    rng = random.Random(2024)
    for _ in range(40):
        count = rng.randint(0, 8)
        weights = [rng.randint(1, 15) for _ in range(count)]
        values = [rng.randint(1, 50) for _ in range(count)]
        capacity = rng.randint(0, 40)
        exact = knapsack_01(capacity, weights, values)
        greedy = fractional_knapsack(capacity, list(zip(weights, values)))
        assert sum(p.item.weight for p in exact.portions) <= capacity
        assert sum(p.item.value for p in exact.portions) == exact.total_value
        assert len({p.index for p in exact.portions}) == len(exact.portions)
        assert greedy.total_value >= exact.total_value - 1e-9