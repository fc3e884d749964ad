import pytest

from classicalgos.knapsack import Item, Selection, fractional_knapsack, knapsack_01

WEIGHTS = [10, 20, 30]
VALUES = [60, 100, 120]
ITEMS = [Item(w, p) for w, p in zip(WEIGHTS, VALUES)]


def test_knapsack_01_example():
    assert knapsack_01(50, WEIGHTS, VALUES) == 220


def test_knapsack_01_zero_capacity():
    assert knapsack_01(0, WEIGHTS, VALUES) == 0


def test_knapsack_01_everything_fits():
    assert knapsack_01(sum(WEIGHTS), WEIGHTS, VALUES) == sum(VALUES)


def test_knapsack_01_monotonic_in_capacity():
    results = [knapsack_01(c, WEIGHTS, VALUES) for c in range(70)]
    assert results == sorted(results)


def test_knapsack_01_single_item_too_heavy():
    assert knapsack_01(5, [6], [100]) == 0


def test_knapsack_01_mismatched_lengths():
    with pytest.raises(ValueError):
        knapsack_01(10, [1, 2], [3])


def test_knapsack_01_negative_capacity():
    with pytest.raises(ValueError):
        knapsack_01(-1, WEIGHTS, VALUES)


def test_fractional_example():
    selections, total = fractional_knapsack(ITEMS, 50)
    assert total == pytest.approx(240.0)
    assert [s.fraction for s in selections[:2]] == [1.0, 1.0]
    assert selections[2].fraction == pytest.approx(20 / 30)


def test_fractional_order_by_ratio():
    selections, _ = fractional_knapsack(ITEMS, 50)
    ratios = [s.item.ratio() for s in selections]
    assert ratios == sorted(ratios, reverse=True)


def test_fractional_respects_capacity():
    for capacity in range(0, 80, 7):
        selections, total = fractional_knapsack(ITEMS, capacity)
        assert sum(s.weight for s in selections) <= capacity + 1e-9
        assert total == pytest.approx(sum(s.profit for s in selections))


def test_fractional_at_least_01():
    for capacity in range(0, 70, 5):
        _, total = fractional_knapsack(ITEMS, capacity)
        assert total >= knapsack_01(capacity, WEIGHTS, VALUES) - 1e-9


def test_fractional_large_capacity_takes_all():
    selections, total = fractional_knapsack(ITEMS, 1000)
    assert all(s.fraction == 1.0 for s in selections)
    assert total == pytest.approx(sum(VALUES))


def test_fractional_zero_capacity():
    assert fractional_knapsack(ITEMS, 0) == ([], 0)


def test_fractional_negative_capacity():
    with pytest.raises(ValueError):
        fractional_knapsack(ITEMS, -1)


def test_item_ratio_and_selection():
    item = Item(4, 10)
    assert item.ratio() == 10 / 4
    half = Selection(item, 0.5)
    assert half.weight == 2.0
    assert half.profit == 5.0


def test_item_zero_weight():
    with pytest.raises(ValueError):
        Item(0, 10)