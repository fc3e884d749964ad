"""Fractional (greedy) and 0/1 (dynamic programming) knapsack."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Item:
    """An item with a positive weight and a profit."""

    weight: int
    profit: int

    def __post_init__(self) -> None:
        if self.weight <= 0:
            raise ValueError("item weight must be positive")

    def ratio(self) -> float:
        """Profit per unit of weight."""
        return self.profit / self.weight


@dataclass(frozen=True)
class Selection:
    """The share of an item placed in the knapsack."""

    item: Item
    fraction: float

    @property
    def weight(self) -> float:
        return self.item.weight * self.fraction

    @property
    def profit(self) -> float:
        return self.item.profit * self.fraction


def fractional_knapsack(
    items: Iterable[Item], capacity: float
) -> tuple[list[Selection], float]:
    """Fill the knapsack greedily by profit/weight ratio, splitting the last item.

    Returns the selections in the order taken and the total profit.
    """
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    remaining = capacity
    selections: list[Selection] = []
    for item in sorted(items, key=Item.ratio, reverse=True):
        if remaining <= 0:
            break
        if item.weight <= remaining:
            selections.append(Selection(item, 1.0))
            remaining -= item.weight
        else:
            selections.append(Selection(item, remaining / item.weight))
            remaining = 0
    return selections, sum(s.profit for s in selections)


def knapsack_01(capacity: int, weights: Sequence[int], values: Sequence[int]) -> int:
    """Return the best total value of items whose weights fit within ``capacity``."""
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    best = [0] * (capacity + 1)
    for weight, value in zip(weights, values):
        for room in range(capacity, weight - 1, -1):
            best[room] = max(best[room], best[room - weight] + value)
    return best[capacity]