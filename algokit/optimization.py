"""Knapsack variants and the optimal binary search tree cost."""

from __future__ import annotations

import functools
import itertools
from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Item:
    """An item with a value and a weight for the fractional knapsack."""

    value: float
    weight: float

    def __post_init__(self) -> None:
        if self.weight <= 0:
            raise ValueError("item weight must be positive")

    @property
    def ratio(self) -> float:
        """Value per unit of weight."""
        return self.value / self.weight


def knapsack_01(capacity: int, weights: Sequence[int], values: Sequence[int]) -> int:
    """Return the best total value of whole items that fit within ``capacity``."""
    weights = list(weights)
    values = list(values)
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")

    @functools.lru_cache(maxsize=None)
    def best(count: int, room: int) -> int:
        if count == 0 or room == 0:
            return 0
        skip = best(count - 1, room)
        weight = weights[count - 1]
        if weight > room:
            return skip
        return max(values[count - 1] + best(count - 1, room - weight), skip)

    return best(len(weights), capacity)


def fractional_knapsack(capacity: float, items: Iterable[Item]) -> float:
    """Return the best value when items may be taken in fractions."""
    total = 0.0
    room = float(capacity)
    for item in sorted(items, key=lambda it: it.ratio, reverse=True):
        if item.weight <= room:
            room -= item.weight
            total += item.value
        else:
            total += item.value * (room / item.weight)
            break
    return total


def optimal_bst_cost(frequencies: Sequence[int]) -> int:
    """Return the least total search cost of a BST over keys with these frequencies."""
    freqs = list(frequencies)
    prefix = [0, *itertools.accumulate(freqs)]

    @functools.lru_cache(maxsize=None)
    def cost(low: int, high: int) -> int:
        if high < low:
            return 0
        if high == low:
            return freqs[low]
        best = min(cost(low, root - 1) + cost(root + 1, high) for root in range(low, high + 1))
        return best + prefix[high + 1] - prefix[low]

    return cost(0, len(freqs) - 1)