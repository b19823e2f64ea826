"""Knapsack problems: exact 0/1 by dynamic programming, and greedy by value density."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Item:
    """An item of positive ``weight`` carrying ``value``."""

    weight: int
    value: int

    def __post_init__(self) -> None:
        if self.weight <= 0:
            raise ValueError("item weight must be positive")

    @property
    def density(self) -> float:
        """Value per unit of weight."""
        return self.value / self.weight


def knapsack_01(capacity: int, weights: Sequence[int], values: Sequence[int]) -> int:
    """Return the best total value of items whose weights fit in ``capacity``."""
    if capacity < 0:
        raise ValueError("capacity cannot be negative")
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")
    if any(weight < 0 for weight in weights):
        raise ValueError("weights cannot be negative")
    best = [0] * (capacity + 1)
    for weight, value in zip(weights, values):
        for room in range(capacity, 0, -1):
            if weight <= room:
                best[room] = max(best[room], value + best[room - weight])
    return best[capacity]


def _by_density(items: Iterable[Item]) -> list[Item]:
    return sorted(items, key=lambda item: item.density, reverse=True)


def greedy_discrete(items: Iterable[Item], capacity: int) -> int:
    """Take whole items in order of falling density while they fit."""
    total = 0
    for item in _by_density(items):
        if capacity <= 0:
            break
        if item.weight <= capacity:
            total += item.value
            capacity -= item.weight
    return total


def fractional(items: Iterable[Item], capacity: int) -> float:
    """Fill ``capacity`` by density, taking a fraction of the first item that does not fit."""
    total = 0.0
    for item in _by_density(items):
        if capacity <= 0:
            break
        if item.weight <= capacity:
            total += item.value
            capacity -= item.weight
        else:
            total += capacity * item.density
            capacity = 0
    return total