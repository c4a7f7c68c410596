"""Optimisation dynamic programmes: knapsacks, coins, digits and rectangle cuts."""

from __future__ import annotations

import math
from typing import Iterable, Sequence

__all__ = [
    "knapsack_max_value",
    "knapsack_large_capacity",
    "book_shop",
    "minimum_coins",
    "removing_digits",
    "rectangle_cutting",
]


def _check_items(items: Iterable[tuple[int, int]], capacity: int) -> list[tuple[int, int]]:
    pairs = [(int(weight), int(value)) for weight, value in items]
    if any(weight < 0 or value < 0 for weight, value in pairs):
        raise ValueError("weights and values must not be negative")
    if capacity < 0:
        raise ValueError("the capacity must not be negative")
    return pairs


def knapsack_max_value(items: Iterable[tuple[int, int]], capacity: int) -> int:
    """Largest total value of items, each a ``(weight, value)`` pair taken at
    most once, whose weights add up to at most ``capacity``."""
    pairs = _check_items(items, capacity)
    best = [0] * (capacity + 1)
    for weight, value in pairs:
        for room in range(capacity, weight - 1, -1):
            candidate = best[room - weight] + value
            if candidate > best[room]:
                best[room] = candidate
    return best[capacity]


def knapsack_large_capacity(items: Iterable[tuple[int, int]], capacity: int) -> int:
    """Same answer as :func:`knapsack_max_value`, computed over total value
    instead of capacity, so that huge capacities with small values stay cheap."""
    pairs = _check_items(items, capacity)
    total = sum(value for _, value in pairs)
    lightest = [math.inf] * (total + 1)
    lightest[0] = 0
    for weight, value in pairs:
        for reached in range(total, value - 1, -1):
            candidate = lightest[reached - value] + weight
            if candidate < lightest[reached]:
                lightest[reached] = candidate
    return max(value for value, weight in enumerate(lightest) if weight <= capacity)


def book_shop(prices: Sequence[int], pages: Sequence[int], budget: int) -> int:
    """Most pages obtainable by buying each book at most once within ``budget``."""
    if len(prices) != len(pages):
        raise ValueError("prices and pages must have the same length")
    return knapsack_max_value(zip(prices, pages), budget)


def minimum_coins(coins: Iterable[int], target: int) -> int:
    """Fewest coins (each value usable any number of times) summing to
    ``target``, or -1 when the sum cannot be formed."""
    values = list(coins)
    if any(coin <= 0 for coin in values):
        raise ValueError("coin values must be positive")
    if target < 0:
        raise ValueError("the target sum must not be negative")
    fewest = [math.inf] * (target + 1)
    fewest[0] = 0
    for amount in range(1, target + 1):
        fewest[amount] = min(
            (fewest[amount - coin] + 1 for coin in values if coin <= amount),
            default=math.inf,
        )
    answer = fewest[target]
    return -1 if answer == math.inf else int(answer)


def removing_digits(n: int) -> int:
    """Fewest steps to reach zero from ``n`` when each step subtracts one of
    the current number's digits."""
    if n < 0:
        raise ValueError("n must not be negative")
    steps = [0] * (n + 1)
    for number in range(1, n + 1):
        steps[number] = 1 + min(
            steps[number - int(digit)] for digit in set(str(number)) if digit != "0"
        )
    return steps[n]


def rectangle_cutting(a: int, b: int) -> int:
    """Fewest straight cuts splitting an ``a`` by ``b`` rectangle into squares."""
    if a < 1 or b < 1:
        raise ValueError("both sides must be at least 1")
    cuts = [[0] * (b + 1) for _ in range(a + 1)]
    for i in range(1, a + 1):
        for j in range(1, b + 1):
            if i == j:
                continue
            best = math.inf
            for v in range(1, i):
                best = min(best, cuts[v][j] + cuts[i - v][j] + 1)
            for h in range(1, j):
                best = min(best, cuts[i][h] + cuts[i][j - h] + 1)
            cuts[i][j] = int(best)
    return cuts[a][b]