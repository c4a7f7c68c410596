"""Counting dynamic programmes: arrays, towers, dice, coins and grid paths."""

from __future__ import annotations

from collections import deque
from typing import Iterable, Sequence

from cpkit.numtheory import MOD

__all__ = [
    "array_descriptions",
    "counting_towers",
    "dice_combinations",
    "coin_combinations_ordered",
    "coin_combinations_unordered",
    "grid_paths",
]


def array_descriptions(values: Sequence[int], m: int) -> int:
    """Count fillings of the unknown entries (0) so that every value lies in
    ``1..m`` and neighbours differ by at most one, modulo ``MOD``."""
    if not values:
        raise ValueError("the array must hold at least one value")
    if m < 1:
        raise ValueError("the upper bound m must be at least 1")
    # ways[k] for k in 1..m; slots 0 and m+1 stay zero as guards.
    first = values[0]
    ways = [0] * (m + 2)
    for k in range(1, m + 1):
        if first in (0, k):
            ways[k] = 1
    for value in values[1:]:
        nxt = [0] * (m + 2)
        for k in range(1, m + 1):
            if value in (0, k):
                nxt[k] = (ways[k - 1] + ways[k] + ways[k + 1]) % MOD
        ways = nxt
    return sum(ways) % MOD


def counting_towers(n: int) -> int:
    """Number of ways to build a tower of width 2 and height ``n`` from blocks,
    modulo ``MOD``."""
    if n < 1:
        raise ValueError("tower height must be at least 1")
    joined, split = 1, 1
    for _ in range(n - 1):
        joined, split = (2 * joined + split) % MOD, (4 * split + joined) % MOD
    return (joined + split) % MOD


def dice_combinations(n: int) -> int:
    """Number of ordered sequences of die throws (1 to 6) summing to ``n``,
    modulo ``MOD``."""
    if n < 0:
        raise ValueError("the sum must not be negative")
    window: deque[int] = deque([1], maxlen=6)
    for _ in range(n):
        window.append(sum(window) % MOD)
    return window[-1]


def _check_coins(coins: Iterable[int], target: int) -> list[int]:
    items = list(coins)
    if any(coin <= 0 for coin in items):
        raise ValueError("coin values must be positive")
    if target < 0:
        raise ValueError("the target sum must not be negative")
    return items


def coin_combinations_ordered(coins: Iterable[int], target: int) -> int:
    """Number of ordered coin sequences summing to ``target``, modulo ``MOD``."""
    items = _check_coins(coins, target)
    ways = [0] * (target + 1)
    ways[0] = 1
    for amount in range(1, target + 1):
        ways[amount] = sum(ways[amount - c] for c in items if c <= amount) % MOD
    return ways[target]


def coin_combinations_unordered(coins: Iterable[int], target: int) -> int:
    """Number of distinct coin multisets summing to ``target``, modulo ``MOD``."""
    items = _check_coins(coins, target)
    ways = [0] * (target + 1)
    ways[0] = 1
    for coin in items:
        for amount in range(coin, target + 1):
            ways[amount] = (ways[amount] + ways[amount - coin]) % MOD
    return ways[target]


def grid_paths(grid: Sequence[str]) -> int:
    """Paths from the top-left to the bottom-right cell moving right or down,
    avoiding ``*`` traps, modulo ``MOD``."""
    if not grid or not grid[0]:
        raise ValueError("the grid must not be empty")
    width = len(grid[0])
    if any(len(row) != width for row in grid):
        raise ValueError("all grid rows must have the same length")

    last = grid[-1]
    below = [0] * (width + 1)
    if last[-1] != "*":
        below[width - 1] = 1
    for j in range(width - 2, -1, -1):
        below[j] = below[j + 1] if last[j] == "." else 0

    for row in reversed(grid[:-1]):
        current = [0] * (width + 1)
        for j in range(width - 1, -1, -1):
            if row[j] != "*":
                current[j] = (below[j] + current[j + 1]) % MOD
        below = current
    return below[0]