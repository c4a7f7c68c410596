"""Bitmask dynamic programmes over subsets."""

from __future__ import annotations

from typing import Sequence

from cpkit.numtheory import MOD

__all__ = ["elevator_rides", "count_perfect_matchings"]


def elevator_rides(weights: Sequence[int], capacity: int) -> int:
    """Fewest elevator rides carrying everyone when a ride holds at most
    ``capacity`` total weight."""
    people = list(weights)
    if any(weight > capacity for weight in people):
        raise ValueError("every weight must fit within the capacity")
    # best[mask] = (rides used, load of the last ride) for that group of people.
    best: list[tuple[int, int]] = [(1, 0)]
    for mask in range(1, 1 << len(people)):
        options = []
        for person, weight in enumerate(people):
            if mask >> person & 1:
                rides, load = best[mask ^ (1 << person)]
                if load + weight <= capacity:
                    options.append((rides, load + weight))
                else:
                    options.append((rides + 1, weight))
        best.append(min(options))
    return best[-1][0]


def count_perfect_matchings(grid: Sequence[Sequence[int]]) -> int:
    """Number of perfect matchings of a bipartite graph given by its square 0/1
    compatibility matrix, modulo ``MOD``."""
    n = len(grid)
    if any(len(row) != n for row in grid):
        raise ValueError("the compatibility matrix must be square")
    ways = [0] * (1 << n)
    ways[0] = 1
    for mask, count in enumerate(ways):
        if not count:
            continue
        row = mask.bit_count()
        if row == n:
            continue
        for column, allowed in enumerate(grid[row]):
            bit = 1 << column
            if allowed and not mask & bit:
                ways[mask | bit] = (ways[mask | bit] + count) % MOD
    return ways[-1]