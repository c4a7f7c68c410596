"""Counting partitions of ``1..n`` into two sets of equal sum."""

from __future__ import annotations

from cpkit.numtheory import MOD

__all__ = ["two_sets_ways"]


def two_sets_ways(n: int) -> int:
    """Number of ways to split ``1..n`` into two sets with equal sums, modulo ``MOD``.

    Each split is counted once, regardless of which set is named first.
    """
    if n < 1:
        raise ValueError("n must be at least 1")
    total = n * (n + 1) // 2
    if total % 2:
        return 0
    target = total // 2
    # Keep n in the second set, so subsets of 1..n-1 reaching the target
    # are exactly the unordered splits.
    ways = [1] + [0] * target
    for number in range(1, n):
        for reached in range(target, number - 1, -1):
            ways[reached] = (ways[reached] + ways[reached - number]) % MOD
    return ways[target]