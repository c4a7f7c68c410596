"""Subset-sum enumeration."""

from __future__ import annotations

from typing import Iterable

__all__ = ["money_sums"]


def money_sums(coins: Iterable[int]) -> list[int]:
    """Every distinct sum of a non-empty selection of ``coins``, in ascending order."""
    sums: set[int] = set()
    for coin in coins:
        sums |= {coin} | {coin + total for total in sums}
    return sorted(sums)