"""Probability dynamic programmes: biased coins and the sushi expectation."""

from __future__ import annotations

from typing import Iterable

__all__ = ["more_heads_probability", "sushi_expected_moves"]


def more_heads_probability(probabilities: Iterable[float]) -> float:
    """Probability that tossing every coin once shows at least ``(n + 1) // 2`` heads.

    ``probabilities`` gives each coin's chance of heads.  For an odd number of
    coins this is the chance of more heads than tails.
    """
    coins = [float(p) for p in probabilities]
    if any(not 0.0 <= p <= 1.0 for p in coins):
        raise ValueError("coin probabilities must lie in [0, 1]")
    # heads[h] is the chance of exactly h heads among the coins seen so far.
    heads = [1.0]
    for p in coins:
        tails = [chance * (1.0 - p) for chance in heads] + [0.0]
        for count, chance in enumerate(heads):
            tails[count + 1] += chance * p
        heads = tails
    needed = (len(coins) + 1) // 2
    return sum(heads[needed:])


def sushi_expected_moves(plates: Iterable[int]) -> float:
    """Expected number of random picks until every plate is empty.

    Each plate holds 1 to 3 pieces; every pick chooses a plate uniformly at
    random and eats one piece from it if any is left.
    """
    counts = [0, 0, 0]
    n = 0
    for pieces in plates:
        if pieces not in (1, 2, 3):
            raise ValueError("each plate must hold 1, 2 or 3 pieces")
        counts[pieces - 1] += 1
        n += 1
    if n == 0:
        return 0.0
    size = n + 2
    expected = [[[0.0] * size for _ in range(size)] for _ in range(size)]
    for k in range(n + 1):
        for j in range(n + 1 - k):
            for i in range(n + 1 - k - j):
                occupied = i + j + k
                if occupied == 0:
                    continue
                total = float(n)
                if i:
                    total += expected[i - 1][j][k] * i
                if j:
                    total += expected[i + 1][j - 1][k] * j
                if k:
                    total += expected[i][j + 1][k - 1] * k
                expected[i][j][k] = total / occupied
    return expected[counts[0]][counts[1]][counts[2]]