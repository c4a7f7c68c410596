"""Sequence dynamic programmes: edit distance, LIS, removal game and projects."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from dataclasses import dataclass
from itertools import accumulate
from typing import Iterable, Sequence

__all__ = [
    "Project",
    "edit_distance",
    "longest_increasing_subsequence",
    "removal_game",
    "max_project_reward",
]


@dataclass(frozen=True)
class Project:
    """A project running from day ``start`` to day ``end`` inclusive."""

    start: int
    end: int
    reward: int


def edit_distance(s: str, t: str) -> int:
    """Fewest insertions, deletions and substitutions turning ``s`` into ``t``."""
    # below[j] holds the distance between s[i+1:] and t[j:].
    below = list(range(len(t), -1, -1))
    for i in range(len(s) - 1, -1, -1):
        current = [0] * (len(t) + 1)
        current[len(t)] = len(s) - i
        for j in range(len(t) - 1, -1, -1):
            if s[i] == t[j]:
                current[j] = below[j + 1]
            else:
                current[j] = 1 + min(below[j], current[j + 1], below[j + 1])
        below = current
    return below[0]


def longest_increasing_subsequence(values: Iterable[int]) -> int:
    """Length of the longest strictly increasing subsequence of ``values``."""
    tails: list[int] = []
    for value in values:
        position = bisect_left(tails, value)
        if position == len(tails):
            tails.append(value)
        else:
            tails[position] = value
    return len(tails)


def removal_game(values: Sequence[int]) -> int:
    """Largest score the first player can secure when both players take
    numbers from either end of the list and play optimally."""
    if not values:
        raise ValueError("the list must hold at least one number")
    n = len(values)
    prefix = [0, *accumulate(values)]
    # best[i] is the mover's score on values[i:i+length].
    best = list(values)
    for length in range(2, n + 1):
        best = [
            max(
                prefix[i + length] - prefix[i] - best[i + 1],
                prefix[i + length] - prefix[i] - best[i],
            )
            for i in range(n - length + 1)
        ]
    return best[0]


def max_project_reward(projects: Iterable[Project]) -> int:
    """Largest total reward from projects whose day ranges do not overlap."""
    ordered = sorted(projects, key=lambda project: project.start)
    starts = [project.start for project in ordered]
    best = [0] * (len(ordered) + 1)
    for index in range(len(ordered) - 1, -1, -1):
        project = ordered[index]
        following = bisect_right(starts, project.end, lo=index + 1)
        best[index] = max(best[index + 1], project.reward + best[following])
    return best[0]