"""Dynamic programming on rooted trees."""

from __future__ import annotations

from typing import Sequence

__all__ = ["subordinates"]


def subordinates(bosses: Sequence[int]) -> list[int]:
    """Number of subordinates of each employee ``1..n``.

    ``bosses[i]`` is the direct boss of employee ``i + 2``; employee 1 is the
    general director.  The result lists the counts for employees 1 to n.
    """
    n = len(bosses) + 1
    children: list[list[int]] = [[] for _ in range(n + 1)]
    for employee, boss in enumerate(bosses, start=2):
        if not 1 <= boss <= n:
            raise ValueError(f"boss {boss} of employee {employee} is out of range")
        children[boss].append(employee)

    order = []
    stack = [1]
    while stack:
        node = stack.pop()
        order.append(node)
        stack.extend(children[node])
    if len(order) != n:
        raise ValueError("the bosses do not form a tree rooted at employee 1")

    subtree = [1] * (n + 1)
    for node in reversed(order):
        subtree[node] += sum(subtree[child] for child in children[node])
    return [size - 1 for size in subtree[1:]]