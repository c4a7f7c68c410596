"""Point-update, range-query segment trees over an arbitrary merge operation."""

from __future__ import annotations

from typing import Callable, Generic, Iterable, NamedTuple, TypeVar

__all__ = [
    "SegmentTree",
    "MinCount",
    "INF",
    "sum_tree",
    "min_tree",
    "min_count_tree",
    "ones_tree",
    "flip",
]

V = TypeVar("V")
N = TypeVar("N")

INF = 9223372036854775807
"""Identity for minimum queries: the largest signed 64-bit integer."""


class MinCount(NamedTuple):
    """Minimum of a segment together with how many times it occurs."""

    value: int
    count: int


class SegmentTree(Generic[V, N]):
    """A segment tree with point updates and inclusive range queries.

    ``leaf`` turns an input value into a node, ``combine`` merges a left and a
    right node, and ``identity`` is the node returned for an empty range.
    """

    def __init__(
        self,
        values: Iterable[V],
        leaf: Callable[[V], N],
        combine: Callable[[N, N], N],
        identity: N,
    ) -> None:
        items = list(values)
        if not items:
            raise ValueError("a segment tree needs at least one value")
        self._n = len(items)
        self._leaf = leaf
        self._combine = combine
        self._identity = identity
        size = 1
        while size < 2 * self._n:
            size <<= 1
        self._nodes: list[N] = [identity] * size
        self._build(items, 0, self._n - 1, 1)

    def __len__(self) -> int:
        return self._n

    def _build(self, items: list[V], start: int, end: int, node: int) -> None:
        if start == end:
            self._nodes[node] = self._leaf(items[start])
            return
        mid = (start + end) // 2
        self._build(items, start, mid, 2 * node)
        self._build(items, mid + 1, end, 2 * node + 1)
        self._nodes[node] = self._combine(self._nodes[2 * node], self._nodes[2 * node + 1])

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self._n:
            raise IndexError(f"index {index} out of range for {self._n} elements")

    def update(self, index: int, apply: Callable[[N], N]) -> None:
        """Replace the leaf at ``index`` with ``apply(leaf)`` and refresh its ancestors."""
        self._check_index(index)
        start, end, node = 0, self._n - 1, 1
        path = []
        while start != end:
            path.append(node)
            mid = (start + end) // 2
            if index <= mid:
                end, node = mid, 2 * node
            else:
                start, node = mid + 1, 2 * node + 1
        self._nodes[node] = apply(self._nodes[node])
        for parent in reversed(path):
            self._nodes[parent] = self._combine(
                self._nodes[2 * parent], self._nodes[2 * parent + 1]
            )

    def set(self, index: int, value: V) -> None:
        """Assign ``value`` to position ``index``."""
        self.update(index, lambda _old: self._leaf(value))

    def query(self, left: int, right: int) -> N:
        """Merge the nodes of positions ``left`` through ``right`` inclusive."""
        return self._query(0, self._n - 1, 1, left, right)

    def _query(self, start: int, end: int, node: int, left: int, right: int) -> N:
        if start > right or end < left:
            return self._identity
        if left <= start and end <= right:
            return self._nodes[node]
        mid = (start + end) // 2
        return self._combine(
            self._query(start, mid, 2 * node, left, right),
            self._query(mid + 1, end, 2 * node + 1, left, right),
        )


def _add(left: int, right: int) -> int:
    return left + right


def _merge_min_count(left: MinCount, right: MinCount) -> MinCount:
    if left.value < right.value:
        return left
    if left.value > right.value:
        return right
    return MinCount(left.value, left.count + right.count)


def sum_tree(values: Iterable[int]) -> SegmentTree[int, int]:
    """Tree answering range sums."""
    return SegmentTree(values, int, _add, 0)


def min_tree(values: Iterable[int]) -> SegmentTree[int, int]:
    """Tree answering range minima; an empty range yields ``INF``."""
    return SegmentTree(values, int, min, INF)


def min_count_tree(values: Iterable[int]) -> SegmentTree[int, MinCount]:
    """Tree answering the range minimum and the number of its occurrences."""
    return SegmentTree(
        values, lambda value: MinCount(value, 1), _merge_min_count, MinCount(INF, 0)
    )


def ones_tree(values: Iterable[int]) -> SegmentTree[int, int]:
    """Tree over a 0/1 array counting the ones in a range."""
    return SegmentTree(values, int, _add, 0)


def flip(tree: SegmentTree[int, int], index: int) -> None:
    """Toggle the bit at ``index`` of a tree built by :func:`ones_tree`."""
    tree.update(index, lambda bit: 1 - bit)