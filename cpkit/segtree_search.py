"""Segment trees answering searches and maximum-subarray queries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from cpkit.segtree import SegmentTree

__all__ = ["MaxTree", "SegmentSummary", "MaxSubarrayTree", "NEG_IDENTITY"]

NEG_IDENTITY = -1_000_000_000
"""Value held by nodes that cover no element of a :class:`MaxTree`."""


class MaxTree:
    """Range-maximum tree that finds the first position holding at least ``x``."""

    def __init__(self, values: Iterable[int]) -> None:
        items = list(values)
        if not items:
            raise ValueError("a segment tree needs at least one value")
        self._n = len(items)
        size = 1
        while size < 2 * self._n:
            size <<= 1
        self._nodes = [NEG_IDENTITY] * size
        self._build(items, 0, self._n - 1, 1)

    def __len__(self) -> int:
        return self._n

    def _build(self, items: list[int], start: int, end: int, node: int) -> None:
        if start == end:
            self._nodes[node] = items[start]
            return
        mid = (start + end) // 2
        self._build(items, start, mid, 2 * node)
        self._build(items, mid + 1, end, 2 * node + 1)
        self._nodes[node] = max(self._nodes[2 * node], self._nodes[2 * node + 1])

    def set(self, index: int, value: int) -> None:
        """Assign ``value`` to position ``index``."""
        if not 0 <= index < self._n:
            raise IndexError(f"index {index} out of range for {self._n} elements")
        start, end, node = 0, self._n - 1, 1
        path = []
        while start != end:
            path.append(node)
            mid = (start + end) // 2
            if index <= mid:
                end, node = mid, 2 * node
            else:
                start, node = mid + 1, 2 * node + 1
        self._nodes[node] = value
        for parent in reversed(path):
            self._nodes[parent] = max(self._nodes[2 * parent], self._nodes[2 * parent + 1])

    def first_at_least(self, x: int) -> int:
        """Return the smallest index whose value is at least ``x``, or -1."""
        if self._nodes[1] < x:
            return -1
        start, end, node = 0, self._n - 1, 1
        while start != end:
            mid = (start + end) // 2
            if self._nodes[2 * node] >= x:
                end, node = mid, 2 * node
            else:
                start, node = mid + 1, 2 * node + 1
        return start


@dataclass(frozen=True)
class SegmentSummary:
    """Sums describing a segment; the empty subarray counts, so sums are never negative."""

    total: int = 0
    best: int = 0
    prefix: int = 0
    suffix: int = 0

    @classmethod
    def of(cls, value: int) -> SegmentSummary:
        """Summary of a single element."""
        clipped = max(0, value)
        return cls(total=value, best=clipped, prefix=clipped, suffix=clipped)

    def merge(self, other: SegmentSummary) -> SegmentSummary:
        """Summary of this segment followed directly by ``other``."""
        return SegmentSummary(
            total=self.total + other.total,
            best=max(self.best, other.best, self.suffix + other.prefix),
            prefix=max(self.prefix, self.total + other.prefix),
            suffix=max(other.suffix, other.total + self.suffix),
        )


class MaxSubarrayTree:
    """Maintains the largest subarray sum of an array under point assignments."""

    def __init__(self, values: Iterable[int]) -> None:
        self._tree: SegmentTree[int, SegmentSummary] = SegmentTree(
            values, SegmentSummary.of, SegmentSummary.merge, SegmentSummary()
        )

    def __len__(self) -> int:
        return len(self._tree)

    def set(self, index: int, value: int) -> None:
        """Assign ``value`` to position ``index``."""
        self._tree.set(index, value)

    def best(self) -> int:
        """Largest sum of a contiguous subarray, the empty one included."""
        return self._tree.query(0, len(self._tree) - 1).best