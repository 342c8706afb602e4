"""Segment tree over integers for point updates and range sums."""

from __future__ import annotations

from collections.abc import Iterable


class SegmentTree:
    """Sums over index ranges of a fixed-length list, with point updates."""

    def __init__(self, values: Iterable[int]) -> None:
        leaves = list(values)
        self._n = len(leaves)
        self._tree = [0] * self._n + leaves
        for index in range(self._n - 1, 0, -1):
            self._tree[index] = self._tree[2 * index] + self._tree[2 * index + 1]

    def __len__(self) -> int:
        return self._n

    def update(self, index: int, value: int) -> None:
        """Set the value at ``index`` to ``value``."""
        if not 0 <= index < self._n:
            raise IndexError(f"index {index} out of range")
        position = index + self._n
        self._tree[position] = value
        position //= 2
        while position >= 1:
            self._tree[position] = self._tree[2 * position] + self._tree[2 * position + 1]
            position //= 2

    def query(self, lo: int, hi: int) -> int:
        """Return the sum of the values at indices ``lo`` up to but not including ``hi``."""
        if not 0 <= lo <= hi <= self._n:
            raise IndexError(f"range [{lo}, {hi}) out of bounds")
        total = 0
        lo += self._n
        hi += self._n
        while lo < hi:
            if lo % 2:
                total += self._tree[lo]
                lo += 1
            if hi % 2:
                hi -= 1
                total += self._tree[hi]
            lo //= 2
            hi //= 2
        return total

    def total(self) -> int:
        """Return the sum of all values."""
        return self.query(0, self._n)