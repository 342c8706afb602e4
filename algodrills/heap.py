"""A binary min-heap and a k-largest selector built on it."""

from __future__ import annotations

from collections.abc import Iterable


class MinHeap:
    """Binary min-heap of comparable values."""

    def __init__(self) -> None:
        self._items: list = []

    def push(self, value) -> None:
        """Insert ``value`` and restore the heap order."""
        items = self._items
        items.append(value)
        child = len(items) - 1
        while child > 0:
            parent = (child - 1) // 2
            if not items[child] < items[parent]:
                break
            items[child], items[parent] = items[parent], items[child]
            child = parent

    def pop(self):
        """Remove and return the smallest value."""
        items = self._items
        if not items:
            raise IndexError("pop from an empty heap")
        items[0], items[-1] = items[-1], items[0]
        smallest = items.pop()
        self._sift_down(0)
        return smallest

    def top(self):
        """Return the smallest value without removing it."""
        if not self._items:
            raise IndexError("top of an empty heap")
        return self._items[0]

    def __len__(self) -> int:
        return len(self._items)

    def _sift_down(self, index: int) -> None:
        items = self._items
        size = len(items)
        while True:
            smallest = index
            for child in (2 * index + 1, 2 * index + 2):
                if child < size and items[child] < items[smallest]:
                    smallest = child
            if smallest == index:
                return
            items[index], items[smallest] = items[smallest], items[index]
            index = smallest


def k_largest(values: Iterable, k: int) -> list:
    """Return the ``k`` largest values in ascending order."""
    if k < 0:
        raise ValueError("k must not be negative")
    if k == 0:
        return []
    heap = MinHeap()
    for value in values:
        if len(heap) < k:
            heap.push(value)
        elif heap.top() < value:
            heap.pop()
            heap.push(value)
    return [heap.pop() for _ in range(len(heap))]