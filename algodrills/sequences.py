"""Dynamic-programming routines over sequences and grids."""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Sequence
from itertools import accumulate


def longest_common_subsequence(first: Sequence, second: Sequence) -> int:
    """Return the length of the longest common subsequence of two sequences."""
    previous = [0] * (len(second) + 1)
    for a in first:
        current = [0]
        for j, b in enumerate(second):
            if a == b:
                current.append(previous[j] + 1)
            else:
                current.append(max(previous[j + 1], current[j]))
        previous = current
    return previous[-1]


def longest_increasing_subsequence(values: Sequence[int]) -> int:
    """Return the length of the longest non-decreasing subsequence."""
    tails: list[int] = []
    for value in values:
        position = bisect_right(tails, value)
        if position == len(tails):
            tails.append(value)
        else:
            tails[position] = value
    return len(tails)


def knapsack(weights: Sequence[int], values: Sequence[int], capacity: int) -> int:
    """Return the best total value of items whose weights fit into ``capacity``."""
    if len(weights) != len(values):
        raise ValueError("weights and values differ in length")
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    if any(weight < 0 for weight in weights):
        raise ValueError("weights must not be negative")
    best = [0] * (capacity + 1)
    for weight, value in zip(weights, values):
        for room in range(capacity, weight - 1, -1):
            best[room] = max(best[room], best[room - weight] + value)
    return best[capacity]


def stock_span(prices: Sequence[int]) -> list[int]:
    """For each day, count the days up to it whose prices run strictly below it."""
    prices = list(prices)
    spans: list[int] = []
    stack: list[int] = []
    for day, price in enumerate(prices):
        while stack and prices[stack[-1]] < price:
            stack.pop()
        spans.append(day - stack[-1] if stack else day + 1)
        stack.append(day)
    return spans


def rotate_left(values: Sequence, times: int) -> list:
    """Return ``values`` rotated left by ``times`` places."""
    if times < 0:
        raise ValueError("rotation count must not be negative")
    values = list(values)
    if not values:
        return []
    shift = times % len(values)
    return values[shift:] + values[:shift]


def min_path_sum(grid: Sequence[Sequence[int]]) -> int:
    """Cheapest path cost from the top-left to the bottom-right cell moving right or down."""
    if not grid or not grid[0]:
        raise ValueError("grid must not be empty")
    width = len(grid[0])
    if any(len(row) != width for row in grid):
        raise ValueError("grid rows differ in length")
    best = list(accumulate(grid[0]))
    for row in grid[1:]:
        current: list[int] = []
        for above, cell in zip(best, row):
            cheapest = min(above, current[-1]) if current else above
            current.append(cell + cheapest)
        best = current
    return best[-1]