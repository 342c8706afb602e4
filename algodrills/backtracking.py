"""Exhaustive search: subset sums, subsequences, permutations and rook placement."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def has_subset_sum(values: Iterable[int], target: int) -> bool:
    """Tell whether some subset of non-negative ``values`` adds up to ``target``."""
    values = list(values)
    if any(value < 0 for value in values):
        raise ValueError("values must not be negative")
    reachable = {0}
    for value in values:
        reachable |= {total + value for total in reachable if total + value <= target}
    return target in reachable


def subsequences(items: Iterable) -> list[tuple]:
    """Return every subsequence of ``items``, those without the first item first."""
    result: list[tuple] = [()]
    for item in reversed(tuple(items)):
        result = result + [(item,) + rest for rest in result]
    return result


def string_subsequences(text: str) -> list[str]:
    """Return every subsequence of ``text`` in the order of :func:`subsequences`."""
    return ["".join(chars) for chars in subsequences(text)]


def swap_permutations(text: str) -> list[str]:
    """Return the permutations of ``text`` in swap order, repeats included."""
    chars = list(text)
    result: list[str] = []

    def permute(start: int) -> None:
        if start == len(chars) - 1:
            result.append("".join(chars))
            return
        for index in range(start, len(chars)):
            chars[start], chars[index] = chars[index], chars[start]
            permute(start + 1)
            chars[start], chars[index] = chars[index], chars[start]

    if chars:
        permute(0)
    return result


def place_rooks(n: int, fixed: Iterable[tuple[int, int]] = ()) -> list[list[int]]:
    """Fill an ``n`` by ``n`` board with non-attacking rooks around fixed ones.

    Rows are filled top to bottom, each taking the leftmost free column.
    The board holds 1 where a rook stands and 0 elsewhere.
    """
    if n < 0:
        raise ValueError("board size must not be negative")
    board = [[0] * n for _ in range(n)]
    used_rows: set[int] = set()
    used_cols: set[int] = set()
    for row, col in fixed:
        if not (0 <= row < n and 0 <= col < n):
            raise ValueError(f"square ({row}, {col}) is off the board")
        if row in used_rows or col in used_cols:
            raise ValueError(f"rook at ({row}, {col}) is attacked")
        board[row][col] = 1
        used_rows.add(row)
        used_cols.add(col)
    free_rows = (row for row in range(n) if row not in used_rows)
    free_cols = (col for col in range(n) if col not in used_cols)
    for row, col in zip(free_rows, free_cols):
        board[row][col] = 1
    return board