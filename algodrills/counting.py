"""Counting recurrences solved with memoisation or iteration."""

from __future__ import annotations

DEFAULT_MODULUS = 1_000_000_007


def balanced_btree_count(height: int, modulus: int = DEFAULT_MODULUS) -> int:
    """Count height-balanced binary trees of the given height, modulo ``modulus``."""
    if height < 0:
        raise ValueError("height must not be negative")
    if modulus <= 0:
        raise ValueError("modulus must be positive")
    previous, current = 1, 1
    for _ in range(2, height + 1):
        previous, current = current, (current * current + 2 * current * previous) % modulus
    return current


def best_coin_exchange(n: int) -> int:
    """Best value for a coin ``n`` that may be split into n//2, n//3 and n//4."""
    if n < 0:
        raise ValueError("coin value must not be negative")
    memo: dict[int, int] = {}

    def value(coin: int) -> int:
        if coin == 0 or coin // 2 + coin // 3 + coin // 4 < coin:
            return coin
        if coin not in memo:
            memo[coin] = value(coin // 2) + value(coin // 3) + value(coin // 4)
        return memo[coin]

    return value(n)


def staircase_ways(n: int) -> int:
    """Ways to climb ``n`` stairs taking 1, 2 or 3 steps at a time."""
    if n < 0:
        return 0
    first, second, third = 1, 1, 2
    if n < 3:
        return (first, second, third)[n]
    for _ in range(n - 2):
        first, second, third = second, third, first + second + third
    return third


def decoding_count(digits: str) -> int:
    """Count decodings of a digit string where pairs up to 26 may join."""
    if not set(digits) <= set("0123456789"):
        raise ValueError(f"not a digit string: {digits!r}")
    before, current = 1, 1
    for left, right in zip(digits, digits[1:]):
        joined = before if int(left + right) <= 26 else 0
        before, current = current, current + joined
    return current


def power(base: int, exponent: int) -> int:
    """Raise ``base`` to a non-negative integer ``exponent``."""
    if exponent < 0:
        raise ValueError("exponent must not be negative")
    result = 1
    for _ in range(exponent):
        result *= base
    return result


def stair_fibonacci(n: int) -> int:
    """Fibonacci numbers starting 1, 2 for ``n`` = 1, 2."""
    if n < 1:
        raise ValueError("n must be at least 1")
    previous, current = 1, 2
    if n == 1:
        return previous
    for _ in range(n - 2):
        previous, current = current, previous + current
    return current