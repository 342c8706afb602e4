"""Number-theory helpers: gcd variants, prime sieves and divisor counts."""

from __future__ import annotations

from dataclasses import dataclass
from math import isqrt

DEFAULT_MODULUS = 1_000_000_007
_DIGITS = frozenset("0123456789")


@dataclass(frozen=True)
class ExtendedGcd:
    """Greatest common divisor ``g`` with coefficients where ``a*x + b*y == g``."""

    g: int
    x: int
    y: int


def gcd(a: int, b: int) -> int:
    """Return the greatest common divisor of ``a`` and ``b`` by Euclid's method."""
    while b:
        a, b = b, a % b
    return a


def _check_digits(digits: str) -> None:
    if not digits or not set(digits) <= _DIGITS:
        raise ValueError(f"not a decimal number: {digits!r}")


def mod_of_decimal(modulus: int, digits: str) -> int:
    """Reduce a decimal number given as a string modulo ``modulus``."""
    if modulus <= 0:
        raise ValueError("modulus must be positive")
    _check_digits(digits)
    remainder = 0
    for digit in digits:
        remainder = (remainder * 10 + int(digit)) % modulus
    return remainder


def gcd_with_big(a: int, digits: str) -> int:
    """Return gcd of ``a`` and a (possibly huge) decimal number given as text."""
    return gcd(a, mod_of_decimal(a, digits))


def extended_gcd(a: int, b: int) -> ExtendedGcd:
    """Return the gcd of ``a`` and ``b`` together with Bezout coefficients."""
    quotients = []
    while b:
        quotients.append(a // b)
        a, b = b, a % b
    x, y = 1, 0
    for quotient in reversed(quotients):
        x, y = y, x - quotient * y
    return ExtendedGcd(a, x, y)


def is_prime(x: int) -> bool:
    """Tell whether ``x`` is prime by trial division."""
    if x < 2:
        return False
    return all(x % divisor for divisor in range(2, isqrt(x) + 1))


def prime_sieve(n: int) -> list[bool]:
    """Return flags for 0..n where a flag is true exactly when its index is prime."""
    if n < 0:
        raise ValueError("sieve bound must not be negative")
    flags = [True] * (n + 1)
    for index in range(min(2, n + 1)):
        flags[index] = False
    for candidate in range(2, isqrt(n) + 1):
        if flags[candidate]:
            start = candidate * candidate
            flags[start::candidate] = [False] * len(range(start, n + 1, candidate))
    return flags


def primes_up_to(n: int) -> list[int]:
    """Return all primes not greater than ``n`` in increasing order."""
    return [number for number, prime in enumerate(prime_sieve(n)) if prime]


def factorial_divisor_count(n: int, modulus: int = DEFAULT_MODULUS) -> int:
    """Count the divisors of ``n!``, reduced modulo ``modulus``."""
    if n < 0:
        raise ValueError("factorial of a negative number")
    if modulus <= 0:
        raise ValueError("modulus must be positive")
    result = 1 % modulus
    for prime in primes_up_to(n):
        exponent = 0
        power = prime
        while power <= n:
            exponent += n // power
            power *= prime
        result = result * (exponent + 1) % modulus
    return result


def distinct_prime_factor_counts(limit: int = 1_000_001) -> list[int]:
    """Return, for every number below ``limit``, how many distinct primes divide it."""
    if limit < 0:
        raise ValueError("limit must not be negative")
    counts = [0] * limit
    for number in range(2, limit):
        if counts[number] == 0:
            for multiple in range(number, limit, number):
                counts[multiple] += 1
    return counts