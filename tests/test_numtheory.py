import math

import pytest

from algodrills.numtheory import (
    ExtendedGcd,
    distinct_prime_factor_counts,
    extended_gcd,
    factorial_divisor_count,
    gcd,
    gcd_with_big,
    is_prime,
    mod_of_decimal,
    prime_sieve,
    primes_up_to,
)


@pytest.mark.parametrize("a,b", [(12, 18), (17, 5), (100, 75), (7, 0), (0, 9), (1, 1)])
def test_gcd_divides_both_and_matches_stdlib(a, b):
    g = gcd(a, b)
    assert g == math.gcd(a, b)
    if g:
        assert a % g == 0 and b % g == 0


@pytest.mark.parametrize("modulus,quotient,remainder", [(7, 123456789, 3), (13, 10**30, 0), (97, 5, 96)])
def test_mod_of_decimal_recovers_remainder(modulus, quotient, remainder):
    digits = str(quotient * modulus + remainder)
    assert mod_of_decimal(modulus, digits) == remainder


def test_mod_of_decimal_rejects_bad_input():
    with pytest.raises(ValueError):
        mod_of_decimal(0, "12")
    with pytest.raises(ValueError):
        mod_of_decimal(5, "1a2")
    with pytest.raises(ValueError):
        mod_of_decimal(5, "")


def test_gcd_with_big_matches_plain_gcd():
    big = 2**40 * 3**5 * 7
    for a in (6, 14, 49, 1024, 11):
        assert gcd_with_big(a, str(big)) == gcd(a, big)


def test_gcd_with_big_of_multiple_is_the_number():
    assert gcd_with_big(37, str(37 * 10**25)) == 37


@pytest.mark.parametrize("a,b", [(30, 20), (99, 78), (7, 0), (240, 46), (17, 31)])
def test_extended_gcd_satisfies_bezout(a, b):
    result = extended_gcd(a, b)
    assert isinstance(result, ExtendedGcd)
    assert result.g == math.gcd(a, b)
    assert a * result.x + b * result.y == result.g


def test_extended_gcd_with_zero_second_argument():
    assert extended_gcd(9, 0) == ExtendedGcd(9, 1, 0)


def test_is_prime_agrees_with_sieve():
    flags = prime_sieve(200)
    assert [is_prime(n) for n in range(201)] == flags


def test_is_prime_small_cases():
    assert not is_prime(1)
    assert is_prime(2)


def test_primes_up_to_consistent_with_is_prime():
    assert primes_up_to(500) == [n for n in range(501) if is_prime(n)]


def test_primes_up_to_small():
    assert primes_up_to(10) == [2, 3, 5, 7]


def test_prime_sieve_bounds():
    assert prime_sieve(0) == [False]
    assert prime_sieve(1) == [False, False]
    with pytest.raises(ValueError):
        prime_sieve(-1)


@pytest.mark.parametrize("n", [0, 1, 2, 5, 8, 10])
def test_factorial_divisor_count_matches_brute_force(n):
    value = math.factorial(n)
    brute = sum(1 for d in range(1, value + 1) if value % d == 0) if n <= 8 else None
    if brute is not None:
        assert factorial_divisor_count(n) == brute
    else:
        assert factorial_divisor_count(n) == factorial_divisor_count(n, 10**18)


def test_factorial_divisor_count_respects_modulus():
    full = factorial_divisor_count(60, 10**40)
    assert factorial_divisor_count(60, 1000) == full % 1000


def test_factorial_divisor_count_errors():
    with pytest.raises(ValueError):
        factorial_divisor_count(-1)
    with pytest.raises(ValueError):
        factorial_divisor_count(5, 0)


def test_distinct_prime_factor_counts_matches_factorisation():
    limit = 300
    counts = distinct_prime_factor_counts(limit)
    primes = primes_up_to(limit)
    assert len(counts) == limit
    for number in range(limit):
        expected = sum(1 for p in primes if number >= 2 and number % p == 0)
        assert counts[number] == expected


def test_distinct_prime_factor_counts_primes_have_one():
    counts = distinct_prime_factor_counts(100)
    assert all(counts[p] == 1 for p in primes_up_to(99))
    with pytest.raises(ValueError):
        distinct_prime_factor_counts(-3)