import math
from functools import reduce

import pytest
from hypothesis import given
from hypothesis import strategies as st

from cpkit.numtheory import (
    SmallestPrimeFactorSieve,
    base_rep,
    binpow,
    gcd_extended,
    is_prime,
    prime_factors,
    sieve_of_eratosthenes,
)


@given(st.integers(min_value=0, max_value=10**12), st.integers(min_value=2, max_value=10))
def test_base_rep_round_trip(n, b):
    assert int(base_rep(n, b), b) == n


def test_base_rep_zero():
    assert base_rep(0, 7) == "0"


@pytest.mark.parametrize("n,b", [(5, 1), (5, 0), (-3, 10)])
def test_base_rep_rejects_bad_input(n, b):
    with pytest.raises(ValueError):
        base_rep(n, b)


@given(st.integers(min_value=-50, max_value=50), st.integers(min_value=0, max_value=40))
def test_binpow_matches_pow(a, b):
    assert binpow(a, b) == a**b


def test_binpow_negative_exponent():
    with pytest.raises(ValueError):
        binpow(2, -1)


@given(st.integers(min_value=0, max_value=10**9), st.integers(min_value=0, max_value=10**9))
def test_gcd_extended_bezout(a, b):
    g, x, y = gcd_extended(a, b)
    assert g == math.gcd(a, b)
    assert a * x + b * y == g


def test_is_prime_small_cases():
    assert not is_prime(0)
    assert not is_prime(1)
    assert is_prime(2)


@given(st.integers(min_value=2, max_value=2000), st.integers(min_value=2, max_value=2000))
def test_products_are_not_prime(a, b):
    assert not is_prime(a * b)


def test_sieve_agrees_with_trial_division():
    flags = sieve_of_eratosthenes(1000)
    assert len(flags) == 1001
    assert [i for i, f in enumerate(flags) if f] == [i for i in range(1001) if is_prime(i)]


@pytest.mark.parametrize("limit", [0, 1, 2])
def test_sieve_tiny_limits(limit):
    flags = sieve_of_eratosthenes(limit)
    assert len(flags) == limit + 1
    assert flags[: min(2, limit + 1)] == [False] * min(2, limit + 1)


def test_sieve_negative_limit():
    with pytest.raises(ValueError):
        sieve_of_eratosthenes(-1)


@given(st.integers(min_value=1, max_value=10**9))
def test_prime_factors_multiply_back(n):
    factors = prime_factors(n)
    assert reduce(lambda acc, pc: acc * pc[0] ** pc[1], factors, 1) == n
    primes = [p for p, _ in factors]
    assert primes == sorted(set(primes))
    assert all(is_prime(p) and c >= 1 for p, c in factors)


@pytest.fixture(scope="module")
def spf_sieve():
    return SmallestPrimeFactorSieve(10**5)


@given(x=st.integers(min_value=1, max_value=10**5))
def test_spf_factorize_matches_trial_division(spf_sieve, x):
    factors = spf_sieve.factorize(x)
    assert math.prod(factors) == x
    assert factors == sorted(factors)
    expanded = [p for p, c in prime_factors(x) for _ in range(c)]
    assert factors == expanded


def test_spf_factorize_one(spf_sieve):
    assert spf_sieve.factorize(1) == []


@pytest.mark.parametrize("x", [0, -5, 10**5 + 1])
def test_spf_factorize_out_of_range(spf_sieve, x):
    with pytest.raises(ValueError):
        spf_sieve.factorize(x)