"""Number-theory helpers: base conversion, fast powers, gcd, primes and factorisation."""

from __future__ import annotations

from math import isqrt

__all__ = [
    "MOD",
    "base_rep",
    "binpow",
    "gcd_extended",
    "is_prime",
    "prime_factors",
    "sieve_of_eratosthenes",
    "SmallestPrimeFactorSieve",
]

MOD = 10**9 + 7


def base_rep(n: int, b: int) -> str:
    """Return the digits of ``n`` written in base ``b``.

    Each digit ``d`` is rendered as the character ``chr(ord('0') + d)``.
    """
    if b < 2:
        raise ValueError(f"base must be at least 2, got {b}")
    if n < 0:
        raise ValueError(f"cannot represent negative number {n}")
    if n == 0:
        return "0"
    digits = []
    while n > 0:
        n, d = divmod(n, b)
        digits.append(chr(ord("0") + d))
    return "".join(reversed(digits))


def binpow(a: int, b: int) -> int:
    """Return ``a ** b`` by repeated squaring."""
    if b < 0:
        raise ValueError(f"exponent must be non-negative, got {b}")
    result = 1
    while b:
        if b & 1:
            result *= a
        a *= a
        b >>= 1
    return result


def gcd_extended(a: int, b: int) -> tuple[int, int, int]:
    """Return ``(g, x, y)`` with ``g = gcd(a, b)`` and ``a*x + b*y == g``."""
    if a == 0:
        return b, 0, 1
    g, x1, y1 = gcd_extended(b % a, a)
    return g, y1 - (b // a) * x1, x1


def is_prime(n: int) -> bool:
    """Trial-division primality test in O(sqrt n)."""
    if n < 2:
        return False
    return all(n % i for i in range(2, isqrt(n) + 1))


def prime_factors(n: int) -> list[tuple[int, int]]:
    """Return the prime factorisation of ``n`` as ``(prime, exponent)`` pairs, ascending."""
    factors = []
    i = 2
    while i * i <= n:
        if n % i == 0:
            count = 0
            while n % i == 0:
                count += 1
                n //= i
            factors.append((i, count))
        i += 1
    if n > 1:
        factors.append((n, 1))
    return factors


def sieve_of_eratosthenes(limit: int) -> list[bool]:
    """Return a list whose entry ``i`` tells whether ``i`` is prime, for ``0 <= i <= limit``."""
    if limit < 0:
        raise ValueError(f"limit must be non-negative, got {limit}")
    flags = bytearray([1]) * (limit + 1)
    flags[:2] = bytes(min(2, limit + 1))
    for i in range(2, isqrt(limit) + 1):
        if flags[i]:
            flags[i * i :: i] = bytes(len(range(i * i, limit + 1, i)))
    return [bool(f) for f in flags]


class SmallestPrimeFactorSieve:
    """Precomputed smallest prime factors for fast factorisation of numbers up to ``limit``."""

    def __init__(self, limit: int) -> None:
        if limit < 0:
            raise ValueError(f"limit must be non-negative, got {limit}")
        self.limit = limit
        spf = [1] * (limit + 1)
        spf[0] = 0
        for i in range(2, limit + 1):
            if spf[i] == 1:
                for j in range(i, limit + 1, i):
                    if spf[j] == 1:
                        spf[j] = i
        self._spf = spf

    def factorize(self, x: int) -> list[int]:
        """Return the prime factors of ``x`` in ascending order, with multiplicity."""
        if not 1 <= x <= self.limit:
            raise ValueError(f"{x} is outside the sieve range 1..{self.limit}")
        factors = []
        while x != 1:
            p = self._spf[x]
            factors.append(p)
            x //= p
        return factors