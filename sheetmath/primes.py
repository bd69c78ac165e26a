"""Primality, factorisation and sieve helpers."""

from __future__ import annotations

from math import isqrt


def is_prime(n: int) -> bool:
    """Return True if ``n`` is a prime number."""
    if n <= 1:
        return False
    if n == 2:
        return True
    if n % 2 == 0:
        return False
    return all(n % d for d in range(3, isqrt(n) + 1, 2))


def prime_factors(n: int) -> dict[int, int]:
    """Return the prime factorisation of ``n`` as ``{prime: power}`` in ascending order."""
    if n < 1:
        raise ValueError(f"cannot factorise {n}: value must be at least 1")
    factors: dict[int, int] = {}
    d = 2
    while d * d <= n:
        while n % d == 0:
            factors[d] = factors.get(d, 0) + 1
            n //= d
        d += 1
    if n != 1:
        factors[n] = factors.get(n, 0) + 1
    return factors


def is_almost_prime(n: int) -> bool:
    """Return True if ``n`` has exactly two distinct prime divisors."""
    if n < 2:
        return False
    return len(prime_factors(n)) == 2


def count_almost_primes(n: int) -> int:
    """Count the almost-prime numbers between 1 and ``n`` inclusive."""
    return sum(1 for value in range(4, n + 1) if is_almost_prime(value))


def prime_sieve(limit: int) -> list[bool]:
    """Return a list where index ``i`` tells whether ``i`` is prime, for 0..limit."""
    if limit < 0:
        raise ValueError(f"sieve limit must be non-negative, got {limit}")
    sieve = [True] * (limit + 1)
    for small in (0, 1):
        if small <= limit:
            sieve[small] = False
    for i in range(2, isqrt(limit) + 1):
        if sieve[i]:
            start = i * i
            sieve[start::i] = [False] * len(range(start, limit + 1, i))
    return sieve


def jewelry_coloring(n: int) -> tuple[int, list[int]]:
    """Colour pieces priced 2..n+1 so no piece shares a colour with a prime divisor.

    Primes get colour 1 and composites colour 2. Returns the number of colours
    used and the colour of each piece in price order.
    """
    if n < 0:
        raise ValueError(f"number of pieces must be non-negative, got {n}")
    sieve = prime_sieve(n + 1)
    colors = [1 if sieve[price] else 2 for price in range(2, n + 2)]
    color_count = 2 if 2 in colors else 1
    return color_count, colors