"""Divisor enumeration, divisor sums, gcd/lcm and divisor-list recovery."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from math import isqrt


def divisors(n: int) -> list[int]:
    """Return all positive divisors of ``n`` in ascending order."""
    if n < 1:
        raise ValueError(f"divisors are defined here for positive values, got {n}")
    small = [d for d in range(1, isqrt(n) + 1) if n % d == 0]
    large = [n // d for d in reversed(small) if d * d != n]
    return small + large


def divisor_sum(n: int) -> int:
    """Return the sum of all positive divisors of ``n`` (0 when ``n`` < 1)."""
    if n < 1:
        return 0
    return sum(divisors(n))


def _gcd(a: int, b: int) -> int:
    a, b = abs(a), abs(b)
    while b:
        a, b = b, a % b
    return a


def gcd_lcm(a: int, b: int) -> tuple[int, int]:
    """Return ``(gcd, lcm)`` of ``a`` and ``b``, with lcm computed as ``a / gcd * b``.

    Raises ZeroDivisionError when both values are zero.
    """
    g = _gcd(a, b)
    if g == 0:
        raise ZeroDivisionError("gcd of 0 and 0 is 0; lcm is undefined")
    return g, (a // g) * b


def kth_divisor(n: int, k: int) -> int | None:
    """Return the ``k``-th smallest divisor of ``n`` (1-based), or None if it does not exist."""
    found = divisors(n)
    if 0 < k <= len(found):
        return found[k - 1]
    return None


def recover_pair(divisor_list: Iterable[int]) -> tuple[int, int]:
    """Recover ``(x, y)`` from the merged multiset of the divisors of x and y.

    ``x`` is the largest value; its divisors are removed, and ``y`` is the
    largest value left (0 if nothing is left).
    """
    counts = Counter(divisor_list)
    if not counts:
        raise ValueError("divisor list must not be empty")
    x = max(counts)
    counts.subtract(divisors(x))
    y = max((value for value, count in counts.items() if count > 0), default=0)
    return x, y