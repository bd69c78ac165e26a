"""Small arithmetic puzzles: range products, bets, fares, squares and watering."""

from __future__ import annotations

from collections.abc import Iterable
from math import isqrt

_BIG_EXPONENT = 30
_PLAYERS = 5


def range_product(low: int, high: int, mod: int) -> int:
    """Return the product of the integers ``low..high`` reduced modulo ``mod``.

    An empty range gives 1.
    """
    product = 1
    for value in range(low, high + 1):
        product = (product * value) % mod
    return product


def initial_bet(bets: Iterable[int]) -> int | None:
    """Return the common initial bet of five players, or None if it is impossible."""
    coins = list(bets)
    if len(coins) != _PLAYERS:
        raise ValueError(f"expected {_PLAYERS} bets, got {len(coins)}")
    total = sum(coins)
    if total > 0 and total % _PLAYERS == 0:
        return total // _PLAYERS
    return None


def cheapest_travel(n: int, m: int, a: int, b: int) -> int:
    """Return the minimum cost of ``n`` rides with single tickets at ``a``
    and ``m``-ride tickets at ``b``."""
    only_single = n * a
    only_special = -(-n // m) * b
    combined = (n // m) * b + (n % m) * a
    return min(only_single, only_special, combined)


def is_perfect_square(n: int) -> bool:
    """Return True if ``n`` is the square of an integer."""
    if n < 0:
        return False
    root = isqrt(n)
    return root * root == n


def mod_power_of_two(exponent: int, number: int) -> int:
    """Return ``number mod 2**exponent``; large exponents leave ``number`` unchanged."""
    if exponent < 0:
        raise ValueError(f"exponent must be non-negative, got {exponent}")
    if exponent >= _BIG_EXPONENT:
        return number
    return number % (1 << exponent)


def minimum_watering_hours(garden_length: int, segments: Iterable[int]) -> int | None:
    """Return the fewest hours to water the garden with one bucket.

    Only buckets whose segment length divides the garden exactly count;
    None is returned when there is no such bucket.
    """
    return min(
        (garden_length // s for s in segments if garden_length % s == 0),
        default=None,
    )