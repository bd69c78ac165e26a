"""Divisibility puzzles on strings of decimal digits."""

from __future__ import annotations

_DIGITS = frozenset("0123456789")


def _check_digits(digits: str) -> None:
    if not set(digits) <= _DIGITS:
        raise ValueError(f"expected only decimal digits, got {digits!r}")


def divisible_by_eight_subsequence(digits: str) -> str | None:
    """Return the first subsequence of one to three digits that is divisible by 8.

    Candidates are tried in the order of their first digit; for each first
    digit the single digit comes first, then each two-digit choice followed by
    its three-digit extensions. Only the lone digit ``0`` may start with zero.
    None is returned when no such subsequence exists.
    """
    _check_digits(digits)
    for i, first in enumerate(digits):
        if int(first) % 8 == 0:
            return first
        for j in range(i + 1, len(digits)):
            pair = first + digits[j]
            if int(pair) % 8 == 0:
                return pair
            for third in digits[j + 1:]:
                triple = pair + third
                if int(triple) % 8 == 0:
                    return triple
    return None


def can_rearrange_divisible_by_sixty(digits: str) -> bool:
    """Return True if the digits can be reordered into a multiple of 60.

    That needs a zero to end the number, a digit sum divisible by 3, and a
    second even digit (another zero or a nonzero even digit) for the tens place.
    """
    _check_digits(digits)
    values = [int(ch) for ch in digits]
    zeros = values.count(0)
    has_even_nonzero = any(v != 0 and v % 2 == 0 for v in values)
    return zeros >= 1 and sum(values) % 3 == 0 and (zeros >= 2 or has_even_nonzero)