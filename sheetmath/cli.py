"""Command-line entry point that answers the sheet problems from text input."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterator
from itertools import islice

from sheetmath.arithmetic import (
    cheapest_travel,
    initial_bet,
    is_perfect_square,
    minimum_watering_hours,
    mod_power_of_two,
    range_product,
)
from sheetmath.digits import (
    can_rearrange_divisible_by_sixty,
    divisible_by_eight_subsequence,
)
from sheetmath.divisors import divisor_sum, gcd_lcm, kth_divisor, recover_pair
from sheetmath.primes import (
    count_almost_primes,
    is_prime,
    jewelry_coloring,
    prime_factors,
)

_NO_BUCKET = 2147483647

Tokens = Iterator[str]


def _ints(tokens: Tokens, count: int) -> list[int]:
    raw = list(islice(tokens, count))
    if len(raw) < count:
        raise ValueError("unexpected end of input")
    try:
        return [int(value) for value in raw]
    except ValueError as exc:
        raise ValueError(f"expected integers, got {raw}") from exc


def _int(tokens: Tokens) -> int:
    return _ints(tokens, 1)[0]


def _word(tokens: Tokens) -> str:
    word = next(tokens, None)
    if word is None:
        raise ValueError("unexpected end of input")
    return word


def _yes_no(flag: bool) -> str:
    return "YES" if flag else "NO"


def _prime_check(tokens: Tokens) -> list[str]:
    return [_yes_no(is_prime(_int(tokens)))]


def _divisor_sum(tokens: Tokens) -> list[str]:
    return [str(divisor_sum(_int(tokens)))]


def _gcd(tokens: Tokens) -> list[str]:
    g, lcm = gcd_lcm(*_ints(tokens, 2))
    return [f"{g} {lcm}"]


def _product(tokens: Tokens) -> list[str]:
    return [str(range_product(*_ints(tokens, 3)))]


def _prime_factors(tokens: Tokens) -> list[str]:
    return [f"{p} {k}" for p, k in prime_factors(_int(tokens)).items()]


def _almost_prime(tokens: Tokens) -> list[str]:
    return [str(count_almost_primes(_int(tokens)))]


def _initial_bet(tokens: Tokens) -> list[str]:
    bet = initial_bet(_ints(tokens, 5))
    return [str(-1 if bet is None else bet)]


def _cheap_travel(tokens: Tokens) -> list[str]:
    return [str(cheapest_travel(*_ints(tokens, 4)))]


def _perfect_squares(tokens: Tokens) -> list[str]:
    answers = []
    for token in tokens:
        number = int(token)
        if number == 0:
            break
        answers.append(_yes_no(is_perfect_square(number)))
    return answers


def _kth_divisor(tokens: Tokens) -> list[str]:
    n, k = _ints(tokens, 2)
    found = kth_divisor(n, k)
    return [str(-1 if found is None else found)]


def _garden(tokens: Tokens) -> list[str]:
    count, length = _ints(tokens, 2)
    hours = minimum_watering_hours(length, _ints(tokens, count))
    return [str(_NO_BUCKET if hours is None else hours)]


def _divisible_by_eight(tokens: Tokens) -> list[str]:
    found = divisible_by_eight_subsequence(_word(tokens))
    return ["NO"] if found is None else ["YES", found]


def _divisible_by_sixty(tokens: Tokens) -> list[str]:
    cases = _int(tokens)
    return [
        "red" if can_rearrange_divisible_by_sixty(_word(tokens)) else "cyan"
        for _ in range(cases)
    ]


def _mod_power(tokens: Tokens) -> list[str]:
    return [str(mod_power_of_two(*_ints(tokens, 2)))]


def _divisor_pair(tokens: Tokens) -> list[str]:
    count = _int(tokens)
    x, y = recover_pair(_ints(tokens, count))
    return [f"{x} {y}"]


def _jewelry(tokens: Tokens) -> list[str]:
    color_count, colors = jewelry_coloring(_int(tokens))
    return [str(color_count), " ".join(map(str, colors))]


PROBLEMS: dict[str, Callable[[Tokens], list[str]]] = {
    "prime-check": _prime_check,
    "divisor-sum": _divisor_sum,
    "gcd": _gcd,
    "product": _product,
    "prime-factors": _prime_factors,
    "almost-prime": _almost_prime,
    "initial-bet": _initial_bet,
    "cheap-travel": _cheap_travel,
    "perfect-squares": _perfect_squares,
    "kth-divisor": _kth_divisor,
    "garden": _garden,
    "divisible-by-eight": _divisible_by_eight,
    "divisible-by-sixty": _divisible_by_sixty,
    "mod-power": _mod_power,
    "divisor-pair": _divisor_pair,
    "jewelry": _jewelry,
}


def solve(problem: str, text: str) -> str:
    """Answer ``problem`` for the whitespace-separated input ``text``."""
    try:
        handler = PROBLEMS[problem]
    except KeyError:
        raise ValueError(f"unknown problem {problem!r}") from None
    lines = handler(iter(text.split()))
    return "".join(f"{line}\n" for line in lines)


def main(argv: list[str] | None = None) -> int:
    """Read a problem's input from standard input and print its answer."""
    parser = argparse.ArgumentParser(
        prog="sheetmath", description="Solve a number-theory sheet problem."
    )
    parser.add_argument("problem", choices=sorted(PROBLEMS))
    args = parser.parse_args(argv)
    try:
        answer = solve(args.problem, sys.stdin.read())
    except (ValueError, ZeroDivisionError) as exc:
        print(f"sheetmath: {exc}", file=sys.stderr)
        return 1
    sys.stdout.write(answer)
    return 0


if __name__ == "__main__":
    sys.exit(main())