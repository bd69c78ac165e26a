# sheetmath

Small solvers for classic number-theory and arithmetic exercises:
primality, prime factorisation, divisor sums, GCD/LCM, k-th divisors,
digit-based divisibility checks and a few word problems. No third-party
dependencies.

## Installation

```
pip install .
```

## Library use

```python
from sheetmath.primes import is_prime, prime_factors, count_almost_primes
from sheetmath.divisors import divisor_sum, gcd_lcm, kth_divisor
from sheetmath.arithmetic import cheapest_travel, is_perfect_square
from sheetmath.digits import divisible_by_eight_subsequence

is_prime(97)                 # True
prime_factors(360)           # {2: 3, 3: 2, 5: 1}
count_almost_primes(10)      # 2
divisor_sum(6)               # 12
gcd_lcm(12, 18)              # (6, 36)
kth_divisor(12, 5)           # 6
cheapest_travel(6, 2, 1, 2)  # 6
is_perfect_square(49)        # True
divisible_by_eight_subsequence("3454")  # "344"
```

Functions that have no answer for a given input return `None`
(`kth_divisor`, `initial_bet`, `minimum_watering_hours`,
`divisible_by_eight_subsequence`); invalid input raises `ValueError`
(and `gcd_lcm(0, 0)` raises `ZeroDivisionError`).

Modules:

- `sheetmath.primes` — `is_prime`, `prime_factors`, `is_almost_prime`,
  `count_almost_primes`, `prime_sieve`, `jewelry_coloring`
- `sheetmath.divisors` — `divisors`, `divisor_sum`, `gcd_lcm`,
  `kth_divisor`, `recover_pair`
- `sheetmath.arithmetic` — `range_product`, `initial_bet`,
  `cheapest_travel`, `is_perfect_square`, `mod_power_of_two`,
  `minimum_watering_hours`
- `sheetmath.digits` — `divisible_by_eight_subsequence`,
  `can_rearrange_divisible_by_sixty`
- `sheetmath.cli` — `solve` and the `main` entry point

## Command line

The `sheetmath` command takes a problem name, reads that problem's
whitespace-separated input from standard input and writes the answer to
standard output:

```
echo 7 | sheetmath prime-check
```

prints `YES`. Problem names:

`almost-prime`, `cheap-travel`, `divisible-by-eight`, `divisible-by-sixty`,
`divisor-pair`, `divisor-sum`, `garden`, `gcd`, `initial-bet`, `jewelry`,
`kth-divisor`, `mod-power`, `perfect-squares`, `prime-check`,
`prime-factors`, `product`.

Where a problem has no answer, the command prints `-1` (`initial-bet`,
`kth-divisor`), `NO` (`divisible-by-eight`) or `2147483647` (`garden`).
`perfect-squares` reads numbers until a `0`. Malformed input is reported on
standard error with exit status 1.

From Python, `sheetmath.cli.solve(problem, text)` takes a problem name and
the input text and returns the output text.