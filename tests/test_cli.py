import io

import pytest

from sheetmath.arithmetic import cheapest_travel, range_product
from sheetmath.cli import PROBLEMS, main, solve
from sheetmath.digits import divisible_by_eight_subsequence
from sheetmath.divisors import divisor_sum, gcd_lcm, kth_divisor, recover_pair
from sheetmath.primes import count_almost_primes, jewelry_coloring, prime_factors


SAMPLES = {
    "prime-check": ("7", "YES\n"),
    "divisor-sum": ("6", "12\n"),
    "gcd": ("4 6", "2 12\n"),
    "product": ("1 5 1000", "120\n"),
    "prime-factors": ("12", "2 2\n3 1\n"),
    "almost-prime": ("10", "2\n"),
    "initial-bet": ("2 5 4 0 4", "3\n"),
    "cheap-travel": ("6 2 1 2", "6\n"),
    "perfect-squares": ("4 0", "YES\n"),
    "kth-divisor": ("4 2", "2\n"),
    "garden": ("3 6 2 3 5", "2\n"),
    "divisible-by-eight": ("3454", "YES\n344\n"),
    "divisible-by-sixty": ("1\n603", "red\n"),
    "mod-power": ("4 42", "10\n"),
    "divisor-pair": ("10\n10 2 8 1 2 4 1 20 4 5", "20 8\n"),
}


@pytest.mark.parametrize("text, expected", [("7", "YES\n"), ("1", "NO\n"), ("9", "NO\n")])
def test_prime_check(text, expected):
    assert solve("prime-check", text) == expected


def test_divisor_sum_matches_library():
    assert solve("divisor-sum", "28") == f"{divisor_sum(28)}\n"


def test_gcd_line_format():
    g, lcm = gcd_lcm(12, 18)
    assert solve("gcd", "12 18") == f"{g} {lcm}\n"


def test_product_matches_library():
    assert solve("product", "3 9 1000") == f"{range_product(3, 9, 1000)}\n"


def test_prime_factors_lines():
    out = solve("prime-factors", "360").splitlines()
    assert out == [f"{p} {k}" for p, k in prime_factors(360).items()]


def test_almost_prime_matches_library():
    assert solve("almost-prime", "50") == f"{count_almost_primes(50)}\n"


def test_initial_bet_impossible_gives_minus_one():
    assert solve("initial-bet", "0 0 0 0 0") == "-1\n"


def test_cheap_travel_matches_library():
    assert solve("cheap-travel", "6 2 1 2") == f"{cheapest_travel(6, 2, 1, 2)}\n"


def test_perfect_squares_stop_at_zero():
    assert solve("perfect-squares", "4 5 0 9") == "YES\nNO\n"


def test_perfect_squares_stop_at_end_of_input():
    assert solve("perfect-squares", "16") == "YES\n"


def test_kth_divisor_missing_gives_minus_one():
    assert solve("kth-divisor", "5 3") == "-1\n"
    assert solve("kth-divisor", "12 5") == f"{kth_divisor(12, 5)}\n"


def test_garden_without_fitting_bucket():
    assert solve("garden", "2 7 2 3") == "2147483647\n"


def test_divisible_by_eight_output():
    assert solve("divisible-by-eight", "111") == "NO\n"
    found = divisible_by_eight_subsequence("3454")
    assert solve("divisible-by-eight", "3454") == f"YES\n{found}\n"


def test_divisible_by_sixty_per_case():
    assert solve("divisible-by-sixty", "3\n603\n205\n006") == "red\ncyan\nred\n"


def test_mod_power_large_exponent_keeps_number():
    assert solve("mod-power", "40 123456") == "123456\n"


def test_divisor_pair_matches_library():
    values = [10, 2, 8, 1, 2, 4, 1, 20, 4, 5]
    x, y = recover_pair(values)
    text = f"{len(values)}\n" + " ".join(map(str, values))
    assert solve("divisor-pair", text) == f"{x} {y}\n"


def test_jewelry_output_lines():
    count, colors = jewelry_coloring(10)
    lines = solve("jewelry", "10").splitlines()
    assert lines[0] == str(count)
    assert lines[1].split() == [str(c) for c in colors]
    assert int(lines[0]) == max(colors)


def test_every_problem_is_registered():
    assert sorted(PROBLEMS) == sorted([*SAMPLES, "jewelry"])
    lines = solve("jewelry", "3").splitlines()
    assert lines[0] == "2"
    assert lines[1].split() == ["1", "1", "2"]


@pytest.mark.parametrize("problem", sorted(SAMPLES))
def test_sample_for_each_problem(problem):
    text, expected = SAMPLES[problem]
    assert solve(problem, text) == expected


def test_unknown_problem():
    with pytest.raises(ValueError):
        solve("no-such-problem", "1")


def test_missing_input():
    with pytest.raises(ValueError):
        solve("gcd", "4")


def test_main_prints_answer(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("13\n"))
    assert main(["prime-check"]) == 0
    assert capsys.readouterr().out == "YES\n"


def test_main_reports_bad_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("abc"))
    assert main(["divisor-sum"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "sheetmath:" in captured.err


def test_main_rejects_unknown_problem():
    with pytest.raises(SystemExit):
        main(["bogus"])