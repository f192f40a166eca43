import math

import pytest

from sharkboard.basics import (
    GuessingGame,
    Hint,
    absolute,
    bitwise_results,
    calculate,
    char_to_digit,
    combination,
    count_digits,
    describe_sign,
    divide,
    factorial,
    get_max,
    integer_arithmetic,
    is_leap_year,
    next_character,
    polynomial_and_mean,
    split_seconds,
    square,
    star_line,
    sum_to,
    sum_two,
)


@pytest.mark.parametrize("digit", list("0123456789"))
def test_char_to_digit(digit):
    assert char_to_digit(digit) == int(digit)


def test_char_to_digit_rejects_strings():
    with pytest.raises(ValueError):
        char_to_digit("12")


def test_next_character():
    assert next_character("A") == "B"


def test_divide_round_trip():
    assert divide(7.0, 2.0) * 2.0 == 7.0


def test_divide_by_zero():
    assert divide(1.0, 0.0) == math.inf
    assert divide(-1.0, 0.0) == -math.inf
    assert math.isnan(divide(0.0, 0.0))


def test_polynomial_and_mean_bounds():
    y, m = polynomial_and_mean(3, 4, 5, 2, 1)
    total = 2 + y + 1
    assert 3 * m <= total < 3 * (m + 1)
    assert y - 5 == 3 * 2 * 2 + 4 * 2


@pytest.mark.parametrize("a,b", [(7, 2), (-7, 2), (7, -2), (-7, -2)])
def test_integer_arithmetic_truncates(a, b):
    results = integer_arithmetic(a, b)
    q, r = results["/"], results["%"]
    assert q * b + r == a
    assert abs(r) < abs(b)
    assert r == 0 or (r < 0) == (a < 0)
    assert results["+"] - results["-"] == 2 * b


def test_integer_arithmetic_negative_quotient():
    assert integer_arithmetic(-7, 2)["/"] == -3


def test_integer_arithmetic_zero_divisor():
    with pytest.raises(ZeroDivisionError):
        integer_arithmetic(1, 0)


@pytest.mark.parametrize("seconds", [0, 59, 60, 125, 3600])
def test_split_seconds(seconds):
    minutes, rest = split_seconds(seconds)
    assert minutes * 60 + rest == seconds
    assert 0 <= rest < 60


@pytest.mark.parametrize(
    "year,expected", [(2000, True), (1900, False), (2024, True), (2023, False)]
)
def test_is_leap_year(year, expected):
    assert is_leap_year(year) is expected


@pytest.mark.parametrize("a,b", [(12, 10), (5, 3), (-8, 6)])
def test_bitwise_results(a, b):
    r = bitwise_results(a, b)
    assert r["&"] + r["|"] == a + b
    assert r["^"] == r["|"] - r["&"]
    assert r["<<1"] == a * 2
    assert r[">>1"] == a // 2


def test_describe_sign():
    assert describe_sign(4) == "This is positive number."
    assert describe_sign(-4) == "This is negative number."
    assert describe_sign(0) == "This is 0."


@pytest.mark.parametrize("n", [-5, 0, 5])
def test_absolute(n):
    assert absolute(n) == absolute(-n)
    assert absolute(n) >= 0


def test_count_digits():
    assert count_digits("12345") == len("12345")
    assert count_digits("abc") == 0
    assert count_digits("12x3\n456") == count_digits("12x3")


def test_sum_to():
    assert sum_to(0) == 0
    assert sum_to(100) == 5050
    for n in range(1, 20):
        assert sum_to(n) - sum_to(n - 1) == n


def test_calculate_matches_arithmetic():
    table = integer_arithmetic(-9, 4)
    for op in "+-*/":
        assert calculate(-9, op, 4) == table[op]


def test_calculate_rejects_unknown_operator():
    with pytest.raises(ValueError, match="Error input : %"):
        calculate(1, "%", 2)


def test_guessing_game():
    game = GuessingGame()
    assert game.guess(50) is Hint.HIGHER
    assert game.guess(90) is Hint.LOWER
    assert not game.solved
    assert game.guess(87) is Hint.CORRECT
    assert game.solved
    assert game.trials == 3


def test_star_line():
    assert star_line() == "*" * 10
    assert star_line(3) == "***"


def test_sum_two_and_square():
    assert sum_two(3, 4) == sum_two(4, 3)
    assert square(-6) == square(6) == 36


def test_get_max():
    assert get_max(3, 8) == 8
    assert get_max(8, 3) == 8
    assert get_max(3, 3) == 0


def test_factorial():
    assert factorial(5) == 120
    for n in range(1, 12):
        assert factorial(n) == n * factorial(n - 1)
    with pytest.raises(ValueError):
        factorial(-1)


def test_combination():
    for n in range(1, 10):
        assert combination(n, 1) == n
        for r in range(1, n):
            assert combination(n, r) == combination(n, n - r)
            assert combination(n, r) == combination(n - 1, r - 1) + combination(n - 1, r)
    with pytest.raises(ValueError):
        combination(3, 4)