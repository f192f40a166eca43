"""Small arithmetic, character and control-flow helpers."""

from __future__ import annotations

import math
from enum import Enum


def _c_div(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    if b == 0:
        raise ZeroDivisionError("integer division by zero")
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def _c_mod(a: int, b: int) -> int:
    """Remainder whose sign follows the dividend."""
    return a - b * _c_div(a, b)


def char_to_digit(c: str) -> int:
    """Return the numeric value of a digit character."""
    if len(c) != 1:
        raise ValueError("expected a single character")
    return ord(c) - ord("0")


def next_character(c: str) -> str:
    """Return the character whose code follows that of ``c``."""
    if len(c) != 1:
        raise ValueError("expected a single character")
    return chr(ord(c) + 1)


def divide(a: float, b: float) -> float:
    """Floating-point division; a zero divisor gives infinity or NaN."""
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def polynomial_and_mean(a: int, b: int, c: int, x: int, z: int) -> tuple[int, int]:
    """Return ``y = a*x*x + b*x + c`` and the truncated mean of ``x``, ``y`` and ``z``."""
    y = a * x * x + b * x + c
    return y, _c_div(x + y + z, 3)


def integer_arithmetic(a: int, b: int) -> dict[str, int]:
    """Return the results of ``+ - * / %`` on two integers, keyed by operator."""
    return {
        "+": a + b,
        "-": a - b,
        "*": a * b,
        "/": _c_div(a, b),
        "%": _c_mod(a, b),
    }


def split_seconds(seconds: int) -> tuple[int, int]:
    """Split a number of seconds into minutes and remaining seconds."""
    return _c_div(seconds, 60), _c_mod(seconds, 60)


def is_leap_year(year: int) -> bool:
    """Return whether ``year`` is a Gregorian leap year."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def bitwise_results(a: int, b: int) -> dict[str, int]:
    """Return the results of the bitwise operators, keyed by operator."""
    return {
        "&": a & b,
        "|": a | b,
        "^": a ^ b,
        "<<1": a << 1,
        ">>1": a >> 1,
    }


def describe_sign(n: int) -> str:
    """Describe whether ``n`` is positive, negative or zero."""
    if n > 0:
        return "This is positive number."
    if n < 0:
        return "This is negative number."
    return "This is 0."


def absolute(n: int) -> int:
    """Return the absolute value of ``n``."""
    return n if n >= 0 else -n


def count_digits(text: str) -> int:
    """Count ASCII digits in the first line of ``text``."""
    line = text.split("\n", 1)[0]
    return sum(1 for ch in line if "0" <= ch <= "9")


def sum_to(n: int) -> int:
    """Return the sum of the integers from 1 to ``n``."""
    return sum(range(1, n + 1))


def calculate(a: int, op: str, b: int) -> int:
    """Apply one of ``+ - * /`` to two integers."""
    if op == "+":
        return a + b
    if op == "-":
        return a - b
    if op == "*":
        return a * b
    if op == "/":
        return _c_div(a, b)
    raise ValueError(f"Error input : {op}")


class Hint(Enum):
    """Reply to a guess."""

    HIGHER = "High!"
    LOWER = "Low!"
    CORRECT = "Congratulation!"


class GuessingGame:
    """Guess-the-number game that counts trials."""

    def __init__(self, answer: int = 87) -> None:
        self.answer = answer
        self.trials = 0

    @property
    def solved(self) -> bool:
        return self._last == Hint.CORRECT if self.trials else False

    def guess(self, number: int) -> Hint:
        """Register a guess and say whether the answer is higher, lower or hit."""
        self.trials += 1
        if number < self.answer:
            self._last = Hint.HIGHER
        elif number > self.answer:
            self._last = Hint.LOWER
        else:
            self._last = Hint.CORRECT
        return self._last


def star_line(count: int = 10) -> str:
    """Return a line of ``count`` stars."""
    return "*" * count


def sum_two(a: int, b: int) -> int:
    """Return the sum of two integers."""
    return a + b


def square(n: int) -> int:
    """Return ``n`` squared."""
    return n * n


def get_max(x: int, y: int) -> int:
    """Return the larger of two integers, or 0 when they are equal."""
    if x > y:
        return x
    if x < y:
        return y
    return 0


def factorial(n: int) -> int:
    """Return ``n!``."""
    if n < 0:
        raise ValueError("factorial of a negative number")
    return math.prod(range(1, n + 1))


def combination(n: int, r: int) -> int:
    """Return the number of ways to choose ``r`` items out of ``n``."""
    if not 0 <= r <= n:
        raise ValueError("combination needs 0 <= r <= n")
    return factorial(n) // (factorial(n - r) * factorial(r))