"""Array, matrix, file and record helpers built around small score tables."""

from __future__ import annotations

import math
import random
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from os import PathLike
from typing import NamedTuple, Union

StrPath = Union[str, "PathLike[str]"]


def _trunc_div(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


class CallCounter:
    """Counts its calls, next to a local count that starts afresh every call."""

    def __init__(self) -> None:
        self.calls = 0

    def __call__(self) -> tuple[int, int]:
        """Register a call; return the fresh local count and the running total."""
        local_count = 0
        local_count += 1
        self.calls += 1
        return local_count, self.calls


def integer_average(values: Iterable[int]) -> int:
    """Return the mean of integer values, truncated toward zero."""
    items = list(values)
    if not items:
        raise ValueError("cannot average an empty sequence")
    return _trunc_div(sum(items), len(items))


def random_scores(rng: random.Random | None = None, count: int = 5) -> list[int]:
    """Return ``count`` random scores in the range 0..99."""
    if count < 0:
        raise ValueError("count must not be negative")
    generator = rng if rng is not None else random.Random()
    return [generator.randrange(100) for _ in range(count)]


def differing_indices(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Return the positions at which two equally long sequences differ."""
    if len(a) != len(b):
        raise ValueError("sequences must have the same length")
    return [index for index, (x, y) in enumerate(zip(a, b)) if x != y]


def square_array(values: Iterable[int]) -> list[int]:
    """Return every value squared."""
    return [value * value for value in values]


def format_array(values: Iterable[int]) -> str:
    """Format values in right-aligned columns three characters wide."""
    return "".join(f"{value:3d}" for value in values)


def add_matrix(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return the element-wise sum of two matrices of the same shape."""
    if len(a) != len(b) or any(len(row_a) != len(row_b) for row_a, row_b in zip(a, b)):
        raise ValueError("matrices must have the same shape")
    return [[x + y for x, y in zip(row_a, row_b)] for row_a, row_b in zip(a, b)]


def format_matrix(matrix: Iterable[Iterable[int]]) -> str:
    """Format a matrix one row per line, each value followed by a space."""
    return "".join("".join(f"{value} " for value in row) + "\n" for row in matrix)


def describe_code(value: int | str) -> str:
    """Show a character code as its character and its number, e.g. ``A, (65)``."""
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError("expected a single character")
        code = ord(value)
    else:
        code = value
    return f"{chr(code)}, ({code})"


def write_words(path: StrPath, words: Iterable[str]) -> None:
    """Write each word on its own line, followed by a space."""
    with open(path, "w", encoding="utf-8") as handle:
        for word in words:
            handle.write(f"{word} \n")


def read_text(path: StrPath) -> str:
    """Return the whole contents of a text file."""
    with open(path, encoding="utf-8") as handle:
        return handle.read()


def swap(a, b):
    """Return the two values in exchanged order."""
    return b, a


@dataclass(frozen=True)
class Point:
    """A point with integer coordinates."""

    x: int
    y: int

    def distance_to(self, other: Point) -> float:
        """Return the Euclidean distance to ``other``."""
        return math.hypot(other.x - self.x, other.y - self.y)


def rectangle_area(p1: Point, p2: Point) -> int:
    """Return the signed area of the rectangle spanned by two corners."""
    return (p2.x - p1.x) * (p2.y - p1.y)


@dataclass
class Student:
    """A student record."""

    id: int = 0
    name: str = " "
    grade: float = 0.0


@dataclass(frozen=True)
class ScoreRecord:
    """A student identifier with a score."""

    id: int
    score: int


class ScoreSummary(NamedTuple):
    """Average score and the first record holding the highest positive score."""

    average: float
    highest_id: int
    highest_score: int


def score_summary(records: Iterable[ScoreRecord]) -> ScoreSummary:
    """Summarise records: mean score and the best one above zero (first wins ties)."""
    items = list(records)
    if not items:
        raise ValueError("no score records given")
    highest_id = 0
    highest_score = 0
    for record in items:
        if record.score > highest_score:
            highest_score = record.score
            highest_id = record.id
    average = sum(record.score for record in items) / len(items)
    return ScoreSummary(average, highest_id, highest_score)