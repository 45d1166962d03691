"""Day 1: Trebuchet?!

Each line of the calibration document hides a two-digit value made of the
first and last digit on the line.  Part two also counts digits spelled out
as words, which may overlap (``eightwo`` starts with 8 and ends with 2).
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from aoc2023.core.contract import DayEntry, SolveError, non_empty_lines
from aoc2023.core.puzzle_input import PuzzleInput

logger = logging.getLogger(__name__)

DigitFinder = Callable[[str], Optional[tuple[int, int]]]

SPELLED_DIGITS: dict[str, int] = {
    "one": 1,
    "two": 2,
    "three": 3,
    "four": 4,
    "five": 5,
    "six": 6,
    "seven": 7,
    "eight": 8,
    "nine": 9,
}


def first_and_last_digit(line: str) -> tuple[int, int] | None:
    """First and last decimal digit in *line*, ignoring zero.

    A single digit counts as both first and last.  Returns ``None`` when
    the line holds no digit 1-9.
    """
    digits = [int(c) for c in line if c in "123456789"]
    if not digits:
        return None
    return digits[0], digits[-1]


def first_and_last_digit_or_spelled(line: str) -> tuple[int, int] | None:
    """Same as :func:`first_and_last_digit`, also accepting ``one``..``nine``."""
    first: tuple[int, int] | None = None  # (index, digit)
    last: tuple[int, int] | None = None
    for word, digit in SPELLED_DIGITS.items():
        for token in (word, str(digit)):
            idx = line.find(token)
            if idx == -1:
                continue
            if first is None or idx < first[0]:
                first = (idx, digit)
            ridx = line.rfind(token)
            if last is None or ridx > last[0]:
                last = (ridx, digit)
    if first is None or last is None:
        return None
    return first[1], last[1]


def sum_calibration_values(puzzle: PuzzleInput, finder: DigitFinder) -> int:
    """Sum the two-digit value of every non-empty line.

    Raises
    ------
    SolveError
        If a non-empty line contains no digit.
    """
    total = 0
    for lineno, line in non_empty_lines(puzzle):
        found = finder(line)
        if found is None:
            raise SolveError(f"`{line}` does not contain any digits", line=lineno)
        first, last = found
        value = first * 10 + last
        logger.debug("Line %d (`%s`) -> %d", lineno, line, value)
        total += value
    return total


def part_one(puzzle: PuzzleInput) -> int:
    return sum_calibration_values(puzzle, first_and_last_digit)


def part_two(puzzle: PuzzleInput) -> int:
    return sum_calibration_values(puzzle, first_and_last_digit_or_spelled)


ENTRY = DayEntry(
    name="day1",
    description="Trebuchet?!: sum first/last digits of each calibration line",
    part_one=part_one,
    part_two=part_two,
)
