"""Day 3: Gear Ratios.

The engine schematic is a grid of numbers, dots and symbols.  Any number
adjacent to a symbol (diagonals included) is a *part number*.  A ``*``
adjacent to exactly two part numbers is a *gear*; its ratio is the
product of those two numbers.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from aoc2023.core.contract import DayEntry, SolveError
from aoc2023.core.puzzle_input import PuzzleInput, split_lines

logger = logging.getLogger(__name__)

_NUMBER_RE = re.compile(r"[0-9]+")
GEAR = "*"


def is_symbol(char: str) -> bool:
    """Anything that is neither an ASCII digit nor a dot."""
    return char != "." and char not in "0123456789"


@dataclass(frozen=True)
class PartNumber:
    value: int
    line_idx: int
    start: int
    end: int
    """Exclusive end column."""

    def is_adjacent(self, line_idx: int, col: int) -> bool:
        """Whether the cell at (*line_idx*, *col*) touches this number."""
        if abs(line_idx - self.line_idx) > 1:
            return False
        return self.start - 1 <= col <= self.end


@dataclass(frozen=True)
class Gear:
    line_idx: int
    col: int
    neighbours: tuple[PartNumber, PartNumber]

    @property
    def ratio(self) -> int:
        return self.neighbours[0].value * self.neighbours[1].value


@dataclass(frozen=True)
class Schematic:
    part_numbers: tuple[PartNumber, ...]
    gears: tuple[Gear, ...]

    @classmethod
    def parse(cls, text: str) -> Schematic:
        lines = split_lines(text)
        parts = tuple(
            PartNumber(int(m.group()), line_idx, m.start(), m.end())
            for line_idx, line in enumerate(lines)
            for m in _NUMBER_RE.finditer(line)
            if _has_adjacent_symbol(lines, line_idx, m.start(), m.end())
        )

        gears: list[Gear] = []
        for line_idx, line in enumerate(lines):
            for col, char in enumerate(line):
                if char != GEAR:
                    continue
                neighbours = [p for p in parts if p.is_adjacent(line_idx, col)]
                if len(neighbours) == 2:
                    gears.append(Gear(line_idx, col, (neighbours[0], neighbours[1])))
        logger.debug("Schematic has %d part numbers and %d gears", len(parts), len(gears))
        return cls(part_numbers=parts, gears=tuple(gears))


def _has_adjacent_symbol(lines: list[str], line_idx: int, start: int, end: int) -> bool:
    lo = max(start - 1, 0)
    for idx in (line_idx - 1, line_idx, line_idx + 1):
        if 0 <= idx < len(lines) and any(is_symbol(c) for c in lines[idx][lo:end + 1]):
            return True
    return False


def _parse(puzzle: PuzzleInput) -> Schematic:
    if puzzle.is_blank:
        raise SolveError("input is empty")
    return Schematic.parse(puzzle.text)


def part_one(puzzle: PuzzleInput) -> int:
    return sum(part.value for part in _parse(puzzle).part_numbers)


def part_two(puzzle: PuzzleInput) -> int:
    return sum(gear.ratio for gear in _parse(puzzle).gears)


ENTRY = DayEntry(
    name="day3",
    description="Gear Ratios: sum part numbers and gear ratios in a schematic",
    part_one=part_one,
    part_two=part_two,
)
