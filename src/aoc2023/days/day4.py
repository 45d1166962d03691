"""Day 4: Scratchcards.

Each card lists winning numbers and the numbers we have::

    Card 1: 41 48 83 86 17 | 83 86  6 31 17  9 48 53

Part one scores ``2 ** (matches - 1)`` points per card.  In part two every
card instead wins one copy of each of the next ``matches`` cards, per copy
held, and the answer is the total number of cards.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from aoc2023.core.contract import DayEntry, SolveError, non_empty_lines
from aoc2023.core.puzzle_input import PuzzleInput

logger = logging.getLogger(__name__)

# group 1: winning numbers, group 2: our numbers
_CARD_RE = re.compile(r"^Card +[0-9]+: +([0-9 ]+?) +\| +([0-9 ]+)$")


def parse_numbers(text: str) -> frozenset[int]:
    """Parse a run of numbers separated by one or more spaces."""
    numbers = set()
    for token in text.split():
        if not (token.isascii() and token.isdigit()):
            raise ValueError(f"invalid number `{token}`")
        numbers.add(int(token))
    return frozenset(numbers)


@dataclass(frozen=True)
class Scratchcard:
    winning: frozenset[int]
    ours: frozenset[int]

    @classmethod
    def parse(cls, line: str) -> Scratchcard:
        match = _CARD_RE.match(line)
        if match is None:
            raise ValueError(f"invalid scratchcard format: `{line}`")
        return cls(winning=parse_numbers(match.group(1)), ours=parse_numbers(match.group(2)))

    @property
    def matches(self) -> int:
        return len(self.winning & self.ours)

    @property
    def points(self) -> int:
        if self.matches == 0:
            return 0
        return 2 ** (self.matches - 1)


def parse_cards(puzzle: PuzzleInput) -> list[Scratchcard]:
    cards: list[Scratchcard] = []
    for lineno, line in non_empty_lines(puzzle):
        try:
            cards.append(Scratchcard.parse(line))
        except ValueError as exc:
            raise SolveError(str(exc), line=lineno) from exc
    return cards


def count_won_cards(cards: list[Scratchcard]) -> int:
    """Total cards held once every won copy has been processed."""
    copies = [1] * len(cards)
    for idx, card in enumerate(cards):
        # wins never run past the end of the table
        for follower in range(idx + 1, min(idx + 1 + card.matches, len(cards))):
            copies[follower] += copies[idx]
    logger.debug("Copies per card: %s", copies)
    return sum(copies)


def part_one(puzzle: PuzzleInput) -> int:
    return sum(card.points for card in parse_cards(puzzle))


def part_two(puzzle: PuzzleInput) -> int:
    return count_won_cards(parse_cards(puzzle))


ENTRY = DayEntry(
    name="day4",
    description="Scratchcards: score winning numbers and count won copies",
    part_one=part_one,
    part_two=part_two,
)
