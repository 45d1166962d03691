"""Day 2: Cube Conundrum.

Each line records a game of drawing coloured cubes from a bag::

    Game 1: 3 blue, 4 red; 1 red, 2 green, 6 blue; 2 green

Part one sums the ids of games that were possible with 12 red, 13 green and
14 blue cubes.  Part two sums the *power* of every game: the product of the
smallest red, green and blue counts that make all its draws possible.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from math import prod

from aoc2023.core.contract import DayEntry, SolveError, non_empty_lines
from aoc2023.core.puzzle_input import PuzzleInput

logger = logging.getLogger(__name__)

COLOURS = ("red", "green", "blue")
MAX_CUBES_PER_DRAW = 255

BAG_LIMITS = {"red": 12, "green": 13, "blue": 14}

# group 1: game id, group 2: the draws (format checked loosely here, strictly below)
_GAME_RE = re.compile(r"^Game ([0-9]+): ((?:[0-9]+ (?:red|green|blue)(?:[,;] )?)+)$")


@dataclass(frozen=True)
class Draw:
    """Subset of cubes revealed from the bag."""

    red: int = 0
    green: int = 0
    blue: int = 0

    @classmethod
    def parse(cls, text: str) -> Draw:
        """Parse ``3 blue, 4 red``.

        Every count must be 1..255 and every colour may appear at most once.
        """
        counts: dict[str, int] = {}
        for single in text.split(", "):
            num_str, sep, colour = single.partition(" ")
            if not sep:
                raise ValueError(f"no space between number and colour in `{single}`")
            if not (num_str.isascii() and num_str.isdigit()):
                raise ValueError(f"number `{num_str}` in `{single}` is not valid")
            num = int(num_str)
            if num == 0:
                raise ValueError(f"`{single}` draws zero cubes")
            if num > MAX_CUBES_PER_DRAW:
                raise ValueError(f"`{single}` draws more than {MAX_CUBES_PER_DRAW} cubes")
            if colour not in COLOURS:
                raise ValueError(f"colour `{colour}` in `{single}` is not valid")
            if colour in counts:
                raise ValueError(f"{colour} drawn more than once in `{text}`")
            counts[colour] = num
        if not counts:
            raise ValueError("no cubes were drawn")
        return cls(**counts)

    def fits(self, red: int, green: int, blue: int) -> bool:
        return self.red <= red and self.green <= green and self.blue <= blue


@dataclass(frozen=True)
class Game:
    """A single game: an id and the draws that were made."""

    id: int
    draws: tuple[Draw, ...]

    @classmethod
    def parse(cls, line: str) -> Game:
        match = _GAME_RE.match(line)
        if match is None:
            raise ValueError(f"game `{line}` is of invalid format")
        draws = tuple(Draw.parse(part) for part in match.group(2).split("; "))
        return cls(id=int(match.group(1)), draws=draws)

    def was_possible(self, red: int, green: int, blue: int) -> bool:
        """Whether every draw fits in a bag with the given cube counts."""
        return all(draw.fits(red, green, blue) for draw in self.draws)

    def minimum_bag(self) -> Draw:
        """Smallest bag contents that make every draw possible."""
        return Draw(
            red=max(d.red for d in self.draws),
            green=max(d.green for d in self.draws),
            blue=max(d.blue for d in self.draws),
        )

    def power(self) -> int:
        bag = self.minimum_bag()
        return prod((bag.red, bag.green, bag.blue))


def parse_games(puzzle: PuzzleInput) -> list[Game]:
    """Parse every non-empty line into a :class:`Game`."""
    games: list[Game] = []
    for lineno, line in non_empty_lines(puzzle):
        try:
            game = Game.parse(line)
        except ValueError as exc:
            raise SolveError(str(exc), line=lineno) from exc
        logger.debug("Line %d parsed as %r", lineno, game)
        games.append(game)
    return games


def part_one(puzzle: PuzzleInput) -> int:
    total = 0
    for game in parse_games(puzzle):
        possible = game.was_possible(**BAG_LIMITS)
        logger.debug("Game %d: %s", game.id, "possible" if possible else "impossible")
        if possible:
            total += game.id
    return total


def part_two(puzzle: PuzzleInput) -> int:
    return sum(game.power() for game in parse_games(puzzle))


ENTRY = DayEntry(
    name="day2",
    description="Cube Conundrum: possible games and minimum bag power",
    part_one=part_one,
    part_two=part_two,
)
