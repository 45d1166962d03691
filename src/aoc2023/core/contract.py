"""The contract every puzzle day satisfies.

A day is a plain value holding two variants.  A variant is any callable
that takes the loaded :class:`~aoc2023.core.puzzle_input.PuzzleInput` and
returns something printable.  Variants report bad input by raising
:class:`SolveError`; the harness turns that into a failed
:class:`AlgorithmResult` and carries on with the sibling variant.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator, Protocol, Union

if TYPE_CHECKING:
    from aoc2023.core.puzzle_input import PuzzleInput

Displayable = Union[int, str]


class SolveError(Exception):
    """A variant could not produce an answer for the given input.

    Attributes
    ----------
    reason:
        Human-readable diagnostic.
    line:
        1-based input line the problem was found on, if any.
    """

    def __init__(self, reason: str, *, line: int | None = None) -> None:
        self.reason = reason
        self.line = line
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.line is not None:
            return f"line {self.line}: {self.reason}"
        return self.reason


class Variant(Protocol):
    """One of a day's two algorithms."""

    def __call__(self, puzzle: PuzzleInput) -> Displayable: ...


@dataclass(frozen=True)
class DayEntry:
    """A registered day: an identifier plus its two variants."""

    name: str
    description: str
    part_one: Variant
    part_two: Variant

    @property
    def variants(self) -> tuple[Variant, Variant]:
        return (self.part_one, self.part_two)


@dataclass(frozen=True)
class AlgorithmResult:
    """Outcome of running one variant."""

    part: int
    value: Displayable | None = None
    error: SolveError | None = None
    duration_ms: float = 0.0

    @property
    def ok(self) -> bool:
        return self.error is None

    def display(self) -> str:
        """The answer, or the failure reason."""
        if self.error is not None:
            return str(self.error)
        return str(self.value)


def non_empty_lines(puzzle: PuzzleInput) -> Iterator[tuple[int, str]]:
    """Yield ``(line_number, line)`` for every non-empty line of *puzzle*.

    Line numbers are 1-based and count skipped blank lines, so they match
    what an editor shows.

    Raises
    ------
    SolveError
        If the input contains no non-empty line at all.
    """
    if puzzle.is_blank:
        raise SolveError("input is empty")
    for idx, line in enumerate(puzzle.lines(), start=1):
        if line:
            yield idx, line
