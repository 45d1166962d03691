"""Puzzle days.

:data:`ALL_DAYS` is the static table the registry is built from.  Each
module exposes ``part_one``, ``part_two`` and an ``ENTRY`` tying them to
an identifier.
"""

from __future__ import annotations

from aoc2023.core.contract import DayEntry
from aoc2023.days import day1, day2, day3, day4

ALL_DAYS: tuple[DayEntry, ...] = (
    day1.ENTRY,
    day2.ENTRY,
    day3.ENTRY,
    day4.ENTRY,
)

__all__ = ["ALL_DAYS"]
