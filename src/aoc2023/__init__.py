"""aoc2023: Advent of Code 2023 puzzle runner.

A small command-line harness that looks up a puzzle day in a static
registry, feeds it an input file and reports both parts' answers with
their timings.
"""

from __future__ import annotations

__version__ = "0.1.0"

__all__ = ["__version__"]
