"""Shared test fixtures for aoc2023.

Provides input-file helpers, stub days with controllable outcomes and a
settings cache reset so individual test modules stay focused.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterator

import pytest

from aoc2023.config.settings import get_settings
from aoc2023.core.contract import DayEntry, SolveError
from aoc2023.core.puzzle_input import PuzzleInput
from aoc2023.core.registry import DayRegistry

# ---------------------------------------------------------------------------
# Environment
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Settings are re-read from a clean environment for every test."""
    monkeypatch.delenv("AOC_VERBOSE", raising=False)
    monkeypatch.delenv("AOC_INPUT_DIR", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# ---------------------------------------------------------------------------
# Input files
# ---------------------------------------------------------------------------


@pytest.fixture()
def write_input(tmp_path: Path) -> Callable[[str], Path]:
    """Write *text* to a fresh file under ``tmp_path`` and return its path."""
    counter = {"n": 0}

    def _write(text: str, name: str | None = None) -> Path:
        counter["n"] += 1
        path = tmp_path / (name or f"input_{counter['n']}.txt")
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture()
def make_puzzle() -> Callable[[str], PuzzleInput]:
    """Build in-memory PuzzleInputs for day-level tests."""

    def _make(text: str) -> PuzzleInput:
        return PuzzleInput(path=Path("<memory>"), text=text)

    return _make


# ---------------------------------------------------------------------------
# Stub days
# ---------------------------------------------------------------------------


def _count_lines(p: PuzzleInput) -> int:
    return len(p.lines())


def _count_chars(p: PuzzleInput) -> int:
    return len(p.text)


def _always_fails(p: PuzzleInput) -> int:
    raise SolveError("no answer for this input")


OK_DAY = DayEntry("ok", "both parts succeed", _count_lines, _count_chars)
FIRST_FAILS_DAY = DayEntry("first_fails", "part one fails", _always_fails, _count_chars)
SECOND_FAILS_DAY = DayEntry("second_fails", "part two fails", _count_lines, _always_fails)
BOTH_FAIL_DAY = DayEntry("both_fail", "both parts fail", _always_fails, _always_fails)


@pytest.fixture()
def ok_day() -> DayEntry:
    return OK_DAY


@pytest.fixture()
def first_fails_day() -> DayEntry:
    return FIRST_FAILS_DAY


@pytest.fixture()
def second_fails_day() -> DayEntry:
    return SECOND_FAILS_DAY


@pytest.fixture()
def both_fail_day() -> DayEntry:
    return BOTH_FAIL_DAY


@pytest.fixture()
def stub_registry() -> DayRegistry:
    return DayRegistry([OK_DAY, FIRST_FAILS_DAY, SECOND_FAILS_DAY, BOTH_FAIL_DAY])
