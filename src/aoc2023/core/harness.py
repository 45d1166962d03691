"""Execution harness.

Runs one day against one input file::

    IDLE -> INPUT_LOADED -> VARIANT1_RUN -> VARIANT2_RUN -> REPORTED -> DONE
      \\
       `-> ERROR   (input could not be loaded)

The input is loaded once and shared read-only by both variants.  A
variant that raises :class:`~aoc2023.core.contract.SolveError` is recorded
as failed and does not stop the other variant from running.  Any other
exception is a bug in the variant and propagates.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from pathlib import Path
from typing import Callable

from aoc2023.core.contract import AlgorithmResult, DayEntry, SolveError, Variant
from aoc2023.core.puzzle_input import LoadError, PuzzleInput, load_input
from aoc2023.core.registry import DayRegistry, get_registry

logger = logging.getLogger(__name__)


class HarnessState(str, Enum):
    IDLE = "idle"
    INPUT_LOADED = "input_loaded"
    VARIANT1_RUN = "variant1_run"
    VARIANT2_RUN = "variant2_run"
    REPORTED = "reported"
    DONE = "done"
    ERROR = "error"


class ExitCode(IntEnum):
    """Process exit statuses.  Values are part of the CLI contract."""

    SUCCESS = 0
    PARTIAL_FAILURE = 1
    # 2 is Click's usage-error status
    TOTAL_FAILURE = 3
    INPUT_LOAD_FAILURE = 4
    UNKNOWN_DAY = 5


class RunStatus(str, Enum):
    SUCCESS = "success"
    PARTIAL_FAILURE = "partial_failure"
    TOTAL_FAILURE = "total_failure"
    INPUT_LOAD_FAILURE = "input_load_failure"

    @property
    def exit_code(self) -> ExitCode:
        return ExitCode[self.name]


@dataclass(frozen=True)
class HarnessConfig:
    """Knobs the harness is constructed with."""

    verbose: bool = False
    """Log a diagnostic line before and after every step."""


@dataclass
class RunReport:
    """Everything one harness run produced."""

    day: str
    input_path: Path
    transitions: list[HarnessState] = field(default_factory=lambda: [HarnessState.IDLE])
    results: list[AlgorithmResult] = field(default_factory=list)
    load_error: LoadError | None = None
    status: RunStatus | None = None

    @property
    def state(self) -> HarnessState:
        return self.transitions[-1]

    @property
    def exit_code(self) -> ExitCode:
        if self.status is None:
            raise RuntimeError(f"Run for {self.day} has not finished (state={self.state.value})")
        return self.status.exit_code

    def _enter(self, state: HarnessState) -> None:
        self.transitions.append(state)


Reporter = Callable[[RunReport], None]


def _aggregate(results: list[AlgorithmResult]) -> RunStatus:
    failed = sum(1 for r in results if not r.ok)
    if failed == 0:
        return RunStatus.SUCCESS
    if failed == len(results):
        return RunStatus.TOTAL_FAILURE
    return RunStatus.PARTIAL_FAILURE


class Harness:
    """Loads input and runs both variants of a day.

    Parameters
    ----------
    config:
        Verbosity and other run options.  The harness never reads the
        environment itself.
    registry:
        Where :meth:`resolve` looks days up.  Defaults to the shipped
        registry.
    reporter:
        Called once with the finished report when both variants have run
        (the CLI passes the terminal UI here).
    """

    def __init__(
        self,
        config: HarnessConfig | None = None,
        registry: DayRegistry | None = None,
        reporter: Reporter | None = None,
    ) -> None:
        self.config = config or HarnessConfig()
        self.registry = registry if registry is not None else get_registry()
        self.reporter = reporter

    def _diag(self, msg: str, *args: object) -> None:
        if self.config.verbose:
            logger.debug(msg, *args)

    def resolve(self, name: str) -> DayEntry:
        """Look up *name* in the registry.

        Raises
        ------
        UnknownDayError
            If the day is not registered.
        """
        self._diag("Looking up day %s", name)
        t0 = time.perf_counter()
        entry = self.registry.get(name)
        self._diag(
            "Resolved day %s (%s) in %.3f ms",
            entry.name, entry.description, (time.perf_counter() - t0) * 1000,
        )
        return entry

    def _run_variant(self, entry: DayEntry, part: int, variant: Variant, puzzle: PuzzleInput) -> AlgorithmResult:
        self._diag("Running %s part %d", entry.name, part)
        t0 = time.perf_counter()
        try:
            value = variant(puzzle)
        except SolveError as exc:
            elapsed = (time.perf_counter() - t0) * 1000
            logger.error("%s part %d failed after %.3f ms: %s", entry.name, part, elapsed, exc)
            return AlgorithmResult(part=part, error=exc, duration_ms=elapsed)
        elapsed = (time.perf_counter() - t0) * 1000
        self._diag("Finished %s part %d in %.3f ms", entry.name, part, elapsed)
        return AlgorithmResult(part=part, value=value, duration_ms=elapsed)

    def run(self, entry: DayEntry, path: Path) -> RunReport:
        """Run both variants of *entry* against the file at *path*."""
        report = RunReport(day=entry.name, input_path=Path(path))

        # IDLE -> INPUT_LOADED | ERROR
        self._diag("Loading input %s", report.input_path)
        t0 = time.perf_counter()
        try:
            puzzle = load_input(report.input_path)
        except LoadError as exc:
            elapsed = (time.perf_counter() - t0) * 1000
            self._diag("Loading %s failed after %.3f ms", report.input_path, elapsed)
            logger.error("%s: %s", entry.name, exc)
            report.load_error = exc
            report.status = RunStatus.INPUT_LOAD_FAILURE
            report._enter(HarnessState.ERROR)
            return report
        report._enter(HarnessState.INPUT_LOADED)
        self._diag(
            "Loaded %d characters from %s in %.3f ms",
            len(puzzle.text), report.input_path, (time.perf_counter() - t0) * 1000,
        )

        # INPUT_LOADED -> VARIANT1_RUN -> VARIANT2_RUN
        for part, state, variant in (
            (1, HarnessState.VARIANT1_RUN, entry.part_one),
            (2, HarnessState.VARIANT2_RUN, entry.part_two),
        ):
            report.results.append(self._run_variant(entry, part, variant, puzzle))
            report._enter(state)

        # VARIANT2_RUN -> REPORTED
        report.status = _aggregate(report.results)
        for result in report.results:
            self._diag(
                "%s part %d: %s (%.3f ms)",
                entry.name, result.part, result.display(), result.duration_ms,
            )
        if self.reporter is not None:
            self.reporter(report)
        report._enter(HarnessState.REPORTED)

        # REPORTED -> DONE
        report._enter(HarnessState.DONE)
        self._diag("%s finished with status %s", entry.name, report.status.value)
        return report
