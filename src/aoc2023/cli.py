"""aoc2023 CLI: Typer-based entry point.

Usage
-----
``aoc2023 DAY [INPUT]``
    Run both parts of DAY against INPUT (default ``$AOC_INPUT_DIR/DAY.txt``).
``aoc2023 help``
    List registered days.

Exit codes
----------
0  both parts succeeded
1  one part failed
2  command-line usage error
3  both parts failed
4  the input file could not be loaded
5  unknown day

Set ``AOC_VERBOSE=1`` (or pass ``-v``) for step-by-step diagnostics.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import typer

from aoc2023 import __version__
from aoc2023.config.settings import get_settings
from aoc2023.core.harness import ExitCode, Harness, HarnessConfig
from aoc2023.core.registry import UnknownDayError, get_registry
from aoc2023.interfaces.terminal_ui import TerminalUI

logger = logging.getLogger(__name__)

HELP_DAY = "help"

app = typer.Typer(
    name="aoc2023",
    help="Run Advent of Code 2023 puzzle solutions against an input file.",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s  %(name)-30s  %(levelname)-7s  %(message)s",
    )


@dataclass(frozen=True)
class Invocation:
    """A fully resolved command line."""

    day: str
    input_path: Path
    verbose: bool


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"aoc2023 {__version__}")
        raise typer.Exit()


@app.command(context_settings={"help_option_names": ["-h", "--help"]})
def run(
    day: str = typer.Argument(..., help="Day identifier (e.g. day1), or 'help' to list days."),
    input_path: Optional[Path] = typer.Argument(
        None,
        metavar="[INPUT]",
        help="Puzzle input file. Defaults to <AOC_INPUT_DIR>/<day>.txt.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Run both parts of DAY and print their answers."""
    settings = get_settings()
    verbose = verbose or settings.verbose
    _setup_logging(verbose)

    ui = TerminalUI()
    registry = get_registry()

    if day == HELP_DAY:
        ui.print_days(registry)
        raise typer.Exit(int(ExitCode.SUCCESS))

    harness = Harness(HarnessConfig(verbose=verbose), registry=registry, reporter=ui.print_report)
    try:
        entry = harness.resolve(day)
    except UnknownDayError:
        ui.print_unknown_day(day, registry)
        raise typer.Exit(int(ExitCode.UNKNOWN_DAY))

    invocation = Invocation(
        day=entry.name,
        input_path=input_path if input_path is not None else settings.default_input_path(entry.name),
        verbose=verbose,
    )
    logger.debug("Invocation: %s", invocation)

    report = harness.run(entry, invocation.input_path)
    raise typer.Exit(int(report.exit_code))


def main() -> int:
    """Console-script entry point."""
    app()
    return 0
