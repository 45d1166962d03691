"""Rich terminal rendering for the aoc2023 CLI.

Summaries go to stdout, diagnostics to stderr.  Text that comes from
puzzle input or error messages is never interpreted as Rich markup.
"""

from __future__ import annotations

from rich.console import Console
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

from aoc2023.core.harness import RunReport
from aoc2023.core.registry import DayRegistry

AOC_THEME = Theme(
    {
        "aoc.day": "bold cyan",
        "aoc.dim": "dim white",
        "aoc.success": "bold green",
        "aoc.error": "bold red",
        "aoc.value": "bold white",
    }
)


class TerminalUI:
    """Encapsulates all Rich console output of the runner."""

    def __init__(self, console: Console | None = None, err_console: Console | None = None) -> None:
        self.console = console or Console(theme=AOC_THEME, highlight=False)
        self.err_console = err_console or Console(theme=AOC_THEME, highlight=False, stderr=True)

    # ------------------------------------------------------------------
    # Listings
    # ------------------------------------------------------------------

    def _days_table(self, registry: DayRegistry) -> Table:
        table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
        table.add_column("Day", style="aoc.day", no_wrap=True)
        table.add_column("Description")
        for entry in registry:
            table.add_row(entry.name, Text(entry.description))
        return table

    def print_days(self, registry: DayRegistry) -> None:
        """List every registered day with its description."""
        self.console.print(self._days_table(registry))

    def print_unknown_day(self, name: str, registry: DayRegistry) -> None:
        line = Text("error: ", style="aoc.error")
        line.append(f"unknown day {name!r}. Registered days:")
        self.err_console.print(line)
        self.err_console.print(self._days_table(registry))

    # ------------------------------------------------------------------
    # Results
    # ------------------------------------------------------------------

    def print_report(self, report: RunReport) -> None:
        """Print one line per variant, part one first."""
        self.console.print(Text(f"{report.day} ({report.input_path})", style="aoc.day"))
        for result in report.results:
            line = Text(f"  Part {result.part}: ")
            if result.ok:
                line.append(result.display(), style="aoc.value")
            else:
                line.append(f"FAILED: {result.display()}", style="aoc.error")
            line.append(f"  ({result.duration_ms:.3f} ms)", style="aoc.dim")
            self.console.print(line)
