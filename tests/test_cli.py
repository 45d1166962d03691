"""Tests for the Typer command-line front end."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
from typer.testing import CliRunner

from aoc2023 import __version__
from aoc2023.cli import app
from aoc2023.core.harness import ExitCode

runner = CliRunner()


class TestTopLevel:
    def test_version(self) -> None:
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_short_version(self) -> None:
        result = runner.invoke(app, ["-V"])
        assert result.exit_code == 0
        assert __version__ in result.output

    @pytest.mark.parametrize("flag", ["-h", "--help"])
    def test_help_flags(self, flag: str) -> None:
        result = runner.invoke(app, [flag])
        assert result.exit_code == 0
        assert "DAY" in result.output

    def test_missing_day_is_usage_error(self) -> None:
        result = runner.invoke(app, [])
        assert result.exit_code == 2


class TestHelpCommand:
    def test_lists_registered_days(self) -> None:
        result = runner.invoke(app, ["help"])
        assert result.exit_code == 0
        for name in ("day1", "day2", "day3", "day4"):
            assert name in result.output
        assert "Trebuchet" in result.output


class TestRunDay:
    def test_day1_toy_input(self, write_input) -> None:
        path = write_input("1abc2\npqr3str8vwx\n")
        result = runner.invoke(app, ["day1", str(path)])

        assert result.exit_code == ExitCode.SUCCESS
        assert "Part 1: 50" in result.output
        assert "Part 2: 50" in result.output
        assert result.output.index("Part 1") < result.output.index("Part 2")

    def test_unknown_day(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def _must_not_run(*args: object, **kwargs: object) -> None:
            raise AssertionError("harness must not run for an unknown day")

        monkeypatch.setattr("aoc2023.core.harness.Harness.run", _must_not_run)
        monkeypatch.setattr("aoc2023.core.harness.load_input", _must_not_run)

        result = runner.invoke(app, ["day99"])
        assert result.exit_code == ExitCode.UNKNOWN_DAY
        assert "day99" in result.output
        for name in ("day1", "day2", "day3", "day4"):
            assert name in result.output

    def test_missing_input(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["day2", str(tmp_path / "nope.txt")])
        assert result.exit_code == ExitCode.INPUT_LOAD_FAILURE
        assert "Part 1" not in result.output

    def test_partial_failure(self, write_input) -> None:
        result = runner.invoke(app, ["day1", str(write_input("onetwo\n"))])
        assert result.exit_code == ExitCode.PARTIAL_FAILURE
        assert "FAILED" in result.output
        assert "Part 2: 12" in result.output

    def test_total_failure(self, write_input) -> None:
        result = runner.invoke(app, ["day1", str(write_input("abc\n"))])
        assert result.exit_code == ExitCode.TOTAL_FAILURE
        assert result.output.count("FAILED") == 2

    def test_empty_input_is_solve_failure(self, write_input) -> None:
        result = runner.invoke(app, ["day4", str(write_input(""))])
        assert result.exit_code == ExitCode.TOTAL_FAILURE
        assert "input is empty" in result.output

    def test_default_input_location(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "day1.txt").write_text("treb7uchet\n", encoding="utf-8")
        monkeypatch.setenv("AOC_INPUT_DIR", str(tmp_path))

        result = runner.invoke(app, ["day1"])
        assert result.exit_code == ExitCode.SUCCESS
        assert "Part 1: 77" in result.output

    def test_default_input_missing(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("AOC_INPUT_DIR", str(tmp_path / "empty"))
        result = runner.invoke(app, ["day3"])
        assert result.exit_code == ExitCode.INPUT_LOAD_FAILURE


class TestVerbosity:
    def test_env_enables_diagnostics(
        self, write_input, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.set_level(logging.DEBUG, logger="aoc2023.core.harness")
        monkeypatch.setenv("AOC_VERBOSE", "1")

        result = runner.invoke(app, ["day1", str(write_input("1abc2\n"))])
        assert result.exit_code == 0
        assert "Looking up day day1" in caplog.text
        assert "Finished day1 part 2" in caplog.text

    def test_flag_enables_diagnostics(self, write_input, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="aoc2023.core.harness")
        result = runner.invoke(app, ["-v", "day1", str(write_input("1abc2\n"))])
        assert result.exit_code == 0
        assert "Running day1 part 1" in caplog.text

    def test_quiet_by_default(self, write_input, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="aoc2023.core.harness")
        result = runner.invoke(app, ["day1", str(write_input("1abc2\n"))])
        assert result.exit_code == 0
        assert "Looking up day" not in caplog.text
