"""Entry point for ``python -m aoc2023``."""

from __future__ import annotations


def main() -> int:
    """Bootstrap and run the aoc2023 CLI."""
    from aoc2023.cli import main as cli_main

    return cli_main()


if __name__ == "__main__":
    raise SystemExit(main())
