"""Input loading.

Reads a puzzle input file fully into memory and hands it out as an
immutable :class:`PuzzleInput`.  Failures are mapped onto three
:class:`LoadError` subclasses so the caller can tell a missing file from
an unreadable one or one that is not valid UTF-8.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

ENCODING = "utf-8"


def split_lines(text: str) -> list[str]:
    """Split on ``\n`` and ``\r\n`` only.

    Form feeds, vertical tabs and Unicode separators stay inside their line.
    A final line ending does not produce an empty trailing line.
    """
    pieces = text.split("\n")
    tail = pieces.pop()
    lines = [piece.removesuffix("\r") for piece in pieces]
    if tail:
        lines.append(tail)
    return lines


@dataclass(frozen=True)
class PuzzleInput:
    """Raw text of one input file."""

    path: Path
    text: str

    @property
    def is_blank(self) -> bool:
        return not self.text.strip()

    def lines(self) -> list[str]:
        """Text split on line boundaries, without line endings."""
        return split_lines(self.text)


class LoadError(Exception):
    """Base class for input loading failures."""

    kind: str = "load"

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"cannot load input {path}: {reason}")


class InputNotFoundError(LoadError):
    kind = "not_found"


class InputUnreadableError(LoadError):
    kind = "unreadable"


class InputEncodingError(LoadError):
    kind = "encoding"


def load_input(path: Path) -> PuzzleInput:
    """Read *path* in full and return it as a :class:`PuzzleInput`.

    Performs exactly one filesystem read; nothing is cached.

    Raises
    ------
    InputNotFoundError
        The path does not exist.
    InputUnreadableError
        The path is a directory, permission was denied, or any other OS
        error occurred while reading.
    InputEncodingError
        The content is not valid UTF-8.
    """
    path = Path(path)
    try:
        raw = path.read_bytes()
    except FileNotFoundError as exc:
        raise InputNotFoundError(path, "file not found") from exc
    except PermissionError as exc:
        raise InputUnreadableError(path, "permission denied") from exc
    except IsADirectoryError as exc:
        raise InputUnreadableError(path, "is a directory") from exc
    except OSError as exc:
        raise InputUnreadableError(path, exc.strerror or str(exc)) from exc

    try:
        text = raw.decode(ENCODING)
    except UnicodeDecodeError as exc:
        raise InputEncodingError(
            path, f"not valid {ENCODING} (byte {exc.start}: {exc.reason})"
        ) from exc

    logger.debug("Read %d bytes from %s", len(raw), path)
    return PuzzleInput(path=path, text=text)
