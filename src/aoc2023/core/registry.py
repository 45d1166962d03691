"""Day Registry: the static table of puzzle days.

The table is built once from :data:`aoc2023.days.ALL_DAYS` and exposed
read-only.  There is no registration API; adding a day means adding it to
that tuple.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from types import MappingProxyType
from typing import Iterable, Iterator

from aoc2023.core.contract import DayEntry

logger = logging.getLogger(__name__)


class UnknownDayError(LookupError):
    """The requested day identifier is not registered."""

    def __init__(self, name: str, available: Iterable[str]) -> None:
        self.name = name
        self.available = tuple(available)
        super().__init__(
            f"Unknown day: {name!r}. Available: {', '.join(self.available)}"
        )


class DayRegistry:
    """Immutable mapping of day identifier to :class:`DayEntry`."""

    def __init__(self, entries: Iterable[DayEntry]) -> None:
        table: dict[str, DayEntry] = {}
        for entry in entries:
            if entry.name in table:
                raise ValueError(f"Day {entry.name!r} registered twice")
            table[entry.name] = entry
        self._days = MappingProxyType(table)
        logger.debug("Day registry built with %d days", len(table))

    def get(self, name: str) -> DayEntry:
        """Look up a day by identifier.

        Raises
        ------
        UnknownDayError
            If *name* is not registered.
        """
        try:
            return self._days[name]
        except KeyError:
            raise UnknownDayError(name, self.names()) from None

    def names(self) -> list[str]:
        """Registered identifiers, in table order."""
        return list(self._days)

    def entries(self) -> list[DayEntry]:
        return list(self._days.values())

    def __contains__(self, name: object) -> bool:
        return name in self._days

    def __iter__(self) -> Iterator[DayEntry]:
        return iter(self._days.values())

    def __len__(self) -> int:
        return len(self._days)


@lru_cache(maxsize=1)
def get_registry() -> DayRegistry:
    """Return the process-wide registry of shipped days."""
    from aoc2023.days import ALL_DAYS

    return DayRegistry(ALL_DAYS)
