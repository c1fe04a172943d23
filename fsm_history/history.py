"""History - ordered record of visited states with a single active marker."""
from __future__ import annotations

import dataclasses
from typing import Iterator

from fsm_history.types import HistoryEntry


class History:
    """Append-only sequence of HistoryEntry.

    Names may repeat. At most one entry is active at a time; only the
    ``active`` flags are ever rewritten, and ``clear`` drops everything.
    """

    def __init__(self) -> None:
        self._entries: list[HistoryEntry] = []

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[HistoryEntry]:
        return iter(self.entries())

    def __getitem__(self, index: int) -> HistoryEntry:
        return dataclasses.replace(self._entries[index])

    def active_index(self) -> int | None:
        """Index of the active entry, or None if no entry is active."""
        for i, entry in enumerate(self._entries):
            if entry.active:
                return i
        return None

    def deactivate(self) -> None:
        for entry in self._entries:
            entry.active = False

    def append(self, name: str) -> int:
        """Append an active entry for ``name``, deactivating the rest. Returns its index."""
        self.deactivate()
        self._entries.append(HistoryEntry(name=name, active=True))
        return len(self._entries) - 1

    def activate(self, index: int) -> str:
        """Make the entry at ``index`` the only active one and return its state name."""
        entry = self._entries[index]
        self.deactivate()
        entry.active = True
        return entry.name

    def clear(self) -> None:
        self._entries.clear()

    def entries(self) -> tuple[HistoryEntry, ...]:
        """Return copies of all entries, oldest first."""
        return tuple(dataclasses.replace(e) for e in self._entries)
