"""Merits and flaws of a character."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from vtmsheet.loresheets import Entry, EntryList

MERITS_KEY = "Merits"
FLAWS_KEY = "Flaws"


def _dump(entries: Iterable[Entry], counter: int) -> tuple[dict[str, dict[str, str]], int]:
    """Entries keyed by name, numbering repeats from ``counter``.

    Returns the mapping and the counter to continue from.
    """
    data: dict[str, dict[str, str]] = {}
    for entry in entries:
        details = {"dots": str(entry.dots), "content": entry.content}
        if entry.name in data:
            data[entry.name + str(counter)] = details
            counter += 1
        else:
            data[entry.name] = details
    return data, counter


class MeritsAndFlaws:
    """Two lists of rated entries: the merits and the flaws."""

    def __init__(self) -> None:
        self.merits = EntryList()
        self.flaws = EntryList()

    def to_json(self) -> dict[str, dict[str, dict[str, str]]]:
        """Both lists as stored in a save file.

        Repeated names are numbered with one running counter shared by
        merits and flaws.
        """
        merits, counter = _dump(self.merits, 1)
        flaws, _ = _dump(self.flaws, counter)
        return {MERITS_KEY: merits, FLAWS_KEY: flaws}

    def from_json(self, data: dict[str, Any]) -> None:
        """Apply stored merits and flaws; meant for cleared lists."""
        merits = data.get(MERITS_KEY)
        if isinstance(merits, dict):
            self.merits.from_json(merits)
        flaws = data.get(FLAWS_KEY)
        if isinstance(flaws, dict):
            self.flaws.from_json(flaws)

    def clear(self) -> None:
        """Empty both lists down to a single blank entry each."""
        self.merits.clear()
        self.flaws.clear()