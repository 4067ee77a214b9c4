"""Lists of named entries with a dot rating and free text, such as loresheets."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from vtmsheet.dots import DotTrack


def _to_int(value: Any) -> int:
    """Read a stored number the lenient way: anything unreadable is 0."""
    if not isinstance(value, str):
        return 0
    try:
        return int(value.strip())
    except ValueError:
        return 0


@dataclass
class Entry:
    """One named entry: its rating and its description."""

    name: str = ""
    track: DotTrack = field(default_factory=DotTrack)
    content: str = ""

    @property
    def dots(self) -> int:
        return self.track.value

    def clear(self) -> None:
        """Empty the name, the rating and the description."""
        self.name = ""
        self.track.clear()
        self.content = ""


class EntryList:
    """A growable list of entries that always holds at least one."""

    def __init__(self) -> None:
        self.entries: list[Entry] = [Entry()]

    def __len__(self) -> int:
        return len(self.entries)

    def __getitem__(self, index: int) -> Entry:
        return self.entries[index]

    def __iter__(self):
        return iter(self.entries)

    def add(self) -> Entry:
        """Append an empty entry and return it."""
        entry = Entry()
        self.entries.append(entry)
        return entry

    def remove_last(self) -> None:
        """Drop the last entry, unless it is the only one."""
        if len(self.entries) > 1:
            self.entries.pop()

    def to_json(self) -> dict[str, dict[str, str]]:
        """Entries keyed by name; repeated names get a running number appended."""
        data: dict[str, dict[str, str]] = {}
        counter = 1
        for entry in self.entries:
            details = {"dots": str(entry.dots), "content": entry.content}
            if entry.name in data:
                data[entry.name + str(counter)] = details
                counter += 1
            else:
                data[entry.name] = details
        return data

    def from_json(self, data: dict[str, Any]) -> None:
        """Fill entries from stored data, in key order.

        Meant for a cleared list: one entry is added for each stored entry
        beyond the first, and ratings are applied by clicking dots.
        """
        for _ in range(len(data) - 1):
            self.add()
        for entry, key in zip(self.entries, sorted(data)):
            entry.name = key
            details = data[key] if isinstance(data[key], dict) else {}
            dots = details.get("dots")
            if isinstance(dots, str):
                level = _to_int(dots)
                if level > 0:
                    entry.track.click(level - 1)
            content = details.get("content")
            if isinstance(content, str):
                entry.content = content

    def clear(self) -> None:
        """Empty every entry and drop all but the first."""
        for entry in self.entries:
            entry.clear()
        while len(self.entries) > 1:
            self.remove_last()