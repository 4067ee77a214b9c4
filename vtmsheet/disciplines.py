"""Disciplines with their ratings and the powers learned in them."""

from __future__ import annotations

from collections.abc import Iterator
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
class Discipline:
    """One discipline: a name, a rating and one power per dot."""

    name: str = ""
    track: DotTrack = field(default_factory=DotTrack)
    powers: list[str] = field(default_factory=list)

    @property
    def dots(self) -> int:
        return self.track.value

    def set_dots(self, dots: int) -> None:
        """Set the rating and grow or shrink the power list to match."""
        if not 0 <= dots <= self.track.size:
            raise ValueError(f"a discipline rating must lie between 0 and {self.track.size}")
        self.track.clear()
        if dots > 0:
            self.track.click(dots - 1)
        self._fit_powers()

    def _fit_powers(self) -> None:
        wanted = self.dots
        if len(self.powers) > wanted:
            del self.powers[wanted:]
        else:
            self.powers.extend([""] * (wanted - len(self.powers)))

    def clear(self) -> None:
        """Empty the name, rating and powers."""
        self.name = ""
        self.track.clear()
        self.powers = []


class Disciplines:
    """A growable list of disciplines that always holds at least one."""

    def __init__(self) -> None:
        self.disciplines: list[Discipline] = [Discipline()]

    def __len__(self) -> int:
        return len(self.disciplines)

    def __getitem__(self, index: int) -> Discipline:
        return self.disciplines[index]

    def __iter__(self) -> Iterator[Discipline]:
        return iter(self.disciplines)

    def add(self) -> Discipline:
        """Append an empty discipline and return it."""
        discipline = Discipline()
        self.disciplines.append(discipline)
        return discipline

    def remove_last(self) -> Discipline | None:
        """Drop and return the last discipline, unless it is the only one."""
        if len(self.disciplines) > 1:
            return self.disciplines.pop()
        return None

    def to_json(self) -> dict[str, dict[str, Any]]:
        """Disciplines keyed by name; repeated names get a running number appended."""
        data: dict[str, dict[str, Any]] = {}
        counter = 1
        for discipline in self.disciplines:
            details = {"dots": str(discipline.dots), "powers": list(discipline.powers)}
            if discipline.name in data:
                data[discipline.name + str(counter)] = details
                counter += 1
            else:
                data[discipline.name] = details
        return data

    def from_json(self, data: dict[str, Any]) -> None:
        """Fill disciplines from stored data, in key order.

        Meant for a cleared list. Powers are only restored for disciplines
        with at least one dot; missing powers are left blank.
        """
        for _ in range(len(data) - 1):
            self.add()
        for discipline, key in zip(self.disciplines, sorted(data)):
            discipline.name = key
            details = data[key] if isinstance(data[key], dict) else {}
            dots = details.get("dots")
            if not isinstance(dots, str):
                continue
            level = _to_int(dots)
            if level <= 0:
                continue
            discipline.set_dots(level)
            powers = details.get("powers")
            if isinstance(powers, list):
                discipline.powers = [
                    powers[index] if index < len(powers) and isinstance(powers[index], str) else ""
                    for index in range(len(discipline.powers))
                ]

    def clear(self) -> None:
        """Empty every discipline and drop all but the first."""
        for discipline in self.disciplines:
            discipline.clear()
        del self.disciplines[1:]