"""The nine character attributes and their derived pools."""

from __future__ import annotations

from typing import Any

from vtmsheet.dots import DotTrack

ATTRIBUTE_NAMES = (
    "Strength",
    "Dexterity",
    "Stamina",
    "Charisma",
    "Manipulation",
    "Composure",
    "Intelligence",
    "Wits",
    "Resolve",
)

HEALTH_BONUS = 3


def _to_int(value: Any) -> int:
    """Read a stored number the lenient way: anything unreadable is 0."""
    if not isinstance(value, str):
        return 0
    try:
        return int(value.strip())
    except ValueError:
        return 0


class Attributes:
    """Dot ratings for every attribute of a character."""

    def __init__(self) -> None:
        self.tracks: dict[str, DotTrack] = {name: DotTrack() for name in ATTRIBUTE_NAMES}

    def __getitem__(self, name: str) -> DotTrack:
        return self.tracks[name]

    def names(self) -> list[str]:
        """Attribute names in sheet order."""
        return list(self.tracks)

    def health_base(self) -> int:
        """Health boxes granted by attributes: Stamina plus three."""
        return self.tracks["Stamina"].value + HEALTH_BONUS

    def willpower_base(self) -> int:
        """Willpower boxes granted by attributes: Composure plus Resolve."""
        return self.tracks["Composure"].value + self.tracks["Resolve"].value

    def to_json(self) -> dict[str, str]:
        """Ratings keyed by attribute name, stored as strings."""
        return {name: str(track.value) for name, track in self.tracks.items()}

    def from_json(self, data: dict[str, Any]) -> None:
        """Apply stored ratings by clicking the matching dot of each track.

        Meant to be applied to a cleared sheet, as clicks toggle dots.
        """
        for name, track in self.tracks.items():
            if name not in data:
                continue
            index = _to_int(data[name]) - 1
            if index >= 0:
                track.click(index)

    def clear(self) -> None:
        """Empty every attribute."""
        for track in self.tracks.values():
            track.clear()