"""Dot rating tracks as used throughout the character sheet."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

DEFAULT_SIZE = 5


def count_dots(states: Iterable[bool]) -> int:
    """Return the number of filled dots before the first empty one."""
    total = 0
    for filled in states:
        if not filled:
            break
        total += 1
    return total


@dataclass
class DotTrack:
    """A row of dots that always fills from the left.

    Clicking an empty dot fills it and every dot before it; clicking a
    filled dot empties it and every dot after it.
    """

    size: int = DEFAULT_SIZE
    states: list[bool] = field(init=False)

    def __post_init__(self) -> None:
        if self.size < 1:
            raise ValueError("a dot track needs at least one dot")
        self.states = [False] * self.size

    @property
    def value(self) -> int:
        """The rating shown by the track."""
        return count_dots(self.states)

    def click(self, index: int) -> None:
        """Toggle the dot at ``index`` and keep the track contiguous."""
        if not 0 <= index < self.size:
            raise IndexError(f"dot {index} is outside a track of {self.size}")
        self.states[index] = not self.states[index]
        if self.states[index]:
            self.states[:index] = [True] * index
        else:
            self.states[index:] = [False] * (self.size - index)

    def clear(self) -> None:
        """Empty every dot."""
        self.states = [False] * self.size