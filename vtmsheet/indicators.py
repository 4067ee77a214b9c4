"""Health, willpower, hunger and humanity trackers."""

from __future__ import annotations

from enum import Enum
from typing import Any

from vtmsheet.dots import DotTrack

HUMANITY_SIZE = 10

_HUMANITY_TEXTS = {
    10: (
        "You don't need Blush of Life.\nYou can have sex.\n"
        "You can keep watch at day like mortal.\nYou can eat normal food.\n"
        "Damage from sunlight are split by half."
    ),
    9: (
        "You don't need Blush of Life.\nYou can have sex.\n"
        "You can awaken 1 hour before the sunrise and keep watch 1h after sunset.\n"
        "You can eat raw meat and drink.\n"
    ),
    8: (
        "You roll 2 dices for Blush of Life.\nYou can have sex with Blush of Life.\n"
        "You can drink wine with Blush of Life.\nYou can awaken 1 hour before the sunrise."
    ),
    7: (
        "You can not have sex but you can fake it with Dexterity + Charisma.\n"
        "Unless you use Blush of Life foods and drinks makes you vomit."
    ),
    6: (
        "You can not have sex but you can fake it with Dexterity + Charisma with 1 die penalty.\n"
        "Even with Blush Of Life foods and drinks make you vomit."
    ),
    5: (
        "You can not have sex but you can fake it with Dexterity + Charisma with 2 dice penalty.\n"
        "You suffer 1 die penalty when interacting with humans."
    ),
    4: (
        "You can not have sex but you can fake it with Dexterity + Charisma with 2 dice penalty.\n"
        "You suffer 2 dice penalty when interacting with humans."
    ),
    3: "You can no longer have sex.\nYou suffer 4 dice penalty when interacting with humans.",
    2: "You can no longer have sex.\nYou suffer 6 dice penalty when interacting with humans.",
    1: "You can no longer have sex.\nYou suffer 8 dice penalty when interacting with humans.",
}
_BEAST_TEXT = "You have become the beast, you have no longer have control over your character."


def humanity_description(humanity: int) -> str:
    """What a character can still do at the given humanity rating."""
    return _HUMANITY_TEXTS.get(humanity, _BEAST_TEXT)


def _to_int(value: Any) -> int:
    """Read a stored number the lenient way: anything unreadable is 0."""
    if not isinstance(value, str):
        return 0
    try:
        return int(value.strip())
    except ValueError:
        return 0


class Damage(Enum):
    """State of one box of a damage track."""

    NONE = 0
    SUPERFICIAL = 1
    AGGRAVATED = 2

    def next(self) -> Damage:
        """The state a click moves this box to."""
        order = (Damage.NONE, Damage.SUPERFICIAL, Damage.AGGRAVATED)
        return order[(order.index(self) + 1) % len(order)]


class DamageTrack:
    """A row of three-state boxes: empty, superficial or aggravated."""

    def __init__(self, size: int = 0) -> None:
        self.boxes: list[Damage] = []
        self.resize(size)

    def __len__(self) -> int:
        return len(self.boxes)

    def resize(self, size: int) -> None:
        """Replace the track with ``size`` empty boxes."""
        self.boxes = [Damage.NONE] * max(0, size)

    def click(self, index: int) -> None:
        """Cycle one box: empty, superficial, aggravated, empty again."""
        if not 0 <= index < len(self.boxes):
            raise IndexError(f"box {index} is outside a track of {len(self.boxes)}")
        self.boxes[index] = self.boxes[index].next()

    def superficial(self) -> int:
        """Number of boxes holding superficial damage."""
        return self.boxes.count(Damage.SUPERFICIAL)

    def aggravated(self) -> int:
        """Number of boxes holding aggravated damage."""
        return self.boxes.count(Damage.AGGRAVATED)

    def clear(self) -> None:
        """Empty every box, keeping the size."""
        self.boxes = [Damage.NONE] * len(self.boxes)

    def apply(self, superficial: int, aggravated: int) -> None:
        """Mark damage from the left: aggravated first, superficial after."""
        if superficial < 0 or aggravated < 0:
            raise ValueError("damage cannot be negative")
        if superficial + aggravated > len(self.boxes):
            raise ValueError(
                f"{superficial + aggravated} damage does not fit a track of {len(self.boxes)}"
            )
        for index in range(superficial + aggravated):
            self.click(index)
        for index in range(aggravated):
            self.click(index)


class Indicators:
    """Hunger, health, willpower and humanity of a character."""

    def __init__(self) -> None:
        self.hunger_track = DotTrack()
        self.health = DamageTrack()
        self.willpower = DamageTrack()
        self.humanity_track = DamageTrack(HUMANITY_SIZE)
        self.health_modifier = 0
        self.willpower_modifier = 0
        self._health_base = 0
        self._willpower_base = 0

    @property
    def hunger(self) -> int:
        return self.hunger_track.value

    @property
    def humanity_text(self) -> str:
        return humanity_description(self.humanity())

    def resize_willpower(self, base: int) -> None:
        """Rebuild the willpower track from ``base`` plus the modifier."""
        self._willpower_base = base
        self.willpower.resize(base + self.willpower_modifier)

    def resize_health(self, base: int) -> None:
        """Rebuild the health track from ``base`` plus the modifier."""
        self._health_base = base
        self.health.resize(base + self.health_modifier)

    def humanity(self) -> int:
        """Filled humanity boxes."""
        return self.humanity_track.aggravated()

    def stains(self) -> int:
        """Stained humanity boxes."""
        return self.humanity_track.superficial()

    def remaining_willpower(self) -> int:
        """Willpower boxes that carry no damage."""
        return len(self.willpower) - self.willpower.superficial() - self.willpower.aggravated()

    def to_json(self) -> dict[str, Any]:
        """The trackers as stored in a save file."""
        return {
            "hunger": str(self.hunger),
            "health": {
                "modifier": str(self.health_modifier),
                "superficial": str(self.health.superficial()),
                "agravated": str(self.health.aggravated()),
            },
            "willpower": {
                "modifier": str(self.willpower_modifier),
                "superficial": str(self.willpower.superficial()),
                "agravated": str(self.willpower.aggravated()),
            },
            "humanity": str(self.humanity()),
            "stains": str(self.stains()),
        }

    def from_json(self, data: dict[str, Any]) -> None:
        """Apply stored trackers; meant for cleared indicators, as clicks cycle boxes."""
        health = data.get("health")
        if isinstance(health, dict):
            self.health_modifier = _to_int(health.get("modifier"))
            self.resize_health(self._health_base)
            self.health.apply(_to_int(health.get("superficial")), _to_int(health.get("agravated")))

        willpower = data.get("willpower")
        if isinstance(willpower, dict):
            self.willpower_modifier = _to_int(willpower.get("modifier"))
            self.resize_willpower(self._willpower_base)
            self.willpower.apply(
                _to_int(willpower.get("superficial")), _to_int(willpower.get("agravated"))
            )

        hunger = data.get("hunger")
        if isinstance(hunger, str):
            level = _to_int(hunger)
            if level > 0:
                self.hunger_track.click(level - 1)

        humanity = data.get("humanity")
        if isinstance(humanity, str):
            level = _check_humanity(_to_int(humanity), "humanity")
            self.humanity_track.boxes[:level] = [Damage.AGGRAVATED] * level

        stains = data.get("stains")
        if isinstance(stains, str):
            count = _check_humanity(_to_int(stains), "stains")
            for offset in range(count):
                self.humanity_track.boxes[HUMANITY_SIZE - 1 - offset] = Damage.SUPERFICIAL

    def clear(self) -> None:
        """Reset modifiers to zero and empty every box."""
        self.health_modifier = 0
        self.willpower_modifier = 0
        self.health.clear()
        self.willpower.clear()
        self.humanity_track.clear()
        self.hunger_track.clear()


def _check_humanity(value: int, what: str) -> int:
    if not 0 <= value <= HUMANITY_SIZE:
        raise ValueError(f"{what} must lie between 0 and {HUMANITY_SIZE}, got {value}")
    return value