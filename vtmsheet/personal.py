"""Personal data of a character and the effects of blood potency."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from vtmsheet.dots import DotTrack

BLOOD_POTENCY_MAX = 10
BLOOD_POTENCY_KEY = "Blood Potency"
CURRENT_EXPERIENCE_KEY = "Experience"
TOTAL_EXPERIENCE_KEY = "Total Experience"
CLAN_FIELD = "Clan"
DEFAULT_FIELDS = (
    "Name", "Concept", "Chronicle", "Ambition", "Desire", CLAN_FIELD, "Sire", "Generation",
)

CLAN_KEYWORDS = (
    "banu haqim", "brujah", "gangrel", "hecata", "lasombra", "malkavian", "ministry",
    "nosferatu", "ravnos", "salubri", "toreador", "tremere", "tzimisce", "ventrue",
)
BACKGROUND_DIRECTORY = "images/background-image/"


def _to_int(value: Any) -> int:
    """Read a stored number the lenient way: anything unreadable is 0."""
    if not isinstance(value, str):
        return 0
    try:
        return int(value.strip())
    except ValueError:
        return 0


@dataclass(frozen=True)
class BloodPotencyStats:
    """What a blood potency rating grants."""

    blood_surge: int
    mend_amount: int
    power_bonus: int
    rouse_reroll_level: int
    bane_severity: int
    level: int

    @property
    def blood_surge_text(self) -> str:
        return f"{self.blood_surge} {'dices' if self.level > 0 else 'die'}"

    @property
    def mend_text(self) -> str:
        return f"{self.mend_amount} superficial damage"

    @property
    def power_bonus_text(self) -> str:
        return f"{self.power_bonus} {'dices' if self.level > 3 else 'die'}"

    @property
    def rouse_reroll_text(self) -> str:
        suffix = " and Lower" if self.level > 2 else ""
        return f"Level {self.rouse_reroll_level}{suffix}"


def blood_potency_stats(level: int) -> BloodPotencyStats:
    """The bonuses granted at blood potency ``level``."""
    if not 0 <= level <= BLOOD_POTENCY_MAX:
        raise ValueError(f"blood potency must lie between 0 and {BLOOD_POTENCY_MAX}, got {level}")
    half_up = level // 2 + level % 2
    return BloodPotencyStats(
        blood_surge=half_up + 1,
        mend_amount=level // 2 + 1 if level < 6 else level // 2,
        power_bonus=level // 2,
        rouse_reroll_level=half_up if level > 0 else 0,
        bane_severity=half_up + 1 if level > 0 else 0,
        level=level,
    )


def clan_background(text: str) -> str | None:
    """The background image for the clan named in ``text``, if any is recognised."""
    lowered = text.lower()
    for clan in CLAN_KEYWORDS:
        if clan in lowered:
            return f"{BACKGROUND_DIRECTORY}{clan}_background_transparent.png"
    return None


class PersonalData:
    """Free-text details, blood potency and experience of a character."""

    def __init__(self, field_names: Iterable[str] = DEFAULT_FIELDS) -> None:
        self.fields: dict[str, str] = {name: "" for name in field_names}
        self.blood_potency_track = DotTrack(BLOOD_POTENCY_MAX)
        self.current_experience = 0
        self.total_experience = 0

    def __getitem__(self, name: str) -> str:
        return self.fields[name]

    def __setitem__(self, name: str, value: str) -> None:
        if name not in self.fields:
            raise KeyError(f"unknown field: {name!r}")
        self.fields[name] = value

    @property
    def blood_potency(self) -> int:
        return self.blood_potency_track.value

    @property
    def stats(self) -> BloodPotencyStats:
        return blood_potency_stats(self.blood_potency)

    @property
    def background(self) -> str | None:
        """Background image matching the clan field, if there is one."""
        return clan_background(self.fields.get(CLAN_FIELD, ""))

    def to_json(self) -> dict[str, str]:
        """Every detail as stored in a save file."""
        data = {BLOOD_POTENCY_KEY: str(self.blood_potency)}
        data.update(self.fields)
        data[CURRENT_EXPERIENCE_KEY] = str(self.current_experience)
        data[TOTAL_EXPERIENCE_KEY] = str(self.total_experience)
        return data

    def from_json(self, data: dict[str, Any]) -> None:
        """Apply stored details; meant for cleared data, as clicks toggle dots."""
        potency = data.get(BLOOD_POTENCY_KEY)
        if isinstance(potency, str):
            level = _to_int(potency)
            if level != 0:
                self.blood_potency_track.click(level - 1)
        for name in self.fields:
            value = data.get(name)
            if isinstance(value, str):
                self.fields[name] = value
        current = data.get(CURRENT_EXPERIENCE_KEY)
        if isinstance(current, str):
            self.current_experience = _to_int(current)
        total = data.get(TOTAL_EXPERIENCE_KEY)
        if isinstance(total, str):
            self.total_experience = _to_int(total)

    def clear(self) -> None:
        """Empty every detail and reset the numbers to zero."""
        self.blood_potency_track.clear()
        self.fields = {name: "" for name in self.fields}
        self.current_experience = 0
        self.total_experience = 0