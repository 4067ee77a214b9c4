"""Skill lists with dot ratings and specialisations."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from vtmsheet.dots import DotTrack

PHYSICAL_SKILLS = (
    "Athletics", "Brawl", "Craft", "Drive", "Firearms",
    "Larceny", "Melee", "Stealth", "Survival",
)
SOCIAL_SKILLS = (
    "Animal Ken", "Etiquette", "Insight", "Intimidation", "Leadership",
    "Performance", "Persuasion", "Streetwise", "Subterfuge",
)
MENTAL_SKILLS = (
    "Academics", "Awareness", "Finance", "Investigation", "Medicine",
    "Occult", "Politics", "Science", "Technology",
)


def _to_int(value: Any) -> int:
    """Read a stored number the lenient way: anything unreadable is 0."""
    if not isinstance(value, str):
        return 0
    try:
        return int(value.strip())
    except ValueError:
        return 0


@dataclass
class Skill:
    """One skill: its name, rating and free-text specialisations."""

    name: str
    track: DotTrack = field(default_factory=DotTrack)
    specialization: str = ""

    @property
    def dots(self) -> int:
        return self.track.value


class Skills:
    """An ordered group of skills, such as all physical skills."""

    def __init__(self, names: Iterable[str] = ()) -> None:
        self.skills: dict[str, Skill] = {name: Skill(name) for name in names}

    def __getitem__(self, name: str) -> Skill:
        return self.skills[name]

    def names(self) -> list[str]:
        """Skill names in sheet order."""
        return list(self.skills)

    def to_json(self) -> dict[str, dict[str, str]]:
        """Each skill's dots and specialisations, keyed by skill name."""
        return {
            name: {"dots": str(skill.dots), "specializations": skill.specialization}
            for name, skill in self.skills.items()
        }

    def from_json(self, data: dict[str, Any]) -> None:
        """Apply stored skills; meant for a cleared group, as clicks toggle dots."""
        for name, skill in self.skills.items():
            details = data.get(name)
            if not isinstance(details, dict):
                continue
            dots = _to_int(details["dots"]) if "dots" in details else 0
            if dots != 0:
                skill.track.click(dots - 1)
            specialization = details.get("specializations")
            if isinstance(specialization, str):
                skill.specialization = specialization

    def clear(self) -> None:
        """Empty every rating and specialisation."""
        for skill in self.skills.values():
            skill.track.clear()
            skill.specialization = ""