"""Per-player hero instance model."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional

from herocalc.core.types import StatKey
from herocalc.domain.hero_types import STAT_KEYS, SkillType

InstanceSkills = Dict[SkillType, Optional[str]]

MIN_RARITY = 1
MAX_RARITY = 5


def empty_skills() -> InstanceSkills:
    """Return a skill mapping with every slot present and empty."""
    return {skill_type: None for skill_type in SkillType}


def validate_rarity(rarity: object) -> int:
    if not isinstance(rarity, int) or isinstance(rarity, bool) or not MIN_RARITY <= rarity <= MAX_RARITY:
        raise ValueError(f"Rarity must be an integer from {MIN_RARITY} to {MAX_RARITY}, got {rarity!r}.")
    return rarity


def validate_traits(boon: str | None, bane: str | None) -> None:
    for label, value in (("boon", boon), ("bane", bane)):
        if value is not None and value not in STAT_KEYS:
            raise ValueError(f"{label} must be one of {list(STAT_KEYS)}, got {value!r}.")
    if boon is not None and boon == bane:
        raise ValueError(f"boon and bane must differ (both are {boon!r}).")


@dataclass(slots=True)
class HeroInstance:
    """A hero owned by a player; every derived value is recomputed on demand."""

    name: str
    rarity: int = MAX_RARITY
    merge_level: int = 0
    boon: StatKey | None = None
    bane: StatKey | None = None
    skills: InstanceSkills = field(default_factory=empty_skills)
    initial_hp_missing: int = 0

    def __post_init__(self) -> None:
        validate_rarity(self.rarity)
        validate_traits(self.boon, self.bane)
        if self.merge_level < 0:
            raise ValueError(f"merge_level must be non-negative, got {self.merge_level}.")
        if self.initial_hp_missing < 0:
            raise ValueError(f"initial_hp_missing must be non-negative, got {self.initial_hp_missing}.")

    def set_traits(self, boon: StatKey | None, bane: StatKey | None) -> None:
        """Replace boon and bane together, rejecting an invalid pair."""
        validate_traits(boon, bane)
        self.boon = boon
        self.bane = bane

    def equipped(self, skill_type: SkillType) -> str:
        return self.skills.get(skill_type) or ""

    def equip(self, skill_type: SkillType, skill_name: str | None) -> None:
        self.skills[skill_type] = skill_name or None
