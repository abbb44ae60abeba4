"""Skill definition structures."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

from herocalc.core.types import StatKey
from herocalc.domain.hero_types import SkillType


@dataclass(frozen=True, slots=True)
class SkillDef:
    """Describes a catalog skill, keyed by (type, name).

    ``stat_mods`` always apply while equipped; ``attacker_stat_mods`` only when the
    hero initiates combat and ``defender_stat_mods`` only when it is attacked.
    ``hp_requirement`` is the minimum HP percent needed for the skill to be active.
    """

    name: str
    type: SkillType
    effect: str = ""
    weapon_type: str | None = None
    inherit_restriction: str | None = None
    exclusive: bool = False
    rarity: int | None = None
    stat_mods: Mapping[StatKey, int] = field(default_factory=dict)
    attacker_stat_mods: Mapping[StatKey, int] = field(default_factory=dict)
    defender_stat_mods: Mapping[StatKey, int] = field(default_factory=dict)
    hp_requirement: int | None = None
