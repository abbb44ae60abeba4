"""Hero (unit species) definition structures."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

from herocalc.core.types import StatKey, Variance
from herocalc.domain.hero_types import MoveType


@dataclass(frozen=True, slots=True)
class StatCell:
    """One base stat entry; low/high are only present when the data lists variants."""

    normal: int
    low: int | None = None
    high: int | None = None

    @property
    def has_variants(self) -> bool:
        return self.low is not None and self.high is not None

    def select(self, variance: Variance) -> int | None:
        if variance == "high":
            return self.high
        if variance == "low":
            return self.low
        return self.normal


@dataclass(frozen=True, slots=True)
class HeroSkillDef:
    """A native skill and the rarity at which the hero learns it (None means always)."""

    name: str
    rarity: int | None = None

    def unlocked_at(self, rarity: int) -> bool:
        return self.rarity is None or self.rarity <= rarity


StatTable = Mapping[int, Mapping[int, Mapping[StatKey, StatCell]]]


@dataclass(frozen=True, slots=True)
class HeroDef:
    """Static record for a hero, keyed by name."""

    name: str
    weapon_type: str
    move_type: MoveType
    stats: StatTable = field(default_factory=dict)
    skills: tuple[HeroSkillDef, ...] = ()

    def stat_cell(self, level: int, rarity: int, stat: StatKey) -> StatCell | None:
        return self.stats.get(level, {}).get(rarity, {}).get(stat)

    def has_rarity(self, level: int, rarity: int) -> bool:
        return rarity in self.stats.get(level, {})
