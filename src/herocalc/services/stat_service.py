"""Stat resolution for hero instances."""
from __future__ import annotations

from herocalc.core.types import Level, StatKey, Variance
from herocalc.data.repositories import HeroesRepository
from herocalc.domain.defs import HeroDef, StatCell
from herocalc.domain.entities import HeroInstance
from herocalc.domain.hero_types import STAT_KEYS, SkillType
from herocalc.domain.merge_bonus import distribute_merge_bonus, merge_bonus_at, merge_priority
from herocalc.services.errors import InvalidInstanceError, MissingStatError
from herocalc.services.skill_bonus_service import SkillBonusResolver

# Slots whose skills modify visible stats. Buffs and Defiant skills are not modelled.
STAT_SKILL_SLOTS = (SkillType.PASSIVE_A, SkillType.SEAL, SkillType.WEAPON)


class StatService:
    """Compute a hero instance's stats from base tables, boon/bane, merges and skills."""

    def __init__(self, *, heroes_repo: HeroesRepository, bonus_resolver: SkillBonusResolver) -> None:
        self._heroes_repo = heroes_repo
        self._bonus_resolver = bonus_resolver

    def get_stat(
        self,
        instance: HeroInstance,
        stat: StatKey,
        level: Level = 40,
        is_attacker: bool = False,
    ) -> int:
        hero = self._heroes_repo.lookup(instance.name)
        return self._resolve(hero, instance, stat, level, is_attacker)

    def get_stats(self, instance: HeroInstance, level: Level = 40, is_attacker: bool = False) -> dict[StatKey, int]:
        hero = self._heroes_repo.lookup(instance.name)
        return {stat: self._resolve(hero, instance, stat, level, is_attacker) for stat in STAT_KEYS}

    def get_level1_stats(self, instance: HeroInstance) -> dict[StatKey, int]:
        """Level 1 stats; these never include skills or merges."""
        return self._level1_snapshot(self._heroes_repo.lookup(instance.name), instance)

    def merge_priority(self, instance: HeroInstance) -> tuple[StatKey, ...]:
        return merge_priority(self.get_level1_stats(instance))

    def merge_bonus(self, instance: HeroInstance, stat: StatKey) -> int:
        return self._merge_bonus(self._heroes_repo.lookup(instance.name), instance, stat)

    def merge_bonuses(self, instance: HeroInstance) -> dict[StatKey, int]:
        if instance.merge_level == 0:
            return {stat: 0 for stat in STAT_KEYS}
        return distribute_merge_bonus(instance.merge_level, self.merge_priority(instance))

    def _resolve(
        self,
        hero: HeroDef,
        instance: HeroInstance,
        stat: StatKey,
        level: Level,
        is_attacker: bool,
    ) -> int:
        variance = self._variance(instance, stat)
        if level == 1:
            return self._level1_value(hero, instance, stat, variance)
        if level != 40:
            raise ValueError(f"Level must be 1 or 40, got {level!r}.")

        base_value = self._level40_value(hero, instance.rarity, stat, variance)
        skill_bonus = sum(
            self._bonus_resolver.stat_bonus(instance, skill_type, stat, is_attacker)
            for skill_type in STAT_SKILL_SLOTS
        )
        return base_value + self._merge_bonus(hero, instance, stat) + skill_bonus

    def _merge_bonus(self, hero: HeroDef, instance: HeroInstance, stat: StatKey) -> int:
        if instance.merge_level == 0:
            return 0
        position = merge_priority(self._level1_snapshot(hero, instance)).index(stat)
        return merge_bonus_at(instance.merge_level, position)

    def _level1_snapshot(self, hero: HeroDef, instance: HeroInstance) -> dict[StatKey, int]:
        return {
            stat: self._level1_value(hero, instance, stat, self._variance(instance, stat))
            for stat in STAT_KEYS
        }

    @staticmethod
    def _variance(instance: HeroInstance, stat: StatKey) -> Variance:
        if instance.boon is not None and instance.boon == instance.bane:
            raise InvalidInstanceError(f"{instance.name} has {instance.boon!r} as both boon and bane.")
        if instance.boon == stat:
            return "high"
        if instance.bane == stat:
            return "low"
        return "normal"

    def _level1_value(self, hero: HeroDef, instance: HeroInstance, stat: StatKey, variance: Variance) -> int:
        value = self._require_cell(hero, 1, instance.rarity, stat).normal
        if variance == "high":
            return value + 1
        if variance == "low":
            return value - 1
        return value

    def _level40_value(self, hero: HeroDef, rarity: int, stat: StatKey, variance: Variance) -> int:
        value = self._require_cell(hero, 40, rarity, stat).select(variance)
        if value is None:
            raise MissingStatError(
                f"{hero.name} has no {variance} variant for {stat} at level 40, rarity {rarity}."
            )
        return value

    @staticmethod
    def _require_cell(hero: HeroDef, level: int, rarity: int, stat: StatKey) -> StatCell:
        cell = hero.stat_cell(level, rarity, stat)
        if cell is None:
            raise MissingStatError(f"{hero.name} has no {stat} stat at level {level}, rarity {rarity}.")
        return cell
