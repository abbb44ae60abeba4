"""Boolean and categorical queries used by gameplay rules."""
from __future__ import annotations

import re
from typing import Callable

from herocalc.core.types import MitigationType
from herocalc.data.repositories import HeroesRepository, SkillsRepository
from herocalc.domain.defs import HeroDef
from herocalc.domain.entities import HeroInstance
from herocalc.domain.hero_types import SkillType, WeaponColor, mitigation_stat, weapon_color, weapon_range
from herocalc.services.stat_service import StatService

HealthGate = Callable[[HeroInstance, SkillType], bool]

_BRAVE_WEAPON = re.compile(r"Brave|Dire")


def has_stats_for_rarity(hero: HeroDef, rarity: int) -> bool:
    return hero.has_rarity(1, rarity) and hero.has_rarity(40, rarity)


class HeroPredicates:
    """Queries built on top of stat resolution and the hero catalog."""

    def __init__(
        self,
        *,
        heroes_repo: HeroesRepository,
        skills_repo: SkillsRepository,
        stat_service: StatService,
        health_gate: HealthGate | None = None,
    ) -> None:
        self._heroes_repo = heroes_repo
        self._skills_repo = skills_repo
        self._stat_service = stat_service
        self._health_gate = health_gate or self.hp_requirement_satisfied

    def has_skill(self, instance: HeroInstance, skill_type: SkillType, partial_name: str) -> bool:
        """True when the equipped skill matches ``partial_name`` and its HP gate is met."""
        skill_name = instance.equipped(skill_type)
        if not skill_name or not re.search(partial_name, skill_name):
            return False
        return self._health_gate(instance, skill_type)

    def hp_requirement_satisfied(self, instance: HeroInstance, skill_type: SkillType) -> bool:
        skill = self._skills_repo.get_skill(skill_type, instance.equipped(skill_type))
        if skill is None or skill.hp_requirement is None:
            return True
        return self.hp_above_threshold(instance, skill.hp_requirement)

    @staticmethod
    def has_brave_weapon(instance: HeroInstance) -> bool:
        return bool(_BRAVE_WEAPON.search(instance.equipped(SkillType.WEAPON)))

    def get_range(self, instance: HeroInstance) -> int:
        return weapon_range(self._weapon_type(instance))

    def get_mitigation_type(self, instance: HeroInstance) -> MitigationType:
        return mitigation_stat(self._weapon_type(instance))

    def get_weapon_color(self, instance: HeroInstance) -> WeaponColor:
        return weapon_color(self._weapon_type(instance))

    def has_stats_for_rarity(self, name: str, rarity: int) -> bool:
        return has_stats_for_rarity(self._heroes_repo.lookup(name), rarity)

    def hp_above_threshold(self, instance: HeroInstance, hp_percent: float) -> bool:
        """Whether HP at the start of combat is at least ``hp_percent`` of max HP."""
        max_hp = self._stat_service.get_stat(instance, "hp")
        return max_hp - instance.initial_hp_missing >= max_hp * hp_percent / 100

    def hp_below_threshold(self, instance: HeroInstance, hp_percent: float) -> bool:
        """Whether HP at the start of combat is at most ``hp_percent`` of max HP."""
        max_hp = self._stat_service.get_stat(instance, "hp")
        return max_hp - instance.initial_hp_missing <= max_hp * hp_percent / 100

    def _weapon_type(self, instance: HeroInstance) -> str:
        return self._heroes_repo.lookup(instance.name).weapon_type
