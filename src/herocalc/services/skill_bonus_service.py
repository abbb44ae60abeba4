"""Per-skill stat bonus lookup."""
from __future__ import annotations

from typing import Protocol

from herocalc.core.types import StatKey
from herocalc.data.repositories import SkillsRepository
from herocalc.domain.entities import HeroInstance
from herocalc.domain.hero_types import SkillType


class SkillBonusResolver(Protocol):
    def stat_bonus(
        self,
        instance: HeroInstance,
        skill_type: SkillType,
        stat: StatKey,
        is_attacker: bool,
    ) -> int:
        """Return the bonus the skill equipped in ``skill_type`` gives to ``stat``."""


class NoSkillBonusResolver:
    """Resolver that ignores equipped skills."""

    def stat_bonus(
        self,
        instance: HeroInstance,
        skill_type: SkillType,
        stat: StatKey,
        is_attacker: bool,
    ) -> int:
        return 0


class CatalogSkillBonusResolver:
    """Reads stat bonuses declared on catalog skills.

    Unknown skill names contribute nothing so custom or unreleased skills do not
    break stat resolution.
    """

    def __init__(self, *, skills_repo: SkillsRepository) -> None:
        self._skills_repo = skills_repo

    def stat_bonus(
        self,
        instance: HeroInstance,
        skill_type: SkillType,
        stat: StatKey,
        is_attacker: bool,
    ) -> int:
        skill_name = instance.equipped(skill_type)
        if not skill_name:
            return 0
        skill = self._skills_repo.get_skill(skill_type, skill_name)
        if skill is None:
            return 0
        situational = skill.attacker_stat_mods if is_attacker else skill.defender_stat_mods
        return skill.stat_mods.get(stat, 0) + situational.get(stat, 0)
