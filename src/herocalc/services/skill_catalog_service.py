"""Skill catalog queries: defaults, inheritance and rarity updates."""
from __future__ import annotations

import logging

from herocalc.data.repositories import HeroesRepository, SkillsRepository
from herocalc.domain.defs import SkillDef
from herocalc.domain.entities import HeroInstance, InstanceSkills, empty_skills
from herocalc.domain.entities.hero_instance import MAX_RARITY, validate_rarity
from herocalc.domain.hero_types import SkillType
from herocalc.domain.inheritance import can_inherit
from herocalc.services.errors import UnknownRestrictionError

log = logging.getLogger(__name__)


class SkillCatalogService:
    """Answer which skills a hero has by default and which it may inherit."""

    def __init__(
        self,
        *,
        heroes_repo: HeroesRepository,
        skills_repo: SkillsRepository,
        strict_restrictions: bool = False,
    ) -> None:
        self._heroes_repo = heroes_repo
        self._skills_repo = skills_repo
        self._strict_restrictions = strict_restrictions
        self._unknown_restrictions: set[str] = set()

    @property
    def unknown_restrictions(self) -> frozenset[str]:
        """Restriction labels seen during inheritance checks that have no rule."""
        return frozenset(self._unknown_restrictions)

    def get_skill_info(self, skill_type: SkillType, name: str) -> SkillDef | None:
        return self._skills_repo.get_skill(skill_type, name)

    def get_skill_type(self, name: str) -> SkillType | None:
        skill = self._skills_repo.find_by_name(name)
        return skill.type if skill is not None else None

    @staticmethod
    def get_skill_name(instance: HeroInstance, skill_type: SkillType) -> str:
        return instance.equipped(skill_type)

    def get_skill_effect(self, instance: HeroInstance, skill_type: SkillType) -> str:
        skill = self.get_skill_info(skill_type, instance.equipped(skill_type))
        return skill.effect if skill is not None else ""

    def get_default_skills(self, name: str, rarity: int = MAX_RARITY) -> InstanceSkills:
        """Map every slot type to the native skill unlocked at ``rarity`` (or None)."""
        hero = self._heroes_repo.lookup(name)
        defaults = empty_skills()
        for native in hero.skills:
            if not native.unlocked_at(rarity):
                continue
            skill_type = self.get_skill_type(native.name)
            if skill_type is None:
                log.debug("Native skill %r of %r is not in the catalog", native.name, hero.name)
                continue
            defaults[skill_type] = native.name
        return defaults

    def update_rarity(self, instance: HeroInstance, new_rarity: int) -> HeroInstance:
        """Change rarity, swapping slots that still hold the old rarity's default skill.

        Slots the player customized are left alone.
        """
        validate_rarity(new_rarity)
        old_defaults = self.get_default_skills(instance.name, instance.rarity)
        new_defaults = self.get_default_skills(instance.name, new_rarity)
        for skill_type in list(instance.skills):
            if instance.equipped(skill_type) == (old_defaults.get(skill_type) or ""):
                instance.skills[skill_type] = new_defaults.get(skill_type)
        instance.rarity = new_rarity
        return instance

    def can_inherit(self, hero_name: str, skill: SkillDef) -> bool:
        hero = self._heroes_repo.lookup(hero_name)
        return can_inherit(hero, skill, on_unknown=self._on_unknown_restriction)

    def get_inheritable_skills(self, name: str, skill_type: SkillType) -> list[SkillDef]:
        """Return native and inheritable skills of one type, sorted by name."""
        hero = self._heroes_repo.lookup(name)
        by_name: dict[str, SkillDef] = {}
        for skill in self._skills_repo.of_type(skill_type):
            if can_inherit(hero, skill, on_unknown=self._on_unknown_restriction):
                by_name.setdefault(skill.name, skill)
        for native in hero.skills:
            skill = self._skills_repo.get_skill(skill_type, native.name)
            if skill is not None:
                by_name.setdefault(skill.name, skill)
        return sorted(by_name.values(), key=lambda skill: skill.name)

    def _on_unknown_restriction(self, label: str) -> None:
        if self._strict_restrictions:
            raise UnknownRestrictionError(f"Unknown inherit restriction: {label!r}")
        if label not in self._unknown_restrictions:
            log.warning("Unknown inherit restriction %r; allowing inheritance", label)
        self._unknown_restrictions.add(label)
