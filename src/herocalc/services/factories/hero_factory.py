"""Factory for creating hero instances with their default skills."""
from __future__ import annotations

from herocalc.core.types import StatKey
from herocalc.domain.entities import HeroInstance
from herocalc.domain.entities.hero_instance import MAX_RARITY
from herocalc.services.errors import FactoryError
from herocalc.services.skill_catalog_service import SkillCatalogService


def create_hero_instance(
    name: str,
    skill_catalog: SkillCatalogService,
    *,
    rarity: int = MAX_RARITY,
    merge_level: int = 0,
    boon: StatKey | None = None,
    bane: StatKey | None = None,
) -> HeroInstance:
    """Instantiate a hero equipped with the native skills unlocked at ``rarity``."""
    try:
        return HeroInstance(
            name=name,
            rarity=rarity,
            merge_level=merge_level,
            boon=boon,
            bane=bane,
            skills=skill_catalog.get_default_skills(name, rarity),
        )
    except ValueError as exc:
        raise FactoryError(f"Cannot create hero '{name}': {exc}") from exc
