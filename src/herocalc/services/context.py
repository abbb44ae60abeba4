"""Explicitly constructed calculator context holding the read-only catalogs."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from herocalc.config import CalculatorSettings
from herocalc.data.repositories import HeroesRepository, SkillsRepository
from herocalc.services.hero_predicates import HealthGate, HeroPredicates
from herocalc.services.skill_bonus_service import CatalogSkillBonusResolver, SkillBonusResolver
from herocalc.services.skill_catalog_service import SkillCatalogService
from herocalc.services.stat_service import StatService


@dataclass(frozen=True, slots=True)
class CalculatorContext:
    """Bundle of repositories and services sharing one dataset."""

    heroes_repo: HeroesRepository
    skills_repo: SkillsRepository
    skills: SkillCatalogService
    stats: StatService
    predicates: HeroPredicates

    @classmethod
    def build(
        cls,
        *,
        heroes_repo: HeroesRepository,
        skills_repo: SkillsRepository,
        bonus_resolver: SkillBonusResolver | None = None,
        health_gate: HealthGate | None = None,
        strict_restrictions: bool = False,
    ) -> "CalculatorContext":
        resolver = bonus_resolver or CatalogSkillBonusResolver(skills_repo=skills_repo)
        stats = StatService(heroes_repo=heroes_repo, bonus_resolver=resolver)
        return cls(
            heroes_repo=heroes_repo,
            skills_repo=skills_repo,
            skills=SkillCatalogService(
                heroes_repo=heroes_repo,
                skills_repo=skills_repo,
                strict_restrictions=strict_restrictions,
            ),
            stats=stats,
            predicates=HeroPredicates(
                heroes_repo=heroes_repo,
                skills_repo=skills_repo,
                stat_service=stats,
                health_gate=health_gate,
            ),
        )

    @classmethod
    def from_settings(cls, settings: CalculatorSettings) -> "CalculatorContext":
        return cls.build(
            heroes_repo=HeroesRepository(
                base_path=settings.definitions_path, fallback_name=settings.fallback_hero
            ),
            skills_repo=SkillsRepository(base_path=settings.definitions_path),
            strict_restrictions=settings.strict_restrictions,
        )

    @classmethod
    def from_definitions(cls, base_path: Path | str | None = None) -> "CalculatorContext":
        return cls.from_settings(CalculatorSettings(definitions_path=Path(base_path) if base_path else None))

    def preload(self) -> None:
        """Load every definition file now so later reads never touch disk."""
        self.heroes_repo.all()
        self.skills_repo.preload()
