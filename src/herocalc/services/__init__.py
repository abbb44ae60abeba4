"""Service layer exports."""

from .context import CalculatorContext
from .errors import FactoryError, InvalidInstanceError, MissingStatError, UnknownRestrictionError
from .hero_predicates import HeroPredicates, has_stats_for_rarity
from .skill_bonus_service import CatalogSkillBonusResolver, NoSkillBonusResolver, SkillBonusResolver
from .skill_catalog_service import SkillCatalogService
from .stat_service import StatService

__all__ = [
    "CalculatorContext",
    "CatalogSkillBonusResolver",
    "FactoryError",
    "HeroPredicates",
    "InvalidInstanceError",
    "MissingStatError",
    "NoSkillBonusResolver",
    "SkillBonusResolver",
    "SkillCatalogService",
    "StatService",
    "UnknownRestrictionError",
    "has_stats_for_rarity",
]
