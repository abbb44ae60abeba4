"""Domain definition exports."""

from .hero_def import HeroDef, HeroSkillDef, StatCell, StatTable
from .skill_def import SkillDef

__all__ = [
    "HeroDef",
    "HeroSkillDef",
    "SkillDef",
    "StatCell",
    "StatTable",
]
