"""Repository exports."""

from .heroes_repo import HeroesRepository
from .skills_repo import SkillsRepository

__all__ = [
    "HeroesRepository",
    "SkillsRepository",
]
