"""Runtime entity exports."""

from .hero_instance import HeroInstance, InstanceSkills, empty_skills

__all__ = [
    "HeroInstance",
    "InstanceSkills",
    "empty_skills",
]
