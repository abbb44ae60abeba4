"""Runtime entity factories."""

from .hero_factory import create_hero_instance

__all__ = ["create_hero_instance"]
