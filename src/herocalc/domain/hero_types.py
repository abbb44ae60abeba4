"""Fixed game taxonomies: skill slots, movement, weapon colors and stat keys."""
from __future__ import annotations

import re
from enum import Enum

from herocalc.core.types import StatKey

STAT_KEYS: tuple[StatKey, ...] = ("hp", "atk", "spd", "def", "res")

WEAPON_COLORS = ("Red", "Green", "Blue", "Neutral")
WEAPON_FAMILIES = ("Sword", "Axe", "Lance", "Bow", "Tome", "Staff", "Breath", "Beast", "Shuriken")

_MELEE_PATTERN = re.compile(r"Sword|Axe|Lance|Beast")
_MAGIC_PATTERN = re.compile(r"Tome|Beast|Staff")


class SkillType(Enum):
    """Equipment slot a skill occupies, in display order."""

    WEAPON = "WEAPON"
    ASSIST = "ASSIST"
    SPECIAL = "SPECIAL"
    PASSIVE_A = "PASSIVE_A"
    PASSIVE_B = "PASSIVE_B"
    PASSIVE_C = "PASSIVE_C"
    SEAL = "SEAL"


class MoveType(Enum):
    INFANTRY = "Infantry"
    ARMORED = "Armored"
    CAVALRY = "Cavalry"
    FLYING = "Flying"


class WeaponColor(Enum):
    RED = "RED"
    GREEN = "GREEN"
    BLUE = "BLUE"
    NEUTRAL = "NEUTRAL"


_WEAPON_COLORS_BY_TYPE: dict[str, WeaponColor] = {
    "Red Sword": WeaponColor.RED,
    "Red Tome": WeaponColor.RED,
    "Red Beast": WeaponColor.RED,
    "Green Axe": WeaponColor.GREEN,
    "Green Tome": WeaponColor.GREEN,
    "Green Beast": WeaponColor.GREEN,
    "Blue Lance": WeaponColor.BLUE,
    "Blue Tome": WeaponColor.BLUE,
    "Blue Beast": WeaponColor.BLUE,
}


def weapon_color(weapon_type: str) -> WeaponColor:
    """Map a weapon type such as 'Blue Tome' to its color; unmapped types are neutral."""
    return _WEAPON_COLORS_BY_TYPE.get(weapon_type, WeaponColor.NEUTRAL)


def weapon_range(weapon_type: str) -> int:
    return 1 if _MELEE_PATTERN.search(weapon_type) else 2


def mitigation_stat(weapon_type: str) -> StatKey:
    """Return the defensive stat that reduces damage from this weapon type."""
    return "res" if _MAGIC_PATTERN.search(weapon_type) else "def"


def inheritance_weapon_type(weapon_type: str) -> str:
    """Weapon type used when matching weapon skills; beast units equip breath weapons."""
    return "Breath" if "Beast" in weapon_type else weapon_type
