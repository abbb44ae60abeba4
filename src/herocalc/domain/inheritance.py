"""Skill inheritance eligibility rules."""
from __future__ import annotations

import logging
import re
from enum import Enum
from typing import Callable

from herocalc.domain.defs import HeroDef, SkillDef
from herocalc.domain.hero_types import MoveType, SkillType, inheritance_weapon_type

log = logging.getLogger(__name__)

UnknownRestrictionHook = Callable[[str], None]

_MELEE_WEAPONS = re.compile(r"Sword|Axe|Lance|Breath")
_RANGED_WEAPONS = re.compile(r"Staff|Tome|Bow|Shuriken")


class InheritRestriction(Enum):
    """Restriction categories attached to inheritable skills."""

    NONE = "None"
    AXE_USERS_ONLY = "Axe Users Only"
    BOW_USERS_ONLY = "Bow Users Only"
    FLIERS_ONLY = "Fliers Only"
    CAVALRY_ONLY = "Cavalry Only"
    ARMORED_ONLY = "Armored Only"
    EXCLUDES_FLIERS = "Excludes Fliers"
    MELEE_ONLY = "Melee Weapon Users Only"
    RANGED_ONLY = "Ranged Weapon Users Only"
    BREATH_USERS_ONLY = "Breath Users Only"
    STAFF_USERS_ONLY = "Staff Users Only"
    EXCLUDES_STAVES = "Excludes Staff Users"
    EXCLUDES_COLORLESS = "Excludes Colorless Weapon Users"
    EXCLUDES_BLUE = "Excludes Blue Weapon Users"
    EXCLUDES_RED = "Excludes Red Weapon Users"
    EXCLUDES_GREEN = "Excludes Green Weapon Users"
    IS_EXCLUSIVE = "Is exclusive"
    UNKNOWN = "Unknown"

    @classmethod
    def from_label(cls, label: str | None) -> "InheritRestriction":
        """Parse a catalog label; absent labels are NONE, unrecognized ones UNKNOWN."""
        if label is None:
            return cls.NONE
        return _LABEL_ALIASES.get(label, cls.UNKNOWN)


_LABEL_ALIASES: dict[str, InheritRestriction] = {
    restriction.value: restriction
    for restriction in InheritRestriction
    if restriction is not InheritRestriction.UNKNOWN
}
_LABEL_ALIASES.update(
    {
        "Melee Weapons Only": InheritRestriction.MELEE_ONLY,
        "Ranged Weapons Only": InheritRestriction.RANGED_ONLY,
        "Staff Only": InheritRestriction.STAFF_USERS_ONLY,
        "Excludes Staves": InheritRestriction.EXCLUDES_STAVES,
        "Excludes Colorless Weapons": InheritRestriction.EXCLUDES_COLORLESS,
        "Excludes Blue Weapons": InheritRestriction.EXCLUDES_BLUE,
        "Excludes Red Weapons": InheritRestriction.EXCLUDES_RED,
        "Excludes Green Weapons": InheritRestriction.EXCLUDES_GREEN,
    }
)

RESTRICTION_RULES: dict[InheritRestriction, Callable[[HeroDef], bool]] = {
    InheritRestriction.NONE: lambda hero: True,
    InheritRestriction.AXE_USERS_ONLY: lambda hero: hero.weapon_type == "Green Axe",
    InheritRestriction.BOW_USERS_ONLY: lambda hero: hero.weapon_type == "Neutral Bow",
    InheritRestriction.FLIERS_ONLY: lambda hero: hero.move_type is MoveType.FLYING,
    InheritRestriction.CAVALRY_ONLY: lambda hero: hero.move_type is MoveType.CAVALRY,
    InheritRestriction.ARMORED_ONLY: lambda hero: hero.move_type is MoveType.ARMORED,
    InheritRestriction.EXCLUDES_FLIERS: lambda hero: hero.move_type is not MoveType.FLYING,
    InheritRestriction.MELEE_ONLY: lambda hero: bool(_MELEE_WEAPONS.search(hero.weapon_type)),
    InheritRestriction.RANGED_ONLY: lambda hero: bool(_RANGED_WEAPONS.search(hero.weapon_type)),
    InheritRestriction.BREATH_USERS_ONLY: lambda hero: "Breath" in hero.weapon_type,
    InheritRestriction.STAFF_USERS_ONLY: lambda hero: hero.weapon_type == "Neutral Staff",
    InheritRestriction.EXCLUDES_STAVES: lambda hero: hero.weapon_type != "Neutral Staff",
    InheritRestriction.EXCLUDES_COLORLESS: lambda hero: "Neutral" not in hero.weapon_type,
    InheritRestriction.EXCLUDES_BLUE: lambda hero: "Blue" not in hero.weapon_type,
    InheritRestriction.EXCLUDES_RED: lambda hero: "Red" not in hero.weapon_type,
    InheritRestriction.EXCLUDES_GREEN: lambda hero: "Green" not in hero.weapon_type,
    InheritRestriction.IS_EXCLUSIVE: lambda hero: False,
}


def _log_unknown_restriction(label: str) -> None:
    log.warning("Unknown inherit restriction %r; allowing inheritance", label)


def can_inherit(
    hero: HeroDef,
    skill: SkillDef,
    *,
    on_unknown: UnknownRestrictionHook | None = None,
) -> bool:
    """Return whether ``hero`` may equip ``skill``. The first matching rule decides."""
    if skill.exclusive:
        return False
    if skill.type is SkillType.WEAPON:
        # Story-only weapons carry no weapon type.
        if skill.weapon_type is None:
            return False
        if inheritance_weapon_type(hero.weapon_type) != skill.weapon_type:
            return False
    restriction = InheritRestriction.from_label(skill.inherit_restriction)
    if restriction is InheritRestriction.UNKNOWN:
        (on_unknown or _log_unknown_restriction)(skill.inherit_restriction or "")
        return True
    return RESTRICTION_RULES[restriction](hero)
