"""Heroes repository with fallback resolution for unknown names."""
from __future__ import annotations

import logging
from typing import Dict

from herocalc.core.types import StatKey
from herocalc.data.errors import DataValidationError
from herocalc.data.repositories.base import RepositoryBase
from herocalc.domain.defs import HeroDef, HeroSkillDef, StatCell
from herocalc.domain.hero_types import STAT_KEYS, WEAPON_COLORS, WEAPON_FAMILIES, MoveType

log = logging.getLogger(__name__)

DEFAULT_FALLBACK_HERO = "Anna"
PLACEHOLDER_WEAPON_TYPE = "Red Sword"
VALID_LEVELS = {"1", "40"}
VALID_MOVE_TYPES = {move_type.value for move_type in MoveType}
VALID_WEAPON_TYPES = {f"{color} {family}" for color in WEAPON_COLORS for family in WEAPON_FAMILIES}


def make_placeholder_hero(name: str) -> HeroDef:
    """Synthetic record used when neither the hero nor the fallback hero exists."""
    return HeroDef(
        name=name,
        weapon_type=PLACEHOLDER_WEAPON_TYPE,
        move_type=MoveType.INFANTRY,
        stats={1: {}, 40: {}},
        skills=(),
    )


class HeroesRepository(RepositoryBase[str, HeroDef]):
    """Loads hero base stats, weapon/movement classes and native skills."""

    def __init__(self, base_path=None, *, fallback_name: str | None = DEFAULT_FALLBACK_HERO) -> None:
        super().__init__("heroes.json", base_path)
        self._fallback_name = fallback_name
        self._reported_unknown: set[str] = set()

    def lookup(self, name: str) -> HeroDef:
        """Return the named hero, degrading to the fallback hero rather than failing.

        The fallback is logged once per unknown name.
        """
        definitions = self._ensure_loaded()
        hero = definitions.get(name)
        if hero is not None:
            return hero
        first_miss = name not in self._reported_unknown
        self._reported_unknown.add(name)
        fallback = definitions.get(self._fallback_name) if self._fallback_name else None
        if fallback is not None:
            if first_miss:
                log.warning("Unknown hero %r; using fallback hero %r", name, fallback.name)
            return fallback
        if first_miss:
            log.warning("Unknown hero %r and no fallback hero; using a placeholder", name)
        return make_placeholder_hero(name)

    def _build(self, raw: dict[str, object]) -> Dict[str, HeroDef]:
        heroes: Dict[str, HeroDef] = {}
        for name, payload in raw.items():
            hero_data = self._require_mapping(payload, f"hero '{name}'")
            self._assert_exact_fields(
                hero_data,
                {"weapon_type", "move_type", "stats"},
                f"hero '{name}'",
                optional_fields={"skills"},
            )
            weapon_type = self._require_literal(
                hero_data["weapon_type"], VALID_WEAPON_TYPES, f"hero '{name}' weapon_type"
            )
            move_type = self._require_literal(
                hero_data["move_type"], VALID_MOVE_TYPES, f"hero '{name}' move_type"
            )
            heroes[name] = HeroDef(
                name=name,
                weapon_type=weapon_type,
                move_type=MoveType(move_type),
                stats=self._build_stats(hero_data["stats"], f"hero '{name}' stats"),
                skills=self._build_skills(hero_data.get("skills", []), f"hero '{name}' skills"),
            )
        return heroes

    def _build_stats(self, value: object, context: str) -> dict[int, dict[int, dict[StatKey, StatCell]]]:
        levels = self._require_mapping(value, context)
        table: dict[int, dict[int, dict[StatKey, StatCell]]] = {1: {}, 40: {}}
        for level_key, rarities in levels.items():
            self._require_literal(level_key, VALID_LEVELS, f"{context} level")
            rarity_data = self._require_mapping(rarities, f"{context}[{level_key}]")
            for rarity_key, cells in rarity_data.items():
                rarity = self._parse_rarity(rarity_key, f"{context}[{level_key}] rarity")
                if rarity is None:
                    raise DataValidationError(f"{context}[{level_key}] rarity keys must be 1 to 5.")
                cell_data = self._require_mapping(cells, f"{context}[{level_key}][{rarity_key}]")
                table[int(level_key)][rarity] = {
                    stat: self._parse_cell(cell_data[stat], f"{context}[{level_key}][{rarity_key}].{stat}")
                    for stat in STAT_KEYS
                    if stat in cell_data
                }
                unknown = set(cell_data) - set(STAT_KEYS)
                if unknown:
                    raise DataValidationError(f"{context}[{level_key}][{rarity_key}] unknown stats: {sorted(unknown)}")
        return table

    def _parse_cell(self, value: object, context: str) -> StatCell:
        if not isinstance(value, list):
            return StatCell(normal=self._parse_required_value(value, context))
        if len(value) == 1:
            return StatCell(normal=self._parse_required_value(value[0], context))
        if len(value) == 3:
            low, normal, high = value
            return StatCell(
                low=self._parse_stat_value(low, context),
                normal=self._parse_required_value(normal, context),
                high=self._parse_stat_value(high, context),
            )
        raise DataValidationError(f"{context} must be a value or a [low, normal, high] list.")

    def _parse_required_value(self, value: object, context: str) -> int:
        parsed = self._parse_stat_value(value, context)
        if parsed is None:
            raise DataValidationError(f"{context} is missing its normal value.")
        return parsed

    @staticmethod
    def _parse_stat_value(value: object, context: str) -> int | None:
        if value == "-":
            return None
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        if isinstance(value, str):
            try:
                return int(value)
            except ValueError as exc:
                raise DataValidationError(f"{context} must be numeric, got {value!r}.") from exc
        raise DataValidationError(f"{context} must be an integer or numeric string.")

    def _build_skills(self, value: object, context: str) -> tuple[HeroSkillDef, ...]:
        entries = self._require_list(value, context)
        skills = []
        for index, entry in enumerate(entries):
            skill_data = self._require_mapping(entry, f"{context}[{index}]")
            self._assert_exact_fields(skill_data, {"name"}, f"{context}[{index}]", optional_fields={"rarity"})
            skills.append(
                HeroSkillDef(
                    name=self._require_str(skill_data["name"], f"{context}[{index}] name"),
                    rarity=self._parse_rarity(skill_data.get("rarity"), f"{context}[{index}] rarity"),
                )
            )
        return tuple(skills)
