"""Skills repository keyed by (skill type, name)."""
from __future__ import annotations

from typing import Dict

from herocalc.core.types import StatKey
from herocalc.data.errors import DataValidationError
from herocalc.data.repositories.base import RepositoryBase
from herocalc.domain.defs import SkillDef
from herocalc.domain.hero_types import STAT_KEYS, WEAPON_COLORS, WEAPON_FAMILIES, SkillType

VALID_SKILL_TYPES = {skill_type.value for skill_type in SkillType}
VALID_SKILL_WEAPON_TYPES = {f"{color} {family}" for color in WEAPON_COLORS for family in WEAPON_FAMILIES} | {
    "Breath"
}
STAT_MOD_FIELDS = ("stat_mods", "attacker_stat_mods", "defender_stat_mods")


class SkillsRepository(RepositoryBase[tuple[str, str], SkillDef]):
    """Loads the skill catalog, grouped by skill type in the JSON file."""

    def __init__(self, base_path=None) -> None:
        super().__init__("skills.json", base_path)
        self._by_name: Dict[str, SkillDef] | None = None

    def get_skill(self, skill_type: SkillType, name: str) -> SkillDef | None:
        return self._ensure_loaded().get((skill_type.value, name))

    def find_by_name(self, name: str) -> SkillDef | None:
        """Return the skill with this name, checking slot types in display order."""
        return self._name_index().get(name)

    def preload(self) -> None:
        """Load the catalog and build the by-name index."""
        self._name_index()

    def _name_index(self) -> Dict[str, SkillDef]:
        if self._by_name is None:
            by_name: Dict[str, SkillDef] = {}
            for skill_type in SkillType:
                for skill in self.of_type(skill_type):
                    by_name.setdefault(skill.name, skill)
            self._by_name = by_name
        return self._by_name

    def of_type(self, skill_type: SkillType) -> list[SkillDef]:
        return [skill for skill in self.all() if skill.type is skill_type]

    def _build(self, raw: dict[str, object]) -> Dict[tuple[str, str], SkillDef]:
        skills: Dict[tuple[str, str], SkillDef] = {}
        for type_key, entries in raw.items():
            skill_type = SkillType(self._require_literal(type_key, VALID_SKILL_TYPES, "skill type"))
            type_entries = self._require_mapping(entries, f"skills[{type_key}]")
            for name, payload in type_entries.items():
                context = f"{type_key} skill '{name}'"
                skill_data = self._require_mapping(payload, context)
                self._assert_exact_fields(
                    skill_data,
                    {"effect"},
                    context,
                    optional_fields={
                        "weapon_type",
                        "inherit_restriction",
                        "exclusive",
                        "rarity",
                        "hp_requirement",
                        *STAT_MOD_FIELDS,
                    },
                )
                weapon_type = skill_data.get("weapon_type")
                if weapon_type is not None:
                    weapon_type = self._require_literal(
                        weapon_type, VALID_SKILL_WEAPON_TYPES, f"{context} weapon_type"
                    )
                restriction = skill_data.get("inherit_restriction")
                if restriction is not None:
                    restriction = self._require_str(restriction, f"{context} inherit_restriction")
                exclusive = skill_data.get("exclusive", False)
                if not isinstance(exclusive, bool):
                    raise DataValidationError(f"{context} exclusive must be a boolean.")
                hp_requirement = skill_data.get("hp_requirement")
                if hp_requirement is not None:
                    hp_requirement = self._require_int(hp_requirement, f"{context} hp_requirement")

                skills[(skill_type.value, name)] = SkillDef(
                    name=name,
                    type=skill_type,
                    effect=self._require_str(skill_data["effect"], f"{context} effect"),
                    weapon_type=weapon_type,
                    inherit_restriction=restriction,
                    exclusive=exclusive,
                    rarity=self._parse_rarity(skill_data.get("rarity"), f"{context} rarity"),
                    stat_mods=self._build_stat_mods(skill_data.get("stat_mods"), f"{context} stat_mods"),
                    attacker_stat_mods=self._build_stat_mods(
                        skill_data.get("attacker_stat_mods"), f"{context} attacker_stat_mods"
                    ),
                    defender_stat_mods=self._build_stat_mods(
                        skill_data.get("defender_stat_mods"), f"{context} defender_stat_mods"
                    ),
                    hp_requirement=hp_requirement,
                )
        self._by_name = None
        return skills

    def _build_stat_mods(self, value: object, context: str) -> dict[StatKey, int]:
        if value is None:
            return {}
        mods = self._require_mapping(value, context)
        unknown = set(mods) - set(STAT_KEYS)
        if unknown:
            raise DataValidationError(f"{context} unknown stats: {sorted(unknown)}")
        return {stat: self._require_int(mods[stat], f"{context}.{stat}") for stat in STAT_KEYS if stat in mods}
