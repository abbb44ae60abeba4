from __future__ import annotations

from pathlib import Path

import pytest

from herocalc.domain.entities import HeroInstance
from herocalc.domain.hero_types import SkillType
from herocalc.services import CalculatorContext, UnknownRestrictionError
from herocalc.services.factories import create_hero_instance
from tests.helpers.definitions import FIXTURE_HEROES, make_context


def test_default_skills_cover_every_slot(tmp_path: Path) -> None:
    context = make_context(tmp_path)
    for name in FIXTURE_HEROES:
        defaults = context.skills.get_default_skills(name, 5)
        assert set(defaults) == set(SkillType)


def test_default_skills_respect_rarity_gate(tmp_path: Path) -> None:
    context = make_context(tmp_path)

    five_star = context.skills.get_default_skills("Anna", 5)
    assert five_star[SkillType.WEAPON] == "Nóatún"
    assert five_star[SkillType.PASSIVE_B] == "Vantage 3"
    assert five_star[SkillType.PASSIVE_C] == "Spur Res 3"
    assert five_star[SkillType.ASSIST] is None

    four_star = context.skills.get_default_skills("Anna", 4)
    assert four_star[SkillType.WEAPON] == "Silver Axe"
    assert four_star[SkillType.PASSIVE_B] is None

    assert context.skills.get_default_skills("Anna", 1)[SkillType.WEAPON] == "Iron Axe"


def test_inheritable_skills_sorted_and_unique(tmp_path: Path) -> None:
    context = make_context(tmp_path)
    for name in FIXTURE_HEROES:
        for skill_type in SkillType:
            names = [skill.name for skill in context.skills.get_inheritable_skills(name, skill_type)]
            assert names == sorted(names)
            assert len(names) == len(set(names))


def test_inheritable_weapons_include_native_exclusive_weapon(tmp_path: Path) -> None:
    context = make_context(tmp_path)
    names = [skill.name for skill in context.skills.get_inheritable_skills("Anna", SkillType.WEAPON)]
    assert names == ["Brave Axe+", "Iron Axe", "Nóatún", "Silver Axe"]


def test_inheritable_weapons_for_beast_use_breath(tmp_path: Path) -> None:
    context = make_context(tmp_path)
    names = [skill.name for skill in context.skills.get_inheritable_skills("Velouria", SkillType.WEAPON)]
    assert names == ["Fire Breath"]


def test_inheritable_passives_apply_restrictions(tmp_path: Path) -> None:
    context = make_context(tmp_path)
    anna_b = {skill.name for skill in context.skills.get_inheritable_skills("Anna", SkillType.PASSIVE_B)}
    assert "Axe Experience 3" in anna_b
    assert "Flier Formation 3" not in anna_b
    assert "Wary Fighter 3" not in anna_b
    assert "Mystery Rune" in anna_b

    caeda_c = {skill.name for skill in context.skills.get_inheritable_skills("Caeda", SkillType.PASSIVE_C)}
    assert "Hone Fliers" in caeda_c
    assert "Savage Blow 3" not in caeda_c
    assert "Hero's Legacy" not in caeda_c


def test_unknown_restrictions_are_recorded(tmp_path: Path) -> None:
    context = make_context(tmp_path)
    context.skills.get_inheritable_skills("Anna", SkillType.PASSIVE_B)
    assert context.skills.unknown_restrictions == frozenset({"Dragons Only"})


def test_strict_mode_raises_on_unknown_restriction(tmp_path: Path) -> None:
    context = make_context(tmp_path, strict_restrictions=True)
    with pytest.raises(UnknownRestrictionError):
        context.skills.get_inheritable_skills("Anna", SkillType.PASSIVE_B)
    assert context.skills.get_inheritable_skills("Anna", SkillType.PASSIVE_C)


def test_unknown_hero_uses_fallback(tmp_path: Path) -> None:
    context = make_context(tmp_path)
    assert context.skills.get_default_skills("Nobody") == context.skills.get_default_skills("Anna")


def test_default_skills_are_inheritable(tmp_path: Path) -> None:
    context = make_context(tmp_path)
    for name in FIXTURE_HEROES:
        for rarity in range(1, 6):
            defaults = context.skills.get_default_skills(name, rarity)
            for skill_type, skill_name in defaults.items():
                if not skill_name:
                    continue
                inheritable = {skill.name for skill in context.skills.get_inheritable_skills(name, skill_type)}
                assert skill_name in inheritable


def test_update_rarity_swaps_defaults_and_keeps_custom_choices(tmp_path: Path) -> None:
    context = make_context(tmp_path)
    instance = create_hero_instance("Anna", context.skills, rarity=4)
    assert instance.skills[SkillType.WEAPON] == "Silver Axe"
    instance.equip(SkillType.PASSIVE_A, "Death Blow 3")
    instance.equip(SkillType.PASSIVE_C, "Savage Blow 3")

    context.skills.update_rarity(instance, 5)

    assert instance.rarity == 5
    assert instance.skills[SkillType.WEAPON] == "Nóatún"
    assert instance.skills[SkillType.PASSIVE_B] == "Vantage 3"
    assert instance.skills[SkillType.PASSIVE_A] == "Death Blow 3"
    assert instance.skills[SkillType.PASSIVE_C] == "Savage Blow 3"


def test_update_rarity_is_idempotent(tmp_path: Path) -> None:
    context = make_context(tmp_path)
    once = create_hero_instance("Anna", context.skills, rarity=5)
    twice = create_hero_instance("Anna", context.skills, rarity=5)

    context.skills.update_rarity(once, 4)
    context.skills.update_rarity(twice, 4)
    context.skills.update_rarity(twice, 4)

    assert once == twice
    assert twice.skills[SkillType.WEAPON] == "Silver Axe"


def test_update_rarity_rejects_invalid_rarity(tmp_path: Path) -> None:
    context = make_context(tmp_path)
    instance = HeroInstance(name="Anna")
    with pytest.raises(ValueError):
        context.skills.update_rarity(instance, 6)
    assert instance.rarity == 5


def test_skill_name_and_effect_helpers(tmp_path: Path) -> None:
    context = make_context(tmp_path)
    instance = create_hero_instance("Anna", context.skills)
    assert context.skills.get_skill_name(instance, SkillType.WEAPON) == "Nóatún"
    assert context.skills.get_skill_effect(instance, SkillType.WEAPON) == "Warp when HP is low."
    assert context.skills.get_skill_name(instance, SkillType.ASSIST) == ""
    assert context.skills.get_skill_effect(instance, SkillType.ASSIST) == ""
    assert context.skills.get_skill_type("Spur Res 3") is SkillType.PASSIVE_C
    assert context.skills.get_skill_type("Missing Skill") is None


def test_shipped_definitions_satisfy_catalog_properties() -> None:
    context = CalculatorContext.from_definitions()
    for hero in context.heroes_repo.all():
        defaults = context.skills.get_default_skills(hero.name, 5)
        assert set(defaults) == set(SkillType)
        for skill_type in SkillType:
            names = [skill.name for skill in context.skills.get_inheritable_skills(hero.name, skill_type)]
            assert names == sorted(names)
            assert len(names) == len(set(names))
            if defaults[skill_type]:
                assert defaults[skill_type] in names
    assert context.skills.unknown_restrictions == frozenset()
