from __future__ import annotations

import logging
from pathlib import Path

import pytest

from herocalc.domain.entities import HeroInstance
from herocalc.domain.hero_types import STAT_KEYS, SkillType
from herocalc.domain.merge_bonus import distribute_merge_bonus, merge_priority
from herocalc.services import InvalidInstanceError, MissingStatError
from tests.helpers.definitions import make_context


def test_boon_selects_high_variant_at_level_40(tmp_path: Path) -> None:
    context = make_context(tmp_path, with_skill_bonuses=False)
    instance = HeroInstance(name="Anna", rarity=5, boon="atk", bane="spd")
    assert context.stats.get_stat(instance, "atk", 40) == 34
    assert context.stats.get_stat(instance, "spd", 40) == 35
    assert context.stats.get_stat(instance, "def", 40) == 22


def test_level_1_adjusts_boon_and_bane_by_one(tmp_path: Path) -> None:
    context = make_context(tmp_path)
    instance = HeroInstance(name="Anna", boon="hp", bane="res", merge_level=10)
    instance.equip(SkillType.WEAPON, "Silver Axe")
    assert context.stats.get_level1_stats(instance) == {"hp": 20, "atk": 7, "spd": 8, "def": 5, "res": 5}


def test_single_value_cell_is_the_normal_variant(tmp_path: Path) -> None:
    context = make_context(tmp_path, with_skill_bonuses=False)
    instance = HeroInstance(name="Ursula", rarity=4)
    assert context.stats.get_stat(instance, "spd") == 31


def test_single_value_cell_has_no_variants(tmp_path: Path) -> None:
    context = make_context(tmp_path, with_skill_bonuses=False)
    instance = HeroInstance(name="Ursula", rarity=4, boon="spd")
    with pytest.raises(MissingStatError):
        context.stats.get_stat(instance, "spd")
    assert context.stats.get_stat(instance, "atk") == 29


def test_missing_rarity_raises(tmp_path: Path) -> None:
    context = make_context(tmp_path)
    instance = HeroInstance(name="Priscilla", rarity=5)
    with pytest.raises(MissingStatError):
        context.stats.get_stat(instance, "hp")
    with pytest.raises(MissingStatError):
        context.stats.get_stat(instance, "hp", 1)


def test_unsupported_level_raises(tmp_path: Path) -> None:
    context = make_context(tmp_path)
    with pytest.raises(ValueError):
        context.stats.get_stat(HeroInstance(name="Anna"), "hp", 20)


def test_boon_equal_to_bane_is_rejected_at_resolution(tmp_path: Path) -> None:
    context = make_context(tmp_path)
    instance = HeroInstance(name="Anna", boon="atk")
    instance.bane = "atk"
    with pytest.raises(InvalidInstanceError):
        context.stats.get_stat(instance, "hp")


def test_merge_priority_orders_by_level_1_stats(tmp_path: Path) -> None:
    context = make_context(tmp_path)
    instance = HeroInstance(name="Anna")
    # Level 1: hp 19, atk 7, spd 8, def 5, res 6
    assert context.stats.merge_priority(instance) == ("hp", "spd", "atk", "res", "def")


def test_merge_priority_breaks_ties_in_stat_order(tmp_path: Path) -> None:
    context = make_context(tmp_path)
    assert context.stats.merge_priority(HeroInstance(name="Even")) == STAT_KEYS
    boosted = HeroInstance(name="Even", boon="res", bane="hp")
    assert context.stats.merge_priority(boosted) == ("res", "atk", "spd", "def", "hp")


def test_merge_bonus_goes_to_highest_stats_first(tmp_path: Path) -> None:
    context = make_context(tmp_path, with_skill_bonuses=False)
    instance = HeroInstance(name="Anna", merge_level=1)
    assert context.stats.merge_bonuses(instance) == {"hp": 1, "spd": 1, "atk": 0, "res": 0, "def": 0}
    assert context.stats.get_stat(instance, "hp") == 42
    assert context.stats.get_stat(instance, "atk") == 32

    instance.merge_level = 3
    assert context.stats.merge_bonuses(instance) == {"hp": 2, "spd": 1, "atk": 1, "res": 1, "def": 1}


@pytest.mark.parametrize("merge_level", range(0, 11))
def test_merge_bonuses_sum_to_two_per_merge(tmp_path: Path, merge_level: int) -> None:
    context = make_context(tmp_path)
    for name in ("Anna", "Caeda", "Even"):
        instance = HeroInstance(name=name, merge_level=merge_level, boon="def", bane="atk")
        assert sum(context.stats.merge_bonuses(instance).values()) == 2 * merge_level


def test_merge_priority_memo_is_keyed_on_values() -> None:
    first = merge_priority({"hp": 1, "atk": 5, "spd": 5, "def": 2, "res": 3})
    second = merge_priority({"res": 3, "def": 2, "spd": 5, "atk": 5, "hp": 1})
    assert first is second
    assert distribute_merge_bonus(10, first) == {"atk": 4, "spd": 4, "res": 4, "def": 4, "hp": 4}


def test_weapon_seal_and_passive_bonuses_are_added(tmp_path: Path) -> None:
    context = make_context(tmp_path)
    instance = HeroInstance(name="Anna")
    instance.equip(SkillType.WEAPON, "Brave Axe+")
    instance.equip(SkillType.PASSIVE_A, "Fury 3")
    instance.equip(SkillType.SEAL, "Attack +1")
    instance.equip(SkillType.PASSIVE_B, "Vantage 3")
    assert context.stats.get_stat(instance, "atk") == 32 + 8 + 3 + 1
    assert context.stats.get_stat(instance, "spd") == 38 - 5 + 3


def test_attacker_and_defender_bonuses_depend_on_initiator(tmp_path: Path) -> None:
    context = make_context(tmp_path)
    blow = HeroInstance(name="Anna")
    blow.equip(SkillType.PASSIVE_A, "Death Blow 3")
    assert context.stats.get_stat(blow, "atk", is_attacker=True) == 38
    assert context.stats.get_stat(blow, "atk", is_attacker=False) == 32

    stance = HeroInstance(name="Anna")
    stance.equip(SkillType.PASSIVE_A, "Steady Stance 3")
    assert context.stats.get_stat(stance, "def", is_attacker=True) == 22
    assert context.stats.get_stat(stance, "def", is_attacker=False) == 28


def test_unknown_equipped_skill_adds_nothing(tmp_path: Path) -> None:
    context = make_context(tmp_path)
    instance = HeroInstance(name="Anna")
    instance.equip(SkillType.WEAPON, "Homebrew Axe")
    assert context.stats.get_stat(instance, "atk") == 32


def test_get_stats_returns_all_five(tmp_path: Path) -> None:
    context = make_context(tmp_path, with_skill_bonuses=False)
    stats = context.stats.get_stats(HeroInstance(name="Caeda"))
    assert stats == {"hp": 36, "atk": 25, "spd": 37, "def": 17, "res": 33}


def test_get_stats_resolves_the_hero_once(tmp_path: Path, monkeypatch) -> None:
    context = make_context(tmp_path, with_skill_bonuses=False)
    calls: list[str] = []
    lookup = context.heroes_repo.lookup

    def counting_lookup(name: str):
        calls.append(name)
        return lookup(name)

    monkeypatch.setattr(context.heroes_repo, "lookup", counting_lookup)
    context.stats.get_stats(HeroInstance(name="Anna", merge_level=3))
    assert calls == ["Anna"]


def test_unknown_hero_fallback_is_logged_once(tmp_path: Path, caplog) -> None:
    context = make_context(tmp_path, with_skill_bonuses=False)
    with caplog.at_level(logging.WARNING):
        stats = context.stats.get_stats(HeroInstance(name="Marth", merge_level=1))
        context.stats.get_stat(HeroInstance(name="Marth"), "atk")

    warnings = [record for record in caplog.records if "Marth" in record.getMessage()]
    assert len(warnings) == 1
    assert stats == context.stats.get_stats(HeroInstance(name="Anna", merge_level=1))
