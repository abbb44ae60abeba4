"""Merge bonus distribution helpers."""
from __future__ import annotations

from functools import lru_cache
from typing import Mapping, Sequence

from herocalc.core.types import StatKey
from herocalc.domain.hero_types import STAT_KEYS

STATS_PER_MERGE = 2


@lru_cache(maxsize=1024)
def _priority_for_snapshot(level1_values: tuple[int, ...]) -> tuple[StatKey, ...]:
    ranked = sorted(range(len(STAT_KEYS)), key=lambda index: (-level1_values[index], index))
    return tuple(STAT_KEYS[index] for index in ranked)


def merge_priority(level1_stats: Mapping[StatKey, int]) -> tuple[StatKey, ...]:
    """Order stats by descending level 1 value, ties broken by hp/atk/spd/def/res."""
    return _priority_for_snapshot(tuple(level1_stats[stat] for stat in STAT_KEYS))


def merge_bonus_at(merge_level: int, position: int) -> int:
    total = STATS_PER_MERGE * merge_level
    base, remainder = divmod(total, len(STAT_KEYS))
    return base + (1 if remainder > position else 0)


def distribute_merge_bonus(merge_level: int, priority: Sequence[StatKey]) -> dict[StatKey, int]:
    """Return the bonus each stat receives; the values always sum to 2 * merge_level."""
    return {stat: merge_bonus_at(merge_level, position) for position, stat in enumerate(priority)}
