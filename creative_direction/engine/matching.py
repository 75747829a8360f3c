"""Substring matching and candidate pooling shared by the pose and fashion selectors."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

from creative_direction.framework.config import DimensionRepetitionPolicy
from creative_direction.framework.memory import AntiRepetitionMemory
from creative_direction.library._catalog import Catalog


def overlaps(left: str, right: str) -> bool:
    """Case-insensitive substring match in either direction; empty strings never match."""

    left, right = left.strip().lower(), right.strip().lower()
    if not left or not right:
        return False
    return left in right or right in left


def affinity_matches(affinities: Iterable[str], scenario_name: str) -> bool:
    return any(overlaps(affinity, scenario_name) for affinity in affinities)


def keyword_overlap_count(keywords: Sequence[str], candidates: Iterable[str]) -> int:
    """Number of `keywords` that overlap at least one candidate string."""

    pool = tuple(candidates)
    return sum(1 for kw in keywords if any(overlaps(kw, candidate) for candidate in pool))


def windowed_memory(
    memory: AntiRepetitionMemory | None,
    policy: DimensionRepetitionPolicy | None,
) -> AntiRepetitionMemory | None:
    """The memory resized to the policy window, or None when the policy is off."""

    if memory is None or policy is None or not policy.enabled:
        return None
    return memory.with_limit(policy.window)


def candidate_keys(catalog: Catalog[Any], memory: AntiRepetitionMemory | None) -> list[str]:
    """Catalog keys minus recent picks; the full catalog when exclusion would empty it."""

    keys = list(catalog.keys())
    if memory is None:
        return keys
    pool = [key for key in keys if not memory.excludes(key)]
    return pool or keys
