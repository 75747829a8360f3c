from __future__ import annotations

import logging
from collections.abc import Sequence

from creative_direction.engine.matching import (
    affinity_matches,
    candidate_keys,
    keyword_overlap_count,
    windowed_memory,
)
from creative_direction.framework.config import DimensionRepetitionPolicy
from creative_direction.framework.memory import AntiRepetitionMemory
from creative_direction.framework.selection import DimensionSelection, rank_scores, select_override
from creative_direction.framework.types import FashionBlock
from creative_direction.library.fashion import FASHION_CATALOG

AFFINITY_POINTS = 5
KEYWORD_OVERLAP_POINTS = 2
PALETTE_POINTS = 3


def palette_matches(palette: Sequence[str], block_palette: str) -> bool:
    description = block_palette.lower()
    return any(color.strip() and color.strip().lower() in description for color in palette)


def score_fashion(
    block: FashionBlock,
    scenario_name: str,
    keywords: Sequence[str],
    palette: Sequence[str] = (),
) -> int:
    score = AFFINITY_POINTS if affinity_matches(block.scenario_affinity, scenario_name) else 0
    score += KEYWORD_OVERLAP_POINTS * keyword_overlap_count(keywords, block.wardrobe_keywords)
    score += KEYWORD_OVERLAP_POINTS * keyword_overlap_count(keywords, block.scenario_affinity)
    if palette_matches(palette, block.palette):
        score += PALETTE_POINTS
    return score


def _remember(
    memory: AntiRepetitionMemory | None, active: AntiRepetitionMemory | None, key: str
) -> AntiRepetitionMemory | None:
    return active.remember(key) if active is not None else memory


def select_fashion(
    scenario_name: str,
    keywords: Sequence[str],
    palette: Sequence[str] = (),
    *,
    memory: AntiRepetitionMemory | None = None,
    policy: DimensionRepetitionPolicy | None = None,
    logger: logging.Logger | None = None,
) -> tuple[DimensionSelection[FashionBlock], AntiRepetitionMemory | None]:
    """
    Pick a wardrobe category, skipping the ones in `memory`.

    The winner is appended to the returned memory, which keeps only the last
    `policy.window` categories. When every category is in memory the whole
    catalog competes again for this call.
    """

    active = windowed_memory(memory, policy)
    pool = candidate_keys(FASHION_CATALOG, active)
    table = rank_scores(
        [
            (key, score_fashion(FASHION_CATALOG[key], scenario_name, keywords, palette))
            for key in pool
        ]
    )
    top = table[0]
    key = str(top["key"])
    selection = DimensionSelection(
        dimension="fashion",
        key=key,
        block=FASHION_CATALOG[key],
        score=int(top["score"]),
        mode="scored",
        score_table=tuple(table),
    )
    if logger:
        logger.debug(
            "fashion -> %s (score=%s pool=%d excluded=%d)",
            key,
            selection.score,
            len(pool),
            len(FASHION_CATALOG) - len(pool),
        )
    return selection, _remember(memory, active, key)


def override_fashion(
    outfit: str,
    *,
    memory: AntiRepetitionMemory | None = None,
    policy: DimensionRepetitionPolicy | None = None,
) -> tuple[DimensionSelection[FashionBlock], AntiRepetitionMemory | None]:
    """Use the caller's outfit category; it still counts as a recent pick."""

    selection = select_override(FASHION_CATALOG, outfit)
    return selection, _remember(memory, windowed_memory(memory, policy), selection.key)
