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
from creative_direction.framework.selection import DimensionSelection, rank_scores
from creative_direction.framework.types import PoseBlock
from creative_direction.library.pose import POSE_CATALOG

AFFINITY_POINTS = 5
KEYWORD_OVERLAP_POINTS = 2


def score_pose(block: PoseBlock, scenario_name: str, keywords: Sequence[str]) -> int:
    score = AFFINITY_POINTS if affinity_matches(block.scenario_affinity, scenario_name) else 0
    return score + KEYWORD_OVERLAP_POINTS * keyword_overlap_count(keywords, block.keywords)


def select_pose(
    scenario_name: str,
    keywords: Sequence[str],
    *,
    memory: AntiRepetitionMemory | None = None,
    policy: DimensionRepetitionPolicy | None = None,
    logger: logging.Logger | None = None,
) -> tuple[DimensionSelection[PoseBlock], AntiRepetitionMemory | None]:
    """
    Score every pose against the scenario and the brief's keywords.

    Returns the selection and the memory to carry forward. When every candidate
    scores 0 the catalog's default pose is used instead of the first-listed one.
    Memory is only consulted and extended when `policy.enabled`; otherwise it is
    returned untouched.
    """

    active = windowed_memory(memory, policy)
    pool = candidate_keys(POSE_CATALOG, active)
    table = rank_scores(
        [(key, score_pose(POSE_CATALOG[key], scenario_name, keywords)) for key in pool]
    )
    top = table[0]
    if top["score"] > 0:
        key, score, mode = str(top["key"]), int(top["score"]), "scored"
    else:
        key, score, mode = POSE_CATALOG.default_key, 0, "default"

    selection = DimensionSelection(
        dimension="pose",
        key=key,
        block=POSE_CATALOG[key],
        score=score,
        mode=mode,
        score_table=tuple(table),
    )
    if active is not None:
        memory = active.remember(key)

    if logger:
        logger.debug("pose -> %s (score=%s mode=%s pool=%d)", key, score, mode, len(pool))
    return selection, memory
