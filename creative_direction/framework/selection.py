from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from creative_direction.library._catalog import Catalog

B = TypeVar("B")

SELECTION_MODES = ("scored", "override", "default", "fallback")


@dataclass(frozen=True)
class DimensionSelection(Generic[B]):
    """Chosen block for one dimension plus the score table that picked it.

    `mode` is one of:
    - "scored": top of the ranked table
    - "override": caller named the block; no scoring ran
    - "default": top score under the threshold, dimension default used
    - "fallback": top score under the threshold, a context rule chose the block
    """

    dimension: str
    key: str
    block: B
    score: int
    mode: str
    score_table: tuple[dict[str, Any], ...] = ()

    @property
    def overridden(self) -> bool:
        return self.mode == "override"

    def to_dict(self) -> dict[str, Any]:
        return {
            "dimension": self.dimension,
            "key": self.key,
            "score": self.score,
            "mode": self.mode,
            "score_table": [dict(row) for row in self.score_table],
        }


def rank_scores(scores: list[tuple[str, int]]) -> list[dict[str, Any]]:
    """Sort (key, score) pairs by score, highest first.

    `list.sort` is stable, so equal scores keep the caller's order; callers
    pass catalog declaration order.
    """

    table = [{"key": key, "score": int(score)} for key, score in scores]
    table.sort(key=lambda row: -row["score"])
    return table


def select_ranked(
    catalog: Catalog[B],
    scorer: Callable[[str, B], int],
    *,
    min_score: int = 1,
    fallback_key: str | None = None,
) -> DimensionSelection[B]:
    """Score every block in `catalog` and pick the winner.

    When the winning score is below `min_score` the `fallback_key` block is used
    if given, else the catalog default.
    """

    table = rank_scores([(key, scorer(key, block)) for key, block in catalog.items()])
    top = table[0]
    if top["score"] >= min_score:
        key = str(top["key"])
        mode = "scored"
    elif fallback_key is not None:
        key = catalog.resolve_key(fallback_key)
        mode = "fallback"
    else:
        key = catalog.default_key
        mode = "default"

    score = next(int(row["score"]) for row in table if row["key"] == key)
    return DimensionSelection(
        dimension=catalog.dimension,
        key=key,
        block=catalog[key],
        score=score,
        mode=mode,
        score_table=tuple(table),
    )


def select_override(catalog: Catalog[B], name: str) -> DimensionSelection[B]:
    """Resolve a caller-supplied block name; unknown names resolve to the default."""

    key = catalog.resolve_key(name)
    return DimensionSelection(
        dimension=catalog.dimension,
        key=key,
        block=catalog[key],
        score=0,
        mode="override",
    )
