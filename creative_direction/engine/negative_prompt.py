from __future__ import annotations

from collections.abc import Mapping

from creative_direction.framework.types import NegativePromptSet
from creative_direction.library._catalog import normalize_key
from creative_direction.library.negatives import (
    BASE_NEGATIVES,
    FALLBACK_SCENE_KEY,
    MOOD_NEGATIVES,
    SCENE_NEGATIVES,
)


def _matching_terms(table: Mapping[str, tuple[str, ...]], name: str) -> list[str]:
    if not name:
        return []
    return [term for key, terms in table.items() if key in name for term in terms]


def compose(composition_name: str | None, mood_name: str | None) -> NegativePromptSet:
    """
    Base negatives plus the scene and mood terms keyed on the two block names.

    When neither table matches, the "portrait" scene terms are used. Context
    terms are deduplicated in first-seen order; the base list is never reduced.
    """

    scene_terms = _matching_terms(SCENE_NEGATIVES, normalize_key(composition_name or ""))
    mood_terms = _matching_terms(MOOD_NEGATIVES, normalize_key(mood_name or ""))

    context = [*scene_terms, *mood_terms]
    if not context:
        context = list(SCENE_NEGATIVES[FALLBACK_SCENE_KEY])

    return NegativePromptSet(
        base=BASE_NEGATIVES,
        context_specific=tuple(dict.fromkeys(context)),
    )
