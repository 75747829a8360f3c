"""
Mood, scenario, composition and lighting selection.

Each block scores `tag_score + profile_score`:

- tag_score: +5 for every entry of the dimension's tag list (raw keywords plus
  the profile fields that dimension listens to) found in the block's tags.
  Repeated entries count again.
- profile_score: the hand-tuned bonus tables below plus +1 for every raw keyword
  that is a substring of one of the block's keywords or contains one.

The bonus tables are kept exactly as tuned; prompt quality downstream depends
on these weights.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import Any

from creative_direction.framework.selection import DimensionSelection, select_override, select_ranked
from creative_direction.framework.types import (
    CompositionBlock,
    LightingBlock,
    MoodBlock,
    ScenarioBlock,
    SemanticProfile,
)
from creative_direction.library._catalog import Catalog
from creative_direction.library.composition import COMPOSITION_CATALOG
from creative_direction.library.lighting import LIGHTING_CATALOG
from creative_direction.library.mood import MOOD_CATALOG
from creative_direction.library.scenario import SCENARIO_CATALOG

TAG_MATCH_POINTS = 5
KEYWORD_MATCH_POINTS = 1

# Lowest winning score trusted for mood, scenario and composition.
MIN_SCORE = 1
# Below this the scenario context rule picks the lighting instead.
LIGHTING_MIN_SCORE = 5

DEFAULT_LIGHTING_KEY = "window-natural"

# (profile value, block key) -> bonus, applied once per matching energy/aesthetic entry.
MOOD_ENERGY_BONUS: dict[tuple[str, str], int] = {
    ("mysterious", "moody-night-energy"): 3,
    ("dramatic", "cinematic-luxury"): 3,
    ("confident", "power-woman-energy"): 3,
    ("playful", "instagram-glossy"): 2,
    ("calm", "nordic-clean"): 2,
    ("romantic", "romantic-warm"): 3,
}

MOOD_AESTHETIC_BONUS: dict[tuple[str, str], int] = {
    ("editorial", "editorial-high-fashion"): 3,
    ("moody", "moody-night-energy"): 3,
    ("cinematic", "cinematic-luxury"): 3,
    ("clean-minimal", "nordic-clean"): 3,
    ("luxury", "cinematic-luxury"): 2,
    ("glossy", "instagram-glossy"): 3,
    ("candid", "candid-lifestyle"): 3,
}

SCENARIO_CORE_SCENE_BONUS = 5

# (environment, key fragment, exact) -> +3 once if any row matches.
SCENARIO_ENVIRONMENT_RULES: tuple[tuple[str, str, bool], ...] = (
    ("cozy-interior", "bedroom", False),
    ("luxury-suite", "luxury-interior", True),
    ("outdoors-urban", "rooftop", False),
    ("modern-fitness", "gym", False),
)
SCENARIO_ENVIRONMENT_BONUS = 3

COMPOSITION_ENVIRONMENT_BONUS: dict[tuple[str, str], int] = {
    ("indoors-metal", "symmetrical"): 2,
    ("vehicle-interior", "close-up-beauty"): 2,
}

COMPOSITION_ENERGY_BONUS: dict[tuple[str, str], int] = {
    ("confident", "center-power-pose"): 2,
    ("dramatic", "cinematic-wide"): 2,
}

LIGHTING_TIME_BONUS: dict[tuple[str, str], int] = {
    ("night", "cinematic-edge"): 3,
    ("golden-hour", "golden-hour"): 3,
    ("morning", "window-natural"): 2,
    ("dusk", "soft-dusk"): 3,
}

LIGHTING_ENERGY_BONUS: dict[tuple[str, str], int] = {
    ("mysterious", "rembrandt"): 2,
    ("dramatic", "cinematic-edge"): 2,
}

# Scenarios whose own light source should win over a weak lighting score.
LIGHTING_CONTEXT_FALLBACKS: dict[str, str] = {
    "elevator-scene": "elevator-panel-light",
    "nightclub-neon": "neon-rim-light",
    "hotel-bathroom-vanity": "hotel-vanity-soft",
    "beauty-studio-vanity": "beauty-dish",
    "boutique-store": "boutique-warm",
}


def tag_score(block_tags: Iterable[str], tags: Sequence[str]) -> int:
    lookup = frozenset(block_tags)
    return sum(TAG_MATCH_POINTS for tag in tags if tag in lookup)


def score_with_tags(catalog: Catalog[Any], block_key: str, tags: Sequence[str]) -> int:
    """Tag-only score for a catalog key; unknown keys score 0."""

    if block_key not in catalog:
        return 0
    return tag_score(catalog[block_key].tags, tags)


def keyword_fallback_score(block_keywords: Sequence[str], keywords: Sequence[str]) -> int:
    return sum(
        KEYWORD_MATCH_POINTS
        for kw in keywords
        if any(bkw in kw or kw in bkw for bkw in block_keywords)
    )


def _pair_bonus(table: dict[tuple[str, str], int], values: Iterable[str], key: str) -> int:
    return sum(table.get((value, key), 0) for value in values)


def mood_tags(profile: SemanticProfile) -> list[str]:
    return [*profile.raw_keywords, *profile.energy, *profile.aesthetic]


def scenario_tags(profile: SemanticProfile) -> list[str]:
    return [tag for tag in (*profile.raw_keywords, profile.core_scene, profile.environment) if tag]


def composition_tags(profile: SemanticProfile) -> list[str]:
    return [*profile.raw_keywords, *profile.energy]


def lighting_tags(profile: SemanticProfile) -> list[str]:
    return [tag for tag in (*profile.raw_keywords, profile.time_of_day, *profile.energy) if tag]


def mood_profile_score(key: str, block: MoodBlock, profile: SemanticProfile) -> int:
    score = _pair_bonus(MOOD_ENERGY_BONUS, profile.energy, key)
    score += _pair_bonus(MOOD_AESTHETIC_BONUS, profile.aesthetic, key)
    return score + keyword_fallback_score(block.keywords, profile.raw_keywords)


def scenario_profile_score(key: str, block: ScenarioBlock, profile: SemanticProfile) -> int:
    score = 0
    if profile.core_scene and profile.core_scene in key:
        score += SCENARIO_CORE_SCENE_BONUS
    for environment, fragment, exact in SCENARIO_ENVIRONMENT_RULES:
        if profile.environment == environment and (key == fragment if exact else fragment in key):
            score += SCENARIO_ENVIRONMENT_BONUS
            break
    return score + keyword_fallback_score(block.keywords, profile.raw_keywords)


def composition_profile_score(key: str, block: CompositionBlock, profile: SemanticProfile) -> int:
    score = COMPOSITION_ENVIRONMENT_BONUS.get((profile.environment, key), 0)
    # Membership, not multiplicity: one bonus per distinct energy.
    score += _pair_bonus(COMPOSITION_ENERGY_BONUS, set(profile.energy), key)
    return score + keyword_fallback_score(block.keywords, profile.raw_keywords)


def lighting_profile_score(key: str, block: LightingBlock, profile: SemanticProfile) -> int:
    score = LIGHTING_TIME_BONUS.get((profile.time_of_day, key), 0)
    score += _pair_bonus(LIGHTING_ENERGY_BONUS, set(profile.energy), key)
    return score + keyword_fallback_score(block.keywords, profile.raw_keywords)


def score_mood(key: str, block: MoodBlock, profile: SemanticProfile) -> int:
    return tag_score(block.tags, mood_tags(profile)) + mood_profile_score(key, block, profile)


def score_scenario(key: str, block: ScenarioBlock, profile: SemanticProfile) -> int:
    return tag_score(block.tags, scenario_tags(profile)) + scenario_profile_score(key, block, profile)


def score_composition(key: str, block: CompositionBlock, profile: SemanticProfile) -> int:
    return tag_score(block.tags, composition_tags(profile)) + composition_profile_score(
        key, block, profile
    )


def score_lighting(key: str, block: LightingBlock, profile: SemanticProfile) -> int:
    return tag_score(block.tags, lighting_tags(profile)) + lighting_profile_score(key, block, profile)


def _log_selection(logger: logging.Logger | None, selection: DimensionSelection[Any]) -> None:
    if not logger:
        return
    top = ", ".join(f"{row['key']}={row['score']}" for row in selection.score_table[:5])
    logger.debug(
        "%s -> %s (score=%s mode=%s) top: %s",
        selection.dimension,
        selection.key,
        selection.score,
        selection.mode,
        top or "-",
    )


def select_mood(
    profile: SemanticProfile,
    *,
    override: str | None = None,
    preferred: str | None = None,
    logger: logging.Logger | None = None,
) -> DimensionSelection[MoodBlock]:
    """Pick a mood; a recognised `preferred` mood replaces the default when nothing scores."""

    if override:
        selection = select_override(MOOD_CATALOG, override)
    else:
        fallback_key = None
        if preferred and MOOD_CATALOG.resolve_key(preferred) != MOOD_CATALOG.default_key:
            fallback_key = preferred
        selection = select_ranked(
            MOOD_CATALOG,
            lambda key, block: score_mood(key, block, profile),
            min_score=MIN_SCORE,
            fallback_key=fallback_key,
        )
    _log_selection(logger, selection)
    return selection


def select_scenario(
    profile: SemanticProfile,
    *,
    override: str | None = None,
    logger: logging.Logger | None = None,
) -> DimensionSelection[ScenarioBlock]:
    if override:
        selection = select_override(SCENARIO_CATALOG, override)
    else:
        selection = select_ranked(
            SCENARIO_CATALOG,
            lambda key, block: score_scenario(key, block, profile),
            min_score=MIN_SCORE,
        )
    _log_selection(logger, selection)
    return selection


def select_composition(
    profile: SemanticProfile,
    *,
    override: str | None = None,
    logger: logging.Logger | None = None,
) -> DimensionSelection[CompositionBlock]:
    if override:
        selection = select_override(COMPOSITION_CATALOG, override)
    else:
        selection = select_ranked(
            COMPOSITION_CATALOG,
            lambda key, block: score_composition(key, block, profile),
            min_score=MIN_SCORE,
        )
    _log_selection(logger, selection)
    return selection


def context_lighting_key(scenario_key: str | None) -> str:
    return LIGHTING_CONTEXT_FALLBACKS.get(scenario_key or "", DEFAULT_LIGHTING_KEY)


def select_lighting(
    profile: SemanticProfile,
    *,
    scenario_key: str | None = None,
    override: str | None = None,
    logger: logging.Logger | None = None,
) -> DimensionSelection[LightingBlock]:
    """
    Pick lighting. Scores under LIGHTING_MIN_SCORE hand over to the scenario's
    context rule; an all-zero table always yields window-natural.
    """

    if override:
        selection = select_override(LIGHTING_CATALOG, override)
        _log_selection(logger, selection)
        return selection

    scores = {key: score_lighting(key, block, profile) for key, block in LIGHTING_CATALOG.items()}
    fallback_key = context_lighting_key(scenario_key) if any(scores.values()) else DEFAULT_LIGHTING_KEY
    selection = select_ranked(
        LIGHTING_CATALOG,
        lambda key, block: scores[key],
        min_score=LIGHTING_MIN_SCORE,
        fallback_key=fallback_key,
    )
    _log_selection(logger, selection)
    return selection
