"""
Brief + user -> PromptResult.

The director is a pure function of its arguments: anti-repetition state comes in
through `history` and goes out on the result. Nothing is cached between calls.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from creative_direction.engine.assembler import assemble_parts
from creative_direction.engine.concept import analyze
from creative_direction.engine.fashion import override_fashion, select_fashion
from creative_direction.engine.identity_lock import build_identity_lock
from creative_direction.engine.negative_prompt import compose
from creative_direction.engine.pose import select_pose
from creative_direction.engine.scoring import (
    select_composition,
    select_lighting,
    select_mood,
    select_scenario,
)
from creative_direction.engine.style_blend import blend
from creative_direction.framework.config import EngineConfig
from creative_direction.framework.memory import SelectionHistory
from creative_direction.framework.records import PromptResult
from creative_direction.framework.types import (
    CompositionBlock,
    ConceptInput,
    FashionBlock,
    LightingBlock,
    MoodBlock,
    PoseBlock,
    PromptParts,
    ScenarioBlock,
    SemanticProfile,
    UserContext,
    extract_user_features,
)

DEFAULT_SUBJECT = "person"


def identity_part(user: UserContext) -> str:
    pieces = (user.trigger_word, user.gender or DEFAULT_SUBJECT, user.ethnicity)
    return ", ".join(piece.strip() for piece in pieces if piece and piece.strip())


def wardrobe_part(fashion: FashionBlock) -> str:
    return ", ".join((*fashion.wardrobe_keywords, *fashion.materials))


def composition_part(composition: CompositionBlock) -> str:
    return f"{composition.framing}; {composition.camera_height}"


def apply_emotional_tone(profile: SemanticProfile, tone: str | None) -> SemanticProfile:
    """An explicit emotional tone replaces the detected energy."""

    if not tone or not tone.strip():
        return profile
    return replace(profile, energy=(tone.strip().lower(),))


def build_explanation(
    mood: MoodBlock,
    scenario: ScenarioBlock,
    composition: CompositionBlock,
    lighting: LightingBlock,
    pose: PoseBlock,
    fashion: FashionBlock,
) -> str:
    lines = [
        "Creative direction for this concept:",
        "",
        f"Mood: {mood.name} - {mood.description}",
        f"The {mood.atmosphere} atmosphere creates {mood.energy} energy.",
        "",
        f"Scene: {scenario.name} - {scenario.description}",
        scenario.environment,
        "",
        f"Composition: {composition.name} - {composition.description}",
        composition.framing,
        "",
        f"Lighting: {lighting.name} - {lighting.description}",
        f"{lighting.angle}, creating {lighting.shadows}",
        "",
        f"Pose: {pose.name} - {pose.description}",
        f"Wardrobe: {', '.join(fashion.wardrobe_keywords)}",
        "",
        "Together these build one visual story that feels aspirational and authentic.",
    ]
    return "\n".join(lines)


def generate_prompt(
    user: UserContext,
    concept: ConceptInput,
    *,
    config: EngineConfig | None = None,
    history: SelectionHistory | None = None,
    logger: logging.Logger | None = None,
) -> PromptResult:
    """
    Select every dimension for `concept` and assemble the prompt pair.

    Never raises for any brief text or partial user; unknown override names
    resolve to the dimension default. The returned result carries the updated
    `history` for the caller to store.
    """

    cfg = config or EngineConfig()
    history = history or SelectionHistory()
    repetition = cfg.anti_repetition

    profile = apply_emotional_tone(analyze(concept.text, logger=logger), concept.emotional_tone)

    mood = select_mood(
        profile, override=concept.mood, preferred=user.preferred_mood, logger=logger
    )
    scenario = select_scenario(profile, override=concept.scenario, logger=logger)
    composition = select_composition(profile, override=concept.composition, logger=logger)
    lighting = select_lighting(
        profile, scenario_key=scenario.key, override=concept.lighting, logger=logger
    )

    pose, pose_memory = select_pose(
        scenario.key,
        profile.raw_keywords,
        memory=history.pose,
        policy=repetition.pose,
        logger=logger,
    )
    if concept.outfit:
        fashion, fashion_memory = override_fashion(
            concept.outfit, memory=history.fashion, policy=repetition.fashion
        )
    else:
        fashion, fashion_memory = select_fashion(
            scenario.key,
            profile.raw_keywords,
            user.color_palette,
            memory=history.fashion,
            policy=repetition.fashion,
            logger=logger,
        )
    new_history = SelectionHistory(
        fashion=history.fashion if fashion_memory is None else fashion_memory,
        pose=history.pose if pose_memory is None else pose_memory,
    )

    style_blend = blend(user.personal_styles or cfg.prompt.default_styles)
    identity_lock = build_identity_lock(
        extract_user_features(user), user.gender, user.ethnicity, logger=logger
    )
    negatives = compose(composition.block.name, mood.block.name)

    parts = PromptParts(
        identity=identity_part(user),
        identity_lock=identity_lock,
        pose=pose.block.description,
        composition=composition_part(composition.block),
        lighting=lighting.block.description,
        environment=scenario.block.environment,
        wardrobe=wardrobe_part(fashion.block),
        mood_atmosphere=mood.block.atmosphere,
        technical_suffix=cfg.prompt.technical_suffix,
    )
    final_prompt = assemble_parts(parts, max_tokens=cfg.prompt.max_tokens)

    result = PromptResult(
        final_prompt=final_prompt,
        negative_prompt=negatives.as_prompt(),
        profile=profile,
        mood=mood,
        scenario=scenario,
        composition=composition,
        lighting=lighting,
        pose=pose,
        fashion=fashion,
        style_blend=style_blend,
        identity_lock=identity_lock,
        parts=parts,
        explanation=build_explanation(
            mood.block,
            scenario.block,
            composition.block,
            lighting.block,
            pose.block,
            fashion.block,
        ),
        history=new_history,
        model_weight=user.model_weight,
        raw_text=concept.text,
        trigger_word=user.trigger_word,
    )

    if logger:
        logger.info(
            "Composed prompt: mood=%s scenario=%s composition=%s lighting=%s pose=%s fashion=%s tokens=%d",
            mood.key,
            scenario.key,
            composition.key,
            lighting.key,
            pose.key,
            fashion.key,
            result.token_count,
        )
    return result
