import pytest

from creative_direction.engine.identity_lock import (
    IDENTITY_BASELINE,
    MAX_USER_FEATURES,
    build_identity_lock,
    is_allowed_feature,
)
from creative_direction.engine.negative_prompt import compose
from creative_direction.engine.style_blend import blend, recognized_styles
from creative_direction.library.negatives import BASE_NEGATIVES, SCENE_NEGATIVES
from creative_direction.library.styles import TRENDING_LOOKS


def test_blend_ignores_order_and_repetition():
    assert blend(["glam", "minimalist"]) == blend(["minimalist", "glam", "glam"])


@pytest.mark.parametrize("style", ["minimalist", "glam", "bohemian", "sporty"])
def test_blend_of_a_repeated_style_equals_single(style):
    assert blend([style, style]) == blend([style])


def test_blend_is_idempotent():
    once = blend(["scandi", "classic"])
    again = blend(list(once.styles))
    assert again == once


def test_blend_unions_lists_without_duplicates():
    result = blend(["streetwear", "glam"])

    assert result.styles == ("streetwear", "glam")
    assert result.keywords.count("bold presence") == 1
    assert "black" in result.color_palette
    assert result.color_palette.count("black") == 1
    assert "fur coat" in result.wardrobe_keywords


def test_blend_drops_unknown_styles_and_keeps_trending_head():
    result = blend(["Quiet Luxury", "punk", ""])

    assert recognized_styles(["Quiet Luxury", "punk"]) == ("quiet-luxury",)
    assert result.styles == ("quiet-luxury",)
    assert result.trending_looks == TRENDING_LOOKS[:3]


def test_blend_of_nothing_still_has_trending_looks():
    result = blend([])

    assert result.styles == ()
    assert result.keywords == ()
    assert len(result.trending_looks) == 3
    assert result.to_dict()["trending_looks"] == list(TRENDING_LOOKS[:3])


def test_identity_lock_baseline_only():
    assert build_identity_lock() == "; ".join(IDENTITY_BASELINE)


def test_identity_lock_filters_denied_and_caps_features():
    lock = build_identity_lock(
        [
            "green eyes",
            "looks younger than her age",
            "olive skin tone",
            "woman with freckles",
            "dimples",
            "long dark hair",
            "high cheekbones",
            "beauty mark",
        ],
        gender="woman",
    )

    parts = lock.split("; ")
    assert parts[: len(IDENTITY_BASELINE)] == list(IDENTITY_BASELINE)
    assert parts[len(IDENTITY_BASELINE) :] == [
        "green eyes",
        "dimples",
        "long dark hair",
        "high cheekbones",
    ]
    assert len(parts) == len(IDENTITY_BASELINE) + MAX_USER_FEATURES


@pytest.mark.parametrize(
    "feature",
    ["Face Shape: oval", "race-specific look", "older look", "", "   ", "Korean eyelids"],
)
def test_disallowed_features(feature):
    assert not is_allowed_feature(feature, ethnicity="korean")


def test_allowed_feature():
    assert is_allowed_feature("freckles", gender="woman", ethnicity="korean")


def test_negative_prompt_fallback_is_portrait():
    negatives = compose("Rule of Thirds", "Power Woman Energy")

    assert negatives.base == BASE_NEGATIVES
    assert negatives.context_specific == SCENE_NEGATIVES["portrait"]


def test_negative_prompt_combines_and_deduplicates():
    negatives = compose("Close-Up Beauty Crop", "Moody Night Energy")

    context = negatives.context_specific
    assert "cropped forehead" in context
    assert "heavy makeup" in context
    assert "muddy shadows" in context
    assert context.count("harsh pores") == 1
    assert len(context) == len(set(context))


def test_negative_prompt_text_starts_with_base_terms():
    text = compose(None, None).as_prompt()

    assert text.startswith("blurry, low quality")
    assert "cropped head" in text


def test_substring_keys_match_normalised_names():
    # "close-up" must not fire on "Shoulder-Up Cinematic".
    negatives = compose("Shoulder-Up Cinematic", "Nordic Clean")
    assert "cropped forehead" not in negatives.context_specific
    assert "clutter" in negatives.context_specific
