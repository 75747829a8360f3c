"""
Negative-prompt tables.

Table keys are matched as substrings of the normalised composition or mood
name (`normalize_key`), so "close-up" applies to "Close-Up Beauty Crop" and
"Shoulder-Up Cinematic" does not.
"""

from __future__ import annotations

BASE_NEGATIVES: tuple[str, ...] = (
    "blurry",
    "low quality",
    "distorted face",
    "extra limbs",
    "extra fingers",
    "deformed hands",
    "watermark",
    "text",
    "plastic skin",
    "oversaturated",
)

FALLBACK_SCENE_KEY = "portrait"

SCENE_NEGATIVES: dict[str, tuple[str, ...]] = {
    "portrait": ("cropped head", "awkward framing", "cluttered background"),
    "close-up": ("cropped forehead", "harsh pores", "asymmetrical eyes", "cluttered background"),
    "beauty": ("heavy makeup", "airbrushed skin", "harsh pores"),
    "wide": ("tiny subject", "distorted perspective", "empty frame"),
    "body": ("cropped feet", "elongated torso", "awkward proportions"),
    "mirror": ("phone covering face", "double reflection", "warped mirror"),
    "vanity": ("phone covering face", "cluttered counter"),
    "symmetrical": ("tilted horizon", "off-center subject"),
    "symmetry": ("tilted horizon", "off-center subject"),
    "fashion": ("wrinkled clothing", "ill-fitting clothes", "awkward proportions"),
    "candid": ("stiff pose", "forced smile"),
    "detail": ("motion blur", "out of focus subject"),
    "motion": ("frozen stiff pose", "duplicated limbs"),
    "backlit": ("silhouette without detail", "lens flare covering face"),
}

MOOD_NEGATIVES: dict[str, tuple[str, ...]] = {
    "night": ("noise", "muddy shadows", "flat lighting"),
    "noir": ("muddy shadows", "washed out blacks"),
    "morning": ("harsh shadows", "cold tones"),
    "luxury": ("cheap materials", "cluttered background", "messy room"),
    "glossy": ("dull skin", "flat colors"),
    "candid": ("stiff pose", "posed look", "forced smile"),
    "romantic": ("harsh lighting", "cold tones"),
    "editorial": ("amateur snapshot", "casual snapshot"),
    "clean": ("clutter", "busy patterns"),
    "gym": ("gym clutter", "distracting equipment"),
    "beauty": ("harsh pores", "uneven skin"),
    "cozy": ("harsh lighting", "sterile room"),
}
