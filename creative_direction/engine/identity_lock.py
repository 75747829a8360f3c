"""
Identity lock phrase.

The trained likeness already encodes the face; this phrase only reinforces it.
Features that would redescribe age, ethnicity, skin tone or face shape compete
with the likeness, so they are dropped.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

IDENTITY_BASELINE: tuple[str, ...] = (
    "clear facial structure",
    "recognizable features",
    "consistent likeness",
)

DENIED_FEATURE_TERMS: tuple[str, ...] = (
    "age",
    "race",
    "skin tone",
    "face shape",
    "younger",
    "older",
)

MAX_USER_FEATURES = 4

SEPARATOR = "; "


def is_allowed_feature(
    feature: str,
    *,
    gender: str | None = None,
    ethnicity: str | None = None,
) -> bool:
    text = feature.strip().lower()
    if not text:
        return False
    if any(term in text for term in DENIED_FEATURE_TERMS):
        return False
    # Gender and ethnicity already appear in the identity part.
    for declared in (gender, ethnicity):
        if declared and declared.strip() and declared.strip().lower() in text:
            return False
    return True


def build_identity_lock(
    user_features: Sequence[str] = (),
    gender: str | None = None,
    ethnicity: str | None = None,
    *,
    logger: logging.Logger | None = None,
) -> str:
    """Baseline phrases plus up to MAX_USER_FEATURES allowed features, joined by "; "."""

    kept: list[str] = []
    for feature in user_features:
        if len(kept) >= MAX_USER_FEATURES:
            break
        if is_allowed_feature(feature, gender=gender, ethnicity=ethnicity):
            kept.append(feature.strip())
        elif logger:
            logger.debug("Identity lock dropped feature: %r", feature)

    return SEPARATOR.join((*IDENTITY_BASELINE, *kept))
