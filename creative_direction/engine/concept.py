"""
Free-text brief -> SemanticProfile.

Every detector is an ordered table of (result, trigger substrings). Single-valued
fields take the first row whose triggers hit; multi-valued fields collect every
row that hits, in table order. Matching is plain substring search on the
lower-cased brief, so "bed" also fires on "bedroom".
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from creative_direction.framework.types import (
    DEFAULT_ENVIRONMENT,
    DEFAULT_TIME_OF_DAY,
    SemanticProfile,
)

Rule = tuple[str, tuple[str, ...]]

# bedroom sits ahead of cafe so "coffee in bed" reads as a bedroom scene;
# every other row keeps its historical position.
SCENE_RULES: tuple[Rule, ...] = (
    ("elevator", ("elevator", "lift")),
    ("bedroom", ("bedroom", "bed", "master bedroom")),
    ("rooftop", ("rooftop", "roofto", "rooftop terrace", "skyline view")),
    ("cafe", ("cafe", "coffee shop", "coffee", "latte", "cappuccino")),
    ("gym", ("gym", "workout", "fitness", "gym mirror", "weight room")),
    ("car", ("car", "vehicle", "drivers seat", "car selfie")),
    ("beach", ("beach", "ocean", "sand", "seaside", "coast")),
    ("street", ("street", "sidewalk", "urban", "city street")),
    ("hotel", ("hotel", "hotel room", "hotel lobby", "suite")),
    ("bathroom", ("bathroom", "bathroom mirror", "washroom")),
    ("airport", ("airport", "airport lounge", "terminal", "gate")),
    ("office", ("office", "desk", "workspace", "work")),
)

SCENE_ENVIRONMENTS: dict[str, str] = {
    "elevator": "indoors-metal",
    "rooftop": "outdoors-urban",
    "cafe": "cozy-interior",
    "hotel": "luxury-suite",
    "gym": "modern-fitness",
    "car": "vehicle-interior",
    "beach": "outdoors-natural",
    "street": "outdoors-urban",
}

ENVIRONMENT_RULES: tuple[Rule, ...] = (
    ("outdoors-natural", ("outdoor", "outside")),
    ("luxury-interior", ("luxury", "elegant")),
    ("cozy-interior", ("cozy", "warm")),
    ("outdoors-urban", ("urban", "city")),
    ("indoors-metal", ("metal", "industrial")),
)

TIME_RULES: tuple[Rule, ...] = (
    ("night", ("night", "midnight", "evening")),
    ("golden-hour", ("golden hour", "sunset", "sunrise")),
    ("morning", ("morning", "breakfast")),
    ("afternoon", ("afternoon", "lunch")),
    ("dusk", ("dusk", "twilight")),
)

# A row may emit several values; "dramatic" briefs also read as confident.
ENERGY_RULES: tuple[tuple[tuple[str, ...], tuple[str, ...]], ...] = (
    (("mysterious",), ("mysterious", "sunglasses", "dark")),
    (("dramatic", "confident"), ("drama", "dramatic", "powerful")),
    (("confident",), ("confident", "power", "boss")),
    (("playful",), ("playful", "fun", "cheerful")),
    (("calm",), ("calm", "serene", "peaceful")),
    (("romantic",), ("romantic", "soft", "dreamy")),
    (("energetic",), ("energetic", "vibrant", "lively")),
    (("tired",), ("tired", "exhausted", "weary")),
)

AESTHETIC_RULES: tuple[Rule, ...] = (
    ("editorial", ("editorial", "magazine")),
    ("moody", ("moody", "dark")),
    ("cinematic", ("cinematic", "film")),
    ("clean-minimal", ("clean", "minimal")),
    ("luxury", ("luxury", "expensive", "boujee")),
    ("glossy", ("instagram", "glossy")),
    ("candid", ("candid", "natural")),
)

LOCATION_RULES: tuple[Rule, ...] = (
    ("paris", ("paris", "france", "french")),
    ("new york", ("new york", "nyc", "manhattan")),
    ("london", ("london", "uk", "british")),
    ("tokyo", ("tokyo", "japan", "japanese")),
    ("milan", ("milan", "italy", "italian")),
    ("dubai", ("dubai", "uae", "emirates")),
)

MATERIAL_RULES: tuple[Rule, ...] = (
    ("metal", ("metal", "steel")),
    ("glass", ("glass", "window")),
    ("marble", ("marble", "stone")),
    ("neon", ("neon", "lights")),
    ("wood", ("wood", "wooden")),
    ("mirror", ("mirror", "reflective")),
)

OBJECT_RULES: tuple[Rule, ...] = (
    ("sunglasses", ("sunglasses", "shades")),
    ("mirror", ("mirror",)),
    ("elevator", ("elevator",)),
    ("coffee", ("coffee", "latte")),
    ("car", ("car",)),
    ("phone", ("phone", "iphone")),
    ("laptop", ("laptop", "computer")),
)


def _hits(text: str, triggers: tuple[str, ...]) -> bool:
    return any(trigger in text for trigger in triggers)


def first_match(text: str, rules: tuple[Rule, ...], default: str | None = None) -> str | None:
    for result, triggers in rules:
        if _hits(text, triggers):
            return result
    return default


def all_matches(text: str, rules: tuple[Rule, ...]) -> tuple[str, ...]:
    return _unique(result for result, triggers in rules if _hits(text, triggers))


def _unique(values: Iterable[str]) -> tuple[str, ...]:
    seen: dict[str, None] = {}
    for value in values:
        seen.setdefault(value, None)
    return tuple(seen)


def tokenize(text: str) -> tuple[str, ...]:
    return tuple((text or "").lower().split())


def detect_environment(text: str, core_scene: str | None) -> str:
    if core_scene in SCENE_ENVIRONMENTS:
        return SCENE_ENVIRONMENTS[core_scene]
    return first_match(text, ENVIRONMENT_RULES, DEFAULT_ENVIRONMENT) or DEFAULT_ENVIRONMENT


def detect_energy(text: str) -> tuple[str, ...]:
    return _unique(
        value
        for values, triggers in ENERGY_RULES
        if _hits(text, triggers)
        for value in values
    )


def analyze(text: str | None, *, logger: logging.Logger | None = None) -> SemanticProfile:
    """Read a brief into a SemanticProfile. Never raises; empty text gives the defaults."""

    raw = text or ""
    lowered = raw.lower()
    core_scene = first_match(lowered, SCENE_RULES)

    profile = SemanticProfile(
        core_scene=core_scene,
        environment=detect_environment(lowered, core_scene),
        time_of_day=first_match(lowered, TIME_RULES, DEFAULT_TIME_OF_DAY) or DEFAULT_TIME_OF_DAY,
        energy=detect_energy(lowered),
        aesthetic=all_matches(lowered, AESTHETIC_RULES),
        location=first_match(lowered, LOCATION_RULES),
        materials=all_matches(lowered, MATERIAL_RULES),
        objects=all_matches(lowered, OBJECT_RULES),
        raw_keywords=tokenize(raw),
        raw_input=raw,
    )

    if logger:
        logger.debug(
            "Concept profile: scene=%s environment=%s time=%s energy=%s aesthetic=%s",
            profile.core_scene,
            profile.environment,
            profile.time_of_day,
            ",".join(profile.energy) or "-",
            ",".join(profile.aesthetic) or "-",
        )
    return profile
