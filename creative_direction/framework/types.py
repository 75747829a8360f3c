from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Mapping

DEFAULT_ENVIRONMENT = "indoors-natural"
DEFAULT_TIME_OF_DAY = "daytime"


@dataclass(frozen=True)
class SemanticProfile:
    """Structured reading of a free-text brief; every field has a usable default."""

    core_scene: str | None = None
    environment: str = DEFAULT_ENVIRONMENT
    time_of_day: str = DEFAULT_TIME_OF_DAY
    energy: tuple[str, ...] = ()
    aesthetic: tuple[str, ...] = ()
    location: str | None = None
    materials: tuple[str, ...] = ()
    objects: tuple[str, ...] = ()
    raw_keywords: tuple[str, ...] = ()
    raw_input: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "core_scene": self.core_scene,
            "environment": self.environment,
            "time_of_day": self.time_of_day,
            "energy": list(self.energy),
            "aesthetic": list(self.aesthetic),
            "location": self.location,
            "materials": list(self.materials),
            "objects": list(self.objects),
            "raw_keywords": list(self.raw_keywords),
            "raw_input": self.raw_input,
        }


@dataclass(frozen=True)
class MoodBlock:
    name: str
    description: str
    lighting: str
    color_palette: tuple[str, ...]
    atmosphere: str
    energy: str
    texture: str
    keywords: tuple[str, ...]
    tags: frozenset[str]


@dataclass(frozen=True)
class LightingBlock:
    name: str
    description: str
    angle: str
    softness: str
    shadows: str
    texture: str
    skin_treatment: str
    keywords: tuple[str, ...]
    tags: frozenset[str]


@dataclass(frozen=True)
class CompositionBlock:
    name: str
    description: str
    framing: str
    focal_distance: str
    camera_height: str
    body_positioning: str
    keywords: tuple[str, ...]
    tags: frozenset[str]


@dataclass(frozen=True)
class ScenarioBlock:
    name: str
    description: str
    environment: str
    props: tuple[str, ...]
    atmosphere: str
    motion_suggestions: tuple[str, ...]
    styling_hints: tuple[str, ...]
    keywords: tuple[str, ...]
    tags: frozenset[str]


@dataclass(frozen=True)
class PoseBlock:
    name: str
    description: str
    keywords: tuple[str, ...]
    scenario_affinity: frozenset[str]


@dataclass(frozen=True)
class FashionBlock:
    category: str
    wardrobe_keywords: tuple[str, ...]
    materials: tuple[str, ...]
    palette: str
    scenario_affinity: frozenset[str]


@dataclass(frozen=True)
class PersonalStyle:
    name: str
    keywords: tuple[str, ...]
    color_palette: tuple[str, ...]
    wardrobe_keywords: tuple[str, ...]


@dataclass(frozen=True)
class StyleBlendBlock:
    styles: tuple[str, ...]
    keywords: tuple[str, ...]
    color_palette: tuple[str, ...]
    wardrobe_keywords: tuple[str, ...]
    trending_looks: tuple[str, ...]

    def to_dict(self) -> dict[str, Any]:
        return {
            "styles": list(self.styles),
            "keywords": list(self.keywords),
            "color_palette": list(self.color_palette),
            "wardrobe_keywords": list(self.wardrobe_keywords),
            "trending_looks": list(self.trending_looks),
        }


_USER_KEY_ALIASES = {
    "triggerWord": "trigger_word",
    "personalStyles": "personal_styles",
    "preferredMoods": "preferred_mood",
    "preferredMood": "preferred_mood",
    "loraWeight": "model_weight",
    "colorPalette": "color_palette",
    "physicalPreferences": "physical_preferences",
}

_CONCEPT_KEY_ALIASES = {"emotionalTone": "emotional_tone"}

_FEATURE_SPLIT_RE = re.compile(r"[,;\n]+")


def _opt_str(value: Any, path: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise TypeError(f"{path} must be a string (type={type(value).__name__})")
    text = value.strip()
    return text or None


def _str_tuple(value: Any, path: str) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, (list, tuple)):
        raise TypeError(f"{path} must be a list[str] (type={type(value).__name__})")
    out: list[str] = []
    for idx, item in enumerate(value):
        if not isinstance(item, str):
            raise TypeError(f"{path}[{idx}] must be a string")
        if item.strip():
            out.append(item.strip())
    return tuple(out)


def _normalize_keys(raw: Mapping[str, Any], aliases: Mapping[str, str]) -> dict[str, Any]:
    return {aliases.get(str(key), str(key)): value for key, value in raw.items()}


@dataclass(frozen=True)
class UserContext:
    trigger_word: str = ""
    gender: str | None = None
    ethnicity: str | None = None
    personal_styles: tuple[str, ...] = ()
    preferred_mood: str | None = None
    model_weight: float | None = None
    color_palette: tuple[str, ...] = ()
    physical_preferences: str | None = None

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any] | None, *, path: str = "user") -> "UserContext":
        if raw is None:
            return cls()
        if not isinstance(raw, Mapping):
            raise TypeError(f"{path} must be a mapping")
        data = _normalize_keys(raw, _USER_KEY_ALIASES)
        known = {
            "trigger_word",
            "gender",
            "ethnicity",
            "personal_styles",
            "preferred_mood",
            "model_weight",
            "color_palette",
            "physical_preferences",
        }
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown keys under {path}: {', '.join(unknown)}")

        preferred = data.get("preferred_mood")
        if isinstance(preferred, (list, tuple)):
            preferred = preferred[0] if preferred else None

        weight = data.get("model_weight")
        if weight is not None:
            if isinstance(weight, bool) or not isinstance(weight, (int, float)):
                raise TypeError(f"{path}.model_weight must be a number")
            weight = float(weight)

        physical = data.get("physical_preferences")
        if isinstance(physical, (list, tuple)):
            physical = ", ".join(_str_tuple(physical, f"{path}.physical_preferences"))

        return cls(
            trigger_word=_opt_str(data.get("trigger_word"), f"{path}.trigger_word") or "",
            gender=_opt_str(data.get("gender"), f"{path}.gender"),
            ethnicity=_opt_str(data.get("ethnicity"), f"{path}.ethnicity"),
            personal_styles=_str_tuple(data.get("personal_styles"), f"{path}.personal_styles"),
            preferred_mood=_opt_str(preferred, f"{path}.preferred_mood"),
            model_weight=weight,
            color_palette=_str_tuple(data.get("color_palette"), f"{path}.color_palette"),
            physical_preferences=_opt_str(physical, f"{path}.physical_preferences"),
        )


def extract_user_features(user: UserContext) -> tuple[str, ...]:
    """Split the free-text physical preferences into individual feature phrases."""

    if not user.physical_preferences:
        return ()
    parts = (part.strip() for part in _FEATURE_SPLIT_RE.split(user.physical_preferences))
    return tuple(part for part in parts if part)


@dataclass(frozen=True)
class ConceptInput:
    text: str = ""
    mood: str | None = None
    scenario: str | None = None
    composition: str | None = None
    lighting: str | None = None
    outfit: str | None = None
    emotional_tone: str | None = None

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any] | str | None, *, path: str = "concept") -> "ConceptInput":
        if raw is None:
            return cls()
        if isinstance(raw, str):
            return cls(text=raw)
        if not isinstance(raw, Mapping):
            raise TypeError(f"{path} must be a mapping or a string")
        data = _normalize_keys(raw, _CONCEPT_KEY_ALIASES)
        known = {"text", "mood", "scenario", "composition", "lighting", "outfit", "emotional_tone"}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown keys under {path}: {', '.join(unknown)}")

        text = data.get("text")
        if text is not None and not isinstance(text, str):
            raise TypeError(f"{path}.text must be a string")

        return cls(
            text=text or "",
            **{key: _opt_str(data.get(key), f"{path}.{key}") for key in sorted(known - {"text"})},
        )

    def overrides(self) -> dict[str, str]:
        return {
            key: value
            for key, value in (
                ("mood", self.mood),
                ("scenario", self.scenario),
                ("composition", self.composition),
                ("lighting", self.lighting),
                ("outfit", self.outfit),
                ("emotional_tone", self.emotional_tone),
            )
            if value
        }


@dataclass(frozen=True)
class PromptParts:
    """The nine assembler inputs, kept together so callers can inspect them."""

    identity: str = ""
    identity_lock: str = ""
    pose: str = ""
    composition: str = ""
    lighting: str = ""
    environment: str = ""
    wardrobe: str = ""
    mood_atmosphere: str = ""
    technical_suffix: str = ""

    def ordered(self) -> tuple[str, ...]:
        return (
            self.identity,
            self.identity_lock,
            self.pose,
            self.composition,
            self.lighting,
            self.environment,
            self.wardrobe,
            self.mood_atmosphere,
            self.technical_suffix,
        )


@dataclass(frozen=True)
class NegativePromptSet:
    base: tuple[str, ...]
    context_specific: tuple[str, ...] = field(default_factory=tuple)

    def as_prompt(self) -> str:
        return ", ".join((*self.base, *self.context_specific))
