from __future__ import annotations

import json
import os
from dataclasses import asdict, dataclass
from typing import Any

from creative_direction.framework.memory import SelectionHistory
from creative_direction.framework.selection import DimensionSelection
from creative_direction.framework.types import (
    CompositionBlock,
    FashionBlock,
    LightingBlock,
    MoodBlock,
    PoseBlock,
    PromptParts,
    ScenarioBlock,
    SemanticProfile,
    StyleBlendBlock,
)

DIMENSIONS: tuple[str, ...] = ("mood", "scenario", "composition", "lighting", "pose", "fashion")

RECORD_FIELDNAMES: list[str] = [
    "text",
    "trigger_word",
    "final_prompt",
    "negative_prompt",
    "mood",
    "scenario",
    "composition",
    "lighting",
    "pose",
    "fashion",
    "identity_lock",
    "model_weight",
    "token_count",
]


def _block_dict(block: Any) -> dict[str, Any]:
    payload = asdict(block)
    for name, value in payload.items():
        if isinstance(value, (tuple, frozenset, set)):
            payload[name] = sorted(value) if isinstance(value, (frozenset, set)) else list(value)
    return payload


@dataclass(frozen=True)
class PromptResult:
    final_prompt: str
    negative_prompt: str
    profile: SemanticProfile
    mood: DimensionSelection[MoodBlock]
    scenario: DimensionSelection[ScenarioBlock]
    composition: DimensionSelection[CompositionBlock]
    lighting: DimensionSelection[LightingBlock]
    pose: DimensionSelection[PoseBlock]
    fashion: DimensionSelection[FashionBlock]
    style_blend: StyleBlendBlock
    identity_lock: str
    parts: PromptParts
    explanation: str
    history: SelectionHistory
    model_weight: float | None = None
    raw_text: str = ""
    trigger_word: str = ""

    def selection(self, dimension: str) -> DimensionSelection[Any]:
        if dimension not in DIMENSIONS:
            raise ValueError(f"Unknown dimension: {dimension!r}")
        return getattr(self, dimension)

    @property
    def applied_modules(self) -> dict[str, str]:
        """Catalog key chosen per dimension."""
        return {name: self.selection(name).key for name in DIMENSIONS}

    @property
    def creative_direction(self) -> dict[str, str]:
        return {
            "mood": self.mood.block.description,
            "scene": self.scenario.block.description,
            "composition": self.composition.block.description,
            "lighting": self.lighting.block.description,
            "pose": self.pose.block.description,
            "fashion": ", ".join(self.fashion.block.wardrobe_keywords),
        }

    @property
    def token_count(self) -> int:
        return len(self.final_prompt.split())

    def to_dict(self, *, include_score_tables: bool = False) -> dict[str, Any]:
        selections: dict[str, Any] = {}
        for name in DIMENSIONS:
            sel = self.selection(name).to_dict()
            if not include_score_tables:
                sel.pop("score_table", None)
            sel["block"] = _block_dict(self.selection(name).block)
            selections[name] = sel

        return {
            "final_prompt": self.final_prompt,
            "negative_prompt": self.negative_prompt,
            "creative_direction": self.creative_direction,
            "applied_modules": self.applied_modules,
            "identity_lock": self.identity_lock,
            "style_blend": self.style_blend.to_dict(),
            "explanation": self.explanation,
            "profile": self.profile.to_dict(),
            "selections": selections,
            "history": self.history.to_dict(),
            "model_weight": self.model_weight,
            "token_count": self.token_count,
        }

    def to_record(self) -> dict[str, Any]:
        """Flat row keyed by RECORD_FIELDNAMES."""

        row: dict[str, Any] = {
            "text": self.raw_text,
            "trigger_word": self.trigger_word,
            "final_prompt": self.final_prompt,
            "negative_prompt": self.negative_prompt,
            "identity_lock": self.identity_lock,
            "model_weight": "" if self.model_weight is None else self.model_weight,
            "token_count": self.token_count,
        }
        row.update(self.applied_modules)
        return {name: row.get(name, "") for name in RECORD_FIELDNAMES}


def write_result_json(path: str, result: PromptResult, *, include_score_tables: bool = True) -> None:
    os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)
    with open(path, "w", encoding="utf-8") as file:
        json.dump(
            result.to_dict(include_score_tables=include_score_tables),
            file,
            ensure_ascii=False,
            indent=2,
        )
        file.write("\n")
