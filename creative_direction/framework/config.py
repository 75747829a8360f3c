from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal, Mapping

from creative_direction.framework.config_namespace import ConfigNamespace

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]

# Hard ceiling on whitespace tokens in the final prompt; the downstream model's
# prompt weighting was tuned against this exact cut.
DEFAULT_MAX_PROMPT_TOKENS = 120

# Realism LoRA tag appended after the mood atmosphere.
DEFAULT_TECHNICAL_SUFFIX = "<lora:flux_realism:1>"

# Recently used fashion categories kept out of the candidate pool.
DEFAULT_FASHION_WINDOW = 8

DEFAULT_PERSONAL_STYLES: tuple[str, ...] = ("minimalist",)

ANTI_REPETITION_DIMENSIONS: tuple[str, ...] = ("fashion", "pose")


@dataclass(frozen=True)
class DimensionRepetitionPolicy:
    enabled: bool
    window: int


@dataclass(frozen=True)
class AntiRepetitionPolicy:
    """Per-dimension toggles for recent-selection exclusion."""

    fashion: DimensionRepetitionPolicy = DimensionRepetitionPolicy(True, DEFAULT_FASHION_WINDOW)
    pose: DimensionRepetitionPolicy = DimensionRepetitionPolicy(False, DEFAULT_FASHION_WINDOW)

    def for_dimension(self, dimension: str) -> DimensionRepetitionPolicy:
        if dimension not in ANTI_REPETITION_DIMENSIONS:
            raise ValueError(f"Unknown anti-repetition dimension: {dimension!r}")
        return getattr(self, dimension)


@dataclass(frozen=True)
class PromptConfig:
    max_tokens: int = DEFAULT_MAX_PROMPT_TOKENS
    technical_suffix: str = DEFAULT_TECHNICAL_SUFFIX
    default_styles: tuple[str, ...] = DEFAULT_PERSONAL_STYLES


@dataclass(frozen=True)
class LoggingConfig:
    level: LogLevel = "INFO"
    log_dir: str | None = None


@dataclass(frozen=True)
class BatchConfig:
    output_path: str | None = None


@dataclass(frozen=True)
class EngineConfig:
    prompt: PromptConfig = field(default_factory=PromptConfig)
    anti_repetition: AntiRepetitionPolicy = field(default_factory=AntiRepetitionPolicy)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    batch: BatchConfig = field(default_factory=BatchConfig)

    @staticmethod
    def from_dict(cfg: Mapping[str, Any] | None) -> tuple["EngineConfig", dict[str, Any]]:
        """
        Parse and validate a config mapping, returning (EngineConfig, effective values).

        Every key is optional. Unknown keys anywhere in the tree raise ValueError so
        typos never silently fall back to defaults.
        """

        if cfg is None:
            cfg = {}
        if not isinstance(cfg, Mapping):
            raise ValueError("Config must be a mapping")

        root = ConfigNamespace(dict(cfg), path="")

        prompt_ns = root.namespace("prompt")
        prompt = PromptConfig(
            max_tokens=prompt_ns.get_int(
                "max_tokens",
                default=DEFAULT_MAX_PROMPT_TOKENS,
                min_value=1,
                max_value=DEFAULT_MAX_PROMPT_TOKENS,
            ),
            technical_suffix=prompt_ns.get_str(
                "technical_suffix", default=DEFAULT_TECHNICAL_SUFFIX
            )
            or "",
            default_styles=prompt_ns.get_list_str(
                "default_styles", default=DEFAULT_PERSONAL_STYLES
            ),
        )

        repetition_ns = root.namespace("anti_repetition")
        defaults = AntiRepetitionPolicy()
        policies: dict[str, DimensionRepetitionPolicy] = {}
        for dimension in ANTI_REPETITION_DIMENSIONS:
            dim_ns = repetition_ns.namespace(dimension)
            fallback = defaults.for_dimension(dimension)
            policies[dimension] = DimensionRepetitionPolicy(
                enabled=dim_ns.get_bool("enabled", default=fallback.enabled),
                window=dim_ns.get_int("window", default=fallback.window, min_value=1),
            )

        logging_ns = root.namespace("logging")
        logging_cfg = LoggingConfig(
            level=logging_ns.get_str(  # type: ignore[arg-type]
                "level", default="INFO", choices=("DEBUG", "INFO", "WARNING", "ERROR")
            ),
            log_dir=logging_ns.get_str("log_dir", default=None),
        )

        batch_ns = root.namespace("batch")
        batch_cfg = BatchConfig(output_path=batch_ns.get_str("output_path", default=None))

        root.assert_consumed()

        parsed = EngineConfig(
            prompt=prompt,
            anti_repetition=AntiRepetitionPolicy(**policies),
            logging=logging_cfg,
            batch=batch_cfg,
        )
        return parsed, root.effective_values()
