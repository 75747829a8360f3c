from pathlib import Path

import pytest

from creative_direction.foundation.config_io import load_yaml_mapping
from creative_direction.framework.config import (
    DEFAULT_MAX_PROMPT_TOKENS,
    DEFAULT_TECHNICAL_SUFFIX,
    EngineConfig,
)


def test_empty_mapping_gives_documented_defaults():
    cfg, effective = EngineConfig.from_dict({})

    assert cfg == EngineConfig()
    assert cfg.prompt.max_tokens == DEFAULT_MAX_PROMPT_TOKENS == 120
    assert cfg.prompt.technical_suffix == DEFAULT_TECHNICAL_SUFFIX
    assert cfg.prompt.default_styles == ("minimalist",)
    assert cfg.anti_repetition.fashion.enabled is True
    assert cfg.anti_repetition.fashion.window == 8
    assert cfg.anti_repetition.pose.enabled is False
    assert cfg.logging.level == "INFO"
    assert cfg.logging.log_dir is None
    assert effective["prompt"]["max_tokens"] == 120


def test_none_config_is_empty():
    assert EngineConfig.from_dict(None)[0] == EngineConfig()


def test_repo_config_file_parses():
    repo_root = Path(__file__).resolve().parents[1]
    cfg_dict = load_yaml_mapping(str(repo_root / "config" / "config.yaml"))

    cfg, _effective = EngineConfig.from_dict(cfg_dict)

    assert cfg == EngineConfig()


def test_overrides_are_applied():
    cfg, effective = EngineConfig.from_dict(
        {
            "prompt": {"max_tokens": 77, "default_styles": ["scandi", "classic"]},
            "anti_repetition": {"fashion": {"window": 4}, "pose": {"enabled": True}},
            "logging": {"level": "DEBUG", "log_dir": "logs"},
            "batch": {"output_path": "out/prompts.csv"},
        }
    )

    assert cfg.prompt.max_tokens == 77
    assert cfg.prompt.default_styles == ("scandi", "classic")
    assert cfg.anti_repetition.fashion.window == 4
    assert cfg.anti_repetition.for_dimension("pose").enabled is True
    assert cfg.logging.log_dir == "logs"
    assert cfg.batch.output_path == "out/prompts.csv"
    assert effective["anti_repetition"]["fashion"]["window"] == 4


def test_unknown_keys_raise_with_path():
    with pytest.raises(ValueError, match=r"Unknown config keys under prompt: max_token"):
        EngineConfig.from_dict({"prompt": {"max_token": 10}})
    with pytest.raises(ValueError, match=r"Unknown config keys under <root>: extras"):
        EngineConfig.from_dict({"extras": {}})


@pytest.mark.parametrize(
    "cfg,error,match",
    [
        ({"prompt": {"max_tokens": "120"}}, TypeError, r"prompt\.max_tokens must be an int"),
        ({"prompt": {"max_tokens": 0}}, ValueError, r"prompt\.max_tokens must be >= 1"),
        ({"prompt": {"max_tokens": 121}}, ValueError, r"prompt\.max_tokens must be <= 120"),
        ({"prompt": {"default_styles": "glam"}}, TypeError, r"prompt\.default_styles must be a list"),
        (
            {"anti_repetition": {"fashion": {"enabled": "yes"}}},
            TypeError,
            r"anti_repetition\.fashion\.enabled must be a boolean",
        ),
        ({"logging": {"level": "LOUD"}}, ValueError, r"logging\.level must be one of"),
        ({"batch": []}, TypeError, r"batch must be a mapping"),
    ],
)
def test_invalid_values(cfg, error, match):
    with pytest.raises(error, match=match):
        EngineConfig.from_dict(cfg)


def test_non_mapping_config_raises():
    with pytest.raises(ValueError, match="Config must be a mapping"):
        EngineConfig.from_dict(["prompt"])  # type: ignore[arg-type]


def test_unknown_anti_repetition_dimension():
    with pytest.raises(ValueError, match="Unknown anti-repetition dimension"):
        EngineConfig().anti_repetition.for_dimension("mood")
