import logging
import os
from pathlib import Path

import pytest

from creative_direction.app.compose import load_engine_config, run_compose
from creative_direction.foundation.config_io import (
    deep_merge,
    find_repo_root,
    load_config,
)

ENV = "TEST_CREATIVE_DIRECTION_CONFIG"


def test_load_config_base_only(tmp_path, monkeypatch):
    monkeypatch.delenv(ENV, raising=False)
    (tmp_path / "config.yaml").write_text("a: 1\nb:\n  c: 2\n", encoding="utf-8")

    cfg, meta = load_config(config_dir=str(tmp_path), env_var=ENV)

    assert cfg == {"a": 1, "b": {"c": 2}}
    assert meta["mode"] == "base"
    assert os.path.basename(meta["paths"][0]) == "config.yaml"


def test_load_config_base_plus_local_overlay(tmp_path, monkeypatch):
    monkeypatch.delenv(ENV, raising=False)
    (tmp_path / "config.yaml").write_text("a: 1\nb:\n  c: 2\n", encoding="utf-8")
    (tmp_path / "config.local.yaml").write_text("b:\n  c: 3\n  d: 4\n", encoding="utf-8")

    cfg, meta = load_config(config_dir=str(tmp_path), env_var=ENV)

    assert cfg == {"a": 1, "b": {"c": 3, "d": 4}}
    assert meta["mode"] == "base+local"
    assert len(meta["paths"]) == 2


def test_load_config_overlay_type_mismatch_raises(tmp_path, monkeypatch):
    monkeypatch.delenv(ENV, raising=False)
    (tmp_path / "config.yaml").write_text("a:\n  b: 1\n", encoding="utf-8")
    (tmp_path / "config.local.yaml").write_text("a: [1, 2]\n", encoding="utf-8")

    with pytest.raises(ValueError, match=r"Invalid config overlay at a"):
        load_config(config_dir=str(tmp_path), env_var=ENV)


def test_load_config_invalid_overlay_yaml_raises(tmp_path, monkeypatch):
    monkeypatch.delenv(ENV, raising=False)
    (tmp_path / "config.yaml").write_text("a: 1\n", encoding="utf-8")
    (tmp_path / "config.local.yaml").write_text("a: [1, 2\n", encoding="utf-8")

    with pytest.raises(ValueError) as excinfo:
        load_config(config_dir=str(tmp_path), env_var=ENV)

    assert "config.local.yaml" in str(excinfo.value)


def test_load_config_env_override_loads_single_file(tmp_path, monkeypatch):
    base_dir = tmp_path / "base"
    base_dir.mkdir()
    (base_dir / "config.yaml").write_text("a: 1\n", encoding="utf-8")
    (base_dir / "config.local.yaml").write_text("a: 2\n", encoding="utf-8")
    env_path = tmp_path / "my_config.yaml"
    env_path.write_text("a: 999\n", encoding="utf-8")

    monkeypatch.setenv(ENV, str(env_path))
    cfg, meta = load_config(config_dir=str(base_dir), env_var=ENV)

    assert cfg == {"a": 999}
    assert meta["mode"] == "env"
    assert meta["paths"] == [os.path.abspath(str(env_path))]


def test_explicit_path_wins_over_env(tmp_path, monkeypatch):
    env_path = tmp_path / "env.yaml"
    env_path.write_text("a: 1\n", encoding="utf-8")
    explicit = tmp_path / "explicit.yaml"
    explicit.write_text("a: 2\n", encoding="utf-8")
    monkeypatch.setenv(ENV, str(env_path))

    cfg, meta = load_config(config_path=str(explicit), env_var=ENV)

    assert cfg == {"a": 2}
    assert meta["mode"] == "explicit"


def test_missing_explicit_config_raises(tmp_path):
    with pytest.raises(FileNotFoundError, match="Config file not found"):
        load_config(config_path=str(tmp_path / "nope.yaml"), env_var=ENV)


def test_missing_base_config_raises(tmp_path, monkeypatch):
    monkeypatch.delenv(ENV, raising=False)
    with pytest.raises(FileNotFoundError, match="Missing base config file"):
        load_config(config_dir=str(tmp_path), env_var=ENV)


def test_load_config_finds_repo_root_from_subdir(monkeypatch):
    repo_root = Path(__file__).resolve().parents[1]

    monkeypatch.delenv(ENV, raising=False)
    monkeypatch.chdir(repo_root / "tests")

    _cfg, meta = load_config(env_var=ENV)

    assert Path(meta["paths"][0]).resolve() == (repo_root / "config" / "config.yaml").resolve()
    assert Path(str(meta["repo_root"])).resolve() == repo_root.resolve()


def test_find_repo_root_raises_outside_a_repo(tmp_path):
    isolated = tmp_path / "a" / "b"
    isolated.mkdir(parents=True)
    if any((parent / "pyproject.toml").exists() or (parent / ".git").exists() for parent in isolated.parents):
        pytest.skip("tmp dir sits inside a repository")

    with pytest.raises(FileNotFoundError, match="Cannot locate repo root"):
        find_repo_root(str(isolated))


def test_deep_merge_replaces_scalars_and_lists():
    merged = deep_merge({"a": {"b": [1, 2], "c": 1}, "d": 1}, {"a": {"b": [3]}, "e": 2})
    assert merged == {"a": {"b": [3], "c": 1}, "d": 1, "e": 2}


def test_engine_config_uses_defaults_without_any_config_file(tmp_path, monkeypatch):
    monkeypatch.delenv("CREATIVE_DIRECTION_CONFIG", raising=False)
    isolated = tmp_path / "nowhere"
    isolated.mkdir()
    (isolated / "pyproject.toml").write_text("", encoding="utf-8")

    cfg, meta = load_engine_config(start_dir=str(isolated))

    assert meta["mode"] == "defaults"
    assert cfg.prompt.max_tokens == 120


def test_engine_config_explicit_missing_path_still_raises(tmp_path, monkeypatch):
    monkeypatch.delenv("CREATIVE_DIRECTION_CONFIG", raising=False)
    with pytest.raises(FileNotFoundError):
        load_engine_config(str(tmp_path / "missing.yaml"))


def test_engine_config_env_var(tmp_path, monkeypatch):
    path = tmp_path / "cfg.yaml"
    path.write_text("prompt:\n  max_tokens: 42\n", encoding="utf-8")
    monkeypatch.setenv("CREATIVE_DIRECTION_CONFIG", str(path))

    cfg, meta = load_engine_config()

    assert cfg.prompt.max_tokens == 42
    assert meta["mode"] == "env"
    assert meta["effective"]["prompt"]["max_tokens"] == 42


def test_run_compose_closes_its_log_file(tmp_path, monkeypatch):
    monkeypatch.delenv("CREATIVE_DIRECTION_CONFIG", raising=False)
    path = tmp_path / "cfg.yaml"
    path.write_text(
        f"logging:\n  log_dir: '{(tmp_path / 'logs').as_posix()}'\n", encoding="utf-8"
    )

    result = run_compose(
        {"trigger_word": "ohwx"}, "gym workout", config_path=str(path), run_id="closed1"
    )

    assert result.final_prompt
    assert logging.getLogger("creative_direction.closed1").handlers == []
    content = (tmp_path / "logs" / "closed1_oplog.log").read_text(encoding="utf-8")
    assert "Loaded config from explicit path=" in content
