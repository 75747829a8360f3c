from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

CONFIG_ENV_VAR = "CREATIVE_DIRECTION_CONFIG"


def find_repo_root(start: str | os.PathLike[str] | None = None) -> str:
    start_path = Path(start or os.getcwd()).resolve()
    if start_path.is_file():
        start_path = start_path.parent

    for candidate in (start_path, *start_path.parents):
        if (candidate / "pyproject.toml").is_file():
            return str(candidate)
        if (candidate / ".git").exists():
            return str(candidate)

    raise FileNotFoundError(
        f"Cannot locate repo root: searched from {start_path} for pyproject.toml, .git"
    )


def load_yaml_mapping(path: str) -> dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as handle:
            payload = yaml.safe_load(handle)
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in {path}: {exc}") from exc

    if payload is None:
        return {}
    if not isinstance(payload, Mapping):
        raise ValueError(f"Config file must contain a YAML mapping: {path}")
    return dict(payload)


def deep_merge(base: Any, overlay: Any, *, path: str = "") -> Any:
    """Merge `overlay` onto `base`; mappings merge per key, everything else is replaced."""

    if overlay is None:
        return None
    if base is None:
        return overlay

    if isinstance(base, Mapping):
        if not isinstance(overlay, Mapping):
            raise ValueError(
                f"Invalid config overlay at {path or '<root>'}: "
                f"base is mapping but overlay is {type(overlay).__name__}"
            )
        merged: dict[str, Any] = dict(base)
        for key, value in overlay.items():
            child = f"{path}.{key}" if path else str(key)
            merged[key] = deep_merge(base[key], value, path=child) if key in base else value
        return merged

    if isinstance(overlay, Mapping):
        raise ValueError(
            f"Invalid config overlay at {path or '<root>'}: "
            f"base is {type(base).__name__} but overlay is mapping"
        )
    return list(overlay) if isinstance(overlay, tuple) else overlay


def load_config(
    *,
    config_path: str | None = None,
    env_var: str = CONFIG_ENV_VAR,
    config_dir: str = "config",
    start_dir: str | None = None,
) -> tuple[dict[str, Any], dict[str, Any]]:
    """
    Load the engine config mapping plus metadata describing where it came from.

    An explicit path (argument or env var) loads exactly that file. Otherwise
    `config/config.yaml` under the repo root is loaded and `config.local.yaml`
    next to it, when present, is merged on top.
    """

    explicit = (config_path or "").strip() or None
    mode = "explicit"
    if explicit is None and env_var:
        explicit = os.environ.get(env_var, "").strip() or None
        mode = "env"

    if explicit:
        expanded = os.path.abspath(os.path.expandvars(os.path.expanduser(explicit)))
        if not os.path.exists(expanded):
            raise FileNotFoundError(f"Config file not found: {expanded}")
        cfg = load_yaml_mapping(expanded)
        return cfg, {"mode": mode, "paths": [expanded], "env_var": env_var, "repo_root": None}

    if os.path.isabs(config_dir):
        directory = config_dir
        repo_root = None
    else:
        repo_root = find_repo_root(start_dir)
        directory = os.path.join(repo_root, config_dir)

    base_path = os.path.join(directory, "config.yaml")
    local_path = os.path.join(directory, "config.local.yaml")
    if not os.path.exists(base_path):
        raise FileNotFoundError(f"Missing base config file: {base_path}")

    cfg = load_yaml_mapping(base_path)
    paths = [os.path.abspath(base_path)]
    mode = "base"
    if os.path.exists(local_path):
        cfg = deep_merge(cfg, load_yaml_mapping(local_path))
        paths.append(os.path.abspath(local_path))
        mode = "base+local"

    return cfg, {"mode": mode, "paths": paths, "env_var": env_var, "repo_root": repo_root}
