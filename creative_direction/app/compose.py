from __future__ import annotations

import logging
import os
import uuid
from datetime import datetime
from typing import Any, Mapping

from creative_direction.engine.director import generate_prompt
from creative_direction.foundation.config_io import CONFIG_ENV_VAR, load_config
from creative_direction.foundation.logging_utils import (
    close_operational_logger,
    setup_operational_logger,
)
from creative_direction.framework.config import EngineConfig
from creative_direction.framework.memory import HistoryStore, SelectionHistory
from creative_direction.framework.records import PromptResult
from creative_direction.framework.types import ConceptInput, UserContext


def generate_run_id() -> str:
    return f"{datetime.now().strftime('%Y%m%d_%H%M%S')}_{uuid.uuid4().hex[:8]}"


def load_engine_config(
    config_path: str | None = None,
    *,
    start_dir: str | None = None,
) -> tuple[EngineConfig, dict[str, Any]]:
    """
    Load and validate the engine config.

    An explicit path (argument or CREATIVE_DIRECTION_CONFIG) must exist. Without
    one, a repo without `config/config.yaml` runs on the built-in defaults.
    """

    explicit = bool((config_path or "").strip() or os.environ.get(CONFIG_ENV_VAR, "").strip())
    try:
        cfg_dict, meta = load_config(config_path=config_path, start_dir=start_dir)
    except FileNotFoundError:
        if explicit:
            raise
        cfg_dict, meta = {}, {"mode": "defaults", "paths": [], "env_var": CONFIG_ENV_VAR}

    cfg, effective = EngineConfig.from_dict(cfg_dict)
    meta = dict(meta)
    meta["effective"] = effective
    return cfg, meta


def log_config_source(logger: logging.Logger, meta: Mapping[str, Any]) -> None:
    mode = meta.get("mode")
    paths = meta.get("paths") or []
    env_var = meta.get("env_var") or CONFIG_ENV_VAR
    if mode in {"env", "explicit"} and paths:
        label = f"env {env_var}" if mode == "env" else "explicit path"
        logger.info("Loaded config from %s=%s", label, paths[0])
    elif mode == "base+local" and len(paths) > 1:
        logger.info("Loaded config base=%s local=%s", paths[0], paths[1])
    elif paths:
        logger.info("Loaded config base=%s", paths[0])
    else:
        logger.info("No config file found; using built-in defaults")


def compose_one(
    user: UserContext | Mapping[str, Any] | None,
    concept: ConceptInput | Mapping[str, Any] | str | None,
    *,
    config: EngineConfig | None = None,
    store: HistoryStore | None = None,
    history_key: str | None = None,
    logger: logging.Logger | None = None,
) -> PromptResult:
    """
    Parse raw inputs and run the director once.

    With a `store`, the history saved under `history_key` (default: the trigger
    word) is passed in and the updated one written back.
    """

    user_ctx = user if isinstance(user, UserContext) else UserContext.from_mapping(user)
    concept_input = (
        concept if isinstance(concept, ConceptInput) else ConceptInput.from_mapping(concept)
    )

    def _generate(history: SelectionHistory | None) -> tuple[PromptResult, SelectionHistory]:
        result = generate_prompt(
            user_ctx, concept_input, config=config, history=history, logger=logger
        )
        return result, result.history

    if store is None:
        return _generate(None)[0]
    key = history_key or user_ctx.trigger_word or "anonymous"
    return store.update(key, _generate)


def run_compose(
    user: Mapping[str, Any] | None,
    concept: Mapping[str, Any] | str | None,
    *,
    config_path: str | None = None,
    run_id: str | None = None,
) -> PromptResult:
    """Config-driven single composition with operational logging."""

    cfg, meta = load_engine_config(config_path)
    run_id = run_id or generate_run_id()
    logger, _ = setup_operational_logger(
        run_id, log_dir=cfg.logging.log_dir, level=cfg.logging.level
    )
    try:
        log_config_source(logger, meta)
        return compose_one(user, concept, config=cfg, logger=logger)
    finally:
        close_operational_logger(logger)
