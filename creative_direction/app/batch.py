from __future__ import annotations

import logging
import os
from typing import Any

import pandas as pd

from creative_direction.app.compose import (
    compose_one,
    generate_run_id,
    load_engine_config,
    log_config_source,
)
from creative_direction.foundation.logging_utils import (
    close_operational_logger,
    setup_operational_logger,
)
from creative_direction.framework.config import EngineConfig
from creative_direction.framework.memory import HistoryStore
from creative_direction.framework.records import RECORD_FIELDNAMES, PromptResult

LIST_SEPARATOR = "|"

CONCEPT_COLUMNS: tuple[str, ...] = (
    "mood",
    "scenario",
    "composition",
    "lighting",
    "outfit",
    "emotional_tone",
)
USER_COLUMNS: tuple[str, ...] = (
    "trigger_word",
    "gender",
    "ethnicity",
    "physical_preferences",
    "preferred_mood",
)
USER_LIST_COLUMNS: tuple[str, ...] = ("personal_styles", "color_palette")
WEIGHT_COLUMN = "model_weight"
SESSION_COLUMN = "session_id"


def _cell(value: Any) -> str:
    if value is None or pd.isna(value):
        return ""
    return str(value).strip()


def _split_list(value: Any) -> list[str]:
    return [item.strip() for item in _cell(value).split(LIST_SEPARATOR) if item.strip()]


def load_briefs(path: str) -> pd.DataFrame:
    """Read a briefs CSV; every cell comes back as a string or NaN."""

    briefs_path = str(path or "").strip()
    if not briefs_path:
        raise ValueError("Briefs CSV path is required")
    if not os.path.exists(briefs_path):
        raise FileNotFoundError(f"Briefs CSV not found: {briefs_path}")
    if os.path.isdir(briefs_path):
        raise ValueError(f"Briefs CSV path is a directory: {briefs_path}")
    if os.path.getsize(briefs_path) == 0:
        raise ValueError(f"Briefs CSV is empty: {briefs_path}")

    df = pd.read_csv(briefs_path, dtype=str, keep_default_na=True)
    df.columns = [str(col).strip().lower() for col in df.columns]
    if "text" not in df.columns:
        raise ValueError(f"Briefs CSV is missing required column 'text': {briefs_path}")
    return df


def row_inputs(row: dict[str, Any]) -> tuple[dict[str, Any], dict[str, Any], str | None]:
    """Split one CSV row into (user mapping, concept mapping, history key)."""

    concept: dict[str, Any] = {"text": _cell(row.get("text"))}
    for column in CONCEPT_COLUMNS:
        value = _cell(row.get(column))
        if value:
            concept[column] = value

    user: dict[str, Any] = {}
    for column in USER_COLUMNS:
        value = _cell(row.get(column))
        if value:
            user[column] = value
    for column in USER_LIST_COLUMNS:
        values = _split_list(row.get(column))
        if values:
            user[column] = values
    weight = _cell(row.get(WEIGHT_COLUMN))
    if weight:
        try:
            user[WEIGHT_COLUMN] = float(weight)
        except ValueError:
            raise ValueError(f"{WEIGHT_COLUMN} must be a number (got {weight!r})") from None

    session = _cell(row.get(SESSION_COLUMN)) or None
    return user, concept, session


def compose_frame(
    df: pd.DataFrame,
    *,
    config: EngineConfig | None = None,
    store: HistoryStore | None = None,
    logger: logging.Logger | None = None,
) -> list[PromptResult]:
    """
    Compose every row in file order.

    History is threaded per `session_id`, else per trigger word, so repeated
    rows for one person rotate through wardrobe categories.
    """

    store = store if store is not None else HistoryStore()
    results: list[PromptResult] = []
    for idx, row in enumerate(df.to_dict(orient="records")):
        try:
            user, concept, session = row_inputs(row)
            result = compose_one(
                user, concept, config=config, store=store, history_key=session, logger=logger
            )
        except (TypeError, ValueError) as exc:
            raise ValueError(f"Briefs row {idx}: {exc}") from exc
        results.append(result)
    return results


def results_frame(results: list[PromptResult]) -> pd.DataFrame:
    return pd.DataFrame([result.to_record() for result in results], columns=RECORD_FIELDNAMES)


def run_batch(
    input_path: str,
    *,
    output_path: str | None = None,
    config_path: str | None = None,
    run_id: str | None = None,
) -> tuple[list[PromptResult], str | None]:
    """Compose a briefs CSV and write one record row per brief when an output path is known."""

    cfg, meta = load_engine_config(config_path)
    run_id = run_id or generate_run_id()
    logger, _ = setup_operational_logger(
        run_id, log_dir=cfg.logging.log_dir, level=cfg.logging.level
    )
    try:
        log_config_source(logger, meta)

        df = load_briefs(input_path)
        logger.info("Loaded %d briefs from %s", len(df), input_path)
        results = compose_frame(df, config=cfg, logger=logger)

        target = output_path or cfg.batch.output_path
        if target:
            parent = os.path.dirname(os.path.abspath(target))
            os.makedirs(parent, exist_ok=True)
            results_frame(results).to_csv(target, index=False, encoding="utf-8")
            logger.info("Wrote %d prompt records to %s", len(results), target)
        return results, target
    finally:
        close_operational_logger(logger)
