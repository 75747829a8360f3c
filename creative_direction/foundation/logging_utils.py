"""Operational logging setup shared by the CLI and batch runner."""

from __future__ import annotations

import logging
import os

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"


def setup_operational_logger(
    run_id: str,
    *,
    log_dir: str | None = None,
    level: str = "INFO",
) -> tuple[logging.Logger, str | None]:
    """
    Configure a per-run logger writing to stderr and, when `log_dir` is set,
    to a UTF-8 `<run_id>_oplog.log` file that always captures DEBUG.
    """

    logger = logging.getLogger(f"creative_direction.{run_id}")
    logger.setLevel(logging.DEBUG)
    logger.handlers.clear()
    formatter = logging.Formatter(LOG_FORMAT)

    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(logging.getLevelName(level.upper()))
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)

    log_file: str | None = None
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        log_file = os.path.join(log_dir, f"{run_id}_oplog.log")
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.propagate = False
    logger.info("Operational logging initialized for run %s", run_id)
    if log_file:
        logger.debug("Operational log file: %s", log_file)
    return logger, log_file


def close_operational_logger(logger: logging.Logger) -> None:
    """Flush and close every handler, then detach them from the logger."""

    for handler in list(logger.handlers):
        handler.flush()
        handler.close()
    logger.handlers.clear()


def write_text_log(log_path: str, text: str) -> None:
    """Write a text artifact (explanations, prompt dumps) as UTF-8."""
    with open(log_path, "w", encoding="utf-8") as handle:
        handle.write(text)
