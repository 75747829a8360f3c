import logging
from pathlib import Path

import pytest

from creative_direction.foundation.logging_utils import (
    LOG_FORMAT,
    close_operational_logger,
    setup_operational_logger,
    write_text_log,
)
from creative_direction.library._catalog import Catalog, display_name, normalize_key
from creative_direction.library.registry import CATALOGS, get_block, get_catalog


def test_writes_unicode_text_with_utf8_encoding(tmp_path: Path):
    unicode_text = "Explanation with arrow → and accents é."
    log_path = tmp_path / "explanation.txt"

    write_text_log(str(log_path), unicode_text)

    assert log_path.read_text(encoding="utf-8") == unicode_text


def test_operational_logger_writes_file_at_debug(tmp_path):
    logger, log_file = setup_operational_logger("unit_run", log_dir=str(tmp_path), level="WARNING")

    logger.debug("debug detail")
    for handler in logger.handlers:
        handler.flush()

    assert log_file == str(tmp_path / "unit_run_oplog.log")
    content = Path(log_file).read_text(encoding="utf-8")
    assert "Operational logging initialized for run unit_run" in content
    assert " | DEBUG | debug detail" in content
    assert logger.propagate is False

    file_handler = next(h for h in logger.handlers if isinstance(h, logging.FileHandler))
    close_operational_logger(logger)

    assert logger.handlers == []
    assert file_handler.stream is None


def test_operational_logger_without_dir_is_stream_only():
    logger, log_file = setup_operational_logger("stream_only")

    assert log_file is None
    assert [type(h) for h in logger.handlers] == [logging.StreamHandler]
    assert logger.handlers[0].formatter._fmt == LOG_FORMAT


def test_normalize_and_display_names():
    assert normalize_key("  Moody Night  Energy ") == "moody-night-energy"
    assert normalize_key(None) == ""  # type: ignore[arg-type]
    assert display_name("high-rise-rooftop-glow") == "High Rise Rooftop Glow"


def test_catalog_requires_valid_default():
    with pytest.raises(ValueError, match="is not a catalog key"):
        Catalog("x", {"a": 1}, default_key="b")


@pytest.mark.parametrize(
    "dimension,default",
    [
        ("mood", "cinematic-luxury"),
        ("lighting", "window-natural"),
        ("composition", "rule-of-thirds"),
        ("scenario", "cafe"),
        ("pose", "natural-relaxed"),
        ("fashion", "elevated-basics"),
        ("style", "minimalist"),
    ],
)
def test_catalog_defaults_and_lookup(dimension, default):
    catalog = get_catalog(dimension)

    assert catalog.default_key == default
    assert catalog.resolve_key("definitely not here") == default
    assert get_block(dimension, "definitely not here") is catalog.default_block
    assert len(catalog.available_names()) == len(catalog)


def test_catalog_sizes():
    sizes = {name: len(catalog) for name, catalog in CATALOGS.items()}
    assert sizes == {
        "mood": 22,
        "scenario": 31,
        "composition": 18,
        "lighting": 20,
        "pose": 17,
        "fashion": 12,
        "style": 9,
    }


def test_lookup_by_display_name_and_keywords():
    mood = get_catalog("mood")

    assert mood.get("Moody Night Energy") is mood["moody-night-energy"]
    assert mood.available_names()[0] == "Cinematic Luxury"
    assert mood.keywords_for("Moody Night Energy") == mood["moody-night-energy"].keywords
    assert get_catalog("fashion").keywords_for("athleisure") == ()


def test_unknown_dimension_raises():
    with pytest.raises(ValueError, match="Unknown dimension"):
        get_catalog("hair")


def test_every_block_has_tags_for_scored_dimensions():
    for name in ("mood", "scenario", "composition", "lighting"):
        for key, block in get_catalog(name).items():
            assert block.tags, f"{name}:{key} has no tags"
            assert block.keywords, f"{name}:{key} has no keywords"
