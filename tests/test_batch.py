import logging

import pandas as pd
import pytest

from creative_direction.app import batch as app_batch
from creative_direction.framework.memory import HistoryStore
from creative_direction.framework.records import RECORD_FIELDNAMES


def _write_briefs(path, rows: list[str]) -> None:
    path.write_text("\n".join(rows) + "\n", encoding="utf-8")


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        "logging:\n"
        f"  log_dir: '{(tmp_path / 'logs').as_posix()}'\n"
        "batch:\n"
        f"  output_path: '{(tmp_path / 'from_config.csv').as_posix()}'\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("CREATIVE_DIRECTION_CONFIG", str(config_path))
    return config_path


def test_row_inputs_split_lists_and_skip_blanks():
    user, concept, session = app_batch.row_inputs(
        {
            "text": "gym workout",
            "mood": float("nan"),
            "outfit": "Athleisure",
            "trigger_word": "ohwx",
            "personal_styles": "glam| classic |",
            "session_id": "",
        }
    )

    assert concept == {"text": "gym workout", "outfit": "Athleisure"}
    assert user == {"trigger_word": "ohwx", "personal_styles": ["glam", "classic"]}
    assert session is None


def test_load_briefs_requires_text_column(tmp_path):
    path = tmp_path / "briefs.csv"
    _write_briefs(path, ["brief,mood", "x,y"])

    with pytest.raises(ValueError, match="missing required column 'text'"):
        app_batch.load_briefs(str(path))


def test_load_briefs_path_errors(tmp_path):
    with pytest.raises(FileNotFoundError):
        app_batch.load_briefs(str(tmp_path / "missing.csv"))
    with pytest.raises(ValueError, match="directory"):
        app_batch.load_briefs(str(tmp_path))
    empty = tmp_path / "empty.csv"
    empty.write_text("", encoding="utf-8")
    with pytest.raises(ValueError, match="empty"):
        app_batch.load_briefs(str(empty))


def test_compose_frame_threads_history_per_person():
    df = pd.DataFrame(
        {
            "text": ["gym workout"] * 3 + ["gym workout"],
            "trigger_word": ["ohwx"] * 3 + ["zkq"],
        }
    )
    store = HistoryStore()

    results = app_batch.compose_frame(df, store=store)

    first_three = [result.fashion.key for result in results[:3]]
    assert len(set(first_three)) == 3
    # A different person starts with a fresh history.
    assert results[3].fashion.key == results[0].fashion.key
    assert store.keys() == ("ohwx", "zkq")


def test_compose_frame_reports_row_on_bad_input(monkeypatch):
    df = pd.DataFrame({"text": ["ok", "bad"]})

    def broken_row_inputs(row):
        if row["text"] == "bad":
            raise TypeError("user.gender must be a string")
        return {}, {"text": row["text"]}, None

    monkeypatch.setattr(app_batch, "row_inputs", broken_row_inputs)

    with pytest.raises(ValueError, match=r"Briefs row 1: user\.gender must be a string"):
        app_batch.compose_frame(df)


def test_run_batch_writes_records_csv(tmp_path, isolated_config):
    briefs = tmp_path / "briefs.csv"
    _write_briefs(
        briefs,
        [
            "text,mood,trigger_word,gender,personal_styles,session_id",
            "cozy morning coffee in bed,,ohwx,woman,scandi|classic,s1",
            "dramatic elevator selfie at night,Moody Night Energy,ohwx,woman,,s1",
            '"rooftop at sunset, golden glow",,,,,',
        ],
    )
    out = tmp_path / "out" / "records.csv"

    results, target = app_batch.run_batch(str(briefs), output_path=str(out), run_id="batch_unit")

    assert target == str(out)
    assert len(results) == 3
    written = pd.read_csv(out, keep_default_na=False)
    assert list(written.columns) == RECORD_FIELDNAMES
    assert written.loc[1, "mood"] == "moody-night-energy"
    assert written.loc[0, "scenario"] == "bedroom-cozy"
    assert written.loc[2, "text"] == "rooftop at sunset, golden glow"
    assert (tmp_path / "logs" / "batch_unit_oplog.log").exists()
    assert logging.getLogger("creative_direction.batch_unit").handlers == []


def test_run_batch_closes_log_file_when_a_row_fails(tmp_path, isolated_config):
    briefs = tmp_path / "briefs.csv"
    _write_briefs(briefs, ["text,model_weight", "gym workout,heavy"])

    with pytest.raises(ValueError, match="Briefs row 0: model_weight must be a number"):
        app_batch.run_batch(str(briefs), run_id="batch_fail")

    assert logging.getLogger("creative_direction.batch_fail").handlers == []


def test_row_inputs_reads_preferred_mood_and_weight():
    user, _concept, _session = app_batch.row_inputs(
        {"text": "x", "preferred_mood": "Moody Night Energy", "model_weight": " 0.85 "}
    )

    assert user == {"preferred_mood": "Moody Night Energy", "model_weight": 0.85}


def test_model_weight_reaches_the_records(tmp_path, isolated_config):
    briefs = tmp_path / "briefs.csv"
    _write_briefs(briefs, ["text,model_weight", "gym workout,0.9", "street style,"])
    out = tmp_path / "weights.csv"

    app_batch.run_batch(str(briefs), output_path=str(out), run_id="batch_weight")

    written = pd.read_csv(out, dtype=str, keep_default_na=False)
    assert written["model_weight"].tolist() == ["0.9", ""]


def test_run_batch_falls_back_to_configured_output(tmp_path, isolated_config):
    briefs = tmp_path / "briefs.csv"
    _write_briefs(briefs, ["text", "street style in the city"])

    _results, target = app_batch.run_batch(str(briefs), run_id="batch_cfg")

    assert target == (tmp_path / "from_config.csv").as_posix()
    assert (tmp_path / "from_config.csv").exists()
