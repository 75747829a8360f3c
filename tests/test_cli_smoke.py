import json

import pytest

from creative_direction import cli
from creative_direction.app import compose as app_compose


@pytest.fixture(autouse=True)
def default_config(monkeypatch):
    monkeypatch.delenv("CREATIVE_DIRECTION_CONFIG", raising=False)


def test_cli_list_blocks_smoke(capsys):
    rc = cli.main(["list-blocks", "mood"])
    assert rc == 0

    out = capsys.readouterr().out
    assert out.startswith("mood:\n")
    assert "  Moody Night Energy" in out


def test_cli_list_all_blocks(capsys):
    assert cli.main(["list-blocks"]) == 0
    out = capsys.readouterr().out
    for dimension in ("mood:", "scenario:", "composition:", "lighting:", "pose:", "fashion:", "style:"):
        assert dimension in out


def test_cli_list_blocks_unknown_dimension(capsys):
    assert cli.main(["list-blocks", "hair"]) == 1
    assert "Unknown dimension" in capsys.readouterr().err


def test_cli_analyze_prints_profile_json(capsys):
    assert cli.main(["analyze", "dramatic elevator selfie at night"]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert payload["core_scene"] == "elevator"
    assert payload["energy"] == ["dramatic", "confident"]


def test_cli_compose_text_output(capsys):
    rc = cli.main(
        [
            "compose",
            "cozy morning coffee in bed with a book",
            "--trigger",
            "ohwx",
            "--gender",
            "woman",
            "--style",
            "scandi",
            "--features",
            "green eyes, freckles",
        ]
    )
    assert rc == 0

    out = capsys.readouterr().out
    assert out.startswith("ohwx, woman; clear facial structure")
    assert "Negative: blurry, low quality" in out
    assert "Creative direction for this concept:" in out


def test_cli_compose_json_with_overrides(capsys, monkeypatch):
    seen = {}
    original = app_compose.run_compose

    def spy(user, concept, **kwargs):
        seen["user"], seen["concept"] = user, concept
        return original(user, concept, **kwargs)

    monkeypatch.setattr(app_compose, "run_compose", spy)

    rc = cli.main(
        ["compose", "street at night", "--mood", "Urban Noir Energy", "--outfit", "street-edge", "--json", "--scores"]
    )
    assert rc == 0

    payload = json.loads(capsys.readouterr().out)
    assert payload["applied_modules"]["mood"] == "urban-noir-energy"
    assert payload["applied_modules"]["fashion"] == "street-edge"
    assert payload["selections"]["lighting"]["score_table"]
    assert seen["concept"] == {"text": "street at night", "mood": "Urban Noir Energy", "outfit": "street-edge"}
    assert seen["user"] == {}


def test_cli_compose_missing_config_file_is_an_error(tmp_path, capsys):
    rc = cli.main(["compose", "cafe", "--config", str(tmp_path / "missing.yaml")])

    assert rc == 1
    assert "Config file not found" in capsys.readouterr().err


def test_cli_compose_invalid_config_is_an_error(tmp_path, capsys):
    config_path = tmp_path / "config.yaml"
    config_path.write_text("prompt:\n  max_tokens: lots\n", encoding="utf-8")

    rc = cli.main(["compose", "cafe", "--config", str(config_path)])

    assert rc == 1
    assert "prompt.max_tokens must be an int" in capsys.readouterr().err


def test_cli_batch_smoke(tmp_path, capsys):
    briefs = tmp_path / "briefs.csv"
    briefs.write_text("text,trigger_word\ngym workout,ohwx\nrooftop at dusk,ohwx\n", encoding="utf-8")
    out = tmp_path / "records.csv"

    rc = cli.main(["batch", str(briefs), "--output", str(out)])

    assert rc == 0
    assert out.exists()
    assert f"Wrote 2 records to {out}" in capsys.readouterr().out


def test_cli_batch_without_output_prints_prompts(tmp_path, capsys):
    briefs = tmp_path / "briefs.csv"
    briefs.write_text("text\ngym workout\n", encoding="utf-8")

    assert cli.main(["batch", str(briefs)]) == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert len(lines) == 1
    assert lines[0].startswith("person; clear facial structure")


def test_cli_batch_missing_text_column(tmp_path, capsys):
    briefs = tmp_path / "briefs.csv"
    briefs.write_text("brief\nx\n", encoding="utf-8")

    assert cli.main(["batch", str(briefs)]) == 1
    assert "missing required column 'text'" in capsys.readouterr().err


def test_cli_requires_a_command():
    with pytest.raises(SystemExit):
        cli.main([])
