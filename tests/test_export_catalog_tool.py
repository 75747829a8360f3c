import json

import pandas as pd

from tools.export_catalog import catalog_frame, main, summary


def test_catalog_frame_flattens_lists():
    df = catalog_frame("fashion")

    assert len(df) == 12
    assert df.loc[df["default"], "key"].tolist() == ["elevated-basics"]
    athleisure = df.set_index("key").loc["athleisure"]
    assert athleisure["scenario_affinity"] == "fitness|gym"


def test_summary_covers_every_catalog():
    rows = summary()
    assert [row["dimension"] for row in rows] == [
        "mood",
        "scenario",
        "composition",
        "lighting",
        "pose",
        "fashion",
        "style",
    ]


def test_export_to_csv(tmp_path, capsys):
    out = tmp_path / "exports" / "lighting.csv"

    assert main(["dimension", "lighting", "--csv", str(out)]) == 0

    written = pd.read_csv(out)
    assert len(written) == 20
    assert "Wrote 20 lighting blocks" in capsys.readouterr().out


def test_summary_json(capsys):
    assert main(["--json", "summary"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["dimensions"][0] == {"dimension": "mood", "blocks": 22, "default": "cinematic-luxury"}
