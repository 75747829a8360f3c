from __future__ import annotations

import argparse
import json
import sys
from dataclasses import asdict
from pathlib import Path
from typing import Any

import pandas as pd

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from creative_direction.library.registry import CATALOGS, get_catalog


def _print_json(value: Any) -> None:
    sys.stdout.write(json.dumps(value, ensure_ascii=False, indent=2))
    sys.stdout.write("\n")


def _flatten(value: Any) -> Any:
    if isinstance(value, (frozenset, set)):
        return "|".join(sorted(value))
    if isinstance(value, (list, tuple)):
        return "|".join(str(item) for item in value)
    return value


def catalog_frame(dimension: str) -> pd.DataFrame:
    """One row per block; list-valued fields are `|`-joined like the batch CSV."""

    catalog = get_catalog(dimension)
    rows = []
    for key, block in catalog.items():
        row = {"key": key, "default": key == catalog.default_key}
        row.update({name: _flatten(value) for name, value in asdict(block).items()})
        rows.append(row)
    return pd.DataFrame(rows)


def summary() -> list[dict[str, Any]]:
    return [
        {"dimension": name, "blocks": len(catalog), "default": catalog.default_key}
        for name, catalog in CATALOGS.items()
    ]


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="export_catalog",
        description="Print or export the built-in block catalogs.",
    )
    parser.add_argument("--json", action="store_true", help="Emit machine-readable JSON.")

    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("summary", help="Block counts and defaults per dimension.")
    dimension_parser = subparsers.add_parser("dimension", help="Every block of one dimension.")
    dimension_parser.add_argument("name", help="mood, scenario, composition, lighting, pose, fashion or style.")
    dimension_parser.add_argument("--csv", default=None, help="Write the table to this CSV path.")

    args = parser.parse_args(argv)

    if args.command == "summary":
        rows = summary()
        if args.json:
            _print_json({"dimensions": rows})
        else:
            for row in rows:
                print(f"{row['dimension']}  blocks={row['blocks']}  default={row['default']}")
        return 0

    if args.command == "dimension":
        df = catalog_frame(args.name)
        if args.csv:
            Path(args.csv).parent.mkdir(parents=True, exist_ok=True)
            df.to_csv(args.csv, index=False, encoding="utf-8")
            print(f"Wrote {len(df)} {args.name} blocks to {args.csv}")
        elif args.json:
            _print_json(df.to_dict(orient="records"))
        else:
            print(df[["key", "default"]].to_string(index=False))
        return 0

    raise AssertionError(f"Unhandled command: {args.command}")


if __name__ == "__main__":
    raise SystemExit(main())
