from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Sequence
from typing import Any


def _print_json(value: Any) -> None:
    sys.stdout.write(json.dumps(value, ensure_ascii=False, indent=2))
    sys.stdout.write("\n")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="creative_direction", add_help=True)
    sub = parser.add_subparsers(dest="command", required=True)

    compose = sub.add_parser("compose", help="Compose a prompt for one brief")
    compose.add_argument("text", help="Free-text concept brief")
    compose.add_argument("--trigger", default=None, help="Identity trigger word")
    compose.add_argument("--gender", default=None)
    compose.add_argument("--ethnicity", default=None)
    compose.add_argument("--style", action="append", default=None, help="Personal style (repeatable)")
    compose.add_argument("--palette", action="append", default=None, help="Palette colour (repeatable)")
    compose.add_argument("--features", default=None, help="Physical features, comma separated")
    compose.add_argument("--weight", type=float, default=None, help="Identity model weight")
    for dimension in ("mood", "scenario", "composition", "lighting", "outfit"):
        compose.add_argument(f"--{dimension}", default=None, help=f"{dimension.title()} override")
    compose.add_argument("--tone", default=None, help="Emotional tone override")
    compose.add_argument("--json", action="store_true", help="Print the full result as JSON")
    compose.add_argument("--scores", action="store_true", help="Include score tables in JSON")
    compose.add_argument("--config", default=None, help="Config file path")

    analyze = sub.add_parser("analyze", help="Print the semantic profile of a brief")
    analyze.add_argument("text")

    list_blocks = sub.add_parser("list-blocks", help="List catalog display names")
    list_blocks.add_argument("dimension", nargs="?", default=None)

    batch = sub.add_parser("batch", help="Compose every brief in a CSV")
    batch.add_argument("input", help="Briefs CSV (column 'text' required)")
    batch.add_argument("--output", default=None, help="Records CSV to write")
    batch.add_argument("--config", default=None, help="Config file path")

    return parser


def _compose_inputs(args: argparse.Namespace) -> tuple[dict[str, Any], dict[str, Any]]:
    user: dict[str, Any] = {
        "trigger_word": args.trigger,
        "gender": args.gender,
        "ethnicity": args.ethnicity,
        "personal_styles": args.style,
        "color_palette": args.palette,
        "physical_preferences": args.features,
        "model_weight": args.weight,
    }
    concept: dict[str, Any] = {
        "text": args.text,
        "mood": args.mood,
        "scenario": args.scenario,
        "composition": args.composition,
        "lighting": args.lighting,
        "outfit": args.outfit,
        "emotional_tone": args.tone,
    }
    return (
        {key: value for key, value in user.items() if value is not None},
        {key: value for key, value in concept.items() if value is not None},
    )


def _run_compose(args: argparse.Namespace) -> int:
    from .app.compose import run_compose

    user, concept = _compose_inputs(args)
    result = run_compose(user, concept, config_path=args.config)
    if args.json:
        _print_json(result.to_dict(include_score_tables=args.scores))
        return 0

    print(result.final_prompt)
    print()
    print(f"Negative: {result.negative_prompt}")
    print()
    print(result.explanation)
    return 0


def _run_list_blocks(dimension: str | None) -> int:
    from .library.registry import CATALOGS, get_catalog

    names = [dimension] if dimension else list(CATALOGS)
    for name in names:
        catalog = get_catalog(name)
        print(f"{catalog.dimension}:")
        for display in catalog.available_names():
            print(f"  {display}")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(list(argv) if argv is not None else None)

    try:
        if args.command == "compose":
            return _run_compose(args)

        if args.command == "analyze":
            from .engine.concept import analyze

            _print_json(analyze(args.text).to_dict())
            return 0

        if args.command == "list-blocks":
            return _run_list_blocks(args.dimension)

        if args.command == "batch":
            from .app.batch import run_batch

            results, target = run_batch(args.input, output_path=args.output, config_path=args.config)
            if target is None:
                for result in results:
                    print(result.final_prompt)
            else:
                print(f"Wrote {len(results)} records to {target}")
            return 0
    except (FileNotFoundError, TypeError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    raise AssertionError(f"Unhandled command: {args.command}")


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main(sys.argv[1:]))
