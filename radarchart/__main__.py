"""
Radar chart geometry CLI.

Usage:
  python -m radarchart scores.json                     # final frame as JSON
  python -m radarchart scores.json --progress 0.5      # mid-animation frame
  python -m radarchart scores.json --frames 16         # eased animation frames
  python -m radarchart scores.json --max-value 10 -o frame.json

The input file holds a JSON list of {"name": ..., "value": ...} records.
Exit codes: 0 = chart built, 1 = data failed validation, 2 = bad input/config.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv
from pydantic import ValidationError as SettingsError

from radarchart.config import ChartSettings
from radarchart.engine.animation import FixedStepClock
from radarchart.engine.chart import build_chart
from radarchart.engine.diagnostics import format_validation_errors

logger = logging.getLogger("radarchart")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="radarchart",
        description="Validate radar chart scores and emit chart geometry as JSON",
    )
    parser.add_argument("input", help="JSON file with a list of {name, value} records ('-' for stdin)")
    parser.add_argument("-o", "--output", help="Write JSON here instead of stdout")
    parser.add_argument("--width", type=float, help="Canvas width in px")
    parser.add_argument("--height", type=float, help="Canvas height in px")
    parser.add_argument("--max-value", type=float, help="Top of the value scale")
    parser.add_argument("--min-value", type=float, help="Bottom of the value scale")
    parser.add_argument("--progress", type=float, default=1.0, help="Animation progress 0-1 (default 1)")
    parser.add_argument("--frames", type=int, default=0, help="Emit N (>= 2) eased animation frames instead")
    parser.add_argument("--indent", type=int, default=None, help="Pretty-print JSON")
    parser.add_argument("--debug", action="store_true", help="List every data warning in the log")
    return parser


def _load_settings(args: argparse.Namespace) -> ChartSettings:
    overrides = {
        "width": args.width,
        "height": args.height,
        "max_value": args.max_value,
        "min_value": args.min_value,
    }
    overrides = {k: v for k, v in overrides.items() if v is not None}
    if args.debug:
        overrides["debug"] = True
        overrides["log_level"] = "debug"
    return ChartSettings(**overrides)


def _read_input(path: str) -> object:
    if path == "-":
        return json.load(sys.stdin)
    return json.loads(Path(path).read_text(encoding="utf-8"))


def _write_output(text: str, path: str | None) -> None:
    if path:
        Path(path).write_text(text + "\n", encoding="utf-8")
    else:
        print(text)


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    args = _build_parser().parse_args(argv)

    try:
        settings = _load_settings(args)
    except SettingsError as e:
        logging.basicConfig(level=logging.ERROR)
        logger.error("Invalid configuration: %s", e)
        return 2

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    try:
        raw = _read_input(args.input)
    except (OSError, json.JSONDecodeError) as e:
        logger.error("Cannot read %s: %s", args.input, e)
        return 2

    result, chart = build_chart(raw, settings)
    if chart is None:
        logger.error("Data failed validation: %s", format_validation_errors(result.errors))
        _write_output(result.model_dump_json(indent=args.indent), args.output)
        return 1

    if args.frames > 1:
        step = settings.animation_duration_ms / (args.frames - 1)
        clock = FixedStepClock(step, settings.animation_duration_ms, settings.easing_factor)
        frames = [f.model_dump(mode="json") for f in chart.frames(clock, max_frames=args.frames)]
        _write_output(json.dumps(frames, indent=args.indent), args.output)
    else:
        _write_output(chart.tick(args.progress).model_dump_json(indent=args.indent), args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
