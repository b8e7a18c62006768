#!/usr/bin/env python3
"""
CLI: Generate one palette and print it; optionally save it to history or export it.
Usage:
  python scripts/generate.py
  python scripts/generate.py --count 6 --mode analogous --seed 7
  python scripts/generate.py --mode gradient --hue-min 180 --hue-max 300 --export css
  python scripts/generate.py --export png --output palette.png
"""
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

import argparse
import json

from colorgen.config import load_config
from colorgen.export import EXPORT_FORMATS
from colorgen.generation import GENERATION_MODES
from colorgen.random_utils import seeded_random_between
from colorgen.session import PaletteSession
from colorgen.state import open_storage
from colorgen.workflow_utils import setup_logging


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Generate a color palette from HSL ranges and a generation mode."
    )
    parser.add_argument("--count", "-n", type=int, default=None, help="Number of colors (default: config palette.count).")
    parser.add_argument("--mode", "-m", choices=GENERATION_MODES, default=None, help="Generation mode (default: config palette.mode).")
    for bound in ("hue-min", "hue-max", "sat-min", "sat-max", "light-min", "light-max"):
        parser.add_argument(f"--{bound}", type=int, default=None, help=f"Override {bound.replace('-', ' ')}.")
    parser.add_argument(
        "--lock",
        type=int,
        action="append",
        default=[],
        help="Keep the color at this position from the last saved palette (repeatable).",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducible palettes.")
    parser.add_argument(
        "--no-history",
        action="store_true",
        help="Do not record the generated palette in history.",
    )
    parser.add_argument("--export", "-e", choices=EXPORT_FORMATS, default=None, help="Export the palette in this format.")
    parser.add_argument("--output", "-o", type=Path, default=None, help="Export file path (png defaults to the export dir).")
    parser.add_argument("--json", action="store_true", help="Print the palette as JSON instead of a table.")
    parser.add_argument("--config", type=Path, default=None, help="Path to config YAML (default: config/default.yaml).")
    args = parser.parse_args()

    config = load_config(args.config)
    setup_logging(config.get("logging", {}).get("level", "INFO"))
    storage = None if args.no_history else open_storage(config)
    session = PaletteSession(config, storage=storage, random_between=seeded_random_between(args.seed))

    # Locks apply to the most recent saved palette; load it before any overrides
    if args.lock:
        if session.store.history:
            session.store.load_from_history(0)
        for index in args.lock:
            session.toggle_lock(index)
    if args.count is not None:
        session.set_count(args.count)
    if args.mode is not None:
        session.set_mode(args.mode)
    overrides = {
        key: getattr(args, key)
        for key in ("hue_min", "hue_max", "sat_min", "sat_max", "light_min", "light_max")
        if getattr(args, key) is not None
    }
    if overrides:
        session.set_ranges(**overrides)

    colors = session.generate()

    if args.json:
        print(json.dumps([c.to_dict() for c in colors], indent=2))
    else:
        print(f"Mode: {session.mode}  Count: {len(colors)}")
        for i, color in enumerate(colors):
            marker = "*" if session.store.is_locked(i) else " "
            print(f"{marker} {i:>2}  {color.hex.upper()}  {color.hsl:<22} {color.name}")

    if args.export:
        result = session.export(args.export, args.output)
        if args.export == "png" or args.output is not None:
            print(f"Exported {args.export}: {args.output or result}")
        else:
            print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
