#!/usr/bin/env python3
"""
CLI: Inspect and edit saved favorites and palette history.
Usage:
  python scripts/favorites.py list
  python scripts/favorites.py add "#ff8800" "rgb(10, 20, 30)"
  python scripts/favorites.py remove 2
  python scripts/favorites.py history
  python scripts/favorites.py history --load 3 --export scss
"""
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

import argparse

from colorgen.color import Color, parse_color_string
from colorgen.config import load_config
from colorgen.export import TEXT_FORMATS
from colorgen.session import PaletteSession
from colorgen.state import open_storage
from colorgen.workflow_utils import setup_logging


def _print_colors(colors: list[Color]) -> None:
    for i, color in enumerate(colors):
        print(f"  {i:>2}  {color.hex.upper()}  {color.name}")


def main() -> int:
    parser = argparse.ArgumentParser(description="Manage saved favorites and palette history.")
    parser.add_argument("--config", type=Path, default=None, help="Path to config YAML (default: config/default.yaml).")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="List favorite colors.")
    add = sub.add_parser("add", help="Toggle colors (hex or rgb(...)) in favorites.")
    add.add_argument("colors", nargs="+")
    remove = sub.add_parser("remove", help="Remove the favorite at a position.")
    remove.add_argument("index", type=int)
    history = sub.add_parser("history", help="List saved palettes, or load one.")
    history.add_argument("--load", type=int, default=None, help="Load the entry at this position.")
    history.add_argument("--export", choices=TEXT_FORMATS, default=None, help="Export the loaded palette.")
    args = parser.parse_args()

    config = load_config(args.config)
    setup_logging(config.get("logging", {}).get("level", "INFO"))
    session = PaletteSession(config, storage=open_storage(config))
    store = session.store

    if args.command == "list":
        if not store.favorites:
            print("No favorite colors.")
        _print_colors(store.favorites)
    elif args.command == "add":
        for value in args.colors:
            color = Color.from_rgb(*parse_color_string(value))
            added = store.toggle_favorite(color)
            print(f"{'Added' if added else 'Removed'} {color.hex.upper()} ({color.name})")
    elif args.command == "remove":
        removed = store.remove_favorite(args.index)
        if removed is None:
            print(f"No favorite at position {args.index}.")
            return 1
        print(f"Removed {removed.hex.upper()} ({removed.name})")
    elif args.command == "history":
        if args.load is None:
            if not store.history:
                print("No saved palettes.")
            for i, entry in enumerate(store.history):
                hexes = " ".join(c.hex.upper() for c in entry.colors)
                print(f"  {i:>2}  {entry.timestamp}  {entry.mode:<10} {hexes}")
            return 0
        entry = session.load_history(args.load)
        if entry is None:
            print(f"No history entry at position {args.load}.")
            return 1
        print(f"Loaded palette from {entry.timestamp} (mode {entry.mode}):")
        _print_colors(session.colors)
        if args.export:
            print(session.export(args.export))
    return 0


if __name__ == "__main__":
    sys.exit(main())
