#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Script: main.py
Location: src/floorplan_drafter/main.py

Description:
    Command line entry point: reads a layout JSON file, validates and drafts
    one floor, and writes the SVG sheet next to it (or to --output).

Usage:
    python -m src.floorplan_drafter.main --layout house.json --output house.svg
    floorplan-drafter --layout house.json --level 1 --debug
"""

import argparse
import json
import os
import sys
from typing import List, Optional

from src.floorplan_drafter.drafting import EmptyLayoutError, draft_floor_plan
from src.floorplan_drafter.layout.layout_types import FloorPlanLayout, LayoutParseError
from src.floorplan_drafter.rendering import RenderOptions, save_svg
from src.floorplan_drafter.utils.logging_config import FloorPlanLogger, get_logger

logger = get_logger(__name__)


def parse_arguments(argv: Optional[List[str]] = None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Draft an architectural floor plan SVG from a layout JSON file"
    )

    parser.add_argument(
        "--layout",
        required=True,
        help="Path to the layout JSON file"
    )
    parser.add_argument(
        "--output",
        help="Path of the SVG to write (default: layout path with .svg)"
    )
    parser.add_argument(
        "--level",
        type=int,
        default=0,
        help="Floor level to draw (default: 0)"
    )
    parser.add_argument(
        "--scale",
        type=float,
        help="Drawing units per foot (default: 1/4\" = 1'-0\")"
    )
    parser.add_argument(
        "--title",
        help="Title block text"
    )

    # Layer switches
    parser.add_argument("--no-hatching", action="store_true", help="Draw walls solid")
    parser.add_argument("--no-dimensions", action="store_true", help="Omit dimension chains")

    # Logging
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug output"
    )
    parser.add_argument(
        "--log-dir",
        help="Write a log file to this directory"
    )

    return parser.parse_args(argv)


def load_layout(path: str) -> FloorPlanLayout:
    with open(path, "r", encoding="utf-8") as f:
        return FloorPlanLayout.from_dict(json.load(f))


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point. Returns the process exit code."""
    args = parse_arguments(argv)
    FloorPlanLogger.configure(
        debug_mode=args.debug,
        log_dir=args.log_dir or "logs",
        log_to_file=bool(args.log_dir),
    )

    output = args.output or os.path.splitext(args.layout)[0] + ".svg"

    try:
        layout = load_layout(args.layout)
        result = draft_floor_plan(layout, level=args.level, scale=args.scale)
    except (OSError, json.JSONDecodeError, LayoutParseError, EmptyLayoutError) as e:
        logger.error(f"Cannot draft {args.layout}: {str(e)}")
        return 1

    for issue in result.validation.errors:
        logger.error(f"[{issue.code.value}] {issue.message}")

    options = RenderOptions(
        show_hatching=not args.no_hatching,
        show_dimensions=not args.no_dimensions,
        show_room_dimensions=not args.no_dimensions,
        title=args.title,
    )
    save_svg(result.drawing, output, options)

    print(f"Wrote {output}")
    print(
        f"  {len(result.validation.errors)} error(s), "
        f"{len(result.validation.warnings)} warning(s)"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
