#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Script: main.py
Location: src/floor_heating_planner/main.py

Description:
    Command line entry point for the Floor Heating Planner. Reads a room
    description from JSON, plans the heating pipe layout, and writes the
    plan as JSON plus optional SVG path data for the renderer.

Usage:
    python -m floor_heating_planner.main --input room.json --output plan.json

    room.json:
        {
            "room": {"width_m": 5, "length_m": 4},
            "obstacles": [{"x": 10, "y": 10, "width": 5, "height": 5}],
            "passageways": [{"side": "top", "position_m": 1.0, "width_m": 0.9}],
            "no_pipe_zones": [],
            "options": {"algorithm": "boustrophedon", "loop_spacing_units": 2},
            "config": {"max_circuit_length_m": 90}
        }
"""

import argparse
import json
import logging
import sys
from typing import Any, List, Optional

from floor_heating_planner.layout import (
    InvalidInputError,
    PlannerError,
    plan_room_from_dict,
)
from floor_heating_planner.utils.logging_config import PlannerLogger

logger = logging.getLogger(__name__)


def parse_arguments(argv: Optional[List[str]] = None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Plan radiant floor heating pipe layouts"
    )

    parser.add_argument(
        "--input",
        required=True,
        help="Path to the room description JSON"
    )
    parser.add_argument(
        "--output",
        help="Path for the plan JSON (default: print to stdout)"
    )
    parser.add_argument(
        "--svg-path",
        help="Optional file to write the path drawing commands to"
    )
    parser.add_argument(
        "--scale",
        type=float,
        default=1.0,
        help="Multiplier for drawing command coordinates (default: 1.0)"
    )
    parser.add_argument(
        "--log-dir",
        help="Directory for log files (default: console only)"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug output"
    )

    return parser.parse_args(argv)


def load_room_description(path: str) -> Any:
    """
    Read a room description JSON file.

    Raises:
        InvalidInputError: If the file cannot be read or is not valid JSON
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except OSError as e:
        raise InvalidInputError(
            f"Cannot read input file {path}: {e.strerror or e}",
            extra={"path": path},
        ) from e
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise InvalidInputError(
            f"Input file {path} is not valid JSON: {e}",
            extra={"path": path},
        ) from e


def main(argv: Optional[List[str]] = None) -> int:
    """Run the planner; returns the process exit code."""
    args = parse_arguments(argv)
    PlannerLogger.configure(debug_mode=args.debug, log_dir=args.log_dir)

    try:
        data = load_room_description(args.input)
        plan = plan_room_from_dict(data)
    except PlannerError as e:
        logger.error(f"Planning failed: {e.detail}")
        print(json.dumps({"error": e.to_dict()}, indent=2))
        return 1

    output = plan.to_json()
    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(output)
        logger.info(f"Plan written to {args.output}")
    else:
        print(output)

    if args.svg_path:
        with open(args.svg_path, "w", encoding="utf-8") as f:
            f.write(plan.result.draw_commands(args.scale))
        logger.info(f"Path drawing commands written to {args.svg_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
