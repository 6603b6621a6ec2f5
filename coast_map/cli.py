#!/usr/bin/env python3
# coast_map/cli.py
"""
Entry point for Coastline Map.
Loads the player config, checks it against the map and prints the map.
"""

import logging
import os
import sys

from coast_map import config
from coast_map.coastline import CoastlineMap
from coast_map.errors import CoastMapError, UsageError, ValidationError
from coast_map.logging_conf import setup_logging
from coast_map.styles import make_style
from coast_map.version import version_info

log = logging.getLogger(__name__)

SEPARATOR = "-" * 33
LEGEND = "P = your position, '#' = land, '~' = water, '*' = landmark"

_USAGE = (
    "Usage: {prog} <config-file>\n"
    "\n"
    "Config file format (key=value pairs):\n"
    "  image_path=/absolute/or/relative/path/to/shoreline.jpg\n"
    "  x=player column on the map (0-based)\n"
    "  y=player row on the map (0-based)\n"
    "\n"
    "Example:\n"
    "  image_path=assets/shoreline_reference.jpg\n"
    "  x=12\n"
    "  y=6\n"
)


def print_usage(prog: str) -> None:
    print(_USAGE.format(prog=prog), end="")


def _check_bounds(game_map: CoastlineMap, x: int, y: int) -> None:
    if not game_map.in_bounds(x, y):
        raise ValidationError(
            f"player coordinates ({x}, {y}) are outside the map. "
            f"Valid range: x ∈ [0, {game_map.width - 1}], y ∈ [0, {game_map.height - 1}]"
        )


def run(config_path: str) -> None:
    cfg = config.load(config_path)
    setup_logging(cfg.log_level, cfg.log_file)
    log.debug("%s loaded %s", version_info(), config_path)

    if not os.path.exists(cfg.image_path):
        # Always shown, whatever log_level is
        print(f"Warning: configured map image not found: {cfg.image_path}", file=sys.stderr)

    map_cfg = config.DEFAULT_SETTINGS["map"]
    game_map = CoastlineMap(map_cfg["width"], map_cfg["height"], style=make_style(cfg.theme))
    _check_bounds(game_map, cfg.x, cfg.y)

    print("==== Coastline Map Prototype ====")
    print(f"Map image path: {os.path.abspath(cfg.image_path)}")
    print(f"Player position: ({cfg.x}, {cfg.y})")
    print(SEPARATOR)
    sys.stdout.flush()
    game_map.render(cfg.x, cfg.y)
    print(SEPARATOR)
    print(LEGEND)


def main(argv=None) -> int:
    argv = sys.argv if argv is None else argv
    prog = argv[0] if argv else "coast-map"
    try:
        if len(argv) < 2:
            raise UsageError("missing config file argument")
        run(argv[1])
    except UsageError:
        print_usage(prog)
        return 1
    except CoastMapError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
