#!/usr/bin/env python3
# coast_map/coastline.py
"""
Procedural coastline terrain.

Water on the west, land on the east, split by a sine-perturbed column
threshold per row, plus a few fixed landmarks. Generation is pure and
seed-free: the same (width, height) always yields the same grid.
"""

from __future__ import annotations

import math
from typing import List, Optional, Tuple

import numpy as np
from prompt_toolkit.styles import Style

from coast_map.rendering.ascii_mode import build_frame, frame_to_lines, print_frame
from coast_map.styles import make_style

__all__ = [
    "WATER",
    "LAND",
    "MARKER",
    "CoastlineMap",
    "coastline_threshold",
    "landmark_positions",
]

WATER = "~"
LAND = "#"
MARKER = "*"


def coastline_threshold(row: int, width: int) -> int:
    """First land column of a row. Not clamped to [0, width)."""
    return math.floor(width * 0.3 + math.sin(row / 3.0) * width * 0.05)


def landmark_positions(width: int, height: int) -> List[Tuple[int, int]]:
    """Fixed points of interest as (col, row); may fall off small maps."""
    return [
        (width - 5, height // 4),
        (width - 8, height // 2),
        (width - 3, height * 3 // 4),
    ]


class CoastlineMap:
    """Fixed-size terrain grid, generated once on construction."""

    def __init__(self, width: int, height: int, style: Optional[Style] = None):
        self._width = int(width)
        self._height = int(height)
        self._style = style or make_style()
        self._terrain = self._generate()
        self._terrain.flags.writeable = False

    # ------------- generation -------------

    def _generate(self) -> np.ndarray:
        grid = np.full((self._height, self._width), WATER, dtype="<U1")

        thresholds = np.array(
            [coastline_threshold(row, self._width) for row in range(self._height)],
            dtype=np.int64,
        )
        cols = np.arange(self._width)
        # Thresholds outside [0, width) give an all-land or all-water row
        grid[cols[np.newaxis, :] >= thresholds[:, np.newaxis]] = LAND

        for col, row in landmark_positions(self._width, self._height):
            if self.in_bounds(col, row):
                grid[row, col] = MARKER
        return grid

    # ------------- queries -------------

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def terrain(self) -> np.ndarray:
        """Read-only (height, width) array of terrain glyphs."""
        return self._terrain

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def symbol_at(self, x: int, y: int) -> str:
        if not self.in_bounds(x, y):
            raise IndexError(f"({x}, {y}) is outside a {self._width}x{self._height} map")
        return str(self._terrain[y, x])

    # ------------- output -------------

    def rows(self, player_x: int, player_y: int) -> List[str]:
        """Rendered text rows with the player drawn as 'P'."""
        return frame_to_lines(build_frame(self._terrain, (player_x, player_y)))

    def render(self, player_x: int, player_y: int, stream=None) -> None:
        """Print the map with the player overlay, one line per row."""
        frame = build_frame(self._terrain, (player_x, player_y))
        print_frame(frame, self._style, stream)
