#!/usr/bin/env python3
# coast_map/rendering/ascii_mode.py
"""
ASCII terrain renderer.

- build_frame(grid, player) turns a terrain grid into style runs per row,
  with the player glyph substituted at render time.
- Style format: list[list[tuple[str, str]]] suitable for prompt_toolkit
  FormattedText, using "class:<terrain>" style names from styles.py.
- print_frame() colours terminals through prompt_toolkit and writes plain
  rows to anything else (pipes, files, captured stdout).
"""

from __future__ import annotations

import sys
from typing import Dict, List, Optional, Tuple

import numpy as np
from prompt_toolkit import print_formatted_text
from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.output import create_output
from prompt_toolkit.styles import Style

StyleRun = Tuple[str, str]                # (style, text)
LineFrag = List[StyleRun]                 # one terminal row as runs
FrameFrag = List[LineFrag]                # full frame as rows

PLAYER = "P"

__all__ = [
    "PLAYER",
    "GLYPH_STYLES",
    "build_frame",
    "frame_to_lines",
    "print_frame",
    "StyleRun",
    "LineFrag",
    "FrameFrag",
]

GLYPH_STYLES: Dict[str, str] = {
    "~": "class:water",
    "#": "class:land",
    "*": "class:marker",
    PLAYER: "class:player",
}


def build_frame(grid: np.ndarray, player: Optional[Tuple[int, int]] = None) -> FrameFrag:
    """
    Convert a (H, W) array of one-char glyphs into style runs.
    player is (col, row); it covers whatever terrain is underneath.
    """
    frame: FrameFrag = []
    px, py = player if player is not None else (None, None)
    for y in range(grid.shape[0]):
        line: LineFrag = []
        run_style = None
        run_text: List[str] = []
        for x in range(grid.shape[1]):
            ch = PLAYER if (x == px and y == py) else str(grid[y, x])
            style = GLYPH_STYLES.get(ch, "")
            if style != run_style and run_text:
                line.append((run_style, "".join(run_text)))
                run_text = []
            run_style = style
            run_text.append(ch)
        if run_text:
            line.append((run_style, "".join(run_text)))
        frame.append(line)
    return frame


def frame_to_lines(frame: FrameFrag) -> List[str]:
    return ["".join(text for (_style, text) in line) for line in frame]


def print_frame(frame: FrameFrag, style: Style, stream=None) -> None:
    """Write each row plus a newline to stream (default: current sys.stdout)."""
    if stream is None:
        stream = sys.stdout
    if not stream.isatty():
        for text in frame_to_lines(frame):
            stream.write(text + "\n")
        stream.flush()
        return

    output = create_output(stdout=stream)
    fragments: List[StyleRun] = []
    for line in frame:
        fragments.extend(line)
        fragments.append(("", "\n"))
    print_formatted_text(FormattedText(fragments), style=style, output=output, end="")
