#!/usr/bin/env python3
# coast_map/styles.py
"""
Style definitions for Coastline Map.
Provides light, dark, and auto themes for prompt_toolkit.
"""

from prompt_toolkit.styles import Style

def make_style(theme: str = "auto") -> Style:
    base_dark = {
        "water": "fg:#3a8fd9",
        "land": "fg:#c9a66b",
        "marker": "fg:#ffd700 bold",
        "player": "fg:#ff4040 bold reverse",
    }
    base_light = {
        "water": "fg:#0050a0",
        "land": "fg:#6b4f1d",
        "marker": "fg:#b8860b bold",
        "player": "fg:#c00000 bold reverse",
    }

    if theme == "light":
        return Style.from_dict(base_light)

    # "dark" and "auto" both land here; no terminal background probing
    return Style.from_dict(base_dark)
