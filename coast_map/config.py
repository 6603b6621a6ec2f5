#!/usr/bin/env python3
# coast_map/config.py
"""
Config loader and defaults for Coastline Map.

Format:
- UTF-8 text, one key=value pair per line.
- Lines that are empty or start with '#' are skipped (checked before trimming).
- Key and value are split on the first '=' and trimmed.
- Duplicate keys: last one wins.

Required keys: image_path, x, y.
Optional keys: log_level, log_file, theme (coerced, never fatal).

Usage:
    from coast_map.config import load
    cfg = load("player.cfg")
    print(cfg.image_path, cfg.x, cfg.y)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from coast_map.errors import ConfigError

# ----------------------------
# Defaults
# ----------------------------

DEFAULT_SETTINGS: Dict[str, Any] = {
    "map": {
        "width": 40,
        "height": 20,
    },
    "ui": {
        "theme": "auto",                  # auto | light | dark
    },
    "logging": {
        "level": "WARNING",
        "file": None,                     # path or None
        "rotate_bytes": 5 * 1024 * 1024,
        "rotate_keep": 3,
    },
}

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")
_THEMES = ("auto", "light", "dark")
_WHITESPACE = " \t\r\n"

# ----------------------------
# Helpers
# ----------------------------

def _strip_eol(line: str) -> str:
    """Drop the line terminator only; everything else is kept for the skip check."""
    if line.endswith("\n"):
        line = line[:-1]
    return line

def _parse_entries(f) -> Dict[str, str]:
    entries: Dict[str, str] = {}
    for line_number, raw in enumerate(f, start=1):
        line = _strip_eol(raw)
        if not line or line.startswith("#"):
            continue
        key, sep, value = line.partition("=")
        if not sep:
            raise ConfigError(f"line {line_number} of config file is missing the '=' separator")
        entries[key.strip(_WHITESPACE)] = value.strip(_WHITESPACE)
    return entries

def _parse_int(entries: Dict[str, str], key: str) -> int:
    value = entries[key]
    try:
        return int(value)
    except ValueError as exc:
        raise ConfigError(f"config value {key}={value!r} is not an integer") from exc

def _coerce_choice(v: Optional[str], choices, default: str, upper: bool = False) -> str:
    if v is None:
        return default
    s = v.upper() if upper else v.lower()
    return s if s in choices else default

# ----------------------------
# Public API
# ----------------------------

@dataclass(frozen=True)
class Configuration:
    """Parsed config file. Built once by load(), never modified."""
    image_path: str
    x: int
    y: int
    log_level: str = DEFAULT_SETTINGS["logging"]["level"]
    log_file: Optional[str] = DEFAULT_SETTINGS["logging"]["file"]
    theme: str = DEFAULT_SETTINGS["ui"]["theme"]


def load(file_path) -> Configuration:
    """
    Parse a key=value config file.
    Raises ConfigError on an unreadable file, a line without '=', missing
    required keys, or x/y values that are not integers.
    """
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            entries = _parse_entries(f)
    except OSError as exc:
        raise ConfigError(f"cannot open config file: {file_path}") from exc
    except UnicodeDecodeError as exc:
        raise ConfigError(f"config file is not valid UTF-8: {file_path}") from exc

    if "image_path" not in entries:
        raise ConfigError("config is missing the image_path entry")
    if "x" not in entries or "y" not in entries:
        raise ConfigError("config is missing the x or y coordinate")

    log_file = entries.get("log_file") or None
    return Configuration(
        image_path=entries["image_path"],
        x=_parse_int(entries, "x"),
        y=_parse_int(entries, "y"),
        log_level=_coerce_choice(entries.get("log_level"), _LOG_LEVELS,
                                 DEFAULT_SETTINGS["logging"]["level"], upper=True),
        log_file=log_file,
        theme=_coerce_choice(entries.get("theme"), _THEMES, DEFAULT_SETTINGS["ui"]["theme"]),
    )


__all__ = [
    "Configuration",
    "DEFAULT_SETTINGS",
    "load",
]
