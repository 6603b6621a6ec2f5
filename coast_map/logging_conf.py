#!/usr/bin/env python3
# coast_map/logging_conf.py
"""
Central logging setup for Coastline Map.
Supports console (stderr) and optional rotating file logs.
"""

import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Optional

from coast_map.config import DEFAULT_SETTINGS

_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def _has_file_handler(log_file: str) -> bool:
    path = os.path.abspath(log_file)
    return any(
        isinstance(h, RotatingFileHandler) and h.baseFilename == path
        for h in logging.getLogger().handlers
    )


def setup_logging(level_name: str = "WARNING", log_file: Optional[str] = None) -> None:
    level = getattr(logging, level_name.upper(), logging.WARNING)
    logging.basicConfig(level=level, format=_FORMAT)
    logging.getLogger("coast_map").setLevel(level)

    if log_file and not _has_file_handler(log_file):
        try:
            handler = RotatingFileHandler(
                log_file,
                maxBytes=int(DEFAULT_SETTINGS["logging"]["rotate_bytes"]),
                backupCount=int(DEFAULT_SETTINGS["logging"]["rotate_keep"]),
                encoding="utf-8",
            )
        except OSError as exc:
            # Console logging still works; the file log is optional
            logging.getLogger(__name__).warning("cannot open log file %s: %s", log_file, exc)
            return
        handler.setFormatter(logging.Formatter(_FORMAT))
        logging.getLogger().addHandler(handler)
