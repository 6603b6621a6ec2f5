#!/usr/bin/env python3
# coast_map/errors.py
"""
Exception types for Coastline Map.
Everything raised on purpose derives from CoastMapError; the CLI turns
these into a message on stderr and exit code 1.
"""

__all__ = [
    "CoastMapError",
    "UsageError",
    "ConfigError",
    "ValidationError",
]


class CoastMapError(Exception):
    """Base class for all fatal, user-facing errors."""


class UsageError(CoastMapError):
    """Command line is missing the config file argument."""


class ConfigError(CoastMapError):
    """Config file unreadable, malformed, incomplete or holding a bad integer."""


class ValidationError(CoastMapError):
    """Configured values are well-formed but unusable, e.g. off the map."""
