"""Exceptions raised at the input/config boundary.

Core transforms never raise these; they are for loaders and the CLI.
"""

from __future__ import annotations


class BrandMonitorError(Exception):
    """Base class for brand-monitor errors."""


class ConfigError(BrandMonitorError):
    """A config file could not be read or failed validation."""


class InputError(BrandMonitorError):
    """An input payload could not be read or failed validation."""
