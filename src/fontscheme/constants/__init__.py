"""
Provides centralized, immutable constants for FontScheme.

This package exposes singleton instances of constant groups, ensuring they
are validated on import and easily accessible from a single namespace.

Usage:
    from fontscheme import constants

    # Base point size of a large input-text font
    constants.fonts.INPUT_TEXT_POINT_SIZES["large"]

    # Default settings written to a fresh config file
    constants.config.defaults.DEFAULT_CONFIG
"""

from .app import app
from .config import config
from .fonts import fonts
from .logs import logs

__all__ = [
    "app",
    "config",
    "fonts",
    "logs",
]
