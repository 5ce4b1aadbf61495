"""
Utilities submodule for FontScheme.

Provides font helpers, logging setup and configuration management.
"""

from .config import ConfigError, ConfigManager
from .fonts import display_name, is_italic, italic_font
from .helpers import get_app_data_path, setup_logging

__all__ = [
    "ConfigError",
    "ConfigManager",
    "display_name",
    "is_italic",
    "italic_font",
    "get_app_data_path",
    "setup_logging",
]
