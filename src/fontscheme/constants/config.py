"""
Constants for application configuration defaults and constraints.
"""
from typing import Final, Dict, Any

from .fonts import fonts

class ConfigMessages:
    """Log message templates for configuration validation."""
    INVALID_BOOLEAN: Final[str] = "Invalid {key} '{value}', resetting to boolean default '{default}'"
    INVALID_CHOICE: Final[str] = "Invalid {key} '{value}', resetting to default '{default}'. Valid choices: {choices}"
    INVALID_STRING: Final[str] = "Invalid {key} '{value}', resetting to default '{default}'"

    def __init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        for attr_name in dir(self):
            if not attr_name.startswith('_') and attr_name.isupper():
                value = getattr(self, attr_name)
                if not isinstance(value, str) or not value:
                    raise ValueError(f"ConfigMessages.{attr_name} must be a non-empty string.")


class ConfigConstants:
    """Defines default values and constraints for all application settings."""
    DEFAULT_CONTENT_SIZE_CATEGORY: Final[str] = fonts.IDENTITY_CONTENT_SIZE
    DEFAULT_BOLD_TEXT_ENABLED: Final[bool] = False
    DEFAULT_FONT_FAMILY: Final[str] = fonts.SYSTEM_FONT_FAMILY

    CONFIG_FILENAME: Final[str] = "FontScheme_Config.json"

    DEFAULT_CONFIG: Final[Dict[str, Any]] = {
        "content_size_category": DEFAULT_CONTENT_SIZE_CATEGORY,
        "bold_text_enabled": DEFAULT_BOLD_TEXT_ENABLED,
        "font_family": DEFAULT_FONT_FAMILY,
    }

    def __init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        if self.DEFAULT_CONTENT_SIZE_CATEGORY not in fonts.CONTENT_SIZE_POINTS:
            raise ValueError(f"DEFAULT_CONTENT_SIZE_CATEGORY '{self.DEFAULT_CONTENT_SIZE_CATEGORY}' is not a known category")
        if not isinstance(self.DEFAULT_BOLD_TEXT_ENABLED, bool):
            raise ValueError("DEFAULT_BOLD_TEXT_ENABLED must be a boolean")
        if not self.DEFAULT_FONT_FAMILY:
            raise ValueError("DEFAULT_FONT_FAMILY must not be empty")
        if not self.CONFIG_FILENAME.endswith(".json"):
            raise ValueError("CONFIG_FILENAME must be a .json file")


class ConfigurationConstants:
    """Groups configuration defaults and validation messages."""
    def __init__(self) -> None:
        self.defaults = ConfigConstants()
        self.messages = ConfigMessages()

# Singleton instance for easy access
config = ConfigurationConstants()
