"""
Configuration management for FontScheme.

This module provides a ConfigManager for loading, validating, and saving the
accessibility settings the font scheme is built from. Writes are atomic,
missing keys are merged from defaults, and invalid values are replaced with
defaults rather than propagated.
"""

import json
import logging
import shutil
import tempfile
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .helpers import get_app_data_path
from fontscheme import constants
from fontscheme.core.content_size import ContentSizeCategory, ContentSizeContext


class ConfigError(Exception):
    """Custom exception for configuration-related errors, such as I/O or permission issues."""


class ConfigManager:
    """
    Manages loading, saving, and validation of FontScheme's configuration.
    """

    def __init__(self, config_path: Optional[Union[str, Path]] = None) -> None:
        self.config_path = Path(config_path or get_app_data_path() / constants.config.defaults.CONFIG_FILENAME)
        self.logger = logging.getLogger(f"{constants.app.APP_NAME}.Config")
        self._last_config: Optional[Dict[str, Any]] = None


    def _validate_boolean(self, key: str, value: Any, default: bool) -> bool:
        """Validates a value is a boolean."""
        if isinstance(value, bool):
            return value
        self.logger.warning(constants.config.messages.INVALID_BOOLEAN.format(key=key, value=value, default=default))
        return default


    def _validate_choice(self, key: str, value: Any, default: str, choices: List[str]) -> str:
        """Validates a value is one of the allowed choices (case-insensitive)."""
        if isinstance(value, str):
            for choice in choices:
                if choice.lower() == value.lower():
                    return choice
        self.logger.warning(constants.config.messages.INVALID_CHOICE.format(key=key, value=value, default=default, choices=choices))
        return default


    def _validate_string(self, key: str, value: Any, default: str) -> str:
        """Validates a value is a non-blank string."""
        if isinstance(value, str) and value.strip():
            return value.strip()
        self.logger.warning(constants.config.messages.INVALID_STRING.format(key=key, value=value, default=default))
        return default


    def _validate_config(self, loaded_config: Dict[str, Any]) -> Dict[str, Any]:
        """
        Validates the configuration, merges it with defaults for missing keys,
        and sanitizes all values.
        """
        default_ref = constants.config.defaults.DEFAULT_CONFIG
        validated = default_ref.copy()
        validated.update(loaded_config)

        unknown_keys = set(loaded_config.keys()) - set(default_ref.keys())
        if unknown_keys:
            self.logger.warning("Ignoring unknown config fields: %s", ", ".join(sorted(unknown_keys)))

        validated["content_size_category"] = self._validate_choice(
            "content_size_category", validated.get("content_size_category"),
            default_ref["content_size_category"], [c.value for c in ContentSizeCategory]
        )
        validated["bold_text_enabled"] = self._validate_boolean(
            "bold_text_enabled", validated.get("bold_text_enabled"), default_ref["bold_text_enabled"]
        )
        validated["font_family"] = self._validate_string(
            "font_family", validated.get("font_family"), default_ref["font_family"]
        )

        return {key: validated[key] for key in default_ref}


    def load(self) -> Dict[str, Any]:
        """Loads and validates the configuration from the file."""
        if not self.config_path.exists():
            self.logger.info("Configuration file not found. Creating with default settings.")
            return self.reset_to_defaults()
        try:
            with self.config_path.open("r", encoding="utf-8") as f:
                config = json.load(f)
        except json.JSONDecodeError:
            self.logger.error("Configuration file is corrupt. Backing it up and using defaults.")
            try:
                corrupt_path = self.config_path.with_name(f"{self.config_path.name}.corrupt")
                shutil.move(self.config_path, corrupt_path)
            except OSError:
                self.logger.exception("Failed to back up corrupt config file.")
            return self.reset_to_defaults()
        except OSError as e:
            msg = f"OS error reading config file {self.config_path}: {e}"
            self.logger.critical(msg)
            raise ConfigError(msg) from e

        if not isinstance(config, dict):
            self.logger.error("Configuration file does not hold an object. Using defaults.")
            return self.reset_to_defaults()

        validated_config = self._validate_config(config)
        self._last_config = validated_config.copy()
        return validated_config


    def load_context(self) -> ContentSizeContext:
        """Loads the configuration and returns the content-size context it describes."""
        return ContentSizeContext.from_config(self.load())


    def load_family(self) -> str:
        """Loads the configuration and returns the font family fonts are built with."""
        return self.load()["font_family"]


    def save(self, config: Dict[str, Any]) -> None:
        """Atomically saves the provided configuration to the file."""
        validated_config = self._validate_config(config)

        if self._last_config == validated_config:
            self.logger.debug("Skipping save, configuration is unchanged.")
            return

        temp_path: Optional[str] = None
        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w", delete=False, dir=self.config_path.parent, encoding="utf-8"
            ) as temp_f:
                temp_path = temp_f.name
                json.dump(validated_config, temp_f, indent=4)
            shutil.move(temp_path, self.config_path)
            self._last_config = validated_config.copy()
            self.logger.debug("Configuration saved successfully to %s", self.config_path)
        except OSError as e:
            if temp_path is not None:
                Path(temp_path).unlink(missing_ok=True)
            msg = f"Failed to save configuration to {self.config_path}: {e}"
            self.logger.error(msg)
            raise ConfigError(msg) from e


    def save_context(self, context: ContentSizeContext) -> None:
        """Persists a content-size context, keeping the other settings as they are."""
        config = dict(self._last_config or constants.config.defaults.DEFAULT_CONFIG)
        config["content_size_category"] = context.content_size_category.value
        config["bold_text_enabled"] = context.bold_text_enabled
        self.save(config)


    def reset_to_defaults(self) -> Dict[str, Any]:
        """Resets the configuration to factory defaults and saves it."""
        self.logger.info("Resetting configuration to default values.")
        defaults = constants.config.defaults.DEFAULT_CONFIG.copy()
        # Always write: the file may be gone even if defaults were loaded before.
        self._last_config = None
        self.save(defaults)
        return defaults
