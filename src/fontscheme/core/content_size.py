"""
Dynamic-type inputs for the font scheme.

The platform exposes a content-size category (how large the user wants text)
and a bold-text flag. Both are captured in a `ContentSizeContext` which is
passed explicitly to the scheme, never read from global state.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict

from fontscheme import constants


class ContentSizeCategory(Enum):
    """Platform content-size categories, smallest to largest."""
    EXTRA_SMALL = "extraSmall"
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    EXTRA_LARGE = "extraLarge"
    EXTRA_EXTRA_LARGE = "extraExtraLarge"
    EXTRA_EXTRA_EXTRA_LARGE = "extraExtraExtraLarge"
    ACCESSIBILITY_MEDIUM = "accessibilityMedium"
    ACCESSIBILITY_LARGE = "accessibilityLarge"
    ACCESSIBILITY_EXTRA_LARGE = "accessibilityExtraLarge"
    ACCESSIBILITY_EXTRA_EXTRA_LARGE = "accessibilityExtraExtraLarge"
    ACCESSIBILITY_EXTRA_EXTRA_EXTRA_LARGE = "accessibilityExtraExtraExtraLarge"


def content_size_multiplier(category: ContentSizeCategory) -> float:
    """Returns the point-size multiplier for a content-size category."""
    points = constants.fonts.CONTENT_SIZE_POINTS.get(category.value, constants.fonts.CONTENT_SIZE_BASE)
    return points / constants.fonts.CONTENT_SIZE_BASE


@dataclass(frozen=True, slots=True)
class ContentSizeContext:
    """
    Accessibility settings a font mapping is built for.

    Attributes:
        content_size_category: The user's preferred text size.
        bold_text_enabled: Whether the platform requests bold text system-wide.
    """
    content_size_category: ContentSizeCategory = ContentSizeCategory.MEDIUM
    bold_text_enabled: bool = False

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "ContentSizeContext":
        """Builds a context from a validated settings dictionary."""
        defaults = constants.config.defaults
        category = config.get("content_size_category", defaults.DEFAULT_CONTENT_SIZE_CATEGORY)
        bold = config.get("bold_text_enabled", defaults.DEFAULT_BOLD_TEXT_ENABLED)
        return cls(
            content_size_category=ContentSizeCategory(category),
            bold_text_enabled=bool(bold),
        )
