"""
Core submodule for FontScheme.

Contains the font descriptors, the content-size context, and the scheme that
resolves one into the other.
"""

from fontscheme.core.content_size import (
    ContentSizeCategory, ContentSizeContext, content_size_multiplier
)
from fontscheme.core.font_scheme import (
    FontMapping, FontScheme, build_font_mapping, font_without_dynamic_type, resolve_font
)
from fontscheme.core.font_spec import FontSize, FontSpec, FontTextStyle, FontWeight
from fontscheme.core.scheme_provider import FontSchemeProvider

__all__ = [
    "ContentSizeCategory",
    "ContentSizeContext",
    "content_size_multiplier",
    "FontMapping",
    "FontScheme",
    "FontSchemeProvider",
    "build_font_mapping",
    "font_without_dynamic_type",
    "resolve_font",
    "FontSize",
    "FontSpec",
    "FontTextStyle",
    "FontWeight",
]
