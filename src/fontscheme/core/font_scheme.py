"""
Font resolution scheme.

Builds the table translating every declared `FontSpec` into a `QFont` for a
given `ContentSizeContext`, and answers lookups against it. A table is built
once per context and never mutated afterwards; a context change produces a
new table which replaces the old one whole.
"""

import logging
import math
from types import MappingProxyType
from typing import Callable, Dict, Iterable, Mapping, Optional, Tuple

from PyQt6.QtGui import QFont

from fontscheme import constants
from fontscheme.core.content_size import (
    ContentSizeCategory, ContentSizeContext, content_size_multiplier
)
from fontscheme.core.font_spec import FontSize, FontSpec, FontTextStyle, FontWeight

logger = logging.getLogger(f"{constants.app.APP_NAME}.FontScheme")

FontMapping = Mapping[FontSpec, QFont]
ScaleFactor = Callable[[ContentSizeCategory], float]

# Styles which receive every weight for every declared size.
_FULL_FAN_OUT_TABLES: Dict[FontTextStyle, Dict[str, int]] = {
    FontTextStyle.LARGE_TITLE: constants.fonts.LARGE_TITLE_POINT_SIZES,
    FontTextStyle.INPUT_TEXT: constants.fonts.INPUT_TEXT_POINT_SIZES,
}


def scaled_point_size(base_point_size: float, multiplier: float) -> int:
    """Scales a point size and rounds half up (25.5 -> 26)."""
    return int(math.floor(base_point_size * multiplier + 0.5))


def system_font(point_size: int, weight: QFont.Weight,
                family: str = constants.fonts.SYSTEM_FONT_FAMILY) -> QFont:
    font = QFont(family)
    font.setPointSize(point_size)
    font.setWeight(weight)
    return font


def _default_style_entries() -> Iterable[Tuple[FontSize, FontWeight, int]]:
    for size_name, weight_names in constants.fonts.DEFAULT_STYLE_WEIGHTS.items():
        point = constants.fonts.DEFAULT_POINT_SIZES[size_name]
        for weight_name in weight_names:
            yield FontSize(size_name), FontWeight(weight_name), point


def build_font_mapping(context: ContentSizeContext,
                       scale_factor: ScaleFactor = content_size_multiplier,
                       family: str = constants.fonts.SYSTEM_FONT_FAMILY) -> FontMapping:
    """
    Builds the complete, read-only font table for a content-size context.

    largeTitle and inputText get every weight for each of their sizes. The
    default style only gets the (size, weight) pairs listed in
    `constants.fonts.DEFAULT_STYLE_WEIGHTS`.

    Args:
        context: Content-size category and bold-text setting to build for.
        scale_factor: Maps the content-size category to a point-size multiplier.
        family: Font family of every produced font.

    Returns:
        A read-only mapping from FontSpec to QFont.
    """
    multiplier = scale_factor(context.content_size_category)
    bold = context.bold_text_enabled
    mapping: Dict[FontSpec, QFont] = {}

    for text_style, point_sizes in _FULL_FAN_OUT_TABLES.items():
        for size_name, base_point in point_sizes.items():
            point = scaled_point_size(base_point, multiplier)
            for weight in FontWeight:
                spec = FontSpec(FontSize(size_name), weight, text_style)
                mapping[spec] = system_font(point, weight.qt_weight(bold), family)

    for size, weight, base_point in _default_style_entries():
        spec = FontSpec(size, weight, FontTextStyle.DEFAULT)
        mapping[spec] = system_font(scaled_point_size(base_point, multiplier), weight.qt_weight(bold), family)

    logger.debug("Built font mapping with %d entries for %s (multiplier %.3f)", len(mapping), context, multiplier)
    return MappingProxyType(mapping)


def resolve_font(mapping: FontMapping, spec: FontSpec) -> Optional[QFont]:
    """Looks up a spec. Returns None for specs the mapping never declared."""
    font = mapping.get(spec)
    if font is None:
        return None
    # Hand out a copy; the table's fonts are shared between callers.
    return QFont(font)


class FontScheme:
    """
    Wraps a font mapping and the context it was built for.
    """

    def __init__(self, font_mapping: FontMapping, context: Optional[ContentSizeContext] = None) -> None:
        self._font_mapping = MappingProxyType(dict(font_mapping))
        self._context = context

    @classmethod
    def from_context(cls, context: ContentSizeContext,
                     family: str = constants.fonts.SYSTEM_FONT_FAMILY) -> "FontScheme":
        return cls(cls.default_font_mapping(context, family), context)

    @staticmethod
    def default_font_mapping(context: ContentSizeContext,
                             family: str = constants.fonts.SYSTEM_FONT_FAMILY) -> FontMapping:
        return build_font_mapping(context, family=family)

    @property
    def font_mapping(self) -> FontMapping:
        return self._font_mapping

    @property
    def context(self) -> Optional[ContentSizeContext]:
        return self._context

    def font(self, spec: FontSpec) -> Optional[QFont]:
        return resolve_font(self._font_mapping, spec)

    def __repr__(self) -> str:
        return f"FontScheme(context={self._context!r}, entries={len(self._font_mapping)})"


def font_without_dynamic_type(spec: FontSpec) -> Optional[QFont]:
    """Resolves a spec at the identity content size, ignoring bold text."""
    context = ContentSizeContext(ContentSizeCategory(constants.fonts.IDENTITY_CONTENT_SIZE), False)
    return FontScheme.from_context(context).font(spec)
