"""
Stateless helpers operating on resolved QFont handles.
"""

import logging

from PyQt6.QtGui import QFont

from fontscheme import constants
from fontscheme.core.font_spec import FontWeight

logger = logging.getLogger(f"{constants.app.APP_NAME}.Fonts")


def is_italic(font: QFont) -> bool:
    """Check whether the font's style traits include italics."""
    return font.italic()


def italic_font(font: QFont) -> QFont:
    """
    Return an italic variant of `font`.

    The font is returned as-is when it is already italic. If the derived font
    does not carry the italic trait, the original font is returned instead.
    """
    if is_italic(font):
        return font

    variant = QFont(font)
    variant.setItalic(True)
    if not variant.italic():
        logger.warning("Could not derive an italic variant of '%s', using the original font.", display_name(font))
        return font
    return variant


def display_name(font: QFont) -> str:
    """
    Human-readable font identifier, e.g. "System-Semibold 16".

    The weight suffix is omitted for regular weight.
    """
    weight = FontWeight.from_qt_weight(font.weight())
    weight_suffix = "" if weight is FontWeight.REGULAR else f"-{weight.value.capitalize()}"
    return f"{font.family()}{weight_suffix} {font.pointSizeF():g}"
