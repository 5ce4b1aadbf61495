"""
Font Scheme Provider Module.

Holds the font scheme for the running UI and replaces it whole whenever the
accessibility context changes. Views connect to `scheme_changed` to re-fetch
their fonts instead of polling.
"""

import logging
from typing import Any, Dict, Optional

from PyQt6.QtCore import QObject, pyqtSignal
from PyQt6.QtGui import QFont

from fontscheme import constants
from fontscheme.core.content_size import ContentSizeContext
from fontscheme.core.font_scheme import FontScheme
from fontscheme.core.font_spec import FontSpec


class FontSchemeProvider(QObject):
    """
    Owns the current FontScheme.

    Signals:
        scheme_changed (FontScheme): Emitted after a new scheme replaces the old one.
    """

    scheme_changed = pyqtSignal(object)

    def __init__(self, context: Optional[ContentSizeContext] = None,
                 family: str = constants.fonts.SYSTEM_FONT_FAMILY,
                 parent: Optional[QObject] = None):
        super().__init__(parent)
        self.logger = logging.getLogger(f"{constants.app.APP_NAME}.FontSchemeProvider")
        self._family = family
        self._scheme = FontScheme.from_context(context or ContentSizeContext(), family)

    @classmethod
    def from_config(cls, config: Dict[str, Any], parent: Optional[QObject] = None) -> "FontSchemeProvider":
        """Builds a provider from a validated settings dictionary, including its font family."""
        family = config.get("font_family") or constants.config.defaults.DEFAULT_FONT_FAMILY
        return cls(ContentSizeContext.from_config(config), family, parent)

    @property
    def family(self) -> str:
        return self._family

    @property
    def scheme(self) -> FontScheme:
        return self._scheme

    @property
    def context(self) -> ContentSizeContext:
        return self._scheme.context

    def update_context(self, context: ContentSizeContext) -> bool:
        """
        Rebuilds the scheme for a new context.

        Returns:
            bool: True if the scheme was replaced, False if the context was unchanged.
        """
        if context == self._scheme.context:
            self.logger.debug("Context unchanged (%s), keeping current font scheme.", context)
            return False

        new_scheme = FontScheme.from_context(context, self._family)
        # Single reference assignment; readers see either the old or the new table.
        self._scheme = new_scheme
        self.logger.info(
            "Font scheme rebuilt for content size '%s' (bold text: %s).",
            context.content_size_category.value, context.bold_text_enabled
        )
        self.scheme_changed.emit(new_scheme)
        return True

    def font(self, spec: FontSpec) -> Optional[QFont]:
        return self._scheme.font(spec)
