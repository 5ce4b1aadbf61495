import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication  # noqa: E402

from fontscheme.core import ContentSizeCategory, ContentSizeContext  # noqa: E402


@pytest.fixture(scope="session")
def q_app():
    """Provides a QApplication instance for the test session."""
    return QApplication.instance() or QApplication([])


@pytest.fixture
def default_context() -> ContentSizeContext:
    return ContentSizeContext(ContentSizeCategory.MEDIUM, bold_text_enabled=False)


@pytest.fixture
def bold_context() -> ContentSizeContext:
    return ContentSizeContext(ContentSizeCategory.MEDIUM, bold_text_enabled=True)
