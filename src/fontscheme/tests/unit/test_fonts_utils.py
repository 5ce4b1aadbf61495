"""
Unit tests for the QFont helpers: italics and display names.
"""
import pytest
from unittest.mock import patch
from PyQt6.QtGui import QFont

from fontscheme.core.font_scheme import system_font
from fontscheme.core.font_spec import FontWeight
from fontscheme.utils import fonts as font_utils

pytestmark = pytest.mark.usefixtures("q_app")


@pytest.fixture
def regular_16() -> QFont:
    return system_font(16, QFont.Weight.Normal)


def test_is_italic(regular_16):
    assert not font_utils.is_italic(regular_16)
    regular_16.setItalic(True)
    assert font_utils.is_italic(regular_16)


def test_italic_font_adds_italics_without_touching_original(regular_16):
    italic = font_utils.italic_font(regular_16)
    assert font_utils.is_italic(italic)
    assert not font_utils.is_italic(regular_16)
    assert italic.pointSize() == regular_16.pointSize()
    assert italic.weight() == regular_16.weight()
    assert italic.family() == regular_16.family()


def test_italic_font_returns_italic_fonts_unchanged(regular_16):
    regular_16.setItalic(True)
    assert font_utils.italic_font(regular_16) is regular_16


def test_italic_font_is_idempotent(regular_16):
    once = font_utils.italic_font(regular_16)
    twice = font_utils.italic_font(once)
    assert twice == once


def test_italic_font_falls_back_to_original(regular_16):
    with patch.object(QFont, "setItalic", lambda self, enable: None):
        result = font_utils.italic_font(regular_16)
    assert result is regular_16
    assert not font_utils.is_italic(result)


def test_display_name_omits_regular_weight(regular_16):
    assert font_utils.display_name(regular_16) == "System 16"


def test_display_name_includes_capitalized_weight():
    assert font_utils.display_name(system_font(16, QFont.Weight.DemiBold)) == "System-Semibold 16"
    assert font_utils.display_name(system_font(11, QFont.Weight.Thin)) == "System-Ultralight 11"


@pytest.mark.parametrize("weight", [w for w in FontWeight if w is not FontWeight.REGULAR])
def test_display_name_suffix_for_every_weight(weight):
    font = system_font(20, weight.qt_weight())
    assert font_utils.display_name(font) == f"System-{weight.value.capitalize()} 20"


def test_display_name_uses_font_family():
    assert font_utils.display_name(system_font(14, QFont.Weight.Bold, family="Inter")) == "Inter-Bold 14"
