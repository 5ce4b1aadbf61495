"""
Unit tests for the font descriptors and the bold-text weight substitution.
"""
import pytest
from PyQt6.QtGui import QFont

from fontscheme.core.font_spec import FontSize, FontSpec, FontTextStyle, FontWeight

LIGHT_WEIGHTS = [FontWeight.ULTRA_LIGHT, FontWeight.THIN, FontWeight.LIGHT, FontWeight.REGULAR]
HEAVY_WEIGHTS = [FontWeight.MEDIUM, FontWeight.SEMIBOLD, FontWeight.BOLD, FontWeight.HEAVY, FontWeight.BLACK]


def test_spec_equality_and_hash_cover_all_fields():
    a = FontSpec(FontSize.NORMAL, FontWeight.SEMIBOLD, FontTextStyle.INPUT_TEXT)
    b = FontSpec(FontSize.NORMAL, FontWeight.SEMIBOLD, FontTextStyle.INPUT_TEXT)
    c = FontSpec(FontSize.NORMAL, FontWeight.SEMIBOLD, FontTextStyle.LARGE_TITLE)
    assert a == b
    assert hash(a) == hash(b)
    assert a != c
    assert len({a, b, c}) == 2


def test_spec_defaults_to_default_text_style():
    assert FontSpec(FontSize.SMALL, FontWeight.LIGHT).text_style is FontTextStyle.DEFAULT


def test_spec_is_immutable():
    spec = FontSpec(FontSize.SMALL, FontWeight.LIGHT)
    with pytest.raises(AttributeError):
        spec.size = FontSize.LARGE


def test_spec_string_form():
    spec = FontSpec(FontSize.NORMAL, FontWeight.SEMIBOLD, FontTextStyle.INPUT_TEXT)
    assert str(spec) == "normal-semibold-inputText"


@pytest.mark.parametrize("weight", list(FontWeight))
def test_weights_map_to_themselves_without_bold_text(weight):
    assert FontWeight.from_qt_weight(weight.qt_weight(bold_text_enabled=False)) is weight


@pytest.mark.parametrize("weight", LIGHT_WEIGHTS)
def test_light_weights_collapse_to_regular_with_bold_text(weight):
    assert weight.qt_weight(bold_text_enabled=True) == QFont.Weight.Normal


@pytest.mark.parametrize("weight", HEAVY_WEIGHTS)
def test_heavier_weights_pass_through_with_bold_text(weight):
    assert weight.qt_weight(bold_text_enabled=True) == weight.qt_weight(bold_text_enabled=False)


def test_qt_weights_are_strictly_ordered():
    values = [w.qt_weight().value for w in FontWeight]
    assert values == sorted(values)
    assert len(set(values)) == len(values)


def test_from_qt_weight_accepts_plain_ints():
    assert FontWeight.from_qt_weight(600) is FontWeight.SEMIBOLD
    assert FontWeight.from_qt_weight(900) is FontWeight.BLACK


def test_from_qt_weight_falls_back_to_regular():
    assert FontWeight.from_qt_weight(450) is FontWeight.REGULAR


def test_ultra_light_is_the_lightest_weight():
    assert FontWeight.ULTRA_LIGHT.qt_weight() == QFont.Weight.Thin
    assert FontWeight.THIN.qt_weight() == QFont.Weight.ExtraLight
    assert FontWeight.from_qt_weight(QFont.Weight.Thin) is FontWeight.ULTRA_LIGHT
