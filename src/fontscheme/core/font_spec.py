"""
Semantic font descriptors.

A `FontSpec` names a font by intent (size bucket, qualitative weight, text
style) rather than by point size or family. The font scheme turns specs into
concrete `QFont` objects for the current accessibility settings.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Union

from PyQt6.QtGui import QFont


class FontSize(Enum):
    """Named point-size buckets."""
    LARGE = "large"
    NORMAL = "normal"
    MEDIUM = "medium"
    SMALL = "small"


class FontTextStyle(Enum):
    """Selects the point-size table a spec is resolved against."""
    DEFAULT = "default"
    LARGE_TITLE = "largeTitle"
    INPUT_TEXT = "inputText"


class FontWeight(Enum):
    """Qualitative font weight, ordered from lightest to heaviest."""
    ULTRA_LIGHT = "ultraLight"
    THIN = "thin"
    LIGHT = "light"
    REGULAR = "regular"
    MEDIUM = "medium"
    SEMIBOLD = "semibold"
    BOLD = "bold"
    HEAVY = "heavy"
    BLACK = "black"

    def qt_weight(self, bold_text_enabled: bool = False) -> QFont.Weight:
        """
        Returns the Qt weight used to render this weight.

        When bold text is enabled, the light weights render as regular since
        they would not look bold otherwise.
        """
        mapping = _ACCESSIBILITY_WEIGHT_MAPPING if bold_text_enabled else _WEIGHT_MAPPING
        return mapping[self]

    @classmethod
    def from_qt_weight(cls, weight: Union[QFont.Weight, int]) -> "FontWeight":
        """Reverse lookup of a Qt weight. Unknown weights map to REGULAR."""
        value = _weight_value(weight)
        for font_weight, qt_weight in _WEIGHT_MAPPING.items():
            if _weight_value(qt_weight) == value:
                return font_weight
        return cls.REGULAR


def _weight_value(weight: Union[QFont.Weight, int]) -> int:
    return weight.value if isinstance(weight, Enum) else int(weight)


_WEIGHT_MAPPING: Dict[FontWeight, QFont.Weight] = {
    FontWeight.ULTRA_LIGHT: QFont.Weight.Thin,
    FontWeight.THIN: QFont.Weight.ExtraLight,
    FontWeight.LIGHT: QFont.Weight.Light,
    FontWeight.REGULAR: QFont.Weight.Normal,
    FontWeight.MEDIUM: QFont.Weight.Medium,
    FontWeight.SEMIBOLD: QFont.Weight.DemiBold,
    FontWeight.BOLD: QFont.Weight.Bold,
    FontWeight.HEAVY: QFont.Weight.ExtraBold,
    FontWeight.BLACK: QFont.Weight.Black,
}

_ACCESSIBILITY_WEIGHT_MAPPING: Dict[FontWeight, QFont.Weight] = {
    **_WEIGHT_MAPPING,
    FontWeight.ULTRA_LIGHT: QFont.Weight.Normal,
    FontWeight.THIN: QFont.Weight.Normal,
    FontWeight.LIGHT: QFont.Weight.Normal,
}


@dataclass(frozen=True, slots=True)
class FontSpec:
    """An immutable (size, weight, text style) font descriptor."""
    size: FontSize
    weight: FontWeight
    text_style: FontTextStyle = FontTextStyle.DEFAULT

    def __str__(self) -> str:
        return f"{self.size.value}-{self.weight.value}-{self.text_style.value}"
