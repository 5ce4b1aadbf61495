"""
Constants for the font scheme: point-size tables, the default-style weight
table, and the dynamic-type content-size multipliers.

Tables are keyed by the plain string values of the enums in
`fontscheme.core` so this module stays free of imports from the core package.
"""
from typing import Final, Dict, List, Tuple

class FontConstants:
    """Defines the canonical size tables and content-size scaling."""
    SYSTEM_FONT_FAMILY: Final[str] = "System"

    SIZE_NAMES: Final[Tuple[str, ...]] = ("large", "normal", "medium", "small")

    WEIGHT_NAMES: Final[Tuple[str, ...]] = (
        "ultraLight", "thin", "light", "regular", "medium",
        "semibold", "bold", "heavy", "black",
    )

    # The ratio follows 11:12:16:24, same as the default style.
    LARGE_TITLE_POINT_SIZES: Final[Dict[str, int]] = {
        "large": 40, "normal": 26, "medium": 20, "small": 18,
    }
    INPUT_TEXT_POINT_SIZES: Final[Dict[str, int]] = {
        "large": 21, "normal": 14, "medium": 11, "small": 10,
    }
    DEFAULT_POINT_SIZES: Final[Dict[str, int]] = {
        "large": 24, "normal": 16, "medium": 12, "small": 11,
    }

    # Only these (size, weight) pairs exist for the default text style.
    DEFAULT_STYLE_WEIGHTS: Final[Dict[str, List[str]]] = {
        "large": ["thin", "light", "regular", "medium", "semibold"],
        "normal": ["thin", "light", "regular", "medium", "semibold"],
        "medium": ["regular", "medium", "semibold"],
        "small": ["light", "regular", "medium", "semibold"],
    }

    # Body text point size per content-size category, relative to 16pt.
    CONTENT_SIZE_BASE: Final[float] = 16.0
    CONTENT_SIZE_POINTS: Final[Dict[str, float]] = {
        "extraSmall": 14.0,
        "small": 15.0,
        "medium": 16.0,
        "large": 17.0,
        "extraLarge": 18.0,
        "extraExtraLarge": 20.0,
        "extraExtraExtraLarge": 22.0,
        "accessibilityMedium": 22.0,
        "accessibilityLarge": 23.0,
        "accessibilityExtraLarge": 24.0,
        "accessibilityExtraExtraLarge": 25.0,
        "accessibilityExtraExtraExtraLarge": 26.0,
    }
    IDENTITY_CONTENT_SIZE: Final[str] = "medium"

    def __init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        for table_name in ("LARGE_TITLE_POINT_SIZES", "INPUT_TEXT_POINT_SIZES", "DEFAULT_POINT_SIZES"):
            table = getattr(self, table_name)
            if set(table) != set(self.SIZE_NAMES):
                raise ValueError(f"{table_name} must define exactly {self.SIZE_NAMES}")
            if any(point <= 0 for point in table.values()):
                raise ValueError(f"{table_name} point sizes must be positive")

        if set(self.DEFAULT_STYLE_WEIGHTS) != set(self.SIZE_NAMES):
            raise ValueError(f"DEFAULT_STYLE_WEIGHTS must define exactly {self.SIZE_NAMES}")
        for size, weights in self.DEFAULT_STYLE_WEIGHTS.items():
            unknown = set(weights) - set(self.WEIGHT_NAMES)
            if unknown:
                raise ValueError(f"DEFAULT_STYLE_WEIGHTS[{size}] has unknown weights: {sorted(unknown)}")
            if len(weights) != len(set(weights)):
                raise ValueError(f"DEFAULT_STYLE_WEIGHTS[{size}] contains duplicate weights")

        if self.CONTENT_SIZE_BASE <= 0:
            raise ValueError("CONTENT_SIZE_BASE must be positive")
        points = list(self.CONTENT_SIZE_POINTS.values())
        if any(point <= 0 for point in points):
            raise ValueError("CONTENT_SIZE_POINTS must all be positive")
        if any(later < earlier for earlier, later in zip(points, points[1:])):
            raise ValueError("CONTENT_SIZE_POINTS must be non-decreasing in category order")
        if self.CONTENT_SIZE_POINTS.get(self.IDENTITY_CONTENT_SIZE) != self.CONTENT_SIZE_BASE:
            raise ValueError("IDENTITY_CONTENT_SIZE must scale by exactly 1.0")
        if not self.SYSTEM_FONT_FAMILY:
            raise ValueError("SYSTEM_FONT_FAMILY must not be empty")

# Singleton instance for easy access
fonts = FontConstants()
