from .accessibility import (
    BODY_FONT_SIZE_PX,
    MAX_ZOOM,
    MIN_FONT_SIZE_PX,
    REQUIRED_GROWTH,
    ValueCategory,
    check_accessibility,
    check_sc144,
)

__all__ = [
    "ValueCategory",
    "MIN_FONT_SIZE_PX",
    "BODY_FONT_SIZE_PX",
    "MAX_ZOOM",
    "REQUIRED_GROWTH",
    "check_accessibility",
    "check_sc144",
]
