"""
Semantic typography tokens.

Ready-to-use text style presets combining size, weight and line height.
Each role comes in large / medium / small.
"""

from __future__ import annotations

from types import MappingProxyType

from torico_tokens.specs.theme import TextStyle
from torico_tokens.tokens.primitives.typography import (
    FONT_SIZE,
    FONT_WEIGHT,
    LINE_HEIGHT,
    font_family_for,
)

_FAMILY = font_family_for("default")


def _style(size: str, weight: str, family: str = "sans") -> TextStyle:
    return TextStyle(
        font_size=FONT_SIZE[size],
        font_weight=FONT_WEIGHT[weight],
        line_height=LINE_HEIGHT[size],
        font_family=_FAMILY[family],
    )


def _scale(large: TextStyle, medium: TextStyle, small: TextStyle) -> MappingProxyType:
    return MappingProxyType({"large": large, "medium": medium, "small": small})


DISPLAY = _scale(_style("4xl", "bold"), _style("3xl", "bold"), _style("2xl", "bold"))

HEADING = _scale(_style("xl", "bold"), _style("lg", "semibold"), _style("base", "semibold"))

BODY = _scale(_style("lg", "regular"), _style("base", "regular"), _style("sm", "regular"))

LABEL = _scale(_style("base", "medium"), _style("sm", "medium"), _style("xs", "medium"))

CAPTION = _scale(
    _style("sm", "regular"),
    _style("xs", "regular"),
    # below the primitive scale
    TextStyle(
        font_size=10,
        font_weight=FONT_WEIGHT["regular"],
        line_height=14,
        font_family=_FAMILY["sans"],
    ),
)

BUTTON = _scale(_style("lg", "semibold"), _style("base", "semibold"), _style("sm", "semibold"))

CODE = _scale(
    _style("base", "regular", "mono"),
    _style("sm", "regular", "mono"),
    _style("xs", "regular", "mono"),
)

TYPOGRAPHY = MappingProxyType(
    {
        "display": DISPLAY,
        "heading": HEADING,
        "body": BODY,
        "label": LABEL,
        "caption": CAPTION,
        "button": BUTTON,
        "code": CODE,
    }
)

# Flat lookup: displayLarge, headingSmall, codeMedium, ...
TEXT_PRESETS = MappingProxyType(
    {
        f"{role}{size.capitalize()}": style
        for role, scale in TYPOGRAPHY.items()
        for size, style in scale.items()
    }
)
