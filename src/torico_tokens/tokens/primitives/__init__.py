"""
Primitive tokens.

Raw, context-free design values. Components should normally use the
semantic tokens, which map these onto roles.
"""

from torico_tokens.tokens.primitives.animations import (
    BEZIER,
    DELAY,
    DURATION,
    EASING,
    SPRING,
    TRANSITION,
    cubic_bezier,
)
from torico_tokens.tokens.primitives.colors import (
    ACCENT,
    ALPHA,
    DARK_NEUTRAL,
    DRAWER,
    FEEDBACK,
    LEGACY,
    NEUTRAL,
    PASTEL,
)
from torico_tokens.tokens.primitives.radii import RADII, RADIUS_ALIAS
from torico_tokens.tokens.primitives.shadows import ELEVATION, SHADOWS, WEB_SHADOWS
from torico_tokens.tokens.primitives.spacing import COMPONENT_SPACING, GAP, SPACING, SPACING_ALIAS
from torico_tokens.tokens.primitives.typography import (
    FONT_FAMILY,
    FONT_SIZE,
    FONT_WEIGHT,
    LETTER_SPACING,
    LINE_HEIGHT,
    LINE_HEIGHT_MULTIPLIER,
    WEB_FONT_FAMILY,
    font_family_for,
)

__all__ = [
    # Colors
    "NEUTRAL",
    "DARK_NEUTRAL",
    "FEEDBACK",
    "ACCENT",
    "PASTEL",
    "DRAWER",
    "LEGACY",
    "ALPHA",
    # Typography
    "FONT_SIZE",
    "FONT_WEIGHT",
    "LINE_HEIGHT_MULTIPLIER",
    "LINE_HEIGHT",
    "LETTER_SPACING",
    "FONT_FAMILY",
    "WEB_FONT_FAMILY",
    "font_family_for",
    # Spacing
    "SPACING",
    "SPACING_ALIAS",
    "COMPONENT_SPACING",
    "GAP",
    # Radii
    "RADII",
    "RADIUS_ALIAS",
    # Shadows
    "SHADOWS",
    "WEB_SHADOWS",
    "ELEVATION",
    # Animations
    "DURATION",
    "EASING",
    "BEZIER",
    "SPRING",
    "TRANSITION",
    "DELAY",
    "cubic_bezier",
]
