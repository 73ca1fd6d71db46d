"""
TORICO design tokens.

Main entry point for primitives, semantic tokens and themes.

Usage:
    from torico_tokens.tokens import NEUTRAL, SPACING, TEXT_PRESETS
    from torico_tokens.tokens import get_theme, resolve_token

    resolve_token("background.primary", theme="light")
"""

from torico_tokens.tokens.primitives import (
    ACCENT,
    ALPHA,
    BEZIER,
    COMPONENT_SPACING,
    DARK_NEUTRAL,
    DELAY,
    DRAWER,
    DURATION,
    EASING,
    ELEVATION,
    FEEDBACK,
    FONT_FAMILY,
    FONT_SIZE,
    FONT_WEIGHT,
    GAP,
    LEGACY,
    LETTER_SPACING,
    LINE_HEIGHT,
    LINE_HEIGHT_MULTIPLIER,
    NEUTRAL,
    PASTEL,
    RADII,
    RADIUS_ALIAS,
    SHADOWS,
    SPACING,
    SPACING_ALIAS,
    SPRING,
    TRANSITION,
    WEB_FONT_FAMILY,
    WEB_SHADOWS,
)
from torico_tokens.tokens.semantic import (
    BACKGROUND,
    BORDER,
    BRAND,
    DRAWER_COLORS,
    FEEDBACK_COLORS,
    ICON,
    INTERACTIVE,
    TEXT,
    TEXT_PRESETS,
    TYPOGRAPHY,
)
from torico_tokens.tokens.themes import (
    DARK_THEME,
    DEFAULT_THEME,
    DEFAULT_THEME_NAME,
    LIGHT_THEME,
    THEMES,
    get_theme,
    list_themes,
    resolve_token,
    semantic_keys,
)

__all__ = [
    # Primitives
    "NEUTRAL",
    "DARK_NEUTRAL",
    "FEEDBACK",
    "ACCENT",
    "PASTEL",
    "DRAWER",
    "LEGACY",
    "ALPHA",
    "FONT_SIZE",
    "FONT_WEIGHT",
    "LINE_HEIGHT_MULTIPLIER",
    "LINE_HEIGHT",
    "LETTER_SPACING",
    "FONT_FAMILY",
    "WEB_FONT_FAMILY",
    "SPACING",
    "SPACING_ALIAS",
    "COMPONENT_SPACING",
    "GAP",
    "RADII",
    "RADIUS_ALIAS",
    "SHADOWS",
    "WEB_SHADOWS",
    "ELEVATION",
    "DURATION",
    "EASING",
    "BEZIER",
    "SPRING",
    "TRANSITION",
    "DELAY",
    # Semantic
    "BRAND",
    "BACKGROUND",
    "TEXT",
    "BORDER",
    "INTERACTIVE",
    "FEEDBACK_COLORS",
    "ICON",
    "DRAWER_COLORS",
    "TYPOGRAPHY",
    "TEXT_PRESETS",
    # Themes
    "LIGHT_THEME",
    "DARK_THEME",
    "THEMES",
    "DEFAULT_THEME",
    "DEFAULT_THEME_NAME",
    "get_theme",
    "list_themes",
    "resolve_token",
    "semantic_keys",
]
