"""
The complete token namespace as plain data.

Converts the read-only registries (mapping proxies, frozen models, curve
tuples) into JSON-compatible structures keyed by the published token
names, for emission into generated modules.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel

from torico_tokens.tokens import primitives, semantic, themes, web


def to_plain(value: Any) -> Any:
    """Recursively convert token values to JSON-compatible data."""
    if isinstance(value, BaseModel):
        return value.model_dump(by_alias=True, mode="json", exclude_none=True)
    if isinstance(value, Mapping):
        return {str(key): to_plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_plain(item) for item in value]
    return value


def token_namespace() -> dict[str, Any]:
    """
    Every exported token table, keyed by its JS export name.

    Returns:
        Ordered mapping: primitives, then semantic tokens, then themes.
    """
    tables: dict[str, Any] = {
        # Primitives
        "neutral": primitives.NEUTRAL,
        "darkNeutral": primitives.DARK_NEUTRAL,
        "feedback": primitives.FEEDBACK,
        "accent": primitives.ACCENT,
        "pastel": primitives.PASTEL,
        "drawer": primitives.DRAWER,
        "legacy": primitives.LEGACY,
        "alpha": primitives.ALPHA,
        "fontSize": primitives.FONT_SIZE,
        "fontWeight": primitives.FONT_WEIGHT,
        "lineHeightMultiplier": primitives.LINE_HEIGHT_MULTIPLIER,
        "lineHeight": primitives.LINE_HEIGHT,
        "letterSpacing": primitives.LETTER_SPACING,
        "fontFamily": primitives.FONT_FAMILY,
        "webFontFamily": primitives.WEB_FONT_FAMILY,
        "spacing": primitives.SPACING,
        "spacingAlias": primitives.SPACING_ALIAS,
        "componentSpacing": primitives.COMPONENT_SPACING,
        "gap": primitives.GAP,
        "radii": primitives.RADII,
        "radiusAlias": primitives.RADIUS_ALIAS,
        "shadows": primitives.SHADOWS,
        "webShadows": primitives.WEB_SHADOWS,
        "elevation": primitives.ELEVATION,
        "duration": primitives.DURATION,
        "easing": primitives.EASING,
        "bezier": primitives.BEZIER,
        "spring": primitives.SPRING,
        "transition": primitives.TRANSITION,
        "delay": primitives.DELAY,
        # Semantic
        "brand": semantic.BRAND,
        "background": semantic.BACKGROUND,
        "text": semantic.TEXT,
        "border": semantic.BORDER,
        "interactive": semantic.INTERACTIVE,
        "feedbackColors": semantic.FEEDBACK_COLORS,
        "icon": semantic.ICON,
        "drawerColors": semantic.DRAWER_COLORS,
        "typography": semantic.TYPOGRAPHY,
        "textPresets": semantic.TEXT_PRESETS,
        # Web
        "webColors": web.WEB_COLORS,
        # Themes
        "lightTheme": themes.LIGHT_THEME.groups(),
        "darkTheme": themes.DARK_THEME.groups(),
        "defaultThemeName": themes.DEFAULT_THEME_NAME,
    }
    return {name: to_plain(table) for name, table in tables.items()}
