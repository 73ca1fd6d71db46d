"""
Primitive typography tokens.

Raw font sizes, weights and line heights. Prefer the semantic text presets.
"""

from __future__ import annotations

from types import MappingProxyType

# Pixels
FONT_SIZE = MappingProxyType(
    {
        "xs": 12,
        "sm": 14,
        "base": 16,
        "lg": 18,
        "xl": 20,
        "2xl": 24,
        "3xl": 28,
        "4xl": 32,
        "5xl": 40,
        "6xl": 48,
    }
)

FONT_WEIGHT = MappingProxyType(
    {
        "thin": "100",
        "light": "300",
        "regular": "400",
        "medium": "500",
        "semibold": "600",
        "bold": "700",
        "extrabold": "800",
        "black": "900",
    }
)

# Multipliers of the font size
LINE_HEIGHT_MULTIPLIER = MappingProxyType(
    {
        "none": 1,
        "tight": 1.25,
        "snug": 1.375,
        "normal": 1.5,
        "relaxed": 1.625,
        "loose": 2,
    }
)

# Absolute line heights in pixels, keyed like FONT_SIZE
LINE_HEIGHT = MappingProxyType(
    {
        "xs": 16,
        "sm": 20,
        "base": 24,
        "lg": 28,
        "xl": 28,
        "2xl": 32,
        "3xl": 36,
        "4xl": 40,
        "5xl": 48,
        "6xl": 56,
    }
)

LETTER_SPACING = MappingProxyType(
    {
        "tighter": -0.8,
        "tight": -0.4,
        "normal": 0,
        "wide": 0.4,
        "wider": 0.8,
        "widest": 1.6,
    }
)

FONT_FAMILY = MappingProxyType(
    {
        "ios": MappingProxyType({"sans": "System", "serif": "Georgia", "rounded": "System", "mono": "Menlo"}),
        "android": MappingProxyType(
            {"sans": "Roboto", "serif": "serif", "rounded": "Roboto", "mono": "monospace"}
        ),
        "default": MappingProxyType(
            {"sans": "System", "serif": "serif", "rounded": "System", "mono": "monospace"}
        ),
    }
)

WEB_FONT_FAMILY = MappingProxyType(
    {
        "sans": "system-ui, -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, Helvetica, Arial, sans-serif",
        "serif": "Georgia, 'Times New Roman', serif",
        "rounded": "'SF Pro Rounded', 'Hiragino Maru Gothic ProN', Meiryo, system-ui, sans-serif",
        "mono": "SFMono-Regular, Menlo, Monaco, Consolas, 'Liberation Mono', 'Courier New', monospace",
        "lineSeed": "'LINESeedJP', system-ui, sans-serif",
    }
)


def font_family_for(platform: str) -> MappingProxyType:
    """Native font family names for 'ios', 'android' or any other platform."""
    return FONT_FAMILY.get(platform, FONT_FAMILY["default"])
