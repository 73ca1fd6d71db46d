"""
Primitive color tokens.

Neutral-first palette: brand personality comes from the character assets,
not from UI chrome. Components should use the semantic colors instead.
"""

from __future__ import annotations

from types import MappingProxyType

from torico_tokens.specs.theme import ColorRamp

# Core grayscale for all UI elements
NEUTRAL = MappingProxyType(
    {
        0: "#FFFFFF",
        50: "#FAFAFA",
        100: "#F5F5F5",
        200: "#EBEBEB",
        300: "#E0E0E0",
        400: "#BFBFBF",
        500: "#8E8E8E",
        600: "#666666",
        700: "#444444",
        800: "#282828",
        900: "#141414",
        950: "#0C0C0C",
    }
)

# iOS system backgrounds for dark mode
DARK_NEUTRAL = MappingProxyType(
    {
        "background": "#000000",
        "backgroundSecondary": "#1C1C1E",
        "backgroundTertiary": "#2C2C2E",
        "gray": "#1A1A1A",
        "surface": "#252525",
        "surfaceDark": "#1E1E1E",
    }
)

FEEDBACK = MappingProxyType(
    {
        "success": ColorRamp(light="#DCFCE7", base="#22C55E", dark="#166534"),
        "warning": ColorRamp(light="#FEF9C3", base="#EAB308", dark="#A16207"),
        "error": ColorRamp(light="#FEE2E2", base="#EF4444", dark="#B91C1C"),
        "info": ColorRamp(light="#DBEAFE", base="#3B82F6", dark="#1D4ED8"),
    }
)

ACCENT = MappingProxyType(
    {
        "orange": "#ED8936",
        "blue": "#4299E1",
        "purple": "#9F7AEA",
        "pink": "#ED64A6",
        "teal": "#4FD1C5",
    }
)

# Soft category / label colors
PASTEL = MappingProxyType(
    {
        "blue": "#A1CFF0",
        "red": "#F88D8D",
        "green": "#87C492",
        "yellow": "#FFF3C0",
    }
)

DRAWER = MappingProxyType(
    {
        "green": "#4FD1C5",
        "gray": "#726E6E",
        "white": "rgba(255, 255, 255, 0.9)",
    }
)

# Old DRAWER color names kept for apps that have not migrated yet
LEGACY = MappingProxyType(
    {
        "drawerGreen": "rgba(0, 128, 128, 0.8)",
        "drawerGreenText": "#4FD1C5",
        "drawerGray": "#1C2A2E",
        "drawerWhite": "rgba(255, 255, 255, 0.9)",
        "bodyText": "#3F3939",
        "lightBlue": "#A1CFF0",
        "lightRed": "#F88D8D",
        "lightGreen": "#87C492",
        "lightYellow": "#FFF3C0",
    }
)

ALPHA = MappingProxyType(
    {
        0: 0,
        5: 0.05,
        10: 0.1,
        20: 0.2,
        30: 0.3,
        40: 0.4,
        50: 0.5,
        60: 0.6,
        70: 0.7,
        80: 0.8,
        90: 0.9,
        100: 1,
    }
)


def white(opacity: float) -> str:
    """White at the given alpha, e.g. ``white(ALPHA[60])``."""
    return f"rgba(255, 255, 255, {opacity})"


def black(opacity: float) -> str:
    return f"rgba(0, 0, 0, {opacity})"
