"""
Flat web token tables.

Derived from the primitive and semantic tables in the shape web consumers
expect: kebab-case color keys and CSS length strings. These feed the
Tailwind config, the CSS custom properties and the reference page.
"""

from __future__ import annotations

from types import MappingProxyType

from torico_tokens.tokens.primitives.colors import DARK_NEUTRAL, DRAWER, FEEDBACK, NEUTRAL, PASTEL
from torico_tokens.tokens.primitives.radii import RADII
from torico_tokens.tokens.primitives.shadows import WEB_SHADOWS
from torico_tokens.tokens.primitives.spacing import SPACING
from torico_tokens.tokens.primitives.typography import FONT_SIZE, LINE_HEIGHT
from torico_tokens.tokens.semantic.colors import BRAND


def px(value: int | float) -> str:
    """CSS pixel length; zero is unitless."""
    return "0" if value == 0 else f"{value:g}px"


def _web_colors() -> dict[str, str]:
    colors: dict[str, str] = {
        # Neutral-first brand: white on dark, black on light
        "brand-primary": BRAND.primary,
        "brand-primary-hover": BRAND.primary_hover,
        "brand-secondary": BRAND.secondary,
    }
    colors.update({f"neutral-{step}": value for step, value in NEUTRAL.items()})
    colors.update({f"drawer-{name}": value for name, value in DRAWER.items()})
    colors.update({f"pastel-{name}": value for name, value in PASTEL.items()})
    colors.update(
        {
            "app-background": NEUTRAL[950],
            "app-secondary": NEUTRAL[900],
            "app-tertiary": DARK_NEUTRAL["gray"],
            "app-surface": DARK_NEUTRAL["surface"],
            "app-gray": DARK_NEUTRAL["gray"],
        }
    )
    for hue, ramp in FEEDBACK.items():
        colors[hue] = ramp.base
        colors[f"{hue}-light"] = ramp.light
        colors[f"{hue}-dark"] = ramp.dark
    return colors


WEB_COLORS = MappingProxyType(_web_colors())

WEB_SPACING = MappingProxyType({key: px(value) for key, value in SPACING.items()})

# Tailwind fontSize tuples: [size, {lineHeight}]
WEB_FONT_SIZE = MappingProxyType(
    {
        key: (px(size), MappingProxyType({"lineHeight": px(LINE_HEIGHT[key])}))
        for key, size in FONT_SIZE.items()
    }
)

WEB_BORDER_RADIUS = MappingProxyType({key: px(value) for key, value in RADII.items()})

WEB_BOX_SHADOW = WEB_SHADOWS
