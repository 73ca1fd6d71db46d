"""Primitive border radius tokens (pixels)."""

from __future__ import annotations

from types import MappingProxyType

RADII = MappingProxyType(
    {
        "none": 0,
        "xs": 2,
        "sm": 4,
        "md": 8,
        "lg": 12,
        "xl": 16,
        "2xl": 20,
        "3xl": 24,
        # pills and circles
        "full": 9999,
    }
)

RADIUS_ALIAS = MappingProxyType(
    {
        "button": RADII["lg"],
        "card": RADII["xl"],
        "input": RADII["md"],
        "modal": RADII["2xl"],
        "badge": RADII["full"],
        "avatar": RADII["full"],
        "fab": RADII["full"],
        "tooltip": RADII["sm"],
    }
)
