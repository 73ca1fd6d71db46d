"""
Primitive shadow tokens.

Native shadows carry both the iOS shadow properties and the Android
elevation; ``WEB_SHADOWS`` are CSS ``box-shadow`` values.
"""

from __future__ import annotations

from types import MappingProxyType

from torico_tokens.specs.theme import NativeShadow, PlatformShadow, ShadowOffset


def _shadow(height: int, opacity: float, radius: int, elevation: int) -> PlatformShadow:
    return PlatformShadow(
        ios=NativeShadow(
            shadow_color="#000000" if opacity else "transparent",
            shadow_offset=ShadowOffset(width=0, height=height),
            shadow_opacity=opacity,
            shadow_radius=radius,
        ),
        android=elevation,
    )


SHADOWS = MappingProxyType(
    {
        "none": _shadow(0, 0, 0, 0),
        "sm": _shadow(1, 0.05, 2, 1),
        "md": _shadow(2, 0.1, 4, 3),
        "lg": _shadow(4, 0.15, 8, 6),
        "xl": _shadow(8, 0.2, 16, 12),
        "2xl": _shadow(16, 0.25, 24, 24),
    }
)

WEB_SHADOWS = MappingProxyType(
    {
        "none": "none",
        "sm": "0 1px 2px 0 rgba(0, 0, 0, 0.05)",
        "md": "0 2px 4px 0 rgba(0, 0, 0, 0.1)",
        "lg": "0 4px 8px 0 rgba(0, 0, 0, 0.15)",
        "xl": "0 8px 16px 0 rgba(0, 0, 0, 0.2)",
        "2xl": "0 16px 24px 0 rgba(0, 0, 0, 0.25)",
        # pressed states
        "inner": "inset 0 2px 4px 0 rgba(0, 0, 0, 0.06)",
    }
)

ELEVATION = MappingProxyType({level: level for level in (0, 1, 2, 3, 4, 6, 8, 12, 16, 24)})
