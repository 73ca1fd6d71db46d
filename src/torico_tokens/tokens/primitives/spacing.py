"""
Primitive spacing tokens.

4px base scale. Keys are the multiplier as published to Tailwind
(``"4"`` is 4 * 4px = 16px); values are pixels.
"""

from __future__ import annotations

from types import MappingProxyType

SPACING = MappingProxyType(
    {
        "0": 0,
        "px": 1,
        "0.5": 2,
        "1": 4,
        "1.5": 6,
        "2": 8,
        "2.5": 10,
        "3": 12,
        "3.5": 14,
        "4": 16,
        "5": 20,
        "6": 24,
        "7": 28,
        "8": 32,
        "9": 36,
        "10": 40,
        "11": 44,
        "12": 48,
        "14": 56,
        "16": 64,
        "20": 80,
        "24": 96,
        "28": 112,
        "32": 128,
        "36": 144,
        "40": 160,
    }
)

SPACING_ALIAS = MappingProxyType(
    {
        "xs": SPACING["1"],
        "sm": SPACING["2"],
        "md": SPACING["4"],
        "lg": SPACING["6"],
        "xl": SPACING["8"],
        "2xl": SPACING["12"],
        "3xl": SPACING["16"],
    }
)

COMPONENT_SPACING = MappingProxyType(
    {
        "cardPadding": SPACING["4"],
        "listItemGap": SPACING["3"],
        "screenPaddingX": SPACING["4"],
        "screenPaddingY": SPACING["6"],
        "sectionGap": SPACING["6"],
        "inputPadding": SPACING["3"],
        "buttonPaddingX": SPACING["4"],
        "buttonPaddingY": SPACING["3"],
        "iconButtonSize": SPACING["11"],
        "headerHeight": SPACING["14"],
        "tabBarHeight": SPACING["16"],
        "bottomSafeArea": SPACING["8"],
    }
)

# Flex / grid gaps
GAP = MappingProxyType(
    {
        "none": 0,
        "xs": SPACING["1"],
        "sm": SPACING["2"],
        "md": SPACING["4"],
        "lg": SPACING["6"],
        "xl": SPACING["8"],
    }
)
