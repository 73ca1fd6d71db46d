"""
Dark theme.

The default theme for DRAWER and Instant Output apps. The semantic colors
are already dark-mode first, so this composes them unchanged.
"""

from __future__ import annotations

from torico_tokens.specs.theme import Theme, ThemeName
from torico_tokens.tokens.semantic.colors import (
    BACKGROUND,
    BORDER,
    BRAND,
    DRAWER_COLORS,
    FEEDBACK_COLORS,
    ICON,
    INTERACTIVE,
    TEXT,
)

DARK_THEME = Theme(
    name=ThemeName.DARK,
    description="White interactive elements on near-black surfaces",
    brand=BRAND,
    background=BACKGROUND,
    text=TEXT,
    border=BORDER,
    interactive=INTERACTIVE,
    feedback=FEEDBACK_COLORS,
    icon=ICON,
    drawer=DRAWER_COLORS,
)
