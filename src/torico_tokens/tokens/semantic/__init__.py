"""
Semantic tokens.

Context-aware values mapped from primitives. These are the tokens
components should use.
"""

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
from torico_tokens.tokens.semantic.typography import (
    BODY,
    BUTTON,
    CAPTION,
    CODE,
    DISPLAY,
    HEADING,
    LABEL,
    TEXT_PRESETS,
    TYPOGRAPHY,
)

__all__ = [
    # Colors
    "BRAND",
    "BACKGROUND",
    "TEXT",
    "BORDER",
    "INTERACTIVE",
    "FEEDBACK_COLORS",
    "ICON",
    "DRAWER_COLORS",
    # Typography
    "DISPLAY",
    "HEADING",
    "BODY",
    "LABEL",
    "CAPTION",
    "BUTTON",
    "CODE",
    "TYPOGRAPHY",
    "TEXT_PRESETS",
]
