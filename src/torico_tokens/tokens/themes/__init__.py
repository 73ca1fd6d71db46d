"""
Light and dark themes.

Usage:
    from torico_tokens.tokens.themes import get_theme, resolve_token

    theme = get_theme("light")
    resolve_token("text.error")            # default (dark) theme
    resolve_token("text.error", "light")
"""

from .dark import DARK_THEME
from .light import LIGHT_THEME
from .resolver import (
    DEFAULT_THEME,
    DEFAULT_THEME_NAME,
    THEMES,
    get_theme,
    list_themes,
    resolve_token,
    semantic_keys,
)

__all__ = [
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
