"""
Theme registry and semantic token resolution.

Resolves dotted semantic paths (``text.error``) against a named theme,
falling back to the default theme when none is given.
"""

from __future__ import annotations

from types import MappingProxyType

from pydantic.alias_generators import to_camel

from torico_tokens.errors import TokenResolutionError, UnknownThemeError
from torico_tokens.specs.theme import Theme, ThemeName

from .dark import DARK_THEME
from .light import LIGHT_THEME

THEMES = MappingProxyType(
    {
        ThemeName.LIGHT.value: LIGHT_THEME,
        ThemeName.DARK.value: DARK_THEME,
    }
)

DEFAULT_THEME_NAME = ThemeName.DARK.value
DEFAULT_THEME = THEMES[DEFAULT_THEME_NAME]


def list_themes() -> list[str]:
    """List registered theme names."""
    return list(THEMES.keys())


def get_theme(name: str | None = None) -> Theme:
    """
    Get a theme by name.

    Args:
        name: "light" or "dark"; None selects the default theme

    Returns:
        The registered Theme

    Raises:
        UnknownThemeError: If the name is not registered
    """
    if name is None:
        return DEFAULT_THEME
    theme = THEMES.get(str(name))
    if theme is None:
        raise UnknownThemeError(str(name), list_themes())
    return theme


def semantic_keys(theme: Theme) -> set[str]:
    """All dotted token paths defined by a theme."""
    return set(theme.flatten())


def resolve_token(path: str, theme: str | Theme | None = None) -> str:
    """
    Resolve a dotted semantic path to a concrete value.

    Path segments may be published camelCase (``background.cardSolid``)
    or snake_case (``background.card_solid``).

    Args:
        path: Dotted path such as "text.error" or "feedback.info.border"
        theme: Theme name, Theme instance, or None for the default theme

    Returns:
        The color value in the selected theme

    Raises:
        UnknownThemeError: If the theme name is not registered
        TokenResolutionError: If the path does not name a leaf token
    """
    resolved = theme if isinstance(theme, Theme) else get_theme(theme)
    normalized = ".".join(
        to_camel(segment) if "_" in segment else segment for segment in path.split(".")
    )

    flat = resolved.flatten()
    if normalized in flat:
        return flat[normalized]

    if any(key.startswith(f"{normalized}.") for key in flat):
        raise TokenResolutionError(path, resolved.name.value, "path names a group, not a token")
    raise TokenResolutionError(path, resolved.name.value, "no such token")
