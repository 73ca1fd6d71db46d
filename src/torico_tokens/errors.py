"""
Error types for token lookup and theme resolution.

Filesystem faults raised while compiling artifacts are plain ``OSError``
and propagate unchanged.
"""


class TokensError(Exception):
    """Base exception for all torico-tokens errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class UnknownThemeError(TokensError):
    """
    Raised when a theme name is not registered.

    Examples:
    - ``get_theme("sepia")``
    - ``resolve_token("text.primary", theme="high-contrast")``
    """

    def __init__(self, name: str, available: list[str]):
        self.name = name
        self.available = available
        super().__init__(f"Unknown theme '{name}'. Available themes: {', '.join(available)}")


class TokenResolutionError(TokensError):
    """
    Raised when a dotted semantic path does not resolve to a value.

    Examples:
    - Unknown group (``surface.primary``)
    - Unknown key within a group (``text.muted``)
    - Path stopping at a group instead of a leaf (``feedback.error``)
    """

    def __init__(self, path: str, theme: str, reason: str):
        self.path = path
        self.theme = theme
        super().__init__(f"Cannot resolve '{path}' in theme '{theme}': {reason}")
