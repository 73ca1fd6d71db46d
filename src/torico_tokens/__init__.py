"""
torico-tokens - TORICO design system tokens.

Token tables live in ``torico_tokens.tokens``; ``torico_tokens.build``
compiles them into native, web and reference artifacts.
"""

from torico_tokens._version import __version__

__all__ = ["__version__"]
