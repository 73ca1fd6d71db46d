"""
Tailwind config extension.

Flattens the web token tables into the object Tailwind's ``theme.extend``
expects and serializes it as an ES module.
"""

from __future__ import annotations

import json
from typing import Any

from torico_tokens.tokens.namespace import to_plain
from torico_tokens.tokens.web import (
    WEB_BORDER_RADIUS,
    WEB_BOX_SHADOW,
    WEB_COLORS,
    WEB_FONT_SIZE,
    WEB_SPACING,
)

from .banner import file_banner

EXPORT_NAME = "toricoTokens"

_USAGE = [
    "Usage in tailwind.config.ts:",
    "",
    "import { toricoTokens } from '@torico/design-system/tailwind';",
    "",
    "export default {",
    "  theme: {",
    "    extend: {",
    "      colors: toricoTokens.colors,",
    "      spacing: toricoTokens.spacing,",
    "      // ... etc",
    "    }",
    "  }",
    "}",
]


def build_tailwind_tokens() -> dict[str, Any]:
    """
    Combine the web tables into one Tailwind theme object.

    Returns:
        Dict with colors, spacing, fontSize ([size, {lineHeight}] pairs),
        borderRadius and boxShadow.
    """
    return {
        "colors": to_plain(WEB_COLORS),
        "spacing": to_plain(WEB_SPACING),
        "fontSize": to_plain(WEB_FONT_SIZE),
        "borderRadius": to_plain(WEB_BORDER_RADIUS),
        "boxShadow": to_plain(WEB_BOX_SHADOW),
    }


def render_tailwind_module(timestamp: str) -> str:
    """``web/tailwind.tokens.js``: named and default export of the theme object."""
    tokens = build_tailwind_tokens()
    body = "".join(
        f"  {section}: {_indent(json.dumps(values, indent=2, ensure_ascii=False))},\n"
        for section, values in tokens.items()
    )
    return (
        file_banner("Tailwind Config Extension", timestamp, usage=_USAGE)
        + "\n"
        + f"export const {EXPORT_NAME} = {{\n{body}}};\n"
        + "\n"
        + f"export default {EXPORT_NAME};\n"
    )


def render_web_index() -> str:
    """``web/index.js``."""
    return "export * from './tailwind.tokens.js';"


def _indent(text: str) -> str:
    # nest a json.dumps block one level inside the exported object
    return text.replace("\n", "\n  ")
