"""
CSS custom property generator.

Generates ``web/tokens.css``: primitive web tokens on ``:root`` followed
by semantic theme variables under ``[data-theme=...]`` selectors, the
default theme also applying to ``:root``.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from torico_tokens.specs.theme import Theme
from torico_tokens.tokens.primitives.animations import BEZIER, DURATION, EASING, cubic_bezier
from torico_tokens.tokens.primitives.typography import (
    FONT_WEIGHT,
    LINE_HEIGHT_MULTIPLIER,
    WEB_FONT_FAMILY,
)
from torico_tokens.tokens.themes import DEFAULT_THEME_NAME, THEMES
from torico_tokens.tokens.web import (
    WEB_BORDER_RADIUS,
    WEB_BOX_SHADOW,
    WEB_COLORS,
    WEB_FONT_SIZE,
    WEB_SPACING,
)

from .banner import file_banner

_USAGE = ["Usage:", "@import '@torico/design-system/dist/web/tokens.css';"]


def kebab(name: str) -> str:
    """``cardSolid`` -> ``card-solid``."""
    return re.sub(r"(?<!^)(?=[A-Z])", "-", name).lower()


def css_vars(values: Mapping[str, Any], prefix: str, indent: int = 2) -> list[str]:
    """One ``--<prefix>-<key>: <value>;`` line per entry, in table order."""
    pad = " " * indent
    return [f"{pad}--{prefix}-{key}: {value};" for key, value in values.items()]


def _easing_name(value: str) -> str:
    if value == "ease":
        return "default"
    return value.removeprefix("ease-")


def _root_blocks() -> list[tuple[str, list[str]]]:
    return [
        ("Colors", css_vars(WEB_COLORS, "color")),
        ("Spacing", css_vars(WEB_SPACING, "spacing")),
        ("Border Radius", css_vars(WEB_BORDER_RADIUS, "radius")),
        ("Font Sizes", css_vars({k: size for k, (size, _) in WEB_FONT_SIZE.items()}, "font-size")),
        ("Font Weights", css_vars(FONT_WEIGHT, "font-weight")),
        (
            "Line Heights",
            css_vars({k: f"{v:g}" for k, v in LINE_HEIGHT_MULTIPLIER.items()}, "line-height"),
        ),
        ("Font Families", css_vars({kebab(k): v for k, v in WEB_FONT_FAMILY.items()}, "font")),
        ("Shadows", css_vars(WEB_BOX_SHADOW, "shadow")),
        ("Animation Durations", css_vars({k: f"{v}ms" for k, v in DURATION.items()}, "duration")),
        (
            "Easing",
            css_vars({_easing_name(v): v for v in EASING.values()}, "ease")
            + css_vars({k: cubic_bezier(k) for k in BEZIER}, "ease"),
        ),
    ]


def theme_variables(theme: Theme, indent: int = 2) -> list[str]:
    """
    Semantic variables for a theme.

    ``text.error`` becomes ``--text-error``, ``feedback.info.border``
    becomes ``--feedback-info-border``.
    """
    pad = " " * indent
    return [
        f"{pad}--{'-'.join(kebab(part) for part in path.split('.'))}: {value};"
        for path, value in theme.flatten().items()
    ]


def _theme_selector(name: str) -> str:
    selector = f'[data-theme="{name}"]'
    if name == DEFAULT_THEME_NAME:
        return f":root,\n{selector}"
    return selector


def generate_tokens_css(timestamp: str) -> str:
    """
    Generate the complete custom property sheet.

    Args:
        timestamp: Build time embedded in the header comment

    Returns:
        CSS string with the :root token block and one block per theme
    """
    lines: list[str] = [file_banner("CSS Custom Properties", timestamp, usage=_USAGE)]

    lines.append(":root {")
    for index, (title, block) in enumerate(_root_blocks()):
        if index:
            lines.append("")
        lines.append(f"  /* {title} */")
        lines.extend(block)
    lines.append("}")
    lines.append("")

    for name, theme in THEMES.items():
        default_note = " (default)" if name == DEFAULT_THEME_NAME else ""
        lines.append(f"/* Theme: {name}{default_note} */")
        lines.append(f"{_theme_selector(name)} {{")
        lines.extend(theme_variables(theme))
        lines.append("}")
        lines.append("")

    return "\n".join(lines)
