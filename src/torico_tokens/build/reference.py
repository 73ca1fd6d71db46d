"""
Reference HTML page.

Renders every web token visually: grouped color swatches, a typography
specimen table, a spacing bar chart, radius and shadow samples, the
semantic theme tables and the design principle cards. Uses Jinja2 with
autoescaping; the page has no external assets.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from torico_tokens.tokens.primitives.colors import NEUTRAL
from torico_tokens.tokens.primitives.radii import RADII
from torico_tokens.tokens.primitives.spacing import SPACING
from torico_tokens.tokens.semantic.typography import TEXT_PRESETS
from torico_tokens.tokens.themes import DEFAULT_THEME_NAME, THEMES
from torico_tokens.tokens.web import WEB_BOX_SHADOW, WEB_COLORS, px

TEMPLATES_DIR = Path(__file__).parent / "templates"
REFERENCE_TEMPLATE = "reference.html"

# First matching prefix wins; anything else is a feedback color
CATEGORY_PREFIXES: tuple[tuple[str, str], ...] = (
    ("brand-", "Brand"),
    ("neutral-", "Neutral"),
    ("drawer-", "Drawer"),
    ("pastel-", "Pastel"),
    ("app-", "App"),
)
FALLBACK_CATEGORY = "Feedback"

# Not drawn as bars: zero width and the 1px hairline
SPACING_CHART_EXCLUDED = frozenset({"0", "px"})

# Weighted channel sum threshold, on a 0-255 scale
LIGHT_THRESHOLD = 150

DARK_TEXT = NEUTRAL[900]
LIGHT_TEXT = NEUTRAL[0]

PRINCIPLES: tuple[tuple[str, str], ...] = (
    (
        "Neutral first",
        "UI chrome stays grayscale. Color is reserved for feedback states and "
        "for the characters, so nothing competes with the content.",
    ),
    (
        "Characters carry the brand",
        "Personality comes from the DRAWER character assets rather than from "
        "accent colors or decorative surfaces.",
    ),
    (
        "Dark by default",
        "The native apps ship in dark mode. Every semantic token also has a "
        "light value, and both themes define exactly the same keys.",
    ),
    (
        "4px rhythm",
        "Spacing, radii and line heights sit on a 4px grid. Reach for a named "
        "alias before a raw number.",
    ),
    (
        "Semantic over primitive",
        "Components reference roles such as text.secondary, never a raw "
        "neutral step, so themes can change without touching components.",
    ),
)

_HEX_RE = re.compile(r"^#([0-9A-Fa-f]{3}|[0-9A-Fa-f]{6}|[0-9A-Fa-f]{8})$")
_RGB_RE = re.compile(r"^rgba?\(\s*(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*(\d{1,3})")


@dataclass(frozen=True)
class Swatch:
    key: str
    value: str
    text_color: str


@dataclass(frozen=True)
class SpacingRow:
    key: str
    pixels: int


def parse_rgb(value: str) -> tuple[int, int, int] | None:
    """Channels of a hex or rgb()/rgba() color, ignoring alpha; None if unparseable."""
    if match := _HEX_RE.match(value):
        digits = match.group(1)
        if len(digits) == 3:
            digits = "".join(c * 2 for c in digits)
        return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)
    if match := _RGB_RE.match(value):
        r, g, b = (int(channel) for channel in match.groups())
        return r, g, b
    return None


def is_light_color(value: str) -> bool:
    """
    Decide whether a swatch needs dark label text.

    ``L = 0.299R + 0.587G + 0.114B``; light iff ``L > 150``. Compared in
    integer thousandths so ``#969696`` (exactly 150) is not light.
    """
    rgb = parse_rgb(value)
    if rgb is None:
        return False
    r, g, b = rgb
    return 299 * r + 587 * g + 114 * b > LIGHT_THRESHOLD * 1000


def swatch_text_color(value: str) -> str:
    return DARK_TEXT if is_light_color(value) else LIGHT_TEXT


def color_category(key: str) -> str:
    """Category heading for a web color key."""
    for prefix, category in CATEGORY_PREFIXES:
        if key.startswith(prefix):
            return category
    return FALLBACK_CATEGORY


def group_colors(colors: dict[str, str] | None = None) -> dict[str, list[Swatch]]:
    """Swatches by category, categories in prefix order with Feedback last."""
    colors = dict(WEB_COLORS if colors is None else colors)
    groups: dict[str, list[Swatch]] = {
        category: [] for category in [c for _, c in CATEGORY_PREFIXES] + [FALLBACK_CATEGORY]
    }
    for key, value in colors.items():
        groups[color_category(key)].append(Swatch(key, value, swatch_text_color(value)))
    return {category: swatches for category, swatches in groups.items() if swatches}


def spacing_rows() -> list[SpacingRow]:
    return [
        SpacingRow(key, pixels)
        for key, pixels in SPACING.items()
        if key not in SPACING_CHART_EXCLUDED
    ]


def _environment() -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=select_autoescape(["html"]),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )
    env.filters["px"] = px
    return env


def render_reference_html(timestamp: str) -> str:
    """
    Render the standalone reference page.

    Args:
        timestamp: Build time shown in the page footer

    Returns:
        Complete HTML document
    """
    template = _environment().get_template(REFERENCE_TEMPLATE)
    return template.render(
        timestamp=timestamp,
        color_groups=group_colors(),
        text_presets=TEXT_PRESETS,
        spacing=spacing_rows(),
        radii=RADII,
        shadows=WEB_BOX_SHADOW,
        themes={name: theme.flatten() for name, theme in THEMES.items()},
        default_theme=DEFAULT_THEME_NAME,
        principles=PRINCIPLES,
        dark_text=DARK_TEXT,
        light_text=LIGHT_TEXT,
    )
