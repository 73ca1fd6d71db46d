"""
Semantic color tokens.

Maps primitive colors onto their intended use. Values are dark-mode first
(the primary theme for the native apps); the light theme overrides every
group in ``tokens.themes.light``.
"""

from __future__ import annotations

from torico_tokens.specs.theme import (
    BackgroundColors,
    BorderColors,
    BrandColors,
    DrawerColors,
    FeedbackColors,
    FeedbackState,
    IconColors,
    InteractiveColors,
    TextColors,
)
from torico_tokens.tokens.primitives.colors import (
    ALPHA,
    DARK_NEUTRAL,
    DRAWER,
    FEEDBACK,
    NEUTRAL,
    black,
    white,
)

# White on dark; the light theme flips this to black on light
BRAND = BrandColors(
    primary=NEUTRAL[0],
    primary_hover=NEUTRAL[200],
    primary_muted=NEUTRAL[500],
    secondary=DARK_NEUTRAL["gray"],
    web_primary=NEUTRAL[900],
    web_primary_dark=NEUTRAL[800],
)

BACKGROUND = BackgroundColors(
    primary=DARK_NEUTRAL["background"],
    secondary=DARK_NEUTRAL["backgroundSecondary"],
    tertiary=DARK_NEUTRAL["backgroundTertiary"],
    card="rgba(26, 26, 26, 0.95)",
    card_solid="#1A1A1A",
    surface=DARK_NEUTRAL["surface"],
    surface_dark=DARK_NEUTRAL["surfaceDark"],
    overlay=black(ALPHA[50]),
    overlay_light=black(ALPHA[30]),
    dark=NEUTRAL[900],
    black="#000000",
    white=NEUTRAL[0],
)

TEXT = TextColors(
    primary=NEUTRAL[0],
    secondary=white(ALPHA[60]),
    tertiary=white(ALPHA[40]),
    disabled=white(ALPHA[20]),
    placeholder=white(ALPHA[30]),
    inverse=NEUTRAL[900],
    brand=NEUTRAL[0],
    link=NEUTRAL[0],
    error=FEEDBACK["error"].base,
    success=FEEDBACK["success"].base,
    warning=FEEDBACK["warning"].dark,
)

BORDER = BorderColors(
    default=NEUTRAL[800],
    subtle=white(ALPHA[10]),
    muted=white(ALPHA[20]),
    focus=NEUTRAL[0],
    error=FEEDBACK["error"].base,
    success=FEEDBACK["success"].base,
)

INTERACTIVE = InteractiveColors(
    primary=NEUTRAL[0],
    primary_hover=NEUTRAL[200],
    primary_pressed=NEUTRAL[300],
    primary_disabled=NEUTRAL[700],
    secondary=DARK_NEUTRAL["gray"],
    secondary_hover=NEUTRAL[700],
    destructive=FEEDBACK["error"].base,
    destructive_hover=FEEDBACK["error"].dark,
    ghost="transparent",
    ghost_hover=white(ALPHA[10]),
)

FEEDBACK_COLORS = FeedbackColors(
    success=FeedbackState(
        background=FEEDBACK["success"].light,
        foreground=FEEDBACK["success"].base,
        border=FEEDBACK["success"].base,
    ),
    warning=FeedbackState(
        background=FEEDBACK["warning"].light,
        foreground=FEEDBACK["warning"].dark,
        border=FEEDBACK["warning"].base,
    ),
    error=FeedbackState(
        background=FEEDBACK["error"].light,
        foreground=FEEDBACK["error"].base,
        border=FEEDBACK["error"].base,
    ),
    info=FeedbackState(
        background=FEEDBACK["info"].light,
        foreground=FEEDBACK["info"].dark,
        border=FEEDBACK["info"].base,
    ),
)

ICON = IconColors(
    primary=NEUTRAL[0],
    secondary=white(ALPHA[60]),
    muted=white(ALPHA[40]),
    disabled=white(ALPHA[20]),
    brand=NEUTRAL[0],
    inverse=NEUTRAL[900],
    on_light=NEUTRAL[900],
)

DRAWER_COLORS = DrawerColors(
    green=DRAWER["green"],
    gray=DRAWER["gray"],
    white=DRAWER["white"],
)
