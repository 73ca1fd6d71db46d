"""
Light theme.

Neutral-first: black interactive elements on white backgrounds.
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
    Theme,
    ThemeName,
)
from torico_tokens.tokens.primitives.colors import ALPHA, DRAWER, FEEDBACK, NEUTRAL, black


def _feedback_state(hue: str) -> FeedbackState:
    ramp = FEEDBACK[hue]
    return FeedbackState(background=ramp.light, foreground=ramp.dark, border=ramp.base)


LIGHT_THEME = Theme(
    name=ThemeName.LIGHT,
    description="Black interactive elements on white surfaces",
    brand=BrandColors(
        primary=NEUTRAL[900],
        primary_hover=NEUTRAL[700],
        primary_muted=NEUTRAL[400],
        secondary=NEUTRAL[100],
        web_primary=NEUTRAL[900],
        web_primary_dark=NEUTRAL[800],
    ),
    background=BackgroundColors(
        primary=NEUTRAL[0],
        secondary=NEUTRAL[50],
        tertiary=NEUTRAL[100],
        card=NEUTRAL[0],
        card_solid=NEUTRAL[0],
        surface=NEUTRAL[50],
        surface_dark=NEUTRAL[100],
        overlay=black(ALPHA[50]),
        overlay_light=black(ALPHA[30]),
        dark=NEUTRAL[800],
        black="#000000",
        white=NEUTRAL[0],
    ),
    text=TextColors(
        primary=NEUTRAL[900],
        secondary=NEUTRAL[600],
        tertiary=NEUTRAL[500],
        disabled=NEUTRAL[400],
        placeholder=NEUTRAL[400],
        inverse=NEUTRAL[0],
        brand=NEUTRAL[900],
        link=NEUTRAL[900],
        error=FEEDBACK["error"].dark,
        success=FEEDBACK["success"].dark,
        warning=FEEDBACK["warning"].dark,
    ),
    border=BorderColors(
        default=NEUTRAL[200],
        subtle=NEUTRAL[100],
        muted=NEUTRAL[300],
        focus=NEUTRAL[900],
        error=FEEDBACK["error"].base,
        success=FEEDBACK["success"].base,
    ),
    interactive=InteractiveColors(
        primary=NEUTRAL[900],
        primary_hover=NEUTRAL[700],
        primary_pressed=NEUTRAL[600],
        primary_disabled=NEUTRAL[300],
        secondary=NEUTRAL[100],
        secondary_hover=NEUTRAL[200],
        destructive=FEEDBACK["error"].base,
        destructive_hover=FEEDBACK["error"].dark,
        ghost="transparent",
        ghost_hover=NEUTRAL[100],
    ),
    # Foregrounds use the dark shade for contrast on light surfaces
    feedback=FeedbackColors(
        success=_feedback_state("success"),
        warning=_feedback_state("warning"),
        error=_feedback_state("error"),
        info=_feedback_state("info"),
    ),
    icon=IconColors(
        primary=NEUTRAL[900],
        secondary=NEUTRAL[600],
        muted=NEUTRAL[500],
        disabled=NEUTRAL[400],
        brand=NEUTRAL[900],
        inverse=NEUTRAL[0],
        on_light=NEUTRAL[900],
    ),
    drawer=DrawerColors(
        green=DRAWER["green"],
        gray=DRAWER["gray"],
        white=DRAWER["white"],
    ),
)
