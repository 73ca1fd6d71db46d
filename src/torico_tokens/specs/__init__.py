"""Token record and theme specification types."""

from torico_tokens.specs.theme import (
    BackgroundColors,
    BorderColors,
    BrandColors,
    ColorGroup,
    ColorRamp,
    DrawerColors,
    FeedbackColors,
    FeedbackState,
    IconColors,
    InteractiveColors,
    NativeShadow,
    PlatformShadow,
    ShadowOffset,
    SpringConfig,
    TextColors,
    TextStyle,
    Theme,
    ThemeName,
    TransitionPreset,
    is_concrete_color,
)

__all__ = [
    "BackgroundColors",
    "BorderColors",
    "BrandColors",
    "ColorGroup",
    "ColorRamp",
    "DrawerColors",
    "FeedbackColors",
    "FeedbackState",
    "IconColors",
    "InteractiveColors",
    "NativeShadow",
    "PlatformShadow",
    "ShadowOffset",
    "SpringConfig",
    "TextColors",
    "TextStyle",
    "Theme",
    "ThemeName",
    "TransitionPreset",
    "is_concrete_color",
]
