"""Character asset filenames shipped with the design system."""

from __future__ import annotations

CHARACTER_EXPRESSIONS = ("neutral", "happy", "frustrated", "confused")

# Checked (in this order) by the token build
REQUIRED_ASSETS: tuple[str, ...] = (
    "drawer-app-icon.png",
    "drawer-main.png",
    *(f"drawer-face-{expression}.png" for expression in CHARACTER_EXPRESSIONS),
)
