"""
Primitive animation tokens.

Durations and delays are milliseconds. Bezier curves are
``(x1, y1, x2, y2)`` control points.
"""

from __future__ import annotations

from types import MappingProxyType

from torico_tokens.specs.theme import SpringConfig, TransitionPreset

DURATION = MappingProxyType(
    {
        "instant": 0,
        "fastest": 50,
        "fast": 100,
        "normal": 200,
        "slow": 300,
        "slower": 400,
        "slowest": 500,
    }
)

EASING = MappingProxyType(
    {
        "linear": "linear",
        "ease": "ease",
        "easeIn": "ease-in",
        "easeOut": "ease-out",
        "easeInOut": "ease-in-out",
    }
)

BEZIER = MappingProxyType(
    {
        "standard": (0.4, 0, 0.2, 1),
        "emphasized": (0, 0, 0.2, 1),
        "decelerate": (0, 0, 0.2, 1),
        "accelerate": (0.4, 0, 1, 1),
        "sharp": (0.4, 0, 0.6, 1),
        # slight overshoot
        "bounce": (0.68, -0.55, 0.265, 1.55),
    }
)

SPRING = MappingProxyType(
    {
        "gentle": SpringConfig(stiffness=120, damping=14),
        "default": SpringConfig(stiffness=150, damping=15),
        "bouncy": SpringConfig(stiffness=180, damping=12),
        "stiff": SpringConfig(stiffness=250, damping=20),
        "slow": SpringConfig(stiffness=90, damping=20),
    }
)

TRANSITION = MappingProxyType(
    {
        "fast": TransitionPreset(duration=DURATION["fast"], easing=EASING["easeOut"]),
        "normal": TransitionPreset(duration=DURATION["normal"], easing=EASING["easeOut"]),
        "slow": TransitionPreset(duration=DURATION["slow"], easing=EASING["easeInOut"]),
        "modal": TransitionPreset(duration=DURATION["slow"], easing=EASING["easeOut"]),
        "page": TransitionPreset(duration=DURATION["slower"], easing=EASING["easeInOut"]),
    }
)

DELAY = MappingProxyType(
    {
        "none": 0,
        "short": 50,
        "medium": 100,
        "long": 200,
        # per list item
        "stagger": 50,
    }
)


def cubic_bezier(name: str) -> str:
    """CSS ``cubic-bezier()`` for a named curve."""
    return "cubic-bezier({})".format(", ".join(f"{c:g}" for c in BEZIER[name]))
