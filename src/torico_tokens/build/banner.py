"""Header comment shared by every generated artifact."""

from __future__ import annotations

GENERATED_PREFIX = "Generated: "


def file_banner(title: str, timestamp: str, usage: list[str] | None = None) -> str:
    """
    Render the ``/** ... */`` block opening a generated JS/CSS/TS file.

    The timestamp line is the only part of an artifact that changes
    between two builds of the same tokens.
    """
    lines = [
        "/**",
        f" * TORICO Design System - {title}",
        " *",
        " * Auto-generated file. Do not edit directly.",
        f" * {GENERATED_PREFIX}{timestamp}",
    ]
    if usage:
        lines.append(" *")
        lines.extend(f" * {line}".rstrip() for line in usage)
    lines.append(" */")
    return "\n".join(lines) + "\n"
