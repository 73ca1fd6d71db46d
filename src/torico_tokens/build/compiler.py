"""
Token compiler.

Runs the full build once: check character assets, prepare the output
tree, render every artifact and write it, overwriting previous output.

Usage::

    from torico_tokens.build import BuildConfig, compile_tokens
    result = compile_tokens(BuildConfig(project_root=Path(".")))
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from datetime import UTC, datetime
from pathlib import Path

from .assets import AssetReport, check_assets
from .config import BuildConfig
from .css import generate_tokens_css
from .native import (
    render_native_declaration,
    render_native_module,
    render_token_module,
    render_type_declarations,
)
from .reference import render_reference_html
from .tailwind import render_tailwind_module, render_web_index

logger = logging.getLogger(__name__)

Progress = Callable[[str], None]


@dataclass(frozen=True)
class Artifact:
    """One generated file, relative to the dist directory."""

    path: str
    content: str


@dataclass(frozen=True)
class ArtifactGroup:
    """Artifacts written together and reported with one progress line."""

    label: str
    artifacts: list[Artifact]


@dataclass
class BuildResult:
    config: BuildConfig
    timestamp: str
    assets: AssetReport
    written: list[Path] = field(default_factory=list)

    def summary_lines(self) -> list[str]:
        return [
            "",
            "✅ Token build complete!",
            f"   - Native: {self.config.native_dir}",
            f"   - Web: {self.config.web_dir}",
            f"   - Types: {self.config.types_dir}",
            f"   - Reference: {self.config.dist_dir / 'reference.html'}",
            "",
            "📦 Build complete!",
        ]


def render_artifacts(timestamp: str) -> list[ArtifactGroup]:
    """
    Render every artifact without touching the filesystem.

    Args:
        timestamp: Value for the ``Generated:`` header line

    Returns:
        Artifact groups in build order
    """
    return [
        ArtifactGroup(
            "native tokens",
            [
                Artifact("tokens/index.js", render_token_module(timestamp)),
                Artifact("native/index.js", render_native_module(timestamp)),
                Artifact("native/index.d.ts", render_native_declaration()),
            ],
        ),
        ArtifactGroup(
            "Tailwind tokens",
            [Artifact("web/tailwind.tokens.js", render_tailwind_module(timestamp))],
        ),
        ArtifactGroup(
            "CSS custom properties",
            [
                Artifact("web/tokens.css", generate_tokens_css(timestamp)),
                Artifact("web/index.js", render_web_index()),
            ],
        ),
        ArtifactGroup(
            "type definitions",
            [Artifact("types/index.d.ts", render_type_declarations(timestamp))],
        ),
        ArtifactGroup(
            "reference page",
            [Artifact("reference.html", render_reference_html(timestamp))],
        ),
    ]


def ensure_directories(paths: Iterable[Path]) -> None:
    """Create each directory and its parents; existing directories are left alone."""
    for path in paths:
        path.mkdir(parents=True, exist_ok=True)


def write_artifact(dist_dir: Path, artifact: Artifact) -> Path:
    target = dist_dir / artifact.path
    target.write_text(artifact.content, encoding="utf-8")
    logger.debug("Wrote %s (%d bytes)", target, len(artifact.content))
    return target


def compile_tokens(
    config: BuildConfig | None = None,
    *,
    timestamp: str | None = None,
    progress: Progress | None = None,
) -> BuildResult:
    """
    Build every token artifact.

    Missing character assets are reported and the build continues.
    Filesystem errors (``OSError``) abort the build and propagate as is.

    Args:
        config: Build locations; defaults to the working directory layout
        timestamp: Header timestamp; defaults to the current UTC time
        progress: Called with each console progress line

    Returns:
        BuildResult with the asset report and written paths
    """
    config = config or BuildConfig()
    timestamp = timestamp or datetime.now(UTC).isoformat()
    emit = progress or (lambda line: None)

    assets = check_assets(config.assets_dir, config.required_assets)
    emit(assets.summary())

    ensure_directories(config.output_dirs)

    result = BuildResult(config=config, timestamp=timestamp, assets=assets)
    for group in render_artifacts(timestamp):
        for artifact in group.artifacts:
            result.written.append(write_artifact(config.dist_dir, artifact))
        emit(f"✓ Generated {group.label}")

    logger.info("Token build wrote %d files to %s", len(result.written), config.dist_dir)
    for line in result.summary_lines():
        emit(line)
    return result
