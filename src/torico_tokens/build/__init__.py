"""
Token build pipeline.

Compiles the token tables into platform artifacts:
- Native: JS re-export modules and the token value module
- Web: Tailwind config extension and CSS custom properties
- Types: declaration stub
- reference.html: visual token reference

Usage:
    from torico_tokens.build import BuildConfig, compile_tokens

    compile_tokens(BuildConfig(project_root=Path(".")), progress=print)
"""

from .assets import AssetReport, check_assets
from .compiler import (
    Artifact,
    ArtifactGroup,
    BuildResult,
    compile_tokens,
    ensure_directories,
    render_artifacts,
)
from .config import BuildConfig
from .css import generate_tokens_css
from .reference import color_category, is_light_color, render_reference_html
from .tailwind import build_tailwind_tokens, render_tailwind_module

__all__ = [
    # Configuration
    "BuildConfig",
    # Compilation
    "compile_tokens",
    "render_artifacts",
    "ensure_directories",
    "Artifact",
    "ArtifactGroup",
    "BuildResult",
    # Assets
    "check_assets",
    "AssetReport",
    # Emitters
    "build_tailwind_tokens",
    "render_tailwind_module",
    "generate_tokens_css",
    "render_reference_html",
    "is_light_color",
    "color_category",
]
