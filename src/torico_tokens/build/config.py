"""
Build configuration.

Locations the compiler reads from and writes to. Everything defaults
relative to the project root, which defaults to the working directory.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from torico_tokens.assets import REQUIRED_ASSETS


class BuildConfig(BaseModel):
    """
    Token build locations.

    Example:
        BuildConfig(project_root=Path("."))
        BuildConfig(dist_dir=Path("/tmp/out"), assets_dir=Path("assets/characters"))
    """

    project_root: Path = Field(description="Project root")
    dist_dir: Path = Field(description="Artifact root, relative to the root (default: dist)")
    assets_dir: Path = Field(
        description="Character assets, relative to the root (default: assets/characters)"
    )
    required_assets: tuple[str, ...] = Field(
        default=REQUIRED_ASSETS, description="Asset filenames checked before emission"
    )

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="before")
    @classmethod
    def derive_locations(cls, data: Any) -> Any:
        """Fill unset locations from the project root; relative ones are joined onto it."""
        if not isinstance(data, dict):
            return data
        root = Path(data.get("project_root") or Path.cwd())
        return {
            **data,
            "project_root": root,
            "dist_dir": root / Path(data.get("dist_dir") or "dist"),
            "assets_dir": root / Path(data.get("assets_dir") or "assets/characters"),
        }

    @property
    def native_dir(self) -> Path:
        return self.dist_dir / "native"

    @property
    def web_dir(self) -> Path:
        return self.dist_dir / "web"

    @property
    def types_dir(self) -> Path:
        return self.dist_dir / "types"

    @property
    def tokens_dir(self) -> Path:
        return self.dist_dir / "tokens"

    @property
    def output_dirs(self) -> list[Path]:
        """Directories created before any artifact is written."""
        return [self.dist_dir, self.native_dir, self.web_dir, self.types_dir, self.tokens_dir]
