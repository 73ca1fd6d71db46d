"""Shared pytest fixtures for torico-tokens tests."""

from pathlib import Path

import pytest

from torico_tokens.assets import REQUIRED_ASSETS
from torico_tokens.build import BuildConfig

FIXED_TIMESTAMP = "2024-01-01T00:00:00+00:00"


@pytest.fixture
def timestamp() -> str:
    """Return a fixed build timestamp."""
    return FIXED_TIMESTAMP


@pytest.fixture
def build_config(tmp_path: Path) -> BuildConfig:
    """Return a build config rooted in a temporary project."""
    return BuildConfig(project_root=tmp_path)


@pytest.fixture
def character_assets(build_config: BuildConfig) -> Path:
    """Create every required character asset and return the directory."""
    assets_dir = build_config.assets_dir
    assets_dir.mkdir(parents=True)
    for name in REQUIRED_ASSETS:
        (assets_dir / name).write_bytes(b"\x89PNG\r\n\x1a\n")
    return assets_dir
