"""
Character asset presence check.

Advisory only: the build reports missing files and carries on.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from pydantic import BaseModel, ConfigDict

from torico_tokens.assets import REQUIRED_ASSETS

logger = logging.getLogger(__name__)


class AssetReport(BaseModel):
    """Result of an asset check; both lists keep the required order."""

    assets_dir: Path
    present: list[str]
    missing: list[str]

    model_config = ConfigDict(frozen=True)

    @property
    def ok(self) -> bool:
        return not self.missing

    def summary(self) -> str:
        """One console line, ✓ or ⚠ prefixed."""
        if self.ok:
            return "✓ All character assets present"
        return f"⚠ Missing character assets: {', '.join(self.missing)}"


def check_assets(assets_dir: Path, required: Iterable[str] = REQUIRED_ASSETS) -> AssetReport:
    """
    Check which required assets exist under a directory.

    Args:
        assets_dir: Directory expected to hold the files
        required: Filenames to look for, in report order

    Returns:
        AssetReport listing present and missing filenames
    """
    present: list[str] = []
    missing: list[str] = []
    for name in required:
        (present if (assets_dir / name).is_file() else missing).append(name)

    if missing:
        logger.warning("Missing %d character asset(s) in %s: %s", len(missing), assets_dir, missing)
    return AssetReport(assets_dir=assets_dir, present=present, missing=missing)
