"""Tests for the token build pipeline."""

from __future__ import annotations

from pathlib import Path

import pytest

from torico_tokens.assets import REQUIRED_ASSETS
from torico_tokens.build import (
    BuildConfig,
    check_assets,
    compile_tokens,
    ensure_directories,
    render_artifacts,
)

EXPECTED_ARTIFACTS = [
    "tokens/index.js",
    "native/index.js",
    "native/index.d.ts",
    "web/tailwind.tokens.js",
    "web/tokens.css",
    "web/index.js",
    "types/index.d.ts",
    "reference.html",
]


def _without_timestamp(text: str) -> str:
    return "\n".join(line for line in text.splitlines() if "Generated:" not in line)


class TestBuildConfig:
    def test_defaults_from_root(self, tmp_path: Path) -> None:
        config = BuildConfig(project_root=tmp_path)
        assert config.dist_dir == tmp_path / "dist"
        assert config.assets_dir == tmp_path / "assets" / "characters"
        assert config.required_assets == REQUIRED_ASSETS

    def test_explicit_dirs(self, tmp_path: Path) -> None:
        config = BuildConfig(project_root=tmp_path, dist_dir=tmp_path / "out")
        assert config.web_dir == tmp_path / "out" / "web"
        assert config.output_dirs[0] == tmp_path / "out"

    def test_relative_dirs_join_root(self, tmp_path: Path) -> None:
        config = BuildConfig(project_root=tmp_path, dist_dir=Path("out"), assets_dir=Path("art"))
        assert config.dist_dir == tmp_path / "out"
        assert config.assets_dir == tmp_path / "art"

    def test_default_root_is_cwd(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        assert BuildConfig().project_root == tmp_path


class TestCheckAssets:
    def test_all_missing(self, tmp_path: Path) -> None:
        report = check_assets(tmp_path)
        assert report.missing == list(REQUIRED_ASSETS)
        assert not report.ok
        assert report.summary().startswith("⚠ Missing character assets: drawer-app-icon.png, ")

    def test_all_present(self, character_assets: Path) -> None:
        report = check_assets(character_assets)
        assert report.ok
        assert report.present == list(REQUIRED_ASSETS)
        assert report.summary() == "✓ All character assets present"

    def test_order_preserved(self, tmp_path: Path) -> None:
        (tmp_path / "drawer-face-happy.png").write_bytes(b"")
        (tmp_path / "drawer-main.png").write_bytes(b"")
        report = check_assets(tmp_path)
        assert report.present == ["drawer-main.png", "drawer-face-happy.png"]
        assert report.missing[0] == "drawer-app-icon.png"

    def test_missing_dir_is_not_fatal(self, tmp_path: Path) -> None:
        report = check_assets(tmp_path / "nope")
        assert len(report.missing) == len(REQUIRED_ASSETS)


class TestEnsureDirectories:
    def test_creates_nested(self, tmp_path: Path) -> None:
        target = tmp_path / "a" / "b" / "c"
        ensure_directories([target])
        assert target.is_dir()

    def test_idempotent(self, build_config: BuildConfig) -> None:
        ensure_directories(build_config.output_dirs)
        ensure_directories(build_config.output_dirs)
        assert all(path.is_dir() for path in build_config.output_dirs)


class TestRenderArtifacts:
    def test_paths(self, timestamp: str) -> None:
        paths = [a.path for group in render_artifacts(timestamp) for a in group.artifacts]
        assert paths == EXPECTED_ARTIFACTS

    def test_pure(self, timestamp: str) -> None:
        first = render_artifacts(timestamp)
        second = render_artifacts(timestamp)
        assert first == second


class TestCompileTokens:
    def test_writes_all_artifacts(self, build_config: BuildConfig, timestamp: str) -> None:
        result = compile_tokens(build_config, timestamp=timestamp)
        assert result.written == [build_config.dist_dir / p for p in EXPECTED_ARTIFACTS]
        for path in result.written:
            assert path.is_file()

    def test_progress_lines(self, build_config: BuildConfig, timestamp: str) -> None:
        lines: list[str] = []
        compile_tokens(build_config, timestamp=timestamp, progress=lines.append)
        assert lines[0].startswith("⚠ Missing character assets")
        assert "✓ Generated native tokens" in lines
        assert "✓ Generated Tailwind tokens" in lines
        assert "✓ Generated CSS custom properties" in lines
        assert "✓ Generated type definitions" in lines
        assert "✓ Generated reference page" in lines
        assert "✅ Token build complete!" in lines
        assert lines[-1] == "📦 Build complete!"

    def test_assets_present(
        self, build_config: BuildConfig, character_assets: Path, timestamp: str
    ) -> None:
        lines: list[str] = []
        result = compile_tokens(build_config, timestamp=timestamp, progress=lines.append)
        assert result.assets.ok
        assert lines[0] == "✓ All character assets present"

    def test_default_timestamp(self, build_config: BuildConfig) -> None:
        result = compile_tokens(build_config)
        css = (build_config.web_dir / "tokens.css").read_text()
        assert f"Generated: {result.timestamp}" in css

    def test_idempotent_except_timestamp(self, build_config: BuildConfig) -> None:
        compile_tokens(build_config, timestamp="2024-01-01T00:00:00+00:00")
        first = {p: (build_config.dist_dir / p).read_text() for p in EXPECTED_ARTIFACTS}
        compile_tokens(build_config, timestamp="2025-06-30T12:00:00+00:00")
        second = {p: (build_config.dist_dir / p).read_text() for p in EXPECTED_ARTIFACTS}

        assert first != second
        for path in EXPECTED_ARTIFACTS:
            assert _without_timestamp(first[path]) == _without_timestamp(second[path]), path

    def test_same_timestamp_byte_identical(self, build_config: BuildConfig, timestamp: str) -> None:
        compile_tokens(build_config, timestamp=timestamp)
        first = {p: (build_config.dist_dir / p).read_bytes() for p in EXPECTED_ARTIFACTS}
        compile_tokens(build_config, timestamp=timestamp)
        for path in EXPECTED_ARTIFACTS:
            assert (build_config.dist_dir / path).read_bytes() == first[path]

    def test_overwrites_previous_output(self, build_config: BuildConfig, timestamp: str) -> None:
        build_config.web_dir.mkdir(parents=True)
        (build_config.web_dir / "tokens.css").write_text("stale")
        compile_tokens(build_config, timestamp=timestamp)
        assert (build_config.web_dir / "tokens.css").read_text() != "stale"

    def test_filesystem_error_propagates(self, tmp_path: Path, timestamp: str) -> None:
        (tmp_path / "dist").write_text("not a directory")
        with pytest.raises(OSError):
            compile_tokens(BuildConfig(project_root=tmp_path), timestamp=timestamp)
