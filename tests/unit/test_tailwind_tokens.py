"""Tests for the Tailwind config extension and JS re-export modules."""

from __future__ import annotations

import json

from torico_tokens.build.native import (
    render_native_declaration,
    render_native_module,
    render_token_module,
    render_type_declarations,
)
from torico_tokens.build.tailwind import (
    build_tailwind_tokens,
    render_tailwind_module,
    render_web_index,
)
from torico_tokens.tokens.web import WEB_COLORS


class TestBuildTailwindTokens:
    def test_sections(self) -> None:
        tokens = build_tailwind_tokens()
        assert list(tokens) == ["colors", "spacing", "fontSize", "borderRadius", "boxShadow"]

    def test_colors(self) -> None:
        assert build_tailwind_tokens()["colors"] == dict(WEB_COLORS)

    def test_font_size_pairs(self) -> None:
        font_size = build_tailwind_tokens()["fontSize"]
        assert font_size["base"] == ["16px", {"lineHeight": "24px"}]
        assert font_size["6xl"] == ["48px", {"lineHeight": "56px"}]

    def test_radius_and_shadow(self) -> None:
        tokens = build_tailwind_tokens()
        assert tokens["borderRadius"]["none"] == "0"
        assert tokens["borderRadius"]["full"] == "9999px"
        assert tokens["boxShadow"]["none"] == "none"

    def test_json_serializable(self) -> None:
        json.dumps(build_tailwind_tokens())


class TestRenderTailwindModule:
    def test_exports(self, timestamp: str) -> None:
        module = render_tailwind_module(timestamp)
        assert "export const toricoTokens = {" in module
        assert module.rstrip().endswith("export default toricoTokens;")

    def test_embedded_values(self, timestamp: str) -> None:
        module = render_tailwind_module(timestamp)
        assert '"brand-primary": "#FFFFFF"' in module
        assert '"0.5": "2px"' in module
        assert "  fontSize: {" in module

    def test_usage_banner(self, timestamp: str) -> None:
        module = render_tailwind_module(timestamp)
        assert " * TORICO Design System - Tailwind Config Extension" in module
        assert f" * Generated: {timestamp}" in module
        assert "import { toricoTokens } from '@torico/design-system/tailwind';" in module

    def test_web_index(self) -> None:
        assert render_web_index() == "export * from './tailwind.tokens.js';"


class TestNativeModules:
    def test_native_module_reexports(self, timestamp: str) -> None:
        module = render_native_module(timestamp)
        assert "export * from '../tokens/index';" in module
        assert "React Native Tokens" in module

    def test_native_declaration(self) -> None:
        assert render_native_declaration() == "export * from '../tokens/index';"

    def test_type_declarations(self, timestamp: str) -> None:
        stub = render_type_declarations(timestamp)
        assert "Type Definitions" in stub
        assert stub.rstrip().endswith("export * from '../tokens/index';")

    def test_token_module(self, timestamp: str) -> None:
        module = render_token_module(timestamp)
        assert "export const neutral = {" in module
        assert "export const darkTheme = {" in module
        assert 'export const defaultThemeName = "dark";' in module
        assert "export default {\n  neutral,\n" in module
