"""
Unit tests for light/dark themes and semantic token resolution.
"""

import pytest
from pydantic import ValidationError

from torico_tokens.errors import TokenResolutionError, UnknownThemeError
from torico_tokens.specs import Theme, ThemeName, is_concrete_color
from torico_tokens.tokens.themes import (
    DARK_THEME,
    DEFAULT_THEME,
    DEFAULT_THEME_NAME,
    LIGHT_THEME,
    get_theme,
    list_themes,
    resolve_token,
    semantic_keys,
)


class TestThemeRegistry:
    """Tests for theme lookup."""

    def test_list_themes(self):
        """Test both themes are registered."""
        assert list_themes() == ["light", "dark"]

    def test_default_theme_is_dark(self):
        """Test the default theme is dark."""
        assert DEFAULT_THEME_NAME == "dark"
        assert DEFAULT_THEME is DARK_THEME
        assert get_theme() is DARK_THEME

    def test_get_theme_by_name(self):
        """Test getting themes by name and enum."""
        assert get_theme("light") is LIGHT_THEME
        assert get_theme(ThemeName.DARK) is DARK_THEME

    def test_get_theme_unknown(self):
        """Test unknown theme names raise."""
        with pytest.raises(UnknownThemeError) as exc_info:
            get_theme("sepia")
        assert exc_info.value.name == "sepia"
        assert "light, dark" in str(exc_info.value)


class TestThemeCompleteness:
    """Tests that both themes define the same semantic keys."""

    def test_same_keys_in_both_themes(self):
        """Test every dark key exists in light and vice versa."""
        assert semantic_keys(DARK_THEME) == semantic_keys(LIGHT_THEME)

    @pytest.mark.parametrize("theme", [LIGHT_THEME, DARK_THEME], ids=["light", "dark"])
    def test_all_values_concrete(self, theme):
        """Test every semantic value is a literal color."""
        for path, value in theme.flatten().items():
            assert is_concrete_color(value), path

    def test_flatten_paths(self):
        """Test flattened paths use published names."""
        flat = DARK_THEME.flatten()
        assert flat["background.cardSolid"] == "#1A1A1A"
        assert flat["feedback.info.border"] == "#3B82F6"
        assert flat["drawer.green"] == "#4FD1C5"

    def test_missing_group_rejected(self):
        """Test a theme without a group fails at construction."""
        data = LIGHT_THEME.model_dump()
        del data["drawer"]
        with pytest.raises(ValidationError):
            Theme(**data)

    def test_missing_key_rejected(self):
        """Test a theme group without a key fails at construction."""
        data = LIGHT_THEME.model_dump()
        del data["text"]["warning"]
        with pytest.raises(ValidationError):
            Theme(**data)

    def test_extra_key_rejected(self):
        """Test a key not in the shared schema fails at construction."""
        data = DARK_THEME.model_dump()
        data["text"]["muted"] = "#000000"
        with pytest.raises(ValidationError):
            Theme(**data)

    def test_unresolved_alias_rejected(self):
        """Test a value referencing another token fails at construction."""
        data = DARK_THEME.model_dump()
        data["text"]["error"] = "{feedback.error.base}"
        with pytest.raises(ValidationError):
            Theme(**data)

    def test_round_trip_construction(self):
        """Test a complete dump constructs an equal theme."""
        assert Theme(**LIGHT_THEME.model_dump()) == LIGHT_THEME


class TestResolveToken:
    """Tests for semantic token resolution."""

    def test_default_theme_used(self):
        """Test resolution falls back to the default theme."""
        assert resolve_token("text.error") == "#EF4444"
        assert resolve_token("background.primary") == "#000000"

    def test_light_theme(self):
        """Test resolution against the light theme."""
        assert resolve_token("text.error", "light") == "#B91C1C"
        assert resolve_token("background.primary", "light") == "#FFFFFF"

    def test_theme_instance(self):
        """Test a Theme instance may be passed directly."""
        assert resolve_token("interactive.primary", LIGHT_THEME) == "#141414"

    def test_snake_case_segments(self):
        """Test snake_case path segments resolve like camelCase."""
        assert resolve_token("background.card_solid", "light") == "#FFFFFF"
        assert resolve_token("icon.onLight") == resolve_token("icon.on_light")

    def test_nested_feedback(self):
        """Test three-level feedback paths."""
        assert resolve_token("feedback.warning.foreground") == "#A16207"

    def test_group_path_rejected(self):
        """Test a path naming a group raises."""
        with pytest.raises(TokenResolutionError, match="group"):
            resolve_token("feedback.error")

    def test_unknown_path_rejected(self):
        """Test an unknown path raises."""
        with pytest.raises(TokenResolutionError) as exc_info:
            resolve_token("surface.primary", "light")
        assert exc_info.value.theme == "light"

    def test_unknown_theme(self):
        """Test resolving in an unknown theme raises."""
        with pytest.raises(UnknownThemeError):
            resolve_token("text.primary", "high-contrast")
