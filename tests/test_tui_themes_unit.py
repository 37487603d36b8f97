#!/usr/bin/env python3
"""Unit tests for tui_themes module."""

from prompt_toolkit.styles import Style

from interface.tui_themes import (
    THEMES,
    DEFAULT_THEME,
    get_theme_palette,
    build_style,
)


class TestThemes:
    """Tests for THEMES constant."""

    def test_themes_has_default_theme(self):
        """Test that DEFAULT_THEME exists in THEMES."""
        assert DEFAULT_THEME in THEMES

    def test_theme_structure(self):
        """Test that each theme styles every class the renderer emits."""
        required_keys = {
            "",
            "text",
            "text.dim",
            "border",
            "selected",
            "selected.done",
            "selected.todo",
            "icon.check",
            "icon.todo",
            "details",
            "popup",
            "popup.cursor",
        }
        for theme_name, theme_dict in THEMES.items():
            missing = required_keys - set(theme_dict.keys())
            assert not missing, f"Theme {theme_name} missing keys: {missing}"


class TestGetThemePalette:
    """Tests for get_theme_palette function."""

    def test_get_theme_palette_returns_copy(self):
        palette1 = get_theme_palette("dark-olive")
        palette2 = get_theme_palette("dark-olive")
        assert palette1 == palette2 == THEMES["dark-olive"]
        assert palette1 is not palette2
        assert palette1 is not THEMES["dark-olive"]

    def test_get_theme_palette_unknown_theme_falls_back(self):
        assert get_theme_palette("non-existent-theme") == THEMES[DEFAULT_THEME]


class TestBuildStyle:
    """Tests for build_style function."""

    def test_build_style_all_themes(self):
        for theme_name in THEMES.keys():
            assert isinstance(build_style(theme_name), Style)

    def test_build_style_unknown_theme_falls_back(self):
        assert isinstance(build_style("non-existent-theme"), Style)
