"""Unit tests for theme discovery, customization, and the ThemeRegistry."""

from pathlib import Path

import pytest
from loguru import logger

from cvcraft.contexts.theming import (
    InvalidColorError,
    ThemeCustomization,
    ThemeNotFoundError,
    ThemeRegistry,
    apply_customization,
    discover_themes,
)
from cvcraft.contexts.theming.css_patterns import (
    extract_variable,
    replace_variable,
    theme_name_from_filename,
)

BUNDLED_THEMES = Path(__file__).parents[2] / "themes"

CUSTOMIZABLE_CSS = """:root {
    --theme-primary: #3B82F6;
    --theme-primary-dark: #1e40af;
    --theme-primary-light: #93c5fd;
    --theme-secondary: #64748b;
    --theme-accent: var(--brand);
}

h1 {
    color: var(--theme-primary);
}
"""

STATIC_CSS = "body {\n    color: #333;\n}\n"


@pytest.fixture
def themes_dir(tmp_path):
    """Themes directory with one customizable theme, one static theme, and noise."""
    directory = tmp_path / "themes"
    directory.mkdir()
    (directory / "theme-custom.css").write_text(CUSTOMIZABLE_CSS)
    (directory / "theme-test-static.css").write_text(STATIC_CSS)
    (directory / "not-a-theme.css").write_text(STATIC_CSS)
    (directory / "theme-.css").write_text(STATIC_CSS)
    (directory / "theme-notes.txt").write_text("not css")
    (directory / "theme-nested.css").mkdir()
    return directory


@pytest.mark.unit
class TestCSSPatterns:
    """Test theme file naming and variable anchors."""

    @pytest.mark.parametrize(
        "filename, expected",
        [
            ("theme-modern.css", "modern"),
            ("theme-test-static.css", "test-static"),
            ("theme-.css", None),
            ("modern.css", None),
            ("theme-modern.scss", None),
        ],
    )
    def test_theme_name_from_filename(self, filename, expected):
        assert theme_name_from_filename(filename) == expected

    def test_extract_ignores_longer_names(self):
        css = "--theme-primary-dark: #000000;\n--theme-primary: #111111;"
        assert extract_variable(css, "primary") == "#111111"
        assert extract_variable(css, "primary-dark") == "#000000"

    def test_extract_ignores_var_references(self):
        assert extract_variable("color: var(--theme-primary);", "primary") is None

    def test_replace_first_declaration_only(self):
        css = "--theme-accent: #111111;\n--theme-accent: #222222;"
        result = replace_variable(css, "accent", "#ffffff")
        assert result == "--theme-accent: #ffffff;\n--theme-accent: #222222;"

    def test_replace_normalizes_spacing(self):
        assert replace_variable("--theme-accent:#111 ;", "accent", "#ffffff") == "--theme-accent: #ffffff;"


@pytest.mark.unit
class TestDiscovery:
    """Test discover_themes() and theme descriptors."""

    def test_only_theme_files_discovered(self, themes_dir):
        names = sorted(descriptor.name for descriptor in discover_themes(themes_dir))
        assert names == ["custom", "test-static"]

    def test_missing_directory(self, tmp_path):
        assert discover_themes(tmp_path / "missing") == frozenset()

    def test_display_name(self, themes_dir):
        registry = ThemeRegistry(themes_dir)
        assert registry.get_theme_info("test-static").display_name == "Test Static"
        assert registry.get_theme_info("custom").display_name == "Custom"

    def test_customizable_theme_colors(self, themes_dir):
        info = ThemeRegistry(themes_dir).get_theme_info("custom")
        assert info.customizable is True
        assert info.primary_color == "#3b82f6"
        assert info.secondary_color == "#64748b"
        # var() references are not hex colors
        assert info.accent_color is None

    def test_static_theme(self, themes_dir):
        info = ThemeRegistry(themes_dir).get_theme_info("test-static")
        assert info.customizable is False
        assert info.primary_color is None

    def test_var_reference_alone_is_not_customizable(self, tmp_path):
        (tmp_path / "theme-ref.css").write_text("h1 { color: var(--theme-primary); }")
        info = ThemeRegistry(tmp_path).get_theme_info("ref")
        assert info.customizable is False

    def test_unreadable_theme_is_not_customizable(self, tmp_path):
        (tmp_path / "theme-bad.css").write_bytes(b"\xff\xfe:root { --theme-primary: #000000; }")
        (tmp_path / "theme-good.css").write_text(":root { --theme-primary: #112233; }")
        messages = []
        handler_id = logger.add(messages.append, level="WARNING", format="{message}")
        try:
            registry = ThemeRegistry(tmp_path)
        finally:
            logger.remove(handler_id)

        bad = registry.get_theme_info("bad")
        assert bad.customizable is False
        assert (bad.primary_color, bad.secondary_color, bad.accent_color) == (None, None, None)
        assert registry.get_theme_info("good").primary_color == "#112233"
        assert any("Could not read theme 'bad'" in message for message in messages)


@pytest.mark.unit
class TestThemeCustomization:
    """Test construction-time color validation."""

    def test_normalizes_colors(self):
        customization = ThemeCustomization(primary_color="#ABC", accent_color="FF0000")
        assert customization.primary_color == "#aabbcc"
        assert customization.accent_color == "#ff0000"
        assert customization.secondary_color is None

    def test_empty_strings_are_absent(self):
        customization = ThemeCustomization(primary_color="", secondary_color=None)
        assert customization.primary_color is None
        assert customization.is_empty

    def test_invalid_color_rejected(self):
        with pytest.raises(InvalidColorError):
            ThemeCustomization(primary_color="red")


@pytest.mark.unit
class TestApplyCustomization:
    """Test declaration rewriting."""

    def test_primary_rewrites_derived_shades(self):
        css = apply_customization(CUSTOMIZABLE_CSS, ThemeCustomization(primary_color="#ff0000"))
        assert "--theme-primary: #ff0000;" in css
        assert "--theme-primary-dark: #cc0000;" in css
        assert "--theme-primary-light: #ff3333;" in css
        # References are never rewritten
        assert "color: var(--theme-primary);" in css

    def test_secondary_only(self):
        css = apply_customization(CUSTOMIZABLE_CSS, ThemeCustomization(secondary_color="#111111"))
        assert "--theme-secondary: #111111;" in css
        assert "--theme-primary: #3B82F6;" in css
        assert "--theme-primary-dark: #1e40af;" in css

    def test_accent_replaces_non_hex_value(self):
        css = apply_customization(CUSTOMIZABLE_CSS, ThemeCustomization(accent_color="#00ff00"))
        assert "--theme-accent: #00ff00;" in css
        assert "var(--brand)" not in css


@pytest.mark.unit
class TestThemeRegistry:
    """Test ThemeRegistry lookups and style source."""

    def test_available_themes_sorted(self, themes_dir):
        assert ThemeRegistry(themes_dir).available_themes() == ["custom", "test-static"]

    def test_missing_directory_is_empty(self, tmp_path):
        registry = ThemeRegistry(tmp_path / "missing")
        assert registry.available_themes() == []
        assert registry.has_theme("modern") is False

    def test_unknown_theme_info_is_none(self, themes_dir):
        assert ThemeRegistry(themes_dir).get_theme_info("nope") is None

    def test_theme_not_found_error(self, themes_dir):
        registry = ThemeRegistry(themes_dir)
        with pytest.raises(ThemeNotFoundError) as exc_info:
            registry.get_style_source("nope")

        error = exc_info.value
        assert isinstance(error, KeyError)
        assert error.name == "nope"
        assert str(error) == "Theme 'nope' not found. Available themes: custom, test-static"

    def test_static_theme_byte_identical(self, themes_dir):
        registry = ThemeRegistry(themes_dir)
        customization = ThemeCustomization(primary_color="#ff0000")
        assert registry.get_style_source("test-static", customization) == STATIC_CSS

    def test_crlf_preserved(self, tmp_path):
        (tmp_path / "theme-crlf.css").write_bytes(b"body {}\r\n")
        assert ThemeRegistry(tmp_path).get_style_source("crlf") == "body {}\r\n"

    @pytest.mark.parametrize("customization", [None, ThemeCustomization()])
    def test_no_customization_byte_identical(self, themes_dir, customization):
        registry = ThemeRegistry(themes_dir)
        assert registry.get_style_source("custom", customization) == CUSTOMIZABLE_CSS

    def test_customized_style_source(self, themes_dir):
        registry = ThemeRegistry(themes_dir)
        css = registry.get_style_source("custom", ThemeCustomization(primary_color="#ff0000"))
        assert "--theme-primary: #ff0000;" in css
        assert "--theme-primary-dark: #cc0000;" in css

    def test_refresh_swaps_snapshot(self, themes_dir):
        registry = ThemeRegistry(themes_dir)
        old_snapshot = registry.snapshot

        (themes_dir / "theme-new.css").write_text(STATIC_CSS)
        assert registry.has_theme("new") is False

        new_snapshot = registry.refresh()
        assert registry.has_theme("new") is True
        assert registry.snapshot is new_snapshot
        assert old_snapshot.names() == ["custom", "test-static"]

    def test_refresh_drops_removed_theme(self, themes_dir):
        registry = ThemeRegistry(themes_dir)
        (themes_dir / "theme-custom.css").unlink()
        registry.refresh()
        assert registry.available_themes() == ["test-static"]

    def test_snapshot_is_read_only(self, themes_dir):
        snapshot = ThemeRegistry(themes_dir).snapshot
        with pytest.raises(TypeError):
            snapshot.themes["other"] = None

    def test_themes_path_from_settings(self, themes_dir, monkeypatch):
        from cvcraft.utils.settings import reload_settings

        monkeypatch.setenv("CVCRAFT_THEMES_PATH", str(themes_dir))
        reload_settings()
        try:
            assert ThemeRegistry().available_themes() == ["custom", "test-static"]
        finally:
            monkeypatch.undo()
            reload_settings()


@pytest.mark.unit
class TestBundledThemes:
    """Test the themes shipped in the repository."""

    def test_bundled_names(self):
        registry = ThemeRegistry(BUNDLED_THEMES)
        assert registry.available_themes() == ["ats", "classic", "minimal", "modern"]

    def test_modern_is_customizable(self):
        info = ThemeRegistry(BUNDLED_THEMES).get_theme_info("modern")
        assert info.customizable is True
        assert info.primary_color == "#3b82f6"

    def test_ats_is_static(self):
        assert ThemeRegistry(BUNDLED_THEMES).get_theme_info("ats").customizable is False
