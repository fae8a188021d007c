"""Unit tests for theme loading."""

from pathlib import Path

import pytest
from pydantic import ValidationError
from rich.theme import Theme
from unbrew.core.theme import ThemeColors, get_rich_theme, load_theme


class TestThemeColors:
    """Tests for ThemeColors validation."""

    def test_defaults_valid(self) -> None:
        """The default palette validates."""
        assert ThemeColors().success.startswith("#")

    def test_short_hex_accepted(self) -> None:
        """#RGB colors are accepted."""
        assert ThemeColors(info="#abc").info == "#abc"

    @pytest.mark.parametrize("value", ["red", "#12", "#gggggg", 5])
    def test_invalid_colors_rejected(self, value: object) -> None:
        """Non-hex colors are rejected."""
        with pytest.raises(ValidationError):
            ThemeColors(info=value)  # type: ignore[arg-type]

    def test_unknown_color_rejected(self) -> None:
        """Unknown color names are rejected."""
        with pytest.raises(ValidationError):
            ThemeColors(sparkle="#ffffff")  # type: ignore[call-arg]


class TestLoadTheme:
    """Tests for load_theme."""

    def test_missing_file_uses_defaults(self, tmp_path: Path) -> None:
        """No user file means the built-in palette."""
        assert load_theme(tmp_path / "theme.toml") == ThemeColors()

    def test_user_override_merged(self, tmp_path: Path) -> None:
        """User colors override individual defaults."""
        path = tmp_path / "theme.toml"
        path.write_text('[colors]\nwarning = "#123456"\n')

        colors = load_theme(path)

        assert colors.warning == "#123456"
        assert colors.error == ThemeColors().error

    def test_invalid_toml_uses_defaults(self, tmp_path: Path) -> None:
        """A broken TOML file falls back to defaults."""
        path = tmp_path / "theme.toml"
        path.write_text("[colors\n")

        assert load_theme(path) == ThemeColors()

    def test_invalid_color_uses_defaults(self, tmp_path: Path) -> None:
        """An invalid color falls back to defaults."""
        path = tmp_path / "theme.toml"
        path.write_text('[colors]\nwarning = "yellow"\n')

        assert load_theme(path) == ThemeColors()


class TestGetRichTheme:
    """Tests for get_rich_theme."""

    def test_styles_defined(self) -> None:
        """The styles used by the CLI exist in the Rich theme."""
        theme = get_rich_theme(ThemeColors())

        assert isinstance(theme, Theme)
        for name in ("success", "warning", "error", "info", "path", "bold_header", "dim"):
            assert name in theme.styles
