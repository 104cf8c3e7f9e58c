"""Tests for the palette and environment settings."""

import json
from pathlib import Path

import pytest

from aurora_term.config import Settings
from aurora_term.core.palette import DEFAULT_COLORS, Palette, active_palette, load_palette
from aurora_term.errors import AuroraTermError, PaletteConfigError


class TestBuiltinPalette:
    """Tests for the built-in palette."""

    def test_has_every_default(self, palette: Palette) -> None:
        for name in DEFAULT_COLORS:
            assert palette[name].name == name
        assert len(palette.colors) == 17
        assert len(palette.gradients) == 6
        assert len(palette) == 23

    def test_inverted_entries(self, palette: Palette) -> None:
        inverted = {name for name, color in palette.colors.items() if color.inverted}
        assert inverted == {"critical", "alert", "emergency"}

    def test_default_is_no_color(self, palette: Palette) -> None:
        assert palette.default.name == "no_color"
        assert palette.get_color("does_not_exist") == palette.default

    def test_lookup_normalizes_name(self, palette: Palette) -> None:
        assert palette.get_color(" Primary ").name == "primary"
        assert palette.find("nope") is None

    def test_gradient_stops_in_order(self, palette: Palette) -> None:
        stops = palette.gradient_stops()
        assert [c.name for c in stops] == [f"gradient_{i}" for i in range(1, 7)]
        assert stops[0].hex == "#FF8000"

    def test_read_only(self, palette: Palette) -> None:
        with pytest.raises(TypeError):
            palette.colors["primary"] = palette.default  # type: ignore[index]

    def test_always_has_no_color(self) -> None:
        assert Palette({}).default.name == "no_color"


class TestPaletteConfig:
    """Tests for building palettes from configuration."""

    def test_merges_over_defaults(self) -> None:
        palette = Palette.from_config({
            "colors": {"primary": {"hex": "#123456"}, "Brand": "#abcdef"},
            "gradients": {"gradient_1": {"hex": "#000000"}},
        })
        assert palette["primary"].hex == "#123456"
        assert palette["brand"].hex == "#ABCDEF"
        assert palette["error"].hex == "#FF5B5B"
        assert palette["gradient_1"].hex == "#000000"
        assert palette["gradient_2"].hex == "#FF9429"

    def test_inverted_flag(self) -> None:
        palette = Palette.from_config({"colors": {"primary": {"hex": "#123456", "inverted": True}}})
        assert palette["primary"].inverted is True

    @pytest.mark.parametrize("config", [
        [],
        {"colors": []},
        {"colors": {"primary": {"hex": "blue"}}},
        {"colors": {"primary": 42}},
        {"colors": {"primary": {"hex": "#123456", "inverted": "yes"}}},
    ])
    def test_malformed_config_raises(self, config: object) -> None:
        with pytest.raises(PaletteConfigError):
            Palette.from_config(config)  # type: ignore[arg-type]

    def test_error_hierarchy(self) -> None:
        assert issubclass(PaletteConfigError, AuroraTermError)


class TestLoadPalette:
    """Tests for loading palettes from files."""

    def test_load(self, tmp_path: Path) -> None:
        path = tmp_path / "palette.json"
        path.write_text(json.dumps({"colors": {"info": {"hex": "#010203"}}}))
        assert load_palette(path)["info"].hex == "#010203"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(PaletteConfigError):
            load_palette(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "palette.json"
        path.write_text("{not json")
        with pytest.raises(PaletteConfigError):
            load_palette(path)

    def test_active_palette_from_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        path = tmp_path / "palette.json"
        path.write_text(json.dumps({"colors": {"primary": "#111111"}}))
        monkeypatch.setenv("AURORA_TERM_PALETTE", str(path))
        active_palette.cache_clear()
        assert active_palette()["primary"].hex == "#111111"

    def test_active_palette_is_cached(self) -> None:
        assert active_palette() is active_palette()
        assert active_palette()["primary"].hex == "#A1E7FA"


class TestSettings:
    """Tests for Settings.from_env."""

    def test_defaults(self) -> None:
        settings = Settings.from_env()
        assert settings == Settings()
        assert settings.fallback_width == 80
        assert settings.log_level == "WARNING"
        assert settings.palette_path is None

    def test_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("AURORA_TERM_PALETTE", "/tmp/palette.json")
        monkeypatch.setenv("AURORA_TERM_LOG_LEVEL", "debug")
        monkeypatch.setenv("AURORA_TERM_WIDTH", "120")
        settings = Settings.from_env()
        assert settings.palette_path == Path("/tmp/palette.json")
        assert settings.log_level == "DEBUG"
        assert settings.fallback_width == 120

    @pytest.mark.parametrize("value", ["wide", "-5", "0", ""])
    def test_bad_width_ignored(self, monkeypatch: pytest.MonkeyPatch, value: str) -> None:
        monkeypatch.setenv("AURORA_TERM_WIDTH", value)
        assert Settings.from_env().fallback_width == 80
