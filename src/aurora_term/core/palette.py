"""Named color palette shared by the whole process."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator, Mapping
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Optional, Union

from aurora_term.config import Settings
from aurora_term.core.color import Color, is_valid_hex, normalize_hex
from aurora_term.core.constants import NO_COLOR
from aurora_term.errors import PaletteConfigError

logger = logging.getLogger(__name__)

# Built-in colors: name -> (hex, inverted)
DEFAULT_COLORS: dict[str, tuple[str, bool]] = {
    "no_color": ("#F8F8F2", False),
    "debug": ("#B0B0B0", False),
    "primary": ("#A1E7FA", False),
    "secondary": ("#3AABA3", False),
    "ternary": ("#FF8000", False),
    "quaternary": ("#9B42E2", False),
    "success": ("#97C53C", False),
    "warning": ("#FFCC00", False),
    "error": ("#FF5B5B", False),
    "info": ("#00FFFF", False),
    "happy": ("#EE80C3", False),
    "background": ("#32302F", False),
    "menu": ("#ABCDF1", False),
    "notice": ("#5FD7FF", False),
    "critical": ("#FBFF00", True),
    "alert": ("#FBFF00", True),
    "emergency": ("#FF0000", True),
}

# Built-in gradient stops, light orange ramp
DEFAULT_GRADIENTS: dict[str, tuple[str, bool]] = {
    "gradient_1": ("#FF8000", False),
    "gradient_2": ("#FF9429", False),
    "gradient_3": ("#FFA952", False),
    "gradient_4": ("#FFBD7A", False),
    "gradient_5": ("#FFD2A3", False),
    "gradient_6": ("#FFE6CC", False),
}


def _build(entries: Mapping[str, tuple[str, bool]]) -> dict[str, Color]:
    return {
        name: Color.from_hex(hex_str, name=name, inverted=inverted)
        for name, (hex_str, inverted) in entries.items()
    }


def _parse_entry(name: str, entry: Any) -> tuple[str, bool]:
    """Decode one config entry: '#RRGGBB' or {"hex": ..., "inverted": ...}."""
    if isinstance(entry, str):
        hex_str, inverted = entry, False
    elif isinstance(entry, Mapping):
        hex_str = entry.get("hex")
        inverted = entry.get("inverted", False)
    else:
        raise PaletteConfigError(f"Palette entry {name!r} must be a hex string or an object")

    if not is_valid_hex(hex_str):
        raise PaletteConfigError(f"Palette entry {name!r} has invalid hex {hex_str!r}")
    if not isinstance(inverted, bool):
        raise PaletteConfigError(f"Palette entry {name!r} has non-boolean 'inverted'")
    return normalize_hex(hex_str), inverted


def _parse_section(config: Mapping[str, Any], key: str) -> dict[str, tuple[str, bool]]:
    section = config.get(key, {})
    if not isinstance(section, Mapping):
        raise PaletteConfigError(f"Palette section {key!r} must be an object")
    return {
        str(name).strip().lower(): _parse_entry(str(name), entry)
        for name, entry in section.items()
    }


class Palette(Mapping[str, Color]):
    """
    Read-only mapping of color names to Colors.

    Holds the base colors and the gradient stops. Lookups through
    get_color() never fail: unknown names resolve to 'no_color'.
    """

    def __init__(
        self,
        colors: Mapping[str, Color],
        gradients: Optional[Mapping[str, Color]] = None,
    ):
        base = dict(colors)
        if NO_COLOR not in base:
            base[NO_COLOR] = _build({NO_COLOR: DEFAULT_COLORS[NO_COLOR]})[NO_COLOR]
        self._colors = MappingProxyType(base)
        self._gradients = MappingProxyType(dict(gradients or {}))
        self._all = MappingProxyType({**self._gradients, **self._colors})

    @classmethod
    def builtin(cls) -> "Palette":
        """Palette with the built-in colors and gradient stops."""
        return cls(_build(DEFAULT_COLORS), _build(DEFAULT_GRADIENTS))

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> "Palette":
        """
        Build a palette from decoded configuration.

        Expected shape::

            {"colors": {"primary": {"hex": "#A1E7FA"}, ...},
             "gradients": {"gradient_1": "#FF8000", ...}}

        Entries are merged over the built-in defaults.

        Raises:
            PaletteConfigError: If the config or an entry is malformed
        """
        if not isinstance(config, Mapping):
            raise PaletteConfigError("Palette config must be an object")
        colors = {**DEFAULT_COLORS, **_parse_section(config, "colors")}
        gradients = {**DEFAULT_GRADIENTS, **_parse_section(config, "gradients")}
        return cls(_build(colors), _build(gradients))

    def __getitem__(self, name: str) -> Color:
        return self._all[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._all)

    def __len__(self) -> int:
        return len(self._all)

    @property
    def colors(self) -> Mapping[str, Color]:
        """Base colors (without gradient stops)."""
        return self._colors

    @property
    def gradients(self) -> Mapping[str, Color]:
        """Gradient stops keyed by name."""
        return self._gradients

    @property
    def default(self) -> Color:
        """The universal fallback color."""
        return self._colors[NO_COLOR]

    def find(self, name: str) -> Optional[Color]:
        """Look up a color by name, or None if absent."""
        return self._all.get(name.strip().lower())

    def get_color(self, name: str) -> Color:
        """Look up a color by name, falling back to 'no_color'."""
        color = self.find(name)
        if color is None:
            logger.debug("Unknown color name %r, using %s", name, NO_COLOR)
            return self.default
        return color

    def gradient_stops(self) -> list[Color]:
        """Gradient stops in name order."""
        return [self._gradients[name] for name in sorted(self._gradients)]


def load_palette(path: Union[str, Path]) -> Palette:
    """
    Load a palette from a JSON file.

    Raises:
        PaletteConfigError: If the file cannot be read or decoded
    """
    path = Path(path)
    try:
        config = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise PaletteConfigError(f"Cannot read palette file {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise PaletteConfigError(f"Palette file {path} is not valid JSON: {e}") from e
    logger.debug("Loaded palette from %s", path)
    return Palette.from_config(config)


@lru_cache(maxsize=1)
def active_palette() -> Palette:
    """
    The process-wide palette, built once on first use.

    Uses the file named by AURORA_TERM_PALETTE when set, otherwise the
    built-in palette.
    """
    settings = Settings.from_env()
    if settings.palette_path is not None:
        return load_palette(settings.palette_path)
    return Palette.builtin()
