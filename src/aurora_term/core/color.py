"""Color representation and conversions for terminal text."""

from __future__ import annotations

import colorsys
import logging
import re
from dataclasses import dataclass, replace
from enum import Enum
from typing import TYPE_CHECKING, Any, Optional

from aurora_term.core.constants import CSI, RESET, REVERSE_VIDEO

if TYPE_CHECKING:
    from aurora_term.core.palette import Palette

logger = logging.getLogger(__name__)

RGB = tuple[int, int, int]
ARGB = tuple[int, int, int, int]
HSV = tuple[float, float, float]
HSL = tuple[float, float, float]
CMYK = tuple[float, float, float, float]

_HEX_PATTERN = re.compile(r'^#[0-9A-Fa-f]{6}$')

# One lightness tone is 1/12 of the HSL lightness range
TONE_STEP = 1 / 12


# ---------------------------------------------------------------------------
# Channel helpers
# ---------------------------------------------------------------------------

def _clamp_channel(value: float) -> int:
    """Clamp a channel to 0-255."""
    return max(0, min(255, int(value)))


def _to_channel(fraction: float) -> int:
    """Scale a 0-1 fraction to a 0-255 channel, rounding half up."""
    return _clamp_channel(fraction * 255 + 0.5)


def _unit(value: float) -> float:
    return max(0.0, min(1.0, float(value)))


def _degrees(hue_fraction: float) -> float:
    """Hue in degrees from a 0-1 colorsys hue."""
    return round(hue_fraction * 360, 1) % 360.0


def _normalize_hue_triple(values: tuple[float, float, float]) -> tuple[float, float, float]:
    """Wrap the hue into [0, 360) and clamp the other two components to 0-1."""
    hue, first, second = values
    return (float(hue) % 360.0, _unit(first), _unit(second))


# ---------------------------------------------------------------------------
# Hex
# ---------------------------------------------------------------------------

def normalize_hex(hex_str: str) -> str:
    """Normalize a hex string to '#RRGGBB' uppercase (no validation)."""
    return "#" + hex_str.strip().removeprefix("#").upper()


def is_valid_hex(value: Any) -> bool:
    """True if value is a '#RRGGBB' string (case-insensitive)."""
    return isinstance(value, str) and bool(_HEX_PATTERN.match(value.strip()))


def hex_to_rgb(hex_str: str) -> RGB:
    """
    Parse '#RRGGBB' into an RGB tuple.

    Malformed input yields (0, 0, 0).
    """
    if not is_valid_hex(hex_str):
        return (0, 0, 0)
    digits = hex_str.strip()[1:]
    return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def rgb_to_hex(rgb: RGB) -> str:
    """Render an RGB tuple as '#RRGGBB'."""
    r, g, b = (_clamp_channel(c) for c in rgb)
    return f"#{r:02X}{g:02X}{b:02X}"


# ---------------------------------------------------------------------------
# HSV / HSL / CMYK / ARGB
# ---------------------------------------------------------------------------

def rgb_to_hsv(rgb: RGB) -> HSV:
    """Convert RGB to (hue, saturation, value)."""
    hue, saturation, value = colorsys.rgb_to_hsv(*(c / 255 for c in rgb))
    return (_degrees(hue), round(saturation, 3), round(value, 3))


def hsv_to_rgb(hsv: HSV) -> RGB:
    """Convert (hue, saturation, value) to RGB."""
    hue, saturation, value = hsv
    r, g, b = colorsys.hsv_to_rgb((float(hue) % 360.0) / 360, _unit(saturation), _unit(value))
    return (_to_channel(r), _to_channel(g), _to_channel(b))


def rgb_to_hsl(rgb: RGB) -> HSL:
    """Convert RGB to (hue, saturation, lightness)."""
    hue, lightness, saturation = colorsys.rgb_to_hls(*(c / 255 for c in rgb))
    return (_degrees(hue), round(saturation, 3), round(lightness, 3))


def hsl_to_rgb(hsl: HSL) -> RGB:
    """Convert (hue, saturation, lightness) to RGB."""
    hue, saturation, lightness = hsl
    r, g, b = colorsys.hls_to_rgb((float(hue) % 360.0) / 360, _unit(lightness), _unit(saturation))
    return (_to_channel(r), _to_channel(g), _to_channel(b))


def rgb_to_cmyk(rgb: RGB) -> CMYK:
    """Convert RGB to (cyan, magenta, yellow, key). Pure black is (0, 0, 0, 1)."""
    if tuple(rgb) == (0, 0, 0):
        return (0.0, 0.0, 0.0, 1.0)
    r, g, b = (c / 255 for c in rgb)
    key = 1 - max(r, g, b)
    c, m, y = ((1 - channel - key) / (1 - key) for channel in (r, g, b))
    return (round(c, 3), round(m, 3), round(y, 3), round(key, 3))


def cmyk_to_rgb(cmyk: CMYK) -> RGB:
    """Convert (cyan, magenta, yellow, key) to RGB."""
    c, m, y, k = (_unit(v) for v in cmyk)
    return (
        _to_channel((1 - c) * (1 - k)),
        _to_channel((1 - m) * (1 - k)),
        _to_channel((1 - y) * (1 - k)),
    )


def rgb_to_argb(rgb: RGB, alpha: int = 255) -> ARGB:
    """Prefix an alpha channel."""
    r, g, b = rgb
    return (_clamp_channel(alpha), r, g, b)


def argb_to_rgb(argb: ARGB) -> RGB:
    """Drop the alpha channel."""
    _, r, g, b = argb
    return (r, g, b)


def rgb_to_ansi256(rgb: RGB) -> int:
    """Map RGB onto the 6x6x6 cube of the 256-color palette (16-231)."""
    r6, g6, b6 = (min(5, max(0, c * 6 // 256)) for c in rgb)
    return 16 + r6 * 36 + g6 * 6 + b6


def lighten_rgb(rgb: RGB, amount: int) -> RGB:
    """Add amount to every channel, clamped at 255."""
    r, g, b = rgb
    return (min(r + amount, 255), min(g + amount, 255), min(b + amount, 255))


def darken_rgb(rgb: RGB, amount: int) -> RGB:
    """Subtract amount from every channel, clamped at 0."""
    r, g, b = rgb
    return (max(r - amount, 0), max(g - amount, 0), max(b - amount, 0))


# ---------------------------------------------------------------------------
# Color value
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Color:
    """
    A 24-bit color kept in every supported format at once.

    Instances are immutable: lighten/darken and the with_* helpers
    return new colors with every representation recomputed.
    """
    hex: str
    rgb: RGB
    argb: ARGB
    hsv: HSV
    hsl: HSL
    cmyk: CMYK
    name: Optional[str] = None
    inverted: bool = False

    @classmethod
    def from_rgb(
        cls,
        rgb: RGB,
        *,
        name: Optional[str] = None,
        inverted: bool = False,
        alpha: int = 255,
    ) -> "Color":
        """Create a Color from an RGB tuple (channels are clamped to 0-255)."""
        rgb = tuple(_clamp_channel(c) for c in rgb)
        return cls(
            hex=rgb_to_hex(rgb),
            rgb=rgb,
            argb=rgb_to_argb(rgb, alpha),
            hsv=rgb_to_hsv(rgb),
            hsl=rgb_to_hsl(rgb),
            cmyk=rgb_to_cmyk(rgb),
            name=name,
            inverted=inverted,
        )

    @classmethod
    def from_hex(
        cls,
        hex_str: str,
        *,
        name: Optional[str] = None,
        inverted: bool = False,
    ) -> "Color":
        """Create a Color from '#RRGGBB' (malformed input gives black)."""
        return cls.from_rgb(hex_to_rgb(hex_str), name=name, inverted=inverted)

    @classmethod
    def from_argb(cls, argb: ARGB, *, name: Optional[str] = None) -> "Color":
        """Create a Color from an (alpha, r, g, b) tuple."""
        return cls.from_rgb(argb_to_rgb(argb), name=name, alpha=argb[0])

    @classmethod
    def from_hsv(cls, hsv: HSV, *, name: Optional[str] = None) -> "Color":
        """Create a Color from (hue, saturation, value), keeping the given HSV (normalized)."""
        color = cls.from_rgb(hsv_to_rgb(hsv), name=name)
        return replace(color, hsv=_normalize_hue_triple(hsv))

    @classmethod
    def from_hsl(cls, hsl: HSL, *, name: Optional[str] = None) -> "Color":
        """Create a Color from (hue, saturation, lightness), keeping the given HSL (normalized)."""
        color = cls.from_rgb(hsl_to_rgb(hsl), name=name)
        return replace(color, hsl=_normalize_hue_triple(hsl))

    @classmethod
    def from_cmyk(cls, cmyk: CMYK, *, name: Optional[str] = None) -> "Color":
        """Create a Color from (cyan, magenta, yellow, key), keeping the given CMYK (normalized)."""
        color = cls.from_rgb(cmyk_to_rgb(cmyk), name=name)
        return replace(color, cmyk=tuple(_unit(v) for v in cmyk))

    def with_inverted(self, inverted: bool = True) -> "Color":
        """Return a copy rendered with reverse video."""
        return replace(self, inverted=inverted)

    def with_name(self, name: Optional[str]) -> "Color":
        """Return a copy carrying a different palette name."""
        return replace(self, name=name)


# ---------------------------------------------------------------------------
# Ingestion
# ---------------------------------------------------------------------------

class ColorInput(Enum):
    """Shapes of input accepted by to_color()."""
    HEX = "hex"                    # '#RRGGBB' string
    RGB = "rgb"                    # (r, g, b) integers
    ARGB = "argb"                  # (a, r, g, b) integers
    NAME = "name"                  # palette name
    COLOR = "color"                # already a Color
    UNRECOGNIZED = "unrecognized"


def _is_channel(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and 0 <= value <= 255


def classify_color_input(value: Any) -> ColorInput:
    """
    Classify a value for color ingestion.

    HSV, HSL and CMYK tuples share arity with RGB/ARGB and are never
    detected here; use Color.from_hsv/from_hsl/from_cmyk for them.
    """
    if isinstance(value, Color):
        return ColorInput.COLOR
    if isinstance(value, str):
        return ColorInput.HEX if value.strip().startswith("#") else ColorInput.NAME
    if isinstance(value, tuple) and all(_is_channel(v) for v in value):
        if len(value) == 3:
            return ColorInput.RGB
        if len(value) == 4:
            return ColorInput.ARGB
    return ColorInput.UNRECOGNIZED


def to_color(value: Any, palette: Optional["Palette"] = None) -> Color:
    """
    Resolve any supported color input to a Color.

    Accepts a palette name, '#RRGGBB', an RGB or ARGB tuple, or a Color
    (returned unchanged). Anything else resolves to the palette's
    no_color entry.
    """
    kind = classify_color_input(value)
    if kind is ColorInput.COLOR:
        return value

    if kind is ColorInput.HEX and is_valid_hex(value):
        return Color.from_hex(normalize_hex(value))
    if kind is ColorInput.RGB:
        return Color.from_rgb(value)
    if kind is ColorInput.ARGB:
        return Color.from_argb(value)

    if palette is None:
        from aurora_term.core.palette import active_palette
        palette = active_palette()

    if kind is ColorInput.NAME:
        return palette.get_color(value)
    if kind is ColorInput.HEX:
        logger.debug("Invalid hex color %r, using no_color", value)
    elif value is not None:
        logger.debug("Unrecognized color input %r, using no_color", value)
    return palette.default


def to_hex(value: Any) -> str:
    """Resolve a color input and return its hex string."""
    return to_color(value).hex


def to_rgb(value: Any) -> RGB:
    """Resolve a color input and return its RGB tuple."""
    return to_color(value).rgb


def to_argb(value: Any) -> ARGB:
    """Resolve a color input and return its ARGB tuple."""
    return to_color(value).argb


def to_hsv(value: Any) -> HSV:
    """Resolve a color input and return its HSV tuple."""
    return to_color(value).hsv


def to_hsl(value: Any) -> HSL:
    """Resolve a color input and return its HSL tuple."""
    return to_color(value).hsl


def to_cmyk(value: Any) -> CMYK:
    """Resolve a color input and return its CMYK tuple."""
    return to_color(value).cmyk


# ---------------------------------------------------------------------------
# ANSI emission
# ---------------------------------------------------------------------------

def color_to_ansi_fg(color: Any) -> str:
    """24-bit foreground sequence, prefixed with reverse video when inverted."""
    color = to_color(color)
    r, g, b = color.rgb
    code = f"{CSI}38;2;{r};{g};{b}m"
    return REVERSE_VIDEO + code if color.inverted else code


def color_to_ansi_bg(color: Any) -> str:
    """24-bit background sequence, prefixed with reverse video when inverted."""
    color = to_color(color)
    r, g, b = color.rgb
    code = f"{CSI}48;2;{r};{g};{b}m"
    return REVERSE_VIDEO + code if color.inverted else code


def apply_color(
    text: str,
    color: Any,
    *,
    background: bool = False,
    inverted: Optional[bool] = None,
    palette: Optional["Palette"] = None,
) -> str:
    """
    Wrap text in a color sequence and a trailing reset.

    Args:
        text: Text to color
        color: Any input accepted by to_color(); None leaves text as is
        background: Emit a background instead of a foreground sequence
        inverted: Override the color's own inverted flag
        palette: Palette used to resolve names
    """
    if color is None:
        return text
    resolved = to_color(color, palette)
    if inverted is not None:
        resolved = resolved.with_inverted(inverted)
    code = color_to_ansi_bg(resolved) if background else color_to_ansi_fg(resolved)
    return f"{code}{text}{RESET}"


def apply_background_color(text: str, color: Any) -> str:
    """Shortcut for apply_color(..., background=True)."""
    return apply_color(text, color, background=True)


def apply_inverted_color(text: str, color: Any) -> str:
    """Shortcut for apply_color(..., inverted=True)."""
    return apply_color(text, color, inverted=True)


# ---------------------------------------------------------------------------
# Brightness
# ---------------------------------------------------------------------------

def _shift_lightness(color: Color, tones: int) -> Color:
    hue, saturation, lightness = color.hsl
    hsl = (hue, saturation, round(_unit(lightness + tones * TONE_STEP), 3))
    shifted = Color.from_rgb(
        hsl_to_rgb(hsl),
        name=color.name,
        inverted=color.inverted,
        alpha=color.argb[0],
    )
    return replace(shifted, hsl=hsl)


def lighten(color: Any, tones: int) -> Color:
    """
    Raise HSL lightness by `tones` twelfths, clamped at 1.

    Zero (or negative) tones return the input unchanged.
    """
    color = to_color(color)
    if tones <= 0:
        return color
    return _shift_lightness(color, tones)


def darken(color: Any, tones: int) -> Color:
    """
    Lower HSL lightness by `tones` twelfths, clamped at 0.

    Zero (or negative) tones return the input unchanged.
    """
    color = to_color(color)
    if tones <= 0:
        return color
    return _shift_lightness(color, -tones)
