"""Color gradients: stop generation, expansion and per-character text gradients."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any, Optional

from aurora_term.core.color import (
    RGB,
    Color,
    hex_to_rgb,
    is_valid_hex,
    normalize_hex,
    rgb_to_hex,
    to_color,
)
from aurora_term.core.constants import CSI, GRADIENT_STEPS, RESET

if TYPE_CHECKING:
    from aurora_term.core.palette import Palette

logger = logging.getLogger(__name__)

# Source index for each of the six output slots, keyed by input length
_EXPANSION_PATTERNS: dict[int, tuple[int, ...]] = {
    1: (0, 0, 0, 0, 0, 0),
    2: (0, 0, 0, 1, 1, 1),
    3: (0, 0, 1, 1, 2, 2),
    4: (0, 0, 1, 2, 3, 3),
    5: (0, 1, 2, 2, 3, 4),
    6: (0, 1, 2, 3, 4, 5),
}


def _round_half_up(value: float) -> int:
    return int(value + 0.5)


def _lerp(start: RGB, end: RGB, factor: float) -> RGB:
    """Linear interpolation between two RGB points."""
    return tuple(
        _round_half_up(a + (b - a) * factor) for a, b in zip(start, end)
    )


def _default_hex(palette: Optional["Palette"]) -> str:
    if palette is None:
        from aurora_term.core.palette import active_palette
        palette = active_palette()
    return palette.default.hex


def gradient_between(
    first_hex: str,
    last_hex: str,
    palette: Optional["Palette"] = None,
) -> list[str]:
    """
    Six hex stops interpolated linearly in RGB from first_hex to last_hex.

    Invalid input on either end yields six copies of the no_color hex.

    Example:
        >>> gradient_between("#FF0000", "#0000FF")
        ['#FF0000', '#CC0033', '#990066', '#660099', '#3300CC', '#0000FF']
    """
    if not (is_valid_hex(first_hex) and is_valid_hex(last_hex)):
        logger.debug("Invalid gradient ends %r, %r", first_hex, last_hex)
        return [_default_hex(palette)] * GRADIENT_STEPS

    start = hex_to_rgb(first_hex)
    end = hex_to_rgb(last_hex)
    last_step = GRADIENT_STEPS - 1
    return [
        rgb_to_hex(_lerp(start, end, i / last_step))
        for i in range(GRADIENT_STEPS)
    ]


def gradient_from_color(hex_str: str, pos: int) -> list[str]:
    """
    Six hex stops around a pivot color placed at index `pos` (0-5).

    Stops left of the pivot darken towards half brightness, stops to the
    right lighten halfway towards white. Invalid input returns six copies
    of hex_str.
    """
    if not is_valid_hex(hex_str) or not 0 <= pos < GRADIENT_STEPS:
        return [hex_str] * GRADIENT_STEPS

    r, g, b = hex_to_rgb(hex_str)
    last = GRADIENT_STEPS - 1

    left = []
    for i in range(pos):
        factor = (pos - i) / pos * 0.5
        left.append(rgb_to_hex(tuple(_round_half_up(c * (1 - factor)) for c in (r, g, b))))

    right = []
    for i in range(pos + 1, GRADIENT_STEPS):
        factor = (i - pos) / (last - pos) * 0.5
        right.append(rgb_to_hex(tuple(_round_half_up(c + (255 - c) * factor) for c in (r, g, b))))

    return [*left, normalize_hex(hex_str), *right]


def expand_to_six(colors: Any, palette: Optional["Palette"] = None) -> list[Any]:
    """
    Expand 1-6 colors to exactly six by positional duplication.

    1 -> six copies, 2 -> [a,a,a,b,b,b], 3 -> [a,a,b,b,c,c],
    4 -> [a,a,b,c,d,d], 5 -> [a,b,c,c,d,e], 6 -> unchanged.
    Any other input yields six copies of the no_color Color.
    """
    if isinstance(colors, Sequence) and not isinstance(colors, str):
        pattern = _EXPANSION_PATTERNS.get(len(colors))
        if pattern is not None:
            if len(colors) == GRADIENT_STEPS:
                return list(colors)
            return [colors[i] for i in pattern]

    if palette is None:
        from aurora_term.core.palette import active_palette
        palette = active_palette()
    return [palette.default] * GRADIENT_STEPS


def apply_gradient_to_text(
    text: str,
    colors: Sequence[Any],
    palette: Optional["Palette"] = None,
) -> str:
    """
    Color each character of text along a gradient.

    The colors (up to six, extras ignored) split the text into
    len(colors) - 1 equal segments; every character gets the RGB
    interpolation between its segment's end colors and its own
    escape/reset pair. A single color paints the text solid; no
    colors leaves it unchanged.
    """
    stops = [to_color(c, palette).rgb for c in list(colors)[:GRADIENT_STEPS]]
    if not text or not stops:
        return text
    if len(stops) == 1:
        stops = stops * 2

    segments = len(stops) - 1
    last_index = len(text) - 1
    parts: list[str] = []

    for i, char in enumerate(text):
        position = (i / last_index) * segments if last_index else 0.0
        segment = min(int(position), segments - 1)
        r, g, b = _lerp(stops[segment], stops[segment + 1], position - segment)
        parts.append(f"{CSI}38;2;{r};{g};{b}m{char}{RESET}")

    return "".join(parts)


def extract_hex(value: Any, palette: Optional["Palette"] = None) -> str:
    """Pull a hex string out of a Color, (name, Color) pair, mapping or name."""
    if isinstance(value, Color):
        return value.hex
    if isinstance(value, tuple) and len(value) == 2:
        _, inner = value
        if isinstance(inner, Color):
            return inner.hex
        if isinstance(inner, str):
            return inner
    if isinstance(value, Mapping):
        return str(value.get("hex", ""))
    if isinstance(value, str):
        return value if value.strip().startswith("#") else to_color(value, palette).hex
    return str(value)


def extract_hexes(values: Any, palette: Optional["Palette"] = None) -> list[str]:
    """extract_hex() over a list, the values of a mapping, or a single value."""
    if isinstance(values, Mapping):
        return [extract_hex(v, palette) for v in values.values()]
    if isinstance(values, list):
        return [extract_hex(v, palette) for v in values]
    return [extract_hex(values, palette)]