"""
aurora-term: styled terminal text with 24-bit ANSI colors

Turn text, colors, effects and layout options into strings with ANSI
escape codes, and measure or strip them again.

Quick Start:
    >>> import aurora_term as aurora
    >>> print(aurora.format("Hello", color="primary", bold=True))
    >>> print(aurora.colorize("Error", "#FF0000"))
    >>> aurora.text_length(aurora.stylize("Hi", ["bold", "underline"]))
    2

Features:
    - Colors from palette names, hex, RGB and ARGB; HSV/HSL/CMYK conversions
    - Lighten/darken in HSL tones and six-stop gradients
    - Bold, dim, italic, underline and other SGR effects
    - Left, right, center and justified lines, aligned tables and
      cursor-positioned raw output
    - Palette overrides from a JSON file (AURORA_TERM_PALETTE)
    - Colored JSON pretty-printing
"""

from __future__ import annotations

from typing import Any, Optional

__version__ = "0.1.0"

# Core types
from aurora_term.core.chunk import AddLine, Align, FormatRequest, Mode, TextChunk
from aurora_term.core.color import Color, apply_color, darken, lighten, to_color
from aurora_term.core.effects import EffectSet, apply_effect, apply_effects, available_effects
from aurora_term.core.gradient import gradient_between
from aurora_term.core.palette import Palette, active_palette

# Rendering (before convert, which depends on render helpers)
from aurora_term.render.ansi_text import strip_ansi, visible_length
from aurora_term.render.formatter import Formatter
from aurora_term.render.json_format import render_json

# Coercion
from aurora_term.convert.chunks import to_chunk, to_chunks

from aurora_term.errors import AuroraTermError, JsonPayloadError, PaletteConfigError


def format(
    text: Any,
    *,
    color: Any = None,
    align: Any = Align.LEFT,
    bold: bool = False,
    width: Optional[int] = None,
) -> str:
    """
    Format text with a color, alignment and optional bold.

    text may be a string, a list of strings (one chunk each) or a
    complete FormatRequest, in which case the other options are ignored.
    """
    if isinstance(text, FormatRequest):
        return Formatter(width=width).format(text)

    texts = text if isinstance(text, list) else [text]
    resolved = to_color(color) if color is not None else None
    effects = EffectSet(bold=True) if bold else None
    chunks = [
        TextChunk(text=to_chunk(item).text, color=resolved, effects=effects)
        for item in texts
    ]
    return Formatter(width=width).format({"chunks": chunks, "align": align})


def format_chunks(chunks: Any, *, width: Optional[int] = None, **options: Any) -> str:
    """
    Format a list of chunks with FormatRequest options given by name.

    Example:
        >>> format_chunks([chunk("A", "error"), chunk("B")], align="center")
    """
    return Formatter(width=width).format({"chunks": to_chunks(chunks), **options})


def chunk(text: Any, color: Any = None) -> TextChunk:
    """Create a chunk, resolving color if given."""
    return to_chunk((text, color)) if color is not None else to_chunk(text)


def chunks(items: Any) -> list[TextChunk]:
    """Create chunks from strings and (text, color) pairs."""
    return to_chunks(items)


def colorize(text: str, color: Any) -> str:
    """Apply a color (name, hex or RGB tuple) to text."""
    return apply_color(text, to_color(color))


def stylize(text: str, effects: Any) -> str:
    """Apply one effect name or a list of them."""
    if isinstance(effects, str):
        return apply_effect(text, effects)
    return apply_effects(text, effects)


def gradient(start_color: str, end_color: str, steps: int = 6) -> list[str]:
    """Hex stops from start_color to end_color (at most six)."""
    return gradient_between(start_color, end_color)[:max(steps, 0)]


def clean(text: str) -> str:
    """Strip ANSI codes from text."""
    return strip_ansi(text)


def text_length(text: Any) -> int:
    """Visible length of text without ANSI codes."""
    return visible_length(text)


def json(data: Any, *, color: Any = "info", compact: bool = False, indent_block: bool = False) -> str:
    """
    Colored JSON for a JSON string or serializable value.

    Raises:
        JsonPayloadError: If data is not valid JSON
    """
    return render_json(data, color=color, compact=compact, indent_block=indent_block)


def colors() -> list[str]:
    """Names of all palette colors."""
    return sorted(active_palette().colors)


def effects() -> list[str]:
    """Names of all effects."""
    return available_effects()


__all__ = [
    # Version
    "__version__",
    # Core types
    "AddLine",
    "Align",
    "Color",
    "EffectSet",
    "FormatRequest",
    "Formatter",
    "Mode",
    "Palette",
    "TextChunk",
    # Errors
    "AuroraTermError",
    "JsonPayloadError",
    "PaletteConfigError",
    # Colors
    "darken",
    "lighten",
    "to_color",
    # Helpers
    "format",
    "format_chunks",
    "chunk",
    "chunks",
    "colorize",
    "stylize",
    "gradient",
    "clean",
    "text_length",
    "json",
    "colors",
    "effects",
]
