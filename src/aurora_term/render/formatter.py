"""
Formatter - lays out chunks and renders them to an ANSI string.

Three modes are supported:
    normal  indentation, alignment, effects and color on one line of chunks
    table   rows of chunks padded into aligned columns
    raw     chunks placed with cursor-position escapes
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any, Optional

from aurora_term.convert.chunks import (
    to_add_line,
    to_align,
    to_chunk,
    to_format_request,
    to_mode,
)
from aurora_term.core.chunk import AddLine, Align, FormatRequest, Mode, TextChunk
from aurora_term.core.color import Color, apply_color, to_color
from aurora_term.core.constants import CELL_SEPARATOR, COLOR_TABS, CSI, NO_COLOR, TAB_SIZE
from aurora_term.core.effects import apply_effect_set
from aurora_term.core.palette import Palette, active_palette
from aurora_term.render.ansi_text import visible_length
from aurora_term.render.table import align_columns
from aurora_term.render.terminal import terminal_width

logger = logging.getLogger(__name__)


def add_location_to_text(text: str, pos_y: int, pos_x: int) -> str:
    """
    Prefix text with a cursor-position escape.

    Example:
        >>> add_location_to_text("Hi", 2, 5)
        '\\x1b[2;5HHi'
    """
    return f"{CSI}{pos_y};{pos_x}H{text}"


def add_new_lines(text: str, add_line: AddLine) -> str:
    """Wrap text in newlines according to add_line."""
    if add_line in (AddLine.BEFORE, AddLine.BOTH):
        text = "\n" + text
    if add_line in (AddLine.AFTER, AddLine.BOTH):
        text = text + "\n"
    return text


def apply_chunk_effects(chunk: TextChunk) -> TextChunk:
    """Return a copy of chunk with its effects baked into the text."""
    if chunk.effects is None:
        return chunk
    return chunk.with_text(apply_effect_set(chunk.text, chunk.effects))


def _filler(width: int) -> TextChunk:
    return TextChunk(text=" " * max(width, 0))


def line_length(chunks: Iterable[TextChunk]) -> int:
    """Visible length of all chunk texts joined together."""
    return sum(visible_length(chunk.text) for chunk in chunks)


def align_chunks(chunks: list[TextChunk], align: Align, width: int) -> list[TextChunk]:
    """
    Align one line of chunks within width columns.

    Padding is added as uncolored filler chunks. Lines that are already
    wider than width get no padding.
    """
    if align is Align.RIGHT:
        pad = max(width - line_length(chunks), 0)
        return [_filler(pad), *chunks]

    if align is Align.CENTER:
        pad = max(width - line_length(chunks), 0)
        left = pad // 2
        return [_filler(left), *chunks, _filler(pad - left)]

    if align is Align.JUSTIFY:
        return _justify(chunks, width)

    # LEFT, and CENTER_BLOCK which only pads table columns
    return list(chunks)


def _justify(chunks: list[TextChunk], width: int) -> list[TextChunk]:
    if len(chunks) < 2:
        return list(chunks)

    gaps = len(chunks) - 1
    # Each gap keeps its single separating space; the rest is spread out
    total = max(width - (line_length(chunks) + gaps), 0)
    gap_size, extra = divmod(total, gaps)

    result: list[TextChunk] = []
    for i, chunk in enumerate(chunks):
        result.append(chunk)
        if i < gaps:
            result.append(_filler(1 + gap_size + (1 if i < extra else 0)))
    return result


class Formatter:
    """
    Renders FormatRequests to strings containing raw ANSI escapes.

    Args:
        palette: Palette used to resolve color names (process palette if None)
        width: Line width for alignment (terminal width at call time if None)
    """

    def __init__(self, palette: Optional[Palette] = None, width: Optional[int] = None):
        self._palette = palette
        self.width = width

    @property
    def palette(self) -> Palette:
        return self._palette if self._palette is not None else active_palette()

    def line_width(self) -> int:
        """Width used for alignment."""
        if self.width is not None:
            return self.width
        return terminal_width()

    def format(self, request: Any) -> str:
        """
        Render a FormatRequest.

        Loose input (a list of chunks, a mapping of request fields) is
        coerced into a FormatRequest first.
        """
        request = to_format_request(request)
        mode = to_mode(request.mode)
        logger.debug("Formatting %d chunk(s) in %s mode", len(request.chunks), mode.value)

        if mode is Mode.TABLE:
            body = self._format_table(request)
        elif mode is Mode.RAW:
            body = self._format_raw(request)
        else:
            body = self._format_normal(request)

        return request.animation + add_new_lines(body, to_add_line(request.add_line))

    def render_chunk(self, chunk: TextChunk) -> str:
        """Apply a chunk's effects, then its color."""
        text = apply_chunk_effects(chunk).text
        if chunk.color is None:
            return text
        return apply_color(text, chunk.color, palette=self.palette)

    def render_chunks(self, chunks: Iterable[TextChunk]) -> str:
        return "".join(self.render_chunk(chunk) for chunk in chunks)

    # Pipeline stages

    def prepare(self, chunks: Iterable[Any], default_color: Any = None) -> list[TextChunk]:
        """Coerce items to chunks and give uncolored ones the default color."""
        default = to_color(default_color, self.palette) if default_color is not None else None
        prepared = []
        for item in chunks:
            chunk = to_chunk(item, self.palette)
            if chunk.color is None and default is not None:
                chunk = chunk.with_color(default)
            prepared.append(chunk)
        return prepared

    def indent(self, chunks: list[TextChunk], manual_tabs: int = -1) -> list[TextChunk]:
        """
        Indent every chunk.

        manual_tabs >= 0 gives every chunk that many tab stops; negative
        values look the level up from each chunk's color name.
        """
        if isinstance(manual_tabs, int) and not isinstance(manual_tabs, bool) and manual_tabs >= 0:
            prefix = " " * (manual_tabs * TAB_SIZE)
            return [chunk.with_text(prefix + chunk.text) for chunk in chunks]

        result = []
        for chunk in chunks:
            tabs = COLOR_TABS.get(self._color_name(chunk), 0)
            result.append(chunk.with_text(" " * (tabs * TAB_SIZE) + chunk.text))
        return result

    def _color_name(self, chunk: TextChunk) -> str:
        if chunk.color is None:
            return NO_COLOR
        color = chunk.color if isinstance(chunk.color, Color) else to_color(chunk.color, self.palette)
        return color.name or ""

    # Modes

    def _format_normal(self, request: FormatRequest) -> str:
        chunks = self.prepare(request.chunks, request.default_color)
        chunks = self.indent(chunks, request.manual_tabs)
        chunks = align_chunks(chunks, to_align(request.align), self.line_width())
        return self.render_chunks(chunks)

    def _format_table(self, request: FormatRequest) -> str:
        items = list(request.chunks)
        if items and all(isinstance(item, list) for item in items):
            raw_rows = items
        elif items:
            raw_rows = [items]
        else:
            raw_rows = []

        rows = [self.prepare(row, request.default_color) for row in raw_rows]
        rows = align_columns(rows)
        return "\n".join(
            CELL_SEPARATOR.join(self.render_chunk(cell) for cell in row) for row in rows
        )

    def _format_raw(self, request: FormatRequest) -> str:
        chunks = self.prepare(request.chunks, request.default_color)
        placed = [
            chunk.with_text(add_location_to_text(chunk.text, chunk.pos_y, chunk.pos_x))
            for chunk in chunks
        ]
        return self.render_chunks(placed)


def format(request: Any, *, width: Optional[int] = None, palette: Optional[Palette] = None) -> str:
    """Render a FormatRequest (or loose equivalent) with a one-off Formatter."""
    return Formatter(palette=palette, width=width).format(request)


def format_logo(
    lines: Iterable[str],
    *,
    gradient_colors: Any = None,
    align: Align = Align.LEFT,
    pos_x: int = 0,
    pos_y: int = 0,
    animation: str = "",
    formatter: Optional[Formatter] = None,
) -> tuple[str, list[str]]:
    """
    Render multi-line text with one gradient stop per line.

    Lines past the last stop use the palette default.

    Args:
        lines: Lines of the logo
        gradient_colors: Stops as a list or mapping of colors (palette
            gradient_1..6 if None)
        align: Alignment of each line
        pos_x, pos_y: Position of every line (raw output when non-zero)
        animation: Prefix for the whole logo
        formatter: Formatter to render with

    Returns:
        Tuple of (rendered text, hex of every stop used)
    """
    formatter = formatter or Formatter()
    palette = formatter.palette

    if gradient_colors is None:
        stops = palette.gradient_stops()
    else:
        values = gradient_colors.values() if isinstance(gradient_colors, Mapping) else gradient_colors
        stops = [to_color(value, palette) for value in values]

    mode = Mode.RAW if (pos_x or pos_y) else Mode.NORMAL
    rendered = []
    for index, line in enumerate(lines):
        color = stops[index] if index < len(stops) else palette.default
        request = FormatRequest(
            chunks=[TextChunk(text=line, color=color, pos_x=pos_x, pos_y=pos_y + index if pos_y else 0)],
            align=align,
            manual_tabs=0,
            mode=mode,
        )
        rendered.append(formatter.format(request))

    return animation + "\n".join(rendered), [stop.hex for stop in stops]
