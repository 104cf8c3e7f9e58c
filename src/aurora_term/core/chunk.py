"""TextChunk and FormatRequest - the units the formatter works on."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Optional, Union

from aurora_term.core.color import Color
from aurora_term.core.effects import EffectSet


class Align(Enum):
    """Horizontal alignment of a formatted line."""
    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"
    JUSTIFY = "justify"
    CENTER_BLOCK = "center_block"   # Per-column padding, table mode


class AddLine(Enum):
    """Newlines wrapped around the whole output."""
    NONE = "none"
    BEFORE = "before"
    AFTER = "after"
    BOTH = "both"


class Mode(Enum):
    """Rendering mode of a FormatRequest."""
    NORMAL = "normal"
    TABLE = "table"
    RAW = "raw"     # Chunks are placed with cursor-position escapes


@dataclass(frozen=True, slots=True)
class TextChunk:
    """
    A piece of text with optional color, effects and screen position.

    A chunk without a color renders without color codes. pos_x/pos_y
    are only used in raw mode.
    """
    text: str
    color: Optional[Color] = None
    effects: Optional[EffectSet] = None
    pos_x: int = 0
    pos_y: int = 0

    def __str__(self) -> str:
        return self.text

    def with_text(self, text: str) -> "TextChunk":
        """Return a copy with different text."""
        return replace(self, text=text)

    def with_color(self, color: Optional[Color]) -> "TextChunk":
        """Return a copy with a different color."""
        return replace(self, color=color)


Row = list[Any]


@dataclass
class FormatRequest:
    """
    Everything needed to render a set of chunks.

    Attributes:
        chunks: TextChunks (normal/raw) or rows of TextChunks (table)
        default_color: Color for chunks that have none
        align: Line alignment
        manual_tabs: Indent levels for every chunk; -1 derives them from
            each chunk's color name
        add_line: Newlines around the output
        animation: Prefix prepended verbatim to the output
        mode: Rendering mode
    """
    chunks: list[Union[TextChunk, Row]] = field(default_factory=list)
    default_color: Optional[Color] = None
    align: Align = Align.LEFT
    manual_tabs: int = -1
    add_line: AddLine = AddLine.NONE
    animation: str = ""
    mode: Mode = Mode.NORMAL
