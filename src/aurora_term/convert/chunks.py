"""Coercion of loose input into TextChunks, EffectSets and FormatRequests."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from enum import Enum
from typing import TYPE_CHECKING, Any, Optional, TypeVar

from aurora_term.convert.ensure import to_boolean, to_integer, to_list, to_string
from aurora_term.core.chunk import AddLine, Align, FormatRequest, Mode, TextChunk
from aurora_term.core.color import Color, to_color
from aurora_term.core.effects import EffectSet
from aurora_term.render.ansi_text import remove_diacritics
from aurora_term.render.table import align_columns

if TYPE_CHECKING:
    from aurora_term.core.palette import Palette

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)

_EFFECT_SEPARATORS = re.compile(r"[\s,]+")


def _chunk_color(color: Any, palette: Optional["Palette"]) -> Optional[Color]:
    return None if color is None else to_color(color, palette)


def to_chunk(value: Any, palette: Optional["Palette"] = None) -> TextChunk:
    """
    Coerce a value to a TextChunk.

    Accepted shapes:
        TextChunk               returned as is
        "text"                  chunk without color
        ("text", color)         chunk with the resolved color
        ("text", color, x, y)   positioned chunk (raw mode)
        Color                   its name (or hex) in that color
        None                    empty chunk

    Numbers become their text, anything else its repr().
    """
    if isinstance(value, TextChunk):
        return value
    if value is None:
        return TextChunk(text="")
    if isinstance(value, str):
        return TextChunk(text=value)
    if isinstance(value, tuple) and len(value) == 2:
        text, color = value
        return TextChunk(text=to_string(text), color=_chunk_color(color, palette))
    if isinstance(value, tuple) and len(value) == 4:
        text, color, pos_x, pos_y = value
        return TextChunk(
            text=to_string(text),
            color=_chunk_color(color, palette),
            pos_x=to_integer(pos_x),
            pos_y=to_integer(pos_y),
        )
    if isinstance(value, Color):
        return TextChunk(text=value.name or value.hex, color=value)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return TextChunk(text=str(value))

    logger.debug("Cannot build a chunk from %r, using its repr", value)
    return TextChunk(text=repr(value))


def to_chunks(values: Any, palette: Optional["Palette"] = None) -> list[TextChunk]:
    """Coerce a value or list of values to a list of TextChunks."""
    return [to_chunk(value, palette) for value in to_list(values)]


def to_effect_set(value: Any) -> Optional[EffectSet]:
    """
    Coerce to an EffectSet.

    Accepts an EffectSet, a mapping of name -> flag, a list of names or
    (name, flag) pairs, or a string of names separated by commas or
    spaces. None stays None; unknown names are ignored.
    """
    if value is None or isinstance(value, EffectSet):
        return value
    if isinstance(value, str):
        return EffectSet.from_names(n for n in _EFFECT_SEPARATORS.split(value.lower()) if n)
    if isinstance(value, Mapping):
        return EffectSet.from_names(str(k) for k, v in value.items() if to_boolean(v))
    if isinstance(value, (list, tuple, set, frozenset)):
        names = []
        for item in value:
            if isinstance(item, tuple) and len(item) == 2:
                if to_boolean(item[1]):
                    names.append(str(item[0]))
            elif isinstance(item, str):
                names.append(item)
        return EffectSet.from_names(names)

    logger.debug("Cannot build effects from %r", value)
    return EffectSet()


def _to_enum(enum_cls: type[E], value: Any, default: E) -> E:
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        try:
            return enum_cls(value.strip().lower())
        except ValueError:
            pass
    if value is not None:
        logger.debug("Unknown %s %r, using %s", enum_cls.__name__, value, default.value)
    return default


def to_align(value: Any) -> Align:
    """Parse an alignment name, LEFT if unknown."""
    return _to_enum(Align, value, Align.LEFT)


def to_add_line(value: Any) -> AddLine:
    """Parse a line-break policy name, NONE if unknown."""
    return _to_enum(AddLine, value, AddLine.NONE)


def to_mode(value: Any) -> Mode:
    """Parse a mode name, NORMAL if unknown."""
    return _to_enum(Mode, value, Mode.NORMAL)


def to_format_request(value: Any, palette: Optional["Palette"] = None) -> FormatRequest:
    """
    Coerce to a FormatRequest.

    A FormatRequest is returned as is, a list becomes the chunk list and
    a mapping supplies fields by name (enum fields may be given as
    strings). Any other value becomes a request with a single chunk.
    """
    if isinstance(value, FormatRequest):
        return value
    if value is None:
        return FormatRequest()
    if isinstance(value, list):
        return FormatRequest(chunks=value)
    if isinstance(value, Mapping):
        return FormatRequest(
            chunks=to_list(value.get("chunks")),
            default_color=_chunk_color(value.get("default_color"), palette),
            align=to_align(value.get("align")),
            manual_tabs=to_integer(value.get("manual_tabs", -1)),
            add_line=to_add_line(value.get("add_line")),
            animation=to_string(value.get("animation")),
            mode=to_mode(value.get("mode")),
        )
    return FormatRequest(chunks=[value])


def normalize_text(text: Any, mode: Optional[str] = None) -> str:
    """
    Trim text, optionally change case ("lower" or "upper") and remove
    diacritics.

    Example:
        >>> normalize_text("  Ñandú ", "upper")
        'NANDU'
    """
    text = to_string(text).strip()
    if mode == "lower":
        text = text.lower()
    elif mode == "upper":
        text = text.upper()
    return remove_diacritics(text)


def normalize_messages(messages: Any, palette: Optional["Palette"] = None) -> list[TextChunk]:
    """
    Coerce messages to chunks.

    A string or a single (text, color) pair gives one chunk, a list
    gives one chunk per item. Anything else gives an empty list.
    """
    if isinstance(messages, (str, tuple, TextChunk)):
        return [to_chunk(messages, palette)]
    if isinstance(messages, list):
        return to_chunks(messages, palette)
    return []


def normalize_table(rows: Any, palette: Optional["Palette"] = None) -> list[list[TextChunk]]:
    """Coerce rows of cells to chunks and align them into columns."""
    if not isinstance(rows, list):
        return []
    return align_columns([to_chunks(row, palette) for row in rows])
