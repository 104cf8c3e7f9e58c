"""ANSI text utilities - stripping, measuring and padding strings with escape codes."""

from __future__ import annotations

import re
import unicodedata
from typing import Any

from aurora_term.core.constants import RESET

# CSI sequences (ESC [ params intermediates final) and string sequences
# (DCS/OSC/SOS/PM/APC) terminated by ST or BEL
_ANSI_ESCAPE = re.compile(
    r'\x1b\[[0-?]*[ -/]*[@-~]'
    r'|\x1b[P\]X^_].*?(?:\x1b\\|\x07)',
    re.DOTALL,
)


def strip_ansi(s: str) -> str:
    """
    Remove all ANSI escape sequences from s.

    Repeats until nothing matches, since removing one sequence can join
    the pieces of another (ESC ESC[0m [1m).
    """
    stripped = _ANSI_ESCAPE.sub('', s)
    while stripped != s:
        s, stripped = stripped, _ANSI_ESCAPE.sub('', stripped)
    return stripped


def visible_length(s: Any) -> int:
    """
    Count the visible characters left after stripping ANSI codes.

    Combining marks take no column of their own, so decomposed and
    composed text measure the same. Accepts anything with a string form
    (TextChunks measure their text).
    """
    return sum(1 for ch in strip_ansi(str(s)) if not unicodedata.combining(ch))


def remove_diacritics(text: str) -> str:
    """
    Remove accents and other combining marks.

    Example:
        >>> remove_diacritics("café niño")
        'cafe nino'
    """
    decomposed = unicodedata.normalize("NFD", text)
    return "".join(ch for ch in decomposed if unicodedata.category(ch) != "Mn")


def truncate(s: str, max_width: int, reset: bool = True) -> str:
    """
    Truncate an ANSI-escaped string to max visible width.

    Escape sequences are kept whole and do not count towards the width.

    Args:
        s: String to truncate
        max_width: Maximum visible width
        reset: If True, append a reset when text was cut to prevent color bleed
    """
    if max_width <= 0:
        return ""

    result: list[str] = []
    vis_len = 0
    i = 0

    while i < len(s) and (vis_len < max_width or unicodedata.combining(s[i])):
        match = _ANSI_ESCAPE.match(s, i)
        if match:
            result.append(match.group())
            i = match.end()
        else:
            result.append(s[i])
            if not unicodedata.combining(s[i]):
                vis_len += 1
            i += 1

    output = ''.join(result)
    if reset and i < len(s):
        output += RESET
    return output


def pad_to_width(s: str, width: int, char: str = ' ') -> str:
    """Pad string on the right to reach width visible characters."""
    current = visible_length(s)
    if current >= width:
        return s
    return s + char * (width - current)


def truncate_and_pad(s: str, width: int) -> str:
    """Truncate if too long, pad if too short. Always returns exactly width visible chars."""
    if visible_length(s) > width:
        return truncate(s, width)
    return pad_to_width(s, width)
