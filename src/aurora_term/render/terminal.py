"""Terminal size lookup."""

from __future__ import annotations

import os
import shutil
from dataclasses import dataclass

from aurora_term.config import Settings


@dataclass(frozen=True)
class TerminalSize:
    """Terminal dimensions."""
    rows: int
    cols: int


def terminal_size() -> TerminalSize:
    """
    Current terminal dimensions.

    Falls back to 24 rows and the configured width (80 by default) when
    no terminal is attached.
    """
    try:
        size = os.get_terminal_size()
    except OSError:
        size = shutil.get_terminal_size((0, 0))
    if size.columns > 0:
        return TerminalSize(size.lines or 24, size.columns)
    return TerminalSize(24, Settings.from_env().fallback_width)


def terminal_width() -> int:
    """Current terminal width in columns, read fresh on every call."""
    return terminal_size().cols
