"""Column alignment for tables of chunks."""

from __future__ import annotations

from aurora_term.core.chunk import TextChunk
from aurora_term.render.ansi_text import visible_length


def pad_rows(rows: list[list[TextChunk]]) -> list[list[TextChunk]]:
    """Extend every row with empty chunks up to the longest row's length."""
    col_count = max((len(row) for row in rows), default=0)
    return [row + [TextChunk(text="")] * (col_count - len(row)) for row in rows]


def column_widths(rows: list[list[TextChunk]]) -> list[int]:
    """Widest visible text per column (rows must already be padded)."""
    if not rows:
        return []
    return [
        max(visible_length(row[col].text) for row in rows)
        for col in range(len(rows[0]))
    ]


def align_columns(rows: list[list[TextChunk]]) -> list[list[TextChunk]]:
    """
    Pad ragged rows and right-pad every cell to its column's width.

    Widths are measured on visible text, so cells that already carry
    escape codes line up with plain ones.
    """
    rows = pad_rows(rows)
    widths = column_widths(rows)
    return [
        [
            cell.with_text(cell.text + " " * max(width - visible_length(cell.text), 0))
            for cell, width in zip(row, widths)
        ]
        for row in rows
    ]
