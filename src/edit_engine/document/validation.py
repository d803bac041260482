"""Cursor clamping shared by the session and its actions."""

from __future__ import annotations

from .document import Document
from .state import Cursor


def clamp_cursor(document: Document, cursor: Cursor) -> Cursor:
    """Pull ``cursor`` back inside the document.

    ``row`` may equal ``num_lines`` (the virtual line after the last one),
    where the only valid column is 0.
    """

    row, col = cursor
    row = min(max(row, 0), document.num_lines)
    line = document.line(row)
    limit = line.size if line is not None else 0
    return (row, min(max(col, 0), limit))


__all__ = ["clamp_cursor"]
