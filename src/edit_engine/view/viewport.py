"""Scroll offsets that keep the cursor on screen."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from edit_engine.document import Cursor, Document, raw_column_to_rendered
from edit_engine.errors import TerminalGeometryError


@dataclass(slots=True)
class Viewport:
    """Top-left corner of the visible window, in rendered coordinates."""

    screen_rows: int = 24
    screen_cols: int = 80
    row_offset: int = 0
    col_offset: int = 0

    def resize(self, rows: int, cols: int) -> None:
        if rows < 1 or cols < 1:
            raise TerminalGeometryError(rows, cols)
        self.screen_rows = rows
        self.screen_cols = cols

    def snapshot(self) -> Tuple[int, int]:
        return (self.row_offset, self.col_offset)

    def restore(self, snapshot: Tuple[int, int]) -> None:
        self.row_offset, self.col_offset = snapshot

    def scroll(self, document: Document, cursor: Cursor) -> int:
        """Clamp the offsets around ``cursor`` and return its rendered column."""

        row, col = cursor
        line = document.line(row)
        rx = raw_column_to_rendered(line.raw, col) if line is not None else 0

        if row < self.row_offset:
            self.row_offset = row
        if row >= self.row_offset + self.screen_rows:
            self.row_offset = row - self.screen_rows + 1
        if rx < self.col_offset:
            self.col_offset = rx
        if rx >= self.col_offset + self.screen_cols:
            self.col_offset = rx - self.screen_cols + 1
        return rx


__all__ = ["Viewport"]
