"""Screen-ready snapshot of a session: bars, visible lines and cursor."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from edit_engine import APP_NAME, __version__
from edit_engine.document import Cursor, Document, Operation
from edit_engine.syntax import Highlight

from .viewport import Viewport

EMPTY_ROW_MARKER = "~"


@dataclass(slots=True)
class StatusMessage:
    """Transient message shown under the status bar."""

    text: str = ""
    set_at: float = 0.0

    def set(self, text: str, now: float) -> None:
        self.text = text
        self.set_at = now

    def visible(self, now: float, timeout_s: float) -> str:
        if self.text and now - self.set_at < timeout_s:
            return self.text
        return ""


@dataclass(frozen=True, slots=True)
class FrameLine:
    text: str
    highlight: Tuple[Highlight, ...]


@dataclass(frozen=True, slots=True)
class Frame:
    width: int
    top_bar: str
    lines: Tuple[FrameLine, ...]
    status_bar: str
    message: str
    cursor: Tuple[int, int]


def banner() -> str:
    return f"{APP_NAME} version --- {__version__}"


def _top_bar(document: Document, width: int) -> str:
    version = banner()
    name = document.filename or "Untitled"
    filename = f"{'*' if document.dirty else ''}{name}"
    padding = max((width - len(filename)) // 2, len(version) + 1)
    text = version.ljust(padding) + filename
    return text[:width].ljust(width)


def _status_bar(
    document: Document, cursor: Cursor, operation: Operation, width: int
) -> str:
    left = f" {operation.label} - {document.num_lines} lines"
    right = f"Row : {cursor[0] + 1} Col : {cursor[1] + 1}"
    if len(left) + len(right) <= width:
        return left + right.rjust(width - len(left))
    return left[:width].ljust(width)


def _welcome_line(width: int) -> str:
    text = banner()[:width]
    padding = (width - len(text)) // 2
    if padding:
        return EMPTY_ROW_MARKER + " " * (padding - 1) + text
    return text


def _visible_lines(document: Document, viewport: Viewport) -> Tuple[FrameLine, ...]:
    start = viewport.col_offset
    end = start + viewport.screen_cols
    rows = []
    for y in range(viewport.screen_rows):
        line = document.line(y + viewport.row_offset)
        if line is not None:
            rows.append(
                FrameLine(line.rendered[start:end], tuple(line.highlight[start:end]))
            )
            continue
        if document.num_lines == 0 and y == viewport.screen_rows // 3:
            text = _welcome_line(viewport.screen_cols)
        else:
            text = EMPTY_ROW_MARKER
        rows.append(FrameLine(text, (Highlight.NORMAL,) * len(text)))
    return tuple(rows)


def build_frame(
    document: Document,
    cursor: Cursor,
    viewport: Viewport,
    *,
    operation: Operation = Operation.NONE,
    message: Optional[str] = None,
) -> Frame:
    """Scroll the viewport to ``cursor`` and capture everything a painter needs."""

    rx = viewport.scroll(document, cursor)
    width = viewport.screen_cols
    return Frame(
        width=width,
        top_bar=_top_bar(document, width),
        lines=_visible_lines(document, viewport),
        status_bar=_status_bar(document, cursor, operation, width),
        message=(message or "")[:width],
        cursor=(cursor[0] - viewport.row_offset, rx - viewport.col_offset),
    )


__all__ = ["Frame", "FrameLine", "StatusMessage", "banner", "build_frame"]
