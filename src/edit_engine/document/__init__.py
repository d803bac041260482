"""Document model: lines, tab rendering, persistence and cursor state."""

from .document import Document
from .io import load_document, save_document
from .line import Line
from .render import (
    TAB_STOP,
    raw_column_to_rendered,
    rendered_column_to_raw,
    to_rendered,
)
from .state import Cursor, EditorState, Operation
from .validation import clamp_cursor

__all__ = [
    "Document",
    "Line",
    "TAB_STOP",
    "to_rendered",
    "raw_column_to_rendered",
    "rendered_column_to_raw",
    "load_document",
    "save_document",
    "Cursor",
    "EditorState",
    "Operation",
    "clamp_cursor",
]
