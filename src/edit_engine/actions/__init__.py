"""Editor verbs that keymap bindings point at."""

from .commands import find, noop, open_file, quit_editor, save, show_help
from .editing import delete_backward, delete_forward, insert_newline, insert_tab
from .motion import move_cursor, page

__all__ = [
    "find",
    "noop",
    "open_file",
    "quit_editor",
    "save",
    "show_help",
    "delete_backward",
    "delete_forward",
    "insert_newline",
    "insert_tab",
    "move_cursor",
    "page",
]
