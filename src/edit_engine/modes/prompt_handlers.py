"""Per-keystroke strategies plugged into ``PromptMode``."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Optional, Tuple

if TYPE_CHECKING:  # pragma: no cover
    from edit_engine.document import Cursor
    from edit_engine.session import EditorSession


class PromptHandler:
    """Plain prompt: keystrokes only edit the typed text.

    ``on_key`` runs after every keystroke, including the Enter or Escape that
    ends the prompt. Returning a string replaces the typed text.
    """

    def on_key(
        self, session: "EditorSession", query: str, key: str
    ) -> Optional[str]:
        del session, query, key
        return None


class SearchPromptHandler(PromptHandler):
    """Drives the search engine as the query changes."""

    def __init__(self, cursor: "Cursor", viewport: Tuple[int, int]) -> None:
        self.saved_cursor = cursor
        self.saved_viewport = viewport

    def on_key(
        self, session: "EditorSession", query: str, key: str
    ) -> Optional[str]:
        match = session.search.feed(session.document, query, key)
        if match is not None:
            session.jump_to_match(match)
        if key == "ESC":
            session.cursor = self.saved_cursor
            session.viewport.restore(self.saved_viewport)
        return None


class OpenFilePromptHandler(PromptHandler):
    """Tab completes the typed path against the filesystem."""

    def on_key(
        self, session: "EditorSession", query: str, key: str
    ) -> Optional[str]:
        del session
        if key != "TAB" or not query:
            return None
        return complete_path(query)


def complete_path(text: str) -> str:
    """Extend ``text`` to the longest prefix shared by matching entries."""

    directory, prefix = os.path.split(text)
    try:
        entries = sorted(os.listdir(os.path.expanduser(directory or ".")))
    except OSError:
        return text
    matches = [entry for entry in entries if entry.startswith(prefix)]
    if not matches:
        return text
    completed = os.path.join(directory, os.path.commonprefix(matches))
    if len(matches) == 1 and os.path.isdir(os.path.expanduser(completed)):
        completed += os.sep
    return completed


__all__ = [
    "PromptHandler",
    "SearchPromptHandler",
    "OpenFilePromptHandler",
    "complete_path",
]
