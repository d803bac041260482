"""File, search and session commands reached through control keys."""

from __future__ import annotations

from typing import TYPE_CHECKING

from edit_engine.modes.base_mode import ModeResult
from edit_engine.modes.prompt_handlers import SearchPromptHandler

if TYPE_CHECKING:  # pragma: no cover
    from edit_engine.keymaps import ResolutionMatch
    from edit_engine.session import EditorSession

SEARCH_PROMPT = "Search: {} (ESC to cancel / Arrows to move / Enter to confirm)"


def save(session: "EditorSession", match: "ResolutionMatch") -> ModeResult:
    del match
    return session.save()


def quit_editor(session: "EditorSession", match: "ResolutionMatch") -> ModeResult:
    del match
    return session.request_quit()


def open_file(session: "EditorSession", match: "ResolutionMatch") -> ModeResult:
    del match
    return session.request_open()


def find(session: "EditorSession", match: "ResolutionMatch") -> ModeResult:
    """Start an incremental search; Escape puts cursor and view back."""

    del match
    session.search.reset(session.document)
    handler = SearchPromptHandler(session.cursor, session.viewport.snapshot())
    return session.start_prompt(SEARCH_PROMPT, handler)


def show_help(session: "EditorSession", match: "ResolutionMatch") -> ModeResult:
    del match
    session.set_status(session.settings.help_message)
    return ModeResult(consumed=True, status="help")


def noop(session: "EditorSession", match: "ResolutionMatch") -> ModeResult:
    del session, match
    return ModeResult(consumed=True, status="noop")


__all__ = ["save", "quit_editor", "open_file", "find", "show_help", "noop"]
