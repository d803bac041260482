"""Text editing actions bound in edit mode."""

from __future__ import annotations

from typing import TYPE_CHECKING

from edit_engine.modes.base_mode import ModeResult

if TYPE_CHECKING:  # pragma: no cover
    from edit_engine.keymaps import ResolutionMatch
    from edit_engine.session import EditorSession


def insert_newline(session: "EditorSession", match: "ResolutionMatch") -> ModeResult:
    del match
    session.insert_newline()
    return ModeResult(consumed=True, status="insert")


def insert_tab(session: "EditorSession", match: "ResolutionMatch") -> ModeResult:
    del match
    session.insert_char("\t")
    return ModeResult(consumed=True, status="insert")


def delete_backward(session: "EditorSession", match: "ResolutionMatch") -> ModeResult:
    del match
    session.delete_char()
    return ModeResult(consumed=True, status="delete")


def delete_forward(session: "EditorSession", match: "ResolutionMatch") -> ModeResult:
    del match
    session.delete_forward()
    return ModeResult(consumed=True, status="delete")


__all__ = ["insert_newline", "insert_tab", "delete_backward", "delete_forward"]
