"""Cursor motion actions; the bound key name doubles as the direction."""

from __future__ import annotations

from typing import TYPE_CHECKING

from edit_engine.modes.base_mode import ModeResult

if TYPE_CHECKING:  # pragma: no cover
    from edit_engine.keymaps import ResolutionMatch
    from edit_engine.session import EditorSession


def move_cursor(session: "EditorSession", match: "ResolutionMatch") -> ModeResult:
    session.move_cursor(match.binding.stroke.key)
    return ModeResult(consumed=True, status="motion")


def page(session: "EditorSession", match: "ResolutionMatch") -> ModeResult:
    session.page(match.binding.stroke.key)
    return ModeResult(consumed=True, status="motion")


__all__ = ["move_cursor", "page"]
