"""Textual-facing adapter that feeds key events into an EditorSession."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional

from edit_engine.modes import KeyInput, ModeResult
from edit_engine.session import EditorSession
from edit_engine.view import Frame

# Textual key names mapped onto the editor's named keys.
TEXTUAL_KEY_NAMES: Dict[str, str] = {
    "up": "UP",
    "down": "DOWN",
    "left": "LEFT",
    "right": "RIGHT",
    "home": "HOME",
    "end": "END",
    "pageup": "PAGE_UP",
    "pagedown": "PAGE_DOWN",
    "delete": "DELETE",
    "backspace": "BACKSPACE",
    "enter": "ENTER",
    "escape": "ESC",
    "tab": "TAB",
    "ctrl+i": "TAB",
    "ctrl+m": "ENTER",
}

SESSION_EVENTS = ("file.save", "file.open", "session.quit")


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


def normalize_textual_key(key: str, character: Optional[str] = None) -> Optional[KeyInput]:
    """Translate a Textual ``events.Key`` name into a ``KeyInput``.

    Returns ``None`` for keys the editor has no meaning for.
    """

    named = TEXTUAL_KEY_NAMES.get(key)
    if named is not None:
        return KeyInput(key=named, text="\t" if named == "TAB" else None)
    if key.startswith("ctrl+"):
        letter = key[len("ctrl+") :]
        if len(letter) == 1 and letter.isalpha():
            return KeyInput.ctrl(letter)
        return None
    if character and len(character) == 1 and character.isprintable():
        return KeyInput.char(character)
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    paint: Callable[[Frame], None]
    handle_event: Callable[[str, object | None], None] = _noop
    log: Callable[[str], None] = _noop


class TextualEditorAdapter:
    """Bridges an EditorSession and its bus events to a Textual surface."""

    def __init__(self, session: EditorSession, hooks: TextualUIHooks) -> None:
        self.session = session
        self.hooks = hooks
        for event in SESSION_EVENTS:
            session.bus.subscribe(
                event, lambda payload, name=event: self._handle_event(name, payload)
            )
        self.refresh()

    def handle_textual_key(
        self, key: str, character: Optional[str] = None
    ) -> Optional[ModeResult]:
        """Dispatch one Textual key; ``None`` when the key was not recognised."""

        key_input = normalize_textual_key(key, character)
        if key_input is None:
            self.hooks.log(f"ignored key={key!r}")
            return None
        result = self.session.handle_key(key_input)
        self.hooks.log(
            f"key={key_input.key!r} mods={key_input.modifiers!r} "
            f"status={result.status!r} mode={self._mode_name()!r}"
        )
        self.refresh()
        return result

    def resize(self, rows: int, cols: int) -> None:
        self.session.resize(rows, cols)
        self.refresh()

    def refresh(self) -> None:
        self.hooks.paint(self.session.frame())

    @property
    def should_quit(self) -> bool:
        return self.session.should_quit

    def _handle_event(self, name: str, payload: object | None) -> None:
        self.hooks.log(f"event={name} payload={payload!r}")
        self.hooks.handle_event(name, payload)

    def _mode_name(self) -> str:
        mode = self.session.modes.active_mode
        return mode.name if mode else "?"


__all__ = [
    "TextualEditorAdapter",
    "TextualUIHooks",
    "normalize_textual_key",
    "TEXTUAL_KEY_NAMES",
]
