"""Base classes and shared types for session modes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Dict, Optional, Tuple

if TYPE_CHECKING:  # pragma: no cover
    from edit_engine.session import EditorSession


@dataclass(slots=True)
class KeyInput:
    """Abstract key event produced by the host's key decoder.

    Named keys use upper-case names (``ENTER``, ``PAGE_UP``, ``LEFT``...);
    printable keys carry the character in both ``key`` and ``text``;
    control letters are ``KeyInput("s", ("ctrl",))``.
    """

    key: str
    modifiers: Tuple[str, ...] = ()
    text: Optional[str] = None

    @classmethod
    def char(cls, ch: str) -> "KeyInput":
        return cls(key=ch, text=ch)

    @classmethod
    def ctrl(cls, letter: str) -> "KeyInput":
        return cls(key=letter.lower(), modifiers=("ctrl",))

    @property
    def is_printable(self) -> bool:
        if not self.text or "ctrl" in self.modifiers or "alt" in self.modifiers:
            return False
        return self.text.isprintable() or self.text == "\t"


@dataclass(slots=True)
class ModeResult:
    """Result returned from ``Mode.handle_key``."""

    consumed: bool
    switch_to: Optional[str] = None
    status: str = "ok"
    message: Optional[str] = None


class ModeBus:
    """Minimal event bus letting the session notify its host."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in self._subscribers.get(event, []):
            callback(payload)


class Mode:
    """Base class all session modes inherit from."""

    name: str = "mode"

    def __init__(self, session: "EditorSession") -> None:
        self.session = session

    def on_enter(self, previous: Optional[str]) -> None:  # pragma: no cover
        del previous

    def on_exit(self, next_mode: Optional[str]) -> None:  # pragma: no cover
        del next_mode

    def handle_key(self, key: KeyInput) -> ModeResult:  # pragma: no cover
        raise NotImplementedError


__all__ = ["KeyInput", "ModeResult", "ModeBus", "Mode"]
