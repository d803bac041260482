"""Single-line prompt shown in the message bar (save as, find, open)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, List, Optional

from edit_engine.runtime import telemetry

from .base_mode import KeyInput, Mode, ModeResult
from .prompt_handlers import PromptHandler

if TYPE_CHECKING:  # pragma: no cover
    from edit_engine.session import EditorSession

PromptDone = Callable[["EditorSession", Optional[str]], None]

ERASE_KEYS = frozenset({"BACKSPACE", "DELETE"})


class PromptMode(Mode):
    """Collects typed text and reports every keystroke to its handler.

    Enter commits a non-empty line, Escape cancels. Either way the mode hands
    the outcome to ``on_done`` and returns to edit mode.
    """

    name = "prompt"

    def __init__(self, session: "EditorSession") -> None:
        super().__init__(session)
        self.logger = telemetry.get_logger("edit_engine.modes.prompt")
        self.template = "{}"
        self.handler = PromptHandler()
        self._on_done: Optional[PromptDone] = None
        self._typed: List[str] = []

    @property
    def query(self) -> str:
        return "".join(self._typed)

    def begin(
        self, template: str, handler: PromptHandler, on_done: Optional[PromptDone]
    ) -> None:
        self.template = template
        self.handler = handler
        self._on_done = on_done
        self._typed.clear()
        self._show()

    def on_exit(self, next_mode: str | None) -> None:
        del next_mode
        self._typed.clear()
        self._on_done = None

    def handle_key(self, key: KeyInput) -> ModeResult:
        name = key.key

        if name == "ESC":
            self.handler.on_key(self.session, self.query, name)
            return self._finish(None)

        if name == "ENTER" and self._typed:
            value = self.query
            self.handler.on_key(self.session, value, name)
            return self._finish(value)

        if name in ERASE_KEYS or (name == "h" and "ctrl" in key.modifiers):
            if self._typed:
                self._typed.pop()
        elif key.is_printable and key.text and key.text != "\t":
            self._typed.extend(key.text)

        replacement = self.handler.on_key(self.session, self.query, name)
        if replacement is not None:
            self._typed = list(replacement)
        self._show()
        return ModeResult(consumed=True, status="editing")

    def _show(self) -> None:
        self.session.set_status(self.template.format(self.query))

    def _finish(self, value: Optional[str]) -> ModeResult:
        on_done = self._on_done
        self.session.set_status("")
        if on_done is not None:
            on_done(self.session, value)
        status = "prompt_cancel" if value is None else "prompt_commit"
        return ModeResult(consumed=True, switch_to="edit", status=status, message=value)


__all__ = ["PromptMode", "PromptDone"]
