"""Default mode: keymap-driven commands, printable keys insert text."""

from __future__ import annotations

from edit_engine.keymaps import KeyStroke, ResolutionMatch
from edit_engine.runtime import telemetry

from .base_mode import KeyInput, Mode, ModeResult


def key_to_token(key: KeyInput) -> str:
    return KeyStroke(key.key, key.modifiers).token


class EditMode(Mode):
    name = "edit"

    def handle_key(self, key: KeyInput) -> ModeResult:
        match = self.session.keymaps.resolve(self.name, key_to_token(key))
        if match is not None:
            return self._execute_match(match)

        if key.is_printable and key.text:
            self.session.insert_char(key.text)
            return ModeResult(consumed=True, status="insert")

        return ModeResult(consumed=False, status="miss", message="unhandled")

    def _execute_match(self, match: ResolutionMatch) -> ModeResult:
        with telemetry.span(
            "keymaps::execute",
            component="keymaps",
            metadata={"binding_id": match.binding.id, "action": match.action.id},
        ):
            outcome = match.action(self.session, match)

        if isinstance(outcome, ModeResult):
            return outcome
        return ModeResult(consumed=True)


__all__ = ["EditMode", "key_to_token"]
