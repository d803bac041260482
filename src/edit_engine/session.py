"""Editing session: the single owner of document, cursor and viewport."""

from __future__ import annotations

import time
from typing import Callable, Optional

from edit_engine.document import (
    Cursor,
    Document,
    EditorState,
    Operation,
    clamp_cursor,
    load_document,
    save_document,
)
from edit_engine.errors import DocumentIOError
from edit_engine.keymaps import KeymapRegistry
from edit_engine.keymaps.defaults import load_default_keymaps
from edit_engine.modes import (
    EditMode,
    KeyInput,
    ModeBus,
    ModeResult,
    OpenFilePromptHandler,
    PromptHandler,
    PromptMode,
)
from edit_engine.modes.mode_manager import ModeManager
from edit_engine.modes.prompt_mode import PromptDone
from edit_engine.runtime import EditorSettings, telemetry
from edit_engine.search import SearchEngine, SearchMatch
from edit_engine.view import Frame, StatusMessage, Viewport, build_frame

# Results that leave the quit and open confirmation gates armed.
_GATE_STATUSES = {"quit_pending", "open_pending"}


class EditorSession:
    """Everything one editing session owns, passed to every mode and action.

    Edits go through the session so the cursor stays clamped and the last
    operation label follows the document. The painter only ever calls
    ``frame()``.
    """

    def __init__(
        self,
        document: Optional[Document] = None,
        *,
        settings: Optional[EditorSettings] = None,
        keymaps: Optional[KeymapRegistry] = None,
        screen_rows: int = 24,
        screen_cols: int = 80,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.settings = settings or EditorSettings()
        self.document = document or Document()
        self.state = EditorState()
        self.viewport = Viewport()
        self.viewport.resize(screen_rows, screen_cols)
        self.search = SearchEngine()
        self.status = StatusMessage()
        self.bus = ModeBus()
        self.clock = clock
        self.logger = telemetry.get_logger("edit_engine.session")
        if keymaps is None:
            keymaps = KeymapRegistry(logger_name="edit_engine.keymaps")
            load_default_keymaps(keymaps)
        self.keymaps = keymaps
        self.quit_remaining = self.settings.quit_times
        self.open_armed = False
        self.should_quit = False
        self.modes = ModeManager(self)
        self.modes.register_mode(EditMode)
        self.prompt: PromptMode = self.modes.register_mode(PromptMode)  # type: ignore[assignment]
        self.set_status(self.settings.help_message)

    @classmethod
    def open_path(cls, path: str, **kwargs: object) -> "EditorSession":
        """Start a session on ``path``; a missing file becomes a new document."""

        return cls(load_document(path, missing_ok=True), **kwargs)  # type: ignore[arg-type]

    # -- state --------------------------------------------------------------

    @property
    def cursor(self) -> Cursor:
        return self.state.cursor

    @cursor.setter
    def cursor(self, value: Cursor) -> None:
        self.state.cursor = clamp_cursor(self.document, value)

    def set_status(self, text: str) -> None:
        self.status.set(text, self.clock())

    def resize(self, rows: int, cols: int) -> None:
        self.viewport.resize(rows, cols)

    def scroll(self) -> int:
        return self.viewport.scroll(self.document, self.cursor)

    def frame(self, now: Optional[float] = None) -> Frame:
        if now is None:
            now = self.clock()
        return build_frame(
            self.document,
            self.cursor,
            self.viewport,
            operation=self.state.last_operation,
            message=self.status.visible(now, self.settings.status_timeout_s),
        )

    # -- dispatch -----------------------------------------------------------

    def handle_key(self, key: KeyInput) -> ModeResult:
        result = self.modes.handle_key(key)
        if result.status not in _GATE_STATUSES:
            self.quit_remaining = self.settings.quit_times
            self.open_armed = False
        return result

    def start_prompt(
        self,
        template: str,
        handler: Optional[PromptHandler] = None,
        on_done: Optional[PromptDone] = None,
    ) -> ModeResult:
        self.prompt.begin(template, handler or PromptHandler(), on_done)
        return ModeResult(consumed=True, switch_to=PromptMode.name, status="prompt")

    # -- editing ------------------------------------------------------------

    def insert_char(self, ch: str) -> None:
        row, col = self.cursor
        if row == self.document.num_lines:
            self.document.insert_line(row, "")
        for offset, piece in enumerate(ch):
            self.document.insert_char(row, col + offset, piece)
        self.cursor = (row, col + len(ch))
        self.state.last_operation = Operation.INSERT

    def insert_newline(self) -> None:
        row, col = self.cursor
        new_cursor = self.document.split_line(row, col)
        if new_cursor is not None:
            self.cursor = new_cursor
            self.state.last_operation = Operation.INSERT

    def delete_char(self) -> None:
        """Backspace: remove the character left of the cursor or join lines."""

        row, col = self.cursor
        if row == self.document.num_lines or (row == 0 and col == 0):
            return
        if col > 0:
            self.document.delete_char(row, col)
            self.cursor = (row, col - 1)
        else:
            join_point = self.document.join_with_previous(row)
            if join_point is not None:
                self.cursor = join_point
        self.state.last_operation = Operation.DELETE

    def delete_forward(self) -> None:
        self.move_cursor("RIGHT")
        self.delete_char()

    # -- motion -------------------------------------------------------------

    def move_cursor(self, key: str) -> None:
        row, col = self.cursor
        line = self.document.line(row)
        if key == "UP":
            row = max(row - 1, 0)
        elif key == "DOWN":
            row = min(row + 1, self.document.num_lines)
        elif key == "LEFT":
            if col > 0:
                col -= 1
            elif row > 0:
                row -= 1
                previous = self.document.line(row)
                col = previous.size if previous is not None else 0
        elif key == "RIGHT":
            if line is not None and col < line.size:
                col += 1
            elif line is not None:
                row += 1
                col = 0
        elif key == "HOME":
            col = 0
        elif key == "END":
            if line is not None:
                col = line.size
        self.cursor = (row, col)

    def page(self, key: str) -> None:
        """Jump to the screen edge, then move one screen further."""

        self.scroll()
        rows = self.viewport.screen_rows
        if key == "PAGE_UP":
            self.cursor = (self.viewport.row_offset, self.cursor[1])
            direction = "UP"
        else:
            bottom = min(self.viewport.row_offset + rows - 1, self.document.num_lines)
            self.cursor = (bottom, self.cursor[1])
            direction = "DOWN"
        for _ in range(rows):
            self.move_cursor(direction)

    def jump_to_match(self, match: SearchMatch) -> None:
        self.cursor = (match.row, match.col)
        # Past the end so the next scroll puts the match on the top row.
        self.viewport.row_offset = self.document.num_lines

    # -- files --------------------------------------------------------------

    def save(self) -> ModeResult:
        self.state.last_operation = Operation.SAVE
        if not self.document.filename:
            return self.start_prompt(
                "Save as: {} (ESC to cancel)", on_done=_finish_save_as
            )
        self._write(self.document.filename)
        return ModeResult(consumed=True, status="save")

    def save_as(self, path: str) -> bool:
        if not self._write(path):
            return False
        self.document.set_filename(path)
        return True

    def _write(self, path: str) -> bool:
        try:
            written = save_document(self.document, path)
        except DocumentIOError as exc:
            self.logger.error(f"save failed: {exc}")
            self.set_status(f"Can't save! I/O error: {exc.reason}")
            return False
        telemetry.record_event("file.save", data={"path": path, "bytes": written})
        self.bus.emit("file.save", {"path": path, "bytes": written})
        self.set_status(f"{written} bytes written to disk")
        return True

    def open(self, path: str) -> bool:
        """Replace the document with ``path``; on failure nothing changes."""

        try:
            document = load_document(path)
        except DocumentIOError as exc:
            self.logger.error(f"open failed: {exc}")
            self.set_status(f"Can't open {path}: {exc.reason}")
            return False
        self.document = document
        self.state = EditorState()
        self.viewport.restore((0, 0))
        self.search = SearchEngine()
        telemetry.record_event(
            "file.open", data={"path": path, "lines": document.num_lines}
        )
        self.bus.emit("file.open", {"path": path, "lines": document.num_lines})
        self.set_status(f"Opened {path}")
        return True

    def request_open(self) -> ModeResult:
        if self.document.dirty and not self.open_armed:
            self.open_armed = True
            self.set_status("Unsaved changes. Press Ctrl-O again to open anyway.")
            return ModeResult(consumed=True, status="open_pending")
        return self.start_prompt(
            "Open: {} (ESC to cancel, Tab to complete)",
            OpenFilePromptHandler(),
            _finish_open,
        )

    def request_quit(self) -> ModeResult:
        if self.document.dirty and self.quit_remaining > 0:
            self.set_status(
                "WARNING!!! File has unsaved changes. "
                f"Press Ctrl-Q {self.quit_remaining} more times to quit."
            )
            self.quit_remaining -= 1
            return ModeResult(consumed=True, status="quit_pending")
        self.should_quit = True
        self.bus.emit("session.quit", None)
        return ModeResult(consumed=True, status="quit")


def _finish_save_as(session: EditorSession, value: Optional[str]) -> None:
    if value is None:
        session.set_status("Save aborted")
        return
    session.save_as(value)


def _finish_open(session: EditorSession, value: Optional[str]) -> None:
    if value is not None:
        session.open(value)


__all__ = ["EditorSession"]
